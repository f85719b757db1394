"""
Dictionary generators for tests and experiments.

    generate_alphabet_of_length(3)      -> "ABC"
    generate_alphabet_words("AB", 2)    -> ["AA", "BA", "AB", "BB"]
"""

from __future__ import annotations
from typing import List

from wordle_solver.engine import ALPHABET, WORD_LENGTH
from wordle_solver.errors import WordleSolverHelperError


def generate_alphabet_of_length(num_letters: int) -> str:
    """First `num_letters` letters of A..Z, in order."""
    if num_letters < 0 or num_letters >= len(ALPHABET):
        raise WordleSolverHelperError(
            f"generate_alphabet_of_length: num_letters out of range: {num_letters}")
    return ALPHABET[:num_letters]


def generate_alphabet_words(alphabet: str, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Every word of `word_length` letters drawn from `alphabet` (with repeats).
    len(result) == len(alphabet) ** word_length, so keep both small.
    """
    if word_length <= 0:
        raise WordleSolverHelperError(
            f"generate_alphabet_words: invalid word_length: {word_length}")
    letters = list(alphabet)
    if word_length == 1:
        return letters
    return [ch + w for w in generate_alphabet_words(alphabet, word_length - 1) for ch in letters]
