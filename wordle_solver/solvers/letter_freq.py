"""
Positional Letter Frequency strategy.

Idea:
  For each position p, take how many surviving words have guess[p] at p and
  divide by how many letters are still possible at p. Sum over positions.

  Common letters score high; positions that are already pinned down (few
  possible letters) weigh more, since every survivor agrees there anyway.

Per-position counts are built once per word-list revision, then reused for
every guess scored against that revision.
"""

from __future__ import annotations
from collections import Counter
from typing import List, Tuple

from .base import GuesserStrategy, register


@register
class LetterFrequencyStrategy(GuesserStrategy):
    id = "letter_frequency"
    name = "Positional Letter Frequency"
    version = "1.0.0"

    def __init__(self, word_list):
        super().__init__(word_list)
        self._counts_cache: Tuple[int, List[Counter]] | None = None

    def _pos_counts(self) -> List[Counter]:
        rev = self.word_list.revision
        if self._counts_cache is None or self._counts_cache[0] != rev:
            self._counts_cache = (rev, self.word_list.count_letters_by_position())
        return self._counts_cache[1]

    def score_for_guess(self, guess: str) -> float:
        if not self.word_list.words:
            return 0.0
        pos_counts = self._pos_counts()
        s = 0.0
        for ch, letters, counts in zip(guess, self.word_list.possible_letters, pos_counts):
            if letters:
                s += counts[ch] / len(letters)
        return s
