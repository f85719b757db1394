"""
Wordle-style feedback for a (guess, answer) pair, and its translation into
letter rules.

Pattern conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

`score` is the canonical two-pass algorithm (duplicate-safe):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.

`pattern_to_rules` turns such a pattern into the LetterRule batch a WordList
consumes. This is how the harness and the interactive assistant obtain
feedback for a guess.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Literal

from .rules import LetterRequirement, LetterRule

# Type alias for clarity; each pattern character is one of 'G', 'Y', '-'
PatternChar = Literal["G", "Y", "-"]
PATTERN_CHARS = frozenset("GY-")


def score(guess: str, answer: str) -> str:
    """
    Compute Wordle feedback pattern for `guess` against `answer`.

    Returns:
      - string of length N composed only of 'G', 'Y', '-'

    Examples:
      score("BELLE", "LEVEL") -> "-GYYY"
      score("LEMON", "LEVEL") -> "GG---"
    """
    # Normalize; comparisons are case-insensitive, canonical form is uppercase
    guess = guess.strip().upper()
    answer = answer.strip().upper()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer must be the same length: {guess!r} vs {answer!r}")

    n = len(guess)
    pattern = ["-"] * n

    # Pass 1: greens, plus leftover counts of the answer's non-green letters.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the true multiplicity in the answer.
    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def pattern_to_rules(guess: str, pattern: str) -> List[LetterRule]:
    """
    Translate a feedback pattern into letter rules.

      'G' -> MANDATORY at that position
      'Y' -> MISPLACED at that position
      '-' -> IMPOSSIBLE, unless the same letter is green/yellow elsewhere in
             the guess; then it is only known absent HERE, so MISPLACED.

    Example:
      pattern_to_rules("SPEED", "--Y-Y")
        -> S impossible, P impossible, E misplaced@2, E misplaced@3, D misplaced@4
    """
    guess = guess.strip().upper()
    pattern = pattern.strip().upper()
    if len(guess) != len(pattern):
        raise ValueError(f"pattern {pattern!r} does not fit guess {guess!r}")
    if not set(pattern) <= PATTERN_CHARS:
        raise ValueError(f"pattern may only contain 'G', 'Y', '-': {pattern!r}")

    present = {ch for ch, p in zip(guess, pattern) if p != "-"}

    rules: List[LetterRule] = []
    for pos, (ch, p) in enumerate(zip(guess, pattern)):
        if p == "G":
            rules.append(LetterRule(ch, LetterRequirement.MANDATORY, pos))
        elif p == "Y" or ch in present:
            rules.append(LetterRule(ch, LetterRequirement.MISPLACED, pos))
        else:
            rules.append(LetterRule(ch, LetterRequirement.IMPOSSIBLE))
    return rules
