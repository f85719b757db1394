"""
Retry Misplaced Letters strategy.

Score = number of guess letters that were reported MISPLACED before and now
sit at a different position than the one that rule named.

If STONE came back all yellow: NOTES scores 5 (every letter moved), STENO
scores 2 (only E and O moved) and ATONE scores 0.
"""

from __future__ import annotations

from wordle_solver.engine import LetterRequirement
from .base import GuesserStrategy, register


@register
class RetryMisplacedLettersStrategy(GuesserStrategy):
    id = "retry_misplaced_letters"
    name = "Retry Misplaced Letters"
    version = "1.0.0"

    def score_for_guess(self, guess: str) -> int:
        misplaced = {
            (r.letter, r.position)
            for r in self.word_list.letter_rules
            if r.required is LetterRequirement.MISPLACED
        }
        return sum(
            1 for pos, ch in enumerate(guess)
            if any(letter == ch and p != pos for letter, p in misplaced)
        )
