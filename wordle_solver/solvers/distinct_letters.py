"""
Distinct Letters strategy.

Score = number of distinct letters in the guess that no previous guess used.
With no guesses yet BREAD scores 5 and BOOKS 4; after BAKER, BREAD scores 1
(only D is new) and BOOKS 2 (O and S).

Maximizes fresh letters tested per turn; position and feedback are ignored.
"""

from __future__ import annotations

from .base import GuesserStrategy, register


@register
class DistinctLettersStrategy(GuesserStrategy):
    id = "distinct_letters"
    name = "Distinct Unguessed Letters"
    version = "1.0.0"

    def score_for_guess(self, guess: str) -> int:
        guessed = set(self.get_already_guessed_letters())
        return len(set(guess) - guessed)
