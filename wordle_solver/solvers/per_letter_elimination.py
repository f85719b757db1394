"""
Per-Letter Elimination strategy.

Score = how many (position, letter) possibilities a guess could remove.

We don't know the guess's real feedback in advance, so every letter of the
guess is treated as MISPLACED at its own position (a placeholder outcome that
only removes that letter from that one slot). The guess is applied to a copy
of the word list and the drop in total possible letters is the score.

Example: after GUESS came back all gray, GUEST scores at most 1 (only T@4
can still be removed) while five fresh letters can score 5.

Any word that still matches the list scores exactly N, since each of its
letters is by definition still possible at its own position. The spread only
shows up for words outside the candidate set.
"""

from __future__ import annotations
from typing import List

from wordle_solver.engine import LetterRequirement, LetterRule, WordList
from .base import GuesserStrategy, register


def total_possible_letters(word_list: WordList) -> int:
    """Sum of the per-position possible-letter set sizes."""
    return sum(len(letters) for letters in word_list.possible_letters)


def misplaced_rules_for(guess: str) -> List[LetterRule]:
    """Every letter of `guess` as MISPLACED at its position."""
    return [LetterRule(ch, LetterRequirement.MISPLACED, pos) for pos, ch in enumerate(guess)]


@register
class PerLetterEliminationStrategy(GuesserStrategy):
    id = "per_letter_eliminations"
    name = "Per-Letter Eliminations"
    version = "1.0.0"

    def score_for_guess(self, guess: str) -> int:
        before = total_possible_letters(self.word_list)
        after = total_possible_letters(self.word_list.with_rules(misplaced_rules_for(guess)))
        return before - after
