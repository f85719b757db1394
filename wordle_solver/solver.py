"""
WordleSolver: runs every registered strategy over one shared WordList.

All strategies hold the same WordList by reference, so feedback is global:
recording a guess narrows the one possibility space every heuristic scores
against. The solver never picks among the strategies' recommendations; it
returns all of them and the caller decides.

Lifecycle (driven by the caller):
    unconstrained -> narrowed by feedback ... -> solved (1 word) | exhausted (0 words)
Exhaustion surfaces as NoMoreGuessesError from `guess_next_word`.
"""

from __future__ import annotations
from typing import Dict

from wordle_solver.engine import WordGuessAndResult, WordGuessAndScore, WordList
from wordle_solver.solvers import GuesserStrategy, create_strategy, get_strategy_ids


class WordleSolver:

    def __init__(self, word_list: WordList):
        self.word_list = word_list
        self._strategies: Dict[str, GuesserStrategy] = {
            sid: create_strategy(sid, word_list) for sid in get_strategy_ids()
        }

    @property
    def guesser_strategies(self) -> Dict[str, GuesserStrategy]:
        return self._strategies

    def with_previous_guess(self, candidate: WordGuessAndResult) -> "WordleSolver":
        """
        Forward the guess to every strategy. Re-applying the same rules to the
        shared list is idempotent, so the narrowing happens once in effect.
        """
        for strategy in self._strategies.values():
            strategy.with_previous_guess(candidate)
        return self

    def guess_next_word(self) -> Dict[str, WordGuessAndScore]:
        """Each strategy's top recommendation, keyed by strategy id."""
        return {sid: s.guess_next_word_and_score() for sid, s in self._strategies.items()}

    def is_solved(self) -> bool:
        return any(s.is_solved() for s in self._strategies.values())

    def has_solution(self) -> bool:
        return all(s.has_solution() for s in self._strategies.values())
