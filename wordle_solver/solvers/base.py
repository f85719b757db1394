from __future__ import annotations
from typing import Dict, List, Type

from wordle_solver.engine import WordGuessAndResult, WordGuessAndScore, WordList
from wordle_solver.errors import NoMoreGuessesError

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["GuesserStrategy"]] = {}


def register(cls: Type["GuesserStrategy"]) -> Type["GuesserStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that strategies inherit ----
class GuesserStrategy:
    """
    One scoring heuristic over a (possibly shared) WordList.

    The word list is held by reference: feedback recorded through any strategy
    narrows it for every other strategy holding the same list. Subclasses only
    implement `score_for_guess`; higher means a more desirable guess.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, word_list: WordList):
        self.word_list = word_list
        self.previous_guesses: List[WordGuessAndResult] = []

    def score_for_guess(self, guess: str) -> float:
        raise NotImplementedError("Override in subclass")

    def with_previous_guess(self, candidate: WordGuessAndResult) -> "GuesserStrategy":
        """Apply the guess's feedback to the word list and remember the guess."""
        self.word_list.apply_rules(candidate.result)
        self.previous_guesses.append(candidate)
        return self

    def guess_next_word_and_score(self) -> WordGuessAndScore:
        """
        Score every remaining word and return the best one.
        Ties go to the first maximum, i.e. alphabetically first.
        """
        words = self.word_list.words
        if not words:
            raise NoMoreGuessesError()

        best_word = None
        best_score = None
        for w in words:
            s = self.score_for_guess(w)
            if best_score is None or s > best_score:
                best_word, best_score = w, s
        return WordGuessAndScore(best_word, best_score)

    def get_already_guessed_letters(self) -> List[str]:
        """Unique letters across all previous guesses, first occurrence first."""
        return list(dict.fromkeys(ch for g in self.previous_guesses for ch in g.word))

    def has_solution(self) -> bool:
        return len(self.word_list.words) > 0

    def is_solved(self) -> bool:
        return len(self.word_list.words) == 1
