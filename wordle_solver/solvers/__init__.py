from __future__ import annotations
from typing import List

from wordle_solver.engine import WordList
from .base import GuesserStrategy, REGISTRY, register

from .distinct_letters import DistinctLettersStrategy
from .letter_freq import LetterFrequencyStrategy
from .per_letter_elimination import PerLetterEliminationStrategy
from .retry_misplaced import RetryMisplacedLettersStrategy


def create_strategy(strategy_id: str, word_list: WordList) -> GuesserStrategy:
    """
    Factory: instantiate a registered strategy by id over `word_list`.
    """
    try:
        cls = REGISTRY[strategy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown strategy id: {strategy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(word_list)


def get_strategy_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "GuesserStrategy", "REGISTRY", "register", "create_strategy", "get_strategy_ids",
    "DistinctLettersStrategy", "LetterFrequencyStrategy",
    "PerLetterEliminationStrategy", "RetryMisplacedLettersStrategy",
]
