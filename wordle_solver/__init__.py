from .errors import (
    InvalidPositionError,
    MissingPositionError,
    NoMoreGuessesError,
    WordleSolverError,
    WordleSolverHelperError,
)
from .engine import (
    LetterRequirement,
    LetterRule,
    WordGuessAndResult,
    WordGuessAndScore,
    WordList,
)
from .solver import WordleSolver

__all__ = [
    "WordleSolverError", "InvalidPositionError", "MissingPositionError", "NoMoreGuessesError",
    "WordleSolverHelperError",
    "LetterRequirement", "LetterRule", "WordGuessAndResult", "WordGuessAndScore", "WordList",
    "WordleSolver",
]
