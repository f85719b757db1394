from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .rules import LetterRule


@dataclass
class WordGuessAndResult:
    """A submitted guess and the feedback rules it produced."""
    word: str
    result: List[LetterRule] = field(default_factory=list)


@dataclass
class WordGuessAndScore:
    """A candidate guess and the score one strategy gave it."""
    word: str
    score: float
