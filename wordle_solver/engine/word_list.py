"""
Candidate set: the live, narrowing dictionary of still-possible words.

A WordList owns
  - words            : sorted, trimmed, uppercased candidates still in play
  - possible_letters : one set per position of letters still allowed there
  - letter_rules     : every rule applied so far, in the order given
  - alphabet         : sorted distinct letters across the surviving words

Feedback is applied with `apply_rules`, which narrows `possible_letters`
first and then drops every word that no longer matches. `with_rules` does the
same on a deep copy so a hypothetical guess can be measured without touching
the real search state.

Invariants after every `apply_rules`:
  - `words` is exactly the subset of the starting dictionary matching every
    per-position set AND containing every MISPLACED letter somewhere.
  - `alphabet` is exactly the union of letters in `words`.
"""

from __future__ import annotations

import copy
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Set

from wordle_solver.datasets.io import fetch_words, load_words
from wordle_solver.errors import InvalidPositionError, MissingPositionError, NoMoreGuessesError
from .alphabet import WORD_LENGTH
from .rules import LetterRequirement, LetterRule, sort_rules


class WordList:

    def __init__(self, words: Iterable[str] = (), word_length: int | None = None):
        """
        Args:
          words       : raw dictionary; each entry is trimmed and uppercased,
                        then the whole list is sorted.
          word_length : number of tracked positions. Defaults to the longest
                        word (or WORD_LENGTH when `words` is empty).
        """
        self._words: List[str] = sorted(w.strip().upper() for w in words)
        if word_length is None:
            word_length = max((len(w) for w in self._words), default=WORD_LENGTH)
        self.word_length: int = int(word_length)
        if self.word_length <= 0:
            raise InvalidPositionError(f"word_length must be positive: {word_length}")

        # Only letters actually observed at a position start out possible there.
        self._possible_letters: List[Set[str]] = [set() for _ in range(self.word_length)]
        for w in self._words:
            for pos, ch in enumerate(w[: self.word_length]):
                self._possible_letters[pos].add(ch)

        self._letter_rules: List[LetterRule] = []
        self._alphabet: List[str] = sorted(set("".join(self._words)))

        # Bumped on every mutation so strategies can cache derived statistics.
        self.revision = 0

    # ---- read-only views ----

    @property
    def words(self) -> List[str]:
        return self._words

    @property
    def possible_letters(self) -> List[Set[str]]:
        return self._possible_letters

    @property
    def letter_rules(self) -> List[LetterRule]:
        return self._letter_rules

    @property
    def alphabet(self) -> List[str]:
        return self._alphabet

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordList(words={len(self._words)}, rules={len(self._letter_rules)})"

    # ---- factories ----

    @classmethod
    def from_file(cls, path: Path | str, word_length: int | None = None) -> "WordList":
        """
        Build a WordList from a UTF-8 text file, one word per line.
        If `word_length` is given, only words of exactly that length are kept.
        Raises FileNotFoundError if the path doesn't exist.
        """
        return cls(load_words(path, N=word_length), word_length=word_length)

    @classmethod
    def from_url(cls, url: str, word_length: int | None = None) -> "WordList":
        """Same as `from_file`, but the text is downloaded from `url`."""
        words = fetch_words(url)
        if word_length is not None:
            words = [w for w in words if len(w) == word_length]
        return cls(words, word_length=word_length)

    def copy(self) -> "WordList":
        """Fully independent deep copy; no mutable state is shared."""
        return copy.deepcopy(self)

    def with_rules(self, rules: Iterable[LetterRule]) -> "WordList":
        """Return a copy with `rules` applied, leaving this list untouched."""
        new_list = self.copy()
        new_list.apply_rules(rules)
        return new_list

    # ---- matching and narrowing ----

    def _misplaced_letters(self) -> Set[str]:
        return {r.letter for r in self._letter_rules if r.required is LetterRequirement.MISPLACED}

    def matches(self, word: str) -> bool:
        """
        True iff every letter of `word` is still possible at its position and
        `word` contains every letter recorded as MISPLACED.
        """
        return self._matches(word, self._misplaced_letters())

    def _matches(self, word: str, required_letters: Set[str]) -> bool:
        if len(word) < self.word_length:
            return False
        for letters, ch in zip(self._possible_letters, word):
            if ch not in letters:
                return False
        return all(letter in word for letter in required_letters)

    def _check_rules(self, rules: List[LetterRule]) -> None:
        # Validate the whole batch before mutating anything.
        for rule in rules:
            if rule.required is LetterRequirement.IMPOSSIBLE:
                continue
            if rule.position is None:
                raise MissingPositionError(repr(rule))
            if not 0 <= rule.position < self.word_length:
                raise InvalidPositionError(f"rule position out of range 0..{self.word_length - 1}: {rule!r}")

    def apply_rules(self, rules: Iterable[LetterRule]) -> None:
        """
        Narrow this list in place with a batch of feedback rules.

        Steps:
          1) validate every rule (MissingPositionError before any mutation)
          2) narrow possible_letters, MANDATORY rules last
          3) record the rules in their given order
          4) drop words that no longer match; rebuild the alphabet
        """
        rules = list(rules)
        self._check_rules(rules)

        for rule in sort_rules(rules):
            if rule.required is LetterRequirement.IMPOSSIBLE:
                for letters in self._possible_letters:
                    letters.discard(rule.letter)
            elif rule.required is LetterRequirement.MANDATORY:
                self._possible_letters[rule.position] = {rule.letter}
            else:
                self._possible_letters[rule.position].discard(rule.letter)

        self._letter_rules.extend(rules)

        required_letters = self._misplaced_letters()
        self._words = [w for w in self._words if self._matches(w, required_letters)]
        self._alphabet = sorted(set("".join(self._words)))
        self.revision += 1

    def count_letters_by_position(self) -> List[Counter]:
        """
        Per-position letter histograms over the surviving words, up to the
        longest word. Shorter words simply contribute nothing past their end.
        """
        if not self._words:
            raise NoMoreGuessesError("Empty word list.")
        length = max(len(w) for w in self._words)
        counts = [Counter() for _ in range(length)]
        for w in self._words:
            for pos, ch in enumerate(w):
                counts[pos][ch] += 1
        return counts
