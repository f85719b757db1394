"""
Letter rules: the feedback vocabulary the candidate set understands.

A rule pairs a letter with one of three requirements:
  - MANDATORY  : right letter, right position   (green)
  - MISPLACED  : right letter, wrong position   (yellow)
  - IMPOSSIBLE : letter is not in the word      (gray)

MANDATORY and MISPLACED rules need a `position`; IMPOSSIBLE applies to the
whole word and carries none.

When a batch of rules is applied, MANDATORY rules must run after the others:
a letter that was MISPLACED (or IMPOSSIBLE) somewhere has to be re-admitted
at the position where it is finally confirmed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Iterable, List, Optional


class LetterRequirement(str, Enum):
    MANDATORY = "Mandatory"
    MISPLACED = "Misplaced"
    IMPOSSIBLE = "Impossible"


@dataclass(frozen=True)
class LetterRule:
    letter: str
    required: LetterRequirement
    position: Optional[int] = None


def does_letter_match_rule(letter: str, rule: LetterRule) -> bool:
    """
    Check a single letter against a single rule.

    Only MANDATORY constrains a one-letter comparison; IMPOSSIBLE exclusion is
    handled on the per-position letter sets, so it never fails here.
    """
    if rule.required is LetterRequirement.MANDATORY:
        return letter == rule.letter
    return True


def rule_comparator(a: LetterRule, b: LetterRule) -> int:
    """+1 if only `a` is MANDATORY, -1 if only `b` is, else 0."""
    a_mandatory = a.required is LetterRequirement.MANDATORY
    b_mandatory = b.required is LetterRequirement.MANDATORY
    if a_mandatory:
        return 0 if b_mandatory else 1
    return -1 if b_mandatory else 0


def sort_rules(rules: Iterable[LetterRule]) -> List[LetterRule]:
    """Stable sort with MANDATORY rules last; the input is left untouched."""
    return sorted(rules, key=cmp_to_key(rule_comparator))
