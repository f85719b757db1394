"""
Lightweight guess validation.

Answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it is a string
  - it is alphabetic A–Z only
  - it has exact length N
  - it exists in the provided `allowed` list/set

The interactive assistant uses this to reject typos before they are turned
into feedback rules.
"""

from typing import Iterable, Set


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Notes:
      - `allowed` can be a large list; we build a local set here. If you're
        calling this in a tight loop, precompute the set once at a higher level.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().upper()

    if len(w) != N or not (w.isascii() and w.isalpha()):
        return False

    allowed_set: Set[str] = {a.strip().upper() for a in allowed}
    return w in allowed_set
