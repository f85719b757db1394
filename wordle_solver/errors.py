"""
Error taxonomy for the solver.

Every error raised by the library derives from WordleSolverError so callers
can catch the whole family at once. Both runtime errors are deterministic
consequences of caller-supplied data (malformed rules, an exhausted search
space); nothing here is retried internally.
"""


class WordleSolverError(Exception):
    """A generic solver error not covered by a more specific type."""


class MissingPositionError(WordleSolverError):
    """A Mandatory or Misplaced rule was applied without a `position`."""


class NoMoreGuessesError(WordleSolverError):
    """The candidate word list is empty; there is nothing left to guess."""


class WordleSolverHelperError(WordleSolverError):
    """Bad arguments to a dictionary-generation helper."""


class InvalidPositionError(WordleSolverError, ValueError):
    """A rule position or word length outside the tracked word positions."""
