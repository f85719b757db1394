from .core import run_case, run_batch, WORDLE_MAX_TURNS
from .io import write_manifest, write_turns_csv
from .stats import summarize

__all__ = ["run_case", "run_batch", "WORDLE_MAX_TURNS", "write_turns_csv", "write_manifest", "summarize"]
