from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

import requests

FETCH_TIMEOUT_S = 30


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").split("\n")]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def normalize_words(lines: Iterable[str], N: int | None = None) -> List[str]:
    """
    Trim + uppercase, drop blanks, and keep only length-N words when N is given.
    Input order is preserved.
    """
    words = [ln.strip().upper() for ln in lines if ln.strip()]
    if N is not None:
        words = [w for w in words if len(w) == N]
    return words


def load_words(p: Path | str, N: int | None = None) -> List[str]:
    """Read a newline-separated word list from disk (see `normalize_words`)."""
    return normalize_words(read_lines(p), N)


def fetch_words(url: str, timeout: float = FETCH_TIMEOUT_S) -> List[str]:
    """
    Download a newline-separated word list over HTTP.
    HTTP errors propagate as requests.HTTPError.
    """
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return normalize_words(r.text.split("\n"))
