"""
Export of benchmark runs.

Results are written long-form: one CSV row per TURN, so every guess keeps the
score its strategy gave it and how many candidates it was picked from. That
makes it easy to plot, per strategy, how fast the candidate list collapses.

A run also gets one JSON manifest (config, dictionary report, summaries).
"""

from __future__ import annotations

import csv
import json
import time
from pathlib import Path
from typing import Dict, Iterator, List

TURN_FIELDS = ["strategy", "answer", "turn", "guess", "score", "pattern", "candidates", "solved"]


def run_id() -> str:
    """UTC timestamp used to name a run's files, e.g. 20250820T024121Z."""
    return time.strftime("%Y%m%dT%H%M%SZ", time.gmtime())


def turn_rows(results: List[Dict]) -> Iterator[Dict]:
    """
    Flatten run_case results into one dict per turn (see TURN_FIELDS).
    `solved` is true only on the winning turn of a won game.
    """
    for r in results:
        turns = r.get("turns", [])
        for t in turns:
            yield {
                "strategy": r.get("strategy_id", "?"),
                "answer": r["answer"],
                "turn": t["turn"],
                "guess": t["guess"],
                "score": round(float(t["score"]), 4),
                "pattern": t["pattern"],
                "candidates": t["candidates"],
                "solved": bool(r["success"]) and t is turns[-1],
            }


def write_turns_csv(results: List[Dict], path: Path | str) -> str:
    """Write `turn_rows(results)` to `path`; returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=TURN_FIELDS)
        w.writeheader()
        w.writerows(turn_rows(results))
    return str(p)


def write_manifest(path: Path | str, **sections) -> str:
    """
    Dump the keyword sections (e.g. config=..., wordlist=..., summaries=...)
    as one JSON object, stamped with the run time.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    manifest = {"written_at": run_id(), **sections}
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)
