"""
Batch summaries: win rate and guess-count distribution for one strategy.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    """
    Reduce per-game results (from run_case) to a JSON-friendly summary.

    Guess statistics only cover won games; a lost game has no meaningful count.
    """
    n = len(results)
    won = np.array([r["guesses"] for r in results if r["success"]], dtype=float)
    times = np.array([r["time_ms"] for r in results], dtype=float)

    summary = {
        "games": n,
        "wins": int(won.size),
        "win_rate": (won.size / n) if n else 0.0,
        "mean_guesses": float(won.mean()) if won.size else None,
        "median_guesses": float(np.median(won)) if won.size else None,
        "p90_guesses": float(np.percentile(won, 90)) if won.size else None,
        "mean_time_ms": float(times.mean()) if times.size else None,
        "histogram": {str(k): v for k, v in sorted(Counter(int(g) for g in won).items())},
    }
    return summary


def pretty_summary(strategy_id: str, summary: Dict) -> str:
    """
    One-liner for console output, e.g.
        letter_frequency | games=100 wins=97 (97.0%) | mean=3.912 median=4.0 p90=5.0
    """
    def fmt(v, spec=".3f"):
        return "n/a" if v is None else format(v, spec)

    return (
        f"{strategy_id} | games={summary['games']} wins={summary['wins']} "
        f"({100.0 * summary['win_rate']:.1f}%) | mean={fmt(summary['mean_guesses'])} "
        f"median={fmt(summary['median_guesses'], '.1f')} p90={fmt(summary['p90_guesses'], '.1f')}"
    )
