# apps/cli/run.py
"""
CLI entry point for benchmarking guessing strategies.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads the words and picks the answers to play (all, or a seeded sample).
  3) Plays every answer with each requested strategy, with a live progress
     indicator, and writes:
       - CSV:  one row per turn (guess, score, pattern, candidates left), per strategy
       - JSON: manifest with config, dictionary report and summaries

Usage:
    python -m apps.cli.run --words data/words_5.txt --strategy all --sample 200
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from wordle_solver.datasets import load_words, pretty_summary, validate_wordlist
from wordle_solver.harness import run_case, summarize, write_manifest, write_turns_csv
from wordle_solver.harness.io import run_id as make_run_id
from wordle_solver.harness.stats import pretty_summary as pretty_stats
from wordle_solver.solvers import get_strategy_ids


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_strategy(strategy_id: str, cases: List[str], *, words: List[str], N: int,
                      progress: str) -> List[Dict]:
    total = len(cases)
    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc=strategy_id, unit="game") if progress == "bar" else cases

    for idx, ans in enumerate(iterator, 1):
        results.append(run_case(strategy_id, ans, words=words, N=N))

        if progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r{strategy_id} [{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if progress == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    return results


def main():
    """
    Parse CLI args, validate the dictionary, run each strategy, and write outputs.
    """
    strategy_choices = ", ".join(get_strategy_ids())

    ap = argparse.ArgumentParser(description="wordle-solver: benchmark guessing strategies")
    ap.add_argument("--strategy", default="all",
                    help=f"strategy id or 'all' (one of: {strategy_choices})")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--words", default="data/words_5.txt",
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--answers",
                    help="optional answers list to play (defaults to the dictionary itself)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    if args.strategy == "all":
        strategy_ids = get_strategy_ids()
    elif args.strategy in get_strategy_ids():
        strategy_ids = [args.strategy]
    else:
        ap.error(f"unknown strategy {args.strategy!r}; choose from: {strategy_choices}, all")

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))

    # 2) Load words (uppercased, length N) and the answers to play
    words = load_words(args.words, N=args.N)
    answers = load_words(args.answers, N=args.N) if args.answers else list(words)

    # 3) Choose cases (deterministic sample by seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        random.Random(args.seed).shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = answers

    progress = _progress_mode(args.progress)
    run_id = make_run_id()
    outdir = Path(args.outdir)

    # 4) Play and write per-strategy CSVs
    summaries: Dict[str, Dict] = {}
    for sid in strategy_ids:
        results = _run_one_strategy(sid, cases, words=words, N=args.N, progress=progress)
        summaries[sid] = summarize(results)
        print(pretty_stats(sid, summaries[sid]))
        csv_path = write_turns_csv(results, outdir / sid / f"turns_{run_id}.csv")
        print(f"Wrote: {csv_path}")

    # 5) One manifest for the whole run
    manifest_path = write_manifest(
        outdir / f"run_{run_id}_manifest.json",
        config=vars(args), wordlist=rep, num_cases=len(cases), summaries=summaries,
    )
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
