# apps/cli/assist.py
"""
Interactive solving assistant.

Each round prints every strategy's recommended next guess. You play a word
in the real game and type back what it showed:

    CRANE -GY--

(G = green, Y = yellow, - = gray). The candidate list narrows and new
recommendations follow, until one word is left or nothing matches.

Usage:
    python -m apps.cli.assist --words data/words_5.txt
    python -m apps.cli.assist --url https://example.org/words.txt
"""

from __future__ import annotations

import argparse
import sys

from wordle_solver import NoMoreGuessesError, WordGuessAndResult, WordList, WordleSolver
from wordle_solver.engine import pattern_to_rules, validate_guess

SHOW_CANDIDATES = 10


def _load(args) -> WordList:
    if args.url:
        return WordList.from_url(args.url, word_length=args.N)
    return WordList.from_file(args.words, word_length=args.N)


def main() -> int:
    ap = argparse.ArgumentParser(description="wordle-solver: interactive assistant")
    ap.add_argument("--N", type=int, default=5, help="word length")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--words", default="data/words_5.txt", help="dictionary file (one word per line)")
    src.add_argument("--url", help="download the dictionary from this URL instead")
    args = ap.parse_args()

    word_list = _load(args)
    allowed = set(word_list.words)
    solver = WordleSolver(word_list)
    print(f"Loaded {len(allowed)} words of length {args.N}.")

    while True:
        try:
            recs = solver.guess_next_word()
        except NoMoreGuessesError:
            print("No candidates left: the feedback so far is contradictory.")
            return 1

        if solver.is_solved():
            print(f"Solved: {word_list.words[0]}")
            return 0

        shown = ", ".join(word_list.words[:SHOW_CANDIDATES])
        more = "" if len(word_list) <= SHOW_CANDIDATES else ", ..."
        print(f"\n{len(word_list)} candidates: {shown}{more}")
        for sid, rec in recs.items():
            print(f"  {sid:<26} {rec.word}  (score {rec.score:.3f})")

        try:
            line = input("guess pattern> ").strip()
        except EOFError:
            print()
            return 0
        if not line or line.lower() in ("q", "quit", "exit"):
            return 0

        parts = line.split()
        if len(parts) != 2:
            print("Expected: GUESS PATTERN, e.g. CRANE -GY--")
            continue
        guess, patt = parts[0].upper(), parts[1].upper()

        if not validate_guess(guess, allowed, args.N):
            print(f"{guess!r} is not a {args.N}-letter word from the dictionary.")
            continue
        try:
            rules = pattern_to_rules(guess, patt)
        except ValueError as e:
            print(e)
            continue

        if patt == "G" * args.N:
            print(f"Solved: {guess}")
            return 0

        solver.with_previous_guess(WordGuessAndResult(guess, rules))


if __name__ == "__main__":
    sys.exit(main())
