"""
Download a newline-separated word list and write a clean dictionary file.

What it does:
- Downloads the text at --url (one word per line).
- Keeps only A–Z words of length --N, uppercased.
- De-duplicates while preserving source order (or sorts with --sort).

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt --out data/words_5.txt
"""

import argparse

from wordle_solver.datasets import fetch_words, write_lines


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for the solver")
    ap.add_argument("--url", required=True, help="plain-text word list, one word per line")
    ap.add_argument("--N", type=int, default=5, help="keep only words of this length")
    ap.add_argument("--out", default="data/words_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = [w for w in fetch_words(args.url) if len(w) == args.N and w.isascii() and w.isalpha()]
    words = unique_preserve_order(words)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
