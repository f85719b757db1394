"""
Game simulation primitives.

- run_case:  play one puzzle (one hidden answer) with one strategy.
- run_batch: play many puzzles in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

Feedback comes from `score` + `pattern_to_rules`, i.e. the harness stands in
for the game: it is the out-of-band feedback source the solver core expects.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List

from wordle_solver.engine import WordGuessAndResult, WordList, pattern_to_rules, score
from wordle_solver.errors import NoMoreGuessesError
from wordle_solver.solvers import create_strategy

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        strategy_id: str,
        answer: str,
        *,
        words: Iterable[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Play one game until the strategy wins, runs out of candidates, or the
    turn budget is exhausted.

    Args:
        strategy_id: registered strategy id (see get_strategy_ids())
        answer:      the hidden word for this case
        words:       the dictionary; a fresh WordList is built from it
        N:           word length
        max_turns:   must be 6 (Wordle rule; enforced)

    Returns:
        dict with keys:
            strategy_id, answer, success (bool), guesses (int), time_ms (float),
            turns (list of {turn, guess, score, pattern, candidates}), where
            `candidates` is the list size the guess was chosen from
    """
    _assert_wordle_turns(max_turns)
    answer = answer.strip().upper()

    word_list = WordList([w for w in words if len(w.strip()) == N], word_length=N)
    strategy = create_strategy(strategy_id, word_list)

    turns: List[Dict] = []
    success = False
    total_ms = 0.0

    for turn in range(1, WORDLE_MAX_TURNS + 1):
        candidates = len(word_list)
        t0 = time.perf_counter_ns()
        try:
            best = strategy.guess_next_word_and_score()
        except NoMoreGuessesError:
            # Answer missing from the dictionary; nothing left to try.
            break
        finally:
            total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        guess = best.word
        patt = score(guess, answer)
        turns.append({
            "turn": turn, "guess": guess, "score": best.score,
            "pattern": patt, "candidates": candidates,
        })

        if patt == "G" * N:
            success = True
            break

        strategy.with_previous_guess(WordGuessAndResult(guess, pattern_to_rules(guess, patt)))

    return {
        "strategy_id": strategy_id,
        "answer": answer,
        "success": success,
        "guesses": len(turns),
        "time_ms": total_ms,
        "turns": turns,
    }


def run_batch(
        strategy_id: str,
        answers: List[str],
        *,
        words: List[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is provided, only the first K
    answers (after filtering to length N) are used to speed up quick experiments.
    """
    _assert_wordle_turns(max_turns)

    pool = [w for w in answers if len(w.strip()) == N]
    if sample is not None:
        pool = pool[:sample]

    return [
        run_case(strategy_id, ans, words=words, N=N, max_turns=max_turns)
        for ans in pool
    ]
