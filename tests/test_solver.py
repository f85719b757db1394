import pytest
from wordle_solver import NoMoreGuessesError, WordGuessAndResult, WordGuessAndScore, WordList, WordleSolver
from wordle_solver.engine import LetterRequirement, LetterRule, pattern_to_rules, score
from wordle_solver.solvers import (
    DistinctLettersStrategy, LetterFrequencyStrategy,
    PerLetterEliminationStrategy, RetryMisplacedLettersStrategy,
)

WORDS = ["APPLE", "APPLY", "BLOOD", "BREAD", "BREED", "BROOD", "CLICK", "CLOUD", "CROWD", "CRUDE"]


def test_builds_one_of_each_strategy_on_shared_list():
    wl = WordList(["TEST"])
    solver = WordleSolver(wl)
    expected = {
        "distinct_letters": DistinctLettersStrategy,
        "letter_frequency": LetterFrequencyStrategy,
        "per_letter_eliminations": PerLetterEliminationStrategy,
        "retry_misplaced_letters": RetryMisplacedLettersStrategy,
    }
    assert set(solver.guesser_strategies) == set(expected)
    for sid, cls in expected.items():
        strategy = solver.guesser_strategies[sid]
        assert isinstance(strategy, cls)
        assert strategy.word_list is wl


def test_with_previous_guess_reaches_every_strategy():
    solver = WordleSolver(WordList(WORDS))
    guess = WordGuessAndResult("APPLE", [LetterRule("A", LetterRequirement.IMPOSSIBLE)])
    assert solver.with_previous_guess(guess) is solver
    for strategy in solver.guesser_strategies.values():
        assert strategy.previous_guesses == [guess]
    assert "APPLE" not in solver.word_list.words


def test_guess_next_word_returns_every_recommendation():
    solver = WordleSolver(WordList(WORDS))
    recs = solver.guess_next_word()
    assert set(recs) == set(solver.guesser_strategies)
    for rec in recs.values():
        assert isinstance(rec, WordGuessAndScore)
        assert rec.word in WORDS


def test_solves_from_simulated_feedback():
    solver = WordleSolver(WordList(WORDS))
    answer = "CROWD"
    for _ in range(len(WORDS)):
        if solver.is_solved():
            break
        guess = solver.guess_next_word()["letter_frequency"].word
        solver.with_previous_guess(WordGuessAndResult(guess, pattern_to_rules(guess, score(guess, answer))))
    assert solver.is_solved() and solver.word_list.words == [answer]


def test_exhausted_solver():
    solver = WordleSolver(WordList(["CRANE", "SLATE"]))
    solver.with_previous_guess(WordGuessAndResult("QUICK", [LetterRule("E", LetterRequirement.IMPOSSIBLE)]))
    assert solver.has_solution() is False
    assert solver.is_solved() is False
    with pytest.raises(NoMoreGuessesError):
        solver.guess_next_word()
