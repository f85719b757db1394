import pytest
from wordle_solver import NoMoreGuessesError
from wordle_solver.engine import LetterRequirement, LetterRule, WordGuessAndResult, WordList
from wordle_solver.solvers import (
    DistinctLettersStrategy, GuesserStrategy, LetterFrequencyStrategy,
    PerLetterEliminationStrategy, RetryMisplacedLettersStrategy,
    create_strategy, get_strategy_ids,
)
from wordle_solver.solvers.per_letter_elimination import misplaced_rules_for, total_possible_letters

M, P, X = LetterRequirement.MANDATORY, LetterRequirement.MISPLACED, LetterRequirement.IMPOSSIBLE


class AsciiSumStrategy(GuesserStrategy):
    """Scores a word by the sum of its character codes."""

    def score_for_guess(self, guess):
        return sum(ord(ch) for ch in guess)


# --- base behaviour ---

def test_guess_next_word_empty_raises():
    with pytest.raises(NoMoreGuessesError):
        AsciiSumStrategy(WordList([])).guess_next_word_and_score()


def test_guess_next_word_picks_max():
    best = AsciiSumStrategy(WordList(["AAAAA", "CCCCC", "BBBBB"])).guess_next_word_and_score()
    assert best.word == "CCCCC"
    assert best.score == 5 * ord("C")


def test_ties_go_to_alphabetically_first():
    strategy = DistinctLettersStrategy(WordList(["SLATE", "CRANE", "BLOKE"]))
    assert strategy.guess_next_word_and_score().word == "BLOKE"


def test_with_previous_guess_applies_rules_and_records():
    wl = WordList(["AAAAA", "BBBBB", "CCCCC"])
    strategy = AsciiSumStrategy(wl)
    guess = WordGuessAndResult("CCCCC", [LetterRule("C", X)])
    assert strategy.with_previous_guess(guess) is strategy
    assert strategy.previous_guesses == [guess]
    assert wl.words == ["AAAAA", "BBBBB"]


def test_already_guessed_letters_unique_in_order():
    strategy = AsciiSumStrategy(WordList())
    for w in ["ABC", "BCD", "DEF", "GHI"]:
        strategy.with_previous_guess(WordGuessAndResult(w, []))
    assert strategy.get_already_guessed_letters() == list("ABCDEFGHI")


@pytest.mark.parametrize("n_words,has_solution,is_solved", [(0, False, False), (1, True, True), (2, True, False)])
def test_solution_state(n_words, has_solution, is_solved):
    strategy = AsciiSumStrategy(WordList(["CRANE", "SLATE"][:n_words]))
    assert strategy.has_solution() is has_solution
    assert strategy.is_solved() is is_solved


def test_registry():
    assert get_strategy_ids() == [
        "distinct_letters", "letter_frequency", "per_letter_eliminations", "retry_misplaced_letters",
    ]
    assert isinstance(create_strategy("letter_frequency", WordList()), LetterFrequencyStrategy)
    with pytest.raises(ValueError):
        create_strategy("nope", WordList())


# --- distinct letters ---

def test_distinct_letters():
    strategy = DistinctLettersStrategy(WordList(["BREAD", "BOOKS", "BAKER"]))
    assert strategy.score_for_guess("BREAD") == 5
    assert strategy.score_for_guess("BOOKS") == 4
    strategy.with_previous_guess(WordGuessAndResult("BAKER", []))
    assert strategy.score_for_guess("BREAD") == 1
    assert strategy.score_for_guess("BOOKS") == 2


# --- letter frequency ---

def test_letter_frequency():
    wl = WordList(["ABC", "ABD", "AEC"])
    strategy = LetterFrequencyStrategy(wl)
    assert strategy.score_for_guess("ABC") == pytest.approx(3 / 1 + 2 / 2 + 2 / 2)
    assert strategy.score_for_guess("ABD") == pytest.approx(3 / 1 + 2 / 2 + 1 / 2)
    best = strategy.guess_next_word_and_score()
    assert best.word == "ABC" and best.score == pytest.approx(5.0)


def test_letter_frequency_exhausted_list_scores_zero():
    wl = WordList(["CRANE"])
    wl.apply_rules([LetterRule("C", X)])
    assert LetterFrequencyStrategy(wl).score_for_guess("CRANE") == 0.0


def test_letter_frequency_follows_narrowing():
    wl = WordList(["ABC", "ABD", "AEC"])
    strategy = LetterFrequencyStrategy(wl)
    strategy.score_for_guess("ABC")
    # narrowed through the shared list, not through this strategy
    wl.apply_rules([LetterRule("B", X)])
    assert strategy.score_for_guess("AEC") == pytest.approx(1 / 1 + 1 / 1 + 1 / 2)


# --- per-letter elimination ---

def test_per_letter_helpers():
    assert misplaced_rules_for("AB") == [LetterRule("A", P, 0), LetterRule("B", P, 1)]
    assert total_possible_letters(WordList(["AB", "CD"])) == 4


def test_per_letter_elimination():
    wl = WordList(["GUESS", "GUEST", "TRAIN", "PLANT", "CHORD"])
    strategy = PerLetterEliminationStrategy(wl)
    strategy.with_previous_guess(WordGuessAndResult("GUESS", [LetterRule(ch, X) for ch in "GUES"]))
    words_before = list(wl.words)

    assert strategy.score_for_guess("GUEST") == 1
    assert strategy.score_for_guess("CHORD") == 5
    # scoring never touches the real search state
    assert wl.words == words_before and wl.revision == 1


def test_per_letter_elimination_candidates_score_word_length():
    strategy = PerLetterEliminationStrategy(WordList(["CRANE", "SLATE", "MOIST"]))
    best = strategy.guess_next_word_and_score()
    assert best.word == "CRANE" and best.score == 5


# --- retry misplaced letters ---

@pytest.mark.parametrize("guess,expected", [("NOTES", 5), ("STENO", 2), ("ATONE", 0)])
def test_retry_misplaced_letters(guess, expected):
    strategy = RetryMisplacedLettersStrategy(WordList(["NOTES", "STENO", "ATONE", "ONSET"]))
    strategy.with_previous_guess(
        WordGuessAndResult("STONE", [LetterRule(ch, P, pos) for pos, ch in enumerate("STONE")]))
    assert strategy.score_for_guess(guess) == expected


def test_retry_misplaced_without_history():
    strategy = RetryMisplacedLettersStrategy(WordList(["NOTES"]))
    assert strategy.score_for_guess("NOTES") == 0
