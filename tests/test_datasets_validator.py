from pathlib import Path
from wordle_solver.datasets import load_words, pretty_summary, validate_wordlist, write_lines


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "RAISE", "stare"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    s = pretty_summary(rep)
    assert "N=5" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    words = tmp_path / "words_6.txt"
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'raiser' is fine
    words.write_text("raiser\ncrane\n???\n", encoding="utf-8")

    rep = validate_wordlist(6, str(words))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_duplicates_are_reported(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "CRANE", "stare"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False


def test_load_words_round_trip(tmp_path: Path):
    p = write_lines([" crane", "", "Slate ", "abc"], tmp_path / "w.txt")
    assert load_words(p) == ["CRANE", "SLATE", "ABC"]
    assert load_words(p, N=5) == ["CRANE", "SLATE"]
