from pathlib import Path
from distle.datasets import load_dictionary, pretty_summary, validate_dictionary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_dictionary_normalizes(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["Cat", "cat", "  dog ", "", "ACT"])
    assert load_dictionary(p) == frozenset({"cat", "dog", "act"})


def test_validate_dictionary_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "raise", "stare"])

    rep = validate_dictionary(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    s = pretty_summary(rep)
    assert "dictionary=words.txt" in s and "OK" in s


def test_validate_dictionary_flags_errors(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("raise\n\ntwo words\nRAISE\n", encoding="utf-8")

    rep = validate_dictionary(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_missing(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_bundled_dictionary_is_valid():
    from distle.datasets import DEFAULT_DICTIONARY
    rep = validate_dictionary(str(DEFAULT_DICTIONARY))
    assert rep["passed"] is True
    assert {"cat", "cot", "dog", "act"} <= load_dictionary()
