from pathlib import Path
from distle.datasets import load_dictionary
from script.dedupe_txt import clean_lines, main


def test_clean_lines_case_insensitive_by_default():
    assert clean_lines(["Cat", "dog", "cat", "DOG"]) == ["Cat", "dog"]
    assert clean_lines(["Cat", "cat"], case_insensitive=False) == ["Cat", "cat"]


def test_clean_lines_blanks_and_sort():
    assert clean_lines(["  dog", "", "act ", "dog"], strip_blanks=True, sort=True) == ["act", "dog"]


def test_main_writes_out_file(tmp_path: Path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("cat\nCAT\n\ncot\n", encoding="utf-8")
    main(["--in", str(src), "--out", str(dst), "--strip-blanks"])
    assert dst.read_text(encoding="utf-8") == "cat\ncot\n"
    assert load_dictionary(dst) == frozenset({"cat", "cot"})
