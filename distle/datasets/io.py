from __future__ import annotations
from pathlib import Path
from typing import FrozenSet, Iterable, List

# Sample dictionary shipped with the package
DEFAULT_DICTIONARY = Path(__file__).parent / "data" / "words.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(p: Path | str = DEFAULT_DICTIONARY) -> FrozenSet[str]:
    """
    Load a newline-separated word file as a set of lowercase words.
    Blank lines are dropped; duplicates (after lowercasing) collapse.
    """
    return frozenset(w.strip().lower() for w in read_lines(p) if w.strip())
