"""
Lightweight guess validation.

A raw guess reaches the engine only if:
  - it is a string
  - after strip + lowercase it is a member of the dictionary

Anything else is rejected by the game loop, which still charges the turn.
"""

from typing import AbstractSet, Iterable, Optional


def normalize(word: str) -> str:
    """Canonical form of a word: stripped, lowercase."""
    return word.strip().lower()


def validate_guess(word: object, dictionary: Iterable[str]) -> Optional[str]:
    """
    Return the normalized guess if it is a valid dictionary word, else None.

    Notes:
      - Pass a set/frozenset for O(1) membership; any other iterable is
        copied into a set on every call.
    """
    if not isinstance(word, str):
        return None

    w = normalize(word)
    if not w:
        return None

    words: AbstractSet[str] = dictionary if isinstance(dictionary, (set, frozenset)) else set(dictionary)
    return w if w in words else None
