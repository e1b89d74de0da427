"""
Candidate elimination given game history.

Given:
  - a pool of words (e.g., the dictionary or the current candidates)
  - a history of (guess, transforms) pairs

Return:
  - words that would have produced EXACTLY the recorded transform list
    against every past guess.

The filter is sound (the secret always survives, its transform list is the
recorded one by construction) but not tight: different words can share a
transform list against the same guess.
"""

from typing import Iterable, List, Sequence, Tuple
from .distance import transform_list

# History is a sequence of (guess, transforms) tuples produced by the engine.
History = Iterable[Tuple[str, Sequence[str]]]  # (guess, transforms)


def consistent_with(word: str, guess: str, transforms: Sequence[str]) -> bool:
    """True if `word` as the secret would give `transforms` for `guess`."""
    return transform_list(guess, word) == list(transforms)


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that reproduce every recorded transform list.

    Args:
      words   : iterable of candidate words
      history : iterable of (guess, transforms) seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = [(g, list(t)) for g, t in history]
    out: List[str] = []

    for w in words:
        if all(consistent_with(w, g, t) for g, t in history):
            out.append(w)

    return out
