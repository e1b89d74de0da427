from __future__ import annotations
import random
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Type

from distle.engine import filter_candidates

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


class NoCandidatesRemaining(RuntimeError):
    """
    Raised when a guess is requested but elimination left nothing.
    The secret can never be filtered out by honest feedback, so this means
    the feedback was inconsistent. Not the same thing as running out of guesses.
    """


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    Automated player. Lifecycle:

        start_new_game(dictionary, max_guesses)
        loop:
            guess = make_guess()
            apply_feedback(guess, distance, transforms)   # only on a miss

    The solver owns a private, sorted copy of the dictionary (the candidate
    list) and replaces it wholesale after every feedback. Sorting makes a
    seeded `rng` reproduce the same game regardless of set ordering.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.max_guesses: int = 0
        self.prev_guess: Optional[str] = None
        self._candidates: Optional[List[str]] = None

    @property
    def started(self) -> bool:
        return self._candidates is not None

    @property
    def candidates(self) -> Tuple[str, ...]:
        """Snapshot of the words still consistent with all feedback."""
        return tuple(self._candidates or ())

    def start_new_game(self, dictionary: Iterable[str], max_guesses: int) -> None:
        self._candidates = sorted({w.strip().lower() for w in dictionary})
        self.max_guesses = int(max_guesses)
        self.prev_guess = None

    def make_guess(self) -> str:
        if not self.started:
            raise RuntimeError("start_new_game() must be called before make_guess()")
        if not self._candidates:
            raise NoCandidatesRemaining(
                f"no candidates left after guess {self.prev_guess!r}; feedback was inconsistent")
        return self.choose(self._candidates)

    def apply_feedback(self, guess: str, distance: int, transforms: Sequence[str]) -> None:
        """
        Keep only the candidates whose transform list against `guess` is
        exactly `transforms`. `distance` is implied by len(transforms) and is
        accepted for the caller's convenience.
        """
        if not self.started:
            raise RuntimeError("start_new_game() must be called before apply_feedback()")
        guess = guess.strip().lower()
        # filter fully, then swap; the old list is never mutated in place
        self._candidates = filter_candidates(self._candidates, [(guess, transforms)])
        self.prev_guess = guess

    def choose(self, candidates: List[str]) -> str:
        """Pick the next guess from a non-empty candidate list."""
        raise NotImplementedError("Override in subclass")
