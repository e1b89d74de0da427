from __future__ import annotations
import random
from typing import List, Optional
from .base import BaseSolver, NoCandidatesRemaining, REGISTRY, register

from . import random_consistent  # noqa: F401
from . import expected_left  # noqa: F401
from . import max_patterns  # noqa: F401


def create_solver(solver_id: str, rng: Optional[random.Random] = None) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id, sharing `rng` if given.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(rng=rng)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
