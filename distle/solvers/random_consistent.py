"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate list (words still
    consistent with all feedback so far), the first guess included.

Notes:
  - Deterministic across runs with the same seeded rng.
  - This is the baseline elimination player; it does not try to pick
    guesses that split the candidates well.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def choose(self, candidates: List[str]) -> str:
        i = self.rng.randrange(len(candidates))
        return candidates[i]
