"""
Expected Remaining Candidates (ERC).

Idea:
  For guess g, if CURRENT candidates partition into buckets of sizes {c_i}
  by their transform list against g, the expected leftover after feedback is:
      E[left | g] = sum_i ( (c_i / n) * c_i ) = (1/n) * sum_i c_i^2
  Minimize sum_i c_i^2 (equivalently E[left]). Tie-break: smaller worst
  bucket, then RNG.

Every candidate is scored against every other, so the search pool is capped
with a seeded sample once the candidate list gets large.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Tuple
from .base import BaseSolver, register
from distle.engine import transform_list


def _sum_c2_and_worst(guess: str, candidates: List[str]) -> Tuple[int, int]:
    buckets: Dict[Tuple[str, ...], int] = defaultdict(int)
    for ans in candidates:
        buckets[tuple(transform_list(guess, ans))] += 1
    worst = max(buckets.values()) if buckets else 0
    sum_c2 = sum(c * c for c in buckets.values())
    return sum_c2, worst


@register
class ExpectedLeftSolver(BaseSolver):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "1.0.0"

    CANDIDATE_ONLY_LIMIT = 150
    POOL_CAP = 60

    def _select_pool(self, candidates: List[str]) -> List[str]:
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return candidates
        return self.rng.sample(candidates, self.POOL_CAP)

    def choose(self, candidates: List[str]) -> str:
        pool = self._select_pool(candidates)

        best_sum = None
        best_worst = None
        best: List[str] = []

        for g in pool:
            sum_c2, worst = _sum_c2_and_worst(g, candidates)
            if (best_sum is None) or (sum_c2 < best_sum) or (sum_c2 == best_sum and worst < best_worst):
                best_sum, best_worst, best = sum_c2, worst, [g]
            elif sum_c2 == best_sum and worst == best_worst:
                best.append(g)

        return best[self.rng.randrange(len(best))]
