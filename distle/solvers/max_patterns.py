"""
Max Pattern Diversity (MPD).

Idea:
  For each guess g, count how many DISTINCT transform lists it produces
  against the CURRENT candidates. Pick the guess with the MOST unique lists.
  Tie-break: smaller worst bucket, then RNG.

Cheaper to compare than expected-left, but still buckets candidates.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Tuple
from .base import BaseSolver, register
from distle.engine import transform_list


def _pattern_stats(guess: str, candidates: List[str]) -> Tuple[int, int]:
    """
    Return (num_distinct_transform_lists, worst_bucket_size) for guess.
    """
    buckets: Dict[Tuple[str, ...], int] = defaultdict(int)
    for ans in candidates:
        buckets[tuple(transform_list(guess, ans))] += 1
    if not buckets:
        return 0, 0
    return len(buckets), max(buckets.values())


@register
class MaxPatternsSolver(BaseSolver):
    id = "max_patterns"
    name = "Max Pattern Diversity"
    version = "1.0.0"

    CANDIDATE_ONLY_LIMIT = 150
    POOL_CAP = 60  # random sample of candidates to score when the list is large

    def _select_pool(self, candidates: List[str]) -> List[str]:
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return candidates
        return self.rng.sample(candidates, self.POOL_CAP)

    def choose(self, candidates: List[str]) -> str:
        pool = self._select_pool(candidates)

        best_m = None
        best_worst = None
        best: List[str] = []

        for g in pool:
            m, worst = _pattern_stats(g, candidates)
            if (best_m is None) or (m > best_m) or (m == best_m and worst < best_worst):
                best_m, best_worst, best = m, worst, [g]
            elif m == best_m and worst == best_worst:
                best.append(g)

        return best[self.rng.randrange(len(best))]
