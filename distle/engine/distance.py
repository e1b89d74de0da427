"""
Edit distance (feedback) for a single (guess, secret) pair.

Operations, each costing 1:
  - 'R' : replace one character
  - 'T' : transpose two ADJACENT characters
  - 'I' : insert one character
  - 'D' : delete one character

This is the restricted Damerau-Levenshtein distance ("optimal string
alignment"): a transposition is only recognised between neighbours and a
transposed pair is never edited again.

Two pieces:
  1) compute_table builds the DP table bottom-up.
  2) reconstruct_transforms walks it back from the full strings to the empty
     prefixes and emits one minimal edit script, "top-down" (outermost
     subproblem first). Ties are broken R > T > I > D so the script is a
     deterministic signature that can be compared with ==.
"""

from __future__ import annotations

from typing import List, Literal, Tuple

# Each element of a transform list is one of these tags
Transform = Literal["R", "T", "I", "D"]

# table[i][j] = cost of turning a[:i] into b[:j]
Table = List[List[int]]

# Tie-break priority when several predecessors are equally cheap
TIE_BREAK: Tuple[Transform, ...] = ("R", "T", "I", "D")

# How far back through the table each op steps: (rows, cols)
_STEP = {"R": (1, 1), "T": (2, 2), "I": (0, 1), "D": (1, 0)}


def _is_transposition(a: str, b: str, r: int, c: int) -> bool:
    """True if a[r-2:r] is b[c-2:c] with its two characters swapped."""
    return r >= 2 and c >= 2 and a[r - 2] == b[c - 1] and a[r - 1] == b[c - 2]


def compute_table(a: str, b: str) -> Table:
    """
    Build the (len(a)+1) x (len(b)+1) edit distance table for turning `a`
    into `b`. The distance is table[len(a)][len(b)].

    Examples:
      compute_table("ab", "ba")[2][2] -> 1
      compute_table("", "cat")[0]     -> [0, 1, 2, 3]
    """
    rows, cols = len(a), len(b)
    table: Table = [[0] * (cols + 1) for _ in range(rows + 1)]

    # Base cases: delete every char of a[:r] / insert every char of b[:c]
    for r in range(rows + 1):
        table[r][0] = r
    for c in range(cols + 1):
        table[0][c] = c

    for r in range(1, rows + 1):
        ch_a = a[r - 1]
        for c in range(1, cols + 1):
            if ch_a == b[c - 1]:
                table[r][c] = table[r - 1][c - 1]
                continue

            best = min(
                table[r][c - 1] + 1,      # insert
                table[r - 1][c] + 1,      # delete
                table[r - 1][c - 1] + 1,  # replace
            )
            if _is_transposition(a, b, r, c):
                best = min(best, table[r - 2][c - 2] + 1)
            table[r][c] = best

    return table


def _predecessors(a: str, b: str, table: Table, r: int, c: int) -> List[Tuple[Transform, int, int]]:
    """
    Candidate (op, r', c') steps out of a mismatching cell, listed in
    TIE_BREAK order. Only legal moves are returned.
    """
    steps: List[Tuple[Transform, int, int]] = []
    for op in TIE_BREAK:
        if op == "T" and not _is_transposition(a, b, r, c):
            continue
        dr, dc = _STEP[op]
        steps.append((op, r - dr, c - dc))
    return steps


def reconstruct_transforms(a: str, b: str, table: Table) -> List[Transform]:
    """
    Return one minimal top-down edit script turning `a` into `b`.

    Walks from (len(a), len(b)) to (0, 0):
      - matching characters step diagonally and emit nothing
      - on the first row only 'I' is legal, on the first column only 'D'
      - otherwise take the cheapest predecessor; on a tie the earliest in
        R, T, I, D order wins

    Examples:
      reconstruct_transforms("act", "cat", ...) -> ['T']
      reconstruct_transforms("dog", "cat", ...) -> ['R', 'R', 'R']
      reconstruct_transforms("", "ab", ...)     -> ['I', 'I']
    """
    out: List[Transform] = []
    r, c = len(a), len(b)

    while r > 0 or c > 0:
        if r == 0:
            out.append("I")
            c -= 1
            continue
        if c == 0:
            out.append("D")
            r -= 1
            continue
        if a[r - 1] == b[c - 1]:
            r, c = r - 1, c - 1
            continue

        op, best_r, best_c = None, r, c
        best_cost = None
        for cand_op, pr, pc in _predecessors(a, b, table, r, c):
            # strict < keeps the higher-priority op on ties
            if best_cost is None or table[pr][pc] < best_cost:
                op, best_r, best_c, best_cost = cand_op, pr, pc, table[pr][pc]

        out.append(op)
        r, c = best_r, best_c

    return out


def transform_list(a: str, b: str) -> List[Transform]:
    """Build the table and reconstruct in one call."""
    return reconstruct_transforms(a, b, compute_table(a, b))


def edit_distance(a: str, b: str) -> int:
    """
    Minimum number of R/T/I/D edits turning `a` into `b`.
    Identical strings short-circuit without building a table.
    """
    if a == b:
        return 0
    return compute_table(a, b)[len(a)][len(b)]


def feedback(guess: str, secret: str) -> Tuple[int, List[Transform]]:
    """
    What the game reports after `guess`: (distance, transforms).
    A correct guess yields (0, []).
    """
    guess = guess.strip().lower()
    secret = secret.strip().lower()
    table = compute_table(guess, secret)
    return table[len(guess)][len(secret)], reconstruct_transforms(guess, secret, table)
