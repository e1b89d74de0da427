"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Transform lists are written as a compact tag string, e.g. ['R', 'T'] -> "RT".
  A rejected (out-of-dictionary) guess leaves dist/trans blank.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence
import csv
import json
import subprocess
import datetime as dt


def format_transforms(transforms: Optional[Sequence[str]]) -> str:
    """
    Example: ['R', 'R', 'T'] -> "RRT"; None -> ""
    """
    return "".join(transforms) if transforms else ""


def write_csv(results: List[Dict], path: str, max_guesses: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, success, guesses, time_ms,
      guess_1, dist_1, trans_1, ..., guess_max, dist_max, trans_max

    Args:
      results    : list of dicts returned by the harness per game.
      path       : output CSV path.
      max_guesses: turn budget used for the run.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_guesses + 1):
        fields += [f"guess_{i}", f"dist_{i}", f"trans_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_guesses + 1):
                if i <= len(hist):
                    g, dist, trans = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"dist_{i}"] = "" if dist is None else dist
                    row[f"trans_{i}"] = format_transforms(trans)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"dist_{i}"] = ""
                    row[f"trans_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solvers, dictionary path, seed, sample, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - num_cases: number of games in this batch
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
