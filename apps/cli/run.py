# apps/cli/run.py
"""
CLI entry point for running distle solver experiments.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads it and picks the secrets (all words, or a seeded sample).
  3) Runs every requested solver over the same secrets with a live progress
     indicator and writes, per solver:
       - CSV:  per-case results + guess/distance/transforms history columns
       - JSON: manifest with config, dictionary hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import List, Tuple

from tqdm import tqdm

from distle.datasets import DEFAULT_DICTIONARY, load_dictionary, pretty_summary, validate_dictionary
from distle.harness import DEFAULT_MAX_GUESSES, run_case
from distle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from distle.solvers import create_solver, get_solver_ids


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_solver(solver_id: str, cases: List[str], *, dictionary: frozenset, max_guesses: int,
                    base_seed: int, outdir: Path, progress: str, config: dict,
                    report: dict) -> Tuple[str, str]:
    solver = create_solver(solver_id)
    results = []
    total = len(cases)
    mode = _progress_mode(progress)
    iterator = tqdm(cases, ncols=80, desc=solver_id, unit="game") if mode == "bar" else cases
    start = time.time()
    last_print = 0.0

    for idx, secret in enumerate(iterator, 1):
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = base_seed + idx * 1013904223
        results.append(run_case(solver, secret, dictionary=dictionary, max_guesses=max_guesses,
                                seed=per_seed))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{solver_id}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    wins = sum(1 for r in results if r["success"])
    avg = (sum(r["guesses"] for r in results if r["success"]) / wins) if wins else 0.0
    print(f"{solver_id}: solved {wins}/{total} | avg guesses (solved) {avg:.2f}")

    # write outputs under <outdir>/<solver_id>/
    run_id = timestamp_id()
    sdir = outdir / solver_id
    sdir.mkdir(parents=True, exist_ok=True)
    csv_path = sdir / f"run_{run_id}.csv"
    manifest_path = sdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_guesses=max_guesses)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": config,
        "dictionary": report,
        "num_cases": len(results),
        "num_solved": wins,
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))
    return str(csv_path), str(manifest_path)


def main(argv=None):
    """
    Parse CLI args, validate the dictionary, run each solver, and write outputs.
    """
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="distle: run solver experiments")
    ap.add_argument("--solvers", nargs="+", default=["random_consistent"],
                    help=f"solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="solver ids to skip (only if --solvers ALL)")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="newline-separated word list (case-insensitive)")
    ap.add_argument("--max-guesses", type=int, default=DEFAULT_MAX_GUESSES, help="guess budget per game")
    ap.add_argument("--sample", type=int, help="run only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    args = ap.parse_args(argv)
    if args.max_guesses < 1:
        raise SystemExit(f"--max-guesses must be >= 1; got {args.max_guesses}")
    if args.sample is not None and args.sample < 1:
        raise SystemExit(f"--sample must be >= 1; got {args.sample}")

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"]:
        raise SystemExit(f"Dictionary not found: {args.dictionary}")

    # 2) Load and choose cases (deterministic sample by seed)
    dictionary = load_dictionary(args.dictionary)
    cases = sorted(dictionary)
    if args.sample is not None and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    # 3) Expand solvers
    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = [s for s in registered if s not in set(args.exclude)]
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # 4) Run each solver sequentially over the shared cases
    for sid in todo:
        if args.progress != "off":
            print(f"\n=== Running {sid} on {len(cases)} cases (max_guesses={args.max_guesses}) ===")
        csv_path, manifest_path = _run_one_solver(
            sid, cases, dictionary=dictionary, max_guesses=args.max_guesses,
            base_seed=args.seed, outdir=outdir, progress=args.progress,
            config=vars(args), report=rep,
        )
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
