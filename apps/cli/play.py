# apps/cli/play.py
"""
Play a single game of Distle in the terminal.

  - Without --solver you type the guesses yourself.
  - With --solver <id> an automated player guesses and you watch.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --solver random_consistent --seed 7
"""

from __future__ import annotations

import argparse
import random

from distle.datasets import DEFAULT_DICTIONARY, load_dictionary
from distle.harness import DEFAULT_MAX_GUESSES, DistleGame
from distle.solvers import create_solver, get_solver_ids


def main(argv=None):
    ap = argparse.ArgumentParser(description="distle: guess the word from edit-distance hints")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="newline-separated word list (case-insensitive)")
    ap.add_argument("--solver", help=f"let a solver play (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--max-guesses", type=int, default=DEFAULT_MAX_GUESSES, help="guess budget")
    ap.add_argument("--seed", type=int, help="RNG seed for secret selection and solver choices")
    ap.add_argument("--secret", help="play against this word instead of a random one")
    ap.add_argument("--quiet", action="store_true", help="print only the final result line")
    args = ap.parse_args(argv)

    try:
        dictionary = load_dictionary(args.dictionary)
    except FileNotFoundError as e:
        raise SystemExit(f"Dictionary not found: {e}")

    rng = random.Random(args.seed)
    player = None
    if args.solver:
        try:
            player = create_solver(args.solver, rng=rng)
        except ValueError as e:
            raise SystemExit(str(e))

    game = DistleGame(dictionary, player=player, rng=rng, verbose=not args.quiet)
    try:
        r = game.new_game(args.max_guesses, secret=args.secret)
    except ValueError as e:
        raise SystemExit(str(e))

    if args.quiet:
        status = "WIN" if r["success"] else "LOSS"
        print(f"{status} answer={r['answer']} guesses={r['guesses']}")
    return 0 if r["success"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
