"""
Game loop and experiment harness.

- DistleGame: owns the dictionary, picks the secret, counts guesses, prints,
              and hands (guess, distance, transforms) feedback to an
              automated player. A human plays through `prompt` instead.
- run_case:   run a single game (one hidden secret) with a given solver.
- run_batch:  run many games in sequence (optionally a sample prefix).

Console output goes through the injectable `out` callable, so the same loop
serves the CLI, tests, and notebooks.
"""

from __future__ import annotations
import random
import time
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from distle.engine import compute_table, reconstruct_transforms, validate_guess

# Default turn budget when the caller doesn't pick one.
DEFAULT_MAX_GUESSES = 10

# (guess, distance, transforms); distance/transforms are None for a rejected guess
Turn = Tuple[str, Optional[int], Optional[List[str]]]


def _assert_max_guesses(max_guesses: int) -> None:
    """Guardrail: a game needs at least one guess."""
    if max_guesses < 1:
        raise ValueError(f"max_guesses must be >= 1; got {max_guesses}")


class DistleGame:
    def __init__(
            self,
            dictionary: Iterable[str],
            *,
            player=None,
            rng: Optional[random.Random] = None,
            verbose: bool = False,
            out: Callable[[str], None] = print,
            prompt: Callable[[str], str] = input,
    ):
        """
        Args:
            dictionary: every word that may be a secret or a guess
            player:     a BaseSolver; None means a human typing into `prompt`
            rng:        secret selection source (seed it to replay a run)
            verbose:    print banner, hints, win/loss lines through `out`
        """
        self.dictionary = frozenset(w.strip().lower() for w in dictionary if w.strip())
        if not self.dictionary:
            raise ValueError("dictionary is empty")
        self.player = player
        self.rng = rng if rng is not None else random.Random()
        self.verbose = verbose
        self.out = out
        self.prompt = prompt
        self.won = False

    def random_secret(self) -> str:
        # sorted so a seeded rng always draws the same word
        return self.rng.choice(sorted(self.dictionary))

    def _say(self, msg: str) -> None:
        if self.verbose:
            self.out(msg)

    def _get_guess(self) -> str:
        if self.player is None:
            return self.prompt("  > " if self.verbose else "")
        return self.player.make_guess()

    def new_game(self, max_guesses: int = DEFAULT_MAX_GUESSES, secret: Optional[str] = None) -> Dict:
        """
        Play one game until the player wins or the guess budget runs out.

        Returns:
            dict with keys:
                success (bool), guesses (int), time_ms (float),
                history (list[Turn]), answer (str)
        """
        _assert_max_guesses(max_guesses)
        if secret is None:
            secret = self.random_secret()
        else:
            secret = secret.strip().lower()
            if secret not in self.dictionary:
                raise ValueError(f"secret {secret!r} is not in the dictionary")

        self.won = False
        history: List[Turn] = []
        if self.player is not None:
            self.player.start_new_game(set(self.dictionary), max_guesses)

        self._say("=================================")
        self._say("=       Welcome to Distle       =")
        self._say("=================================")

        t0 = time.perf_counter()
        for turn in range(1, max_guesses + 1):
            self._say(f"[G] Guess {turn} / {max_guesses}")
            raw = self._get_guess()
            guess = validate_guess(raw, self.dictionary)

            # Not a word: the turn is spent, no feedback
            if guess is None:
                history.append((str(raw), None, None))
                self._say("  [X] Word not in dictionary, try again (turn lost)")
                continue

            if self.player is not None:
                self._say(f"  > {guess}")

            table = compute_table(guess, secret)
            distance = table[len(guess)][len(secret)]
            if distance == 0:
                history.append((guess, 0, []))
                self.won = True
                self._say("[W] You guessed correctly, congratulations!")
                break

            transforms = reconstruct_transforms(guess, secret, table)
            history.append((guess, distance, list(transforms)))
            if self.player is not None:
                self.player.apply_feedback(guess, distance, transforms)

            self._say("  [~] Not quite, here are some hints:")
            self._say(f"    [!] Edit Distance: {distance}")
            self._say(f"    [!] Transforms (top-down): {transforms}")

        if not self.won:
            self._say(f"[L] Out of guesses. The correct answer: {secret}")

        return {
            "success": self.won,
            "guesses": len(history),
            "time_ms": (time.perf_counter() - t0) * 1000.0,
            "history": history,
            "answer": secret,
        }


def run_case(
        solver,
        secret: str,
        *,
        dictionary: Iterable[str],
        max_guesses: int = DEFAULT_MAX_GUESSES,
        seed: int | None = None,
) -> Dict:
    """
    Execute one silent game with `solver` against a fixed `secret`.

    Args:
        solver:       a BaseSolver
        secret:       the hidden word for this case (must be in dictionary)
        dictionary:   all valid words
        max_guesses:  turn budget
        seed:         reseeds solver.rng to make its choices reproducible

    Returns:
        the DistleGame.new_game result dict plus "solver_id".
    """
    if seed is not None:
        solver.rng.seed(seed)
    game = DistleGame(dictionary, player=solver)
    r = game.new_game(max_guesses, secret=secret)
    r["solver_id"] = solver.id
    return r


def run_batch(
        solver,
        secrets: List[str],
        *,
        dictionary: Iterable[str],
        max_guesses: int = DEFAULT_MAX_GUESSES,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _assert_max_guesses(max_guesses)
    words = frozenset(dictionary)

    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, secret, dictionary=words, max_guesses=max_guesses, seed=case_seed))
    return out
