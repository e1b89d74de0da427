from .core import DEFAULT_MAX_GUESSES, DistleGame, run_case, run_batch
from .io import write_csv, write_manifest

__all__ = ["DEFAULT_MAX_GUESSES", "DistleGame", "run_case", "run_batch", "write_csv", "write_manifest"]
