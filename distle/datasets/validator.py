"""
Dictionary validator for distle.

What this module does:
- Validate a dictionary file (one word per line, case-insensitive).
- Flag invalid lines (blank, or containing whitespace inside the word) and
  duplicates after lowercasing; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from distle.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("distle/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after lowercase + dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line (surrounding whitespace is ignored)
      - no whitespace inside the token
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words lowercased, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w or len(w.split()) != 1:
                invalid += 1
                continue
            valid.append(w.lower())

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str) -> Dict:
    """
    Validate a dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema).
        `passed` is strict: requires the file to exist, be non-empty, and
        have no invalid lines. Duplicates are reported but do not fail,
        since loading collapses them anyway.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        return asdict(DictionaryReport(path, False, 0, "", 0, 0, False, issues))

    words, invalid = _load_and_check(p)
    unique = set(words)

    if not words:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("dictionary contains duplicate words (case-insensitive)")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=words.txt | words=240 (uniq=240, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"dictionary={name} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | {status}"
    )
