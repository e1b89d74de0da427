"""
Clean up a dictionary file before playing with it.

Features:
- Preserves original order by default (stable dedupe).
- Case-insensitive by default, since the game lowercases every word
  ('Cat' == 'cat'); --case-sensitive keeps them apart.
- Optional stripping of blank/whitespace-only lines.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in distle/datasets/data/words.txt --strip-blanks --sort
"""

import argparse
from pathlib import Path

from distle.datasets import read_lines, write_lines


def unique_preserve_order(lines: list[str], key=None) -> list[str]:
    seen, out = set(), []
    for s in lines:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out


def clean_lines(lines: list[str], *, case_insensitive: bool = True, strip_blanks: bool = False,
                sort: bool = False) -> list[str]:
    if strip_blanks:
        lines = [s.strip() for s in lines if s.strip()]
    key = str.lower if case_insensitive else None
    out = unique_preserve_order(lines, key=key)
    if sort:
        out = sorted(out, key=key)
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Remove duplicate words from a dictionary file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--case-sensitive", action="store_true", help="treat 'Cat' and 'cat' as different")
    ap.add_argument("--strip-blanks", action="store_true", help="drop empty/whitespace-only lines")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args(argv)

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean_lines(lines, case_insensitive=not args.case_sensitive,
                      strip_blanks=args.strip_blanks, sort=args.sort)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} unique)")


if __name__ == "__main__":
    main()
