#!/usr/bin/env python3
"""Print the partial dates found in a text file (or stdin).

Unknown fields are shown as ?: "2023-10-??".

Usage:
  PYTHONPATH=. python3 scripts/find_dates.py notes.txt
  echo "paid 2023-10-05, due 11/2024" | PYTHONPATH=. python3 scripts/find_dates.py --sort
  PYTHONPATH=. python3 scripts/find_dates.py notes.txt --last --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from partial_dates import DateError, DateResult, PartialDate, find_dates, find_last_date


def format_date(d: PartialDate) -> str:
    y = "????" if d.year is None else f"{d.year:04d}"
    m = "??" if d.month is None else f"{d.month:02d}"
    dd = "??" if d.day is None else f"{d.day:02d}"
    return f"{y}-{m}-{dd}"


def to_json(r: DateResult) -> dict:
    if isinstance(r, DateError):
        return {"error": type(r).__name__, "message": str(r)}
    return {"year": r.year, "month": r.month, "day": r.day}


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("path", nargs="?", default=None, help="text file (default: stdin)")
    ap.add_argument("--last", action="store_true", help="only the last date found")
    ap.add_argument("--sort", action="store_true", help="sort dates (unknown fields first)")
    ap.add_argument("--errors", action="store_true", help="also print groups that failed")
    ap.add_argument("--json", action="store_true")
    args = ap.parse_args()

    if args.path:
        p = Path(args.path)
        if not p.exists():
            raise SystemExit(f"Missing: {p}")
        text = p.read_text(encoding="utf-8", errors="replace")
    else:
        text = sys.stdin.read()

    if args.last:
        last = find_last_date(text)
        if isinstance(last, DateError):
            raise SystemExit(f"ERROR: {last}")
        results: list[DateResult] = [last]
    else:
        results = find_dates(text)

    if not args.errors:
        results = [r for r in results if not isinstance(r, DateError)]
    if args.sort:
        dates = sorted(r for r in results if isinstance(r, PartialDate))
        results = [*dates, *(r for r in results if isinstance(r, DateError))]

    if args.json:
        print(json.dumps([to_json(r) for r in results], ensure_ascii=False, indent=2))
    else:
        for r in results:
            if isinstance(r, DateError):
                print(f"ERROR: {r}")
            else:
                print(format_date(r))


if __name__ == "__main__":
    main()
