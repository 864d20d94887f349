from __future__ import annotations

import argparse

from calnep.engines.table import BS_TABLE, MAX_YEAR_LENGTH, MIN_YEAR_LENGTH


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Audit the BS month-length table.")
    p.add_argument("--verbose", action="store_true", help="Print every year's length.")
    args = p.parse_args(argv)

    t = BS_TABLE
    print(f"Table {t.version}: BS {t.first_year}..{t.last_year}, epoch {t.epoch} AD")
    print(f"  years: {len(t)}  months: {len(t.flattened)}  days: {t.total_days}")

    if args.verbose:
        for Y in t.years:
            row = " ".join(f"{n:2d}" for n in t.month_lengths(Y))
            print(f"  {Y}: {row}  = {t.year_length(Y)}")

    lengths = [t.year_length(Y) for Y in t.years]
    print(f"  year length: min {min(lengths)}  max {max(lengths)}  "
          f"(allowed {MIN_YEAR_LENGTH}..{MAX_YEAR_LENGTH})")

    problems = t.audit()
    if not problems:
        print("No problems found.")
        return 0

    for msg in problems:
        print("PROBLEM:", msg)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
