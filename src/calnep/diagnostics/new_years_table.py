from __future__ import annotations

from datetime import date
import argparse

import calnep


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of BS New Year (1 Baishakh) for a range of BS years."
    )
    p.add_argument("--from-year", type=int, default=2070)
    p.add_argument("--to-year", type=int, default=2090)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    info = calnep.calendar_info()
    if Y0 < info["first_year"] or Y1 > info["last_year"]:
        raise SystemExit(f"years must lie in {info['first_year']}..{info['last_year']}")

    headers = ["BS year", "1 Baishakh", "Days"]
    colw = [7, 10, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        d = calnep.new_year_day(Y)
        n = sum(calnep.month_lengths(Y))
        row = [str(Y).ljust(colw[0]), fmt(d).ljust(colw[1]), str(n).rjust(colw[2])]
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
