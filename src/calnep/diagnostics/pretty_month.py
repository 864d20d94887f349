from __future__ import annotations

import argparse

import calnep
from calnep.core.time import weekday_sun0


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def bs_month_calendar(Y: int, M: int) -> None:
    days = calnep.civil_month(Y, M)
    d0 = days[0]["date"]
    d1 = days[-1]["date"]

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = weekday_sun0(d0)  # Sunday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for rec in days:
        d = rec["date"]
        wk.append(cell(f"{rec['bs'].day:2d}", f"{d.month:02d}-{d.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    name = calnep.MONTH_NAMES[M - 1]
    title = f"BS {Y} {name} (M={M})   ({d0} .. {d1})"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a BS month calendar with the paired Gregorian dates."
    )
    p.add_argument("--bs", nargs=2, type=int, metavar=("Y", "M"),
                   help="BS month to print: Y M (e.g. 2081 1)")
    args = p.parse_args(argv)

    if not args.bs:
        # sensible default demo
        bs_month_calendar(2081, 1)
        return 0

    Y, M = args.bs
    if calnep.last_day(Y, M) is None:
        print(f"BS {Y}-{M:02d} is outside the calendar table")
        return 1
    bs_month_calendar(Y, M)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
