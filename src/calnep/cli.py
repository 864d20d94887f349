from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_VERBOSE_FLAGS = ("-v", "--verbose")


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a Gregorian YYYY-MM-DD date: {s!r}") from None


def _parse_bs(s: str):
    import calnep

    b = calnep.parse(s)
    if b is None:
        raise argparse.ArgumentTypeError(f"not a valid BS YYYY-MM-DD date: {s!r}")
    return b


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_to_bs(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep to-bs", description="Gregorian (AD) -> Bikram Sambat (BS)")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    args = p.parse_args(argv)

    b = calnep.to_bs(args.date)
    if b is None:
        print(f"{args.date} is outside the BS calendar table", file=sys.stderr)
        return 1
    print(f"{b}  ({b.day} {b.month_name} {b.year} BS)")
    return 0

def cmd_to_ad(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep to-ad", description="Bikram Sambat (BS) -> Gregorian (AD)")
    p.add_argument("date", type=_parse_bs, help="BS date YYYY-MM-DD")
    args = p.parse_args(argv)

    print(calnep.to_ad(args.date).isoformat())
    return 0

def cmd_duration(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(
        prog="calnep duration",
        description="Elapsed years, months and days between two BS dates.",
    )
    p.add_argument("start", type=_parse_bs, help="BS date YYYY-MM-DD")
    p.add_argument("end", type=_parse_bs, help="BS date YYYY-MM-DD (not before start)")
    args = p.parse_args(argv)

    if args.start > args.end:
        print(f"start {args.start} is after end {args.end}", file=sys.stderr)
        return 1
    dur = calnep.duration(args.start, args.end)
    print(f"{dur}  ({calnep.days_between(args.start, args.end)} days)")
    return 0

def cmd_day(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep day", description="Gregorian -> BS day record")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        info = calnep.day_info(args.date, attributes=tuple(args.attr), debug=args.debug)
    except KeyError as e:
        p.error(str(e))
    if info is None:
        print(f"{args.date} is outside the BS calendar table", file=sys.stderr)
        return 1
    print(info)
    return 0

def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `calnep [-v] YYYY-MM-DD` converts AD -> BS
    n_flags = 0
    while n_flags < len(argv) and argv[n_flags] in _VERBOSE_FLAGS:
        n_flags += 1
    if n_flags < len(argv) and _DATE_RE.match(argv[n_flags]):
        _configure_logging(n_flags > 0)
        return cmd_to_bs(argv[n_flags:])

    p = argparse.ArgumentParser(prog="calnep", description="Bikram Sambat calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-bs", help="Gregorian -> BS date", add_help=False)
    sub.add_parser("to-ad", help="BS -> Gregorian date", add_help=False)
    sub.add_parser("duration", help="Elapsed years/months/days between two BS dates", add_help=False)
    sub.add_parser("day", help="Gregorian -> BS day record with attributes", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print a BS month calendar (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print BS New Year table (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "table-audit", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    _configure_logging(args.verbose)

    if args.cmd == "to-bs":
        return cmd_to_bs(rest)

    if args.cmd == "to-ad":
        return cmd_to_ad(rest)

    if args.cmd == "duration":
        return cmd_duration(rest)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("calnep.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("calnep.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calnep.diagnostics.round_trip",
            "table-audit": "calnep.diagnostics.table_audit",
            "year-lengths": "calnep.diagnostics.year_lengths",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
