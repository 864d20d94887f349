from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import calnep


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        b = calnep.to_bs(d0)
        back = calnep.to_ad(b) if b is not None else None
        again = calnep.to_bs(back) if back is not None else None
        if b is None or back != d0 or again != b:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("bs:", b)
            print("back:", back)
            print("explain:", calnep.explain(d0))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    info = calnep.calendar_info()
    first = info["epoch"]
    last = first + timedelta(days=info["total_days"] - 1)

    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> BS -> gregorian.")
    p.add_argument("--N", type=int, default=2000, help="Number of trials.")
    p.add_argument("--start", type=str, default=first.isoformat(), help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default=last.isoformat(), help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")
    if start < first or end > last:
        raise SystemExit(f"dates must lie in {first} .. {last}")

    print(f"Testing {args.N} dates in {start} .. {end} ...")
    total_fail = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
