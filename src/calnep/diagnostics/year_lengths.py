#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from calnep.engines.table import BS_TABLE


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calnep[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calnep[diagnostics]"') from e


def build_series(np, start_year: int, end_year: int):
    years = np.arange(start_year, end_year + 1, dtype=int)
    rows = np.array([BS_TABLE.month_lengths(int(Y)) for Y in years], dtype=int)
    return years, rows


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot BS year lengths and month-length spread over the table.")
    p.add_argument("--from-year", type=int, default=BS_TABLE.first_year)
    p.add_argument("--to-year", type=int, default=BS_TABLE.last_year)
    p.add_argument("--outbase", default="bs_year_lengths", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.from_year not in BS_TABLE or args.to_year not in BS_TABLE or args.to_year < args.from_year:
        raise SystemExit(f"years must lie in {BS_TABLE.first_year}..{BS_TABLE.last_year}")

    np = _need_numpy()
    plt = _need_matplotlib()

    years, rows = build_series(np, args.from_year, args.to_year)
    totals = rows.sum(axis=1)

    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(9.2, 6.4), constrained_layout=True, sharex=True)
    for ax in (ax0, ax1):
        ax.set_axisbelow(True)
        ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax0.scatter(years, totals, s=12, c="tab:blue", alpha=0.6)
    ax0.axhline(float(np.mean(totals)), color="0.30", linewidth=1.0)
    ax0.set_ylabel("Days in BS year")
    ax0.set_title("Bikram Sambat year lengths")

    im = ax1.imshow(
        rows.T,
        aspect="auto",
        origin="lower",
        cmap="viridis",
        extent=(years[0] - 0.5, years[-1] + 0.5, 0.5, 12.5),
    )
    ax1.set_xlabel("BS year")
    ax1.set_ylabel("Month")
    fig.colorbar(im, ax=ax1, label="Days in month")

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    print(f"Saved: {outbase}.png")
    print(f"Year length mean {float(np.mean(totals)):.4f}  min {int(totals.min())}  max {int(totals.max())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
