#!/usr/bin/env python3
from __future__ import annotations

import argparse

import bscal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "bscal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "bscal[diagnostics]"') from e


def year_length_series(np, engine: str):
    table = bscal.get_engine(engine).table
    lo, hi = table.supported_year_range()
    ys = np.arange(lo, hi + 1, dtype=int)
    lengths = np.array([table.year_length(int(y)) for y in ys], dtype=int)
    return ys, lengths


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot BS year lengths (days per year) from an engine's table.")
    p.add_argument("--engine", default="nepal")
    p.add_argument("--out", default="year_lengths.png", help="output image filename")
    p.add_argument("--title", default="Bikram Sambat year lengths")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    ys, lengths = year_length_series(np, args.engine)

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.step(ys, lengths, where="mid", linewidth=1.5)
    ax.axhline(float(lengths.mean()), linestyle="--", linewidth=1, color="0.4",
               label=f"mean {lengths.mean():.4f} days")
    ax.set_title(args.title)
    ax.set_xlabel("BS year")
    ax.set_ylabel("Days")
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
