"""Shape, bounds and contiguity report for a month-length table."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Mapping, Sequence

import bscal
from bscal.engines.table import MONTH_LENGTH_BOUNDS, MONTHS_PER_YEAR, YEAR_LENGTH_BOUNDS


@dataclass(frozen=True)
class TableReport:
    min_year: int
    max_year: int
    n_years: int
    missing_years: tuple
    problems: tuple

    @property
    def ok(self) -> bool:
        return not self.missing_years and not self.problems


def check_table(years: Mapping[int, Sequence[int]]) -> TableReport:
    """
    Unlike ``CalendarTable``, which rejects the first bad row, this collects
    every problem, and also reports gaps in the year keys.
    """
    if not years:
        return TableReport(0, 0, 0, (), ("table is empty",))

    ys = sorted(years)
    present = set(ys)
    missing = tuple(y for y in range(ys[0], ys[-1] + 1) if y not in present)

    problems: List[str] = []
    mlo, mhi = MONTH_LENGTH_BOUNDS
    ylo, yhi = YEAR_LENGTH_BOUNDS
    for y in ys:
        row = list(years[y])
        if len(row) != MONTHS_PER_YEAR:
            problems.append(f"{y}: {len(row)} months")
            continue
        for i, n in enumerate(row, start=1):
            if not (mlo <= n <= mhi):
                problems.append(f"{y}-{i:02d}: month length {n}")
        total = sum(row)
        if not (ylo <= total <= yhi):
            problems.append(f"{y}: year length {total}")

    return TableReport(ys[0], ys[-1], len(ys), missing, tuple(problems))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check an engine's month-length table.")
    p.add_argument("--engine", default="nepal")
    args = p.parse_args(argv)

    table = bscal.get_engine(args.engine).table
    rep = check_table(table.as_dict())

    print(f"Engine {args.engine}: BS {rep.min_year}..{rep.max_year} ({rep.n_years} years)")
    if rep.missing_years:
        print("  missing years:", ", ".join(str(y) for y in rep.missing_years))
    for msg in rep.problems:
        print("  problem:", msg)
    print("  OK" if rep.ok else "  FAILED")
    return 0 if rep.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
