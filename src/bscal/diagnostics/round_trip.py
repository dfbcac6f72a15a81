from __future__ import annotations

import argparse
import random
from typing import List, Optional

import bscal
from bscal.core.types import BsDate


def parse_engines(s: str) -> List[str]:
    # "nepal,nepal-walk" -> ["nepal", "nepal-walk"]
    return [x.strip() for x in s.split(",") if x.strip()]


def random_bs_date(engine: str, rng: random.Random) -> BsDate:
    r = bscal.supported_range(engine=engine)
    y = rng.randint(r.min.year, r.max.year)
    m = rng.randint(1, 12)
    d = rng.randint(1, bscal.month_length(y, m, engine=engine))
    return BsDate(y, m, d)


def roundtrip_test(
    engine: str,
    N: int,
    seed: int,
    *,
    reference: Optional[str] = None,
    max_failures: int,
) -> int:
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        d0 = random_bs_date(engine, rng)
        iso = bscal.to_ad(d0, engine=engine)
        back = bscal.to_bs(iso, engine=engine)

        ok = back == d0
        ref_iso = None
        if ok and reference is not None:
            ref_iso = bscal.to_ad(d0, engine=reference)
            ok = ref_iso == iso

        if not ok:
            failures += 1
            print("\nFAIL")
            print("engine:", engine)
            print("d0:", d0)
            print("ad:", iso)
            print("back:", back)
            if ref_iso is not None:
                print(f"ad ({reference}):", ref_iso)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: BS -> AD -> BS.")
    p.add_argument("--engines", type=str, default="nepal,sample", help="Comma-separated engine list.")
    p.add_argument("--reference", type=str, default=None,
                   help="Also require AD results to match this engine (e.g. nepal-walk).")
    p.add_argument("--N", type=int, default=2000, help="Trials per engine.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per engine.")
    args = p.parse_args(argv)

    total_fail = 0
    for eng in parse_engines(args.engines):
        print(f"Testing {eng} ...")
        total_fail += roundtrip_test(
            eng, N=args.N, seed=args.seed, reference=args.reference, max_failures=args.max_failures
        )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
