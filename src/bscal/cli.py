from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from bscal.core.errors import BsCalError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

logger = logging.getLogger(__name__)


def _setup_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


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


def _engine_parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("--engine", default="nepal")
    return p


def cmd_to_ad(argv: list[str]) -> int:
    import bscal

    p = _engine_parser("bscal to-ad", "BS date -> AD date")
    p.add_argument("date", help="BS date, YYYY-MM-DD")
    args = p.parse_args(argv)

    print(bscal.to_ad(args.date, engine=args.engine))
    return 0


def cmd_to_bs(argv: list[str]) -> int:
    import bscal

    p = _engine_parser("bscal to-bs", "AD date -> BS date")
    p.add_argument("date", help="AD date, YYYY-MM-DD")
    args = p.parse_args(argv)

    print(bscal.to_bs(args.date, engine=args.engine))
    return 0


def cmd_add(argv: list[str]) -> int:
    import bscal

    p = _engine_parser("bscal add", "Add a signed number of days to a BS date")
    p.add_argument("date", help="BS date, YYYY-MM-DD")
    p.add_argument("days", type=int, help="days to add (may be negative)")
    args = p.parse_args(argv)

    print(bscal.add_days(args.date, args.days, engine=args.engine))
    return 0


def cmd_diff(argv: list[str]) -> int:
    import bscal

    p = _engine_parser("bscal diff", "Signed number of days from the first BS date to the second")
    p.add_argument("start", help="BS date, YYYY-MM-DD")
    p.add_argument("end", help="BS date, YYYY-MM-DD")
    args = p.parse_args(argv)

    print(bscal.diff_days(args.start, args.end, engine=args.engine))
    return 0


def cmd_today(argv: list[str]) -> int:
    import bscal

    p = _engine_parser("bscal today", "Today's BS date (clamped to the supported range)")
    args = p.parse_args(argv)

    print(bscal.today(engine=args.engine))
    return 0


def cmd_range(argv: list[str]) -> int:
    import bscal

    p = _engine_parser("bscal range", "First and last supported BS dates")
    args = p.parse_args(argv)

    r = bscal.supported_range(engine=args.engine)
    print(f"BS {r.min} .. {r.max}")
    print(f"AD {bscal.to_ad(r.min, engine=args.engine)} .. {bscal.to_ad(r.max, engine=args.engine)}")
    return 0


def cmd_month(argv: list[str]) -> int:
    import bscal
    from bscal.reference.nepal import MONTH_NAMES

    p = _engine_parser("bscal month", "Length and AD bounds of a BS month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    args = p.parse_args(argv)

    b = bscal.month_bounds(args.year, args.month, engine=args.engine, as_date=False)
    name = MONTH_NAMES[args.month - 1]
    print(f"BS {args.year} {name} ({args.month:02d}): {b['days']} days")
    print(f"  first: {b['first']}  = AD {b['first_ad']}")
    print(f"  last : {b['last']}  = AD {b['last_ad']}")
    return 0


def cmd_engines(argv: list[str]) -> int:
    import bscal

    p = argparse.ArgumentParser(prog="bscal engines", description="List registered engines")
    p.parse_args(argv)

    for name in bscal.list_engines():
        info = bscal.engine_info(name)
        lo, hi = info["years"]
        print(f"{name:12s} {info['kind']:8s} BS {lo}-{hi}  anchor {info['anchor_bs']} = AD {info['anchor_ad']}")
    return 0


COMMANDS = {
    "to-ad": cmd_to_ad,
    "to-bs": cmd_to_bs,
    "add": cmd_add,
    "diff": cmd_diff,
    "today": cmd_today,
    "range": cmd_range,
    "month": cmd_month,
    "engines": cmd_engines,
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `bscal YYYY-MM-DD ...` converts a BS date to AD
    if argv and _DATE_RE.match(argv[0]):
        argv = ["to-ad", *argv]

    p = argparse.ArgumentParser(prog="bscal", description="Bikram Sambat <-> Gregorian date toolkit.")
    p.add_argument("-v", "--verbose", action="count", default=0, help="more logging (repeatable)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-ad", help="BS date -> AD date")
    sub.add_parser("to-bs", help="AD date -> BS date")
    sub.add_parser("add", help="Add days to a BS date")
    sub.add_parser("diff", help="Days between two BS dates")
    sub.add_parser("today", help="Today's BS date")
    sub.add_parser("range", help="Supported BS/AD range")
    sub.add_parser("month", help="Length and AD bounds of a BS month")
    sub.add_parser("engines", help="List registered engines")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "table-check", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    try:
        if args.cmd == "diag":
            tool_map = {
                "round-trip": "bscal.diagnostics.round_trip",
                "table-check": "bscal.diagnostics.table_check",
                "year-lengths": "bscal.diagnostics.year_lengths",
            }
            return _run_module_main(tool_map[args.tool], rest)

        return COMMANDS[args.cmd](rest)
    except (BsCalError, KeyError, ValueError) as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        msg = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"bscal: error: {msg}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
