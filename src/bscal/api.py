from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Union

from .core.engine import AdLike, CalendarEngine, EngineRegistry
from .core.types import BsDate, BsRange, EngineSpec
from .engines.calendar import Clock
from .engines.factory import make_engine as _make_engine

DEFAULT_ENGINE = "nepal"

BsLike = Union[BsDate, str]
_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def _bs(d: BsLike) -> BsDate:
    return BsDate.parse(d) if isinstance(d, str) else d

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_engine(engine: str = DEFAULT_ENGINE) -> CalendarEngine:
    return _reg().get(engine)

def make_engine(spec: EngineSpec, *, clock: Optional[Clock] = None) -> CalendarEngine:
    return _make_engine(spec, clock=clock)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def to_ad(d: BsLike, *, engine: str = DEFAULT_ENGINE) -> str:
    """BS date (``BsDate`` or ``"YYYY-MM-DD"``) -> ISO AD date string."""
    return _reg().get(engine).to_ad(_bs(d))

def to_date(d: BsLike, *, engine: str = DEFAULT_ENGINE) -> date:
    return _reg().get(engine).to_date(_bs(d))

def to_bs(ad: AdLike, *, engine: str = DEFAULT_ENGINE) -> BsDate:
    """AD date (ISO string, ``date`` or epoch day) -> BS date."""
    return _reg().get(engine).to_bs(ad)

# ============================================================
# Arithmetic
# ============================================================

def add_days(d: BsLike, n: int, *, engine: str = DEFAULT_ENGINE) -> BsDate:
    return _reg().get(engine).add_days(_bs(d), n)

def diff_days(a: BsLike, b: BsLike, *, engine: str = DEFAULT_ENGINE) -> int:
    """Signed days from a to b."""
    return _reg().get(engine).diff_days(_bs(a), _bs(b))

def today(*, engine: str = DEFAULT_ENGINE) -> BsDate:
    return _reg().get(engine).today()

# ============================================================
# Table lookups
# ============================================================

def supported_range(*, engine: str = DEFAULT_ENGINE) -> BsRange:
    return _reg().get(engine).range

def month_length(year: int, month: int, *, engine: str = DEFAULT_ENGINE) -> int:
    return _reg().get(engine).table.month_length(year, month)

def month_bounds(year: int, month: int, *, engine: str = DEFAULT_ENGINE, as_date: bool = True) -> Dict[str, Any]:
    """First/last BS day of a month with their AD equivalents."""
    eng = _reg().get(engine)
    n = eng.table.month_length(year, month)
    first, last = BsDate(year, month, 1), BsDate(year, month, n)
    out: Dict[str, Any] = {"year": year, "month": month, "days": n, "first": first, "last": last}
    if as_date:
        out["first_date"] = eng.to_date(first)
        out["last_date"] = eng.to_date(last)
    else:
        out["first_ad"] = eng.to_ad(first)
        out["last_ad"] = eng.to_ad(last)
    return out
