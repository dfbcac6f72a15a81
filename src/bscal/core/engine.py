from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol, Union

from .types import BsDate, BsRange

AdLike = Union[int, str, date]

class CalendarEngine(Protocol):
    table: Any  # CalendarTable
    def info(self) -> Dict[str, Any]: ...
    @property
    def range(self) -> BsRange: ...
    def to_offset(self, d: BsDate) -> int: ...
    def from_offset(self, offset: int) -> BsDate: ...
    def to_epoch_day(self, d: BsDate) -> int: ...
    def to_ad(self, d: BsDate) -> str: ...
    def to_date(self, d: BsDate) -> date: ...
    def to_bs(self, ad: AdLike) -> BsDate: ...
    def add_days(self, d: BsDate, n: int) -> BsDate: ...
    def diff_days(self, a: BsDate, b: BsDate) -> int: ...
    def today(self) -> BsDate: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
