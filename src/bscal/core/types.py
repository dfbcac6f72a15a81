from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Literal, Mapping, Optional, Sequence, Tuple

@dataclass(frozen=True)
class EngineId:
    family: Literal["bs", "custom"]
    name: str
    version: str

@dataclass(frozen=True, order=True)
class BsDate:
    """A Bikram Sambat date. Ordering is (year, month, day) lexicographic."""
    year: int
    month: int
    day: int

    @classmethod
    def parse(cls, s: str) -> "BsDate":
        parts = s.strip().split("-")
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Expected a BS date as YYYY-MM-DD, got {s!r}")
        y, m, d = map(int, parts)
        return cls(y, m, d)

    def replace(self, **kwargs: int) -> "BsDate":
        return replace(self, **kwargs)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class BsRange:
    """Earliest and latest BS dates a table supports (both inclusive)."""
    min: BsDate
    max: BsDate

    def contains(self, d: BsDate) -> bool:
        return self.min <= d <= self.max

    def clamp(self, d: BsDate) -> BsDate:
        if d < self.min:
            return self.min
        if d > self.max:
            return self.max
        return d

@dataclass(frozen=True)
class TableSpec:
    """Pure data payload for constructing a conversion engine."""
    id: EngineId
    anchor_bs: BsDate
    anchor_ad_iso: str
    years: Mapping[int, Sequence[int]]
    meta: Dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class EngineSpec:
    """Top-level wrapper for all engine specifications."""
    kind: Literal["walking", "indexed"]
    id: EngineId
    payload: TableSpec

    def tweak(self, **kwargs: Any) -> "EngineSpec":
        return replace(self, payload=replace(self.payload, **kwargs))

    def with_kind(self, kind: Literal["walking", "indexed"], *, name: Optional[str] = None) -> "EngineSpec":
        new_id = self.id if name is None else replace(self.id, name=name)
        return replace(self, kind=kind, id=new_id, payload=replace(self.payload, id=new_id))

YearRange = Tuple[int, int]
