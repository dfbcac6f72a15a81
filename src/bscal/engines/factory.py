"""
bscal.engines.factory
---------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations

from typing import Optional

from bscal.core.errors import EngineUnavailableError
from bscal.core.types import EngineSpec, TableSpec
from bscal.engines.calendar import Clock, ConversionEngine
from bscal.engines.indexed import IndexedEngine
from bscal.engines.table import CalendarTable
from bscal.engines.walking import WalkingEngine

ENGINE_KINDS = {
    "walking": WalkingEngine,
    "indexed": IndexedEngine,
}


def build_engine(kind: str, spec: TableSpec, *, clock: Optional[Clock] = None) -> ConversionEngine:
    """Transforms a pure data TableSpec into a live engine of the given kind."""
    if kind not in ENGINE_KINDS:
        raise EngineUnavailableError(f"Unknown engine kind '{kind}'. Available: {sorted(ENGINE_KINDS)}")
    return ENGINE_KINDS[kind](
        spec.id,
        CalendarTable(spec.years),
        spec.anchor_bs,
        spec.anchor_ad_iso,
        clock=clock,
    )


def make_engine(spec: EngineSpec, *, clock: Optional[Clock] = None) -> ConversionEngine:
    """The universal entry point."""
    return build_engine(spec.kind, spec.payload, clock=clock)
