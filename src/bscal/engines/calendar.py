"""
bscal.engines.calendar
----------------------
The orchestrator. Binds a CalendarTable to one anchor correspondence
(a BS date and the AD epoch day it falls on) and exposes the public
conversion and day-arithmetic operations.

Everything is expressed through a signed day offset from the anchor.
Subclasses only decide how an offset is computed from a BS date and back.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, Optional, Tuple

from bscal.core.engine import AdLike
from bscal.core.time import clamp, epoch_day_to_date, epoch_day_to_iso, to_epoch_day, utc_today_epoch_day
from bscal.core.types import BsDate, BsRange, EngineId
from bscal.engines.table import CalendarTable

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


class ConversionEngine:
    """
    Base engine. Subclasses implement ``to_offset`` and ``from_offset``;
    every other operation is defined in terms of those two.
    """
    kind = "abstract"

    def __init__(
        self,
        id: EngineId,
        table: CalendarTable,
        anchor_bs: BsDate,
        anchor_ad: AdLike,
        *,
        clock: Optional[Clock] = None,
    ):
        self.id = id
        self.table = table
        self.anchor_bs = table.validate_date(anchor_bs)
        self.anchor_ad = to_epoch_day(anchor_ad)
        self.clock: Clock = clock if clock is not None else utc_today_epoch_day
        # contiguous block of table years containing the anchor
        lo = hi = self.anchor_bs.year
        while table.has_year(lo - 1):
            lo -= 1
        while table.has_year(hi + 1):
            hi += 1
        self.lo, self.hi = lo, hi
        self._ad_span: Optional[Tuple[int, int]] = None
        logger.debug(
            "built %s engine %s: anchor BS %s = AD %s, years %s..%s",
            self.kind, self.id.name, self.anchor_bs, epoch_day_to_iso(self.anchor_ad),
            *table.supported_year_range(),
        )

    # ---------------------------------------------------------
    # Offset primitives (implemented by subclasses)
    # ---------------------------------------------------------

    def to_offset(self, d: BsDate) -> int:
        """Signed day count from the anchor to d."""
        raise NotImplementedError

    def from_offset(self, offset: int) -> BsDate:
        """BS date lying ``offset`` days from the anchor."""
        raise NotImplementedError

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def to_epoch_day(self, d: BsDate) -> int:
        return self.anchor_ad + self.to_offset(d)

    def to_ad(self, d: BsDate) -> str:
        """BS date -> ISO ``YYYY-MM-DD`` AD string."""
        return epoch_day_to_iso(self.to_epoch_day(d))

    def to_date(self, d: BsDate) -> date:
        return epoch_day_to_date(self.to_epoch_day(d))

    def to_bs(self, ad: AdLike) -> BsDate:
        """AD date (epoch day, ``date`` or ISO string) -> BS date."""
        return self.from_offset(to_epoch_day(ad) - self.anchor_ad)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add_days(self, d: BsDate, n: int) -> BsDate:
        return self.to_bs(self.to_epoch_day(d) + n)

    def diff_days(self, a: BsDate, b: BsDate) -> int:
        """Signed number of days from a to b."""
        return self.to_offset(b) - self.to_offset(a)

    # ---------------------------------------------------------
    # Range and "today"
    # ---------------------------------------------------------

    @property
    def range(self) -> BsRange:
        return self.table.range()

    @property
    def reach(self) -> BsRange:
        """First and last BS dates reachable from the anchor without crossing a gap."""
        return BsRange(
            min=BsDate(self.lo, 1, 1),
            max=BsDate(self.hi, 12, self.table.month_length(self.hi, 12)),
        )

    def ad_span(self) -> Tuple[int, int]:
        """Epoch days of the first and last dates in ``reach``."""
        if self._ad_span is None:
            r = self.reach
            self._ad_span = (self.to_epoch_day(r.min), self.to_epoch_day(r.max))
        return self._ad_span

    def today(self) -> BsDate:
        """
        Today's BS date. If the clock falls outside the anchor's reach, returns
        the nearest boundary date of that reach instead of raising.
        """
        now = self.clock()
        lo, hi = self.ad_span()
        day = clamp(now, lo, hi)
        if day != now:
            logger.debug("today: epoch day %d outside [%d, %d], clamped to %d", now, lo, hi, day)
        return self.to_bs(day)

    def info(self) -> Dict[str, Any]:
        lo, hi = self.table.supported_year_range()
        return {
            "id": self.id.__dict__,
            "kind": self.kind,
            "anchor_bs": str(self.anchor_bs),
            "anchor_ad": epoch_day_to_iso(self.anchor_ad),
            "years": (lo, hi),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id.name!r}, anchor={self.anchor_bs})"
