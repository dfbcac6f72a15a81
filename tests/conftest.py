# tests/conftest.py

import pytest

from bscal.core.time import iso_to_epoch_day
from bscal.core.types import BsDate, EngineId, TableSpec
from bscal.engines.factory import build_engine
from bscal.reference.nepal import BS_MONTH_DAYS

ENGINE_KINDS = ("walking", "indexed")


def small_spec(years, *, anchor_bs=BsDate(2000, 1, 1), anchor_ad_iso="1943-04-14"):
    return TableSpec(
        id=EngineId("custom", "test", "0"),
        anchor_bs=anchor_bs,
        anchor_ad_iso=anchor_ad_iso,
        years={y: BS_MONTH_DAYS[y] for y in years},
    )


class FixedClock:
    """Stands in for the wall clock; ``day`` is a UTC epoch day."""

    def __init__(self, iso: str):
        self.day = iso_to_epoch_day(iso)

    def set(self, iso: str) -> None:
        self.day = iso_to_epoch_day(iso)

    def __call__(self) -> int:
        return self.day


@pytest.fixture(params=ENGINE_KINDS)
def kind(request):
    return request.param


@pytest.fixture
def clock():
    return FixedClock("1943-04-14")


@pytest.fixture
def engine(kind, clock):
    """BS 2000-2005 anchored at BS 2000-01-01 = AD 1943-04-14, short enough to walk."""
    return build_engine(kind, small_spec(range(2000, 2006)), clock=clock)
