# tests/test_api.py

from datetime import date

import pytest

import bscal
from bscal import BsDate
from bscal.core.errors import UnsupportedYearError
from bscal.engines.specs import ALL_SPECS, NEPAL

from conftest import FixedClock


def test_default_engines_registered():
    assert bscal.list_engines() == ["nepal", "nepal-walk", "sample"]
    assert set(bscal.list_engines()) == set(ALL_SPECS)


def test_engine_info():
    info = bscal.engine_info("nepal")
    assert info["kind"] == "indexed"
    assert info["years"] == (2000, 2100)
    assert bscal.engine_info("nepal-walk")["kind"] == "walking"
    assert bscal.engine_info("sample")["anchor_ad"] == "2023-04-14"


def test_string_dates_accepted():
    assert bscal.to_ad("2000-01-01") == "1943-04-14"
    assert bscal.add_days("2000-01-30", 1) == BsDate(2000, 2, 1)
    assert bscal.diff_days("2000-01-01", "2000-01-10") == 9
    assert bscal.to_date("2000-01-01") == date(1943, 4, 14)
    assert bscal.to_bs(date(1943, 4, 14)) == BsDate(2000, 1, 1)


def test_bsdate_parse_and_format():
    d = BsDate.parse("2081-04-07")
    assert d == BsDate(2081, 4, 7)
    assert str(d) == "2081-04-07"
    assert d.replace(day=1) == BsDate(2081, 4, 1)
    for bad in ("2081/04/07", "2081-04", "abcd-ef-gh", ""):
        with pytest.raises(ValueError):
            BsDate.parse(bad)


def test_bsdate_ordering():
    assert BsDate(2080, 12, 30) < BsDate(2081, 1, 1)
    assert BsDate(2080, 2, 1) > BsDate(2080, 1, 32)
    assert sorted([BsDate(2081, 1, 2), BsDate(2080, 5, 5)])[0] == BsDate(2080, 5, 5)


def test_supported_range_and_month_lookups():
    r = bscal.supported_range()
    assert r.min == BsDate(2000, 1, 1)
    assert r.max == BsDate(2100, 12, bscal.month_length(2100, 12))
    assert bscal.month_length(2000, 1) == 30

    b = bscal.month_bounds(2000, 1)
    assert b["days"] == 30
    assert b["first_date"] == date(1943, 4, 14)
    assert b["last_date"] == date(1943, 5, 13)

    b = bscal.month_bounds(2000, 1, as_date=False)
    assert (b["first_ad"], b["last_ad"]) == ("1943-04-14", "1943-05-13")


def test_errors_propagate():
    with pytest.raises(UnsupportedYearError):
        bscal.to_ad(BsDate(1999, 12, 1))
    with pytest.raises(UnsupportedYearError):
        bscal.to_bs("1900-01-01")
    with pytest.raises(bscal.InvalidMonthError):
        bscal.month_length(2000, 13)
    with pytest.raises(bscal.CalendarRangeError):
        bscal.add_days(BsDate(2100, 12, bscal.month_length(2100, 12)), 1)


def test_today_never_raises_on_default_engines():
    for name in bscal.list_engines():
        d = bscal.today(engine=name)
        assert bscal.supported_range(engine=name).contains(d)


def test_unknown_engine():
    with pytest.raises(KeyError):
        bscal.to_ad("2000-01-01", engine="nope")


def test_make_and_register_engine():
    clock = FixedClock("2200-01-01")
    spec = NEPAL.tweak(
        years={2080: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30)},
        anchor_bs=BsDate(2080, 1, 1),
        anchor_ad_iso="2023-04-14",
    )
    eng = bscal.make_engine(spec, clock=clock)
    assert eng.today() == BsDate(2080, 12, 30)

    bscal.register_engine("only-2080", eng)
    try:
        assert bscal.to_bs("2023-04-15", engine="only-2080") == BsDate(2080, 1, 2)
        with pytest.raises(KeyError):
            bscal.register_engine("only-2080", eng)
        bscal.register_engine("only-2080", eng, overwrite=True)
    finally:
        bscal.api._reg()._engines.pop("only-2080", None)


def test_with_kind_renames():
    walk = NEPAL.with_kind("walking", name="x")
    assert walk.kind == "walking"
    assert walk.id.name == "x"
    assert walk.payload.id.name == "x"
    assert NEPAL.id.name == "nepal"


def test_range_errors_share_a_base():
    for cls in (bscal.UnsupportedYearError, bscal.InvalidMonthError, bscal.InvalidDayError):
        assert issubclass(cls, bscal.CalendarRangeError)
    with pytest.raises(bscal.CalendarRangeError):
        bscal.to_ad("2000-01-31")
