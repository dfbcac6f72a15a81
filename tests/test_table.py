# tests/test_table.py

import pytest

from bscal.core.errors import InvalidDayError, InvalidMonthError, TableError, UnsupportedYearError
from bscal.core.types import BsDate, BsRange
from bscal.engines.table import CalendarTable

ROW_2000 = (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31)
ROW_2001 = (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30)


@pytest.fixture
def table():
    return CalendarTable({2001: ROW_2001, 2000: list(ROW_2000)})


def test_month_length(table):
    assert table.month_length(2000, 1) == 30
    assert table.month_length(2001, 12) == 30
    assert table.months(2000) == ROW_2000


def test_month_length_errors(table):
    with pytest.raises(UnsupportedYearError) as exc:
        table.month_length(1999, 1)
    assert exc.value.year == 1999
    for bad in (0, 13, -1):
        with pytest.raises(InvalidMonthError):
            table.month_length(2000, bad)


def test_supported_year_range(table):
    assert table.supported_year_range() == (2000, 2001)
    assert list(table.years()) == [2000, 2001]
    assert len(table) == 2
    assert 2000 in table and 2002 not in table


def test_year_length(table):
    assert table.year_length(2000) == 365
    assert table.year_length(2001) == 365


def test_range(table):
    r = table.range()
    assert r == BsRange(BsDate(2000, 1, 1), BsDate(2001, 12, 30))
    assert r.contains(BsDate(2001, 6, 1))
    assert not r.contains(BsDate(2002, 1, 1))
    assert r.clamp(BsDate(1999, 5, 5)) == BsDate(2000, 1, 1)
    assert r.clamp(BsDate(2005, 5, 5)) == BsDate(2001, 12, 30)
    assert r.clamp(BsDate(2000, 7, 7)) == BsDate(2000, 7, 7)


def test_validate_date(table):
    assert table.validate_date(BsDate(2000, 2, 32)) == BsDate(2000, 2, 32)
    with pytest.raises(InvalidDayError):
        table.validate_date(BsDate(2000, 1, 31))
    with pytest.raises(InvalidDayError):
        table.validate_date(BsDate(2000, 1, 0))


def test_table_is_read_only(table):
    rows = table.as_dict()
    rows[2000] = (1,) * 12
    assert table.months(2000) == ROW_2000


@pytest.mark.parametrize(
    "years",
    [
        {},
        {2000: ROW_2000[:11]},
        {2000: (27,) + ROW_2000[1:]},
        {2000: (33,) + ROW_2000[1:]},
        {2000: (28,) * 12},
        {2000: (32,) * 12},
    ],
)
def test_malformed_tables_rejected(years):
    with pytest.raises(TableError):
        CalendarTable(years)


def test_table_error_is_value_error():
    with pytest.raises(ValueError):
        CalendarTable({})
