"""bscal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_ad,
    to_bs,
    to_date,
    add_days,
    diff_days,
    today,
    supported_range,
    month_length,
    month_bounds,
    list_engines,
    engine_info,
    get_engine,
    make_engine,
    register_engine,
)
from .core.errors import (
    BsCalError,
    CalendarRangeError,
    UnsupportedYearError,
    InvalidMonthError,
    InvalidDayError,
    TableError,
)
from .core.types import BsDate, BsRange, EngineId, EngineSpec, TableSpec

__version__ = "0.1.0"

__all__ = [
    "to_ad",
    "to_bs",
    "to_date",
    "add_days",
    "diff_days",
    "today",
    "supported_range",
    "month_length",
    "month_bounds",
    "list_engines",
    "engine_info",
    "get_engine",
    "make_engine",
    "register_engine",
    "BsCalError",
    "CalendarRangeError",
    "UnsupportedYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "TableError",
    "BsDate",
    "BsRange",
    "EngineId",
    "EngineSpec",
    "TableSpec",
]
