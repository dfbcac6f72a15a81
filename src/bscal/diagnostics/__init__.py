"""Diagnostics package.

- round_trip, table_check: always available, no extra dependencies
- year_lengths: optional (requires the ``diagnostics`` extra: numpy, matplotlib)
"""

__all__ = ["round_trip", "table_check", "year_lengths"]
