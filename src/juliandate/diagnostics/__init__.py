"""Diagnostics package.

- round_trip: random calendar -> JD -> calendar checks (optional residual plot)
- reform_table: JDs around the 1582 Gregorian reform
- inverse_check: fractional-day inverse vs from_jd over a JD range
"""

__all__ = ["round_trip", "reform_table", "inverse_check"]
