class JulianDateError(Exception):
    """Base error."""

class UndefinedDateGapError(JulianDateError):
    """Raised when a JD is requested for a date dropped by the 1582 reform."""

class InvalidJulianDayError(JulianDateError, ValueError):
    """Raised when a Julian Day is NaN, infinite or not a real number."""
