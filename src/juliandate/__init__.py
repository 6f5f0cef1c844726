"""juliandate public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .convert import to_jd, from_jd, provisional_from_jd
from .core.errors import JulianDateError, UndefinedDateGapError, InvalidJulianDayError
from .core.options import ConversionOptions, STANDARD, LEGACY, get_options, list_presets
from .core.time import REFORM_BOUNDARY_DECIMAL_YEAR, REFORM_BOUNDARY_JD, JD_J2000
from .core.types import CalendarDateTime, DateTimeLike, JDResult, ProvisionalDate

__all__ = [
    "to_jd",
    "from_jd",
    "provisional_from_jd",
    "CalendarDateTime",
    "DateTimeLike",
    "JDResult",
    "ProvisionalDate",
    "ConversionOptions",
    "STANDARD",
    "LEGACY",
    "get_options",
    "list_presets",
    "JulianDateError",
    "UndefinedDateGapError",
    "InvalidJulianDayError",
    "REFORM_BOUNDARY_DECIMAL_YEAR",
    "REFORM_BOUNDARY_JD",
    "JD_J2000",
]
