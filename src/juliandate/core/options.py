from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, List, Literal

RegimeRule = Literal["calendar", "decimal_year"]


@dataclass(frozen=True)
class ConversionOptions:
    """
    Knobs of the calendar -> JD direction.

    regime_rule:
        "calendar"      compare (year, month, day) with 1582-10-05.
        "decimal_year"  compare year + (month+1)/12 + day/month_length with
                        REFORM_BOUNDARY_DECIMAL_YEAR. Exact at the boundary,
                        but misfiles e.g. 1581-12-31 (-> 1583.0) as Gregorian.
    julian_milliseconds:
        Add the millisecond field to the time fraction of Julian-calendar
        dates too. The Gregorian branch always includes it.

    The defaults depart from the published formulas, which use the
    decimal-year rule and drop milliseconds on the Julian branch. Use
    LEGACY (get_options("legacy")) to reproduce those formulas exactly.
    """
    regime_rule: RegimeRule = "calendar"
    julian_milliseconds: bool = True

    def __post_init__(self) -> None:
        if self.regime_rule not in ("calendar", "decimal_year"):
            raise ValueError("regime_rule must be 'calendar' or 'decimal_year'")

    def tweak(self, **kwargs) -> "ConversionOptions":
        return replace(self, **kwargs)


STANDARD = ConversionOptions()

# Bit-compatible with the formulas as first published for moment-style values.
LEGACY = ConversionOptions(regime_rule="decimal_year", julian_milliseconds=False)

PRESETS: Dict[str, ConversionOptions] = {
    "standard": STANDARD,
    "legacy": LEGACY,
}


def get_options(name: str) -> ConversionOptions:
    if name not in PRESETS:
        raise KeyError(f"Unknown preset '{name}'. Available: {sorted(PRESETS)}")
    return PRESETS[name]


def list_presets() -> List[str]:
    return sorted(PRESETS.keys())
