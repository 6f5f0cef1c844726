from __future__ import annotations

import argparse
from typing import List, Optional

from juliandate import CalendarDateTime, get_options, list_presets, to_jd
from juliandate.core.time import decimal_year, in_reform_gap, to_astronomical_year


def _fmt_jd(d: CalendarDateTime, preset: str) -> str:
    # no to_jd() call, so listing the gap logs nothing
    if in_reform_gap(to_astronomical_year(d.year), d.month + 1, d.day):
        return "undefined"
    r = to_jd(d, get_options(preset))
    return f"{r.jd:.1f}"


def reform_rows(first: CalendarDateTime, days: int) -> List[CalendarDateTime]:
    """Consecutive calendar labels starting at first (midnight UTC)."""
    out = []
    y, m, d = first.year, first.month, first.day
    for _ in range(days):
        cur = CalendarDateTime(y, m, d)
        out.append(cur)
        d += 1
        if d > cur.days_in_month():
            d = 1
            m += 1
            if m > 11:
                m = 0
                y += 1
                if y == 0:
                    y = 1
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="JDs of the calendar labels around the 1582 reform.")
    p.add_argument("--start", default="1582-09-28", help="First label, YYYY-MM-DD.")
    p.add_argument("--days", type=int, default=45)
    p.add_argument("--presets", default=",".join(list_presets()), help="Comma-separated presets.")
    args = p.parse_args(argv)

    presets = [x.strip() for x in args.presets.split(",") if x.strip()]
    rows = reform_rows(CalendarDateTime.parse(args.start), args.days)

    header = f"{'date':<12}{'decimal year':>20}" + "".join(f"{name:>14}" for name in presets)
    print(header)
    print("-" * len(header))
    for d in rows:
        dy = decimal_year(d.year, d.month, d.day, d.days_in_month())
        cols = "".join(f"{_fmt_jd(d, name):>14}" for name in presets)
        print(f"{d.isoformat()[:10]:<12}{dy:>20.12f}{cols}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
