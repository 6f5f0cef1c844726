from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from juliandate import CalendarDateTime, from_jd
from juliandate.convert import normalized_provisional


def compare_inverses(
    start_jd: float,
    end_jd: float,
    step: float = 0.25,
) -> List[Tuple[float, CalendarDateTime, CalendarDateTime]]:
    """
    Walk start_jd, start_jd + step, ... up to end_jd and return
    (jd, fractional-day result, from_jd result) where the two differ.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    out = []
    n = int((end_jd - start_jd) / step)
    for i in range(n + 1):
        jd = start_jd + i * step
        frac = normalized_provisional(jd)
        exact = from_jd(jd)
        if frac != exact:
            out.append((jd, frac, exact))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Compare the fractional-day inverse (plus carry pass) with from_jd over a JD range."
    )
    p.add_argument("--start", type=float, default=2305507.5, help="First JD (default 1600-03-01).")
    p.add_argument("--end", type=float, default=2451604.5, help="Last JD (default 2000-03-01).")
    p.add_argument("--step", type=float, default=0.25, help="JD step in days.")
    p.add_argument("--show", type=int, default=10, help="Print at most this many differences.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    diffs = compare_inverses(args.start, args.end, args.step)
    for jd, frac, exact in diffs[: args.show]:
        print(f"{jd:>14.4f}  fractional {frac.isoformat()}  from_jd {exact.isoformat()}")
    print(f"{len(diffs)} differences in [{args.start}, {args.end}] step {args.step}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
