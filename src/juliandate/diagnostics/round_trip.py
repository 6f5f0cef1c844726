from __future__ import annotations

import argparse
import random
from typing import List, Tuple

from juliandate import CalendarDateTime, from_jd, get_options, list_presets, to_jd
from juliandate.core.time import in_reform_gap, to_astronomical_year


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "juliandate[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "juliandate[diagnostics]"') from e


def random_datetime(rng: random.Random, start_year: int, end_year: int) -> CalendarDateTime:
    """Uniform year/month, uniform valid day, uniform time; skips year 0 and the reform gap."""
    while True:
        year = rng.randint(start_year, end_year)
        if year == 0:
            continue
        month = rng.randint(0, 11)
        length = CalendarDateTime(year, month, 1).days_in_month()
        day = rng.randint(1, length)
        if in_reform_gap(to_astronomical_year(year), month + 1, day):
            continue
        return CalendarDateTime(
            year, month, day,
            rng.randint(0, 23), rng.randint(0, 59), rng.randint(0, 59), rng.randint(0, 999),
        )


def roundtrip_test(
    N: int,
    start_year: int,
    end_year: int,
    seed: int,
    *,
    preset: str = "standard",
    max_failures: int = 5,
) -> Tuple[int, List[float], List[float]]:
    """Returns (failures, jds, residuals in ms)."""
    rng = random.Random(seed)
    options = get_options(preset)
    failures = 0
    jds: List[float] = []
    resid: List[float] = []

    for _ in range(N):
        d0 = random_datetime(rng, start_year, end_year)
        jd = to_jd(d0, options).unwrap()
        back = from_jd(jd)
        jds.append(jd)
        resid.append((to_jd(back).unwrap() - jd) * 86_400_000)

        if back != d0:
            failures += 1
            print("\nFAIL")
            print("preset:", preset)
            print("d0:  ", d0)
            print("jd:  ", repr(jd))
            print("back:", back)
            if failures >= max_failures:
                break

    return failures, jds, resid


def plot_residuals(jds: List[float], resid: List[float], out: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()

    x = np.asarray(jds)
    y = np.asarray(resid)
    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=4, color="tab:blue", linewidths=0.0)
    ax.set_xlabel("JD")
    ax.set_ylabel("JD(calendar(JD)) - JD  [ms]")
    ax.set_title("Calendar round-trip residuals")
    fig.savefig(out, dpi=150)
    plt.close(fig)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: calendar -> JD -> calendar.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start-year", type=int, default=-4712, help="First year (no year zero).")
    p.add_argument("--end-year", type=int, default=3000, help="Last year.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--preset", choices=list_presets(), default="standard")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    p.add_argument("--plot", default=None, help="Write a residual plot to this path (needs numpy, matplotlib).")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    print(f"Testing {args.N} dates in {args.start_year}..{args.end_year} ({args.preset}) ...")
    failures, jds, resid = roundtrip_test(
        args.N, args.start_year, args.end_year, args.seed,
        preset=args.preset, max_failures=args.max_failures,
    )

    if args.plot:
        plot_residuals(jds, resid, args.plot)
        print(f"Wrote {args.plot}")

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
