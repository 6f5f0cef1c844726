from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^-?\d{4,6}-\d{2}-\d{2}")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _dates_last(argv: list[str]) -> list[str]:
    """Move date tokens behind '--' so BCE dates (-0044-03-15) are not read as options."""
    dates = [a for a in argv if _DATE_RE.match(a)]
    if not dates:
        return argv
    return [a for a in argv if a != "--" and not _DATE_RE.match(a)] + ["--"] + dates


def cmd_to_jd(argv: list[str]) -> int:
    import juliandate

    p = argparse.ArgumentParser(prog="juliandate to-jd", description="Calendar date-time -> Julian Day")
    p.add_argument("date", help="[-]YYYY-MM-DD[THH:MM[:SS[.mmm]]][Z|+HH:MM]; BCE years negative, no year 0")
    p.add_argument("--preset", choices=juliandate.list_presets(), default="standard")
    args = p.parse_args(_dates_last(argv))

    try:
        d = juliandate.CalendarDateTime.parse(args.date)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    r = juliandate.to_jd(d, juliandate.get_options(args.preset))
    if not r.is_defined:
        print(r.message, file=sys.stderr)
        return 2
    print(repr(r.jd))
    return 0


def cmd_from_jd(argv: list[str]) -> int:
    import juliandate

    p = argparse.ArgumentParser(prog="juliandate from-jd", description="Julian Day -> calendar date-time (UTC)")
    p.add_argument("jd", type=float, help="Julian Day, e.g. 2451545.0 (J2000.0)")
    args = p.parse_args(argv)

    try:
        d = juliandate.from_jd(args.jd)
    except juliandate.InvalidJulianDayError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(d.isoformat())
    return 0


def cmd_presets(argv: list[str]) -> int:
    import juliandate

    argparse.ArgumentParser(prog="juliandate presets", description="List conversion presets").parse_args(argv)
    for name in juliandate.list_presets():
        opts = juliandate.get_options(name)
        print(f"{name:<10} regime_rule={opts.regime_rule}  julian_milliseconds={opts.julian_milliseconds}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `juliandate YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        _setup_logging(False)
        return cmd_to_jd(argv)

    p = argparse.ArgumentParser(prog="juliandate", description="Julian Day <-> hybrid Julian/Gregorian calendar.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-jd", help="Calendar date-time -> Julian Day", add_help=False)
    sub.add_parser("from-jd", help="Julian Day -> calendar date-time (UTC)", add_help=False)
    sub.add_parser("presets", help="List conversion presets")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "reform-table", "inverse-check"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "to-jd":
        return cmd_to_jd(rest)

    if args.cmd == "from-jd":
        return cmd_from_jd(rest)

    if args.cmd == "presets":
        return cmd_presets(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "juliandate.diagnostics.round_trip",
            "reform-table": "juliandate.diagnostics.reform_table",
            "inverse-check": "juliandate.diagnostics.inverse_check",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
