from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from typing import Tuple

from ajdcal.ajd import AJD
from ajdcal.core.arith import D
from ajdcal.core.errors import AJDError
from ajdcal.core.offsets import DEFAULT_OFFSET, FixedOffset, parse_offset
from ajdcal.core.types import CivilDateTime

log = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    """'2024-02-29' or '-0044-03-15' (44 BC)."""
    m = _DATE_RE.match(s)
    if not m:
        raise AJDError(f"expected YYYY-MM-DD, got {s!r}")
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _parse_hms(s: str) -> Tuple[int, int, int]:
    m = _TIME_RE.match(s)
    if not m:
        raise AJDError(f"expected HH:MM[:SS], got {s!r}")
    return int(m.group(1)), int(m.group(2)), int(m.group(3) or 0)


def _offset_arg(s: str | None) -> FixedOffset:
    return DEFAULT_OFFSET if s is None else parse_offset(s)


def _value_arg(s: str, offset: FixedOffset) -> AJD:
    """A date (YYYY-MM-DD, local midnight) or a raw Julian Date."""
    if _DATE_RE.match(s):
        return AJD.of(*_parse_ymd(s), offset=offset)
    return AJD.from_jd(s, offset)


def _print_value(v: AJD, offset: FixedOffset) -> None:
    print(f"{v}  ({offset.label()})")


_DIAG_TOOLS = {
    "round-trip": "ajdcal.diagnostics.round_trip",
}


def _run_diagnostic(tool: str, argv: list[str]) -> int:
    """Run ajdcal.diagnostics.<tool>.main, forwarding the leftover CLI args."""
    modpath = _DIAG_TOOLS[tool]
    entry = getattr(importlib.import_module(modpath), "main", None)
    if entry is None:
        raise SystemExit(f"diagnostic {tool!r} ({modpath}) has no main()")
    log.debug("diag %s %s", tool, argv)
    takes_argv = bool(inspect.signature(entry).parameters)
    return int((entry(argv) if takes_argv else entry()) or 0)


def cmd_jd(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="ajdcal jd", description="Civil date/time -> Julian Date")
    p.add_argument("date", help="YYYY-MM-DD (negative year for BC, e.g. -0044-03-15)")
    p.add_argument("time", nargs="?", default="00:00:00", help="HH:MM[:SS] (default 00:00:00)")
    p.add_argument("--offset", default=None, help="UTC offset of the civil fields (default JST)")
    args = p.parse_args(argv)

    offset = _offset_arg(args.offset)
    civil = CivilDateTime(*_parse_ymd(args.date), *_parse_hms(args.time))
    v = AJD.from_civil(civil, offset)
    print(D.canonical(v.jd))
    _print_value(v, offset)
    return 0


def cmd_civil(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="ajdcal civil", description="Julian Date -> civil date/time")
    p.add_argument("jd", help="Julian Date (decimal)")
    p.add_argument("--offset", default=None, help="UTC offset to resolve the civil fields at (default JST)")
    args = p.parse_args(argv)

    offset = _offset_arg(args.offset)
    v = AJD.from_jd(args.jd, offset)
    _print_value(v, offset)
    return 0


def cmd_add(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="ajdcal add", description="Shift a date or Julian Date")
    p.add_argument("value", help="YYYY-MM-DD or Julian Date")
    p.add_argument("--days", default="0", help="Days to add (may be fractional)")
    p.add_argument("--hours", type=int, default=0)
    p.add_argument("--minutes", type=int, default=0)
    p.add_argument("--seconds", type=int, default=0)
    p.add_argument("--offset", default=None, help="UTC offset (default JST)")
    args = p.parse_args(argv)

    offset = _offset_arg(args.offset)
    v = _value_arg(args.value, offset)
    out = (
        v.add_days(args.days)
        .add_hours(args.hours)
        .add_minutes(args.minutes)
        .add_seconds(args.seconds)
    )
    log.debug("add: %s -> %s", v, out)
    _print_value(out, offset)
    return 0


def cmd_now(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="ajdcal now", description="Current time as a Julian Date")
    p.add_argument("--offset", default=None, help="UTC offset (default JST)")
    args = p.parse_args(argv)

    offset = _offset_arg(args.offset)
    _print_value(AJD.now(offset), offset)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="ajdcal", description="Julian Date <-> civil calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("jd", help="Civil date/time -> Julian Date")
    sub.add_parser("civil", help="Julian Date -> civil date/time")
    sub.add_parser("add", help="Add days/hours/minutes/seconds")
    sub.add_parser("now", help="Current time as a Julian Date")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=sorted(_DIAG_TOOLS), help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {"jd": cmd_jd, "civil": cmd_civil, "add": cmd_add, "now": cmd_now}
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            return _run_diagnostic(args.tool, rest)
    except AJDError as e:
        log.error("rejected input: %s", e)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
