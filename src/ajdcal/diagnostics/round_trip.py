from __future__ import annotations

import argparse
import logging
import random

from ajdcal.core.offsets import FixedOffset, parse_offset
from ajdcal.core.rules import is_reform_gap, last_day_of_month
from ajdcal.core.time import civil_to_jd, jd_to_civil
from ajdcal.core.types import CivilDateTime

log = logging.getLogger(__name__)


def random_civil(rng: random.Random, y_min: int, y_max: int) -> CivilDateTime:
    """Uniform random valid civil tuple (no year 0, no reform-gap days)."""
    while True:
        y = rng.randint(y_min, y_max)
        if y == 0:
            continue
        m = rng.randint(1, 12)
        d = rng.randint(1, last_day_of_month(y, m))
        if is_reform_gap(y, m, d):
            continue
        return CivilDateTime(y, m, d, rng.randint(0, 23), rng.randint(0, 59), rng.randint(0, 59))


def roundtrip_test(
    N: int,
    y_min: int,
    y_max: int,
    seed: int,
    offset: FixedOffset,
    *,
    max_failures: int,
) -> int:
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        c0 = random_civil(rng, y_min, y_max)
        jd = civil_to_jd(c0, offset.days)
        c1 = jd_to_civil(jd, offset.days)
        if c1 != c0:
            failures += 1
            print("\nFAIL")
            print("civil in: ", c0)
            print("jd:       ", jd)
            print("civil out:", c1)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: civil -> JD -> civil.")
    p.add_argument("--N", type=int, default=20000, help="Number of trials.")
    p.add_argument("--from-year", type=int, default=-4712, help="First civil year (BC is negative).")
    p.add_argument("--to-year", type=int, default=9999, help="Last civil year.")
    p.add_argument("--offset", type=str, default="JST", help="UTC offset, e.g. +09:00, Z.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    offset = parse_offset(args.offset)
    log.debug("round trip: N=%d years=%d..%d offset=%s", args.N, args.from_year, args.to_year, offset.label())
    failures = roundtrip_test(
        args.N, args.from_year, args.to_year, args.seed, offset, max_failures=args.max_failures
    )

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    raise SystemExit(main())
