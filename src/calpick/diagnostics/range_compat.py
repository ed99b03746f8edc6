#!/usr/bin/env python3
"""
Compare the legacy range test against the total-order comparison.

The legacy test disabled a day when, for the lower bound,

    (lower.year >= d.year and lower.month > d.month) or
    (same year and month and lower.day > d.day)

and symmetrically for the upper bound. It lets through dates that are
more than a year away from a bound but fall in a "later" month of their
own year. This tool lists every date in a span where the two disagree.
"""

from __future__ import annotations

import argparse
from typing import Iterator, List, Optional, Tuple

from calpick.core.types import CalendarDate
from calpick.engines.constraints import DateRange


def legacy_is_disabled(d: CalendarDate, rng: DateRange) -> bool:
    lo, hi = rng.lower, rng.upper
    if lo is not None and (
        (lo.year >= d.year and lo.month > d.month)
        or (lo.year == d.year and lo.month == d.month and lo.day > d.day)
    ):
        return True
    if hi is not None and (
        (hi.year <= d.year and hi.month < d.month)
        or (hi.year == d.year and hi.month == d.month and hi.day < d.day)
    ):
        return True
    return False


def iter_dates(first: CalendarDate, last: CalendarDate) -> Iterator[CalendarDate]:
    for jdn in range(first.jdn, last.jdn + 1):
        yield CalendarDate.from_jdn(jdn)


def disagreements(rng: DateRange, first: CalendarDate, last: CalendarDate) -> List[Tuple[CalendarDate, bool, bool]]:
    """(date, legacy_enabled, ordered_enabled) for every date where the two differ."""
    out = []
    for d in iter_dates(first, last):
        legacy = not legacy_is_disabled(d, rng)
        ordered = rng.contains(d)
        if legacy != ordered:
            out.append((d, legacy, ordered))
    return out


def _opt_date(s: Optional[str]) -> Optional[CalendarDate]:
    return CalendarDate.parse(s) if s else None


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="calpick diag range-compat",
        description="List dates where the legacy range test and the total-order comparison disagree.",
    )
    p.add_argument("--start", help="lower bound YYYY-MM-DD (default: unbounded)")
    p.add_argument("--end", help="upper bound YYYY-MM-DD (default: unbounded)")
    p.add_argument("--from", dest="span_from", help="first date to test (default: two years before the bounds)")
    p.add_argument("--to", dest="span_to", help="last date to test (default: two years after the bounds)")
    p.add_argument("--limit", type=int, default=20, help="max rows to print (default: 20)")
    args = p.parse_args(argv)

    rng = DateRange(_opt_date(args.start), _opt_date(args.end))
    anchor_lo = rng.lower or rng.upper or CalendarDate.today()
    anchor_hi = rng.upper or rng.lower or CalendarDate.today()
    first = _opt_date(args.span_from) or CalendarDate(anchor_lo.year - 2, 0, 1)
    last = _opt_date(args.span_to) or CalendarDate(anchor_hi.year + 2, 11, 31)

    rows = disagreements(rng, first, last)
    print(f"range {rng.lower or '-inf'} .. {rng.upper or '+inf'}; span {first} .. {last}")
    print(f"{len(rows)} disagreeing dates")
    for d, legacy, ordered in rows[: args.limit]:
        print(f"  {d}  legacy={'enabled' if legacy else 'disabled':8s}  ordered={'enabled' if ordered else 'disabled'}")
    if len(rows) > args.limit:
        print(f"  ... {len(rows) - args.limit} more")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
