from __future__ import annotations
from typing import Tuple

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian (year, month 0-11, day) to a Julian Day Number."""
    m1 = month + 1
    a = (14 - m1) // 12
    y2 = year + 4800 - a
    m2 = m1 + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn; returns (year, month 0-11, day)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month - 1, day

def weekday_of_jdn(jdn: int) -> int:
    # 0=Sun..6=Sat
    return (jdn + 1) % 7

def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def days_in_month(year: int, month: int) -> int:
    if not 0 <= month <= 11:
        raise ValueError(f"month must be in 0..11, got {month}")
    if month == 1 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]

def normalize_ymd(year: int, month: int, day: int) -> Tuple[int, int, int]:
    """
    Roll an overflowing (year, month, day) through real month/year boundaries.

    Month 12 is January of the next year, day 0 is the last day of the
    previous month, and so on, in the manner of a native Date rollover.
    """
    year += month // 12
    month %= 12
    return from_jdn(to_jdn(year, month, 1) + day - 1)

def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move a (year, month 0-11) anchor by delta months."""
    total = year * 12 + month + delta
    return total // 12, total % 12

def decade_start(year: int) -> int:
    return year - year % 10
