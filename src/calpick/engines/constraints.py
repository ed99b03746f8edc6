"""
calpick.engines.constraints
---------------------------
Selectability rules. Bounds are compared as whole (year, month, day) values,
so a date is rejected whenever it lies before the lower or after the upper
bound, however many months or years separate them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import AbstractSet, Optional

from calpick.core.time import days_in_month, decade_start
from calpick.core.types import CalendarDate


@dataclass(frozen=True)
class DateRange:
    """Inclusive bounds; None on either side means unbounded."""
    lower: Optional[CalendarDate] = None
    upper: Optional[CalendarDate] = None

    @property
    def is_inverted(self) -> bool:
        return self.lower is not None and self.upper is not None and self.lower > self.upper

    def contains(self, d: CalendarDate) -> bool:
        if self.lower is not None and d < self.lower:
            return False
        if self.upper is not None and d > self.upper:
            return False
        return True

    def overlaps(self, first: CalendarDate, last: CalendarDate) -> bool:
        """True if any day of the closed span [first, last] is inside the range."""
        if self.upper is not None and first > self.upper:
            return False
        if self.lower is not None and last < self.lower:
            return False
        return True


UNBOUNDED = DateRange()


def is_day_selectable(d: CalendarDate, rng: DateRange, disabled_weekdays: AbstractSet[int] = frozenset()) -> bool:
    if d.weekday in disabled_weekdays:
        return False
    return rng.contains(d)

def is_month_in_range(year: int, month: int, rng: DateRange) -> bool:
    first = CalendarDate(year, month, 1)
    last = CalendarDate(year, month, days_in_month(year, month))
    return rng.overlaps(first, last)

def is_year_in_range(year: int, rng: DateRange) -> bool:
    return rng.overlaps(CalendarDate(year, 0, 1), CalendarDate(year, 11, 31))

def is_decade_in_range(year: int, rng: DateRange) -> bool:
    start = decade_start(year)
    return rng.overlaps(CalendarDate(start, 0, 1), CalendarDate(start + 9, 11, 31))
