"""
calpick.engines.grid
--------------------
Builds the cell grids for the three granularities:

    DAY   -> 6 rows x 7 days (plus an optional leading week-number cell)
    MONTH -> 3 rows x 4 months of one year
    YEAR  -> 3 rows x 4 years: one decade with a context year on each end

Grids are plain tuples of `Cell`; nothing here knows about the current
navigation state.
"""

from __future__ import annotations
from typing import AbstractSet, List, Optional, Tuple

from calpick.core.time import decade_start
from calpick.core.types import Anchor, CalendarDate, Cell
from calpick.engines.constraints import DateRange, UNBOUNDED, is_day_selectable
from calpick.locales.locale import Locale

Row = Tuple[Cell, ...]
Grid = Tuple[Row, ...]

DAY_ROWS = 6
GRID_ROWS = 3
GRID_COLS = 4


def grid_start(year: int, month: int, week_start: int) -> CalendarDate:
    """Latest date on or before the 1st of the month that falls on `week_start`."""
    first = CalendarDate(year, month, 1)
    return first.add_days(-((first.weekday - week_start) % 7))

def week_number(d: CalendarDate, year: int) -> int:
    """
    Ordinal week of `d` counted from Jan 1 of `year` (not ISO 8601).

    Rows that start in the previous December give 0 or 1.
    """
    jan1 = CalendarDate(year, 0, 1)
    days = d.jdn - jan1.jdn
    return (days + jan1.weekday + 1 + 6) // 7

def weekday_headers(locale: Locale, week_start: int, *, rtl: bool = False, week_numbers: bool = False) -> Tuple[str, ...]:
    labels = [""] if week_numbers else []
    labels += [locale.days_min[(week_start + i) % 7] for i in range(7)]
    if rtl:
        labels.reverse()
    return tuple(labels)

def build_day_grid(
    year: int,
    month: int,
    *,
    selected: Optional[CalendarDate] = None,
    today: Optional[CalendarDate] = None,
    rng: DateRange = UNBOUNDED,
    disabled_weekdays: AbstractSet[int] = frozenset(),
    week_start: int = 0,
    rtl: bool = False,
    week_numbers: bool = False,
) -> Grid:
    """
    Always 42 days, so the last row carries at least one day of the next month.
    Cell targets are the cells' real dates, adjacent months included.
    """
    d = grid_start(year, month, week_start)
    rows: List[Row] = []
    for _ in range(DAY_ROWS):
        cells: List[Cell] = []
        if week_numbers:
            cells.append(Cell(kind="week", label=str(week_number(d, year))))
        for _ in range(7):
            deco = set()
            if not d.same_month(year, month):
                deco.add("inactive")
            if today is not None and d == today:
                deco.add("today")
            if selected is not None and d == selected:
                deco.add("selected")
            if not is_day_selectable(d, rng, disabled_weekdays):
                deco.add("disabled")
            cells.append(Cell(
                kind="day",
                label=str(d.day),
                decorations=frozenset(deco),
                target=Anchor(d.year, d.month, d.day),
            ))
            d = d.add_days(1)
        if rtl:
            cells.reverse()
        rows.append(tuple(cells))
    return tuple(rows)

def build_month_grid(year: int, locale: Locale, *, selected: Optional[CalendarDate] = None, rtl: bool = False) -> Grid:
    # Months are never disabled individually; only days are.
    rows: List[Row] = []
    for i in range(GRID_ROWS):
        cells: List[Cell] = []
        for j in range(GRID_COLS):
            m = i * GRID_COLS + j
            deco = frozenset({"selected"}) if selected is not None and selected.same_month(year, m) else frozenset()
            cells.append(Cell(kind="month", label=locale.months_short[m], decorations=deco,
                              target=Anchor(year, m), colspan=2))
        if rtl:
            cells.reverse()
        rows.append(tuple(cells))
    return tuple(rows)

def build_year_grid(year: int, *, selected: Optional[CalendarDate] = None, rtl: bool = False) -> Grid:
    """Years start-1 .. start+10; the two outer years belong to the neighbouring decades."""
    start = decade_start(year)
    y = start - 1
    last = start + 10
    rows: List[Row] = []
    for _ in range(GRID_ROWS):
        cells: List[Cell] = []
        for _ in range(GRID_COLS):
            deco = set()
            if selected is not None and selected.year == y:
                deco.add("selected")
            if y in (start - 1, last):
                deco.add("inactive")
            cells.append(Cell(kind="year", label=str(y), decorations=frozenset(deco),
                              target=Anchor(y), colspan=2))
            y += 1
        if rtl:
            cells.reverse()
        rows.append(tuple(cells))
    return tuple(rows)
