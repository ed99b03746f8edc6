from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import IntEnum
from typing import TYPE_CHECKING, FrozenSet, Iterator, Literal, Optional, Tuple

from .errors import InvalidInputError
from .time import days_in_month, from_jdn, normalize_ymd, to_jdn, weekday_of_jdn

if TYPE_CHECKING:
    from ..locales.locale import Locale


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    A naive calendar date. `month` is 0-based (0 = January).

    Ordering is numeric on (year, month, day). Instances are always real
    calendar dates; use `normalized` to roll an overflowing triple.
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise InvalidInputError(f"{name} must be an int, got {v!r}")
        if not 0 <= self.month <= 11:
            raise InvalidInputError(f"month must be in 0..11, got {self.month}")
        dim = days_in_month(self.year, self.month)
        if not 1 <= self.day <= dim:
            raise InvalidInputError(
                f"day must be in 1..{dim} for {self.year}-{self.month + 1:02d}, got {self.day}"
            )

    @classmethod
    def normalized(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(*normalize_ymd(year, month, day))

    @classmethod
    def from_jdn(cls, jdn: int) -> "CalendarDate":
        return cls(*from_jdn(jdn))

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month - 1, d.day)

    @classmethod
    def today(cls) -> "CalendarDate":
        return cls.from_date(date.today())

    @classmethod
    def parse(cls, s: str) -> "CalendarDate":
        """Parse YYYY-MM-DD (1-based month, as printed by str())."""
        parts = s.strip().split("-")
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            raise InvalidInputError(f"Expected YYYY-MM-DD, got {s!r}")
        y, m, d = map(int, parts)
        return cls(y, m - 1, d)

    @property
    def jdn(self) -> int:
        return to_jdn(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        """0=Sunday .. 6=Saturday."""
        return weekday_of_jdn(self.jdn)

    @property
    def day_of_year(self) -> int:
        return self.jdn - to_jdn(self.year, 0, 1) + 1

    def add_days(self, n: int) -> "CalendarDate":
        return CalendarDate.from_jdn(self.jdn + n)

    def first_of_month(self) -> "CalendarDate":
        return CalendarDate(self.year, self.month, 1)

    def same_month(self, year: int, month: int) -> bool:
        return self.year == year and self.month == month

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}-{self.day:02d}"


def coerce_date(value: object) -> CalendarDate:
    """Accept a CalendarDate or a datetime.date; anything else is malformed input."""
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, date) and not isinstance(value, datetime):
        return CalendarDate.from_date(value)
    raise InvalidInputError(f"Expected a calendar date, got {value!r}")


class Granularity(IntEnum):
    """Grid resolution. DAY < MONTH < YEAR gives the drill direction."""
    DAY = 0    # month view: days of a month
    MONTH = 1  # year view: months of a year
    YEAR = 2   # decade view: years of a decade

    @property
    def view_name(self) -> str:
        return ("month", "year", "decade")[self]


Decoration = Literal["selected", "today", "inactive", "disabled"]
CellKind = Literal["day", "month", "year", "week"]


@dataclass(frozen=True)
class Anchor:
    """The (year[, month[, day]]) a cell navigates to or selects."""
    year: int
    month: Optional[int] = None
    day: Optional[int] = None

    def to_date(self) -> CalendarDate:
        if self.month is None or self.day is None:
            raise InvalidInputError(f"Anchor {self} does not name a full date")
        return CalendarDate(self.year, self.month, self.day)


@dataclass(frozen=True)
class Cell:
    kind: CellKind
    label: str
    decorations: FrozenSet[str] = frozenset()
    target: Optional[Anchor] = None
    colspan: int = 1

    def has(self, decoration: Decoration) -> bool:
        return decoration in self.decorations


@dataclass(frozen=True)
class RenderModel:
    """Everything a renderer needs to redraw; it never computes dates itself."""
    granularity: Granularity
    header_label: str
    weekday_headers: Tuple[str, ...]
    rows: Tuple[Tuple[Cell, ...], ...]
    total_columns: int
    header_colspan: int
    footer_colspan: int
    drill_up_enabled: bool
    previous_enabled: bool
    next_enabled: bool
    today_label: Optional[str]
    rtl: bool

    def iter_cells(self) -> Iterator[Cell]:
        """Grid cells in display order, week-number cells skipped."""
        for row in self.rows:
            for c in row:
                if c.kind != "week":
                    yield c

    def find(self, target: Anchor) -> Optional[Cell]:
        for c in self.iter_cells():
            if c.target == target:
                return c
        return None


ALL_GRANULARITIES: FrozenSet[Granularity] = frozenset(Granularity)


@dataclass(frozen=True)
class DatepickerConfig:
    """Widget options; resolved and validated once by initialize()."""
    locale: str = "en"
    selected_date: Optional[CalendarDate] = None
    start_date: Optional[CalendarDate] = None   # None = unbounded
    end_date: Optional[CalendarDate] = None     # None = unbounded
    disabled_weekdays: FrozenSet[int] = frozenset()
    week_start: Optional[int] = None            # None = locale default
    initial_granularity: Granularity = Granularity.DAY
    enabled_granularities: FrozenSet[Granularity] = field(default=ALL_GRANULARITIES)
    show_week_numbers: bool = False
    keyboard_enabled: bool = True
    today_button: bool = True
    highlight_today: bool = True

    def tweak(self, **kwargs) -> "DatepickerConfig":
        return replace(self, **kwargs)


@dataclass(frozen=True)
class NavigationState:
    """
    Owned by the navigator; replaced, never mutated, by each transition.

    At YEAR granularity `anchor_year` is the decade middle (decade start + 5).
    `anchor_month` is only meaningful at DAY granularity.
    """
    config: DatepickerConfig
    locale: "Locale"
    granularity: Granularity
    anchor_year: int
    anchor_month: int
    selected: CalendarDate
