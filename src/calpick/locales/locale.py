from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from ..core.errors import ConfigurationError


@dataclass(frozen=True)
class Locale:
    """
    Static naming data for one locale. Day tuples are indexed 0=Sunday.

    `week_start` is the default first column of the day grid; `work_week`
    lists the weekday numbers that are working days.
    """
    key: str
    days: Tuple[str, ...]
    days_short: Tuple[str, ...]
    days_min: Tuple[str, ...]
    months: Tuple[str, ...]
    months_short: Tuple[str, ...]
    today: str
    clear: str
    rtl: bool = False
    week_start: int = 0
    work_week: Tuple[int, ...] = (1, 2, 3, 4, 5)

    def __post_init__(self) -> None:
        for name in ("days", "days_short", "days_min"):
            if len(getattr(self, name)) != 7:
                raise ConfigurationError(f"Locale '{self.key}': {name} must have 7 entries")
        for name in ("months", "months_short"):
            if len(getattr(self, name)) != 12:
                raise ConfigurationError(f"Locale '{self.key}': {name} must have 12 entries")
        if not 0 <= self.week_start <= 6:
            raise ConfigurationError(f"Locale '{self.key}': week_start must be in 0..6")
        if any(not 0 <= d <= 6 for d in self.work_week):
            raise ConfigurationError(f"Locale '{self.key}': work_week entries must be in 0..6")

    def non_working_days(self) -> FrozenSet[int]:
        return frozenset(range(7)) - frozenset(self.work_week)

    def info(self) -> dict:
        return {
            "key": self.key,
            "rtl": self.rtl,
            "week_start": self.week_start,
            "first_day": self.days[self.week_start],
            "today": self.today,
        }
