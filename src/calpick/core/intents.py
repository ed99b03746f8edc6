"""
calpick.core.intents
--------------------
The closed set of user intents a host forwards into the navigator.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Union

from .types import Anchor, CalendarDate


@dataclass(frozen=True)
class DrillUp:
    """View-mode button: days -> months -> years."""


@dataclass(frozen=True)
class DrillDown:
    """A grid cell was activated. At DAY granularity this selects the cell's date."""
    target: Anchor


@dataclass(frozen=True)
class StepPrevious:
    pass


@dataclass(frozen=True)
class StepNext:
    pass


@dataclass(frozen=True)
class SelectCell:
    date: CalendarDate


@dataclass(frozen=True)
class KeyboardMove:
    """
    Arrow-key move of the selection, in screen terms: -1 is left, +1 right,
    -7 up, +7 down. Left/right are mirrored for right-to-left locales.
    """
    delta: int


@dataclass(frozen=True)
class SelectToday:
    pass


@dataclass(frozen=True)
class SetDate:
    date: object  # CalendarDate | datetime.date, validated on dispatch


Intent = Union[DrillUp, DrillDown, StepPrevious, StepNext, SelectCell, KeyboardMove, SelectToday, SetDate]

ARROW_DELTAS: Dict[str, int] = {"left": -1, "up": -7, "right": 1, "down": 7}
