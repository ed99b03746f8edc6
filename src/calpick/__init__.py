"""calpick public API.

Keep this surface small: hosts should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    initialize,
    dispatch,
    render,
    get_selected_date,
    list_locales,
    locale_info,
    get_locale,
    register_locale,
    format_date,
)
from .core.errors import CalpickError, ConfigurationError, InvalidInputError
from .core.intents import (
    DrillUp,
    DrillDown,
    StepPrevious,
    StepNext,
    SelectCell,
    KeyboardMove,
    SelectToday,
    SetDate,
    ARROW_DELTAS,
)
from .core.types import (
    Anchor,
    CalendarDate,
    Cell,
    DatepickerConfig,
    Granularity,
    NavigationState,
    RenderModel,
)
from .engines.constraints import DateRange
from .locales.locale import Locale

__all__ = [
    "initialize",
    "dispatch",
    "render",
    "get_selected_date",
    "list_locales",
    "locale_info",
    "get_locale",
    "register_locale",
    "format_date",
    "CalpickError",
    "ConfigurationError",
    "InvalidInputError",
    "DrillUp",
    "DrillDown",
    "StepPrevious",
    "StepNext",
    "SelectCell",
    "KeyboardMove",
    "SelectToday",
    "SetDate",
    "ARROW_DELTAS",
    "Anchor",
    "CalendarDate",
    "Cell",
    "DatepickerConfig",
    "Granularity",
    "NavigationState",
    "RenderModel",
    "DateRange",
    "Locale",
]
