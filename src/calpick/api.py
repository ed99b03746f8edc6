from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .core.intents import Intent
from .core.registry import LocaleRegistry
from .core.types import CalendarDate, DatepickerConfig, NavigationState, RenderModel, coerce_date
from .engines.navigator import Navigator
from .locales.locale import Locale

_registry: Optional[LocaleRegistry] = None

def set_registry(reg: LocaleRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> LocaleRegistry:
    if _registry is None:
        raise RuntimeError("Locale registry not initialized")
    return _registry

def _navigator() -> Navigator:
    return Navigator(_reg())

def list_locales() -> List[str]:
    return _reg().list()

def locale_info(key: str) -> Dict[str, Any]:
    return _reg().get(key).info()

def get_locale(key: str) -> Locale:
    return _reg().get(key)

def register_locale(locale: Locale) -> None:
    _reg().register(locale)

def initialize(
    config: Optional[DatepickerConfig] = None,
    *,
    today: Optional[CalendarDate] = None,
) -> Tuple[NavigationState, RenderModel]:
    """Validate `config` and build the initial state and its render model."""
    return _navigator().initialize(config or DatepickerConfig(), today=today)

def dispatch(
    state: NavigationState,
    intent: Intent,
    *,
    today: Optional[CalendarDate] = None,
) -> Tuple[NavigationState, RenderModel]:
    return _navigator().dispatch(state, intent, today=today)

def render(state: NavigationState, *, today: Optional[CalendarDate] = None) -> RenderModel:
    """Rebuild the render model for `state` without a transition."""
    return _navigator().render(state, today=today)

def get_selected_date(state: NavigationState) -> CalendarDate:
    return state.selected

def format_date(d: object, pattern: str = "%Y-%m-%d") -> str:
    """Text for writing a selection back into an input field."""
    return coerce_date(d).to_date().strftime(pattern)
