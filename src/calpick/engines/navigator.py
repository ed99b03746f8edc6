"""
calpick.engines.navigator
-------------------------
The navigation state machine. A pure reducer over (state, intent): every
transition returns a new NavigationState together with a freshly built
RenderModel. Intents that cannot apply (drilling past the decade view,
clicking a disabled day, moving the keyboard selection out of range) leave
the state unchanged; they are not errors.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Tuple

from calpick.core.errors import ConfigurationError, InvalidInputError
from calpick.core.intents import (
    DrillDown,
    DrillUp,
    Intent,
    KeyboardMove,
    SelectCell,
    SelectToday,
    SetDate,
    StepNext,
    StepPrevious,
)
from calpick.core.registry import LocaleRegistry
from calpick.core.time import decade_start, shift_month
from calpick.core.types import (
    Anchor,
    CalendarDate,
    DatepickerConfig,
    Granularity,
    NavigationState,
    RenderModel,
    coerce_date,
)
from calpick.engines.constraints import (
    DateRange,
    is_day_selectable,
    is_decade_in_range,
    is_month_in_range,
    is_year_in_range,
)
from calpick.engines.grid import build_day_grid, build_month_grid, build_year_grid, weekday_headers
from calpick.locales.locale import Locale

logger = logging.getLogger(__name__)

KEYBOARD_DELTAS = (-7, -1, 1, 7)


def decade_middle(year: int) -> int:
    return decade_start(year) + 5

def date_range(config: DatepickerConfig) -> DateRange:
    return DateRange(config.start_date, config.end_date)

def _config_date(name: str, value: object) -> Optional[CalendarDate]:
    if value is None:
        return None
    try:
        return coerce_date(value)
    except InvalidInputError as e:
        raise ConfigurationError(f"{name}: {e}") from e

def resolve_config(config: DatepickerConfig, registry: LocaleRegistry) -> Tuple[DatepickerConfig, Locale]:
    """Validate `config` and fill in locale defaults. Raises ConfigurationError."""
    locale = registry.get(config.locale)

    selected = _config_date("selected_date", config.selected_date)
    start = _config_date("start_date", config.start_date)
    end = _config_date("end_date", config.end_date)
    if start is not None and end is not None and start > end:
        raise ConfigurationError(f"start_date {start} is after end_date {end}")

    week_start = locale.week_start if config.week_start is None else config.week_start
    if not isinstance(week_start, int) or not 0 <= week_start <= 6:
        raise ConfigurationError(f"week_start must be in 0..6, got {week_start!r}")

    disabled = frozenset(config.disabled_weekdays)
    bad = [d for d in disabled if not isinstance(d, int) or not 0 <= d <= 6]
    if bad:
        raise ConfigurationError(f"disabled_weekdays must be in 0..6, got {sorted(bad)}")

    try:
        enabled = frozenset(Granularity(g) for g in config.enabled_granularities)
        initial = Granularity(config.initial_granularity)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
    if not enabled:
        raise ConfigurationError("enabled_granularities must not be empty")
    if initial not in enabled:
        raise ConfigurationError(
            f"initial_granularity {initial.name} is not among the enabled granularities "
            f"{sorted(g.name for g in enabled)}"
        )

    resolved = config.tweak(
        selected_date=selected,
        start_date=start,
        end_date=end,
        week_start=week_start,
        disabled_weekdays=disabled,
        enabled_granularities=enabled,
        initial_granularity=initial,
    )
    return resolved, locale


class Navigator:
    """Builds initial states from configuration and applies intents to them."""

    def __init__(self, registry: LocaleRegistry):
        self.registry = registry

    # ---------------------------------------------------------
    # Entry points
    # ---------------------------------------------------------

    def initialize(
        self, config: DatepickerConfig, *, today: Optional[CalendarDate] = None
    ) -> Tuple[NavigationState, RenderModel]:
        cfg, locale = resolve_config(config, self.registry)
        today = today or CalendarDate.today()

        # an explicit selection wins over the range start, which wins over today
        selected = cfg.selected_date or cfg.start_date or today

        anchor_year = selected.year
        if cfg.initial_granularity == Granularity.YEAR:
            anchor_year = decade_middle(anchor_year)
        state = NavigationState(
            config=cfg,
            locale=locale,
            granularity=cfg.initial_granularity,
            anchor_year=anchor_year,
            anchor_month=selected.month,
            selected=selected,
        )
        return state, self.render(state, today=today)

    def dispatch(
        self, state: NavigationState, intent: Intent, *, today: Optional[CalendarDate] = None
    ) -> Tuple[NavigationState, RenderModel]:
        today = today or CalendarDate.today()
        if isinstance(intent, DrillUp):
            new = self._drill_up(state)
        elif isinstance(intent, DrillDown):
            new = self._drill_down(state, intent.target)
        elif isinstance(intent, StepPrevious):
            new = self._step(state, -1)
        elif isinstance(intent, StepNext):
            new = self._step(state, 1)
        elif isinstance(intent, SelectCell):
            new = self._select_cell(state, coerce_date(intent.date))
        elif isinstance(intent, KeyboardMove):
            new = self._keyboard_move(state, intent.delta)
        elif isinstance(intent, SelectToday):
            new = self._show_date(state, today)
        elif isinstance(intent, SetDate):
            new = self._show_date(state, coerce_date(intent.date))
        else:
            raise InvalidInputError(f"Unknown intent: {intent!r}")
        return new, self.render(new, today=today)

    # ---------------------------------------------------------
    # Transitions
    # ---------------------------------------------------------

    def _drill_up(self, state: NavigationState) -> NavigationState:
        if state.granularity == Granularity.YEAR:
            logger.debug("Ignoring drill-up: decade view is the coarsest")
            return state
        coarser = Granularity(state.granularity + 1)
        if coarser not in state.config.enabled_granularities:
            logger.debug("Ignoring drill-up: %s view is disabled", coarser.view_name)
            return state
        if coarser == Granularity.MONTH:
            return replace(state, granularity=coarser)
        return replace(state, granularity=coarser, anchor_year=decade_middle(state.anchor_year))

    def _drill_down(self, state: NavigationState, target: Anchor) -> NavigationState:
        if state.granularity == Granularity.DAY:
            return self._select_cell(state, target.to_date())
        if state.granularity == Granularity.YEAR:
            return replace(state, granularity=Granularity.MONTH, anchor_year=target.year)
        if target.month is None or not 0 <= target.month <= 11:
            raise InvalidInputError(f"Drilling into a month needs a month in 0..11, got {target}")
        return replace(state, granularity=Granularity.DAY, anchor_year=target.year, anchor_month=target.month)

    def _step(self, state: NavigationState, direction: int) -> NavigationState:
        if state.granularity == Granularity.DAY:
            y, m = shift_month(state.anchor_year, state.anchor_month, direction)
            return replace(state, anchor_year=y, anchor_month=m)
        if state.granularity == Granularity.MONTH:
            return replace(state, anchor_year=state.anchor_year + direction)
        return replace(state, anchor_year=decade_middle(state.anchor_year) + 10 * direction)

    def _select_cell(self, state: NavigationState, d: CalendarDate) -> NavigationState:
        if state.granularity != Granularity.DAY:
            logger.debug("Ignoring day selection outside the month view")
            return state
        cfg = state.config
        if not is_day_selectable(d, date_range(cfg), cfg.disabled_weekdays):
            logger.debug("Ignoring selection of disabled day %s", d)
            return state
        if d.same_month(state.anchor_year, state.anchor_month):
            return replace(state, selected=d)
        logger.debug("Re-anchoring to %04d-%02d for %s", d.year, d.month + 1, d)
        return replace(state, selected=d, anchor_year=d.year, anchor_month=d.month)

    def _keyboard_move(self, state: NavigationState, delta: int) -> NavigationState:
        if delta not in KEYBOARD_DELTAS:
            raise InvalidInputError(f"Keyboard delta must be one of {KEYBOARD_DELTAS}, got {delta!r}")
        if not state.config.keyboard_enabled or state.granularity != Granularity.DAY:
            logger.debug("Ignoring keyboard move")
            return state
        if state.locale.rtl and abs(delta) == 1:
            delta = -delta
        # Only the range bounds gate the keyboard; disabled weekdays do not.
        candidate = state.selected.add_days(delta)
        if not date_range(state.config).contains(candidate):
            logger.debug("Ignoring keyboard move to %s: out of range", candidate)
            return state
        return self._show_date(state, candidate)

    def _show_date(self, state: NavigationState, d: CalendarDate) -> NavigationState:
        return replace(state, selected=d, granularity=Granularity.DAY, anchor_year=d.year, anchor_month=d.month)

    # ---------------------------------------------------------
    # Render model
    # ---------------------------------------------------------

    def render(self, state: NavigationState, *, today: Optional[CalendarDate] = None) -> RenderModel:
        cfg = state.config
        loc = state.locale
        rng = date_range(cfg)
        enabled = cfg.enabled_granularities
        today = today or CalendarDate.today()
        y = state.anchor_year

        if state.granularity == Granularity.DAY:
            m = state.anchor_month
            rows = build_day_grid(
                y, m,
                selected=state.selected,
                today=today if cfg.highlight_today else None,
                rng=rng,
                disabled_weekdays=cfg.disabled_weekdays,
                week_start=cfg.week_start,
                rtl=loc.rtl,
                week_numbers=cfg.show_week_numbers,
            )
            header = f"{loc.months[m]} {y}"
            headers = weekday_headers(loc, cfg.week_start, rtl=loc.rtl, week_numbers=cfg.show_week_numbers)
            total = 8 if cfg.show_week_numbers else 7
            previous_enabled = is_month_in_range(*shift_month(y, m, -1), rng)
            next_enabled = is_month_in_range(*shift_month(y, m, 1), rng)
            drill_up = Granularity.MONTH in enabled
        elif state.granularity == Granularity.MONTH:
            rows = build_month_grid(y, loc, selected=state.selected, rtl=loc.rtl)
            header = str(y)
            headers = ()
            total = 8
            previous_enabled = is_year_in_range(y - 1, rng)
            next_enabled = is_year_in_range(y + 1, rng)
            drill_up = Granularity.YEAR in enabled
        else:
            start = decade_start(y)
            rows = build_year_grid(y, selected=state.selected, rtl=loc.rtl)
            header = f"{start} - {start + 9}"
            headers = ()
            total = 8
            previous_enabled = is_decade_in_range(start - 10, rng)
            next_enabled = is_decade_in_range(start + 10, rng)
            drill_up = False

        return RenderModel(
            granularity=state.granularity,
            header_label=header,
            weekday_headers=headers,
            rows=rows,
            total_columns=total,
            header_colspan=total - 2,
            footer_colspan=total,
            drill_up_enabled=drill_up,
            previous_enabled=previous_enabled,
            next_enabled=next_enabled,
            today_label=loc.today if cfg.today_button else None,
            rtl=loc.rtl,
        )
