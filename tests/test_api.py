# tests/test_api.py

from datetime import date
from unittest.mock import patch

import pytest

import calpick
from calpick import CalendarDate, DatepickerConfig, Granularity
from calpick.bootstrap import build_registry
from calpick.core.errors import ConfigurationError
from calpick.locales.locale import Locale
from calpick.locales.standard import EN

D = CalendarDate


@pytest.fixture
def fixed_today():
    """Pin CalendarDate.today() so default-today code paths are deterministic."""
    with patch.object(CalendarDate, "today", return_value=D(2024, 1, 14)) as mock:
        yield mock


def test_initialize_defaults_to_today(fixed_today):
    state, model = calpick.initialize()
    assert calpick.get_selected_date(state) == D(2024, 1, 14)
    assert model.granularity == Granularity.DAY
    assert model.header_label == "February 2024"
    assert model.find(calpick.Anchor(2024, 1, 14)).decorations == frozenset({"selected", "today"})

def test_dispatch_and_render(fixed_today):
    state, _ = calpick.initialize(DatepickerConfig(selected_date=D(2024, 0, 29)))
    state, model = calpick.dispatch(state, calpick.KeyboardMove(calpick.ARROW_DELTAS["down"]))
    assert calpick.get_selected_date(state) == D(2024, 1, 5)
    assert calpick.render(state) == model

def test_config_dates_accept_datetime_date(fixed_today):
    state, _ = calpick.initialize(DatepickerConfig(selected_date=date(2024, 3, 1), end_date=date(2024, 12, 31)))
    assert state.selected == D(2024, 2, 1)
    assert state.config.end_date == D(2024, 11, 31)

@pytest.mark.parametrize("cfg", [
    DatepickerConfig(locale="xx"),
    DatepickerConfig(start_date=D(2024, 5, 2), end_date=D(2024, 5, 1)),
    DatepickerConfig(initial_granularity=Granularity.YEAR,
                     enabled_granularities=frozenset({Granularity.DAY, Granularity.MONTH})),
    DatepickerConfig(enabled_granularities=frozenset()),
    DatepickerConfig(week_start=7),
    DatepickerConfig(disabled_weekdays=frozenset({0, 7})),
    DatepickerConfig(selected_date="2024-01-01"),
    DatepickerConfig(enabled_granularities=frozenset({"day"})),
])
def test_configuration_errors(cfg, fixed_today):
    with pytest.raises(ConfigurationError):
        calpick.initialize(cfg)

def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(ConfigurationError, calpick.CalpickError)

def test_equal_bounds_are_valid(fixed_today):
    state, model = calpick.initialize(DatepickerConfig(start_date=D(2024, 5, 1), end_date=D(2024, 5, 1)))
    assert state.selected == D(2024, 5, 1)
    enabled = [c.target for c in model.iter_cells() if not c.has("disabled")]
    assert enabled == [calpick.Anchor(2024, 5, 1)]

def test_locales_listing():
    keys = calpick.list_locales()
    assert {"en", "de", "fr", "es", "he", "ar"} <= set(keys)
    assert keys == sorted(keys)
    info = calpick.locale_info("ar")
    assert info["rtl"] is True
    assert info["week_start"] == 6
    with pytest.raises(ConfigurationError):
        calpick.locale_info("xx")

def test_standard_locale_tables_are_complete():
    for key in calpick.list_locales():
        loc = calpick.get_locale(key)
        assert len(loc.days) == len(loc.days_short) == len(loc.days_min) == 7
        assert len(loc.months) == len(loc.months_short) == 12

def test_registry_is_read_only_for_existing_keys():
    reg = build_registry()
    with pytest.raises(ConfigurationError):
        reg.register(EN)
    custom = Locale(
        key="en-x",
        days=EN.days, days_short=EN.days_short, days_min=EN.days_min,
        months=EN.months, months_short=EN.months_short,
        today="Now", clear="Reset", week_start=1,
    )
    reg.register(custom)
    assert reg.get("en-x").today == "Now"
    assert "en-x" not in calpick.list_locales()

def test_malformed_locale_rejected():
    with pytest.raises(ConfigurationError):
        Locale(key="bad", days=EN.days[:6], days_short=EN.days_short, days_min=EN.days_min,
               months=EN.months, months_short=EN.months_short, today="t", clear="c")
    with pytest.raises(ConfigurationError):
        Locale(key="bad", days=EN.days, days_short=EN.days_short, days_min=EN.days_min,
               months=EN.months, months_short=EN.months_short, today="t", clear="c", week_start=9)

def test_non_working_days_as_disabled_weekdays(fixed_today):
    he = calpick.get_locale("he")
    assert he.non_working_days() == frozenset({5, 6})
    assert EN.non_working_days() == frozenset({0, 6})
    _, model = calpick.initialize(DatepickerConfig(disabled_weekdays=EN.non_working_days()))
    saturday = model.find(calpick.Anchor(2024, 1, 17))
    assert saturday.has("disabled")

def test_rtl_locale_model(fixed_today):
    _, model = calpick.initialize(DatepickerConfig(locale="ar", selected_date=D(2024, 1, 15)))
    assert model.rtl
    assert model.today_label == "اليوم"
    # Saturday start, reversed: the first (rightmost) column is last in the tuple
    assert model.weekday_headers[-1] == "س"
    assert model.rows[0][-1].target == calpick.Anchor(2024, 0, 27)

def test_format_date():
    assert calpick.format_date(D(2024, 1, 5)) == "2024-02-05"
    assert calpick.format_date(D(2024, 1, 5), "%d.%m.%Y") == "05.02.2024"
    assert calpick.format_date(date(2024, 2, 5), "%b %d") == "Feb 05"
