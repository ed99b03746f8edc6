# tests/test_cli.py

import pytest

from calpick.cli import main, parse_intent
from calpick.core.intents import DrillDown, KeyboardMove, SelectCell, StepPrevious
from calpick.core.types import Anchor, CalendarDate
from calpick.diagnostics.range_compat import disagreements, legacy_is_disabled
from calpick.engines.constraints import DateRange

D = CalendarDate


def test_show_month(capsys):
    assert main(["show", "--date", "2024-02-15", "--today", "2024-02-14"]) == 0
    out = capsys.readouterr().out
    assert "February 2024" in out
    assert "15*" in out
    assert "14!" in out
    assert "28~" in out
    assert "[Today]" in out

def test_date_shortcut(capsys):
    assert main(["2024-02-15", "--today", "2024-02-14", "--locale", "de"]) == 0
    assert "Februar 2024" in capsys.readouterr().out

def test_show_decade(capsys):
    assert main(["show", "--date", "2024-02-15", "--view", "year", "--today", "2024-02-14"]) == 0
    out = capsys.readouterr().out
    assert "2020 - 2029" in out
    assert "2019~" in out and "2030~" in out
    assert "2024*" in out

def test_replay_keyboard_rejected(capsys):
    argv = ["replay", "--date", "2024-01-29", "--end", "2024-02-01", "--today", "2024-01-01", "key:+7", "key:right"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "> key:+7   selected=2024-01-29" in out
    assert "> key:right   selected=2024-01-30" in out

def test_replay_navigation(capsys):
    argv = ["replay", "--date", "2024-01-15", "--today", "2024-01-01", "prev", "up", "up", "down:2027", "down:2027-06"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "December 2023" in out
    assert "2020 - 2029" in out
    assert "June 2027" in out

def test_replay_bad_intent():
    with pytest.raises(SystemExit):
        main(["replay", "sideways"])

def test_parse_intent():
    assert parse_intent("prev") == StepPrevious()
    assert parse_intent("down:2024-02") == DrillDown(Anchor(2024, 1))
    assert parse_intent("select:2024-02-05") == SelectCell(D(2024, 1, 5))
    assert parse_intent("key:left") == KeyboardMove(-1)
    assert parse_intent("key:-7") == KeyboardMove(-7)
    with pytest.raises(ValueError):
        parse_intent("jump")

def test_locales(capsys):
    assert main(["locales"]) == 0
    out = capsys.readouterr().out
    assert "he   rtl" in out
    assert "en   ltr  week starts Sunday" in out

def test_range_compat_tool(capsys):
    argv = ["diag", "range-compat", "--start", "2024-03-10", "--from", "2023-01-01", "--to", "2024-12-31"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "306 disagreeing dates" in out
    assert "2023-03-01  legacy=enabled " in out

def test_legacy_rule_lets_distant_dates_through():
    rng = DateRange(lower=D(2024, 2, 10))
    assert not legacy_is_disabled(D(2023, 5, 1), rng)
    assert not rng.contains(D(2023, 5, 1))
    # both agree inside the bound's own year
    assert legacy_is_disabled(D(2024, 1, 15), rng)

    upper = DateRange(upper=D(2024, 1, 1))
    rows = disagreements(upper, D(2025, 0, 1), D(2025, 11, 31))
    # legacy only rejects months after February in later years
    assert [d for d, _, _ in rows][:3] == [D(2025, 0, 1), D(2025, 0, 2), D(2025, 0, 3)]
    assert len(rows) == 31 + 28
