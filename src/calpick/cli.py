from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from typing import List, Optional

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_VIEWS = {"day": 0, "month": 1, "year": 2}


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_config_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--locale", default="en")
    p.add_argument("--date", help="selected date YYYY-MM-DD")
    p.add_argument("--start", help="first selectable date YYYY-MM-DD")
    p.add_argument("--end", help="last selectable date YYYY-MM-DD")
    p.add_argument("--disable", default="", help="disabled weekdays, comma separated (0=Sunday)")
    p.add_argument("--week-start", type=int, default=None, help="0=Sunday .. 6=Saturday (default: locale)")
    p.add_argument("--week-numbers", action="store_true")
    p.add_argument("--no-keyboard", action="store_true")
    p.add_argument("--no-today-button", action="store_true")
    p.add_argument("--view", choices=sorted(_VIEWS), default="day", help="initial granularity")
    p.add_argument("--views", default="day,month,year", help="enabled granularities, comma separated")
    p.add_argument("--today", help="override today's date YYYY-MM-DD")


def _config_from_args(args: argparse.Namespace):
    from calpick import CalendarDate, DatepickerConfig, Granularity

    def opt(s: Optional[str]):
        return CalendarDate.parse(s) if s else None

    disabled = frozenset(int(x) for x in args.disable.split(",") if x.strip())
    views = frozenset(Granularity(_VIEWS[v.strip()]) for v in args.views.split(",") if v.strip())
    return DatepickerConfig(
        locale=args.locale,
        selected_date=opt(args.date),
        start_date=opt(args.start),
        end_date=opt(args.end),
        disabled_weekdays=disabled,
        week_start=args.week_start,
        initial_granularity=Granularity(_VIEWS[args.view]),
        enabled_granularities=views,
        show_week_numbers=args.week_numbers,
        keyboard_enabled=not args.no_keyboard,
        today_button=not args.no_today_button,
    )


def parse_intent(token: str):
    """
    prev | next | up | today | down:YYYY[-MM[-DD]] | select:YYYY-MM-DD |
    set:YYYY-MM-DD | key:{left,right,up,down,+-1,+-7}
    """
    import calpick

    name, _, arg = token.partition(":")
    if name == "prev":
        return calpick.StepPrevious()
    if name == "next":
        return calpick.StepNext()
    if name == "up":
        return calpick.DrillUp()
    if name == "today":
        return calpick.SelectToday()
    if name == "down" and arg:
        parts = [int(x) for x in arg.split("-")]
        if len(parts) >= 2:
            parts[1] -= 1  # printed months are 1-based
        return calpick.DrillDown(calpick.Anchor(*parts))
    if name == "select" and arg:
        return calpick.SelectCell(calpick.CalendarDate.parse(arg))
    if name == "set" and arg:
        return calpick.SetDate(calpick.CalendarDate.parse(arg))
    if name == "key" and arg:
        delta = calpick.ARROW_DELTAS.get(arg)
        return calpick.KeyboardMove(delta if delta is not None else int(arg))
    raise ValueError(f"Unrecognized intent '{token}'")


def cmd_show(argv: list[str]) -> int:
    import calpick
    from calpick.diagnostics.pretty_grid import print_model

    p = argparse.ArgumentParser(prog="calpick show", description="Print the initial grid for a configuration")
    _add_config_args(p)
    args = p.parse_args(argv)

    today = calpick.CalendarDate.parse(args.today) if args.today else None
    _, model = calpick.initialize(_config_from_args(args), today=today)
    print_model(model)
    return 0


def cmd_replay(argv: list[str]) -> int:
    import calpick
    from calpick.diagnostics.pretty_grid import print_model

    p = argparse.ArgumentParser(prog="calpick replay", description="Apply intents and print each resulting grid")
    _add_config_args(p)
    p.add_argument("intents", nargs="*", help=parse_intent.__doc__)
    args = p.parse_args(argv)

    try:
        intents = [parse_intent(t) for t in args.intents]
    except ValueError as e:
        p.error(str(e))

    today = calpick.CalendarDate.parse(args.today) if args.today else None
    state, model = calpick.initialize(_config_from_args(args), today=today)
    print_model(model)
    for token, intent in zip(args.intents, intents):
        state, model = calpick.dispatch(state, intent, today=today)
        print(f"> {token}   selected={calpick.get_selected_date(state)}")
        print_model(model)
    return 0


def cmd_locales(argv: list[str]) -> int:
    import calpick

    p = argparse.ArgumentParser(prog="calpick locales", description="List registered locales")
    p.parse_args(argv)
    for key in calpick.list_locales():
        info = calpick.locale_info(key)
        direction = "rtl" if info["rtl"] else "ltr"
        print(f"{key:4s} {direction}  week starts {info['first_day']}")
    return 0


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `calpick YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_show(["--date", argv[0]] + argv[1:])

    p = argparse.ArgumentParser(prog="calpick", description="Calendar date-picker engine CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="log navigator decisions")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("show", help="Print the initial grid for a configuration")
    sub.add_parser("replay", help="Apply intents and print each resulting grid")
    sub.add_parser("locales", help="List registered locales")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["range-compat"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "show":
        return cmd_show(rest)

    if args.cmd == "replay":
        return cmd_replay(rest)

    if args.cmd == "locales":
        return cmd_locales(rest)

    if args.cmd == "diag":
        tool_map = {
            "range-compat": "calpick.diagnostics.range_compat",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
