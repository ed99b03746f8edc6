from __future__ import annotations

from typing import List

from calpick.core.types import Cell, RenderModel

UNIT = 5

# one-character suffix per decoration, in print order
MARKS = (("selected", "*"), ("today", "!"), ("inactive", "~"), ("disabled", "x"))


def cell_text(c: Cell) -> str:
    return c.label + "".join(mark for name, mark in MARKS if name in c.decorations)


def fit(text: str, span: int) -> str:
    w = UNIT * span
    return text[:w].rjust(w) if span == 1 else text[:w].center(w)


def header_line(model: RenderModel) -> str:
    width = UNIT * model.total_columns
    prev = "<" if model.previous_enabled else " "
    nxt = ">" if model.next_enabled else " "
    title = model.header_label + (" ^" if model.drill_up_enabled else "")
    return prev.ljust(UNIT) + title.center(width - 2 * UNIT) + nxt.rjust(UNIT)


def format_model(model: RenderModel) -> str:
    lines: List[str] = [header_line(model)]
    if model.weekday_headers:
        lines.append("".join(fit(h, 1) for h in model.weekday_headers))
    lines.append("-" * (UNIT * model.total_columns))
    for row in model.rows:
        lines.append("".join(fit(cell_text(c), c.colspan) for c in row))
    if model.today_label is not None:
        lines.append(f"[{model.today_label}]".center(UNIT * model.footer_colspan))
    return "\n".join(line.rstrip() for line in lines)


def print_model(model: RenderModel) -> None:
    print(format_model(model))
    print()
