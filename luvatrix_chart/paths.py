from __future__ import annotations

from decimal import Decimal
import math
from typing import Iterable


def format_number(value: float) -> str:
    """Format a coordinate as plain decimal text (`40`, `2.5`, never `1e-05`)."""

    v = float(value)
    if not math.isfinite(v):
        return str(v)
    if v.is_integer() and abs(v) < 1e15:
        return str(int(v))
    out = format(Decimal(repr(v)), "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def command(op: str, *values: float) -> str:
    if not values:
        return op
    return " ".join([op, *(format_number(v) for v in values)])


def move_to(x: float, y: float) -> str:
    return command("M", x, y)


def line_to(x: float, y: float) -> str:
    return command("L", x, y)


def horizontal_to(x: float) -> str:
    return command("H", x)


def vertical_to(y: float) -> str:
    return command("V", y)


def cubic_to(x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> str:
    return command("C", x1, y1, x2, y2, x, y)


def arc_to(rx: float, ry: float, large_arc: bool, sweep: bool, x: float, y: float) -> str:
    return " ".join(
        [
            "A",
            format_number(rx),
            format_number(ry),
            "0",
            "1" if large_arc else "0",
            "1" if sweep else "0",
            format_number(x),
            format_number(y),
        ]
    )


CLOSE = "Z"


def join_path(commands: Iterable[str]) -> str:
    return " ".join(commands)
