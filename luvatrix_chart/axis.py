from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Sequence

from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS
from luvatrix_chart.errors import ChartDataError
from luvatrix_chart.paths import format_number
from luvatrix_chart.scales import BandScale, LinearScale, PointScale, Scale, ScaleValue, generate_linear_ticks


GridLineStyle = Literal["solid", "dashed", "dotted"]

_GRID_DASHARRAY: dict[str, str | None] = {
    "solid": None,
    "dashed": "4 4",
    "dotted": "1 4",
}


@dataclass(frozen=True)
class Tick:
    value: ScaleValue
    position: float
    label: str


def axis_ticks(
    scale: Scale,
    *,
    tick_count: int | None = None,
    tick_values: Sequence[ScaleValue] | None = None,
    tick_format: Callable[[ScaleValue], str] | None = None,
) -> list[Tick]:
    count = DEFAULT_CHART_DEFAULTS.tick_count if tick_count is None else tick_count
    fmt = tick_format or format_tick_value

    if isinstance(scale, LinearScale):
        values = list(tick_values) if tick_values is not None else generate_linear_ticks(*scale.domain, count)
        return [Tick(value=v, position=scale.map(v), label=fmt(v)) for v in values]
    if isinstance(scale, PointScale):
        values = list(tick_values) if tick_values is not None else list(scale.domain)
        return [Tick(value=v, position=scale.map(v), label=fmt(v)) for v in values]
    if isinstance(scale, BandScale):
        values = list(tick_values) if tick_values is not None else list(scale.domain)
        half = scale.bandwidth / 2
        return [Tick(value=v, position=scale.map(v) + half, label=fmt(v)) for v in values]
    raise TypeError(f"unsupported scale: {type(scale)!r}")


def format_tick_value(value: ScaleValue) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    return format_number(value)


def grid_line_dasharray(style: GridLineStyle) -> str | None:
    if style not in _GRID_DASHARRAY:
        raise ChartDataError(f"unsupported grid line style: {style}")
    return _GRID_DASHARRAY[style]
