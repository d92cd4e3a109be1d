from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS
from luvatrix_chart.errors import ChartDataError


BarLabelPosition = Literal["top", "inside"]


@dataclass(frozen=True)
class BarBox:
    y: float
    height: float


def clamp_bar_width(width: float, max_width: float | None = None) -> float:
    if max_width is None or max_width <= 0:
        return width
    return min(width, max_width)


def ensure_bar_min_height(y: float, height: float, baseline_y: float, min_height: float) -> BarBox:
    """Grow near-zero bars to `min_height` while keeping their baseline edge fixed."""

    if min_height <= 0 or height == 0 or height >= min_height:
        return BarBox(y=y, height=height)
    if y < baseline_y:
        # Bar grows upward: the bottom stays on the baseline, the top moves up.
        return BarBox(y=y + height - min_height, height=min_height)
    return BarBox(y=y, height=min_height)


def bar_value_label_y(
    y: float,
    height: float,
    position: BarLabelPosition = "top",
    offset: float | None = None,
) -> float:
    if position == "inside":
        return y + height / 2
    if position == "top":
        return y - (DEFAULT_CHART_DEFAULTS.bar_label_offset if offset is None else offset)
    raise ChartDataError(f"unsupported bar label position: {position}")
