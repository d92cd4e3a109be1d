from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable, Generic, Sequence, TypeVar

from luvatrix_chart.adapters import datum_value, point_xy
from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS
from luvatrix_chart.paths import CLOSE, format_number, join_path, line_to, move_to
from luvatrix_chart.pie import polar_to_cartesian


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_START_ANGLE = -math.pi / 2


@dataclass(frozen=True)
class RadarPoint(Generic[T]):
    x: float
    y: float
    value: float
    radius: float
    angle: float
    index: int
    data: T


@dataclass(frozen=True)
class LineSegment:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class PositionedLabel:
    x: float
    y: float
    text: str


def radar_angles(count: int, start_angle: float = DEFAULT_START_ANGLE) -> list[float]:
    if count <= 0:
        return []
    step = (math.pi * 2) / count
    return [start_angle + step * i for i in range(count)]


def radar_points(
    data: Sequence[T],
    *,
    cx: float,
    cy: float,
    radius: float,
    start_angle: float = DEFAULT_START_ANGLE,
    max_value: float | None = None,
) -> list[RadarPoint[T]]:
    if len(data) == 0:
        return []

    values = [datum_value(item) for item in data]
    resolved_max = max(0.0, max(values) if max_value is None else float(max_value))
    if resolved_max <= 0:
        LOGGER.debug("radar max value is not positive; scaling against 1")
        resolved_max = 1.0

    angles = radar_angles(len(values), start_angle)
    points: list[RadarPoint[T]] = []
    for index, (item, raw) in enumerate(zip(data, values, strict=True)):
        value = max(0.0, raw)
        point_radius = radius * (value / resolved_max)
        angle = angles[index]
        pos = polar_to_cartesian(cx, cy, point_radius, angle)
        points.append(
            RadarPoint(x=pos.x, y=pos.y, value=value, radius=point_radius, angle=angle, index=index, data=item)
        )
    return points


def polygon_path(points: Sequence[object]) -> str:
    if len(points) == 0:
        return ""
    coords = [point_xy(p) for p in points]
    first_x, first_y = coords[0]
    return join_path([move_to(first_x, first_y), *(line_to(x, y) for x, y in coords[1:]), CLOSE])


def radar_grid_paths(
    count: int,
    *,
    cx: float,
    cy: float,
    radius: float,
    levels: int | None = None,
    start_angle: float = DEFAULT_START_ANGLE,
) -> list[str]:
    """Concentric polygons, one per level, evenly spaced out to `radius`."""

    angles = radar_angles(count, start_angle)
    if not angles:
        return []
    resolved_levels = _resolve_levels(levels)
    paths: list[str] = []
    for level in range(1, resolved_levels + 1):
        level_radius = radius * (level / resolved_levels)
        paths.append(polygon_path([polar_to_cartesian(cx, cy, level_radius, a) for a in angles]))
    return paths


def radar_axis_lines(
    count: int,
    *,
    cx: float,
    cy: float,
    radius: float,
    start_angle: float = DEFAULT_START_ANGLE,
) -> list[LineSegment]:
    out: list[LineSegment] = []
    for angle in radar_angles(count, start_angle):
        end = polar_to_cartesian(cx, cy, radius, angle)
        out.append(LineSegment(x1=cx, y1=cy, x2=end.x, y2=end.y))
    return out


def radar_label_positions(
    labels: Sequence[str],
    *,
    cx: float,
    cy: float,
    radius: float,
    label_offset: float | None = None,
    start_angle: float = DEFAULT_START_ANGLE,
) -> list[PositionedLabel]:
    offset = DEFAULT_CHART_DEFAULTS.radar_label_offset if label_offset is None else label_offset
    angles = radar_angles(len(labels), start_angle)
    out: list[PositionedLabel] = []
    for text, angle in zip(labels, angles, strict=True):
        pos = polar_to_cartesian(cx, cy, radius + offset, angle)
        out.append(PositionedLabel(x=pos.x, y=pos.y, text=str(text)))
    return out


def radar_level_labels(
    *,
    cx: float,
    cy: float,
    radius: float,
    max_value: float,
    levels: int | None = None,
    level_label_offset: float = 0.0,
    start_angle: float = DEFAULT_START_ANGLE,
    formatter: Callable[[float, int], str] | None = None,
) -> list[PositionedLabel]:
    """Value labels for each grid ring, placed along the first axis."""

    resolved_levels = _resolve_levels(levels)
    out: list[PositionedLabel] = []
    for index in range(resolved_levels):
        ratio = (index + 1) / resolved_levels
        value = max_value * ratio
        pos = polar_to_cartesian(cx, cy, radius * ratio + level_label_offset, start_angle)
        text = formatter(value, index) if formatter is not None else format_number(value)
        out.append(PositionedLabel(x=pos.x, y=pos.y, text=text))
    return out


def _resolve_levels(levels: int | None) -> int:
    raw = DEFAULT_CHART_DEFAULTS.radar_levels if levels is None else levels
    return max(1, int(math.floor(raw)))
