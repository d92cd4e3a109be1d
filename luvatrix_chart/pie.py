from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Generic, Literal, Sequence, TypeVar

from luvatrix_chart.adapters import datum_value
from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS
from luvatrix_chart.layout import Point
from luvatrix_chart.paths import CLOSE, arc_to, join_path, line_to, move_to


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

FULL_CIRCLE = math.pi * 2
# A closed SVG arc with identical endpoints draws nothing, so full circles stop just short.
_FULL_CIRCLE_EPSILON = 0.0001


@dataclass(frozen=True)
class PieArc(Generic[T]):
    start_angle: float
    end_angle: float
    pad_angle: float
    value: float
    index: int
    data: T


@dataclass(frozen=True)
class Offset:
    dx: float
    dy: float


@dataclass(frozen=True)
class PieLabelLine:
    anchor: Point
    elbow: Point
    label: Point
    text_anchor: Literal["start", "end"]


def pie_arcs(
    data: Sequence[T],
    *,
    start_angle: float = 0.0,
    end_angle: float = FULL_CIRCLE,
    pad_angle: float = 0.0,
) -> list[PieArc[T]]:
    """Split `[start_angle, end_angle]` into arcs proportional to each datum's value.

    Negative values count as zero. Padding is inserted after every non-zero arc, so
    zero-valued data keep their index but occupy no angle.
    """

    pad = max(0.0, float(pad_angle))
    values = [max(0.0, datum_value(item)) for item in data]
    total = sum(values)
    if total <= 0:
        LOGGER.debug("pie data has no positive values (%d items)", len(values))
        return []

    visible = sum(1 for v in values if v > 0)
    available = max(0.0, (end_angle - start_angle) - pad * visible)

    arcs: list[PieArc[T]] = []
    cursor = float(start_angle)
    for index, (item, value) in enumerate(zip(data, values, strict=True)):
        span = available * (value / total)
        arc_pad = pad if value > 0 else 0.0
        arcs.append(
            PieArc(
                start_angle=cursor,
                end_angle=cursor + span,
                pad_angle=arc_pad,
                value=value,
                index=index,
                data=item,
            )
        )
        cursor += span + arc_pad
    return arcs


def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float) -> Point:
    return Point(x=cx + radius * math.cos(angle), y=cy + radius * math.sin(angle))


def pie_arc_path(
    *,
    cx: float,
    cy: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    inner_radius: float = 0.0,
) -> str:
    inner = max(0.0, float(inner_radius))
    if end_angle - start_angle >= FULL_CIRCLE:
        end_angle = start_angle + FULL_CIRCLE - _FULL_CIRCLE_EPSILON
    if end_angle <= start_angle:
        return ""

    start_outer = polar_to_cartesian(cx, cy, outer_radius, start_angle)
    end_outer = polar_to_cartesian(cx, cy, outer_radius, end_angle)
    large_arc = end_angle - start_angle > math.pi

    if inner <= 0:
        return join_path(
            [
                move_to(cx, cy),
                line_to(start_outer.x, start_outer.y),
                arc_to(outer_radius, outer_radius, large_arc, True, end_outer.x, end_outer.y),
                CLOSE,
            ]
        )

    start_inner = polar_to_cartesian(cx, cy, inner, start_angle)
    end_inner = polar_to_cartesian(cx, cy, inner, end_angle)
    return join_path(
        [
            move_to(start_outer.x, start_outer.y),
            arc_to(outer_radius, outer_radius, large_arc, True, end_outer.x, end_outer.y),
            line_to(end_inner.x, end_inner.y),
            arc_to(inner, inner, large_arc, False, start_inner.x, start_inner.y),
            CLOSE,
        ]
    )


def pie_hover_offset(start_angle: float, end_angle: float, distance: float) -> Offset:
    """Translate for an emphasized slice: `distance` outward along its bisector."""

    if distance == 0:
        return Offset(dx=0.0, dy=0.0)
    mid = (start_angle + end_angle) / 2
    return Offset(dx=distance * math.cos(mid), dy=distance * math.sin(mid))


def pie_label_line(
    cx: float,
    cy: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    offset: float | None = None,
) -> PieLabelLine:
    """Leader line for an outside label: anchor on the rim, elbow, then the text position."""

    mid = (start_angle + end_angle) / 2
    if offset is None:
        gap = max(DEFAULT_CHART_DEFAULTS.pie_label_min_gap, outer_radius * DEFAULT_CHART_DEFAULTS.pie_label_gap_ratio)
    else:
        gap = offset
    anchor = polar_to_cartesian(cx, cy, outer_radius, mid)
    elbow = polar_to_cartesian(cx, cy, outer_radius + gap * 0.6, mid)
    is_right = math.cos(mid) >= 0
    shift = gap * 0.8 if is_right else -gap * 0.8
    return PieLabelLine(
        anchor=anchor,
        elbow=elbow,
        label=Point(x=elbow.x + shift, y=elbow.y),
        text_anchor="start" if is_right else "end",
    )


def visible_arc_paths(
    arcs: Sequence[PieArc[Any]],
    *,
    cx: float,
    cy: float,
    outer_radius: float,
    inner_radius: float = 0.0,
) -> list[tuple[PieArc[Any], str]]:
    """Pair each arc with its path, dropping zero-length arcs that render nothing."""

    out: list[tuple[PieArc[Any], str]] = []
    for arc in arcs:
        path = pie_arc_path(
            cx=cx,
            cy=cy,
            outer_radius=outer_radius,
            inner_radius=inner_radius,
            start_angle=arc.start_angle,
            end_angle=arc.end_angle,
        )
        if path:
            out.append((arc, path))
    return out
