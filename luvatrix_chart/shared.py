from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Sequence, TypeVar

from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS, ChartDefaults


T = TypeVar("T")


@dataclass(frozen=True)
class LegendItem:
    index: int
    label: str
    color: str
    active: bool


@dataclass(frozen=True)
class HoveredPoint:
    series_index: int
    point_index: int


def resolve_chart_palette(
    colors: Sequence[str] | None,
    fallback_color: str | None = None,
    *,
    defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
) -> list[str]:
    """Resolve palette: `colors`, then `fallback_color`, then the configured default palette."""

    if colors:
        return list(colors)
    if fallback_color:
        return [fallback_color]
    return list(defaults.palette)


def build_chart_legend_items(
    data: Sequence[T],
    palette: Sequence[str],
    active_index: int | None,
    get_label: Callable[[T, int], str],
    get_color: Callable[[T, int], str] | None = None,
) -> list[LegendItem]:
    if not palette and get_color is None:
        raise ValueError("palette must be non-empty when get_color is not given")
    items: list[LegendItem] = []
    for index, datum in enumerate(data):
        color = get_color(datum, index) if get_color is not None else palette[index % len(palette)]
        items.append(
            LegendItem(
                index=index,
                label=get_label(datum, index),
                color=color,
                active=active_index is None or active_index == index,
            )
        )
    return items


def resolve_chart_tooltip_content(
    hovered_index: int | None,
    data: Sequence[T],
    formatter: Callable[[T, int], str] | None,
    default_formatter: Callable[[T, int], str],
) -> str:
    if hovered_index is None or not 0 <= hovered_index < len(data):
        return ""
    datum = data[hovered_index]
    if datum is None:
        return ""
    return (formatter or default_formatter)(datum, hovered_index)


def resolve_multi_series_tooltip_content(
    hovered: HoveredPoint | None,
    series: Sequence[Any],
    formatter: Callable[[Any, int, int, Any], str] | None,
    default_formatter: Callable[[Any, int, int, Any], str],
) -> str:
    if hovered is None or not 0 <= hovered.series_index < len(series):
        return ""
    current = series[hovered.series_index]
    points = _field(current, "data") or []
    if not 0 <= hovered.point_index < len(points):
        return ""
    datum = points[hovered.point_index]
    if datum is None:
        return ""
    return (formatter or default_formatter)(datum, hovered.series_index, hovered.point_index, current)


def resolve_series_data(
    series: Sequence[Any] | None,
    data: Sequence[Any] | None,
    default_series: Mapping[str, Any] | None = None,
) -> list[Any]:
    """Prefer explicit `series`; otherwise wrap flat `data` as a single series mapping."""

    if series:
        return list(series)
    if data:
        return [{**(default_series or {}), "data": list(data)}]
    return []


def default_xy_tooltip_formatter(datum: Any, index: int) -> str:
    label = _field(datum, "label")
    if label is None:
        x = _field(datum, "x")
        label = str(x) if x is not None else f"#{index + 1}"
    return f"{label}: {_text(_field(datum, 'y'))}"


def default_series_xy_tooltip_formatter(datum: Any, series_index: int, point_index: int, series: Any = None) -> str:
    name = _series_name(series, series_index)
    label = _field(datum, "label")
    if label is None:
        x = _field(datum, "x")
        label = str(x) if x is not None else ""
    return f"{name} · {label}: {_text(_field(datum, 'y'))}"


def default_radar_tooltip_formatter(datum: Any, series_index: int, point_index: int, series: Any = None) -> str:
    name = _series_name(series, series_index)
    label = _field(datum, "label")
    if label is None:
        label = f"#{point_index + 1}"
    return f"{name} · {label}: {_text(_field(datum, 'value'))}"


def get_active_index(
    hovered_index: int | None,
    selected_index: int | None,
    controlled_hovered: int | None = None,
    controlled_selected: int | None = None,
) -> int | None:
    # Precedence: controlled selection, selection, controlled hover, hover.
    if controlled_selected is not None:
        return controlled_selected
    if selected_index is not None:
        return selected_index
    if controlled_hovered is not None:
        return controlled_hovered
    return hovered_index


def get_chart_element_opacity(
    index: int,
    active_index: int | None,
    *,
    active_opacity: float = 1.0,
    inactive_opacity: float | None = None,
    default_opacity: float | None = None,
) -> float | None:
    if active_index is None:
        return default_opacity
    if index == active_index:
        return active_opacity
    return DEFAULT_CHART_DEFAULTS.inactive_opacity if inactive_opacity is None else inactive_opacity


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _series_name(series: Any, series_index: int) -> str:
    name = _field(series, "name") if series is not None else None
    return name if name else f"Series {series_index + 1}"


def _text(value: Any) -> str:
    return "" if value is None else str(value)
