from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class ChartDefaults:
    """Default knobs shared by the chart geometry helpers."""

    palette: tuple[str, ...] = (
        "var(--tiger-chart-1,#2563eb)",
        "var(--tiger-chart-2,#22c55e)",
        "var(--tiger-chart-3,#f97316)",
        "var(--tiger-chart-4,#a855f7)",
        "var(--tiger-chart-5,#0ea5e9)",
        "var(--tiger-chart-6,#ef4444)",
    )
    tick_count: int = 5
    point_padding: float = 0.5
    band_padding_inner: float = 0.1
    band_padding_outer: float = 0.1
    band_align: float = 0.5
    pie_label_min_gap: float = 12.0
    pie_label_gap_ratio: float = 0.15
    radar_levels: int = 5
    radar_label_offset: float = 12.0
    bar_label_offset: float = 8.0
    inactive_opacity: float = 0.25


DEFAULT_CHART_DEFAULTS = ChartDefaults()


def validate_chart_defaults(overrides: Mapping[str, Any] | None = None) -> ChartDefaults:
    """Merge overrides into the default chart knobs, rejecting unknown keys and bad values."""

    raw: dict[str, Any] = asdict(DEFAULT_CHART_DEFAULTS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown chart default: {key}")
            raw[key] = value

    palette = raw["palette"]
    if isinstance(palette, str) or not palette:
        raise ValueError("`palette` must be a non-empty sequence of color strings")
    if not all(isinstance(color, str) and color.strip() for color in palette):
        raise ValueError("`palette` entries must be non-empty strings")

    for key in ("tick_count", "radar_levels"):
        if not isinstance(raw[key], int) or isinstance(raw[key], bool) or raw[key] <= 0:
            raise ValueError(f"`{key}` must be a positive integer")

    for key in ("point_padding", "band_padding_inner", "band_padding_outer", "band_align", "inactive_opacity"):
        if not isinstance(raw[key], (int, float)) or not 0.0 <= float(raw[key]) <= 1.0:
            raise ValueError(f"`{key}` must be in [0, 1]")

    for key in ("pie_label_min_gap", "pie_label_gap_ratio", "radar_label_offset", "bar_label_offset"):
        if not isinstance(raw[key], (int, float)) or float(raw[key]) < 0:
            raise ValueError(f"`{key}` must be >= 0")

    return ChartDefaults(
        palette=tuple(str(color) for color in palette),
        tick_count=int(raw["tick_count"]),
        point_padding=float(raw["point_padding"]),
        band_padding_inner=float(raw["band_padding_inner"]),
        band_padding_outer=float(raw["band_padding_outer"]),
        band_align=float(raw["band_align"]),
        pie_label_min_gap=float(raw["pie_label_min_gap"]),
        pie_label_gap_ratio=float(raw["pie_label_gap_ratio"]),
        radar_levels=int(raw["radar_levels"]),
        radar_label_offset=float(raw["radar_label_offset"]),
        bar_label_offset=float(raw["bar_label_offset"]),
        inactive_opacity=float(raw["inactive_opacity"]),
    )
