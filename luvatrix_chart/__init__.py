from luvatrix_chart.axis import Tick, axis_ticks, format_tick_value, grid_line_dasharray
from luvatrix_chart.bars import BarBox, bar_value_label_y, clamp_bar_width, ensure_bar_min_height
from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS, ChartDefaults, validate_chart_defaults
from luvatrix_chart.curves import area_path, line_path
from luvatrix_chart.errors import ChartDataError
from luvatrix_chart.ids import GradientIdFactory, area_gradient_ids, bar_gradient_ids, line_gradient_ids
from luvatrix_chart.layout import Padding, Point, Rect, inner_rect, normalize_padding
from luvatrix_chart.paths import format_number
from luvatrix_chart.pie import (
    Offset,
    PieArc,
    PieLabelLine,
    pie_arc_path,
    pie_arcs,
    pie_hover_offset,
    pie_label_line,
    polar_to_cartesian,
    visible_arc_paths,
)
from luvatrix_chart.radar import (
    LineSegment,
    PositionedLabel,
    RadarPoint,
    polygon_path,
    radar_angles,
    radar_axis_lines,
    radar_grid_paths,
    radar_label_positions,
    radar_level_labels,
    radar_points,
)
from luvatrix_chart.scales import (
    BandScale,
    LinearScale,
    PointScale,
    Scale,
    create_band_scale,
    create_linear_scale,
    create_point_scale,
    extent,
)
from luvatrix_chart.shared import (
    HoveredPoint,
    LegendItem,
    build_chart_legend_items,
    default_radar_tooltip_formatter,
    default_series_xy_tooltip_formatter,
    default_xy_tooltip_formatter,
    get_active_index,
    get_chart_element_opacity,
    resolve_chart_palette,
    resolve_chart_tooltip_content,
    resolve_multi_series_tooltip_content,
    resolve_series_data,
)
from luvatrix_chart.stack import StackedPoint, stack_series_data

__all__ = [
    "BandScale",
    "BarBox",
    "ChartDataError",
    "ChartDefaults",
    "DEFAULT_CHART_DEFAULTS",
    "GradientIdFactory",
    "HoveredPoint",
    "LegendItem",
    "LineSegment",
    "LinearScale",
    "Offset",
    "Padding",
    "PieArc",
    "PieLabelLine",
    "Point",
    "PointScale",
    "PositionedLabel",
    "RadarPoint",
    "Rect",
    "Scale",
    "StackedPoint",
    "Tick",
    "area_gradient_ids",
    "area_path",
    "axis_ticks",
    "bar_gradient_ids",
    "bar_value_label_y",
    "build_chart_legend_items",
    "clamp_bar_width",
    "create_band_scale",
    "create_linear_scale",
    "create_point_scale",
    "default_radar_tooltip_formatter",
    "default_series_xy_tooltip_formatter",
    "default_xy_tooltip_formatter",
    "ensure_bar_min_height",
    "extent",
    "format_number",
    "format_tick_value",
    "get_active_index",
    "get_chart_element_opacity",
    "grid_line_dasharray",
    "inner_rect",
    "line_gradient_ids",
    "line_path",
    "normalize_padding",
    "pie_arc_path",
    "pie_arcs",
    "pie_hover_offset",
    "pie_label_line",
    "polar_to_cartesian",
    "polygon_path",
    "radar_angles",
    "radar_axis_lines",
    "radar_grid_paths",
    "radar_label_positions",
    "radar_level_labels",
    "radar_points",
    "resolve_chart_palette",
    "resolve_chart_tooltip_content",
    "resolve_multi_series_tooltip_content",
    "resolve_series_data",
    "stack_series_data",
    "validate_chart_defaults",
]
