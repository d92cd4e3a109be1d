from __future__ import annotations

import unittest

from luvatrix_chart import (
    DEFAULT_CHART_DEFAULTS,
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
    validate_chart_defaults,
)


class PaletteLegendTests(unittest.TestCase):
    def test_palette_resolution_order(self) -> None:
        self.assertEqual(resolve_chart_palette(["#111", "#222"], "#999"), ["#111", "#222"])
        self.assertEqual(resolve_chart_palette([], "#999"), ["#999"])
        self.assertEqual(resolve_chart_palette(None), list(DEFAULT_CHART_DEFAULTS.palette))
        themed = validate_chart_defaults({"palette": ["#101010", "#202020"]})
        self.assertEqual(resolve_chart_palette(None, defaults=themed), ["#101010", "#202020"])

    def test_legend_items_cycle_palette_and_mark_active(self) -> None:
        items = build_chart_legend_items(["a", "b", "c"], ["red", "blue"], 1, lambda d, i: d.upper())
        self.assertEqual(
            items,
            [
                LegendItem(index=0, label="A", color="red", active=False),
                LegendItem(index=1, label="B", color="blue", active=True),
                LegendItem(index=2, label="C", color="red", active=False),
            ],
        )
        everyone = build_chart_legend_items(["a"], ["red"], None, lambda d, i: d, lambda d, i: "green")
        self.assertEqual((everyone[0].color, everyone[0].active), ("green", True))


class TooltipTests(unittest.TestCase):
    def test_single_series_tooltip(self) -> None:
        data = [{"x": "Mon", "y": 3}, {"label": "Tue", "y": 4}]
        self.assertEqual(resolve_chart_tooltip_content(None, data, None, default_xy_tooltip_formatter), "")
        self.assertEqual(resolve_chart_tooltip_content(5, data, None, default_xy_tooltip_formatter), "")
        self.assertEqual(resolve_chart_tooltip_content(0, data, None, default_xy_tooltip_formatter), "Mon: 3")
        self.assertEqual(resolve_chart_tooltip_content(1, data, None, default_xy_tooltip_formatter), "Tue: 4")
        custom = resolve_chart_tooltip_content(0, data, lambda d, i: f"#{i}", default_xy_tooltip_formatter)
        self.assertEqual(custom, "#0")

    def test_default_xy_formatter_falls_back_to_index(self) -> None:
        self.assertEqual(default_xy_tooltip_formatter({"y": 2}, 2), "#3: 2")

    def test_multi_series_tooltip(self) -> None:
        series = [{"name": "Revenue", "data": [{"x": "Q1", "y": 10}]}, {"data": [{"x": "Q1", "y": 7}]}]
        fmt = default_series_xy_tooltip_formatter
        self.assertEqual(resolve_multi_series_tooltip_content(HoveredPoint(0, 0), series, None, fmt), "Revenue · Q1: 10")
        self.assertEqual(resolve_multi_series_tooltip_content(HoveredPoint(1, 0), series, None, fmt), "Series 2 · Q1: 7")
        self.assertEqual(resolve_multi_series_tooltip_content(HoveredPoint(1, 4), series, None, fmt), "")
        self.assertEqual(resolve_multi_series_tooltip_content(None, series, None, fmt), "")

    def test_radar_tooltip(self) -> None:
        self.assertEqual(default_radar_tooltip_formatter({"value": 8}, 0, 2, {"name": "Team"}), "Team · #3: 8")
        self.assertEqual(default_radar_tooltip_formatter({"value": 8, "label": "Speed"}, 1, 0), "Series 2 · Speed: 8")

    def test_resolve_series_data(self) -> None:
        explicit = [{"name": "s", "data": [1]}]
        self.assertEqual(resolve_series_data(explicit, [9]), explicit)
        self.assertEqual(resolve_series_data(None, [1, 2], {"name": "Default"}), [{"name": "Default", "data": [1, 2]}])
        self.assertEqual(resolve_series_data([], []), [])


class ActiveStateTests(unittest.TestCase):
    def test_active_index_precedence(self) -> None:
        self.assertEqual(get_active_index(1, 2, controlled_hovered=3, controlled_selected=4), 4)
        self.assertEqual(get_active_index(1, 2, controlled_hovered=3), 2)
        self.assertEqual(get_active_index(1, None, controlled_hovered=3), 3)
        self.assertEqual(get_active_index(1, None), 1)
        self.assertIsNone(get_active_index(None, None))

    def test_element_opacity(self) -> None:
        self.assertIsNone(get_chart_element_opacity(0, None))
        self.assertEqual(get_chart_element_opacity(0, None, default_opacity=0.9), 0.9)
        self.assertEqual(get_chart_element_opacity(2, 2), 1.0)
        self.assertEqual(get_chart_element_opacity(1, 2), 0.25)
        self.assertEqual(get_chart_element_opacity(1, 2, inactive_opacity=0.5), 0.5)


class ChartDefaultsTests(unittest.TestCase):
    def test_overrides_are_merged(self) -> None:
        defaults = validate_chart_defaults({"tick_count": 8, "palette": ["#000000"]})
        self.assertEqual(defaults.tick_count, 8)
        self.assertEqual(defaults.palette, ("#000000",))
        self.assertEqual(defaults.radar_levels, DEFAULT_CHART_DEFAULTS.radar_levels)

    def test_no_overrides_returns_defaults(self) -> None:
        self.assertEqual(validate_chart_defaults(), DEFAULT_CHART_DEFAULTS)

    def test_invalid_overrides_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            validate_chart_defaults({"colour": "red"})
        with self.assertRaises(ValueError):
            validate_chart_defaults({"tick_count": 0})
        with self.assertRaises(ValueError):
            validate_chart_defaults({"palette": "#fff"})
        with self.assertRaises(ValueError):
            validate_chart_defaults({"band_align": 1.5})


if __name__ == "__main__":
    unittest.main()
