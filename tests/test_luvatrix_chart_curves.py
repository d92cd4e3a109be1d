from __future__ import annotations

import unittest

from luvatrix_chart import ChartDataError, Point, area_path, line_path


def _cubic_segments(path: str) -> list[list[float]]:
    tokens = path.split()
    segments: list[list[float]] = []
    for i, token in enumerate(tokens):
        if token == "C":
            segments.append([float(v) for v in tokens[i + 1 : i + 7]])
    return segments


class LinePathTests(unittest.TestCase):
    def test_empty_and_single_point(self) -> None:
        self.assertEqual(line_path([]), "")
        self.assertEqual(line_path([(1, 2)]), "M 1 2")
        self.assertEqual(line_path([Point(1, 2)], "monotone"), "M 1 2")

    def test_linear(self) -> None:
        self.assertEqual(line_path([(0, 0), (10, 10), (20, 0)]), "M 0 0 L 10 10 L 20 0")

    def test_accepts_mapping_points(self) -> None:
        self.assertEqual(line_path([{"x": 0, "y": 5}, {"x": 2.5, "y": 7}]), "M 0 5 L 2.5 7")

    def test_step_variants(self) -> None:
        points = [(0, 0), (10, 10), (20, 0)]
        self.assertEqual(line_path(points, "stepAfter"), "M 0 0 H 10 V 10 H 20 V 0")
        self.assertEqual(line_path(points, "stepBefore"), "M 0 0 V 10 H 10 V 0 H 20")
        self.assertEqual(line_path(points, "step"), "M 0 0 H 5 V 10 H 10 H 15 V 0 H 20")

    def test_monotone_uses_one_cubic_per_segment(self) -> None:
        points = [(0, 0), (10, 30), (20, 10), (30, 50)]
        path = line_path(points, "monotone")
        self.assertTrue(path.startswith("M 0 0 C "))
        self.assertNotIn(" L ", path)
        segments = _cubic_segments(path)
        self.assertEqual(len(segments), 3)
        self.assertEqual([(s[4], s[5]) for s in segments], [(10.0, 30.0), (20.0, 10.0), (30.0, 50.0)])

    def test_monotone_keeps_flat_runs_flat(self) -> None:
        path = line_path([(0, 0), (1, 1), (2, 1), (3, 5)], "monotone")
        flat = _cubic_segments(path)[1]
        self.assertEqual((flat[1], flat[3]), (1.0, 1.0))

    def test_monotone_does_not_overshoot_monotonic_data(self) -> None:
        path = line_path([(0, 0), (1, 1), (2, 10), (3, 10.5)], "monotone")
        for seg in _cubic_segments(path):
            self.assertGreaterEqual(seg[1], -1e-9)
            self.assertLessEqual(seg[3], 10.5 + 1e-9)

    def test_natural_spline_passes_through_points(self) -> None:
        points = [(0, 5), (10, 20), (20, 0), (30, 15), (40, 10)]
        path = line_path(points, "natural")
        segments = _cubic_segments(path)
        self.assertEqual(len(segments), 4)
        self.assertEqual([(s[4], s[5]) for s in segments], [(float(x), float(y)) for x, y in points[1:]])

    def test_natural_spline_on_collinear_points_is_straight(self) -> None:
        path = line_path([(0, 0), (10, 10), (20, 20)], "natural")
        for seg in _cubic_segments(path):
            self.assertAlmostEqual(seg[0], seg[1], places=9)
            self.assertAlmostEqual(seg[2], seg[3], places=9)

    def test_natural_spline_with_two_points_is_a_cubic(self) -> None:
        path = line_path([(0, 0), (30, 30)], "natural")
        self.assertEqual(len(_cubic_segments(path)), 1)

    def test_natural_spline_with_backtracking_x_still_reaches_every_point(self) -> None:
        path = line_path([(0, 0), (10, 5), (0, 10)], "natural")
        segments = _cubic_segments(path)
        self.assertTrue(path.startswith("M 0 0"))
        self.assertEqual(len(segments), 2)
        self.assertEqual([(s[4], s[5]) for s in segments], [(10.0, 5.0), (0.0, 10.0)])

    def test_natural_area_with_backtracking_x_closes_on_baseline(self) -> None:
        path = area_path([(0, 0), (10, 5), (0, 10)], 20, "natural")
        self.assertTrue(path.endswith("L 0 20 L 0 20 Z"))

    def test_unknown_curve_is_rejected(self) -> None:
        with self.assertRaises(ChartDataError):
            line_path([(0, 0), (1, 1)], "bezier")  # type: ignore[arg-type]


class AreaPathTests(unittest.TestCase):
    def test_empty_area(self) -> None:
        self.assertEqual(area_path([], 100), "")

    def test_area_closes_against_baseline(self) -> None:
        self.assertEqual(area_path([(0, 10), (10, 20)], 100), "M 0 10 L 10 20 L 10 100 L 0 100 Z")

    def test_single_point_area_has_one_move(self) -> None:
        path = area_path([(5, 5)], 100)
        self.assertEqual(path.split().count("M"), 1)

    def test_curved_area(self) -> None:
        path = area_path([(0, 10), (10, 20), (20, 5)], 50, "monotone")
        self.assertIn(" C ", path)
        self.assertTrue(path.endswith("L 20 50 L 0 50 Z"))


if __name__ == "__main__":
    unittest.main()
