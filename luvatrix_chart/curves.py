from __future__ import annotations

import logging
from typing import Callable, Literal, Sequence

import numpy as np

from luvatrix_chart.adapters import point_xy
from luvatrix_chart.errors import ChartDataError
from luvatrix_chart.paths import CLOSE, cubic_to, horizontal_to, join_path, line_to, move_to, vertical_to


LOGGER = logging.getLogger(__name__)

CurveType = Literal["linear", "step", "stepBefore", "stepAfter", "monotone", "natural"]


def line_path(points: Sequence[object], curve: CurveType = "linear") -> str:
    """Build an SVG path through `points` using the given interpolation."""

    builder = _CURVE_BUILDERS.get(curve)
    if builder is None:
        raise ChartDataError(f"unsupported curve: {curve}")
    if len(points) == 0:
        return ""
    xs, ys = _split_xy(points)
    if xs.size == 1:
        return move_to(xs[0], ys[0])
    return builder(xs, ys)


def area_path(points: Sequence[object], baseline_y: float, curve: CurveType = "linear") -> str:
    """Close a line path against a horizontal baseline for area fills."""

    line = line_path(points, curve)
    if not line:
        return ""
    first_x, _ = point_xy(points[0])
    last_x, _ = point_xy(points[-1])
    return join_path([line, line_to(last_x, baseline_y), line_to(first_x, baseline_y), CLOSE])


def _split_xy(points: Sequence[object]) -> tuple[np.ndarray, np.ndarray]:
    coords = np.asarray([point_xy(p) for p in points], dtype=np.float64)
    return coords[:, 0], coords[:, 1]


def _linear(xs: np.ndarray, ys: np.ndarray) -> str:
    commands = [move_to(xs[0], ys[0])]
    commands.extend(line_to(x, y) for x, y in zip(xs[1:].tolist(), ys[1:].tolist(), strict=True))
    return join_path(commands)


def _step_after(xs: np.ndarray, ys: np.ndarray) -> str:
    commands = [move_to(xs[0], ys[0])]
    for x, y in zip(xs[1:].tolist(), ys[1:].tolist(), strict=True):
        commands.extend([horizontal_to(x), vertical_to(y)])
    return join_path(commands)


def _step_before(xs: np.ndarray, ys: np.ndarray) -> str:
    commands = [move_to(xs[0], ys[0])]
    for x, y in zip(xs[1:].tolist(), ys[1:].tolist(), strict=True):
        commands.extend([vertical_to(y), horizontal_to(x)])
    return join_path(commands)


def _step_middle(xs: np.ndarray, ys: np.ndarray) -> str:
    commands = [move_to(xs[0], ys[0])]
    for i in range(1, xs.size):
        mid = xs[i - 1] + (xs[i] - xs[i - 1]) * 0.5
        commands.extend([horizontal_to(mid), vertical_to(ys[i]), horizontal_to(xs[i])])
    return join_path(commands)


def _secant_slopes(xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    h = np.diff(xs)
    dy = np.diff(ys)
    slopes = np.zeros_like(h)
    nonzero = h != 0
    slopes[nonzero] = dy[nonzero] / h[nonzero]
    return h, slopes


def monotone_tangents(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Fritsch-Carlson tangents; the resulting Hermite curve never overshoots the data."""

    h, d = _secant_slopes(xs, ys)
    n = xs.size
    m = np.zeros(n, dtype=np.float64)
    m[0] = d[0]
    m[-1] = d[-1]
    for k in range(1, n - 1):
        if d[k - 1] * d[k] <= 0:
            continue
        w1 = 2 * h[k] + h[k - 1]
        w2 = h[k] + 2 * h[k - 1]
        m[k] = (w1 + w2) / (w1 / d[k - 1] + w2 / d[k])

    for k in range(n - 1):
        if abs(d[k]) < 1e-12:
            m[k] = 0.0
            m[k + 1] = 0.0
            continue
        alpha = m[k] / d[k]
        beta = m[k + 1] / d[k]
        s = alpha * alpha + beta * beta
        if s > 9:
            tau = 3.0 / np.sqrt(s)
            m[k] = tau * alpha * d[k]
            m[k + 1] = tau * beta * d[k]
    return m


def natural_tangents(xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Left/right end slopes of each natural cubic spline segment (zero curvature at the ends)."""

    h, d = _secant_slopes(xs, ys)
    n = xs.size
    second = np.zeros(n, dtype=np.float64)
    interior = n - 2
    if interior > 0:
        a = np.zeros((interior, interior), dtype=np.float64)
        rhs = np.zeros(interior, dtype=np.float64)
        for row in range(interior):
            k = row + 1
            a[row, row] = 2 * (h[k - 1] + h[k])
            if row > 0:
                a[row, row - 1] = h[k - 1]
            if row < interior - 1:
                a[row, row + 1] = h[k]
            rhs[row] = 6 * (d[k] - d[k - 1])
        second[1:-1] = np.linalg.solve(a, rhs)

    left = d - h * (2 * second[:-1] + second[1:]) / 6
    right = d + h * (second[:-1] + 2 * second[1:]) / 6
    return left, right


def _hermite_path(xs: np.ndarray, ys: np.ndarray, left: np.ndarray, right: np.ndarray) -> str:
    commands = [move_to(xs[0], ys[0])]
    for i in range(xs.size - 1):
        third = (xs[i + 1] - xs[i]) / 3
        commands.append(
            cubic_to(
                xs[i] + third,
                ys[i] + left[i] * third,
                xs[i + 1] - third,
                ys[i + 1] - right[i] * third,
                xs[i + 1],
                ys[i + 1],
            )
        )
    return join_path(commands)


def _monotone(xs: np.ndarray, ys: np.ndarray) -> str:
    m = monotone_tangents(xs, ys)
    return _hermite_path(xs, ys, m[:-1], m[1:])


def _natural(xs: np.ndarray, ys: np.ndarray) -> str:
    steps = np.diff(xs)
    if not (np.all(steps > 0) or np.all(steps < 0)):
        LOGGER.debug("natural spline needs strictly monotonic x values; using monotone tangents")
        return _monotone(xs, ys)
    try:
        left, right = natural_tangents(xs, ys)
    except np.linalg.LinAlgError:
        LOGGER.debug("natural spline system is singular; using monotone tangents")
        return _monotone(xs, ys)
    return _hermite_path(xs, ys, left, right)


_CURVE_BUILDERS: dict[str, Callable[[np.ndarray, np.ndarray], str]] = {
    "linear": _linear,
    "step": _step_middle,
    "stepBefore": _step_before,
    "stepAfter": _step_after,
    "monotone": _monotone,
    "natural": _natural,
}
