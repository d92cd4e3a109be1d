from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Literal, Sequence, Union

import numpy as np

from luvatrix_chart.adapters import coerce_values
from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS


LOGGER = logging.getLogger(__name__)

ScaleValue = Union[float, int, str]


def extent(
    values: Any,
    *,
    fallback: tuple[float, float] = (0.0, 1.0),
    include_zero: bool = False,
    padding: float = 0.0,
) -> tuple[float, float]:
    arr = coerce_values(values, label="values")
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        return (float(fallback[0]), float(fallback[1]))

    vmin = float(np.min(finite))
    vmax = float(np.max(finite))
    if include_zero:
        vmin = min(vmin, 0.0)
        vmax = max(vmax, 0.0)

    if vmin == vmax:
        pad = abs(vmin) * 0.1 or 1.0
        return (vmin - pad, vmax + pad)

    if padding > 0:
        span = vmax - vmin
        vmin -= span * padding
        vmax += span * padding
    return (vmin, vmax)


@dataclass(frozen=True)
class LinearScale:
    domain: tuple[float, float]
    range: tuple[float, float]
    type: Literal["linear"] = "linear"

    def map(self, value: ScaleValue) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        span = d1 - d0
        if span == 0:
            return (r0 + r1) / 2
        return r0 + ((_to_float(value) - d0) / span) * (r1 - r0)


@dataclass(frozen=True)
class PointScale:
    domain: tuple[str, ...]
    range: tuple[float, float]
    padding: float
    step: float
    offset: float
    type: Literal["point"] = "point"
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", _first_index_map(self.domain))

    def map(self, value: ScaleValue) -> float:
        index = self._index.get(str(value), 0)
        r0, r1 = self.range
        return r0 + _direction(r0, r1) * (self.offset + self.step * index)


@dataclass(frozen=True)
class BandScale:
    domain: tuple[str, ...]
    range: tuple[float, float]
    padding_inner: float
    padding_outer: float
    align: float
    step: float
    bandwidth: float
    offset: float
    type: Literal["band"] = "band"
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", _first_index_map(self.domain))

    def map(self, value: ScaleValue) -> float:
        """Return the start edge of the band owning `value`."""

        index = self._index.get(str(value), 0)
        r0, r1 = self.range
        return r0 + _direction(r0, r1) * (self.offset + self.step * index)


Scale = Union[LinearScale, PointScale, BandScale]


def create_linear_scale(domain: Sequence[float], range: Sequence[float]) -> LinearScale:
    d0, d1 = (float(v) for v in domain)
    if d0 == d1:
        LOGGER.debug("degenerate linear domain %s; mapping to range midpoint", d0)
    r0, r1 = (float(v) for v in range)
    return LinearScale(domain=(d0, d1), range=(r0, r1))


def create_point_scale(
    domain: Sequence[ScaleValue],
    range: Sequence[float],
    *,
    padding: float | None = None,
) -> PointScale:
    pad = _clamp01(DEFAULT_CHART_DEFAULTS.point_padding if padding is None else padding)
    r0, r1 = (float(v) for v in range)
    keys = tuple(str(v) for v in domain)
    length = abs(r1 - r0)
    n = len(keys)
    step = length / max(1.0, n - 1 + pad * 2) if n > 1 else 0.0
    offset = length / 2 if n <= 1 else step * pad
    return PointScale(domain=keys, range=(r0, r1), padding=pad, step=step, offset=offset)


def create_band_scale(
    domain: Sequence[ScaleValue],
    range: Sequence[float],
    *,
    padding_inner: float | None = None,
    padding_outer: float | None = None,
    align: float | None = None,
) -> BandScale:
    inner = _clamp01(DEFAULT_CHART_DEFAULTS.band_padding_inner if padding_inner is None else padding_inner)
    outer = _clamp01(DEFAULT_CHART_DEFAULTS.band_padding_outer if padding_outer is None else padding_outer)
    align_ratio = _clamp01(DEFAULT_CHART_DEFAULTS.band_align if align is None else align)
    r0, r1 = (float(v) for v in range)
    keys = tuple(str(v) for v in domain)
    length = abs(r1 - r0)
    n = len(keys)
    step = length / max(1.0, n - inner + outer * 2) if n > 0 else 0.0
    bandwidth = step * (1 - inner)
    offset = (length - step * (n - inner)) * align_ratio
    return BandScale(
        domain=keys,
        range=(r0, r1),
        padding_inner=inner,
        padding_outer=outer,
        align=align_ratio,
        step=step,
        bandwidth=bandwidth,
        offset=offset,
    )


def generate_linear_ticks(vmin: float, vmax: float, count: int) -> list[float]:
    lo = min(vmin, vmax)
    hi = max(vmin, vmax)
    if lo == hi or not math.isfinite(lo) or not math.isfinite(hi):
        return [lo]

    step = nice_step((hi - lo) / max(1, count))
    tick_min = math.ceil(lo / step) * step
    tick_max = math.floor(hi / step) * step
    ticks = np.arange(tick_min, tick_max + 0.5 * step, step, dtype=np.float64)
    decimals = max(0, -math.floor(math.log10(step)) + 1)
    ticks = np.round(ticks, decimals)
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return [float(v) for v in ticks]


def nice_step(step: float) -> float:
    if not math.isfinite(step) or step <= 0:
        return 1.0
    exp = math.floor(math.log10(step))
    frac = step / (10**exp)
    if frac >= 5:
        nice_frac = 5.0
    elif frac >= 2:
        nice_frac = 2.0
    elif frac >= 1:
        nice_frac = 1.0
    else:
        nice_frac = 0.5
    return float(nice_frac * (10**exp))


def _to_float(value: ScaleValue) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _first_index_map(keys: tuple[str, ...]) -> dict[str, int]:
    out: dict[str, int] = {}
    for i, key in enumerate(keys):
        out.setdefault(key, i)
    return out


def _direction(r0: float, r1: float) -> float:
    return 1.0 if r1 - r0 >= 0 else -1.0


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, float(value)))
