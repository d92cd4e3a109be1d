from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from typing import Any, Generic, Sequence, TypeVar

import numpy as np

from luvatrix_chart.adapters import coerce_values


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class StackedPoint(Generic[T]):
    x: Any
    y0: float
    y1: float
    original: T


def stack_series_data(series_list: Sequence[Sequence[T]]) -> list[list[StackedPoint[T]]]:
    """Accumulate aligned series into cumulative `(y0, y1)` bands.

    Series are aligned by position: index `i` of every series stacks on index `i` of the
    series before it, whatever their `x` values are.
    """

    if len(series_list) == 0:
        return []

    width = max(len(series) for series in series_list)
    running = np.zeros(width, dtype=np.float64)
    stacked: list[list[StackedPoint[T]]] = []
    for series_index, series in enumerate(series_list):
        ys = coerce_values([_field(datum, "y") for datum in series], label=f"series[{series_index}].y")
        if len(series) < width:
            LOGGER.debug("series %d is shorter than the widest series (%d < %d)", series_index, len(series), width)
        base = running[: ys.size].copy()
        top = base + ys
        running[: ys.size] = top
        stacked.append(
            [
                StackedPoint(x=_field(datum, "x"), y0=float(y0), y1=float(y1), original=datum)
                for datum, y0, y1 in zip(series, base.tolist(), top.tolist(), strict=True)
            ]
        )
    return stacked


def _field(datum: Any, name: str) -> Any:
    if isinstance(datum, Mapping):
        return datum.get(name)
    return getattr(datum, name, None)
