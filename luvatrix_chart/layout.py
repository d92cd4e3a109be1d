from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from dataclasses import dataclass
from typing import Union

from luvatrix_chart.errors import ChartDataError


@dataclass(frozen=True)
class Padding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


PaddingLike = Union[None, int, float, Mapping[str, float], Padding]

_PADDING_KEYS = ("top", "right", "bottom", "left")


def normalize_padding(padding: PaddingLike = None) -> Padding:
    if padding is None:
        return Padding()
    if isinstance(padding, Padding):
        return padding
    if isinstance(padding, Real) and not isinstance(padding, bool):
        value = float(padding)
        return Padding(top=value, right=value, bottom=value, left=value)
    if isinstance(padding, Mapping):
        unknown = set(padding) - set(_PADDING_KEYS)
        if unknown:
            raise ChartDataError(f"unknown padding keys: {sorted(unknown)}")
        return Padding(**{key: float(padding.get(key) or 0.0) for key in _PADDING_KEYS})
    raise ChartDataError(f"unsupported padding type: {type(padding)!r}")


def inner_rect(width: float, height: float, padding: PaddingLike = None) -> Rect:
    # Negative padding is passed through untouched; only the size is clamped.
    pad = normalize_padding(padding)
    return Rect(
        x=pad.left,
        y=pad.top,
        width=max(0.0, width - pad.left - pad.right),
        height=max(0.0, height - pad.top - pad.bottom),
    )
