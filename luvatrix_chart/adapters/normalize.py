from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from luvatrix_chart.errors import ChartDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coerce_values(value: Any, *, label: str = "values") -> np.ndarray:
    """Coerce a 1-D numeric input into a float64 array (None becomes NaN)."""

    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if len(value) == 0:
            return np.empty(0, dtype=np.float64)
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")


def datum_value(datum: Any) -> float:
    """Read the numeric `value` of a pie/radar datum (mapping, object or bare number)."""

    if isinstance(datum, Mapping):
        raw = datum.get("value")
    elif isinstance(datum, (int, float, Decimal, np.number)) and not isinstance(datum, bool):
        raw = datum
    else:
        raw = getattr(datum, "value", None)
    if raw is None:
        raise ChartDataError(f"datum has no value: {datum!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ChartDataError(f"datum value is not numeric: {raw!r}") from exc


def point_xy(point: Any) -> tuple[float, float]:
    """Read `(x, y)` from a Point-like object, a mapping or a 2-item sequence."""

    if isinstance(point, Mapping):
        return (float(point["x"]), float(point["y"]))
    if hasattr(point, "x") and hasattr(point, "y"):
        return (float(point.x), float(point.y))
    if isinstance(point, Sequence) and len(point) == 2:
        return (float(point[0]), float(point[1]))
    raise ChartDataError(f"unsupported point type: {type(point)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
