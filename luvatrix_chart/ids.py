from __future__ import annotations

import threading


LINE_GRADIENT_PREFIX = "tiger-line-grad"
AREA_GRADIENT_PREFIX = "tiger-area-grad"
BAR_GRADIENT_PREFIX = "tiger-bar-grad"


class GradientIdFactory:
    """Hands out unique gradient id prefixes for one component tree.

    Each factory owns its counter; create one per tree (or per test) instead of sharing
    module state.
    """

    def __init__(self, prefix: str) -> None:
        if not prefix or not isinstance(prefix, str):
            raise ValueError("prefix must be a non-empty string")
        self._prefix = prefix
        self._counter = 0
        self._lock = threading.Lock()

    @property
    def prefix(self) -> str:
        return self._prefix

    def next(self) -> str:
        with self._lock:
            self._counter += 1
            value = self._counter
        return f"{self._prefix}-{value}"

    def reset(self) -> None:
        with self._lock:
            self._counter = 0


def line_gradient_ids() -> GradientIdFactory:
    return GradientIdFactory(LINE_GRADIENT_PREFIX)


def area_gradient_ids() -> GradientIdFactory:
    return GradientIdFactory(AREA_GRADIENT_PREFIX)


def bar_gradient_ids() -> GradientIdFactory:
    return GradientIdFactory(BAR_GRADIENT_PREFIX)
