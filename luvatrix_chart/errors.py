from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when chart input cannot be interpreted as geometry."""
