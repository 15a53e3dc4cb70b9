from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when chart input data or configuration cannot be used."""


class ChartStateError(RuntimeError):
    """Raised when a painter is driven outside its accumulate/render protocol."""
