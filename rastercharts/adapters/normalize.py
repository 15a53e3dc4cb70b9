from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from rastercharts.errors import ChartDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coerce_values(values: Any, *, label: str = "values") -> np.ndarray:
    """Turn a 1-D list, tuple, numpy array, pandas Series or torch tensor into float64.

    ``None`` entries become NaN; empty input is allowed.
    """

    if values is None:
        raise ChartDataError(f"{label} input is required")

    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(values, pd.Series):
        return _coerce_ndarray(values.to_numpy(), label=label)

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(values, label=label)

    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(list(values), dtype=object), label=label)

    raise ChartDataError(f"unsupported {label} input type: {type(values)!r}")


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
