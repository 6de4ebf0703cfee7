from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from termplot.errors import InvalidArgument


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_values(values: Any, *, label: str = "values") -> np.ndarray:
    """Coerce a 1-D numeric input into a float64 array.

    Accepts sequences, numpy arrays, and (when installed) pandas Series and
    torch tensors. ``None`` entries become NaN.
    """
    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.ndim != 1:
            raise InvalidArgument(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(values, pd.Series):
        return _coerce_ndarray(values.to_numpy(), label=label)

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidArgument(f"{label} must be 1-D")
        return _coerce_ndarray(values, label=label)

    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        if len(values) == 0:
            return np.zeros(0, dtype=np.float64)
        return _coerce_ndarray(np.asarray(values, dtype=object), label=label)

    raise InvalidArgument(f"unsupported {label} input type: {type(values)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise InvalidArgument(f"{label} must be 1-D")
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
            raise InvalidArgument(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
