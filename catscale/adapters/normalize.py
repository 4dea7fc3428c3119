from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from catscale.errors import InvalidCategoricalValueError, InvalidRenderValueError
from catscale.values import CategoricalValue, as_categorical_value


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coerce_categorical_values(values: Any) -> list[CategoricalValue]:
    """Resolve a bulk input of labels and `(label, offset)` pairs, failing on the first bad element."""

    raw_items = _as_item_list(values, label="values")
    out: list[CategoricalValue] = []
    for i, raw in enumerate(raw_items):
        try:
            out.append(as_categorical_value(raw))
        except InvalidCategoricalValueError as exc:
            raise InvalidCategoricalValueError(f"values[{i}]: {exc}") from exc
    return out


def coerce_render_values(values: Any) -> np.ndarray:
    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.ndim != 1:
            raise InvalidRenderValueError("render values must be 1-D")
        if tensor.dtype == torch.bool:
            raise InvalidRenderValueError("render values must be numeric, got a bool tensor")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(values, (pd.Series, pd.Index)):
        return _coerce_ndarray(values.to_numpy())

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidRenderValueError("render values must be 1-D")
        return _coerce_ndarray(values)

    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(values, dtype=object))

    raise InvalidRenderValueError(f"unsupported render values input type: {type(values)!r}")


def _as_item_list(values: Any, *, label: str) -> list[Any]:
    if pd is not None and isinstance(values, (pd.Series, pd.Index)):
        return values.tolist()

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidCategoricalValueError(f"{label} must be 1-D")
        return values.tolist()

    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        return list(values)

    raise InvalidCategoricalValueError(f"unsupported {label} input type: {type(values)!r}")


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.ndim != 1:
        raise InvalidRenderValueError("render values must be 1-D")
    if arr.dtype.kind in {"i", "u", "f"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None or isinstance(raw, (bool, str, bytes)):
            raise InvalidRenderValueError(f"render values contain non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidRenderValueError(f"render values contain non-numeric value at index {i}: {raw!r}") from exc
    return out
