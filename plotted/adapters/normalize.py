from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any

import numpy as np

from plotted.adapters.points import extract_point
from plotted.errors import PlotDataError
from plotted.series import Series


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


LOGGER = logging.getLogger(__name__)


def build_series(collection: Any) -> Series:
    """Build a point series from ``collection`` in iteration order.

    Bare magnitudes are plotted against their zero-based position; pairs
    (and other self-describing elements) supply their own x. Mappings are
    plotted as their ``(key, value)`` items.
    """
    if torch is not None and isinstance(collection, torch.Tensor):
        return _series_from_ndarray(collection.detach().cpu().numpy())

    if pd is not None and isinstance(collection, pd.DataFrame):
        return _series_from_dataframe(collection)

    if pd is not None and isinstance(collection, pd.Series):
        return _series_from_ndarray(collection.to_numpy())

    if isinstance(collection, np.ndarray):
        return _series_from_ndarray(collection)

    if isinstance(collection, Mapping):
        return _series_from_iterable(collection.items())

    if isinstance(collection, (str, bytes, bytearray)):
        raise PlotDataError(f"unsupported collection type: {type(collection)!r}")

    if isinstance(collection, Iterable):
        return _series_from_iterable(collection)

    raise PlotDataError(f"unsupported collection type: {type(collection)!r}")


def _series_from_iterable(items: Iterable[Any]) -> Series:
    points = [extract_point(element, index) for index, element in enumerate(items)]
    return Series.from_points(points)


def _series_from_ndarray(arr: np.ndarray) -> Series:
    if arr.ndim == 0:
        raise PlotDataError("0-D arrays are not collections")
    if arr.ndim > 2 or (arr.ndim == 2 and arr.shape[1] != 2):
        raise PlotDataError(f"array input must have shape (N,) or (N, 2), got {arr.shape}")
    if arr.shape[0] == 0:
        return Series.empty()

    kind = arr.dtype.kind
    if kind in {"i", "u", "f"}:
        values = arr.astype(np.float64, copy=False)
    elif kind == "m":
        values = arr / np.timedelta64(1, "s")
    elif kind == "c" and arr.ndim == 1:
        return Series(x=arr.real, y=arr.imag)
    else:
        # Object and other dtypes go element by element so each value is
        # checked by the point adapter.
        LOGGER.debug("building series element-wise for dtype %s", arr.dtype)
        return _series_from_iterable(list(arr))

    if values.ndim == 1:
        return Series(x=np.arange(values.size, dtype=np.float64), y=values)
    return Series(x=values[:, 0], y=values[:, 1])


def _series_from_dataframe(frame: Any) -> Series:
    numeric_cols = [c for c in frame.columns if _is_numeric_dtype(frame[c])]
    if len(numeric_cols) != 2:
        raise PlotDataError("DataFrame input must contain exactly two numeric columns (x, y)")
    x_col, y_col = numeric_cols
    return Series(
        x=frame[x_col].to_numpy(dtype=np.float64),
        y=frame[y_col].to_numpy(dtype=np.float64),
    )


def _is_numeric_dtype(column: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(column)) and not bool(pd.api.types.is_bool_dtype(column))
    except Exception:
        return False
