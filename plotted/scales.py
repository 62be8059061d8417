from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class ViewBox:
    """Visible data range of a plot, mapped onto a pixel grid with y pointing down."""

    xmin: float
    xmax: float
    ymin: float
    ymax: float

    def to_pixels(self, xy: np.ndarray, width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
        """Map finite ``(N, 2)`` coordinates to clipped pixel columns and rows."""
        if width <= 1 or height <= 1:
            raise ValueError("plot viewport width/height must be > 1")
        fx = _fraction(xy[:, 0], self.xmin, self.xmax)
        fy = _fraction(xy[:, 1], self.ymin, self.ymax)
        px = np.rint(fx * (width - 1)).astype(np.int32)
        py = (height - 1) - np.rint(fy * (height - 1)).astype(np.int32)
        np.clip(px, 0, width - 1, out=px)
        np.clip(py, 0, height - 1, out=py)
        return px, py


def _fraction(values: np.ndarray, lo: float, hi: float) -> np.ndarray:
    # Halving first keeps ranges near the float64 limit from overflowing.
    with np.errstate(over="ignore", invalid="ignore"):
        out = (values * 0.5 - lo * 0.5) / (hi * 0.5 - lo * 0.5)
    return np.clip(np.nan_to_num(out, nan=0.0), -1.0, 2.0)


def view_box(
    extents: Iterable[np.ndarray],
    *,
    include_x: Iterable[float] = (),
    include_y: Iterable[float] = (),
    y_buffer_ratio: float = 0.05,
) -> ViewBox:
    """Union of ``(N, 2)`` extents and include-hints, padded for display.

    Non-finite coordinates are ignored. The y range gets a small buffer and
    zero-width ranges are widened; an empty input shows the unit square.
    """
    xs: list[np.ndarray] = [np.asarray(list(include_x), dtype=np.float64)]
    ys: list[np.ndarray] = [np.asarray(list(include_y), dtype=np.float64)]
    for ext in extents:
        arr = np.asarray(ext, dtype=np.float64).reshape(-1, 2)
        xs.append(arr[:, 0])
        ys.append(arr[:, 1])
    vx = np.concatenate(xs)
    vy = np.concatenate(ys)
    vx = vx[np.isfinite(vx)]
    vy = vy[np.isfinite(vy)]

    xmin, xmax = _span_or_unit(vx)
    ymin, ymax = _span_or_unit(vy)

    if ymin == ymax:
        delta = max(1.0, abs(ymin) * y_buffer_ratio)
        ymin, ymax = ymin - delta, ymax + delta
    else:
        pad = (ymax * 0.5 - ymin * 0.5) * 2.0 * y_buffer_ratio
        ymin, ymax = ymin - pad, ymax + pad
    if xmin == xmax:
        xmin, xmax = xmin - 1.0, xmax + 1.0

    limit = float(np.finfo(np.float64).max)
    return ViewBox(
        xmin=max(xmin, -limit),
        xmax=min(xmax, limit),
        ymin=max(ymin, -limit),
        ymax=min(ymax, limit),
    )


def _span_or_unit(values: np.ndarray) -> tuple[float, float]:
    if values.size == 0:
        return (0.0, 1.0)
    return (float(np.min(values)), float(np.max(values)))
