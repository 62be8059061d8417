from __future__ import annotations

import numpy as np

from plotted.raster.canvas import RGBA, draw_pixel


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, width: int = 1) -> None:
    """Connect consecutive pixel positions with straight runs of ``width``-pixel brush stamps."""
    radius = max(0, width // 2)
    if xs.size == 1:
        _stamp(dst, int(xs[0]), int(ys[0]), color, radius)
        return
    for i in range(xs.size - 1):
        cols, rows = _segment_pixels(int(xs[i]), int(ys[i]), int(xs[i + 1]), int(ys[i + 1]))
        # Skip the shared endpoint so translucent joints are not blended twice.
        last = cols.size if i == xs.size - 2 else cols.size - 1
        for col, row in zip(cols[:last].tolist(), rows[:last].tolist(), strict=True):
            _stamp(dst, col, row, color, radius)


def draw_markers(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, radius: int = 1) -> None:
    for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
        _stamp(dst, int(x), int(y), color, max(0, radius))


def _segment_pixels(x0: int, y0: int, x1: int, y1: int) -> tuple[np.ndarray, np.ndarray]:
    steps = max(abs(x1 - x0), abs(y1 - y0)) + 1
    cols = np.rint(np.linspace(x0, x1, steps)).astype(np.int32)
    rows = np.rint(np.linspace(y0, y1, steps)).astype(np.int32)
    return cols, rows


def _stamp(dst: np.ndarray, x: int, y: int, color: RGBA, radius: int) -> None:
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)
