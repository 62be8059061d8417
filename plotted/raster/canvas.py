from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def _blend(dst_rgb: np.ndarray, color: RGBA) -> np.ndarray:
    a = color[3] / 255.0
    src = np.asarray(color[0:3], dtype=np.float32)
    return (src * a + dst_rgb.astype(np.float32) * (1.0 - a)).astype(np.uint8)


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    dst[y, x, 0:3] = _blend(dst[y, x, 0:3], color)
    dst[y, x, 3] = 255


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    segment = dst[y, xa : xb + 1]
    segment[:, :3] = _blend(segment[:, :3], color)
    segment[:, 3] = 255


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Fill the pixel rectangle spanned by two corners (inclusive, clipped)."""
    top = max(0, min(y0, y1))
    bottom = min(dst.shape[0] - 1, max(y0, y1))
    for yy in range(top, bottom + 1):
        draw_hline(dst, x0, x1, yy, color)
