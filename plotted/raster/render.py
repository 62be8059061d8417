from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from plotted.plan import FilledRect, LinePrimitive, RenderPlan, ScatterPrimitive
from plotted.raster.canvas import RGBA, fill_rect, new_canvas
from plotted.raster.draw import draw_markers, draw_polyline
from plotted.scales import ViewBox, view_box


@dataclass(frozen=True)
class RasterStyle:
    background: RGBA = (12, 16, 23, 255)
    line_color: RGBA = (255, 165, 0, 255)
    line_width: int = 1
    marker_color: RGBA = (62, 149, 255, 255)
    bar_color: RGBA = (110, 169, 255, 220)


def plan_limits(plan: RenderPlan) -> ViewBox:
    """Visible range of ``plan``: every primitive plus its include-hints."""
    return view_box(
        (primitive.extent() for primitive in plan.primitives),
        include_x=plan.include_x,
        include_y=plan.include_y,
    )


def render_rgba(plan: RenderPlan, width: int, height: int, *, style: RasterStyle | None = None) -> np.ndarray:
    """Rasterize ``plan`` into an ``(height, width, 4)`` uint8 RGBA frame."""
    if width <= 1 or height <= 1:
        raise ValueError("width/height must be > 1")
    style = style if style is not None else RasterStyle()
    canvas = new_canvas(width, height, color=style.background)
    if plan.is_empty:
        return canvas

    box = plan_limits(plan)
    for primitive in plan.primitives:
        if isinstance(primitive, FilledRect):
            px, py = box.to_pixels(primitive.extent(), width, height)
            fill_rect(canvas, int(px[0]), int(py[0]), int(px[1]), int(py[1]), style.bar_color)
        elif isinstance(primitive, ScatterPrimitive):
            pts = primitive.points[np.all(np.isfinite(primitive.points), axis=1)]
            if pts.size:
                px, py = box.to_pixels(pts, width, height)
                draw_markers(canvas, px, py, style.marker_color, radius=int(round(primitive.radius)))
        elif isinstance(primitive, LinePrimitive):
            # Non-finite points split the line into separate runs.
            for start, stop in _contiguous_true_runs(np.all(np.isfinite(primitive.points), axis=1)):
                px, py = box.to_pixels(primitive.points[start:stop], width, height)
                draw_polyline(canvas, px, py, style.line_color, width=style.line_width)
        else:
            raise TypeError(f"unsupported primitive: {type(primitive)!r}")
    return canvas


def _contiguous_true_runs(mask: np.ndarray) -> list[tuple[int, int]]:
    idx = np.flatnonzero(mask)
    if idx.size == 0:
        return []
    # Run boundaries are where consecutive finite indices jump.
    breaks = np.flatnonzero(np.diff(idx) > 1) + 1
    starts = np.concatenate(([0], breaks))
    stops = np.concatenate((breaks, [idx.size]))
    return [(int(idx[a]), int(idx[b - 1]) + 1) for a, b in zip(starts.tolist(), stops.tolist(), strict=True)]
