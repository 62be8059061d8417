from .canvas import draw_hline, fill_rect, new_canvas
from .draw import draw_markers, draw_polyline
from .render import RasterStyle, plan_limits, render_rgba

__all__ = [
    "RasterStyle",
    "draw_hline",
    "draw_markers",
    "draw_polyline",
    "fill_rect",
    "new_canvas",
    "plan_limits",
    "render_rgba",
]
