from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import math

from plotted.errors import PlotDataError
from plotted.reducers import DEFAULT_HISTOGRAM_BINS, DEFAULT_KDE_SAMPLES


DEFAULT_VIEW_ASPECT = 5.0
DEFAULT_MIN_SIZE = (300.0, 100.0)
DEFAULT_MARKER_RADIUS = 3.0


class RenderMode(Enum):
    LINE = "line"
    SCATTER = "scatter"
    HISTOGRAM = "histogram"
    KDE = "kde"


@dataclass(frozen=True)
class LayoutHints:
    view_aspect: float = DEFAULT_VIEW_ASPECT
    min_size: tuple[float, float] = DEFAULT_MIN_SIZE
    allow_drag: bool = False
    allow_zoom: bool = False
    marker_radius: float = DEFAULT_MARKER_RADIUS

    def __post_init__(self) -> None:
        if self.view_aspect <= 0:
            raise ValueError("view_aspect must be > 0")
        if len(self.min_size) != 2 or self.min_size[0] < 0 or self.min_size[1] < 0:
            raise ValueError("min_size must be a (width, height) pair >= 0")
        if self.marker_radius <= 0:
            raise ValueError("marker_radius must be > 0")


@dataclass(frozen=True)
class PlottedAttributes:
    """How a plotted collection is drawn.

    ``min_x``/``max_x``/``min_y``/``max_y`` are view-range hints: the visible
    range is extended to include them, data outside is still drawn.
    """

    mode: RenderMode = RenderMode.LINE
    min_x: float | None = None
    max_x: float | None = None
    min_y: float | None = None
    max_y: float | None = None
    histogram_bins: int = DEFAULT_HISTOGRAM_BINS
    kde_samples: int = DEFAULT_KDE_SAMPLES
    layout: LayoutHints = field(default_factory=LayoutHints)

    def __post_init__(self) -> None:
        if not isinstance(self.mode, RenderMode):
            object.__setattr__(self, "mode", RenderMode(self.mode))
        for name in ("min_x", "max_x", "min_y", "max_y"):
            value = getattr(self, name)
            if value is None:
                continue
            value = float(value)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite")
            object.__setattr__(self, name, value)
        if self.histogram_bins < 0:
            raise ValueError("histogram_bins must be >= 0")
        if self.kde_samples < 0:
            raise ValueError("kde_samples must be >= 0")

    @classmethod
    def from_flags(
        cls,
        *,
        scatter: bool = False,
        histogram: bool = False,
        kde: bool = False,
        min_x: float | None = None,
        max_x: float | None = None,
        min_y: float | None = None,
        max_y: float | None = None,
    ) -> "PlottedAttributes":
        """Build attributes from the boolean option trio used by inspector field attributes."""
        chosen = [
            mode
            for mode, flag in ((RenderMode.SCATTER, scatter), (RenderMode.HISTOGRAM, histogram), (RenderMode.KDE, kde))
            if flag
        ]
        if len(chosen) > 1:
            names = ", ".join(mode.value for mode in chosen)
            raise PlotDataError(f"render flags are mutually exclusive, got: {names}")
        mode = chosen[0] if chosen else RenderMode.LINE
        return cls(mode=mode, min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)

    def x_hints(self) -> tuple[float, ...]:
        return tuple(v for v in (self.min_x, self.max_x) if v is not None)

    def y_hints(self) -> tuple[float, ...]:
        return tuple(v for v in (self.min_y, self.max_y) if v is not None)
