from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Union

import numpy as np

from plotted.adapters import build_series
from plotted.attributes import DEFAULT_MARKER_RADIUS, LayoutHints, PlottedAttributes, RenderMode
from plotted.reducers import histogram, kde
from plotted.series import Series


LOGGER = logging.getLogger(__name__)


def _frozen_xy(xy: Any) -> np.ndarray:
    arr = np.array(xy, dtype=np.float64, copy=True).reshape(-1, 2)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class LinePrimitive:
    points: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _frozen_xy(self.points))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinePrimitive):
            return NotImplemented
        return np.array_equal(self.points, other.points, equal_nan=True)

    __hash__ = None  # type: ignore[assignment]

    def extent(self) -> np.ndarray:
        return self.points


@dataclass(frozen=True, eq=False)
class ScatterPrimitive:
    points: np.ndarray
    radius: float = DEFAULT_MARKER_RADIUS

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _frozen_xy(self.points))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScatterPrimitive):
            return NotImplemented
        return self.radius == other.radius and np.array_equal(self.points, other.points, equal_nan=True)

    __hash__ = None  # type: ignore[assignment]

    def extent(self) -> np.ndarray:
        return self.points


@dataclass(frozen=True)
class FilledRect:
    x0: float
    x1: float
    y0: float
    y1: float

    def extent(self) -> np.ndarray:
        return np.asarray([[self.x0, self.y0], [self.x1, self.y1]], dtype=np.float64)

    def polygon(self) -> tuple[tuple[float, float], ...]:
        return ((self.x0, self.y0), (self.x1, self.y0), (self.x1, self.y1), (self.x0, self.y1))


RenderPrimitive = Union[LinePrimitive, ScatterPrimitive, FilledRect]


@dataclass(frozen=True)
class RenderPlan:
    """Everything a renderer needs to draw one plotted value."""

    mode: RenderMode
    primitives: tuple[RenderPrimitive, ...] = ()
    include_x: tuple[float, ...] = ()
    include_y: tuple[float, ...] = ()
    layout: LayoutHints = field(default_factory=LayoutHints)

    @property
    def is_empty(self) -> bool:
        return not self.primitives


def render_plan(series: Series, attributes: PlottedAttributes | None = None) -> RenderPlan:
    """Choose the reduction for ``attributes.mode`` and describe the result.

    Axis bounds are passed through as include-hints only; they never filter
    the data.
    """
    attrs = attributes if attributes is not None else PlottedAttributes()
    primitives = _primitives_for(series, attrs)
    LOGGER.debug("render plan: mode=%s points=%d primitives=%d", attrs.mode.value, len(series), len(primitives))
    return RenderPlan(
        mode=attrs.mode,
        primitives=primitives,
        include_x=attrs.x_hints(),
        include_y=attrs.y_hints(),
        layout=attrs.layout,
    )


def plan_for(collection: Any, attributes: PlottedAttributes | None = None) -> RenderPlan:
    return render_plan(build_series(collection), attributes)


def _primitives_for(series: Series, attrs: PlottedAttributes) -> tuple[RenderPrimitive, ...]:
    if attrs.mode is RenderMode.HISTOGRAM:
        return tuple(
            FilledRect(x0=b.lower, x1=b.upper, y0=0.0, y1=float(b.count))
            for b in histogram(series, attrs.histogram_bins)
            if b.count > 0
        )
    if attrs.mode is RenderMode.KDE:
        samples = kde(series, attrs.kde_samples)
        if not samples:
            return ()
        return (LinePrimitive(points=[(s.x, s.y) for s in samples]),)
    if len(series) == 0:
        return ()
    if attrs.mode is RenderMode.SCATTER:
        return (ScatterPrimitive(points=series.xy(), radius=attrs.layout.marker_radius),)
    return (LinePrimitive(points=series.xy()),)
