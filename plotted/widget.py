from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Generic, Iterator, TypeVar

from plotted.adapters import build_series
from plotted.attributes import PlottedAttributes
from plotted.plan import RenderPlan, render_plan
from plotted.series import Series


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Renderer = Callable[[RenderPlan], Any]


@dataclass
class Plotted(Generic[T]):
    """Wrapper marking an inspected field as a plot of its 1D or 2D collection.

    The wrapped value stays live: every ``series``/``plan``/``ui`` call
    re-reads it, nothing derived from it is kept between calls.
    """

    value: T
    attributes: PlottedAttributes | None = None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.value)  # type: ignore[call-overload]

    def __len__(self) -> int:
        return len(self.value)  # type: ignore[arg-type]

    def series(self) -> Series:
        return build_series(self.value)

    def plan(self, attributes: PlottedAttributes | None = None) -> RenderPlan:
        attrs = attributes if attributes is not None else self.attributes
        return render_plan(self.series(), attrs)

    def ui(self, renderer: Renderer, attributes: PlottedAttributes | None = None) -> bool:
        """Draw the current value through ``renderer``.

        Returns whether the value was changed, which a plot never does.
        """
        plan = self.plan(attributes)
        LOGGER.debug("drawing %s plot with %d primitives", plan.mode.value, len(plan.primitives))
        renderer(plan)
        return False
