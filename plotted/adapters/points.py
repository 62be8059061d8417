from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable

import numpy as np

from plotted.adapters.magnitude import SUPPORTED_MAGNITUDES, extract_magnitude, is_magnitude
from plotted.errors import UnsupportedElementError
from plotted.series import Point


PointConverter = Callable[[Any, int], Point]

SUPPORTED_ELEMENTS = (
    "bare magnitude (plotted against its index)",
    "2-tuple or 2-list of magnitudes",
    "1-D numpy array of length 2",
    "complex number (real, imag)",
)

_REGISTRY: dict[type, PointConverter] = {}


def register_point(type_: type, converter: PointConverter) -> None:
    """Register a converter ``(element, index) -> Point`` for a custom element type."""
    if not isinstance(type_, type):
        raise TypeError("type_ must be a class")
    if not callable(converter):
        raise TypeError("converter must be callable")
    _REGISTRY[type_] = converter


def unregister_point(type_: type) -> None:
    _REGISTRY.pop(type_, None)


def extract_point(element: Any, index: int) -> Point:
    for klass in type(element).__mro__:
        converter = _REGISTRY.get(klass)
        if converter is not None:
            return converter(element, index)

    if isinstance(element, (complex, np.complexfloating)):
        return Point(x=float(element.real), y=float(element.imag))
    if is_magnitude(element):
        return Point(x=float(index), y=extract_magnitude(element))
    if isinstance(element, np.ndarray):
        if element.ndim == 1 and element.size == 2:
            return _pair_point(list(element), index)
        raise UnsupportedElementError(_unsupported_message(element, index))
    if isinstance(element, Sequence) and not isinstance(element, (str, bytes, bytearray)):
        if len(element) == 2:
            return _pair_point(element, index)
    raise UnsupportedElementError(_unsupported_message(element, index))


def _pair_point(pair: Sequence[Any], index: int) -> Point:
    first, second = pair[0], pair[1]
    try:
        return Point(x=extract_magnitude(first), y=extract_magnitude(second))
    except UnsupportedElementError as exc:
        raise UnsupportedElementError(f"element at index {index} is a pair with non-magnitude members: {exc}") from exc


def _unsupported_message(element: Any, index: int) -> str:
    shapes = "; ".join(SUPPORTED_ELEMENTS)
    kinds = ", ".join(SUPPORTED_MAGNITUDES)
    return (
        f"unsupported element at index {index}: {type(element)!r} "
        f"(supported shapes: {shapes}; magnitudes: {kinds})"
    )
