from __future__ import annotations

import datetime
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable

import numpy as np

from plotted.errors import UnsupportedElementError


MagnitudeConverter = Callable[[Any], float]

SUPPORTED_MAGNITUDES = (
    "int",
    "float",
    "numpy integer/floating scalar",
    "Decimal",
    "Fraction",
    "datetime.timedelta",
    "numpy.timedelta64",
)

_REGISTRY: dict[type, MagnitudeConverter] = {}


def register_magnitude(type_: type, converter: MagnitudeConverter) -> None:
    """Teach ``extract_magnitude`` how to convert instances of ``type_``.

    Registered converters win over the built-in kinds, so a subclass of a
    built-in numeric type can override its default conversion.
    """
    if not isinstance(type_, type):
        raise TypeError("type_ must be a class")
    if not callable(converter):
        raise TypeError("converter must be callable")
    _REGISTRY[type_] = converter


def unregister_magnitude(type_: type) -> None:
    _REGISTRY.pop(type_, None)


def is_magnitude(value: Any) -> bool:
    return _lookup_registered(value) is not None or _is_builtin_magnitude(value)


def extract_magnitude(value: Any) -> float:
    converter = _lookup_registered(value)
    if converter is not None:
        return float(converter(value))

    # bool is an int subclass but not a magnitude.
    if isinstance(value, (bool, np.bool_)):
        raise UnsupportedElementError(_unsupported_message(value))
    if isinstance(value, datetime.timedelta):
        return value.total_seconds()
    if isinstance(value, np.timedelta64):
        return _timedelta64_seconds(value)
    if isinstance(value, (int, float, np.integer, np.floating, Decimal, Fraction)):
        # Wide integers round to the nearest float64; that loss is accepted.
        try:
            return float(value)
        except OverflowError:
            return float("inf") if value > 0 else float("-inf")
    raise UnsupportedElementError(_unsupported_message(value))


def _lookup_registered(value: Any) -> MagnitudeConverter | None:
    if not _REGISTRY:
        return None
    for klass in type(value).__mro__:
        converter = _REGISTRY.get(klass)
        if converter is not None:
            return converter
    return None


def _is_builtin_magnitude(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(
        value,
        (int, float, np.integer, np.floating, Decimal, Fraction, datetime.timedelta, np.timedelta64),
    )


def _timedelta64_seconds(value: np.timedelta64) -> float:
    if np.isnat(value):
        return float("nan")
    return float(value / np.timedelta64(1, "s"))


def _unsupported_message(value: Any) -> str:
    kinds = ", ".join(SUPPORTED_MAGNITUDES)
    return f"unsupported magnitude type: {type(value)!r} (supported: {kinds})"
