from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when plotted input data cannot be turned into a series."""


class UnsupportedElementError(PlotDataError):
    """Raised when a collection element has no magnitude or point adapter."""
