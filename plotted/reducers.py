from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable

import numpy as np

from plotted.errors import PlotDataError
from plotted.series import Series


LOGGER = logging.getLogger(__name__)

DEFAULT_HISTOGRAM_BINS = 21
DEFAULT_KDE_SAMPLES = 100
DEFAULT_BANDWIDTH_FRACTION = 1.0 / 20.0
KDE_CHUNK_POINTS = 65536

Kernel = Callable[[np.ndarray, float], np.ndarray]


@dataclass(frozen=True)
class Bin:
    lower: float
    upper: float
    count: int


@dataclass(frozen=True)
class KdeSample:
    x: float
    y: float


@dataclass(frozen=True)
class ValueRange:
    lo: float
    hi: float

    @property
    def span(self) -> float:
        return self.hi - self.lo


@dataclass(frozen=True)
class GaussianKernel:
    """Gaussian-shaped weight ``exp(-(delta / bandwidth) ** 2)``.

    The bandwidth is a fraction of the observed value span, so the kernel
    adapts to the data's scale. Works elementwise on numpy arrays.
    """

    bandwidth_fraction: float = DEFAULT_BANDWIDTH_FRACTION

    def __post_init__(self) -> None:
        if not np.isfinite(self.bandwidth_fraction) or self.bandwidth_fraction <= 0:
            raise ValueError("bandwidth_fraction must be > 0")

    def bandwidth(self, span: float) -> float:
        return float(span) * self.bandwidth_fraction

    def __call__(self, delta: np.ndarray, span: float) -> np.ndarray:
        bw = self.bandwidth(span)
        return np.exp(-np.square(np.asarray(delta, dtype=np.float64) / bw))


gaussian_kernel = GaussianKernel()


def value_range(values: np.ndarray) -> ValueRange | None:
    """Return the finite ``[min, max]`` of ``values``, or ``None`` if there is none.

    A zero-width range is widened symmetrically around the single value so
    callers can always divide by the span.
    """
    finite = values[np.isfinite(values)]
    if finite.size != values.size:
        LOGGER.debug("ignoring %d non-finite values", values.size - finite.size)
    if finite.size == 0:
        return None
    lo = float(np.min(finite))
    hi = float(np.max(finite))
    if lo == hi:
        delta = max(0.5, abs(lo) * 0.05)
        LOGGER.debug("degenerate value range at %r widened by %r", lo, delta)
        limit = float(np.finfo(np.float64).max)
        return ValueRange(lo=max(lo - delta, -limit), hi=min(hi + delta, limit))
    return ValueRange(lo=lo, hi=hi)



def _working_units(values: np.ndarray, rng: ValueRange, divisions: int) -> tuple[np.ndarray, ValueRange, int]:
    """Rescale ``values`` by a power of two when ``rng.span / divisions`` is unusable.

    Returns the (possibly) scaled values and range plus the binary exponent
    that maps results back. Power-of-two scaling is exact, so bin membership
    is unchanged for ranges that did not need it.
    """
    step = rng.span / divisions
    if np.isfinite(step) and step >= np.finfo(np.float64).tiny:
        return values, rng, 0
    _, exponent = math.frexp(max(abs(rng.lo), abs(rng.hi)))
    LOGGER.debug("value range [%r, %r] rescaled by 2**%d", rng.lo, rng.hi, -exponent)
    scaled = ValueRange(lo=math.ldexp(rng.lo, -exponent), hi=math.ldexp(rng.hi, -exponent))
    return np.ldexp(values, -exponent), scaled, exponent


def histogram(series: Series, num_bins: int = DEFAULT_HISTOGRAM_BINS) -> tuple[Bin, ...]:
    """Count ``series`` y-values into ``num_bins`` equal-width bins.

    Bins cover the observed y range and are returned in ascending order,
    zero-count bins included. The maximum value is folded into the last bin.
    """
    if num_bins < 0:
        raise ValueError("num_bins must be >= 0")
    if num_bins == 0 or len(series) == 0:
        return ()
    rng = value_range(series.y)
    if rng is None:
        return ()

    values, work, exponent = _working_units(series.finite_y(), rng, num_bins)
    step = work.span / num_bins
    indices = np.floor((values - work.lo) / step).astype(np.int64)
    np.clip(indices, 0, num_bins - 1, out=indices)
    counts = np.bincount(indices, minlength=num_bins)

    # Shared edges keep neighbouring bins exactly contiguous.
    edges = np.ldexp(work.lo + np.arange(num_bins + 1, dtype=np.float64) * step, exponent)
    edges[0] = rng.lo
    edges[-1] = rng.hi
    return tuple(
        Bin(lower=float(edges[i]), upper=float(edges[i + 1]), count=int(counts[i]))
        for i in range(num_bins)
    )


def kde(
    series: Series,
    num_samples: int = DEFAULT_KDE_SAMPLES,
    kernel: Kernel = gaussian_kernel,
    *,
    normalize: bool = False,
) -> tuple[KdeSample, ...]:
    """Smooth ``series`` y-values into ``num_samples`` kernel-density samples.

    Sample locations sit at the centers of ``num_samples`` equal slices of
    the observed y range. Each sample accumulates ``kernel(y - x_i, span)``
    over every point. The result is not a probability density unless
    ``normalize`` is set, which divides by ``N * bandwidth`` and needs a
    kernel exposing ``bandwidth(span)``.

    When the span does not fit a float64 the kernel sees deltas and span
    rescaled by the same power of two.
    """
    if num_samples < 0:
        raise ValueError("num_samples must be >= 0")
    if num_samples == 0 or len(series) == 0:
        return ()
    rng = value_range(series.y)
    if rng is None:
        return ()

    values, work, exponent = _working_units(series.finite_y(), rng, num_samples)
    step = work.span / num_samples
    xs = work.lo + np.arange(num_samples, dtype=np.float64) * step + step / 2.0

    ys = np.zeros(num_samples, dtype=np.float64)
    for start in range(0, values.size, KDE_CHUNK_POINTS):
        # Rows are sample locations, columns are data points.
        deltas = values[np.newaxis, start : start + KDE_CHUNK_POINTS] - xs[:, np.newaxis]
        weights = np.asarray(kernel(deltas, work.span), dtype=np.float64)
        try:
            weights = np.broadcast_to(weights, deltas.shape)
        except ValueError as exc:
            raise PlotDataError(f"kernel returned shape {weights.shape}, expected {deltas.shape}") from exc
        ys += weights.sum(axis=1)

    if normalize:
        bandwidth = getattr(kernel, "bandwidth", None)
        if bandwidth is None:
            raise PlotDataError("normalize=True needs a kernel with a bandwidth(span) method")
        ys = np.ldexp(ys / (values.size * float(bandwidth(work.span))), -exponent)

    xs = np.ldexp(xs, exponent)
    return tuple(KdeSample(x=float(x), y=float(y)) for x, y in zip(xs.tolist(), ys.tolist(), strict=True))
