from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, eq=False)
class Series:
    """Ordered, read-only 2D point series.

    Points are stored column-wise as float64 arrays. The arrays are marked
    read-only so a built series can be shared with reducers and renderers
    without being mutated.
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        x = np.array(self.x, dtype=np.float64, copy=True).reshape(-1)
        y = np.array(self.y, dtype=np.float64, copy=True).reshape(-1)
        if x.shape != y.shape:
            raise ValueError(f"x and y length mismatch: {x.size} != {y.size}")
        x.setflags(write=False)
        y.setflags(write=False)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def empty(cls) -> "Series":
        return cls(x=np.empty(0, dtype=np.float64), y=np.empty(0, dtype=np.float64))

    @classmethod
    def from_points(cls, points: list[Point] | tuple[Point, ...]) -> "Series":
        if not points:
            return cls.empty()
        return cls(
            x=np.fromiter((p.x for p in points), dtype=np.float64, count=len(points)),
            y=np.fromiter((p.y for p in points), dtype=np.float64, count=len(points)),
        )

    def __len__(self) -> int:
        return int(self.y.size)

    def __iter__(self) -> Iterator[Point]:
        for x_val, y_val in zip(self.x.tolist(), self.y.tolist(), strict=True):
            yield Point(x=x_val, y=y_val)

    def __getitem__(self, index: int) -> Point:
        return Point(x=float(self.x[index]), y=float(self.y[index]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return np.array_equal(self.x, other.x, equal_nan=True) and np.array_equal(self.y, other.y, equal_nan=True)

    __hash__ = None  # type: ignore[assignment]

    def points(self) -> tuple[Point, ...]:
        return tuple(self)

    def xy(self) -> np.ndarray:
        """Return an ``(N, 2)`` copy of the series coordinates."""
        return np.column_stack((self.x, self.y))

    def finite_y(self) -> np.ndarray:
        return self.y[np.isfinite(self.y)]
