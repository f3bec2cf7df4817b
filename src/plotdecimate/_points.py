"""Screen points, array conversion, and non-finite coordinate checks."""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

import numpy as np


class ScreenPoint(NamedTuple):
    """A point in rendering (pixel) space.

    Equality is exact tuple equality; no tolerance is applied anywhere.
    """

    x: float
    y: float


class NonFiniteCoordinateError(ValueError):
    """Raised by :func:`check_finite` when points carry NaN or infinity."""

    def __init__(self, indices: Sequence[int]) -> None:
        self.indices = list(indices)
        shown = ", ".join(str(i) for i in self.indices[:10])
        more = "" if len(self.indices) <= 10 else ", ..."
        super().__init__(
            f"{len(self.indices)} point(s) with non-finite coordinates "
            f"at index {shown}{more}"
        )


def as_points(x: np.ndarray, y: np.ndarray) -> List[ScreenPoint]:
    """Zip two equal-length arrays into a list of :class:`ScreenPoint`."""
    xs = np.asarray(x, dtype=np.float64).ravel()
    ys = np.asarray(y, dtype=np.float64).ravel()
    if len(xs) != len(ys):
        raise ValueError(
            f"x and y must have the same length, got {len(xs)} and {len(ys)}"
        )
    return [ScreenPoint(px, py) for px, py in zip(xs.tolist(), ys.tolist())]


def coerce_points(points):
    """Turn an ``(N, 2)`` ndarray into a list of :class:`ScreenPoint`.

    Other sequences are returned as they are.
    """
    if isinstance(points, np.ndarray):
        xy = points.astype(np.float64, copy=False).reshape(-1, 2)
        return [ScreenPoint(px, py) for px, py in xy.tolist()]
    return points


def to_arrays(points: Sequence[Tuple[float, float]]) -> Tuple[np.ndarray, np.ndarray]:
    """Split points back into ``(x, y)`` float64 arrays."""
    if len(points) == 0:
        return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)
    xy = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return xy[:, 0].copy(), xy[:, 1].copy()


def find_non_finite(points: Sequence[Tuple[float, float]]) -> List[int]:
    """Return the indices of points whose x or y is NaN or infinite."""
    if len(points) == 0:
        return []
    xy = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    bad = ~np.isfinite(xy).all(axis=1)
    return np.flatnonzero(bad).tolist()


def check_finite(points: Sequence[Tuple[float, float]]) -> None:
    """Raise :class:`NonFiniteCoordinateError` if any coordinate is not finite.

    The decimators themselves never raise on such input; this is the opt-in
    diagnostic path for callers that want to reject it up front.
    """
    indices = find_non_finite(points)
    if indices:
        raise NonFiniteCoordinateError(indices)
