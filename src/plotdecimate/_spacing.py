"""Evenly and logarithmically spaced value sequences.

None of these functions raise for degenerate counts or steps: they return
an empty (or shortened) array instead.
"""

from __future__ import annotations

from math import isfinite, log10
from typing import Callable, Iterable

import numpy as np

VECTOR_DECIMALS = 8


def create_vector(x0: float, x1: float, n: int) -> np.ndarray:
    """Return ``n`` values evenly spaced over ``[x0, x1]``, rounded to
    :data:`VECTOR_DECIMALS` decimals.
    """
    if n <= 0:
        return np.empty(0, dtype=np.float64)
    if n == 1:
        return np.round(np.array([x0], dtype=np.float64), VECTOR_DECIMALS)
    i = np.arange(n, dtype=np.float64)
    return np.round(x0 + (x1 - x0) * i / (n - 1), VECTOR_DECIMALS)


def create_vector_step(x0: float, x1: float, dx: float) -> np.ndarray:
    """Return ``x0, x0 + dx, ...`` up to ``x1``, rounded to
    :data:`VECTOR_DECIMALS` decimals.

    The length is ``round((x1 - x0) / dx) + 1``.
    """
    if dx == 0:
        return np.empty(0, dtype=np.float64)
    steps = (x1 - x0) / dx
    if not isfinite(steps) or steps < 0:
        return np.empty(0, dtype=np.float64)
    n = int(round(steps))
    i = np.arange(n + 1, dtype=np.float64)
    return np.round(x0 + i * dx, VECTOR_DECIMALS)


def arange(start: float, count: int) -> np.ndarray:
    """Return ``count`` consecutive integers from ``int(start)`` as floats."""
    if count <= 0:
        return np.empty(0, dtype=np.float64)
    first = int(start)
    return np.arange(first, first + count, dtype=np.float64)


def linspace(start: float, stop: float, count: int, endpoint: bool = True) -> np.ndarray:
    """Return ``count`` evenly spaced values from ``start`` towards ``stop``.

    Parameters
    ----------
    start, stop : float
        Interval bounds.
    count : int
        Number of samples. ``count <= 0`` gives an empty array and
        ``count == 1`` gives ``[start]``.
    endpoint : bool
        If True the step is ``(stop - start) / (count - 1)`` and the last
        value is exactly ``stop``. Otherwise the step is
        ``(stop - start) / count`` and ``stop`` is excluded.
    """
    if count <= 0:
        return np.empty(0, dtype=np.float64)
    if count == 1:
        return np.array([start], dtype=np.float64)
    return np.linspace(start, stop, count, endpoint=endpoint, dtype=np.float64)


def power(values: Iterable[float], base: float = 10.0) -> np.ndarray:
    """Elementwise ``base ** v``."""
    exponents = np.fromiter(values, dtype=np.float64)
    return np.power(float(base), exponents)


def logspace(
    start: float,
    stop: float,
    count: int,
    endpoint: bool = True,
    base: float = 10.0,
) -> np.ndarray:
    """``base ** v`` for every ``v`` of :func:`linspace`."""
    return power(linspace(start, stop, count, endpoint=endpoint), base)


def geomspace(
    start: float,
    stop: float,
    count: int,
    endpoint: bool = True,
    base: float = 10.0,
) -> np.ndarray:
    """Like :func:`logspace` but ``start`` and ``stop`` are given in linear space.

    Returns an empty array when either bound is zero.
    """
    if start == 0 or stop == 0:
        return np.empty(0, dtype=np.float64)
    return logspace(log10(start), log10(stop), count, endpoint=endpoint, base=base)


def evaluate(
    f: Callable[[float, float], float],
    x: Iterable[float],
    y: Iterable[float],
) -> np.ndarray:
    """Evaluate ``f`` on the grid ``x`` by ``y``; cell ``[i, j]`` is ``f(x[i], y[j])``."""
    xs = list(x)
    ys = list(y)
    result = np.empty((len(xs), len(ys)), dtype=np.float64)
    for i, xi in enumerate(xs):
        for j, yj in enumerate(ys):
            result[i, j] = f(xi, yj)
    return result
