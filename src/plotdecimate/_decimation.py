"""Screen-space line decimation: pixel-column grouping, fixed stride, and
count-bounded sampling with optional spike preservation.

Every routine appends to a caller-owned ``output`` list and never raises
for degenerate input: ``None`` or empty input leaves ``output`` untouched.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from plotdecimate._points import (
    ScreenPoint,
    as_points,
    check_finite as _check_finite,
    coerce_points,
    to_arrays,
)
from plotdecimate._spacing import logspace
from plotdecimate._strategies import (
    CountDecimateStrategy,
    IndexTracker,
    SelectionStrategy,
    StrategyLike,
    get_strategy,
)

logger = logging.getLogger(__name__)

Points = Sequence[Tuple[float, float]]

METHODS = ("group", "stride", "count")


def _round_index(position: float) -> int:
    # round-half-to-even, same rule as numpy.rint used for coordinates
    return int(round(float(position)))


# ---------------------------------------------------------------------------
# Integer-x grouping
# ---------------------------------------------------------------------------


def add_vertical_points(
    output: List[ScreenPoint],
    x: float,
    first_y: float,
    last_y: float,
    min_y: float,
    max_y: float,
) -> None:
    """Append the 1-4 points that draw one pixel column as a single stroke.

    Always starts at ``first_y`` and ends at ``last_y``, visiting the
    column's min and max on the way without doubling back.
    """
    output.append(ScreenPoint(x, first_y))

    if first_y == min_y:
        if min_y != max_y:
            output.append(ScreenPoint(x, max_y))
        if max_y != last_y:
            output.append(ScreenPoint(x, last_y))
        return

    if first_y == max_y:
        if max_y != min_y:
            output.append(ScreenPoint(x, min_y))
        if min_y != last_y:
            output.append(ScreenPoint(x, last_y))
        return

    if last_y == min_y:
        if min_y != max_y:
            output.append(ScreenPoint(x, max_y))
    elif last_y == max_y:
        if max_y != min_y:
            output.append(ScreenPoint(x, min_y))
    else:
        output.append(ScreenPoint(x, min_y))
        output.append(ScreenPoint(x, max_y))
    output.append(ScreenPoint(x, last_y))


def decimate(points: Optional[Points], output: List[ScreenPoint]) -> None:
    """Collapse points sharing the same rounded x into at most four points
    (first, min, max, last y) per column.

    Coordinates are rounded with :func:`numpy.rint`. Input is expected to be
    roughly monotonic in x: only consecutive points share a column.
    """
    points = coerce_points(points)
    if points is None or len(points) == 0:
        return

    start = len(output)
    x0, y0 = points[0]
    current_x = float(np.rint(x0))
    first_y = last_y = min_y = max_y = float(np.rint(y0))

    for i in range(1, len(points)):
        px, py = points[i]
        new_x = float(np.rint(px))
        new_y = float(np.rint(py))
        if new_x != current_x:
            add_vertical_points(output, current_x, first_y, last_y, min_y, max_y)
            first_y = last_y = min_y = max_y = new_y
            current_x = new_x
            continue

        if new_y < min_y:
            min_y = new_y
        if new_y > max_y:
            max_y = new_y
        last_y = new_y

    # the line ends here, so finish the column at its far extreme
    last_y = max_y if first_y == min_y else min_y
    add_vertical_points(output, current_x, first_y, last_y, min_y, max_y)

    logger.debug("decimate: %d -> %d points", len(points), len(output) - start)


# ---------------------------------------------------------------------------
# Fixed stride
# ---------------------------------------------------------------------------


def stepwise_decimate(points: Optional[Points], output: List[ScreenPoint], step: int) -> None:
    """Keep the first point, then every ``step + 1``-th point, then the last.

    ``step == 0`` keeps every point. Negative steps are treated as zero.

    Indices are taken while they are below ``len(points) - 1``, so the
    second-to-last point can be kept: six points with ``step=1`` give
    indices 0, 2, 4, 5. A ``len(points) - 2`` bound would give 0, 2, 5 and
    would drop the second-to-last point even for ``step == 0``.
    """
    points = coerce_points(points)
    if points is None or len(points) == 0:
        return

    step = max(0, int(step))
    n = len(points)
    start = len(output)

    output.append(points[0])
    i = 1 + step
    while i < n - 1:
        output.append(points[i])
        i += step + 1

    if output[-1] != points[-1]:
        output.append(points[-1])

    logger.debug("stepwise_decimate(step=%d): %d -> %d points", step, n, len(output) - start)


# ---------------------------------------------------------------------------
# Count-bounded sampling
# ---------------------------------------------------------------------------


def _walk_steps(points: Points, output: List[ScreenPoint], step: float, strategy: SelectionStrategy) -> None:
    """Emit candidates at ``0, step, 2*step, ...`` until the last index is reached."""
    n = len(points)
    tracker = IndexTracker()
    position = 0.0
    outside = -1
    while outside < n - 1:
        emit, outside = strategy.select(points, tracker.last, _round_index(position))
        if tracker.is_new(emit) and emit < n:
            output.append(points[emit])
        position += step
        tracker.advance(outside)


def _walk_positions(
    points: Points, output: List[ScreenPoint], positions: Iterable[float], strategy: SelectionStrategy
) -> None:
    """Emit candidates at precomputed positions, skipping repeats."""
    n = len(points)
    tracker = IndexTracker()
    for position in positions:
        if not tracker.is_new_position(position):
            continue
        emit, outside = strategy.select(points, tracker.last, _round_index(position))
        if tracker.is_new(emit) and emit < n:
            output.append(points[emit])
            tracker.advance(outside, position)


def _append_last(points: Points, output: List[ScreenPoint]) -> None:
    if not output or output[-1] != points[-1]:
        output.append(points[-1])


def _linear_space(
    points: Points, output: List[ScreenPoint], count: int, endpoint: bool, strategy: SelectionStrategy
) -> None:
    n = len(points)
    if endpoint:
        _walk_steps(points, output, n / (count - 1.0), strategy)
        _append_last(points, output)
    else:
        _walk_steps(points, output, n / float(count), strategy)


def _log_space(
    points: Points, output: List[ScreenPoint], count: int, endpoint: bool, strategy: SelectionStrategy
) -> None:
    n = len(points)
    positions = logspace(0.0, np.log10(n - 1.0), count - 1, endpoint=endpoint)
    output.append(points[0])
    _walk_positions(points, output, positions.tolist(), strategy)
    _append_last(points, output)


def count_decimate(
    points: Optional[Points],
    output: List[ScreenPoint],
    count: int,
    strategy: StrategyLike = CountDecimateStrategy.LINEAR,
    logarithmic: bool = False,
    endpoint: bool = True,
) -> None:
    """Reduce ``points`` to roughly ``count`` points.

    Parameters
    ----------
    points : sequence of (x, y)
        Input line. ``None`` or empty leaves ``output`` untouched.
    output : list
        Receives the selected points. Cleared when ``count <= 0``, and
        replaced by ``[points[0]]`` when ``count == 1`` with ``endpoint``.
    count : int
        Target number of points. Input no longer than ``count`` is copied.
    strategy : CountDecimateStrategy | str | SelectionStrategy
        ``LINEAR`` (and ``NONE``) takes the regularly spaced samples;
        ``MIN_MAX_SPIKE_DETECTION`` replaces each sample by the point of
        its interval that deviates most from the previous sample.
    logarithmic : bool
        Space samples logarithmically in index (dense at the start), for
        series drawn on a logarithmic axis. Usually yields fewer than
        ``count`` points.
    endpoint : bool
        Whether the last input point is a sample position.
    """
    points = coerce_points(points)
    if points is None or len(points) == 0:
        return

    selection = get_strategy(strategy)

    if count <= 0:
        output.clear()
        return

    n = len(points)
    if n <= count:
        output.extend(points)
        return

    if endpoint and count == 1:
        output.clear()
        output.append(points[0])
        return

    start = len(output)
    if logarithmic:
        _log_space(points, output, count, endpoint, selection)
    else:
        _linear_space(points, output, count, endpoint, selection)

    logger.debug(
        "count_decimate(count=%d, strategy=%r, logarithmic=%s): %d -> %d points",
        count,
        selection,
        logarithmic,
        n,
        len(output) - start,
    )


# ---------------------------------------------------------------------------
# numpy front end
# ---------------------------------------------------------------------------


def decimate_xy(
    x: np.ndarray,
    y: np.ndarray,
    method: str = "count",
    *,
    check_finite: bool = False,
    **options,
) -> Tuple[np.ndarray, np.ndarray]:
    """Decimate screen-space arrays and return ``(xd, yd)``.

    Parameters
    ----------
    x, y : ndarray
        Screen coordinates of equal length.
    method : "group" | "stride" | "count"
        ``"group"`` runs :func:`decimate`, ``"stride"`` runs
        :func:`stepwise_decimate` (option ``step``, default 0) and
        ``"count"`` runs :func:`count_decimate` (options ``count``,
        ``strategy``, ``logarithmic``, ``endpoint``).
    check_finite : bool
        Raise :class:`NonFiniteCoordinateError` for NaN/inf input instead
        of decimating it.
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method {method!r}. Available: {list(METHODS)}")

    points = as_points(x, y)
    if check_finite:
        _check_finite(points)

    output: List[ScreenPoint] = []
    if method == "group":
        decimate(points, output, **options)
    elif method == "stride":
        stepwise_decimate(points, output, options.pop("step", 0), **options)
    else:
        if "count" not in options:
            raise ValueError("method 'count' requires the 'count' option")
        count_decimate(points, output, **options)

    return to_arrays(output)
