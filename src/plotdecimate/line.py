"""Keep a matplotlib line decimated in display space as the view changes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

import numpy as np

from plotdecimate._decimation import METHODS, decimate_xy

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.lines import Line2D

logger = logging.getLogger(__name__)


class DecimatedLine:
    """Thin binding that decimates a :class:`~matplotlib.lines.Line2D` in
    pixel space.

    The full-resolution data is kept aside; on every axis-limit change it
    is transformed to display coordinates with ``ax.transData``, decimated
    with :func:`plotdecimate.decimate_xy` and transformed back.

    Users should normally call :func:`plotdecimate.attach` rather than
    instantiating this directly.
    """

    def __init__(self, ax: Axes, line: Line2D, *, method: str = "group", **options) -> None:
        if method not in METHODS:
            raise ValueError(f"Unknown method {method!r}. Available: {list(METHODS)}")
        self._ax = ax
        self._line = line
        self._method = method
        self._options = options

        x, y = line.get_data()
        self._x = np.asarray(x, dtype=np.float64)
        self._y = np.asarray(y, dtype=np.float64)

        self._cids: List[int] = [
            ax.callbacks.connect("xlim_changed", self._on_lim_changed),
            ax.callbacks.connect("ylim_changed", self._on_lim_changed),
        ]

        # Store ref on line to prevent GC
        line._plotdecimate = self  # type: ignore[attr-defined]

        logger.info(
            "Attached %s decimation to line with %d points", method, len(self._x)
        )
        self.update()

    @property
    def full_data(self):
        return self._x, self._y

    def update(self) -> None:
        """Re-decimate the full data for the current view."""
        if len(self._x) == 0:
            return

        # resolve deferred autoscaling before reading transData
        self._ax.get_xlim()
        trans = self._ax.transData
        screen = trans.transform(np.column_stack([self._x, self._y]))
        xd, yd = decimate_xy(screen[:, 0], screen[:, 1], self._method, **self._options)
        if len(xd) == 0:
            self._line.set_data([], [])
            return

        data = trans.inverted().transform(np.column_stack([xd, yd]))
        self._line.set_data(data[:, 0], data[:, 1])

    def _on_lim_changed(self, ax: Axes) -> None:
        self.update()

    def detach(self) -> None:
        """Disconnect from the axes and restore the full-resolution data."""
        for cid in self._cids:
            self._ax.callbacks.disconnect(cid)
        self._cids.clear()

        self._line.set_data(self._x, self._y)

        if hasattr(self._line, "_plotdecimate"):
            del self._line._plotdecimate
        logger.info("Detached decimation from line")


def attach(ax: Axes, line: Line2D, *, method: str = "group", **options) -> DecimatedLine:
    """Decimate ``line`` on ``ax`` now and whenever its limits change.

    Parameters
    ----------
    ax : Axes
        The axes ``line`` is drawn on.
    line : Line2D
        A line whose data is the full-resolution series.
    method : "group" | "stride" | "count"
        Decimation method, see :func:`plotdecimate.decimate_xy`.
    **options
        Options for the method (``step``, ``count``, ``strategy``,
        ``logarithmic``, ``endpoint``).

    Returns
    -------
    DecimatedLine
        Handle to update or detach the binding.
    """
    return DecimatedLine(ax, line, method=method, **options)
