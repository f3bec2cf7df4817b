"""Level-of-detail decimation over full-resolution arrays with an LRU cache."""

from __future__ import annotations

import enum
import logging
from collections import OrderedDict
from typing import Tuple

import numpy as np

from plotdecimate._decimation import decimate_xy

logger = logging.getLogger(__name__)

DEFAULT_MAX_CACHE = 32


def _freeze(options: dict) -> tuple:
    return tuple(
        sorted((k, v.value if isinstance(v, enum.Enum) else v) for k, v in options.items())
    )


class LODRenderer:
    """Decimates visible windows of a screen-space series and caches the
    results.

    Parameters
    ----------
    x, y : ndarray
        Full-resolution screen coordinates (not copied).
    max_cache : int
        Maximum number of cached decimation results.
    """

    def __init__(self, x: np.ndarray, y: np.ndarray, max_cache: int = DEFAULT_MAX_CACHE) -> None:
        if len(x) != len(y):
            raise ValueError(
                f"x and y must have the same length, got {len(x)} and {len(y)}"
            )
        self._x = x
        self._y = y
        self._max_cache = max_cache
        self._cache: OrderedDict[tuple, tuple] = OrderedDict()

    def __len__(self) -> int:
        return len(self._x)

    def get_decimated(
        self, i0: int, i1: int, method: str = "count", **options
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Return the decimated ``x[i0:i1], y[i0:i1]``.

        ``method`` and ``options`` are passed to :func:`decimate_xy`.
        """
        i0 = max(0, i0)
        i1 = min(len(self._x), i1)
        key = (i0, i1, method, _freeze(options))
        if key in self._cache:
            self._cache.move_to_end(key)
            logger.debug("LOD cache hit for %r", key)
            return self._cache[key]

        if i0 >= i1:
            result = np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)
        else:
            result = decimate_xy(self._x[i0:i1], self._y[i0:i1], method, **options)
        self._cache[key] = result

        if len(self._cache) > self._max_cache:
            evicted, _ = self._cache.popitem(last=False)
            logger.debug("LOD cache evicted %r", evicted)

        return result

    def clear_cache(self) -> None:
        self._cache.clear()
