"""Index selection strategies for count-bounded decimation."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Tuple, Union


class CountDecimateStrategy(enum.Enum):
    """Selects how a candidate index is resolved to the emitted index."""

    NONE = "none"
    LINEAR = "linear"
    MIN_MAX_SPIKE_DETECTION = "minmax_spike_detection"


class IndexTracker:
    """Remembers the previously emitted index and raw position of a walk.

    Every count-bounded walk skips a candidate that resolves to the index
    it emitted last; this object holds that state for a single call.
    """

    def __init__(self) -> None:
        self.last = -1
        self.last_position = -1.0

    def is_new(self, index: int) -> bool:
        return index != self.last

    def is_new_position(self, position: float) -> bool:
        return position != self.last_position

    def advance(self, index: int, position: float = -1.0) -> None:
        self.last = index
        self.last_position = position


class SelectionStrategy(ABC):
    """Resolves a rounded candidate index to the index to emit."""

    @abstractmethod
    def select(
        self, points: Sequence[Tuple[float, float]], previous: int, candidate: int
    ) -> Tuple[int, int]:
        """Return ``(emit, outside)``.

        ``emit`` is the index whose point should be appended (the caller
        drops it if it is out of range or equals ``previous``); ``outside``
        is the regularly spaced index the next interval starts from.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LinearSelection(SelectionStrategy):
    """Emit the rounded candidate unchanged."""

    def select(self, points, previous, candidate):
        return candidate, candidate


class SpikeSelection(SelectionStrategy):
    """Emit the point of the interval that deviates most from the previous one.

    Scans every index between ``previous`` and the candidate and keeps the
    one maximising ``|y[previous] - y[j]|``. The comparison is strict, so
    the candidate itself wins over equal deviations and the first maximum
    wins among the intermediate points.
    """

    def select(self, points, previous, candidate):
        last = len(points) - 1
        outside = inside = min(candidate, last)
        if previous < 0:
            return inside, outside

        ref_y = points[previous][1]
        delta = abs(ref_y - points[inside][1])
        for j in range(previous + 1, outside):
            d = abs(ref_y - points[j][1])
            if d > delta:
                delta = d
                inside = j
        return inside, outside


StrategyLike = Union[CountDecimateStrategy, str, SelectionStrategy]


class StrategyRegistry:
    """Registry of selection strategies, keyed by selector."""

    def __init__(self) -> None:
        self._strategies: Dict[CountDecimateStrategy, SelectionStrategy] = {}

    def register(self, key: CountDecimateStrategy, strategy: SelectionStrategy) -> None:
        self._strategies[key] = strategy

    def get(self, selector: StrategyLike) -> SelectionStrategy:
        if isinstance(selector, SelectionStrategy):
            return selector
        if isinstance(selector, CountDecimateStrategy):
            key = selector
        else:
            try:
                key = CountDecimateStrategy(selector)
            except ValueError:
                key = None
        if key not in self._strategies:
            raise ValueError(
                f"Unknown strategy {selector!r}. "
                f"Available: {[k.value for k in self._strategies]}"
            )
        return self._strategies[key]

    @property
    def available(self) -> List[CountDecimateStrategy]:
        return list(self._strategies)


strategy_registry = StrategyRegistry()
strategy_registry.register(CountDecimateStrategy.NONE, LinearSelection())
strategy_registry.register(CountDecimateStrategy.LINEAR, LinearSelection())
strategy_registry.register(CountDecimateStrategy.MIN_MAX_SPIKE_DETECTION, SpikeSelection())


def get_strategy(selector: StrategyLike) -> SelectionStrategy:
    """Resolve an enum member, its string value, or a strategy instance."""
    return strategy_registry.get(selector)
