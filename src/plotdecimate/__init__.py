"""plotdecimate: screen-space line decimation for fast plotting."""

from plotdecimate._decimation import (
    add_vertical_points,
    count_decimate,
    decimate,
    decimate_xy,
    stepwise_decimate,
)
from plotdecimate._lod import LODRenderer
from plotdecimate._points import (
    NonFiniteCoordinateError,
    ScreenPoint,
    as_points,
    check_finite,
    coerce_points,
    find_non_finite,
    to_arrays,
)
from plotdecimate._spacing import (
    arange,
    create_vector,
    create_vector_step,
    evaluate,
    geomspace,
    linspace,
    logspace,
    power,
)
from plotdecimate._strategies import (
    CountDecimateStrategy,
    IndexTracker,
    LinearSelection,
    SelectionStrategy,
    SpikeSelection,
    get_strategy,
    strategy_registry,
)
from plotdecimate.line import DecimatedLine, attach

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ScreenPoint",
    "NonFiniteCoordinateError",
    "as_points",
    "to_arrays",
    "check_finite",
    "coerce_points",
    "find_non_finite",
    "decimate",
    "add_vertical_points",
    "stepwise_decimate",
    "count_decimate",
    "decimate_xy",
    "CountDecimateStrategy",
    "SelectionStrategy",
    "LinearSelection",
    "SpikeSelection",
    "IndexTracker",
    "strategy_registry",
    "get_strategy",
    "LODRenderer",
    "DecimatedLine",
    "attach",
    "create_vector",
    "create_vector_step",
    "arange",
    "linspace",
    "logspace",
    "geomspace",
    "power",
    "evaluate",
]
