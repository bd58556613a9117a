from lazycell.cell import CellState, LazyCell
from lazycell.deferred import Deferred
from lazycell.exceptions import (
    CorruptedCellError,
    LazyCellError,
    ReentrantInitializationError,
)
from lazycell.properties import lazyclassproperty, lazyproperty
from lazycell._version import __version__

__all__ = [
    "LazyCell",
    "CellState",
    "Deferred",
    "LazyCellError",
    "CorruptedCellError",
    "ReentrantInitializationError",
    "lazyproperty",
    "lazyclassproperty",
    "__version__",
]
