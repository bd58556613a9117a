"""A cell that computes its value on first use.

A ``LazyCell`` starts out empty and is filled by the first call to
``get_or_init``, using whatever producer that call site supplies. The
producer runs at most once over the lifetime of the cell:

    - If it returns, the result is stored and every later call returns it,
      ignoring the producer passed in.
    - If it raises, the cell is marked corrupted and the exception propagates
      unchanged. A corrupted cell never runs another producer; initializing it
      again raises ``CorruptedCellError``.

Example:
    >>> cell: LazyCell[int] = LazyCell()
    >>> cell.try_get() is None
    True
    >>> cell.get_or_init(lambda: 42)
    42
    >>> cell.get_or_init(lambda: 99)
    42

Cells are not thread-safe; they are meant to be owned and used by a single
thread of control.
"""

from __future__ import annotations

from enum import Enum
from logging import getLogger
from typing import Any, Callable, Generic, TypeVar, cast, overload

from typing_extensions import override

from lazycell.exceptions import CorruptedCellError, ReentrantInitializationError

logger = getLogger(__name__)

_T = TypeVar("_T")
_D = TypeVar("_D")

# Sentinel value for the value slot of a cell which isn't ready
UNSET = cast(Any, object())


class CellState(Enum):
    """The states a ``LazyCell`` can occupy.

    ``READY`` and ``CORRUPTED`` are terminal: no operation leaves them.
    """

    #: No value yet and no initialization attempted.
    EMPTY = "empty"
    #: Holds a fully constructed value.
    READY = "ready"
    #: An initialization attempt failed; no value exists and none ever will.
    CORRUPTED = "corrupted"


class LazyCell(Generic[_T]):
    """Holds at most one value, computed by the first producer it is given.

    Attributes:
        _state: The current state of the cell.
        _value: The stored value, ``UNSET`` unless the cell is ready.
        _fault: The exception that corrupted the cell, if any.
        _initializing: Whether a producer for this cell is currently running.
    """

    __slots__ = ("_state", "_value", "_fault", "_initializing")

    def __init__(self) -> None:
        self._state = CellState.EMPTY
        self._value: _T = UNSET
        self._fault: BaseException | None = None
        self._initializing = False

    @property
    def state(self) -> CellState:
        return self._state

    def get_or_init(self, producer: Callable[[], _T]) -> _T:
        """Return the stored value, computing it with ``producer`` if the cell is empty.

        Args:
            producer: Zero-argument callable computing the value. It is only
                called when the cell is empty, and is ignored otherwise.

        Returns:
            The value stored in the cell.

        Raises:
            CorruptedCellError: If a previous initialization of this cell failed.
            ReentrantInitializationError: If called from inside this cell's own producer.
            BaseException: Whatever ``producer`` raised; the cell is corrupted afterwards.
        """
        if self._state is CellState.READY:
            return self._value

        if self._state is CellState.CORRUPTED:
            logger.debug("Rejecting initialization of corrupted cell %r", self)
            raise CorruptedCellError(self._fault) from self._fault

        if self._initializing:
            raise ReentrantInitializationError()

        logger.debug("Initializing cell with producer %r", producer)
        self._initializing = True
        try:
            value = producer()
        except BaseException as fault:
            self._state = CellState.CORRUPTED
            self._fault = fault
            logger.debug(
                "Producer %r raised %s; cell is now corrupted",
                producer,
                type(fault).__name__,
            )
            raise
        finally:
            self._initializing = False

        self._value = value
        self._state = CellState.READY
        logger.debug("Cell initialized with value of type %s", type(value).__name__)
        return value

    def force(self, producer: Callable[[], _T]) -> None:
        """Initialize the cell now if it is empty, discarding the value.

        Raises the same errors as ``get_or_init``.
        """
        self.get_or_init(producer)

    @overload
    def try_get(self) -> _T | None: ...

    @overload
    def try_get(self, default: _D) -> _T | _D: ...

    def try_get(self, default: Any = None) -> Any:
        """Return the stored value if the cell is ready, otherwise ``default``.

        Never calls a producer and never raises, even on a corrupted cell.
        Use ``is_ready`` to distinguish a stored ``None`` from no value.
        """
        if self._state is CellState.READY:
            return self._value
        return default

    def is_empty(self) -> bool:
        return self._state is CellState.EMPTY

    def is_ready(self) -> bool:
        return self._state is CellState.READY

    def is_corrupted(self) -> bool:
        return self._state is CellState.CORRUPTED

    @override
    def __repr__(self) -> str:
        if self._state is CellState.READY:
            return f"{type(self).__name__}(ready, value={self._value!r})"
        return f"{type(self).__name__}({self._state.value})"
