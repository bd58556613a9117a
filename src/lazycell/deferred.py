"""Values bound to their initialization at construction time.

``Deferred`` is the counterpart of ``LazyCell`` for the common case where the
way to build the value is known up front: it is constructed from some
initialization data and a function of that data, and applies the function the
first time the value is referenced.

Example:
    >>> letters = Deferred("hello", set)
    >>> letters.is_initialized()
    False
    >>> sorted(letters.get())
    ['e', 'h', 'l', 'o']
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from typing_extensions import override

from lazycell.cell import LazyCell

_S = TypeVar("_S")
_T = TypeVar("_T")


class Deferred(Generic[_S, _T]):
    """A value computed on first reference by applying ``func`` to ``init``.

    ``func`` is applied at most once. Once it has run, successfully or not,
    the references to ``init`` and ``func`` are dropped so they can be
    garbage collected. If ``func`` raises, the deferred value is corrupted in
    the same way as a ``LazyCell``.
    """

    def __init__(self, init: _S, func: Callable[[_S], _T]) -> None:
        """Initialize with the data and the function that builds the value.

        Args:
            init: Initialization data passed to ``func``.
            func: Function that takes ``init`` and returns the value.
        """
        self._pending: tuple[_S, Callable[[_S], _T]] | None = (init, func)
        self._cell: LazyCell[_T] = LazyCell()

    def _produce(self) -> _T:
        assert self._pending is not None
        init, func = self._pending
        self._pending = None
        return func(init)

    def initialize(self) -> None:
        """Compute the value now if it hasn't been computed yet."""
        self._cell.force(self._produce)

    def get(self) -> _T:
        """Compute the value if needed and return it.

        The same object is returned on every call, so in-place changes to a
        mutable value are seen by later callers.

        Raises:
            CorruptedCellError: If ``func`` raised on an earlier call.
        """
        return self._cell.get_or_init(self._produce)

    def is_initialized(self) -> bool:
        return self._cell.is_ready()

    def is_corrupted(self) -> bool:
        return self._cell.is_corrupted()

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cell!r})"
