from __future__ import annotations

from typing import Any, Callable, Generic, Self, TypeVar, overload

from lazycell.cell import LazyCell

_T = TypeVar("_T")
_R = TypeVar("_R")


class lazyproperty(Generic[_T, _R]):
    """Descriptor that computes a value once per instance on first access.

    Each instance gets its own ``LazyCell``, kept in the instance ``__dict__``,
    so the owner class must not use ``__slots__`` without a ``__dict__``. If
    the function raises, that instance's value is corrupted and later accesses
    raise ``CorruptedCellError``; other instances are unaffected.

    Example:
        class Report:
            def __init__(self, path: str) -> None:
                self.path = path

            @lazyproperty
            def rows(self) -> list[str]:
                return load_rows(self.path)
    """

    def __init__(self, func: Callable[[_T], _R]) -> None:
        """Initialize with a function that computes the value.

        Args:
            func: Function that takes the instance and returns the value.
        """
        self._func = func
        self._name = func.__name__
        self.__doc__ = func.__doc__

    def __set_name__(self, owner: type[_T], name: str) -> None:
        self._name = name

    @property
    def _cell_key(self) -> str:
        return f"__lazycell_{self._name}__"

    def cell(self, instance: _T) -> LazyCell[_R]:
        """Return the cell backing this property on ``instance``, creating it if needed."""
        cells = vars(instance)
        cell = cells.get(self._cell_key)
        if cell is None:
            cell = cells[self._cell_key] = LazyCell()
        return cell

    @overload
    def __get__(self, instance: None, owner: type[_T], /) -> Self: ...

    @overload
    def __get__(self, instance: _T, owner: type[_T] | None = None, /) -> _R: ...

    def __get__(self, instance: Any, owner: Any = None, /) -> Any:
        """Get the value for an instance, computing it on first access.

        When accessed on the class, returns the descriptor itself.
        """
        if instance is None:
            return self
        return self.cell(instance).get_or_init(lambda: self._func(instance))


class lazyclassproperty(Generic[_T, _R]):
    """Descriptor that lazily computes a class-level value once and caches it.

    Used for class-level properties that are expensive to compute and
    should only be computed once. The value is shared by the class, its
    subclasses and all their instances.
    """

    def __init__(self, func: Callable[[type[_T]], _R]) -> None:
        """Initialize with a function that computes the value.

        Args:
            func: Function that takes the owner class and returns the value.
        """
        self._func = func
        self._cell: LazyCell[_R] = LazyCell()

    def __get__(self, instance: Any, owner: type[_T]) -> _R:
        """Get the cached value, computing it on first access.

        Args:
            instance: The instance (unused, this is a class-level descriptor).
            owner: The owner class.

        Returns:
            The cached value.
        """
        return self._cell.get_or_init(lambda: self._func(owner))
