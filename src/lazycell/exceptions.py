"""Exceptions raised by lazy cells.

Failures raised by a producer are never wrapped: they propagate to the caller
unchanged. The exceptions in this module are the cell's own errors, raised
when a cell refuses an operation because of its state.
"""

from __future__ import annotations


class LazyCellError(Exception):
    """Base exception for errors raised by a lazy cell itself.

    Attributes:
        message: Human-readable description of the failure.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class CorruptedCellError(LazyCellError):
    """Raised when initializing a cell whose producer previously failed.

    A corrupted cell never calls another producer. This error is distinct
    from the fault that corrupted the cell; that fault is available as
    ``fault`` and is chained as the ``__cause__`` when this error is raised.

    Attributes:
        fault: The exception raised by the producer that corrupted the cell.
    """

    def __init__(self, fault: BaseException | None = None, message: str | None = None) -> None:
        if message is None:
            message = "Cell is corrupted: a previous initialization failed"
            if fault is not None:
                message += f" with {type(fault).__name__}: {fault}"
        self.fault = fault
        super().__init__(message)


class ReentrantInitializationError(LazyCellError):
    """Raised when a producer tries to initialize the cell it is initializing."""

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "Cell is already being initialized; a producer must not re-enter its own cell"
        super().__init__(message)
