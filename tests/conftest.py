from typing import Any

import pytest

from lazycell import LazyCell
from producers import Boom, CountingProducer


@pytest.fixture
def cell() -> LazyCell[Any]:
    return LazyCell()


@pytest.fixture
def ready_cell() -> LazyCell[Any]:
    """A cell initialized with the value 42."""
    cell: LazyCell[Any] = LazyCell()
    cell.force(lambda: 42)
    return cell


@pytest.fixture
def boom() -> Boom:
    return Boom("boom")


@pytest.fixture
def corrupted_cell(boom: Boom) -> LazyCell[Any]:
    """A cell whose producer raised the ``boom`` fixture."""
    cell: LazyCell[Any] = LazyCell()
    with pytest.raises(Boom):
        cell.force(CountingProducer(error=boom))
    return cell
