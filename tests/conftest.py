"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import Callable, Iterator
from itertools import count

import pytest

from orderdesk.logging import clear_request_context, configure_logging
from orderdesk.models import Order, OrderStatus
from orderdesk.seed_data import seed_store
from orderdesk.store import OrderStore


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    configure_logging(debug=False, level="WARNING")


@pytest.fixture(autouse=True)
def _clear_logging_context() -> Iterator[None]:
    yield
    clear_request_context()


@pytest.fixture
def empty_store() -> OrderStore:
    return OrderStore()


@pytest.fixture
def seeded_store() -> OrderStore:
    """Store holding only the sample order ``ord-123``."""
    store = OrderStore()
    seed_store(store)
    return store


@pytest.fixture
def make_order() -> Callable[..., Order]:
    def _make(
        id: str = "ord-1",
        date: str = "2021-01-02T00:00:00.000Z",
        product: str = "Road Bike",
        status: OrderStatus = OrderStatus.PENDING,
    ) -> Order:
        return Order(id=id, date=date, product=product, status=status)

    return _make


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Deterministic id factory: ord-test-1, ord-test-2, ..."""
    counter = count(1)
    return lambda: f"ord-test-{next(counter)}"
