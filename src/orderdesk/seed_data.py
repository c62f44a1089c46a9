"""
Sample orders loaded into a fresh store
"""

from .logging import get_logger
from .models import Order, OrderStatus
from .store import OrderStore

logger = get_logger(__name__)

DEFAULT_ORDERS = (
    Order(
        id="ord-123",
        date="2020-03-23T00:00:00.000Z",
        product="Mountain Bike",
        status=OrderStatus.PENDING,
    ),
)


def seed_store(store: OrderStore) -> int:
    """Append the default orders that the store does not already hold.

    Returns the number of orders added.
    """
    added = 0
    for order in DEFAULT_ORDERS:
        if order.id in store:
            continue
        store.append(order)
        added += 1

    logger.info("Seeded order store", added=added, total=store.count())
    return added
