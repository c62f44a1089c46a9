"""
In-memory order store
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from .errors import NotFoundError, ValidationError
from .logging import get_logger
from .models import Order, RemovalResult

logger = get_logger(__name__)

REQUIRED_FIELDS = ("id", "date", "product")


class OrderStore:
    """Ordered collection of orders held in process memory.

    Records keep insertion order. The backing list is private: readers get
    immutable snapshots from :meth:`list`, and the only mutations are
    :meth:`append` and :meth:`remove_by_id`, both serialized by a lock.
    """

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self._orders: list[Order] = []
        self._lock = threading.Lock()
        for order in orders:
            self.append(order)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, order_id: object) -> bool:
        return any(order.id == order_id for order in self._orders)

    def count(self) -> int:
        """Return the number of records currently held."""
        return len(self._orders)

    def list(self) -> tuple[Order, ...]:
        """Return a snapshot of all records in insertion order."""
        return tuple(self._orders)

    def get(self, order_id: str) -> Order | None:
        """Return the record with the given id, if any."""
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def append(self, order: Order) -> Order:
        """Add a record to the end of the store.

        Raises:
            ValidationError: If a required field is empty or the id is taken.
        """
        for field in REQUIRED_FIELDS:
            value = getattr(order, field)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"Order {field} must not be empty", field=field)

        with self._lock:
            if any(existing.id == order.id for existing in self._orders):
                raise ValidationError(f"Order id already exists: {order.id}", field="id")
            self._orders.append(order)

        logger.debug("Order appended", order_id=order.id, total=len(self._orders))
        return order

    def remove_by_id(self, order_id: str) -> RemovalResult:
        """Remove the first record with the given id.

        Raises:
            NotFoundError: If no record matches; the store is left unchanged.
        """
        with self._lock:
            total_before = len(self._orders)
            for index, order in enumerate(self._orders):
                if order.id == order_id:
                    del self._orders[index]
                    break
            else:
                raise NotFoundError(
                    f"Order not found or already removed: {order_id}", id=order_id
                )
            total_after = len(self._orders)

        logger.debug("Order removed", order_id=order_id, total=total_after)
        return RemovalResult(order=order, total_before=total_before, total_after=total_after)

    def clear(self) -> None:
        """Drop every record."""
        with self._lock:
            self._orders.clear()
