"""
Operation handlers for the order queries and mutations.

Each handler takes the store it acts on plus its semantic arguments, and
either returns a value or raises one of the typed errors in
:mod:`orderdesk.errors`. ``OPERATIONS`` maps GraphQL root field names to
handlers; the schema is checked against it at startup.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from uuid import uuid4

from .config import settings
from .errors import ValidationError
from .logging import get_logger
from .models import Order, OrderInput, OrderStatus, RemoveOrderResult
from .scalars import parse_input
from .store import OrderStore

logger = get_logger(__name__)

MAX_ID_ATTEMPTS = 5


def new_order_id() -> str:
    """Generate a new order identifier."""
    return f"{settings.order_id_prefix}{uuid4().hex[:12]}"


def total_orders(store: OrderStore) -> int:
    return store.count()


def all_orders(store: OrderStore) -> list[Order]:
    return list(store.list())


def get_order(store: OrderStore, id: str) -> Order | None:
    return store.get(id)


def add_order(
    store: OrderStore,
    input: OrderInput,
    id_factory: Callable[[], str] = new_order_id,
) -> Order:
    """Create an order from caller input and append it to the store.

    Raises:
        ValidationError: If the product is empty or the status is unknown,
            or no unused id could be generated.
        ScalarFormatError: If the date cannot be parsed.
    """
    product = input.product.strip() if isinstance(input.product, str) else ""
    if not product:
        raise ValidationError("Order product must not be empty", field="product")

    if not isinstance(input.status, OrderStatus):
        raise ValidationError(f"Unknown order status: {input.status!r}", field="status")

    date = parse_input(input.date)

    # The store checks id uniqueness under its lock; a clash means retry.
    for _ in range(MAX_ID_ATTEMPTS):
        candidate = Order(id=id_factory(), date=date, product=product, status=input.status)
        try:
            order = store.append(candidate)
        except ValidationError as e:
            if e.field != "id":
                raise
            logger.debug("Order id collision, retrying", order_id=candidate.id)
            continue
        break
    else:
        raise ValidationError("Could not generate a unique order id", field="id")

    logger.info("Order added", order_id=order.id, product=order.product, total=store.count())
    return order


def remove_order(store: OrderStore, id: str) -> RemoveOrderResult:
    """Remove an order by id.

    A missing id is always an error, never a ``removed=False`` payload.

    Raises:
        NotFoundError: If no order has the given id.
    """
    result = store.remove_by_id(id)
    logger.info(
        "Order removed",
        order_id=id,
        total_before=result.total_before,
        total_after=result.total_after,
    )
    return RemoveOrderResult(
        removed=True,
        total_before=result.total_before,
        total_after=result.total_after,
        removed_order=result.order,
    )


OPERATIONS: dict[str, Callable[..., Any]] = {
    "totalOrders": total_orders,
    "allOrders": all_orders,
    "order": get_order,
    "addOrder": add_order,
    "removeOrder": remove_order,
}
