from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import strawberry
from graphql import GraphQLError

from ... import handlers
from ...errors import OrderDeskError
from ...logging import get_logger
from ...models import OrderInput as OrderInputModel
from ...store import OrderStore
from ..types.order import Order, RemoveOrderPayload

if TYPE_CHECKING:
    from ..mutations.root import OrderInput

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> OrderStore:
    """Return the order store attached to the GraphQL context."""
    store = info.context.get("store") if isinstance(info.context, dict) else None
    if not isinstance(store, OrderStore):
        raise RuntimeError("Order store missing from GraphQL context")
    return store


def raise_graphql_error(error: OrderDeskError, operation: str) -> NoReturn:
    """Log a domain error and re-raise it as a GraphQL error carrying its code."""
    logger.warning(
        "Order operation failed",
        operation=operation,
        code=error.code,
        error=error.message,
    )
    raise GraphQLError(
        error.message, original_error=error, extensions=error.to_extensions()
    ) from error


# Query resolvers
async def resolve_total_orders(info: strawberry.Info) -> int:
    return handlers.total_orders(get_store_from_info(info))


async def resolve_all_orders(info: strawberry.Info) -> list[Order]:
    orders = handlers.all_orders(get_store_from_info(info))
    return [Order.from_model(order) for order in orders]


async def resolve_order_by_id(info: strawberry.Info, id: str) -> Order | None:
    order = handlers.get_order(get_store_from_info(info), id)
    if order is None:
        logger.info("Order not found", order_id=id)
        return None
    return Order.from_model(order)


# Mutation resolvers
async def add_order(info: strawberry.Info, input: OrderInput) -> Order:
    """Create an order from mutation input.

    The date has already been coerced by the ``Date`` scalar at this point;
    the handler re-applies the same coercion, which is idempotent.
    """
    store = get_store_from_info(info)
    try:
        order = handlers.add_order(
            store,
            OrderInputModel(date=input.date, product=input.product, status=input.status),
        )
    except OrderDeskError as e:
        raise_graphql_error(e, "addOrder")

    return Order.from_model(order)


async def remove_order(info: strawberry.Info, id: str) -> RemoveOrderPayload:
    store = get_store_from_info(info)
    try:
        result = handlers.remove_order(store, id)
    except OrderDeskError as e:
        raise_graphql_error(e, "removeOrder")

    return RemoveOrderPayload(
        removed=result.removed,
        total_before=result.total_before,
        total_after=result.total_after,
        removed_order=Order.from_model(result.removed_order),
    )
