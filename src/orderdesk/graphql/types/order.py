"""
Order GraphQL type definitions
"""

import strawberry

from ...models import Order as OrderModel
from ...models import OrderStatus as OrderStatusModel
from .scalars import Date

OrderStatus = strawberry.enum(
    OrderStatusModel, name="OrderStatus", description="Order status enumeration."
)


@strawberry.type
class Order:
    """Order type for GraphQL API."""

    id: str
    date: Date
    product: str
    status: OrderStatus

    @classmethod
    def from_model(cls, order: OrderModel) -> "Order":
        return cls(id=order.id, date=order.date, product=order.product, status=order.status)


@strawberry.type
class RemoveOrderPayload:
    """Result of removing an order."""

    removed: bool
    total_before: int
    total_after: int
    removed_order: Order
