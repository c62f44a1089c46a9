"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.order import Order, OrderStatus, RemoveOrderPayload
from ..types.scalars import Date


@strawberry.input
class OrderInput:
    """Input for creating a new order."""

    date: Date
    product: str
    status: OrderStatus


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addOrder")
    async def add_order(self, info: strawberry.Info, input: OrderInput) -> Order:
        """Create a new order."""
        from ..resolvers.order import add_order

        return await add_order(info, input)

    @strawberry.mutation(name="removeOrder")
    async def remove_order(self, info: strawberry.Info, id: str) -> RemoveOrderPayload:
        """Remove an order by ID."""
        from ..resolvers.order import remove_order

        return await remove_order(info, id)
