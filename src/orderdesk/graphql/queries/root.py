"""
Root GraphQL query definitions
"""

import strawberry

from ..types.order import Order


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def total_orders(self, info: strawberry.Info) -> int:
        """Get the number of orders in the store."""
        from ..resolvers.order import resolve_total_orders

        return await resolve_total_orders(info)

    @strawberry.field
    async def all_orders(self, info: strawberry.Info) -> list[Order]:
        """Get every order in insertion order."""
        from ..resolvers.order import resolve_all_orders

        return await resolve_all_orders(info)

    @strawberry.field
    async def order(self, info: strawberry.Info, id: str) -> Order | None:
        """Get an order by ID."""
        from ..resolvers.order import resolve_order_by_id

        return await resolve_order_by_id(info, id)
