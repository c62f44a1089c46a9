"""
Tests for order GraphQL resolvers
"""

from unittest.mock import MagicMock

import pytest
import strawberry
from graphql import GraphQLError

from orderdesk.graphql.mutations.root import OrderInput
from orderdesk.graphql.resolvers.order import (
    add_order,
    get_store_from_info,
    remove_order,
    resolve_all_orders,
    resolve_order_by_id,
    resolve_total_orders,
)
from orderdesk.graphql.types.order import Order, RemoveOrderPayload
from orderdesk.models import OrderStatus


@pytest.fixture
def mock_info(seeded_store):
    """Create a mock GraphQL info object carrying the seeded store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": seeded_store}
    return info


@pytest.fixture
def mock_info_no_store():
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock()}
    return info


def test_store_missing_from_context(mock_info_no_store):
    with pytest.raises(RuntimeError, match="Order store missing"):
        get_store_from_info(mock_info_no_store)


class TestQueryResolvers:
    @pytest.mark.asyncio
    async def test_total_orders(self, mock_info):
        assert await resolve_total_orders(mock_info) == 1

    @pytest.mark.asyncio
    async def test_all_orders_returns_graphql_types(self, mock_info):
        orders = await resolve_all_orders(mock_info)

        assert len(orders) == 1
        assert isinstance(orders[0], Order)
        assert orders[0].id == "ord-123"
        assert orders[0].status is OrderStatus.PENDING

    @pytest.mark.asyncio
    async def test_order_by_id(self, mock_info):
        order = await resolve_order_by_id(mock_info, "ord-123")
        assert order is not None
        assert order.product == "Mountain Bike"

        assert await resolve_order_by_id(mock_info, "ord-404") is None


class TestMutationResolvers:
    @pytest.mark.asyncio
    async def test_add_order(self, mock_info, seeded_store):
        order = await add_order(
            mock_info,
            OrderInput(
                date="2020-03-23T00:00:00.000Z",
                product="Country Cookbook",
                status=OrderStatus.PROCESSING,
            ),
        )

        assert isinstance(order, Order)
        assert order.product == "Country Cookbook"
        assert seeded_store.count() == 2

    @pytest.mark.asyncio
    async def test_add_order_empty_product_becomes_graphql_error(self, mock_info, seeded_store):
        with pytest.raises(GraphQLError) as exc_info:
            await add_order(
                mock_info,
                OrderInput(date="3/23/2020", product="", status=OrderStatus.PENDING),
            )

        assert exc_info.value.extensions["code"] == "VALIDATION_ERROR"
        assert exc_info.value.extensions["field"] == "product"
        assert seeded_store.count() == 1

    @pytest.mark.asyncio
    async def test_remove_order(self, mock_info, seeded_store):
        payload = await remove_order(mock_info, "ord-123")

        assert isinstance(payload, RemoveOrderPayload)
        assert payload.removed is True
        assert payload.total_before == 1
        assert payload.total_after == 0
        assert payload.removed_order.id == "ord-123"
        assert seeded_store.count() == 0

    @pytest.mark.asyncio
    async def test_remove_missing_order_becomes_graphql_error(self, mock_info, seeded_store):
        with pytest.raises(GraphQLError) as exc_info:
            await remove_order(mock_info, "ord-404")

        assert exc_info.value.extensions == {"code": "NOT_FOUND", "id": "ord-404"}
        assert seeded_store.count() == 1
