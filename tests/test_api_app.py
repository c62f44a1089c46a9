"""
HTTP-level tests for the FastAPI application
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from orderdesk.api.app import create_app
from orderdesk.config import Settings
from orderdesk.middleware import REQUEST_ID_HEADER
from orderdesk.store import OrderStore


@pytest.fixture
def app_settings():
    return Settings(seed_orders=True, debug=False, graphiql=False)


@pytest.fixture
def app(seeded_store, app_settings):
    return create_app(store=seeded_store, app_settings=app_settings)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.integration
@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["orders"] == 1


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_round_trip(client, seeded_store):
    add = await client.post(
        "/graphql",
        json={
            "query": (
                "mutation AddOrder($input: OrderInput!) "
                "{ addOrder(input: $input) { id date product status } }"
            ),
            "variables": {
                "input": {"date": "3/23/2020", "product": "Country Cookbook", "status": "PROCESSING"}
            },
        },
    )
    assert add.status_code == 200
    assert add.json()["data"]["addOrder"]["date"] == "2020-03-23"

    total = await client.post("/graphql", json={"query": "{ totalOrders }"})
    assert total.json() == {"data": {"totalOrders": 2}}
    assert seeded_store.count() == 2


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_error_carries_code(client):
    response = await client.post(
        "/graphql",
        json={"query": 'mutation { removeOrder(id: "ord-nope") { removed } }'},
    )

    body = response.json()
    assert body["data"] is None
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_request_id_header(client):
    response = await client.get("/health", headers={REQUEST_ID_HEADER: "req-123"})
    assert response.headers[REQUEST_ID_HEADER] == "req-123"

    generated = await client.get("/health")
    assert generated.headers[REQUEST_ID_HEADER]


@pytest.mark.asyncio
async def test_lifespan_seeds_store():
    store = OrderStore()
    app = create_app(store=store, app_settings=Settings(seed_orders=True, debug=False))

    async with app.router.lifespan_context(app):
        assert store.count() == 1
        assert store.get("ord-123") is not None


@pytest.mark.asyncio
async def test_lifespan_without_seeding():
    store = OrderStore()
    app = create_app(store=store, app_settings=Settings(seed_orders=False, debug=False))

    async with app.router.lifespan_context(app):
        assert store.count() == 0


def test_app_exposes_store(app, seeded_store):
    assert app.state.store is seeded_store
