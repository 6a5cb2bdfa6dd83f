"""
HTTP tests for the FastAPI application and its /graphql endpoint
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from socialmedia.api.app import create_app
from socialmedia.config import Settings
from socialmedia.errors import ConfigurationMissingError


@pytest.fixture
def app(store, test_settings):
    return create_app(store=store, config=test_settings)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_create_and_list_users(client):
    response = await client.post(
        "/graphql",
        json={
            "query": "mutation CreateUser { createUser(name: \"Ana\", password: \"p\", "
            "email: \"ana@example.com\") { id name } }",
            "operationName": "CreateUser",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert "errors" not in body
    user_id = body["data"]["createUser"]["id"]

    response = await client.post("/graphql", json={"query": "{ users { id name } }"})

    assert response.json() == {"data": {"users": [{"id": user_id, "name": "Ana"}]}}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_not_found_is_reported_in_errors(client):
    response = await client.post(
        "/graphql",
        json={"query": "{ post(id: \"0123456789abcdef01234567\") { id } }"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["data"] is None
    assert body["errors"][0]["message"] == "Post not found"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_response_carries_request_id(client):
    response = await client.post(
        "/graphql",
        json={"query": "{ comments { id } }"},
        headers={"x-request-id": "req-123"},
    )

    assert response.headers["x-request-id"] == "req-123"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_only_graphql_route_is_served(client):
    assert (await client.get("/health")).status_code == 404
    assert (await client.get("/docs")).status_code == 404


@pytest.mark.asyncio
async def test_startup_fails_without_connection_url():
    config = Settings(_env_file=None, mongo_url=None)
    app = create_app(config=config)

    with pytest.raises(ConfigurationMissingError):
        async with app.router.lifespan_context(app):
            pass


@pytest.mark.asyncio
async def test_lifespan_keeps_supplied_store(store, test_settings):
    app = create_app(store=store, config=test_settings)

    async with app.router.lifespan_context(app):
        assert app.state.store is store

    assert app.state.store is store
