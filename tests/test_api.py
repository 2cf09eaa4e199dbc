"""
Tests for the HTTP surface: health checks and request logging middleware
"""

import pytest
from httpx import ASGITransport, AsyncClient

from mapgraph import __version__
from mapgraph.api.app import create_app
from mapgraph.middleware import operation_name_from_query, sanitize_query_params


@pytest.mark.asyncio
async def test_health_endpoint():
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_readiness_with_database(client):
    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"database": "ok"}}


@pytest.mark.asyncio
async def test_readiness_without_database():
    from mapgraph.database.connection import reset_database

    reset_database()
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_graphql_get_request(client):
    response = await client.get("/graphql", params={"query": "query ListUsers { users { id } }"})

    assert response.status_code == 200
    assert response.json() == {"data": {"users": []}}


def test_sanitize_query_params():
    assert sanitize_query_params({"password": "x", "api_key": "y", "page": "2"}) == {
        "password": "[REDACTED]",
        "api_key": "[REDACTED]",
        "page": "2",
    }


@pytest.mark.parametrize(
    "query, expected",
    [
        ("query ListMaps { maps { id } }", "ListMaps"),
        ("mutation AddMap { createMap { id } }", "mutation:AddMap"),
        ("subscription Live { trafficUpdated { id } }", "subscription:Live"),
        ("{ maps { id } }", "unnamed_operation"),
        ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
    ],
)
def test_operation_name_from_query(query, expected):
    assert operation_name_from_query(query) == expected


@pytest.mark.asyncio
async def test_request_id_is_echoed():
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        given = await client.get("/health", headers={"X-Request-ID": "req-123"})
        generated = await client.get("/health")

    assert given.headers["x-request-id"] == "req-123"
    assert generated.headers["x-request-id"]
