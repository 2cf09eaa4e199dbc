"""
End-to-end subscription tests over the /graphql WebSocket route
"""

import time
from collections.abc import Generator
from pathlib import Path

import pytest
from starlette.testclient import TestClient

from mapgraph.broadcast import Topic

CREATE_USER = 'mutation { createUser(name: "U1", email: "u1@example.com", password: "pw") { id } }'

CREATE_MAP = """
mutation($ownerId: ID!) {
    createMap(name: "City A", type: "road", ownerId: $ownerId) { id name type owner { id } }
}
"""

CREATE_TRAFFIC = """
mutation($mapId: ID!) {
    createTrafficData(trafficLevel: "high", mapId: $mapId) { id trafficLevel map { id } }
}
"""


@pytest.fixture
def ws_client(alembic_migrate: None, test_database: tuple[str, Path]) -> Generator[TestClient, None, None]:
    """A client running the app's lifespan, bound to the migrated database."""
    from mapgraph.api.app import create_app
    from mapgraph.database.connection import init_database, reset_database

    _ = alembic_migrate
    dsn, _ = test_database
    reset_database()
    init_database(dsn, force_reinit=True)

    with TestClient(create_app()) as client:
        yield client

    reset_database()


def post(client: TestClient, query: str, variables: dict | None = None) -> dict:
    response = client.post("/graphql", json={"query": query, "variables": variables or {}})
    body = response.json()
    assert "errors" not in body, body
    return body["data"]


def wait_for_subscriber(client: TestClient, topic: Topic) -> None:
    broadcast = client.app.state.broadcast
    deadline = time.monotonic() + 5
    while not broadcast.subscriber_count(topic):
        assert time.monotonic() < deadline, "subscription never started listening"
        time.sleep(0.01)


def open_session(ws) -> None:
    ws.send_json({"type": "connection_init"})
    assert ws.receive_json() == {"type": "connection_ack"}


@pytest.mark.integration
@pytest.mark.requires_db
def test_traffic_update_reaches_websocket_subscriber(ws_client):
    user_id = post(ws_client, CREATE_USER)["createUser"]["id"]
    created_map = post(ws_client, CREATE_MAP, {"ownerId": user_id})["createMap"]
    assert created_map["name"] == "City A"
    assert created_map["type"] == "road"
    assert created_map["owner"] == {"id": user_id}
    map_id = created_map["id"]

    with ws_client.websocket_connect("/graphql", subprotocols=["graphql-transport-ws"]) as ws:
        open_session(ws)
        ws.send_json(
            {
                "id": "traffic",
                "type": "subscribe",
                "payload": {"query": "subscription { trafficUpdated { id trafficLevel map { id name } } }"},
            }
        )
        wait_for_subscriber(ws_client, Topic.TRAFFIC_UPDATED)

        created = post(ws_client, CREATE_TRAFFIC, {"mapId": map_id})["createTrafficData"]
        message = ws.receive_json()
        assert message["type"] == "next"
        assert message["id"] == "traffic"
        assert message["payload"]["data"]["trafficUpdated"] == {
            "id": created["id"],
            "trafficLevel": "high",
            "map": {"id": map_id, "name": "City A"},
        }

        renamed = post(
            ws_client,
            'mutation($id: ID!) { updateMap(id: $id, name: "City B") { name } }',
            {"id": map_id},
        )
        assert renamed["updateMap"] == {"name": "City B"}

        post(ws_client, CREATE_TRAFFIC, {"mapId": map_id})
        message = ws.receive_json()
        assert message["payload"]["data"]["trafficUpdated"]["map"] == {"id": map_id, "name": "City B"}

        ws.send_json({"id": "traffic", "type": "complete"})


@pytest.mark.integration
@pytest.mark.requires_db
def test_websocket_queries_do_not_share_cached_rows(ws_client):
    user_id = post(ws_client, CREATE_USER)["createUser"]["id"]
    map_id = post(ws_client, CREATE_MAP, {"ownerId": user_id})["createMap"]["id"]
    place_query = "query { places { map { name } } }"
    post(
        ws_client,
        'mutation($mapId: ID!) { createPlace(name: "Harbour", type: "poi", latitude: 1.0, longitude: 2.0, mapId: $mapId) { id } }',
        {"mapId": map_id},
    )

    with ws_client.websocket_connect("/graphql", subprotocols=["graphql-transport-ws"]) as ws:
        open_session(ws)

        ws.send_json({"id": "1", "type": "subscribe", "payload": {"query": place_query}})
        first = ws.receive_json()
        assert first["payload"]["data"]["places"] == [{"map": {"name": "City A"}}]
        assert ws.receive_json() == {"id": "1", "type": "complete"}

        post(ws_client, 'mutation($id: ID!) { updateMap(id: $id, name: "City B") { id } }', {"id": map_id})

        ws.send_json({"id": "2", "type": "subscribe", "payload": {"query": place_query}})
        second = ws.receive_json()
        assert second["payload"]["data"]["places"] == [{"map": {"name": "City B"}}]
        assert ws.receive_json() == {"id": "2", "type": "complete"}
