"""
Integration tests for error reporting through GraphQL responses
"""

import uuid

import pytest


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
@pytest.mark.parametrize(
    "mutation",
    [
        'updateMap(id: $id, name: "x") { id }',
        "deleteMap(id: $id) { id }",
        "deleteUser(id: $id) { id }",
        'updateComment(id: $id, text: "x") { id }',
        "deleteEvent(id: $id) { id }",
    ],
)
async def test_unknown_id_is_not_found(graphql, mutation):
    missing = str(uuid.uuid4())

    body = await graphql(f"mutation($id: ID!) {{ {mutation} }}", {"id": missing})

    assert body["data"] is None
    assert body["errors"][0]["message"].endswith(f"not found: {missing}")


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_non_uuid_id_is_not_found(graphql):
    body = await graphql('mutation { deletePlace(id: "not-a-uuid") { id } }')

    assert body["data"] is None
    assert body["errors"][0]["message"] == "Place not found: not-a-uuid"


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_missing_parent_is_constraint_violation(graphql):
    body = await graphql(
        'mutation($id: ID!) { createPlace(name: "P", type: "poi", latitude: 0, longitude: 0, mapId: $id) { id } }',
        {"id": str(uuid.uuid4())},
    )

    assert body["data"] is None
    assert body["errors"][0]["message"].startswith("Place constraint violation")
    assert (await graphql("query { places { id } }"))["data"]["places"] == []


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_malformed_datetime_is_reported(graphql):
    body = await graphql(
        'mutation($id: ID!) { createSubscription(userId: $id, planType: "pro", expiration: "tomorrow") { id } }',
        {"id": str(uuid.uuid4())},
    )

    assert body.get("data") is None
    assert "Invalid DateTime value" in body["errors"][0]["message"]


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_malformed_json_variable_is_reported(graphql):
    body = await graphql(
        """
        mutation($id: ID!, $style: Json!) {
            createMapStyle(userId: $id, name: "Broken", style: $style, isDefault: false) { id }
        }
        """,
        {"id": str(uuid.uuid4()), "style": "{not json"},
    )

    assert body.get("data") is None
    assert "Invalid Json value" in body["errors"][0]["message"]
