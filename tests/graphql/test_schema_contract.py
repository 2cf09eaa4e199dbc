"""
Tests for the published schema: names, argument lists and custom scalars
"""

import pytest
from graphql import GraphQLNonNull

from mapgraph.graphql.schema import schema, validate_schema

QUERY_FIELDS = {
    "users",
    "maps",
    "places",
    "routes",
    "favorites",
    "subscriptions",
    "trafficData",
    "weatherData",
    "comments",
    "media",
    "navigationHistory",
    "mapStyles",
    "events",
}

MUTATION_ARGUMENTS = {
    "createUser": {"name": True, "email": True, "password": True},
    "createMap": {"name": True, "type": True, "ownerId": True},
    "createPlace": {"name": True, "type": True, "latitude": True, "longitude": True, "mapId": True},
    "createRoute": {
        "name": True,
        "originId": True,
        "destinationId": True,
        "distance": True,
        "duration": True,
        "mapId": True,
    },
    "createFavorite": {"userId": True, "placeId": False, "routeId": False},
    "createSubscription": {"userId": True, "planType": True, "expiration": True},
    "createTrafficData": {"trafficLevel": True, "mapId": True},
    "createWeatherData": {"temperature": True, "conditions": True, "mapId": True},
    "createComment": {"userId": True, "text": True, "rating": True, "placeId": False, "routeId": False},
    "createMedia": {"url": True, "type": True, "placeId": True},
    "createNavigationHistory": {"userId": True, "action": True, "details": False},
    "createMapStyle": {"userId": True, "name": True, "style": True, "isDefault": True},
    "createEvent": {
        "name": True,
        "description": False,
        "startTime": True,
        "endTime": True,
        "mapId": True,
    },
    "updateUser": {"id": True, "name": False, "email": False, "password": False},
    "updateMap": {"id": True, "name": False, "type": False},
    "updatePlace": {"id": True, "name": False, "type": False, "latitude": False, "longitude": False},
    "updateRoute": {"id": True, "name": False, "distance": False, "duration": False},
    "updateTrafficData": {"id": True, "trafficLevel": True},
    "updateWeatherData": {"id": True, "temperature": True, "conditions": True},
    "updateComment": {"id": True, "text": False, "rating": False},
    "updateEvent": {
        "id": True,
        "name": False,
        "description": False,
        "startTime": False,
        "endTime": False,
    },
}

DELETABLE = [
    "User",
    "Map",
    "Place",
    "Route",
    "Favorite",
    "Subscription",
    "TrafficData",
    "WeatherData",
    "Comment",
    "Media",
    "NavigationHistory",
    "MapStyle",
    "Event",
]


def test_schema_validates():
    validate_schema()


def test_query_fields():
    assert set(schema._schema.query_type.fields) == QUERY_FIELDS


@pytest.mark.parametrize("mutation, arguments", sorted(MUTATION_ARGUMENTS.items()))
def test_mutation_arguments(mutation, arguments):
    field = schema._schema.mutation_type.fields[mutation]
    actual = {name: isinstance(arg.type, GraphQLNonNull) for name, arg in field.args.items()}
    assert actual == arguments
    assert isinstance(field.type, GraphQLNonNull)


@pytest.mark.parametrize("entity", DELETABLE)
def test_delete_mutations_take_only_an_id(entity):
    field = schema._schema.mutation_type.fields[f"delete{entity}"]
    assert list(field.args) == ["id"]
    assert str(field.args["id"].type) == "ID!"
    assert str(field.type) == f"{entity}!"


def test_mutation_field_count():
    assert len(schema._schema.mutation_type.fields) == len(MUTATION_ARGUMENTS) + len(DELETABLE)


def test_subscription_root_does_not_collide_with_billing_type():
    graphql_schema = schema._schema
    assert graphql_schema.subscription_type.name == "SubscriptionRoot"
    assert set(graphql_schema.subscription_type.fields) == {"trafficUpdated", "weatherUpdated"}
    assert str(graphql_schema.subscription_type.fields["trafficUpdated"].type) == "TrafficData!"
    assert set(graphql_schema.get_type("Subscription").fields) == {
        "id",
        "user",
        "planType",
        "expiration",
    }


def test_custom_scalars_are_named():
    sdl = schema.as_str()
    assert "scalar DateTime" in sdl
    assert "scalar Json" in sdl
    assert "style: Json!" in sdl
    assert "expiration: DateTime!" in sdl


def test_nullable_query_lists():
    for name in QUERY_FIELDS:
        field = schema._schema.query_type.fields[name]
        assert not isinstance(field.type, GraphQLNonNull)
