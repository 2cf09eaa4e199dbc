"""
Initial schema: users, maps and everything attached to them.

Revision ID: 20260101_000000_initial_schema
Revises:
Create Date: 2026-01-01 00:00:00
"""

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20260101_000000_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), "postgresql")


def upgrade() -> None:
    # users
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id", name="users_pkey"),
        sa.UniqueConstraint("email", name="users_email_key"),
    )

    # maps
    op.create_table(
        "maps",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], name="maps_owner_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="maps_pkey"),
    )
    op.create_index("idx_maps_owner", "maps", ["owner_id"])

    # places
    op.create_table(
        "places",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("map_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["map_id"], ["maps.id"], name="places_map_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="places_pkey"),
    )
    op.create_index("idx_places_map", "places", ["map_id"])

    # routes
    op.create_table(
        "routes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("origin_id", sa.String(length=255), nullable=False),
        sa.Column("destination_id", sa.String(length=255), nullable=False),
        sa.Column("distance", sa.Float(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("map_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["map_id"], ["maps.id"], name="routes_map_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="routes_pkey"),
    )
    op.create_index("idx_routes_map", "routes", ["map_id"])

    # favorites
    op.create_table(
        "favorites",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("place_id", sa.Uuid(), nullable=True),
        sa.Column("route_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="favorites_user_id_fkey"),
        sa.ForeignKeyConstraint(["place_id"], ["places.id"], name="favorites_place_id_fkey"),
        sa.ForeignKeyConstraint(["route_id"], ["routes.id"], name="favorites_route_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="favorites_pkey"),
    )
    op.create_index("idx_favorites_user", "favorites", ["user_id"])

    # subscriptions (billing plans)
    op.create_table(
        "subscriptions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("plan_type", sa.String(length=50), nullable=False),
        sa.Column("expiration", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="subscriptions_user_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="subscriptions_pkey"),
    )
    op.create_index("idx_subscriptions_user", "subscriptions", ["user_id"])

    # traffic_data
    op.create_table(
        "traffic_data",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("traffic_level", sa.String(length=50), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("map_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["map_id"], ["maps.id"], name="traffic_data_map_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="traffic_data_pkey"),
    )
    op.create_index("idx_traffic_data_map", "traffic_data", ["map_id"])

    # weather_data
    op.create_table(
        "weather_data",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("temperature", sa.Float(), nullable=False),
        sa.Column("conditions", sa.String(length=100), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("map_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["map_id"], ["maps.id"], name="weather_data_map_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="weather_data_pkey"),
    )
    op.create_index("idx_weather_data_map", "weather_data", ["map_id"])

    # comments
    op.create_table(
        "comments",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("place_id", sa.Uuid(), nullable=True),
        sa.Column("route_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="comments_user_id_fkey"),
        sa.ForeignKeyConstraint(["place_id"], ["places.id"], name="comments_place_id_fkey"),
        sa.ForeignKeyConstraint(["route_id"], ["routes.id"], name="comments_route_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="comments_pkey"),
    )
    op.create_index("idx_comments_user", "comments", ["user_id"])

    # media
    op.create_table(
        "media",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("place_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["place_id"], ["places.id"], name="media_place_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="media_pkey"),
    )

    # navigation_history
    op.create_table(
        "navigation_history",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("action", sa.String(length=255), nullable=False),
        sa.Column("details", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="navigation_history_user_id_fkey"
        ),
        sa.PrimaryKeyConstraint("id", name="navigation_history_pkey"),
    )
    op.create_index("idx_navigation_history_user", "navigation_history", ["user_id"])

    # map_styles
    op.create_table(
        "map_styles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("style", JSON_TYPE, nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="map_styles_user_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="map_styles_pkey"),
    )
    op.create_index("idx_map_styles_user", "map_styles", ["user_id"])

    # events
    op.create_table(
        "events",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("map_id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["map_id"], ["maps.id"], name="events_map_id_fkey"),
        sa.PrimaryKeyConstraint("id", name="events_pkey"),
    )
    op.create_index("idx_events_map", "events", ["map_id"])


def downgrade() -> None:
    # Children first so no foreign key is left dangling
    op.drop_index("idx_events_map", table_name="events")
    op.drop_table("events")
    op.drop_index("idx_map_styles_user", table_name="map_styles")
    op.drop_table("map_styles")
    op.drop_index("idx_navigation_history_user", table_name="navigation_history")
    op.drop_table("navigation_history")
    op.drop_table("media")
    op.drop_index("idx_comments_user", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_weather_data_map", table_name="weather_data")
    op.drop_table("weather_data")
    op.drop_index("idx_traffic_data_map", table_name="traffic_data")
    op.drop_table("traffic_data")
    op.drop_index("idx_subscriptions_user", table_name="subscriptions")
    op.drop_table("subscriptions")
    op.drop_index("idx_favorites_user", table_name="favorites")
    op.drop_table("favorites")
    op.drop_index("idx_routes_map", table_name="routes")
    op.drop_table("routes")
    op.drop_index("idx_places_map", table_name="places")
    op.drop_table("places")
    op.drop_index("idx_maps_owner", table_name="maps")
    op.drop_table("maps")
    op.drop_table("users")
