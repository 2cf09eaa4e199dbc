"""
Database models for Mapgraph (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.

Foreign keys carry no ON DELETE action: removing a parent that still has
children is rejected by the store.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JsonType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        UniqueConstraint("email", name="users_email_key"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="user")

    maps: Mapped[list["Maps"]] = relationship("Maps", uselist=True, back_populates="owner")
    subscriptions: Mapped[list["Subscriptions"]] = relationship(
        "Subscriptions", uselist=True, back_populates="user"
    )
    favorites: Mapped[list["Favorites"]] = relationship(
        "Favorites", uselist=True, back_populates="user"
    )
    history: Mapped[list["NavigationHistory"]] = relationship(
        "NavigationHistory", uselist=True, back_populates="user"
    )
    comments: Mapped[list["Comments"]] = relationship(
        "Comments", uselist=True, back_populates="user"
    )
    styles: Mapped[list["MapStyles"]] = relationship(
        "MapStyles", uselist=True, back_populates="user"
    )


class Maps(Base):
    __tablename__ = "maps"
    __table_args__ = (
        ForeignKeyConstraint(["owner_id"], ["users.id"], name="maps_owner_id_fkey"),
        PrimaryKeyConstraint("id", name="maps_pkey"),
        Index("idx_maps_owner", "owner_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    owner_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    owner: Mapped["Users"] = relationship("Users", back_populates="maps")
    places: Mapped[list["Places"]] = relationship("Places", uselist=True, back_populates="map")
    routes: Mapped[list["Routes"]] = relationship("Routes", uselist=True, back_populates="map")
    traffic: Mapped[list["TrafficData"]] = relationship(
        "TrafficData", uselist=True, back_populates="map"
    )
    weather: Mapped[list["WeatherData"]] = relationship(
        "WeatherData", uselist=True, back_populates="map"
    )
    events: Mapped[list["Events"]] = relationship("Events", uselist=True, back_populates="map")


class Places(Base):
    __tablename__ = "places"
    __table_args__ = (
        ForeignKeyConstraint(["map_id"], ["maps.id"], name="places_map_id_fkey"),
        PrimaryKeyConstraint("id", name="places_pkey"),
        Index("idx_places_map", "map_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    map_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    map: Mapped["Maps"] = relationship("Maps", back_populates="places")
    media: Mapped[list["Media"]] = relationship("Media", uselist=True, back_populates="place")
    comments: Mapped[list["Comments"]] = relationship(
        "Comments", uselist=True, back_populates="place"
    )
    favorites: Mapped[list["Favorites"]] = relationship(
        "Favorites", uselist=True, back_populates="place"
    )


class Routes(Base):
    __tablename__ = "routes"
    __table_args__ = (
        ForeignKeyConstraint(["map_id"], ["maps.id"], name="routes_map_id_fkey"),
        PrimaryKeyConstraint("id", name="routes_pkey"),
        Index("idx_routes_map", "map_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Free-form endpoint identifiers, not foreign keys
    origin_id: Mapped[str] = mapped_column(String(255), nullable=False)
    destination_id: Mapped[str] = mapped_column(String(255), nullable=False)
    distance: Mapped[float] = mapped_column(Float, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    map_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    map: Mapped["Maps"] = relationship("Maps", back_populates="routes")
    comments: Mapped[list["Comments"]] = relationship(
        "Comments", uselist=True, back_populates="route"
    )
    favorites: Mapped[list["Favorites"]] = relationship(
        "Favorites", uselist=True, back_populates="route"
    )


class Favorites(Base):
    __tablename__ = "favorites"
    __table_args__ = (
        ForeignKeyConstraint(["user_id"], ["users.id"], name="favorites_user_id_fkey"),
        ForeignKeyConstraint(["place_id"], ["places.id"], name="favorites_place_id_fkey"),
        ForeignKeyConstraint(["route_id"], ["routes.id"], name="favorites_route_id_fkey"),
        PrimaryKeyConstraint("id", name="favorites_pkey"),
        Index("idx_favorites_user", "user_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    place_id: Mapped[UUID | None] = mapped_column(Uuid)
    route_id: Mapped[UUID | None] = mapped_column(Uuid)

    user: Mapped["Users"] = relationship("Users", back_populates="favorites")
    place: Mapped["Places | None"] = relationship("Places", back_populates="favorites")
    route: Mapped["Routes | None"] = relationship("Routes", back_populates="favorites")


class Subscriptions(Base):
    """Billing plan subscriptions (unrelated to GraphQL subscriptions)."""

    __tablename__ = "subscriptions"
    __table_args__ = (
        ForeignKeyConstraint(["user_id"], ["users.id"], name="subscriptions_user_id_fkey"),
        PrimaryKeyConstraint("id", name="subscriptions_pkey"),
        Index("idx_subscriptions_user", "user_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    plan_type: Mapped[str] = mapped_column(String(50), nullable=False)
    expiration: Mapped[datetime] = mapped_column(DateTime(True), nullable=False)

    user: Mapped["Users"] = relationship("Users", back_populates="subscriptions")


class TrafficData(Base):
    __tablename__ = "traffic_data"
    __table_args__ = (
        ForeignKeyConstraint(["map_id"], ["maps.id"], name="traffic_data_map_id_fkey"),
        PrimaryKeyConstraint("id", name="traffic_data_pkey"),
        Index("idx_traffic_data_map", "map_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    traffic_level: Mapped[str] = mapped_column(String(50), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(True), nullable=False, default=utcnow)
    map_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    map: Mapped["Maps"] = relationship("Maps", back_populates="traffic")


class WeatherData(Base):
    __tablename__ = "weather_data"
    __table_args__ = (
        ForeignKeyConstraint(["map_id"], ["maps.id"], name="weather_data_map_id_fkey"),
        PrimaryKeyConstraint("id", name="weather_data_pkey"),
        Index("idx_weather_data_map", "map_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    temperature: Mapped[float] = mapped_column(Float, nullable=False)
    conditions: Mapped[str] = mapped_column(String(100), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(True), nullable=False, default=utcnow)
    map_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    map: Mapped["Maps"] = relationship("Maps", back_populates="weather")


class Comments(Base):
    __tablename__ = "comments"
    __table_args__ = (
        ForeignKeyConstraint(["user_id"], ["users.id"], name="comments_user_id_fkey"),
        ForeignKeyConstraint(["place_id"], ["places.id"], name="comments_place_id_fkey"),
        ForeignKeyConstraint(["route_id"], ["routes.id"], name="comments_route_id_fkey"),
        PrimaryKeyConstraint("id", name="comments_pkey"),
        Index("idx_comments_user", "user_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    place_id: Mapped[UUID | None] = mapped_column(Uuid)
    route_id: Mapped[UUID | None] = mapped_column(Uuid)

    user: Mapped["Users"] = relationship("Users", back_populates="comments")
    place: Mapped["Places | None"] = relationship("Places", back_populates="comments")
    route: Mapped["Routes | None"] = relationship("Routes", back_populates="comments")


class Media(Base):
    __tablename__ = "media"
    __table_args__ = (
        ForeignKeyConstraint(["place_id"], ["places.id"], name="media_place_id_fkey"),
        PrimaryKeyConstraint("id", name="media_pkey"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    place_id: Mapped[UUID | None] = mapped_column(Uuid)

    place: Mapped["Places | None"] = relationship("Places", back_populates="media")


class NavigationHistory(Base):
    __tablename__ = "navigation_history"
    __table_args__ = (
        ForeignKeyConstraint(["user_id"], ["users.id"], name="navigation_history_user_id_fkey"),
        PrimaryKeyConstraint("id", name="navigation_history_pkey"),
        Index("idx_navigation_history_user", "user_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(True), nullable=False, default=utcnow)
    action: Mapped[str] = mapped_column(String(255), nullable=False)
    details: Mapped[str | None] = mapped_column(Text)

    user: Mapped["Users"] = relationship("Users", back_populates="history")


class MapStyles(Base):
    __tablename__ = "map_styles"
    __table_args__ = (
        ForeignKeyConstraint(["user_id"], ["users.id"], name="map_styles_user_id_fkey"),
        PrimaryKeyConstraint("id", name="map_styles_pkey"),
        Index("idx_map_styles_user", "user_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    style: Mapped[Any] = mapped_column(JsonType, nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), nullable=False, default=utcnow, onupdate=utcnow
    )

    user: Mapped["Users"] = relationship("Users", back_populates="styles")


class Events(Base):
    __tablename__ = "events"
    __table_args__ = (
        ForeignKeyConstraint(["map_id"], ["maps.id"], name="events_map_id_fkey"),
        PrimaryKeyConstraint("id", name="events_pkey"),
        Index("idx_events_map", "map_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    start_time: Mapped[datetime] = mapped_column(DateTime(True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(True), nullable=False)
    map_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), nullable=False, default=utcnow, onupdate=utcnow
    )

    map: Mapped["Maps"] = relationship("Maps", back_populates="events")


# Expose for Alembic
target_metadata = Base.metadata
