"""Pydantic payloads carried on broadcast topics."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class TrafficUpdate(BaseModel):
    id: UUID
    traffic_level: str
    timestamp: datetime
    map_id: UUID


class WeatherUpdate(BaseModel):
    id: UUID
    temperature: float
    conditions: str
    timestamp: datetime
    map_id: UUID
