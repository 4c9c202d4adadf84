"""Pydantic schemas for analytics tracking."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class EventMetadataSchema(BaseModel):
    """Optional context attached to an event."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    item_id: str | None = Field(default=None, max_length=100)
    item_name: str | None = Field(default=None, max_length=200)
    scan_source: str | None = Field(default=None, max_length=100)


class TrackEventRequest(BaseModel):
    """Request body for POST /api/analytics/track."""

    event_type: Literal["scan", "visit", "menu_view", "item_view"]
    restaurant_name: str = Field(..., min_length=1, max_length=200)
    metadata: EventMetadataSchema = Field(default_factory=EventMetadataSchema)
