from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .store import EventType


class TrackEventRequest(BaseModel):
    type: EventType
    payload: dict[str, Any] = Field(default_factory=dict)


class TrackEventResponse(BaseModel):
    success: bool = True
