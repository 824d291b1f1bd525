"""API request/response schemas."""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field

from walldraw.models import DrawState, InputEvent, Signal, WallSegment


class EventRequest(BaseModel):
    """Request body for the /events endpoint."""
    event: InputEvent


class EventResponse(BaseModel):
    """Response from the /events endpoint."""
    state: DrawState
    signals: list[Signal]
    wall_count: int


class SessionInfo(BaseModel):
    state: DrawState
    preview: Optional[WallSegment] = None
    wall_count: int


class CheckResponse(BaseModel):
    can_place: bool
    conflicts: list[WallSegment]


class ViewportRequest(BaseModel):
    width: float = Field(gt=0)
    height: float = Field(gt=0)
