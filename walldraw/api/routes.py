"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Request

from walldraw.models import WallSegment
from walldraw.services.draw_service import DrawService
from walldraw.api.schemas import (
    CheckResponse, EventRequest, EventResponse, SessionInfo, ViewportRequest,
)

router = APIRouter()


def _service(request: Request) -> DrawService:
    return request.app.state.draw_service


@router.post("/events", response_model=EventResponse)
async def dispatch_event(body: EventRequest, request: Request) -> EventResponse:
    """Feed one input event to the draw session."""
    service = _service(request)
    signals = service.dispatch(body.event)
    return EventResponse(
        state=service.state(),
        signals=signals,
        wall_count=len(service.registry),
    )


@router.get("/session", response_model=SessionInfo)
async def session_info(request: Request) -> SessionInfo:
    service = _service(request)
    return SessionInfo(
        state=service.state(),
        preview=service.preview(),
        wall_count=len(service.registry),
    )


@router.get("/walls", response_model=list[WallSegment])
async def list_walls(request: Request) -> list[WallSegment]:
    """Committed walls in the order they were drawn."""
    return _service(request).walls()


@router.delete("/walls", response_model=SessionInfo)
async def reset_walls(request: Request) -> SessionInfo:
    """Clear every wall and leave draw mode."""
    service = _service(request)
    service.reset()
    return SessionInfo(state=service.state(), wall_count=len(service.registry))


@router.post("/walls/check", response_model=CheckResponse)
async def check_wall(segment: WallSegment, request: Request) -> CheckResponse:
    """Would this wall fit among the committed walls?"""
    conflicts = _service(request).conflicts(segment)
    return CheckResponse(can_place=not conflicts, conflicts=conflicts)


@router.put("/viewport")
async def resize_viewport(body: ViewportRequest, request: Request) -> dict[str, float]:
    _service(request).resize(body.width, body.height)
    return {"width": body.width, "height": body.height}


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
