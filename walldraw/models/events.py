"""Input events consumed by the draw session and signals it emits."""

from __future__ import annotations
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from .wall import WallSegment


PRIMARY_BUTTON = 0
SECONDARY_BUTTON = 2


# Inputs

class ToggleDrawMode(BaseModel):
    """Enable or disable draw mode. `enabled=None` flips the current mode."""
    model_config = ConfigDict(frozen=True)

    type: Literal["toggle_draw_mode"] = "toggle_draw_mode"
    enabled: Optional[bool] = None


class PointerDown(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    type: Literal["pointer_down"] = "pointer_down"
    x: float        # Client coordinates (pixels)
    y: float
    button: int = PRIMARY_BUTTON


class PointerMove(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    type: Literal["pointer_move"] = "pointer_move"
    x: float
    y: float


class KeyDown(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["key_down"] = "key_down"
    key: str


InputEvent = Annotated[
    Union[ToggleDrawMode, PointerDown, PointerMove, KeyDown],
    Field(discriminator="type"),
]


# Outputs

class CursorChange(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["cursor_change"] = "cursor_change"
    cursor: Literal["crosshair", "default"]


class PreviewUpdate(BaseModel):
    """Live preview changed. `segment=None` means the preview was removed."""
    model_config = ConfigDict(frozen=True)

    type: Literal["preview_update"] = "preview_update"
    segment: Optional[WallSegment] = None


class WallCommitted(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["wall_committed"] = "wall_committed"
    segment: WallSegment


class PlacementRejected(BaseModel):
    """Advisory: a commit was refused because the wall overlaps others."""
    model_config = ConfigDict(frozen=True)

    type: Literal["placement_rejected"] = "placement_rejected"
    segment: WallSegment
    conflicts: list[WallSegment] = []


Signal = Annotated[
    Union[CursorChange, PreviewUpdate, WallCommitted, PlacementRejected],
    Field(discriminator="type"),
]
