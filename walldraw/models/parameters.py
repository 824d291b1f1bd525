"""Drawing constraints and configuration constants."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class DrawParams(BaseModel):
    """Constants fixed for the lifetime of a drawing session."""
    model_config = ConfigDict(frozen=True)

    grid_step: float = Field(0.01, gt=0)           # Grid cell size in meters
    angle_increment: float = Field(45.0, gt=0)     # Degrees
    min_length: float = Field(0.01, gt=0)          # Shortest drawable wall
    wall_thickness: float = Field(0.3, gt=0)       # Meters
    wall_height: float = Field(2.75, gt=0)         # Meters
    endpoint_tolerance: float = Field(0.001, ge=0) # Joint detection radius, per axis
    toggle_keys: tuple[str, ...] = ("d", "D")
    cancel_key: str = "Escape"
