"""Wall segment model."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, Field

from .geometry import Point2D, direction_from_points, wall_corners


class WallSegment(BaseModel):
    """A straight wall defined by two ground-plane endpoints."""
    model_config = ConfigDict(frozen=True)

    start: Point2D
    end: Point2D
    thickness: float = Field(gt=0)  # Meters
    height: float = Field(gt=0)     # Meters

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def angle(self) -> float:
        """Direction angle in radians, measured from +X towards +Z."""
        d = direction_from_points(self.start, self.end)
        return math.atan2(d.z, d.x)

    @property
    def midpoint(self) -> Point2D:
        return self.start.lerp(self.end, 0.5)

    def corners(self) -> list[Point2D]:
        """Footprint rectangle on the ground plane."""
        return wall_corners(self.start, self.end, self.thickness)
