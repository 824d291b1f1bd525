"""Ground picking — maps pointer positions to points on the ground plane.

A perspective camera casts a ray through the pointer position and the
ray is intersected with the horizontal plane y = plane_height.
"""

from __future__ import annotations
import logging
import math
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from walldraw.models import Point2D, Point3D, Vector3D, vector_between

logger = logging.getLogger(__name__)


class GroundResolver(Protocol):
    """Anything that can turn client coordinates into a ground point."""

    def resolve(self, x: float, y: float) -> Point2D | None:
        ...


class Camera(BaseModel):
    """Perspective camera looking from `position` towards `target`."""
    model_config = ConfigDict(frozen=True)

    position: Point3D = Point3D(x=5.0, y=5.0, z=5.0)
    target: Point3D = Point3D(x=0.0, y=0.0, z=0.0)
    up: Vector3D = Vector3D(x=0.0, y=1.0, z=0.0)
    fov: float = Field(75.0, gt=0, lt=180)  # Vertical field of view, degrees


class Viewport(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = Field(gt=0)
    height: float = Field(gt=0)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def to_ndc(self, x: float, y: float) -> tuple[float, float]:
        """Client pixels to normalized device coordinates (-1..1, y up)."""
        return (x / self.width) * 2 - 1, -(y / self.height) * 2 + 1


class GroundPicker:
    """Resolves pointer positions against the ground plane."""

    def __init__(
        self,
        camera: Camera,
        viewport: Viewport,
        plane_height: float = 0.0,
    ) -> None:
        self.camera = camera
        self.viewport = viewport
        self.plane_height = plane_height

    def resize(self, width: float, height: float) -> None:
        self.viewport = Viewport(width=width, height=height)
        logger.debug("Viewport resized to %sx%s", width, height)

    def ray(self, ndc_x: float, ndc_y: float) -> tuple[Point3D, Vector3D]:
        """World-space ray (origin, unit direction) through an NDC position."""
        cam = self.camera
        forward = vector_between(cam.position, cam.target).normalized()
        right = forward.cross(cam.up).normalized()
        true_up = right.cross(forward)

        tan_half = math.tan(math.radians(cam.fov) / 2)
        direction = (
            forward
            + right * (ndc_x * tan_half * self.viewport.aspect)
            + true_up * (ndc_y * tan_half)
        ).normalized()
        return cam.position, direction

    def intersect(self, origin: Point3D, direction: Vector3D) -> Point2D | None:
        """Hit point of a ray with the ground plane, or None if it misses."""
        if abs(direction.y) < 1e-10:
            return None  # Parallel to the plane
        t = (self.plane_height - origin.y) / direction.y
        if t < 0:
            return None  # Plane is behind the ray
        return Point2D(x=origin.x + direction.x * t, z=origin.z + direction.z * t)

    def resolve(self, x: float, y: float) -> Point2D | None:
        ndc_x, ndc_y = self.viewport.to_ndc(x, y)
        origin, direction = self.ray(ndc_x, ndc_y)
        return self.intersect(origin, direction)
