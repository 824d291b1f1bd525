"""Geometric primitives used throughout the drawing engine."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point on the ground plane (X-Z in Three.js convention)."""
    model_config = ConfigDict(frozen=True)

    x: float
    z: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.z - other.z) ** 2)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            z=self.z + (other.z - self.z) * t,
        )

    def dot(self, axis: Vector2D) -> float:
        """Scalar projection of this point onto an axis."""
        return self.x * axis.x + self.z * axis.z

    def offset(self, direction: Vector2D, distance: float) -> Point2D:
        return Point2D(
            x=self.x + direction.x * distance,
            z=self.z + direction.z * distance,
        )


class Point3D(BaseModel):
    """Point in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float


class Vector2D(BaseModel):
    """2D vector for direction calculations on the ground plane."""
    model_config = ConfigDict(frozen=True)

    x: float
    z: float

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.z * self.z)

    def normalized(self) -> Vector2D:
        ln = self.length()
        if ln < 1e-10:
            return Vector2D(x=0.0, z=0.0)
        return Vector2D(x=self.x / ln, z=self.z / ln)

    def perpendicular(self) -> Vector2D:
        """90-degree counterclockwise rotation."""
        return Vector2D(x=-self.z, z=self.x)

    def angle(self) -> float:
        """Direction angle in radians, atan2(z, x)."""
        return math.atan2(self.z, self.x)


class Vector3D(BaseModel):
    """3D vector, used for camera rays."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        ln = self.length()
        if ln < 1e-10:
            return Vector3D(x=0.0, y=0.0, z=0.0)
        return Vector3D(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Get direction vector from start to end."""
    return Vector2D(x=end.x - start.x, z=end.z - start.z)


def vector_between(start: Point3D, end: Point3D) -> Vector3D:
    return Vector3D(x=end.x - start.x, y=end.y - start.y, z=end.z - start.z)


def wall_corners(start: Point2D, end: Point2D, thickness: float) -> list[Point2D]:
    """
    Corners of the footprint rectangle of a wall running from start to end.

    The rectangle is `thickness` wide, centred on the start-end line.
    Corners are ordered start-left, start-right, end-right, end-left so
    consecutive corners share an edge.
    """
    direction = direction_from_points(start, end)
    if direction.length() < 0.001:
        # Degenerate wall collapses to a point
        return [start, start, start, start]

    perp = direction.normalized().perpendicular()
    half = thickness / 2
    return [
        start.offset(perp, half),
        start.offset(perp, -half),
        end.offset(perp, -half),
        end.offset(perp, half),
    ]


def edge_normal(p1: Point2D, p2: Point2D) -> Vector2D:
    """Unit normal of the edge p1 -> p2."""
    return direction_from_points(p1, p2).perpendicular().normalized()


def project_polygon(corners: list[Point2D], axis: Vector2D) -> tuple[float, float]:
    """Project polygon corners onto an axis, returning the (min, max) interval."""
    projections = [c.dot(axis) for c in corners]
    return min(projections), max(projections)
