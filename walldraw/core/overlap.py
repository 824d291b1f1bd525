"""Wall overlap detection on the ground plane.

Each wall footprint is an oriented rectangle. Two footprints intersect
unless one of their edge normals separates them (Separating Axis Theorem).
Walls that share an endpoint form a joint and are never tested.
"""

from __future__ import annotations
from typing import Iterable

from walldraw.models import (
    Point2D, WallSegment, edge_normal, project_polygon,
)


def points_coincide(p1: Point2D, p2: Point2D, tolerance: float = 0.001) -> bool:
    return abs(p1.x - p2.x) < tolerance and abs(p1.z - p2.z) < tolerance


def shares_endpoint(a: WallSegment, b: WallSegment, tolerance: float = 0.001) -> bool:
    """True if any endpoint of `a` sits on any endpoint of `b`."""
    return any(
        points_coincide(pa, pb, tolerance)
        for pa in (a.start, a.end)
        for pb in (b.start, b.end)
    )


def rectangles_intersect(rect1: list[Point2D], rect2: list[Point2D]) -> bool:
    """SAT test for two 4-corner rectangles. Touching counts as intersecting."""
    axes = [
        edge_normal(rect1[0], rect1[1]),
        edge_normal(rect1[1], rect1[2]),
        edge_normal(rect2[0], rect2[1]),
        edge_normal(rect2[1], rect2[2]),
    ]

    for axis in axes:
        min1, max1 = project_polygon(rect1, axis)
        min2, max2 = project_polygon(rect2, axis)
        if max1 < min2 or max2 < min1:
            return False  # Separating axis found

    return True


class OverlapDetector:
    """Decides whether a candidate wall may be placed among existing walls."""

    def __init__(self, endpoint_tolerance: float = 0.001) -> None:
        self.endpoint_tolerance = endpoint_tolerance

    def overlaps(self, candidate: WallSegment, other: WallSegment) -> bool:
        """Pairwise check, with the shared-endpoint exemption applied."""
        if shares_endpoint(candidate, other, self.endpoint_tolerance):
            return False
        return rectangles_intersect(candidate.corners(), other.corners())

    def find_conflicts(
        self, candidate: WallSegment, existing: Iterable[WallSegment],
    ) -> list[WallSegment]:
        """All existing walls that block the candidate."""
        return [w for w in existing if self.overlaps(candidate, w)]

    def can_place(self, candidate: WallSegment, existing: Iterable[WallSegment]) -> bool:
        for wall in existing:
            if self.overlaps(candidate, wall):
                return False
        return True
