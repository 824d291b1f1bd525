"""Drafting snaps — grid quantisation and angle quantisation.

Both operations are pure. Callers apply the grid snap first and derive
the angle from already grid-snapped points.
"""

from __future__ import annotations
import math

from walldraw.models import Point2D, direction_from_points


def _round_to(value: float, step: float) -> float:
    """Round half-up to the nearest multiple of step."""
    return math.floor(value / step + 0.5) * step


def grid_snap(point: Point2D, step: float = 0.01) -> Point2D:
    """Snap each ground-plane axis to the nearest grid line."""
    return Point2D(x=_round_to(point.x, step), z=_round_to(point.z, step))


def snap_angle(angle: float, increment: float = 45.0) -> float:
    """Round an angle in radians to the nearest multiple of `increment` degrees."""
    return math.radians(_round_to(math.degrees(angle), increment))


def angle_snap(
    start: Point2D,
    end: Point2D,
    increment: float = 45.0,
    min_length: float = 0.01,
) -> Point2D | None:
    """
    Rotate `end` about `start` onto the nearest allowed direction.

    The distance from start is preserved. Returns None when the two points
    are closer than `min_length`, in which case there is nothing to draw.
    """
    direction = direction_from_points(start, end)
    length = direction.length()
    if length < min_length:
        return None

    snapped = snap_angle(direction.angle(), increment)
    return Point2D(
        x=start.x + length * math.cos(snapped),
        z=start.z + length * math.sin(snapped),
    )
