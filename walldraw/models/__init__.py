from .geometry import (
    Point2D, Point3D, Vector2D, Vector3D, direction_from_points, vector_between,
    wall_corners, edge_normal, project_polygon,
)
from .wall import WallSegment
from .parameters import DrawParams
from .state import Idle, Armed, Pending, DrawState
from .events import (
    ToggleDrawMode, PointerDown, PointerMove, KeyDown, InputEvent,
    CursorChange, PreviewUpdate, WallCommitted, PlacementRejected, Signal,
    PRIMARY_BUTTON, SECONDARY_BUTTON,
)

__all__ = [
    "Point2D", "Point3D", "Vector2D", "Vector3D", "direction_from_points",
    "vector_between", "wall_corners", "edge_normal", "project_polygon",
    "WallSegment",
    "DrawParams",
    "Idle", "Armed", "Pending", "DrawState",
    "ToggleDrawMode", "PointerDown", "PointerMove", "KeyDown", "InputEvent",
    "CursorChange", "PreviewUpdate", "WallCommitted", "PlacementRejected", "Signal",
    "PRIMARY_BUTTON", "SECONDARY_BUTTON",
]
