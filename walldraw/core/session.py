"""Draw session — the wall-drawing interaction state machine."""

from __future__ import annotations
import logging
import math

from walldraw.models import (
    DrawParams, WallSegment, Point2D,
    Idle, Armed, Pending, DrawState,
    ToggleDrawMode, PointerDown, PointerMove, KeyDown, InputEvent,
    CursorChange, PreviewUpdate, WallCommitted, PlacementRejected, Signal,
    PRIMARY_BUTTON, SECONDARY_BUTTON,
)
from walldraw.core.overlap import OverlapDetector
from walldraw.core.picking import GroundResolver
from walldraw.core.registry import WallRegistry
from walldraw.core.snapping import grid_snap, angle_snap

logger = logging.getLogger(__name__)


class DrawSession:
    """
    Turns input events into wall previews and committed walls.

    Every event goes through `handle()`, which returns the signals the
    event produced. Failed picks, too-short walls and overlapping walls
    are absorbed silently: the session simply stays where it was.

    After a successful commit the session chains: the committed wall's
    end point becomes the start of the next wall.
    """

    def __init__(
        self,
        registry: WallRegistry,
        resolver: GroundResolver,
        params: DrawParams | None = None,
    ) -> None:
        self.registry = registry
        self.resolver = resolver
        self.params = params or DrawParams()
        self.detector = OverlapDetector(self.params.endpoint_tolerance)
        self._state: DrawState = Idle()
        self._preview: WallSegment | None = None

    @property
    def state(self) -> DrawState:
        return self._state

    @property
    def preview(self) -> WallSegment | None:
        return self._preview

    @property
    def start_point(self) -> Point2D | None:
        if isinstance(self._state, Pending):
            return self._state.start
        return None

    @property
    def drawing(self) -> bool:
        """True while draw mode is on."""
        return not isinstance(self._state, Idle)

    def handle(self, event: InputEvent) -> list[Signal]:
        if isinstance(event, ToggleDrawMode):
            return self._toggle(event.enabled)
        if isinstance(event, KeyDown):
            return self._key_down(event.key)
        if isinstance(event, PointerDown):
            return self._pointer_down(event.x, event.y, event.button)
        if isinstance(event, PointerMove):
            return self._pointer_move(event.x, event.y)
        logger.debug("Ignoring unknown event %r", event)
        return []

    # ==========================================
    # Transitions
    # ==========================================

    def _toggle(self, enabled: bool | None) -> list[Signal]:
        target = (not self.drawing) if enabled is None else enabled
        if target == self.drawing:
            return []

        if target:
            self._state = Armed()
            logger.info("Draw mode enabled")
            return [CursorChange(cursor="crosshair")]

        signals = self._clear_preview()
        self._state = Idle()
        logger.info("Draw mode disabled")
        signals.append(CursorChange(cursor="default"))
        return signals

    def _key_down(self, key: str) -> list[Signal]:
        if key in self.params.toggle_keys:
            return self._toggle(None)
        if key == self.params.cancel_key and isinstance(self._state, Pending):
            logger.info("Drawing cancelled")
            return self._disarm()
        return []

    def _pointer_down(self, x: float, y: float, button: int) -> list[Signal]:
        if not self.drawing:
            return []
        if button == SECONDARY_BUTTON:
            return self._disarm()
        if button != PRIMARY_BUTTON:
            return []

        point = self._pick(x, y)
        if point is None:
            return []

        if isinstance(self._state, Armed):
            self._state = Pending(start=point)
            logger.debug("Start point set: (%.2f, %.2f)", point.x, point.z)
            return []

        return self._try_commit(self._state.start, point)

    def _pointer_move(self, x: float, y: float) -> list[Signal]:
        if not isinstance(self._state, Pending):
            return []

        point = self._pick(x, y)
        if point is None:
            return []

        segment = self._build_segment(self._state.start, point)
        if segment is None:
            return []

        self._preview = segment
        return [PreviewUpdate(segment=segment)]

    def _try_commit(self, start: Point2D, point: Point2D) -> list[Signal]:
        candidate = self._build_segment(start, point)
        if candidate is None:
            return []

        signals = self._clear_preview()
        existing = self.registry.all()
        if not self.detector.can_place(candidate, existing):
            conflicts = self.detector.find_conflicts(candidate, existing)
            logger.warning(
                "Cannot create wall: intersects with %d existing wall(s)", len(conflicts),
            )
            signals.append(PlacementRejected(segment=candidate, conflicts=conflicts))
            return signals

        self.registry.add(candidate)
        signals.append(WallCommitted(segment=candidate))
        self._chain_from(candidate)
        return signals

    def _chain_from(self, wall: WallSegment) -> None:
        """Continue drawing from the end of the wall just committed."""
        self._state = Pending(start=wall.end)
        logger.debug("Wall created, continuing from (%.2f, %.2f)", wall.end.x, wall.end.z)

    def _disarm(self) -> list[Signal]:
        """Drop the start point and preview but stay in draw mode."""
        signals = self._clear_preview()
        self._state = Armed()
        return signals

    # ==========================================
    # Helpers
    # ==========================================

    def _pick(self, x: float, y: float) -> Point2D | None:
        point = self.resolver.resolve(x, y)
        if point is None:
            return None
        if not (math.isfinite(point.x) and math.isfinite(point.z)):
            logger.debug("Discarding non-finite pick at (%s, %s)", x, y)
            return None
        return grid_snap(point, self.params.grid_step)

    def _build_segment(self, start: Point2D, point: Point2D) -> WallSegment | None:
        end = angle_snap(
            start, point,
            increment=self.params.angle_increment,
            min_length=self.params.min_length,
        )
        if end is None:
            return None
        return WallSegment(
            start=start,
            end=end,
            thickness=self.params.wall_thickness,
            height=self.params.wall_height,
        )

    def _clear_preview(self) -> list[Signal]:
        if self._preview is None:
            return []
        self._preview = None
        return [PreviewUpdate(segment=None)]
