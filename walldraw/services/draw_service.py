"""High-level drawing service — facade for the API layer."""

from __future__ import annotations
import logging
import threading

from walldraw.models import (
    DrawParams, DrawState, InputEvent, Signal, WallSegment, ToggleDrawMode,
)
from walldraw.core.bus import SignalBus
from walldraw.core.picking import Camera, GroundPicker, GroundResolver, Viewport
from walldraw.core.registry import WallRegistry
from walldraw.core.session import DrawSession

logger = logging.getLogger(__name__)


class DrawService:
    """
    Owns one editing context: registry, session, picker and signal bus.

    Every signal returned by `dispatch()` is also emitted on `bus`, so an
    embedding renderer can subscribe per signal class instead of polling.
    """

    def __init__(
        self,
        params: DrawParams | None = None,
        resolver: GroundResolver | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self.params = params or DrawParams()
        self.resolver = resolver or GroundPicker(Camera(), Viewport(width=1280, height=720))
        self.bus = bus or SignalBus()
        self.registry = WallRegistry()
        self.session = DrawSession(self.registry, self.resolver, self.params)
        # Events are handled one at a time, to completion
        self._lock = threading.Lock()

    def dispatch(self, event: InputEvent) -> list[Signal]:
        with self._lock:
            signals = self.session.handle(event)
        for signal in signals:
            self.bus.emit(signal)
        return signals

    def state(self) -> DrawState:
        return self.session.state

    def preview(self) -> WallSegment | None:
        return self.session.preview

    def walls(self) -> list[WallSegment]:
        return self.registry.all()

    def check(self, segment: WallSegment) -> bool:
        return self.session.detector.can_place(segment, self.registry.all())

    def conflicts(self, segment: WallSegment) -> list[WallSegment]:
        return self.session.detector.find_conflicts(segment, self.registry.all())

    def resize(self, width: float, height: float) -> None:
        if not isinstance(self.resolver, GroundPicker):
            logger.debug("Resolver has no viewport, ignoring resize")
            return
        with self._lock:
            self.resolver.resize(width, height)

    def reset(self) -> list[Signal]:
        """Leave draw mode and drop every committed wall."""
        signals = self.dispatch(ToggleDrawMode(enabled=False))
        with self._lock:
            self.registry.clear()
        return signals
