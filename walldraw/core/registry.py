"""Wall registry — the committed walls of a drawing session."""

from __future__ import annotations
import logging
import threading
from typing import Iterator

from walldraw.models import WallSegment

logger = logging.getLogger(__name__)


class WallRegistry:
    """
    Append-only store of committed walls.

    Walls are kept in insertion order, which is also the order used for
    overlap queries and rendering. Individual walls are never removed;
    the whole registry is cleared on an explicit reset.
    """

    def __init__(self) -> None:
        self._walls: list[WallSegment] = []
        self._lock = threading.Lock()

    def add(self, wall: WallSegment) -> None:
        """Append a committed wall."""
        with self._lock:
            self._walls.append(wall)
            count = len(self._walls)
        logger.debug("Registered wall #%d (%.3f m)", count, wall.length)

    def all(self) -> list[WallSegment]:
        """Snapshot of all walls in insertion order."""
        with self._lock:
            return list(self._walls)

    def clear(self) -> None:
        with self._lock:
            removed = len(self._walls)
            self._walls.clear()
        logger.info("Cleared %d walls", removed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._walls)

    def __iter__(self) -> Iterator[WallSegment]:
        return iter(self.all())
