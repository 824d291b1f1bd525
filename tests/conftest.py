import pytest

from walldraw.core.registry import WallRegistry
from walldraw.core.session import DrawSession
from walldraw.models import DrawParams, Point2D


class PlaneResolver:
    """Maps client (x, y) straight onto ground (x, z). Listed points miss."""

    def __init__(self) -> None:
        self.misses: set[tuple[float, float]] = set()

    def resolve(self, x: float, y: float) -> Point2D | None:
        if (x, y) in self.misses:
            return None
        return Point2D(x=x, z=y)


@pytest.fixture
def resolver() -> PlaneResolver:
    return PlaneResolver()


@pytest.fixture
def registry() -> WallRegistry:
    return WallRegistry()


@pytest.fixture
def session(registry: WallRegistry, resolver: PlaneResolver) -> DrawSession:
    return DrawSession(registry, resolver, DrawParams())
