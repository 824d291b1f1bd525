import math

import pytest
from pydantic import ValidationError

from walldraw.models import (
    Armed, CursorChange, Idle, KeyDown, Pending, PlacementRejected, Point2D,
    PointerDown, PointerMove, PreviewUpdate, ToggleDrawMode, WallCommitted,
    WallSegment,
)


class FixedResolver:
    """Resolves every pointer position to the same ground point."""

    def __init__(self, point: Point2D) -> None:
        self.point = point

    def resolve(self, x: float, y: float) -> Point2D:
        return self.point


def click(session, x, y, button=0):
    return session.handle(PointerDown(x=x, y=y, button=button))


def move(session, x, y):
    return session.handle(PointerMove(x=x, y=y))


@pytest.fixture
def armed(session):
    session.handle(ToggleDrawMode(enabled=True))
    return session


@pytest.fixture
def pending(armed):
    click(armed, 1.0, 1.0)
    return armed


# ==========================================
# Draw mode
# ==========================================

def test_session_starts_idle(session):
    assert session.state == Idle()
    assert session.start_point is None
    assert session.preview is None


def test_toggle_enters_and_leaves_draw_mode(session):
    assert session.handle(ToggleDrawMode()) == [CursorChange(cursor="crosshair")]
    assert session.state == Armed()

    assert session.handle(ToggleDrawMode()) == [CursorChange(cursor="default")]
    assert session.state == Idle()


def test_explicit_enable_twice_is_noop(armed):
    assert armed.handle(ToggleDrawMode(enabled=True)) == []
    assert armed.state == Armed()


def test_explicit_disable_while_idle_is_noop(session):
    assert session.handle(ToggleDrawMode(enabled=False)) == []


def test_toggle_key(session):
    session.handle(KeyDown(key="d"))
    assert session.drawing
    session.handle(KeyDown(key="D"))
    assert not session.drawing


def test_other_keys_ignored(armed):
    assert armed.handle(KeyDown(key="x")) == []
    assert armed.state == Armed()


def test_disable_from_pending_clears_preview_and_start(pending):
    move(pending, 3.0, 1.0)

    signals = pending.handle(ToggleDrawMode(enabled=False))

    assert signals == [PreviewUpdate(segment=None), CursorChange(cursor="default")]
    assert pending.state == Idle()
    assert pending.start_point is None
    assert pending.preview is None


def test_pointer_ignored_while_idle(session, registry):
    assert click(session, 1.0, 1.0) == []
    assert move(session, 2.0, 1.0) == []
    assert session.state == Idle()
    assert len(registry) == 0


# ==========================================
# Start point
# ==========================================

def test_first_click_sets_snapped_start(armed):
    assert click(armed, 1.003, 0.997) == []
    assert armed.state == Pending(start=Point2D(x=1.0, z=1.0))


def test_missed_pick_stays_armed(armed, resolver):
    resolver.misses.add((1.0, 1.0))
    assert click(armed, 1.0, 1.0) == []
    assert armed.state == Armed()


def test_move_while_armed_is_noop(armed):
    assert move(armed, 3.0, 3.0) == []
    assert armed.preview is None


def test_middle_button_ignored(armed):
    assert click(armed, 1.0, 1.0, button=1) == []
    assert armed.state == Armed()


# ==========================================
# Preview
# ==========================================

def test_move_publishes_snapped_preview(pending, registry):
    signals = move(pending, 3.0, 1.2)

    assert len(signals) == 1
    preview = signals[0].segment
    assert preview == pending.preview
    assert preview.start == Point2D(x=1.0, z=1.0)
    assert preview.end.z == pytest.approx(1.0)
    assert preview.length == pytest.approx(math.hypot(2.0, 0.2))
    assert preview.thickness == 0.3
    assert preview.height == 2.75
    assert len(registry) == 0


def test_preview_is_not_checked_for_overlap(pending, registry):
    registry.add(WallSegment(
        start=Point2D(x=2.0, z=-3.0), end=Point2D(x=2.0, z=3.0),
        thickness=0.3, height=2.75,
    ))
    signals = move(pending, 4.0, 1.0)
    assert isinstance(signals[0], PreviewUpdate)
    assert signals[0].segment is not None


def test_short_move_keeps_previous_preview(pending):
    move(pending, 3.0, 1.0)
    before = pending.preview

    assert move(pending, 1.0, 1.0) == []
    assert pending.preview == before


def test_missed_move_changes_nothing(pending, resolver):
    resolver.misses.add((3.0, 3.0))
    assert move(pending, 3.0, 3.0) == []
    assert pending.preview is None


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_ground_point_is_ignored(pending, bad):
    pending.resolver = FixedResolver(Point2D(x=bad, z=2.0))

    assert move(pending, 3.0, 3.0) == []
    assert click(pending, 3.0, 3.0) == []
    assert pending.preview is None
    assert pending.start_point == Point2D(x=1.0, z=1.0)


def test_non_finite_click_while_armed_sets_no_start(armed):
    armed.resolver = FixedResolver(Point2D(x=0.0, z=math.nan))
    assert click(armed, 3.0, 3.0) == []
    assert armed.state == Armed()


@pytest.mark.parametrize("event", [PointerDown, PointerMove])
def test_pointer_events_reject_non_finite_coordinates(event):
    with pytest.raises(ValidationError):
        event(x=math.nan, y=1.0)
    with pytest.raises(ValidationError):
        event(x=1.0, y=math.inf)


# ==========================================
# Commit and chaining
# ==========================================

def test_draw_and_chain_walls(session, registry):
    session.handle(ToggleDrawMode(enabled=True))
    click(session, 1.003, 0.997)
    move(session, 4.1, 1.06)

    signals = click(session, 4.1, 1.06)

    length = math.hypot(4.1 - 1.0, 1.06 - 1.0)
    assert signals[0] == PreviewUpdate(segment=None)
    assert isinstance(signals[1], WallCommitted)
    committed = signals[1].segment
    assert committed.start == Point2D(x=1.0, z=1.0)
    assert committed.end.x == pytest.approx(1.0 + length)
    assert committed.end.z == pytest.approx(1.0)
    assert registry.all() == [committed]

    # Next wall starts where the last one ended
    assert session.state == Pending(start=committed.end)
    assert session.preview is None

    signals = click(session, 4.1, 4.0)

    assert isinstance(signals[0], WallCommitted)
    second = signals[0].segment
    assert second.start == committed.end
    assert second.end.x == pytest.approx(committed.end.x)
    assert second.end.z == pytest.approx(4.0, abs=1e-3)
    assert registry.all() == [committed, second]
    assert session.start_point == second.end


def test_click_on_start_commits_nothing(pending, registry):
    assert click(pending, 1.0, 1.0) == []
    assert click(pending, 1.004, 0.996) == []
    assert len(registry) == 0
    assert pending.start_point == Point2D(x=1.0, z=1.0)


def test_missed_second_click_is_noop(pending, resolver, registry):
    resolver.misses.add((5.0, 1.0))
    assert click(pending, 5.0, 1.0) == []
    assert len(registry) == 0
    assert pending.start_point == Point2D(x=1.0, z=1.0)


def test_overlapping_wall_is_rejected(pending, registry):
    blocker = WallSegment(
        start=Point2D(x=3.0, z=-2.0), end=Point2D(x=3.0, z=2.0),
        thickness=0.3, height=2.75,
    )
    registry.add(blocker)
    move(pending, 5.0, 1.0)

    signals = click(pending, 5.0, 1.0)

    assert signals[0] == PreviewUpdate(segment=None)
    assert isinstance(signals[1], PlacementRejected)
    assert signals[1].conflicts == [blocker]
    assert registry.all() == [blocker]
    assert pending.state == Pending(start=Point2D(x=1.0, z=1.0))
    assert pending.preview is None


def test_rejection_is_logged(pending, registry, caplog):
    registry.add(WallSegment(
        start=Point2D(x=3.0, z=-2.0), end=Point2D(x=3.0, z=2.0),
        thickness=0.3, height=2.75,
    ))
    with caplog.at_level("WARNING", logger="walldraw"):
        click(pending, 5.0, 1.0)
    assert "intersects" in caplog.text


def test_wall_closing_a_loop_is_allowed(armed, registry):
    for x, y in [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0), (0.0, 0.0)]:
        click(armed, x, y)
    assert len(registry) == 4
    assert armed.start_point.x == pytest.approx(0.0, abs=1e-9)
    assert armed.start_point.z == pytest.approx(0.0, abs=1e-9)


# ==========================================
# Cancelling
# ==========================================

def test_right_click_cancels_to_armed(pending):
    move(pending, 3.0, 1.0)

    signals = click(pending, 3.0, 1.0, button=2)

    assert signals == [PreviewUpdate(segment=None)]
    assert pending.state == Armed()
    assert pending.drawing


def test_right_click_while_armed_stays_armed(armed):
    assert click(armed, 3.0, 1.0, button=2) == []
    assert armed.state == Armed()


def test_escape_cancels_pending(pending):
    move(pending, 3.0, 1.0)

    signals = pending.handle(KeyDown(key="Escape"))

    assert signals == [PreviewUpdate(segment=None)]
    assert pending.state == Armed()


def test_escape_while_armed_is_noop(armed):
    assert armed.handle(KeyDown(key="Escape")) == []
    assert armed.state == Armed()
