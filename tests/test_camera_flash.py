"""
Tests for camera tracking and the flash state machine.
"""

import pytest

from rockfall.core.camera import Camera
from rockfall.core.flash import FlashState
from rockfall.core.hole import Hole


@pytest.fixture
def hole():
    return Hole(x=175, y=400, width=50, depth=10000)


@pytest.fixture
def camera():
    return Camera(600)


class TestCamera:
    """Test viewport tracking."""

    def test_initial_offset(self, camera):
        assert camera.offset == 0

    def test_centres_on_rock(self, camera, hole):
        """Offset puts the rock in the middle of the viewport."""
        assert camera.update(1000, hole) == 700
        assert camera.offset == 700

    def test_clamped_at_top(self, camera, hole):
        assert camera.update(50, hole) == 0

    def test_clamped_at_bottom(self, camera, hole):
        """View never goes past the hole bottom."""
        assert camera.update(20000, hole) == 400 + 10000 - 600

    @pytest.mark.parametrize("rock_y", [-1000, 0, 299.9, 300, 5000, 10099, 10400, 1e9])
    def test_always_within_bounds(self, camera, hole, rock_y):
        offset = camera.update(rock_y, hole)
        assert 0 <= offset <= hole.y + hole.depth - camera.viewport_height

    def test_short_hole_pins_view(self, camera):
        """A hole shorter than the viewport keeps the view at zero."""
        short = Hole(x=0, y=100, width=50, depth=200)

        assert camera.update(250, short) == 0
        assert camera.update(5000, short) == 0

    def test_reset(self, camera, hole):
        camera.update(1000, hole)
        camera.reset()
        assert camera.offset == 0


class TestFlashState:
    """Test OFF/FLASHING transitions."""

    def test_starts_off(self):
        flash = FlashState(10)
        assert not flash.active
        assert flash.timer == 0

    def test_trigger_from_off(self):
        """Trigger while OFF starts a flash with the timer at zero."""
        flash = FlashState(10)

        assert flash.trigger()
        assert flash.active
        assert flash.timer == 0

    def test_trigger_while_flashing_is_noop(self):
        """Repeated hits don't restart or extend the flash."""
        flash = FlashState(10)
        flash.trigger()
        flash.tick()
        flash.tick()

        assert not flash.trigger()
        assert flash.active
        assert flash.timer == 2

    def test_ends_after_exact_duration(self):
        """FLASHING -> OFF after exactly `duration` ticks."""
        flash = FlashState(10)
        flash.trigger()

        for _ in range(9):
            assert flash.tick()
            assert flash.active

        assert flash.tick()
        assert not flash.active
        assert flash.timer == 0

    def test_tick_while_off(self):
        flash = FlashState(3)
        assert not flash.tick()
        assert flash.timer == 0

    def test_retrigger_after_end(self):
        flash = FlashState(2)
        flash.trigger()
        flash.tick()
        flash.tick()

        assert flash.trigger()
        assert flash.timer == 0

    def test_invalid_duration(self):
        with pytest.raises(ValueError):
            FlashState(0)
