"""
Flash
=====

Timed red-background effect shown after a wall hit.

Two states: OFF and FLASHING. A wall hit while OFF starts a flash with the
timer at zero; a hit while FLASHING changes nothing. The frame driver ticks
the timer once per frame and the flash ends after exactly `duration` ticks.
"""

from __future__ import annotations


class FlashState:
    """Transient UI state; has no effect on physics."""

    def __init__(self, duration: int):
        if duration < 1:
            raise ValueError(f"flash duration must be at least 1 frame, got {duration}")
        self._duration = int(duration)
        self._active = False
        self._timer = 0

    @property
    def active(self) -> bool:
        return self._active

    @property
    def timer(self) -> int:
        """Frames elapsed since the current flash started (0 when OFF)."""
        return self._timer

    @property
    def duration(self) -> int:
        return self._duration

    def trigger(self) -> bool:
        """
        Start a flash unless one is already running.

        Returns:
            True if a new flash started.
        """
        if self._active:
            return False
        self._active = True
        self._timer = 0
        return True

    def tick(self) -> bool:
        """
        Advance one frame.

        Returns:
            Whether this frame is drawn flashing (the state before the tick).
        """
        if not self._active:
            return False
        self._timer += 1
        if self._timer >= self._duration:
            self._active = False
            self._timer = 0
        return True

    def reset(self) -> None:
        self._active = False
        self._timer = 0
