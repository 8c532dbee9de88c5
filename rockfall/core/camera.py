"""
Camera
======

Vertical viewport tracking for the falling rock.
"""

from __future__ import annotations

from rockfall.core.hole import Hole


class Camera:
    """
    Single scalar offset that keeps the tracked y in the middle of the
    viewport, clamped so the view never leaves [0, bottom of the hole].
    """

    def __init__(self, viewport_height: float):
        self._viewport_height = float(viewport_height)
        self._offset = 0.0

    @property
    def offset(self) -> float:
        """Current vertical offset (world y shown at the top of the viewport)."""
        return self._offset

    @property
    def viewport_height(self) -> float:
        return self._viewport_height

    def max_offset(self, hole: Hole) -> float:
        """Largest offset that still keeps the viewport above the hole bottom."""
        return hole.bottom - self._viewport_height

    def update(self, rock_y: float, hole: Hole) -> float:
        """
        Centre the view on `rock_y`.

        Args:
            rock_y: Tracked vertical position.
            hole: Geometry bounding the view.

        Returns:
            The new offset.
        """
        offset = rock_y - self._viewport_height / 2
        # Upper bound first: a hole shorter than the viewport pins the view at 0
        offset = min(offset, self.max_offset(hole))
        self._offset = max(0.0, offset)
        return self._offset

    def reset(self) -> None:
        self._offset = 0.0
