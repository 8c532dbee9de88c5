"""
Hole
====

Static hole geometry shared read-only by the rock and the camera.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from rockfall.core.config_loader import GameConfig


@dataclass(frozen=True)
class Hole:
    """
    A vertical shaft: left edge `x`, top edge `y`, `width` across and
    `depth` down. Never changes after construction.
    """
    x: float
    y: float
    width: float
    depth: float

    @classmethod
    def from_config(cls, config: GameConfig) -> "Hole":
        """Hole centred on the canvas, as wide as the configured rock multiple."""
        return cls(
            x=config.hole_x,
            y=config.hole.top,
            width=config.hole_width,
            depth=config.hole.depth
        )

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.depth

    def floor_for(self, radius: float) -> float:
        """Lowest y a body of the given radius may reach."""
        return self.bottom - radius

    def marker_ys(self, spacing: float) -> Iterator[float]:
        """
        Y coordinates of the depth-marker lines: top, top + spacing, ...
        up to (not including) the bottom.
        """
        if spacing <= 0:
            raise ValueError(f"marker spacing must be positive, got {spacing}")
        # From the index, not accumulated
        count = 0
        y = self.y
        while y < self.bottom:
            yield y
            count += 1
            y = self.y + count * spacing

    def visible_marker_ys(self, spacing: float, view_top: float, view_bottom: float) -> Iterator[float]:
        """Marker lines that fall inside [view_top, view_bottom]."""
        for y in self.marker_ys(spacing):
            if y > view_bottom:
                return
            if y >= view_top:
                yield y
