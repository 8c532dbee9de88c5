"""
Solid Renderer
==============

Fast numpy-based renderer for headless runs. Draws the background, the hole
with its depth markers and the rotated rock straight into an RGB array.
Text overlays are left to the pygame renderer.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

import numpy as np

from rockfall.core.config_loader import GameConfig, get_config


class SolidRenderer:
    """
    Renders a frame as flat colours at canvas resolution.

    Uses numpy only, so it works without a display or pygame.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize renderer.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config

        self._bg_color = np.array([200, 200, 200], dtype=np.uint8)
        self._flash_color = np.array([255, 0, 0], dtype=np.uint8)
        self._hole_color = np.array([0, 0, 0], dtype=np.uint8)
        self._marker_color = np.array([30, 30, 30], dtype=np.uint8)
        self._rock_color = np.array([100, 100, 100], dtype=np.uint8)

    def render(self, render_data: Dict[str, Any]) -> np.ndarray:
        """
        Render the frame to an RGB array.

        Args:
            render_data: Data from Simulation.get_render_data().

        Returns:
            (canvas_height, canvas_width, 3) uint8 array.
        """
        width = render_data["canvas_width"]
        height = render_data["canvas_height"]
        camera_offset = render_data["camera_offset"]

        img = np.empty((height, width, 3), dtype=np.uint8)
        img[:] = self._flash_color if render_data["flashing"] else self._bg_color

        self._draw_hole(img, render_data["hole"], render_data["marker_ys"], camera_offset)
        self._draw_rock(img, render_data["rock"], camera_offset)

        return img

    def _draw_hole(
        self,
        img: np.ndarray,
        hole: Dict[str, float],
        marker_ys,
        camera_offset: float
    ) -> None:
        """Black shaft plus one-pixel marker lines."""
        height, width = img.shape[:2]

        x_min = max(0, int(hole["x"]))
        x_max = min(width, int(hole["x"] + hole["width"]))
        y_min = max(0, int(hole["y"] - camera_offset))
        y_max = min(height, int(hole["y"] + hole["depth"] - camera_offset))

        if x_min >= x_max or y_min >= y_max:
            return

        img[y_min:y_max, x_min:x_max] = self._hole_color

        for marker_y in marker_ys:
            row = int(marker_y - camera_offset)
            if 0 <= row < height:
                img[row, x_min:x_max] = self._marker_color

    def _draw_rock(
        self,
        img: np.ndarray,
        rock: Dict[str, float],
        camera_offset: float
    ) -> None:
        """Filled rectangle rotated about the rock centre."""
        height, width = img.shape[:2]

        cx = rock["x"]
        cy = rock["y"] - camera_offset
        half_w = rock["width"] / 2
        half_h = rock["height"] / 2
        reach = math.hypot(half_w, half_h)

        # Bounding box of any rotation
        y_min = max(0, int(math.floor(cy - reach)))
        y_max = min(height, int(math.ceil(cy + reach)) + 1)
        x_min = max(0, int(math.floor(cx - reach)))
        x_max = min(width, int(math.ceil(cx + reach)) + 1)

        if y_min >= y_max or x_min >= x_max:
            return

        # Pixel centres relative to the rock centre
        y_coords = np.arange(y_min, y_max) + 0.5 - cy
        x_coords = np.arange(x_min, x_max) + 0.5 - cx
        yy, xx = np.meshgrid(y_coords, x_coords, indexing='ij')

        # Rotate into the rock's frame
        cos_a = math.cos(rock["rotation"])
        sin_a = math.sin(rock["rotation"])
        local_x = xx * cos_a + yy * sin_a
        local_y = -xx * sin_a + yy * cos_a

        mask = (np.abs(local_x) <= half_w) & (np.abs(local_y) <= half_h)
        img[y_min:y_max, x_min:x_max][mask] = self._rock_color
