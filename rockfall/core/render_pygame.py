"""
Pygame Renderer
===============

Draws a frame onto a pygame surface: background (red while flashing), the
hole and rock shifted up by the camera offset, then the depth and frame-rate
overlay in screen space. Supports both the window and off-screen RGB output.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

import numpy as np

from rockfall.core.config_loader import GameConfig, get_config


class PygameRenderer:
    """
    Renderer backed by pygame drawing primitives.

    Supports:
    - Drawing onto any surface (window or off-screen)
    - RGB array output for headless captures
    """

    def __init__(self, config: Optional[GameConfig] = None, font_size: int = 22):
        """
        Initialize renderer.

        Args:
            config: Game configuration.
            font_size: Overlay font size in pixels.
        """
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame is required for PygameRenderer")

        if config is None:
            config = get_config()

        self._config = config

        if not pygame.get_init():
            pygame.init()

        pygame.font.init()
        self._font = pygame.font.Font(None, font_size)

        self._bg_color = (200, 200, 200)
        self._flash_color = (255, 0, 0)
        self._hole_color = (0, 0, 0)
        self._marker_color = (30, 30, 30)
        self._rock_color = (100, 100, 100)
        self._text_color = (0, 0, 0)

        # Overlay baselines, in screen space
        self._overlay_x = 10
        self._overlay_baselines = (20, 40)

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return self._config.canvas.width, self._config.canvas.height

    def render(self, surface: "pygame.Surface", render_data: Dict[str, Any]) -> None:
        """
        Draw one frame.

        Args:
            surface: Target surface.
            render_data: Data from Simulation.get_render_data().
        """
        surface.fill(self._flash_color if render_data["flashing"] else self._bg_color)

        camera_offset = render_data["camera_offset"]
        self._draw_hole(surface, render_data["hole"], render_data["marker_ys"], camera_offset)
        self._draw_rock(surface, render_data["rock"], camera_offset)

        self._draw_overlay(surface, render_data["overlay"])

    def render_rgb(self, render_data: Dict[str, Any]) -> np.ndarray:
        """
        Render to RGB array.

        Returns:
            (height, width, 3) uint8 array.
        """
        surface = pygame.Surface(self.canvas_size)
        self.render(surface, render_data)
        array = pygame.surfarray.array3d(surface)
        return np.transpose(array, (1, 0, 2))

    def _draw_hole(
        self,
        surface: "pygame.Surface",
        hole: Dict[str, float],
        marker_ys,
        camera_offset: float
    ) -> None:
        top = hole["y"] - camera_offset
        # Clipped to the surface
        visible_top = max(top, -1.0)
        visible_bottom = min(top + hole["depth"], surface.get_height() + 1.0)
        if visible_bottom > visible_top:
            rect = pygame.Rect(
                int(hole["x"]),
                int(visible_top),
                int(hole["width"]),
                int(math.ceil(visible_bottom - visible_top))
            )
            pygame.draw.rect(surface, self._hole_color, rect)

        x_start = int(hole["x"])
        x_end = int(hole["x"] + hole["width"])
        for marker_y in marker_ys:
            y = int(marker_y - camera_offset)
            pygame.draw.line(surface, self._marker_color, (x_start, y), (x_end, y))

    def _draw_rock(
        self,
        surface: "pygame.Surface",
        rock: Dict[str, float],
        camera_offset: float
    ) -> None:
        width = max(1, int(round(rock["width"])))
        height = max(1, int(round(rock["height"])))

        body = pygame.Surface((width, height), pygame.SRCALPHA)
        body.fill(self._rock_color)

        # Screen y points down, so a positive angle turns clockwise
        rotated = pygame.transform.rotate(body, -math.degrees(rock["rotation"]))

        center = (int(rock["x"]), int(rock["y"] - camera_offset))
        surface.blit(rotated, rotated.get_rect(center=center))

    def _draw_overlay(self, surface: "pygame.Surface", lines) -> None:
        ascent = self._font.get_ascent()
        for text, baseline in zip(lines, self._overlay_baselines):
            rendered = self._font.render(text, True, self._text_color)
            surface.blit(rendered, (self._overlay_x, baseline - ascent))

    def close(self) -> None:
        """Release the font."""
        self._font = None
