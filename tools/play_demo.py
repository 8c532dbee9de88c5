"""
Demo Window
===========

Watch the rock fall in a pygame window at the target frame rate.

Controls:
    - ESC or closing the window: Quit

Usage:
    python -m tools.play_demo [--seed SEED]
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from rockfall.core.config_loader import load_config, GameConfig
from rockfall.core.simulation import Simulation


class DemoWindow:
    """Runs the frame driver once per display refresh and draws each frame."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required. Install: pip install pygame")

        if config is None:
            config = load_config()

        self._config = config
        self._simulation = Simulation(config=config, seed=seed)

        pygame.init()
        self._screen = pygame.display.set_mode((config.canvas.width, config.canvas.height))
        pygame.display.set_caption("Rockfall")
        self._clock = pygame.time.Clock()

        # Imported here so a missing display only matters for this tool
        from rockfall.core.render_pygame import PygameRenderer
        self._renderer = PygameRenderer(config)

        self._running = True

    def run(self) -> int:
        """Run until the window is closed. Returns frames shown."""
        print("=== Rockfall ===")
        print("ESC to quit")
        print()

        while self._running:
            self._handle_events()
            if not self._running:
                break

            self._simulation.step()
            render_data = self._simulation.get_render_data(fps=self._clock.get_fps())
            self._renderer.render(self._screen, render_data)
            pygame.display.flip()

            self._clock.tick(self._config.canvas.target_fps)

        frames = self._simulation.frame
        self._renderer.close()
        pygame.quit()
        return frames

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._running = False


def main():
    parser = argparse.ArgumentParser(description="Watch a rock fall down a hole")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    try:
        window = DemoWindow(config=load_config(), seed=args.seed)
        frames = window.run()
        print(f"Frames shown: {frames}")
        return 0
    except ImportError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
