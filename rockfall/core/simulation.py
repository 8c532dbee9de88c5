"""
Simulation
==========

Frame driver: owns the explicit simulation state and runs the fixed
per-frame sequence (flash tick, camera, gravity, integrate, collide).
Rendering is left to the renderers, which consume `get_render_data()`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from rockfall.core.camera import Camera
from rockfall.core.config_loader import GameConfig, get_config
from rockfall.core.flash import FlashState
from rockfall.core.hole import Hole
from rockfall.core.rng import RandomSource, make_streams
from rockfall.core.rock import Rock, WallContact
from rockfall.core.state_snapshot import FrameSnapshot, build_snapshot

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """Everything one running demo mutates. Owned by a single Simulation."""
    rock: Rock
    hole: Hole
    camera: Camera
    flash: FlashState
    physics_rng: RandomSource
    cosmetic_rng: RandomSource
    frame: int = 0

    @property
    def depth(self) -> float:
        """How far the rock is below the hole top (negative above it)."""
        return self.rock.y - self.hole.y


@dataclass(frozen=True)
class FrameResult:
    """Outcome of one frame."""
    frame: int
    flashing: bool                  # Background drawn red this frame
    camera_offset: float
    contact: Optional[WallContact]
    rock_position: Tuple[float, float]
    rock_velocity: Tuple[float, float]


class Simulation:
    """
    One rock falling down one hole.

    Independent instances share nothing, so several can run side by side
    (tests do this to compare seeded runs).
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize simulation.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Random if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed
        self._state = self._build_state(seed)
        self._last_result: Optional[FrameResult] = None

    def _build_state(self, seed: Optional[int]) -> SimulationState:
        physics_rng, cosmetic_rng = make_streams(seed)
        hole = Hole.from_config(self._config)
        rock = Rock.spawn(self._config, physics_rng)
        logger.debug(
            "New simulation (seed=%s): rock at (%.3f, %.3f), hole x=%.1f..%.1f",
            seed, rock.x, rock.y, hole.left, hole.right
        )
        return SimulationState(
            rock=rock,
            hole=hole,
            camera=Camera(self._config.canvas.height),
            flash=FlashState(self._config.flash.duration),
            physics_rng=physics_rng,
            cosmetic_rng=cosmetic_rng
        )

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def rock(self) -> Rock:
        return self._state.rock

    @property
    def hole(self) -> Hole:
        return self._state.hole

    @property
    def camera(self) -> Camera:
        return self._state.camera

    @property
    def flash(self) -> FlashState:
        return self._state.flash

    @property
    def frame(self) -> int:
        """Number of frames stepped since the last reset."""
        return self._state.frame

    @property
    def last_result(self) -> Optional[FrameResult]:
        return self._last_result

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Start over with a fresh rock.

        Args:
            seed: New random seed. Uses previous if None.
        """
        if seed is not None:
            self._seed = seed
        self._state = self._build_state(self._seed)
        self._last_result = None

    def trigger_flash(self) -> bool:
        """Start the wall-hit flash; no-op while one is running."""
        return self._state.flash.trigger()

    def step(self) -> FrameResult:
        """
        Advance one frame.

        Order: flash tick, camera follow, gravity, integrate, wall collision.
        The camera uses the rock position from before this frame's physics.
        """
        state = self._state
        rock = state.rock
        physics = self._config.physics

        flashing = state.flash.tick()

        camera_offset = state.camera.update(rock.y, state.hole)

        rock.apply_force((0.0, physics.gravity * rock.mass))
        rock.update(state.hole)

        contact = rock.check_collision(state.hole, state.physics_rng)
        if contact is not None and self.trigger_flash():
            logger.debug("Flash started on frame %d (%s wall)", state.frame, contact.value)

        result = FrameResult(
            frame=state.frame,
            flashing=flashing,
            camera_offset=camera_offset,
            contact=contact,
            rock_position=(rock.x, rock.y),
            rock_velocity=(rock.velocity.x, rock.velocity.y)
        )
        state.frame += 1
        self._last_result = result
        return result

    def run(self, frames: int) -> List[FrameResult]:
        """Step `frames` times and return every frame's result."""
        return [self.step() for _ in range(frames)]

    def depth_label(self) -> str:
        return f"Depth: {math.floor(self._state.depth)}m"

    @staticmethod
    def framerate_label(fps: float) -> str:
        return f"Framerate: {math.floor(fps)}"

    def get_render_data(self, fps: float = 0.0) -> Dict[str, Any]:
        """
        Get data needed for rendering the current frame.

        Draws this frame's outline jitter from the cosmetic stream, so call
        it once per rendered frame.

        Args:
            fps: Achieved frame rate to show in the overlay.

        Returns:
            Dict with canvas, camera, hole, rock and overlay info.
        """
        state = self._state
        rock = state.rock
        hole = state.hole
        canvas = self._config.canvas

        if self._last_result is not None:
            flashing = self._last_result.flashing
            camera_offset = self._last_result.camera_offset
        else:
            flashing = state.flash.active
            camera_offset = state.camera.offset

        width, height = rock.jittered_size(state.cosmetic_rng, self._config.rock.size_jitter)

        markers = list(hole.visible_marker_ys(
            self._config.hole.marker_spacing,
            camera_offset,
            camera_offset + canvas.height
        ))

        return {
            "canvas_width": canvas.width,
            "canvas_height": canvas.height,
            "flashing": flashing,
            "camera_offset": camera_offset,
            "hole": {
                "x": hole.x,
                "y": hole.y,
                "width": hole.width,
                "depth": hole.depth,
            },
            "marker_ys": markers,
            "rock": {
                "x": rock.x,
                "y": rock.y,
                "rotation": rock.rotation,
                "width": width,
                "height": height,
            },
            "overlay": [
                self.depth_label(),
                self.framerate_label(fps),
            ],
            "frame": state.frame,
        }

    def snapshot(self) -> FrameSnapshot:
        """Fixed-layout numeric snapshot of the current state."""
        return build_snapshot(self._state)
