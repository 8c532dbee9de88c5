"""
Rock
====

The falling body: force accumulation, the fixed per-frame integration
sequence, and wall collision against the hole.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Optional, Tuple, Union

from pymunk import Vec2d

from rockfall.core.config_loader import GameConfig, PhysicsConfig, RockConfig
from rockfall.core.hole import Hole
from rockfall.core.rng import RandomSource

logger = logging.getLogger(__name__)

VectorLike = Union[Vec2d, Tuple[float, float]]


class NonFiniteStateError(ArithmeticError):
    """Raised when a force or the integrated state is NaN or infinite."""


class WallContact(enum.Enum):
    """Which hole wall a collision check resolved against."""
    LEFT = "left"
    RIGHT = "right"


def _clamp(value: float, low: float, high: float) -> float:
    return max(min(value, high), low)


def _is_finite(v: Vec2d) -> bool:
    return math.isfinite(v.x) and math.isfinite(v.y)


class Rock:
    """
    A square rock with point-mass physics.

    Position, velocity and acceleration are `pymunk.Vec2d` values (immutable,
    so every change rebinds the attribute). Units are canvas units per frame.
    """

    def __init__(
        self,
        x: float,
        y: float,
        radius: float,
        physics: PhysicsConfig,
        mass: float = 1.0,
        velocity: VectorLike = (0.0, 0.0),
        angular_velocity: float = 0.0
    ):
        """
        Initialize rock.

        Args:
            x: Initial x position.
            y: Initial y position.
            radius: Half the side of the square; used for wall and floor clearance.
            physics: Physics constants.
            mass: Body mass.
            velocity: Initial velocity.
            angular_velocity: Rotation added every frame (radians).
        """
        self.position = Vec2d(x, y)
        self.velocity = Vec2d(*velocity)
        self.acceleration = Vec2d(0.0, 0.0)
        self.radius = float(radius)
        self.mass = float(mass)
        self.rotation = 0.0
        self.angular_velocity = float(angular_velocity)
        self._physics = physics

    @classmethod
    def spawn(cls, config: GameConfig, rng: RandomSource) -> "Rock":
        """
        Create the rock at the top of the canvas with a small random
        horizontal offset, horizontal drift and spin.
        """
        rock_cfg: RockConfig = config.rock
        x = config.canvas.width / 2 + rng.uniform(-rock_cfg.spawn_x_jitter, rock_cfg.spawn_x_jitter)
        vx = rng.uniform(-rock_cfg.initial_speed_x, rock_cfg.initial_speed_x)
        angular_velocity = rng.uniform(-rock_cfg.angular_speed, rock_cfg.angular_speed)
        return cls(
            x=x,
            y=rock_cfg.spawn_y,
            radius=rock_cfg.radius,
            physics=config.physics,
            mass=rock_cfg.mass,
            velocity=(vx, 0.0),
            angular_velocity=angular_velocity
        )

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def apply_force(self, force: VectorLike) -> None:
        """
        Accumulate `force / mass` into the acceleration for this frame.

        Raises:
            NonFiniteStateError: If the force has a NaN or infinite component.
        """
        force = Vec2d(*force)
        if not _is_finite(force):
            raise NonFiniteStateError(f"Non-finite force applied to rock: {force}")
        self.acceleration = self.acceleration + Vec2d(force.x / self.mass, force.y / self.mass)

    def update(self, hole: Hole) -> None:
        """
        Integrate one frame.

        The order is fixed: add acceleration, apply quadratic drag, cap the
        speed, move, clamp to the hole floor, clear acceleration, spin.
        `air_resistance` from the config is intentionally not used here.

        Raises:
            NonFiniteStateError: If integration produced a NaN or infinite value.
        """
        physics = self._physics

        self.velocity = self.velocity + self.acceleration

        drag = self.velocity * (-physics.drag_coefficient * self.velocity.dot(self.velocity))
        self.velocity = self.velocity + drag

        self.velocity = Vec2d(
            _clamp(self.velocity.x, -physics.max_horizontal_speed, physics.max_horizontal_speed),
            _clamp(self.velocity.y, -physics.terminal_velocity, physics.terminal_velocity)
        )

        self.position = self.position + self.velocity
        self.position = Vec2d(
            self.position.x,
            _clamp(self.position.y, 0.0, hole.floor_for(self.radius))
        )

        self.acceleration = Vec2d(0.0, 0.0)
        self.rotation += self.angular_velocity

        if not (_is_finite(self.position) and _is_finite(self.velocity)):
            raise NonFiniteStateError(
                f"Rock state became non-finite: position={self.position}, velocity={self.velocity}"
            )

    def check_collision(self, hole: Hole, rng: RandomSource) -> Optional[WallContact]:
        """
        Resolve contact with the hole walls.

        On a hit the rock is put back on the wall boundary and its horizontal
        velocity is reflected and damped. A bounce too slow to leave the wall
        is replaced by a random push away from it.

        Args:
            hole: Walls to test against.
            rng: Physics random stream (used for the anti-stick push).

        Returns:
            The wall that was hit, or None.
        """
        physics = self._physics
        reach = self.radius + physics.collision_buffer

        if self.position.x - reach < hole.left:
            self.position = Vec2d(hole.left + reach, self.position.y)
            contact = WallContact.LEFT
        elif self.position.x + reach > hole.right:
            self.position = Vec2d(hole.right - reach, self.position.y)
            contact = WallContact.RIGHT
        else:
            return None

        vx = self.velocity.x * -physics.elasticity
        vx *= physics.friction

        if abs(vx) < physics.min_bounce_speed:
            if contact is WallContact.LEFT:
                vx = rng.uniform(physics.nudge_speed_min, physics.nudge_speed_max)
            else:
                vx = rng.uniform(-physics.nudge_speed_max, -physics.nudge_speed_min)

        self.velocity = Vec2d(vx, self.velocity.y)
        logger.debug("Rock hit %s wall at y=%.2f, vx=%.3f", contact.value, self.position.y, vx)
        return contact

    def jittered_size(self, rng: RandomSource, jitter: float) -> Tuple[float, float]:
        """
        Drawn (width, height) of the rock outline for one frame.

        Only for rendering: pass the cosmetic stream so physics stays
        reproducible.
        """
        side = self.radius * 2
        return side + rng.uniform(-jitter, jitter), side + rng.uniform(-jitter, jitter)
