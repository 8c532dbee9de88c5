"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all constants.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanvasConfig:
    """Drawing surface size and frame rate."""
    width: int
    height: int         # Also the camera viewport height
    target_fps: int


@dataclass(frozen=True)
class PhysicsConfig:
    """Per-frame physics constants."""
    gravity: float
    air_resistance: float        # Declared but never applied by Rock.update
    drag_coefficient: float
    terminal_velocity: float
    max_horizontal_speed: float
    elasticity: float
    friction: float
    collision_buffer: float
    min_bounce_speed: float
    nudge_speed_min: float
    nudge_speed_max: float


@dataclass(frozen=True)
class RockConfig:
    """Rock body and spawn parameters."""
    radius: float
    mass: float
    spawn_y: float
    spawn_x_jitter: float
    initial_speed_x: float
    angular_speed: float
    size_jitter: float


@dataclass(frozen=True)
class HoleConfig:
    """Hole geometry."""
    width_in_radii: float
    top: float
    depth: float
    marker_spacing: float


@dataclass(frozen=True)
class FlashConfig:
    """Wall-hit flash timing."""
    duration: int


@dataclass(frozen=True)
class GameConfig:
    """
    Complete constant table loaded from YAML.

    All values are immutable; nothing changes them after start-up.
    """
    canvas: CanvasConfig
    physics: PhysicsConfig
    rock: RockConfig
    hole: HoleConfig
    flash: FlashConfig

    @property
    def hole_width(self) -> float:
        """Hole width derived from the rock radius."""
        return self.rock.radius * self.hole.width_in_radii

    @property
    def hole_x(self) -> float:
        """Left edge of the hole, centred on the canvas."""
        return self.canvas.width / 2 - self.hole_width / 2


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if config.canvas.width <= 0 or config.canvas.height <= 0:
        raise ValueError(
            f"canvas size must be positive, got {config.canvas.width}x{config.canvas.height}"
        )

    if config.canvas.target_fps <= 0:
        raise ValueError(f"canvas.target_fps must be positive, got {config.canvas.target_fps}")

    if config.rock.radius <= 0:
        raise ValueError(f"rock.radius must be positive, got {config.rock.radius}")

    if config.rock.mass <= 0:
        raise ValueError(f"rock.mass must be positive, got {config.rock.mass}")

    if config.physics.terminal_velocity <= 0:
        raise ValueError(
            f"physics.terminal_velocity must be positive, got {config.physics.terminal_velocity}"
        )

    if config.physics.max_horizontal_speed <= 0:
        raise ValueError(
            f"physics.max_horizontal_speed must be positive, "
            f"got {config.physics.max_horizontal_speed}"
        )

    if config.physics.nudge_speed_min > config.physics.nudge_speed_max:
        raise ValueError(
            f"physics.nudge_speed_min ({config.physics.nudge_speed_min}) exceeds "
            f"nudge_speed_max ({config.physics.nudge_speed_max})"
        )

    # The rock has to fit between the walls with the buffer on both sides
    clearance = 2 * (config.rock.radius + config.physics.collision_buffer)
    if config.hole_width <= clearance:
        raise ValueError(
            f"hole width ({config.hole_width}) must exceed rock clearance ({clearance})"
        )

    if config.hole.depth <= 0:
        raise ValueError(f"hole.depth must be positive, got {config.hole.depth}")

    if config.hole.marker_spacing <= 0:
        raise ValueError(f"hole.marker_spacing must be positive, got {config.hole.marker_spacing}")

    if config.flash.duration < 1:
        raise ValueError(f"flash.duration must be at least 1 frame, got {config.flash.duration}")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate the constant table from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses the packaged file.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    canvas_data = raw["canvas"]
    canvas = CanvasConfig(
        width=int(canvas_data["width"]),
        height=int(canvas_data["height"]),
        target_fps=int(canvas_data.get("target_fps", 60))
    )

    physics_data = raw["physics"]
    terminal_velocity = float(physics_data["terminal_velocity"])
    physics = PhysicsConfig(
        gravity=float(physics_data["gravity"]),
        air_resistance=float(physics_data.get("air_resistance", 0.999)),
        drag_coefficient=float(physics_data["drag_coefficient"]),
        terminal_velocity=terminal_velocity,
        max_horizontal_speed=float(
            physics_data.get("max_horizontal_speed", terminal_velocity)
        ),
        elasticity=float(physics_data["elasticity"]),
        friction=float(physics_data["friction"]),
        collision_buffer=float(physics_data["collision_buffer"]),
        min_bounce_speed=float(physics_data.get("min_bounce_speed", 0.1)),
        nudge_speed_min=float(physics_data.get("nudge_speed_min", 1.0)),
        nudge_speed_max=float(physics_data.get("nudge_speed_max", 2.0))
    )

    rock_data = raw["rock"]
    rock = RockConfig(
        radius=float(rock_data["radius"]),
        mass=float(rock_data.get("mass", 1.0)),
        spawn_y=float(rock_data["spawn_y"]),
        spawn_x_jitter=float(rock_data.get("spawn_x_jitter", 0.0)),
        initial_speed_x=float(rock_data.get("initial_speed_x", 0.0)),
        angular_speed=float(rock_data.get("angular_speed", 0.0)),
        size_jitter=float(rock_data.get("size_jitter", 0.0))
    )

    hole_data = raw["hole"]
    hole = HoleConfig(
        width_in_radii=float(hole_data["width_in_radii"]),
        top=float(hole_data["top"]),
        depth=float(hole_data["depth"]),
        marker_spacing=float(hole_data.get("marker_spacing", 50.0))
    )

    flash_data = raw.get("flash", {})
    flash = FlashConfig(
        duration=int(flash_data.get("duration", 10))
    )

    config = GameConfig(
        canvas=canvas,
        physics=physics,
        rock=rock,
        hole=hole,
        flash=flash
    )

    _validate_config(config)
    logger.debug("Loaded constant table from %s", config_path)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
