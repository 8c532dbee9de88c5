"""
State Snapshot
==============

Packs the simulation state into fixed-size numpy arrays, for benchmarks,
trajectory comparisons and anything else that wants plain numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from rockfall.core.simulation import SimulationState

# Order of the values in FrameSnapshot.to_array()
SNAPSHOT_FIELDS = (
    "frame",
    "rock_x",
    "rock_y",
    "rock_vx",
    "rock_vy",
    "rock_rotation",
    "camera_offset",
    "depth",
    "flash_active",
    "flash_timer",
)


@dataclass
class FrameSnapshot:
    """Numeric view of one moment of the simulation."""
    frame: int
    rock_position: np.ndarray     # (2,) float64
    rock_velocity: np.ndarray     # (2,) float64
    rock_rotation: float
    camera_offset: float
    depth: float
    flash_active: bool
    flash_timer: int

    def to_array(self) -> np.ndarray:
        """Flatten to a (len(SNAPSHOT_FIELDS),) float64 array."""
        return np.array([
            self.frame,
            self.rock_position[0],
            self.rock_position[1],
            self.rock_velocity[0],
            self.rock_velocity[1],
            self.rock_rotation,
            self.camera_offset,
            self.depth,
            float(self.flash_active),
            self.flash_timer,
        ], dtype=np.float64)

    def to_dict(self) -> Dict[str, np.ndarray]:
        """Named numpy values, one entry per field."""
        return {
            "frame": np.array(self.frame, dtype=np.int64),
            "rock_position": self.rock_position.copy(),
            "rock_velocity": self.rock_velocity.copy(),
            "rock_rotation": np.array(self.rock_rotation, dtype=np.float64),
            "camera_offset": np.array(self.camera_offset, dtype=np.float64),
            "depth": np.array(self.depth, dtype=np.float64),
            "flash_active": np.array(self.flash_active, dtype=np.bool_),
            "flash_timer": np.array(self.flash_timer, dtype=np.int32),
        }


def build_snapshot(state: "SimulationState") -> FrameSnapshot:
    """Build a snapshot of the given state."""
    rock = state.rock
    return FrameSnapshot(
        frame=state.frame,
        rock_position=np.array([rock.x, rock.y], dtype=np.float64),
        rock_velocity=np.array([rock.velocity.x, rock.velocity.y], dtype=np.float64),
        rock_rotation=float(rock.rotation),
        camera_offset=float(state.camera.offset),
        depth=float(state.depth),
        flash_active=state.flash.active,
        flash_timer=state.flash.timer,
    )


def stack_snapshots(snapshots) -> np.ndarray:
    """Stack snapshots into a (N, len(SNAPSHOT_FIELDS)) trajectory array."""
    if not snapshots:
        return np.zeros((0, len(SNAPSHOT_FIELDS)), dtype=np.float64)
    return np.stack([s.to_array() for s in snapshots])
