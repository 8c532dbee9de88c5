"""
Rockfall Core - physics, frame driver and renderers.

Main exports:
- Simulation: Frame driver owning one rock, one hole, the camera and the flash
- Rock, Hole, Camera, FlashState: The simulation components
- GameConfig: Constants loaded from game_config.yaml
- SolidRenderer: numpy renderer for headless runs

The pygame renderer lives in rockfall.core.render_pygame and is imported on
demand so the core works without a display.
"""

from rockfall.core.config_loader import GameConfig, load_config, get_config
from rockfall.core.rng import RandomSource, make_streams
from rockfall.core.hole import Hole
from rockfall.core.camera import Camera
from rockfall.core.rock import Rock, WallContact, NonFiniteStateError
from rockfall.core.flash import FlashState
from rockfall.core.simulation import Simulation, SimulationState, FrameResult
from rockfall.core.state_snapshot import FrameSnapshot
from rockfall.core.render_solid import SolidRenderer

__all__ = [
    "GameConfig",
    "load_config",
    "get_config",
    "RandomSource",
    "make_streams",
    "Hole",
    "Camera",
    "Rock",
    "WallContact",
    "NonFiniteStateError",
    "FlashState",
    "Simulation",
    "SimulationState",
    "FrameResult",
    "FrameSnapshot",
    "SolidRenderer",
]
