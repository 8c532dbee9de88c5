"""
Rockfall
========

A rock falling down a deep hole under simplified per-frame physics, with a
camera that follows it and a red flash whenever it hits a wall.

The core package (`rockfall.core`) holds the physics, the frame driver and the
renderers. All tunable constants are in game_config.yaml.
"""

__version__ = "0.1.0"
