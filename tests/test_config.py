"""
Tests for the constant table loader.
"""

import dataclasses
import os

import pytest
import yaml

import rockfall
from rockfall.core import config_loader
from rockfall.core.config_loader import load_config, get_config, reload_config

DEFAULT_PATH = os.path.join(os.path.dirname(rockfall.__file__), "game_config.yaml")


@pytest.fixture
def raw():
    with open(DEFAULT_PATH, "r") as f:
        return yaml.safe_load(f)


def write_config(tmp_path, raw):
    path = tmp_path / "game_config.yaml"
    path.write_text(yaml.safe_dump(raw))
    return str(path)


class TestLoadConfig:
    """Test loading the packaged table."""

    def test_default_values(self):
        config = load_config()

        assert config.canvas.width == 400
        assert config.canvas.height == 600
        assert config.canvas.target_fps == 60
        assert config.physics.gravity == 9.8
        assert config.physics.air_resistance == 0.999
        assert config.physics.drag_coefficient == 0.02
        assert config.physics.terminal_velocity == 20
        assert config.physics.elasticity == 0.7
        assert config.physics.friction == 0.9
        assert config.physics.collision_buffer == 2
        assert config.rock.radius == 10
        assert config.rock.mass == 1
        assert config.flash.duration == 10

    def test_derived_hole_geometry(self):
        config = load_config()

        assert config.hole_width == 50
        assert config.hole_x == 175

    def test_frozen(self):
        config = load_config()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.physics.gravity = 1.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_explicit_path(self, tmp_path, raw):
        raw["physics"]["gravity"] = 1.5
        config = load_config(write_config(tmp_path, raw))

        assert config.physics.gravity == 1.5

    def test_optional_defaults(self, tmp_path, raw):
        """Optional keys fall back to the documented defaults."""
        del raw["physics"]["max_horizontal_speed"]
        del raw["physics"]["air_resistance"]
        del raw["flash"]
        config = load_config(write_config(tmp_path, raw))

        assert config.physics.max_horizontal_speed == config.physics.terminal_velocity
        assert config.physics.air_resistance == 0.999
        assert config.flash.duration == 10

    def test_cached_config(self, tmp_path, raw):
        raw["canvas"]["target_fps"] = 30
        try:
            reloaded = reload_config(write_config(tmp_path, raw))
            assert get_config() is reloaded
            assert get_config().canvas.target_fps == 30
        finally:
            config_loader._cached_config = None


class TestValidation:
    """Test rejection of inconsistent tables."""

    @pytest.mark.parametrize("section,key,value", [
        ("hole", "width_in_radii", 2.0),
        ("rock", "radius", 0.0),
        ("rock", "mass", -1.0),
        ("physics", "terminal_velocity", 0.0),
        ("physics", "nudge_speed_min", 5.0),
        ("hole", "depth", 0.0),
        ("hole", "marker_spacing", 0.0),
        ("flash", "duration", 0),
        ("canvas", "target_fps", 0),
    ])
    def test_invalid_values(self, tmp_path, raw, section, key, value):
        raw[section][key] = value

        with pytest.raises(ValueError):
            load_config(write_config(tmp_path, raw))
