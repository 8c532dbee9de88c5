"""
Tests for the numpy and pygame renderers.
"""

import os

import numpy as np
import pytest
from pymunk import Vec2d

from rockfall.core.config_loader import load_config
from rockfall.core.render_solid import SolidRenderer
from rockfall.core.simulation import Simulation

BACKGROUND = [200, 200, 200]
FLASH = [255, 0, 0]
HOLE = [0, 0, 0]
MARKER = [30, 30, 30]
ROCK = [100, 100, 100]


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def sim(config):
    return Simulation(config=config, seed=3)


class TestSolidRenderer:
    """Test headless rendering."""

    def test_shape_and_dtype(self, config, sim):
        img = SolidRenderer(config).render(sim.get_render_data())

        assert img.shape == (600, 400, 3)
        assert img.dtype == np.uint8

    def test_scene_pixels(self, config, sim):
        """Background, hole body, depth markers and rock in the right places."""
        img = SolidRenderer(config).render(sim.get_render_data())

        assert list(img[10, 10]) == BACKGROUND
        assert list(img[420, 180]) == HOLE
        assert list(img[450, 180]) == MARKER
        assert list(img[int(sim.rock.y), int(sim.rock.x)]) == ROCK
        # Outside the hole horizontally stays background
        assert list(img[420, 100]) == BACKGROUND

    def test_flash_background(self, config, sim):
        sim.trigger_flash()
        sim.step()
        data = sim.get_render_data()

        assert data["flashing"]
        img = SolidRenderer(config).render(data)
        assert list(img[10, 10]) == FLASH

    def test_camera_translation(self, config, sim):
        """Deep in the hole the whole view is shaft, with the rock centred."""
        sim.rock.position = Vec2d(200.0, 5000.0)
        sim.rock.velocity = Vec2d(0.0, 0.0)
        sim.step()
        data = sim.get_render_data()
        img = SolidRenderer(config).render(data)

        assert data["camera_offset"] == 4700
        assert list(img[0, 150]) == BACKGROUND
        row = int(sim.rock.y - data["camera_offset"])
        assert list(img[row, int(sim.rock.x)]) == ROCK

    def test_rotated_rock_covers_centre(self, config, sim):
        sim.rock.rotation = 0.7
        img = SolidRenderer(config).render(sim.get_render_data())

        assert list(img[int(sim.rock.y), int(sim.rock.x)]) == ROCK


class TestPygameRenderer:
    """Test the pygame renderer off-screen."""

    @pytest.fixture
    def renderer(self, config):
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        pytest.importorskip("pygame")
        from rockfall.core.render_pygame import PygameRenderer
        renderer = PygameRenderer(config)
        yield renderer
        renderer.close()

    def test_render_rgb(self, renderer, sim):
        img = renderer.render_rgb(sim.get_render_data(fps=60))

        assert img.shape == (600, 400, 3)
        assert list(img[599, 0]) == BACKGROUND
        assert list(img[420, 180]) == HOLE
        assert list(img[int(sim.rock.y), int(sim.rock.x)]) == ROCK

    def test_render_flash(self, renderer, sim):
        sim.trigger_flash()
        sim.step()
        img = renderer.render_rgb(sim.get_render_data(fps=60))

        assert list(img[599, 0]) == FLASH
