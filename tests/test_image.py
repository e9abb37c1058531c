"""Tests for image assembly and pooling."""

import logging

import numpy as np
import pytest

from raytracer.core import ConfigurationError
from raytracer.core_types import RenderConfig
from raytracer.core.rendering.image import Renderer, clamp_colors, pool
from raytracer.core.rendering.scene import Light, Material, Scene, Triangle

WALL_COLOR = (10, 200, 90)


def wall(**material):
    """Large counter-clockwise triangle at z=1 covering the whole field of view."""
    return Triangle(
        points=[(-10, -10, 1), (10, -10, 1), (0, 10, 1)],
        material=Material(color=WALL_COLOR, **material),
    )


def gradient(width, height):
    """Grid whose pixel (x, y) holds 10 * x + y in every channel."""
    xs, ys = np.meshgrid(np.arange(width), np.arange(height), indexing="ij")
    return np.repeat((10.0 * xs + ys)[:, :, np.newaxis], 3, axis=2)


class TestPool:
    """Tests for box-filter pooling"""

    def test_averages_two_by_two_block(self):
        pixels = np.zeros((2, 2, 3))
        pixels[0, 0] = (10, 20, 30)
        pixels[1, 0] = (20, 30, 40)
        pixels[0, 1] = (30, 40, 50)
        pixels[1, 1] = (40, 50, 60)

        pooled = pool(pixels, 2)

        assert pooled.shape == (1, 1, 3)
        assert pooled[0, 0].tolist() == [25, 35, 45]

    def test_output_shape(self):
        assert pool(gradient(8, 6), 2).shape == (4, 3, 3)

    def test_each_block_pools_independently(self):
        pooled = pool(gradient(4, 4), 2)
        assert pooled[:, :, 0].tolist() == [[5.5, 7.5], [25.5, 27.5]]

    def test_window_stays_two_by_two_for_larger_steps(self):
        pooled = pool(gradient(6, 6), 3)

        assert pooled.shape == (2, 2, 3)
        # top-left 2x2 of each 3x3 block only; a full 3x3 mean would give 11
        assert pooled[0, 0, 0] == pytest.approx(5.5)
        assert pooled[1, 1, 0] == pytest.approx(38.5)

    def test_larger_step_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="raytracer"):
            pool(gradient(6, 6), 3)
        assert "step_size 3" in caplog.text

    def test_step_two_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="raytracer"):
            pool(gradient(4, 4), 2)
        assert caplog.records == []

    @pytest.mark.parametrize("step_size", [0, 1, 2.0])
    def test_rejects_invalid_step(self, step_size):
        with pytest.raises(ConfigurationError):
            pool(gradient(4, 4), step_size)

    def test_rejects_indivisible_grid(self):
        with pytest.raises(ConfigurationError):
            pool(gradient(5, 4), 2)

    def test_rejects_non_rgb_grid(self):
        with pytest.raises(ConfigurationError):
            pool(np.zeros((4, 4)), 2)


def test_clamp_colors():
    clamped = clamp_colors(np.array([[[-5.0, 128.0, 1000.0]]]))
    assert clamped.tolist() == [[[0.0, 128.0, 255.0]]]


class TestRenderer:
    """Tests for the Renderer"""

    def test_empty_scene_renders_black(self):
        renderer = Renderer(Scene(), RenderConfig(width=4, height=3, seed=1))
        pixels = renderer.render(4, 3)
        assert pixels.shape == (4, 3, 3)
        assert not pixels.any()

    def test_grid_is_indexed_by_x_then_y(self):
        renderer = Renderer(Scene(), RenderConfig(width=5, height=2, seed=1))
        assert renderer.render_image().shape == (5, 2, 3)

    def test_winding_is_corrected_before_tracing(self):
        config = RenderConfig(width=4, height=3, max_depth=0, seed=1)
        pixels = Renderer(Scene(triangles=[wall()]), config).render_image()
        assert np.allclose(pixels, WALL_COLOR)

    def test_uncorrected_counter_clockwise_triangle_is_invisible(self):
        config = RenderConfig(width=4, height=3, max_depth=0, seed=1)
        renderer = Renderer(Scene(triangles=[wall()]), config, correct_winding=False)
        assert not renderer.render_image().any()

    def test_scene_is_not_modified(self):
        triangle = wall()
        scene = Scene(triangles=[triangle])
        Renderer(scene, RenderConfig(width=2, height=2, max_depth=0, seed=1)).render_image()
        assert scene.triangles[0] is triangle
        assert triangle.points[1].tolist() == [10, -10, 1]

    def test_supersampled_render_is_pooled(self):
        config = RenderConfig(width=3, height=2, supersampling=2, max_depth=0, seed=1)
        pixels = Renderer(Scene(triangles=[wall()]), config).render_image()
        assert pixels.shape == (3, 2, 3)
        assert np.allclose(pixels, WALL_COLOR)

    def test_supersampling_above_two_warns(self, caplog):
        config = RenderConfig(width=2, height=2, supersampling=3, max_depth=0, seed=1)
        with caplog.at_level(logging.WARNING, logger="raytracer"):
            pixels = Renderer(Scene(triangles=[wall()]), config).render_image()
        assert pixels.shape == (2, 2, 3)
        assert "step_size 3" in caplog.text

    def test_progress_reaches_completion(self):
        progress = []
        config = RenderConfig(width=4, height=3, tile_size=2, seed=1)
        Renderer(Scene(), config, progress_callback=progress.append).render_image()
        assert progress == [0.25, 0.5, 0.75, 1.0]

    def test_rejects_empty_grid(self):
        with pytest.raises(ConfigurationError):
            Renderer(Scene()).render(0, 3)

    def test_records_render_time(self):
        renderer = Renderer(Scene(), RenderConfig(width=2, height=2, seed=1))
        renderer.render_image()
        assert renderer.last_render_time >= 0.0


@pytest.mark.slow
class TestSeededRenders:
    """Tests for reproducibility of stochastic renders"""

    def scene(self):
        return Scene(
            triangles=[wall(transparency=0.5, roughness=0.5)],
            lights=[Light(origin=(0, 0, 0), strength=2)],
        )

    def render(self, seed, num_threads):
        config = RenderConfig(width=6, height=5, max_depth=2, seed=seed,
                              num_threads=num_threads, tile_size=2)
        return Renderer(self.scene(), config).render_image()

    def test_same_seed_repeats(self):
        assert np.array_equal(self.render(7, 1), self.render(7, 1))

    def test_thread_count_does_not_change_result(self):
        assert np.array_equal(self.render(7, 1), self.render(7, 3))

    def test_different_seeds_differ(self):
        assert not np.array_equal(self.render(7, 1), self.render(8, 1))
