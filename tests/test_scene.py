"""Tests for the scene model and winding-order normalization."""

import numpy as np
import pytest

from raytracer.core import SceneConfigurationError
from raytracer.core.rendering.scene import (
    Light, Material, Ray, Scene, Triangle, correct_winding_order, is_counter_clockwise,
)

CCW_POINTS = [(0, 0, 1), (1, 0, 1), (0, 1, 1)]
CW_POINTS = [(0, 0, 1), (0, 1, 1), (1, 0, 1)]


class TestMaterial:
    """Tests for Material validation"""

    def test_valid_material(self):
        material = Material(color=(255, 128, 0), transparency=0.25, roughness=1)
        assert material.color.tolist() == [255.0, 128.0, 0.0]
        assert material.transparency == 0.25
        assert material.roughness == 1.0

    @pytest.mark.parametrize("kwargs", [
        {"color": (256, 0, 0)},
        {"color": (-1, 0, 0)},
        {"color": (0, 0)},
        {"color": (0, 0, 0), "transparency": -0.1},
        {"color": (0, 0, 0), "transparency": 1.5},
        {"color": (0, 0, 0), "roughness": -0.5},
        {"color": (0, 0, 0), "roughness": 2.0},
    ])
    def test_rejects_out_of_range_values(self, kwargs):
        with pytest.raises(SceneConfigurationError):
            Material(**kwargs)

    def test_color_is_read_only(self):
        material = Material(color=(1, 2, 3))
        with pytest.raises(ValueError):
            material.color[0] = 9


class TestTriangle:
    """Tests for Triangle construction"""

    def test_points_are_arrays(self, make_material):
        triangle = Triangle(points=CW_POINTS, material=make_material())
        assert len(triangle.points) == 3
        assert all(isinstance(p, np.ndarray) for p in triangle.points)
        assert triangle.skip_winding_order is False

    def test_origin_defaults_to_centroid(self, make_material):
        triangle = Triangle(points=[(0, 0, 0), (3, 0, 0), (0, 3, 0)], material=make_material())
        assert triangle.origin.tolist() == [1.0, 1.0, 0.0]

    @pytest.mark.parametrize("points", [
        [(0, 0, 0), (1, 0, 0)],
        [(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0)],
        [(0, 0), (1, 0), (0, 1)],
    ])
    def test_rejects_malformed_points(self, points, make_material):
        with pytest.raises(SceneConfigurationError):
            Triangle(points=points, material=make_material())

    def test_rejects_missing_material(self):
        with pytest.raises(SceneConfigurationError):
            Triangle(points=CW_POINTS, material={"color": (1, 1, 1)})

    def test_degenerate_triangle_is_allowed(self, make_material):
        """Zero-area triangles are legal scene input; they simply never get hit"""
        Triangle(points=[(0, 0, 0), (1, 1, 1), (2, 2, 2)], material=make_material())


class TestLight:
    """Tests for Light validation"""

    def test_valid_light(self):
        light = Light(origin=(0, 0, 0), strength=20)
        assert light.strength == 20.0

    @pytest.mark.parametrize("strength", [0, -1.0])
    def test_rejects_non_positive_strength(self, strength):
        with pytest.raises(SceneConfigurationError):
            Light(origin=(0, 0, 0), strength=strength)


class TestScene:
    """Tests for Scene"""

    def test_preserves_triangle_order(self, facing_triangle):
        triangles = [facing_triangle(z) for z in (3, 1, 2)]
        scene = Scene(triangles=triangles)
        assert [t.origin[2] for t in scene.triangles] == [3, 1, 2]
        assert scene.object_count == 3

    def test_rejects_non_triangles(self):
        with pytest.raises(SceneConfigurationError):
            Scene(triangles=[object()])

    def test_rejects_non_lights(self, facing_triangle):
        with pytest.raises(SceneConfigurationError):
            Scene(triangles=[facing_triangle(1)], lights=[(0, 0, 0)])

    def test_with_corrected_winding_returns_new_scene(self, make_material):
        triangle = Triangle(points=CCW_POINTS, material=make_material())
        light = Light(origin=(0, 0, 0), strength=1)
        scene = Scene(triangles=[triangle], lights=[light])

        corrected = scene.with_corrected_winding()

        assert corrected is not scene
        assert scene.triangles[0] is triangle
        assert not is_counter_clockwise(*corrected.triangles[0].points)
        assert corrected.lights == scene.lights


class TestWindingOrder:
    """Tests for winding-order normalization"""

    def test_classifies_orientation(self):
        assert is_counter_clockwise(*CCW_POINTS)
        assert not is_counter_clockwise(*CW_POINTS)

    def test_swaps_counter_clockwise_triangle(self, make_material):
        triangle = Triangle(points=CCW_POINTS, material=make_material())
        corrected = correct_winding_order(triangle)

        p0, p1, p2 = corrected.points
        assert p0.tolist() == [0, 0, 1]
        assert p1.tolist() == [0, 1, 1]
        assert p2.tolist() == [1, 0, 1]
        assert corrected.material is triangle.material

    def test_keeps_clockwise_triangle(self, make_material):
        triangle = Triangle(points=CW_POINTS, material=make_material())
        assert correct_winding_order(triangle) is triangle

    def test_respects_skip_flag(self, make_material):
        triangle = Triangle(points=CCW_POINTS, material=make_material(), skip_winding_order=True)
        assert correct_winding_order(triangle) is triangle


def test_ray_at():
    ray = Ray(origin=(1, 2, 3), direction=(0, 0, 1))
    assert ray.at(2.0).tolist() == [1, 2, 5]
