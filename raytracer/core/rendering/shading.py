"""
Recursive shading.

:class:`Tracer` resolves the colour seen along a ray. At depth 0 it returns
the colour of the nearest triangle hit. Above depth 0 it reflects the ray off
every triangle it intersects, in scene order, and each intersecting triangle
overwrites the running colour, so the last one in scene order decides the
result rather than the nearest one. The lighting pass then scales the colour
by every unoccluded light; lights combine multiplicatively.
"""

import logging
import math
import random

import numpy as np

from raytracer.constants import DEFAULT_BLEND, DEFAULT_BLEND_AMOUNT
from raytracer.core import ConfigurationError
from raytracer.core_types import Color, Vec3, Vec3Like
from raytracer.core.rendering.intersection import intersect
from raytracer.core.rendering.scene import Ray, Scene
from raytracer.core.rendering.vector_math import as_vector, dot, magnitude, normalize

logger = logging.getLogger(__name__)


def attenuate(strength: float, distance: float) -> float:
    """Inverse-square light falloff."""
    return strength / (distance ** 2)


def random_in_hemisphere(normal: Vec3Like, rng: random.Random) -> Vec3:
    """Uniform random unit vector on the hemisphere around `normal`.

    A sample drawn on the full sphere is flipped when it points into the
    surface.
    """
    theta = 2.0 * math.pi * rng.random()
    phi = math.acos(2.0 * rng.random() - 1.0)
    direction = np.array([
        math.sin(phi) * math.cos(theta),
        math.sin(phi) * math.sin(theta),
        math.cos(phi),
    ], dtype=np.float64)
    if dot(direction, normal) < 0:
        direction = -direction
    return direction


def reflect_specular(incident: Vec3Like, normal: Vec3Like) -> Vec3:
    """Mirror reflection of `incident` about `normal`, normalized."""
    incident = as_vector(incident)
    normal = as_vector(normal)
    return normalize(incident - 2.0 * dot(incident, normal) * normal)


def reflect_diffuse(incident: Vec3Like, normal: Vec3Like, rng: random.Random) -> Vec3:
    return random_in_hemisphere(normal, rng)


def reflect(incident: Vec3Like, normal: Vec3Like, roughness: float, rng: random.Random) -> Vec3:
    """Blend specular and diffuse reflection by roughness.

    The result is ``(1 - roughness) * specular + roughness * diffuse`` and is
    not renormalized.
    """
    specular = reflect_specular(incident, normal)
    diffuse = reflect_diffuse(incident, normal, rng)
    return (1.0 - roughness) * specular + roughness * diffuse


class Tracer:
    """Resolves ray colours against a fixed scene."""

    def __init__(self, scene: Scene):
        self.scene = scene

    def trace(self, ray: Ray, depth: int, rng: random.Random,
              blend: bool = DEFAULT_BLEND,
              blend_amount: float = DEFAULT_BLEND_AMOUNT) -> Color:
        """Colour seen along a ray.

        Args:
            ray: Ray to trace
            depth: Remaining reflection bounces, a non-negative integer
            rng: Random source for transparency and diffuse sampling
            blend: Mix the direct colour into each reflection
            blend_amount: Weight of the reflected colour when blending

        Returns:
            Unclamped RGB colour
        """
        if not isinstance(depth, (int, np.integer)) or depth < 0:
            raise ConfigurationError(f"depth must be a non-negative integer, got {depth!r}")
        return self._trace(ray, int(depth), rng, blend, blend_amount)

    def _trace(self, ray: Ray, depth: int, rng: random.Random,
               blend: bool, blend_amount: float) -> Color:
        closest_distance = math.inf
        color = np.zeros(3, dtype=np.float64)

        for triangle in self.scene.triangles:
            collision = intersect(ray, triangle, rng)
            if collision is None:
                continue

            if depth == 0:
                if collision.distance < closest_distance:
                    closest_distance = collision.distance
                    color = np.array(triangle.material.color, dtype=np.float64)
            else:
                # closest_distance is not tracked here; see the lighting pass below
                point = ray.at(collision.distance)
                reflected_ray = Ray(
                    origin=point,
                    direction=reflect(ray.direction, collision.normal, triangle.material.roughness, rng),
                )
                if blend:
                    direct = self._trace(ray, 0, rng, DEFAULT_BLEND, DEFAULT_BLEND_AMOUNT)
                    reflected = self._trace(reflected_ray, depth - 1, rng, blend, blend_amount)
                    color = reflected * blend_amount + direct * (1.0 - blend_amount)
                else:
                    color = self._trace(reflected_ray, depth - 1, rng, False, blend_amount)

        # Without a tracked distance the shading point is at infinity and no light reaches it
        if math.isinf(closest_distance):
            return color
        return self._apply_lights(color, ray.at(closest_distance), rng)

    def _apply_lights(self, color: Color, point: Vec3, rng: random.Random) -> Color:
        for light in self.scene.lights:
            to_light = light.origin - point
            light_distance = magnitude(to_light)
            if light_distance == 0.0:
                logger.debug("Skipping light at %s: it coincides with the shading point", light.origin)
                continue

            shadow_ray = Ray(origin=point, direction=to_light / light_distance)
            closest_blocking = self.closest_hit_distance(shadow_ray, rng)
            if light_distance < closest_blocking:
                color = color * attenuate(light.strength, light_distance)
        return color

    def closest_hit_distance(self, ray: Ray, rng: random.Random) -> float:
        """Smallest positive hit distance over all triangles, or infinity."""
        closest = math.inf
        for triangle in self.scene.triangles:
            collision = intersect(ray, triangle, rng)
            if collision is not None and 0 < collision.distance < closest:
                closest = collision.distance
        return closest


__all__ = [
    "attenuate",
    "random_in_hemisphere",
    "reflect_specular",
    "reflect_diffuse",
    "reflect",
    "Tracer",
]
