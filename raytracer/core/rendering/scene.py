"""
Scene model: rays, materials, triangles, point lights and the scene itself.

Every entity is immutable once constructed. Vector inputs are copied into
read-only float64 arrays so a scene can be shared by concurrent render
workers without locking.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple, Union

import numpy as np

from raytracer.constants import COLOR_MAX, COLOR_MIN
from raytracer.core import SceneConfigurationError
from raytracer.core_types import Color, Vec3, Vec3Like
from raytracer.core.rendering.vector_math import cross, point_at, subtract


def _frozen_vector(value: Vec3Like, what: str) -> Vec3:
    try:
        array = np.array(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise SceneConfigurationError(f"{what} must be a 3-component vector, got {value!r}") from exc
    if array.shape != (3,):
        raise SceneConfigurationError(f"{what} must be a 3-component vector, got {value!r}")
    if not np.all(np.isfinite(array)):
        raise SceneConfigurationError(f"{what} must be finite, got {value!r}")
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class Ray:
    """Half-line from `origin` along `direction`.

    Camera and shadow rays carry unit directions. Reflected rays may be
    slightly shorter than unit length when roughness is strictly between
    0 and 1; the blend of specular and diffuse directions is not
    renormalized.
    """
    origin: Vec3
    direction: Vec3

    def __post_init__(self):
        object.__setattr__(self, "origin", np.asarray(self.origin, dtype=np.float64))
        object.__setattr__(self, "direction", np.asarray(self.direction, dtype=np.float64))

    def at(self, distance: float) -> Vec3:
        """Point at `distance` along the ray."""
        return point_at(self.origin, self.direction, distance)


@dataclass(frozen=True, eq=False)
class Collision:
    """Result of a successful intersection test."""
    distance: float
    normal: Vec3


@dataclass(frozen=True, eq=False)
class Material:
    """Surface material.

    Attributes:
        color: RGB colour with components in [0, 255]
        transparency: Probability in [0, 1] that a ray passes straight through
        roughness: 0 for a perfect mirror, 1 for a fully diffuse bounce
    """
    color: Color
    transparency: float = 0.0
    roughness: float = 0.0

    def __post_init__(self):
        color = _frozen_vector(self.color, "Material color")
        if np.any(color < COLOR_MIN) or np.any(color > COLOR_MAX):
            raise SceneConfigurationError(
                f"Material color components must be in [{COLOR_MIN:g}, {COLOR_MAX:g}], got {self.color!r}"
            )
        object.__setattr__(self, "color", color)
        for name in ("transparency", "roughness"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not 0.0 <= value <= 1.0:
                raise SceneConfigurationError(f"Material {name} must be in [0, 1], got {value!r}")
            object.__setattr__(self, name, float(value))


@dataclass(frozen=True, eq=False)
class Triangle:
    """Triangle with a material.

    Attributes:
        points: Exactly three vertices
        material: Surface material
        origin: Informational anchor point, not used by the geometry.
            Defaults to the centroid.
        skip_winding_order: Leave the vertex order untouched when the scene
            normalizes winding order
    """
    points: Tuple[Vec3, Vec3, Vec3]
    material: Material
    origin: Optional[Vec3] = None
    skip_winding_order: bool = False

    def __post_init__(self):
        try:
            points = tuple(self.points)
        except TypeError as exc:
            raise SceneConfigurationError("Triangle points must be a sequence of 3 vectors") from exc
        if len(points) != 3:
            raise SceneConfigurationError(f"Triangle needs exactly 3 points, got {len(points)}")
        points = tuple(_frozen_vector(p, f"Triangle point {i}") for i, p in enumerate(points))
        object.__setattr__(self, "points", points)

        if not isinstance(self.material, Material):
            raise SceneConfigurationError(f"Triangle material must be a Material, got {type(self.material).__name__}")

        if self.origin is None:
            origin = np.mean(np.stack(points), axis=0)
            origin.flags.writeable = False
        else:
            origin = _frozen_vector(self.origin, "Triangle origin")
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "skip_winding_order", bool(self.skip_winding_order))


@dataclass(frozen=True, eq=False)
class Light:
    """Isotropic point light with inverse-square falloff."""
    origin: Vec3
    strength: float

    def __post_init__(self):
        object.__setattr__(self, "origin", _frozen_vector(self.origin, "Light origin"))
        if not isinstance(self.strength, (int, float)) or not self.strength > 0:
            raise SceneConfigurationError(f"Light strength must be positive, got {self.strength!r}")
        object.__setattr__(self, "strength", float(self.strength))


# Closed set of shapes the intersection engine understands
Shape = Union[Triangle]


@dataclass(frozen=True, eq=False)
class Scene:
    """Ordered triangles plus lights.

    Triangle order is significant: the recursive tracer lets the last
    intersecting triangle in this order decide the reflected colour.
    """
    triangles: Tuple[Triangle, ...] = field(default_factory=tuple)
    lights: Tuple[Light, ...] = field(default_factory=tuple)

    def __post_init__(self):
        triangles = tuple(self.triangles)
        lights = tuple(self.lights)
        for triangle in triangles:
            if not isinstance(triangle, Triangle):
                raise SceneConfigurationError(f"Scene objects must be Triangles, got {type(triangle).__name__}")
        for light in lights:
            if not isinstance(light, Light):
                raise SceneConfigurationError(f"Scene lights must be Lights, got {type(light).__name__}")
        object.__setattr__(self, "triangles", triangles)
        object.__setattr__(self, "lights", lights)

    @property
    def object_count(self) -> int:
        return len(self.triangles)

    def with_corrected_winding(self) -> "Scene":
        """Return a copy whose triangles are all in clockwise order."""
        return Scene(
            triangles=tuple(correct_winding_order(t) for t in self.triangles),
            lights=self.lights,
        )

    @classmethod
    def build(cls, triangles: Iterable[Triangle], lights: Iterable[Light] = ()) -> "Scene":
        return cls(triangles=tuple(triangles), lights=tuple(lights))


def is_counter_clockwise(a: Vec3Like, b: Vec3Like, c: Vec3Like) -> bool:
    """Whether a, b, c wind counter-clockwise seen from +z looking down onto the xy-plane."""
    normal = cross(subtract(b, a), subtract(c, a))
    return normal[2] > 0


def correct_winding_order(triangle: Triangle) -> Triangle:
    """Return the triangle with clockwise vertex order.

    A counter-clockwise triangle has its second and third points swapped.
    Triangles flagged `skip_winding_order` are returned unchanged.
    """
    if triangle.skip_winding_order:
        return triangle
    p0, p1, p2 = triangle.points
    if is_counter_clockwise(p0, p1, p2):
        return replace(triangle, points=(p0, p2, p1))
    return triangle


__all__ = [
    "Ray",
    "Collision",
    "Material",
    "Triangle",
    "Light",
    "Shape",
    "Scene",
    "is_counter_clockwise",
    "correct_winding_order",
]
