"""
Ray/shape intersection.

Triangles are tested with the Möller-Trumbore algorithm behind a stochastic
transparency gate: before any geometry is evaluated, one uniform sample is
drawn and the test reports a miss when it falls below the material's
transparency. Repeated tests of the same ray against the same triangle may
therefore disagree; pass a seeded ``random.Random`` for reproducible results.

A miss is reported as ``None``. Parallel rays, degenerate triangles and hits
at or behind the ray origin are all ordinary misses.
"""

import random
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Type

from raytracer.constants import EPSILON
from raytracer.core.rendering.scene import Collision, Ray, Triangle
from raytracer.core.rendering.vector_math import cross, dot, normalize, subtract

Intersector = Callable[[Ray, Any, random.Random], Optional[Collision]]


def intersect_triangle(ray: Ray, triangle: Triangle, rng: random.Random) -> Optional[Collision]:
    """Intersect a ray with a triangle.

    Args:
        ray: Ray to test
        triangle: Triangle to test against
        rng: Random source for the transparency gate

    Returns:
        Collision with the hit distance and the unit geometric normal, or
        None on a miss. The distance is ``dot(e2, q)``, the hit parameter
        scaled by the determinant ``a``; it is only positive when the ray
        meets the triangle's front face (``a > 0``).
    """
    if rng.random() < triangle.material.transparency:
        return None

    p0, p1, p2 = triangle.points
    e1 = subtract(p1, p0)
    e2 = subtract(p2, p0)

    h = cross(ray.direction, e2)
    a = dot(e1, h)
    # Ray parallel to the triangle plane, or a zero-area triangle
    if -EPSILON < a < EPSILON:
        return None

    s = subtract(ray.origin, p0)
    u = dot(s, h) / a
    if u < 0.0 or u > 1.0:
        return None

    q = cross(s, e1)
    v = dot(ray.direction, q) / a
    if v < 0.0 or u + v > 1.0:
        return None

    t = dot(e2, q)
    if t > EPSILON:
        return Collision(distance=t, normal=normalize(cross(e1, e2)))
    return None


# Closed set of shapes; lookup is by exact type
INTERSECTORS: Mapping[Type, Intersector] = MappingProxyType({
    Triangle: intersect_triangle,
})


def intersect(ray: Ray, shape: Any, rng: random.Random) -> Optional[Collision]:
    """Intersect a ray with any supported shape.

    Shapes whose exact type is not in INTERSECTORS always miss.
    """
    intersector = INTERSECTORS.get(type(shape))
    if intersector is None:
        return None
    return intersector(ray, shape, rng)


__all__ = ["Intersector", "intersect_triangle", "INTERSECTORS", "intersect"]
