"""
Vector math for 3-component float vectors.

All functions are pure: they accept sequences or numpy arrays and return new
float64 arrays (or floats), never modifying their inputs.
"""

import math

import numpy as np

from raytracer.core import DegenerateVectorError
from raytracer.core_types import Vec3, Vec3Like


def as_vector(v: Vec3Like) -> Vec3:
    """Convert a 3-component sequence to a float64 array."""
    return np.asarray(v, dtype=np.float64).reshape(3)


def magnitude(v: Vec3Like) -> float:
    """Euclidean length of a vector."""
    x, y, z = as_vector(v)
    return math.sqrt(x * x + y * y + z * z)


def normalize(v: Vec3Like) -> Vec3:
    """Scale a vector to unit length.

    Args:
        v: Non-zero vector

    Returns:
        Unit vector with the direction of v

    Raises:
        DegenerateVectorError: If v has zero length
    """
    v = as_vector(v)
    length = magnitude(v)
    if length == 0.0:
        raise DegenerateVectorError("Cannot normalize a zero-length vector")
    return v / length


def cross(a: Vec3Like, b: Vec3Like) -> Vec3:
    """Cross product a x b."""
    ax, ay, az = as_vector(a)
    bx, by, bz = as_vector(b)
    return np.array([
        ay * bz - az * by,
        az * bx - ax * bz,
        ax * by - ay * bx,
    ], dtype=np.float64)


def dot(a: Vec3Like, b: Vec3Like) -> float:
    """Sum of component-wise products."""
    return float(np.dot(as_vector(a), as_vector(b)))


def add(a: Vec3Like, b: Vec3Like) -> Vec3:
    return as_vector(a) + as_vector(b)


def subtract(a: Vec3Like, b: Vec3Like) -> Vec3:
    return as_vector(a) - as_vector(b)


def point_at(origin: Vec3Like, direction: Vec3Like, distance: float) -> Vec3:
    """Point reached by travelling `distance` along `direction` from `origin`."""
    return as_vector(origin) + as_vector(direction) * distance


__all__ = [
    "as_vector",
    "magnitude",
    "normalize",
    "cross",
    "dot",
    "add",
    "subtract",
    "point_at",
]
