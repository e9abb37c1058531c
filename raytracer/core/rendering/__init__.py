"""
Rendering engine: vector math, scene model, camera, intersection,
recursive shading and image assembly.
"""

from .vector_math import normalize, cross, dot, add, subtract, magnitude
from .scene import (
    Ray, Collision, Material, Triangle, Light, Shape, Scene,
    is_counter_clockwise, correct_winding_order,
)
from .camera import Camera, create_ray
from .intersection import intersect, intersect_triangle
from .shading import Tracer, attenuate, reflect, random_in_hemisphere
from .image import Renderer, pool, clamp_colors

__all__ = [
    # Vector math
    "normalize", "cross", "dot", "add", "subtract", "magnitude",

    # Scene model
    "Ray", "Collision", "Material", "Triangle", "Light", "Shape", "Scene",
    "is_counter_clockwise", "correct_winding_order",

    # Camera
    "Camera", "create_ray",

    # Intersection
    "intersect", "intersect_triangle",

    # Shading
    "Tracer", "attenuate", "reflect", "random_in_hemisphere",

    # Image assembly
    "Renderer", "pool", "clamp_colors",
]
