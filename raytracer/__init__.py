"""
Triangle ray tracer.

Renders a static scene of triangles and point lights into a grid of RGB
colours. The engine lives in :mod:`raytracer.core.rendering`; runtime helpers
(config loading, frame output, the demo scene) live in :mod:`raytracer.runtime`.
"""

from .__version__ import __version__
from .core import RenderError, ConfigurationError, SceneConfigurationError, DegenerateVectorError
from .core_types import Vec3, Color, CameraConfig, RenderConfig
from .core.rendering import (
    Ray, Collision, Material, Triangle, Light, Scene,
    Camera, Tracer, Renderer, intersect, pool, clamp_colors,
)

__all__ = [
    "__version__",
    "RenderError",
    "ConfigurationError",
    "SceneConfigurationError",
    "DegenerateVectorError",
    "Vec3",
    "Color",
    "CameraConfig",
    "RenderConfig",
    "Ray",
    "Collision",
    "Material",
    "Triangle",
    "Light",
    "Scene",
    "Camera",
    "Tracer",
    "Renderer",
    "intersect",
    "pool",
    "clamp_colors",
]
