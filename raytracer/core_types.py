"""Core lightweight types shared across modules.
Provides simple dataclasses and aliases so modules can interoperate without heavy imports.
"""
import numbers
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import numpy as np

from raytracer.constants import (
    DEFAULT_BLEND,
    DEFAULT_BLEND_AMOUNT,
    DEFAULT_FOCAL_DISTANCE,
    DEFAULT_FOV_HEIGHT,
    DEFAULT_FOV_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_RAYTRACE_DEPTH,
    DEFAULT_SUPERSAMPLING,
    DEFAULT_TILE_SIZE,
    DEFAULT_WIDTH,
)
from raytracer.core import ConfigurationError

# A Vector3 or Color is a float64 array of shape (3,); sequences are accepted on input
Vec3 = np.ndarray
Color = np.ndarray
Vec3Like = Union[Sequence[float], np.ndarray]


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class CameraConfig:
    """Fixed pinhole camera parameters."""
    fov_width: float = DEFAULT_FOV_WIDTH
    fov_height: float = DEFAULT_FOV_HEIGHT
    focal_distance: float = DEFAULT_FOCAL_DISTANCE

    def __post_init__(self):
        for name in ("fov_width", "fov_height", "focal_distance"):
            value = getattr(self, name)
            if not _is_real(value) or not value > 0:
                raise ConfigurationError(f"{name} must be a positive float, got {value!r}")


@dataclass(frozen=True)
class RenderConfig:
    """Settings for one render call."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    supersampling: int = DEFAULT_SUPERSAMPLING
    max_depth: int = DEFAULT_RAYTRACE_DEPTH
    blend: bool = DEFAULT_BLEND
    blend_amount: float = DEFAULT_BLEND_AMOUNT
    seed: Optional[int] = None
    num_threads: int = 1
    tile_size: int = DEFAULT_TILE_SIZE
    camera: CameraConfig = field(default_factory=CameraConfig)

    def __post_init__(self):
        for name in ("width", "height", "supersampling", "num_threads", "tile_size"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool) or self.max_depth < 0:
            raise ConfigurationError(f"max_depth must be a non-negative integer, got {self.max_depth!r}")
        if not isinstance(self.blend, bool):
            raise ConfigurationError(f"blend must be true or false, got {self.blend!r}")
        if not _is_real(self.blend_amount) or not 0.0 <= self.blend_amount <= 1.0:
            raise ConfigurationError(f"blend_amount must be in [0, 1], got {self.blend_amount!r}")
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise ConfigurationError(f"seed must be an integer or None, got {self.seed!r}")
        if not isinstance(self.camera, CameraConfig):
            raise ConfigurationError("camera must be a CameraConfig")

    @property
    def render_width(self) -> int:
        """Width of the supersampled grid that is actually traced."""
        return self.width * self.supersampling

    @property
    def render_height(self) -> int:
        """Height of the supersampled grid that is actually traced."""
        return self.height * self.supersampling


__all__ = ["Vec3", "Color", "Vec3Like", "CameraConfig", "RenderConfig"]
