"""
Fixed pinhole camera at the world origin looking down +z.
"""

from typing import Optional

import numpy as np

from raytracer.core_types import CameraConfig
from raytracer.core.rendering.scene import Ray
from raytracer.core.rendering.vector_math import normalize

_ORIGIN = np.zeros(3, dtype=np.float64)
_ORIGIN.flags.writeable = False


class Camera:
    """Maps pixel coordinates to primary rays.

    The camera never moves: every ray starts at (0, 0, 0) and passes through
    a virtual screen `focal_distance` in front of it, `fov_width` wide and
    `fov_height` tall.
    """

    def __init__(self, config: Optional[CameraConfig] = None):
        self.config = config if config else CameraConfig()

    def create_ray(self, screen_width: int, screen_height: int,
                   pixel_x: float, pixel_y: float) -> Ray:
        """Create the primary ray for a pixel.

        Args:
            screen_width, screen_height: Dimensions of the pixel grid
            pixel_x, pixel_y: Pixel coordinates

        Returns:
            Ray from the origin with a unit direction
        """
        screen_x = (pixel_x / screen_width - 0.5) * self.config.fov_width
        screen_y = (pixel_y / screen_height - 0.5) * self.config.fov_height
        direction = normalize([screen_x, screen_y, self.config.focal_distance])
        return Ray(origin=_ORIGIN, direction=direction)

    def __repr__(self) -> str:
        c = self.config
        return (f"Camera(fov_width={c.fov_width}, fov_height={c.fov_height}, "
                f"focal_distance={c.focal_distance})")


def create_ray(screen_width: int, screen_height: int, pixel_x: float, pixel_y: float) -> Ray:
    """Primary ray for a pixel under the default camera."""
    return Camera().create_ray(screen_width, screen_height, pixel_x, pixel_y)


__all__ = ["Camera", "create_ray"]
