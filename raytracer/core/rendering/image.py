"""
Image assembly: drives the tracer over every pixel and downsamples
supersampled grids.

Pixel grids are float64 arrays of shape ``(width, height, 3)`` indexed
``[x, y]``. Colours are not clamped; use :func:`clamp_colors` before display.
"""

import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

import numpy as np

from raytracer.constants import COLOR_MAX, COLOR_MIN, POOL_WINDOW, TILE_SEED_STRIDE
from raytracer.core import ConfigurationError
from raytracer.core_types import RenderConfig
from raytracer.core.rendering.camera import Camera
from raytracer.core.rendering.scene import Scene
from raytracer.core.rendering.shading import Tracer

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]
Tile = Tuple[int, int, int, int]


def pool(pixels: np.ndarray, step_size: int) -> np.ndarray:
    """Downsample a pixel grid by box-filter pooling.

    Each output pixel is the mean of the 2x2 input block whose top-left
    corner is at ``(i * step_size, j * step_size)``. The window stays 2x2
    for every stride, so only ``step_size == 2`` averages every input
    sample; larger strides skip the remaining rows and columns of each
    block.

    Args:
        pixels: Grid of shape (width, height, 3)
        step_size: Stride between windows, at least 2

    Returns:
        Grid of shape (width // step_size, height // step_size, 3)

    Raises:
        ConfigurationError: If step_size < 2 or does not divide both
            grid dimensions
    """
    pixels = np.asarray(pixels, dtype=np.float64)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ConfigurationError(f"pixels must have shape (width, height, 3), got {pixels.shape}")
    if not isinstance(step_size, (int, np.integer)) or step_size < POOL_WINDOW:
        raise ConfigurationError(f"step_size must be an integer >= {POOL_WINDOW}, got {step_size!r}")
    width, height = pixels.shape[:2]
    if width % step_size or height % step_size:
        raise ConfigurationError(
            f"Grid {width}x{height} is not divisible by step_size {step_size}"
        )
    if step_size != POOL_WINDOW:
        logger.warning(
            "Pooling with step_size %d averages only a %dx%d window of each %dx%d block",
            step_size, POOL_WINDOW, POOL_WINDOW, step_size, step_size,
        )

    s = step_size
    return (pixels[0::s, 0::s] + pixels[1::s, 0::s] + pixels[0::s, 1::s] + pixels[1::s, 1::s]) / 4


def clamp_colors(pixels: np.ndarray) -> np.ndarray:
    """Clamp colours to the displayable [0, 255] range."""
    return np.clip(np.asarray(pixels, dtype=np.float64), COLOR_MIN, COLOR_MAX)


class Renderer:
    """Renders a scene into a pixel grid.

    Pixels are independent, so the grid is split into square tiles that may
    be traced on a thread pool. Each tile owns a ``random.Random`` seeded
    from the render seed and the tile index, which keeps seeded renders
    reproducible for any number of threads.
    """

    def __init__(self, scene: Scene, config: Optional[RenderConfig] = None,
                 progress_callback: Optional[ProgressCallback] = None,
                 correct_winding: bool = True):
        """Initialize renderer.

        Args:
            scene: Scene to render; it is not modified
            config: Render settings
            progress_callback: Receives the completed fraction after each tile
            correct_winding: Normalize triangle winding order before tracing
        """
        self.config = config if config else RenderConfig()
        self.scene = scene.with_corrected_winding() if correct_winding else scene
        self.camera = Camera(self.config.camera)
        self.tracer = Tracer(self.scene)
        self.progress_callback = progress_callback
        self.last_render_time = 0.0

    def trace_pixel(self, render_width: int, render_height: int,
                    x: int, y: int, rng: random.Random) -> np.ndarray:
        ray = self.camera.create_ray(render_width, render_height, x, y)
        return self.tracer.trace(
            ray, self.config.max_depth, rng,
            blend=self.config.blend, blend_amount=self.config.blend_amount,
        )

    def render_tile(self, x0: int, x1: int, y0: int, y1: int,
                    render_width: int, render_height: int, seed: int) -> np.ndarray:
        """Render a tile of the grid.

        Args:
            x0, x1: X range
            y0, y1: Y range
            render_width, render_height: Dimensions of the full grid
            seed: Random seed for this tile

        Returns:
            Tile of shape (x1 - x0, y1 - y0, 3)
        """
        rng = random.Random(seed)
        tile = np.zeros((x1 - x0, y1 - y0, 3), dtype=np.float64)
        for x in range(x0, x1):
            for y in range(y0, y1):
                tile[x - x0, y - y0] = self.trace_pixel(render_width, render_height, x, y, rng)
        return tile

    def _tiles(self, render_width: int, render_height: int) -> List[Tile]:
        size = self.config.tile_size
        tiles = []
        for x in range(0, render_width, size):
            for y in range(0, render_height, size):
                tiles.append((x, min(x + size, render_width), y, min(y + size, render_height)))
        return tiles

    def render(self, render_width: int, render_height: int) -> np.ndarray:
        """Trace one ray per pixel of a render_width x render_height grid.

        Returns:
            Unclamped grid of shape (render_width, render_height, 3)
        """
        if render_width < 1 or render_height < 1:
            raise ConfigurationError(f"Render size must be positive, got {render_width}x{render_height}")

        base_seed = self.config.seed if self.config.seed is not None else random.randrange(2 ** 32)
        tiles = self._tiles(render_width, render_height)
        total_tiles = len(tiles)

        logger.info(
            "Starting render: %dx%d, %d objects, %d lights, depth %d, %d threads",
            render_width, render_height, self.scene.object_count, len(self.scene.lights),
            self.config.max_depth, self.config.num_threads,
        )
        start = time.perf_counter()
        pixels = np.zeros((render_width, render_height, 3), dtype=np.float64)

        def tile_args(index: int, tile: Tile):
            x0, x1, y0, y1 = tile
            return (x0, x1, y0, y1, render_width, render_height, base_seed + index * TILE_SEED_STRIDE)

        if self.config.num_threads == 1:
            results = (self.render_tile(*tile_args(i, t)) for i, t in enumerate(tiles))
            self._collect(pixels, tiles, results, total_tiles)
        else:
            with ThreadPoolExecutor(max_workers=self.config.num_threads) as executor:
                futures = [executor.submit(self.render_tile, *tile_args(i, t)) for i, t in enumerate(tiles)]
                self._collect(pixels, tiles, (f.result() for f in futures), total_tiles)

        self.last_render_time = time.perf_counter() - start
        logger.info("Rendered in %.3fs", self.last_render_time)
        return pixels

    def _collect(self, pixels: np.ndarray, tiles: List[Tile], results, total_tiles: int) -> None:
        for completed, ((x0, x1, y0, y1), tile) in enumerate(zip(tiles, results), start=1):
            pixels[x0:x1, y0:y1] = tile
            progress = completed / total_tiles
            if self.progress_callback:
                self.progress_callback(progress)
            logger.debug("Progress: %.1f%%", progress * 100)

    def render_image(self) -> np.ndarray:
        """Render at the configured size, supersampling and pooling as needed.

        Returns:
            Unclamped grid of shape (config.width, config.height, 3)
        """
        pixels = self.render(self.config.render_width, self.config.render_height)
        if self.config.supersampling > 1:
            pixels = pool(pixels, self.config.supersampling)
        return pixels


__all__ = ["ProgressCallback", "pool", "clamp_colors", "Renderer"]
