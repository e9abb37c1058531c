"""Project constants and default values."""

# Version
__version__ = "0.1.0"

# Geometry
EPSILON = 1e-6  # Parallel-ray and minimum-hit-distance threshold

# Colour range of material colours (RGB)
COLOR_MIN = 0.0
COLOR_MAX = 255.0

# Default render parameters
DEFAULT_WIDTH = 500
DEFAULT_HEIGHT = 300
DEFAULT_SUPERSAMPLING = 1  # Rays cast per pixel along each axis
DEFAULT_RAYTRACE_DEPTH = 3  # Reflection bounces
DEFAULT_BLEND = True
DEFAULT_BLEND_AMOUNT = 0.5
DEFAULT_TILE_SIZE = 32
TILE_SEED_STRIDE = 12345

# Pinhole camera (~53 degree field of view)
DEFAULT_FOV_WIDTH = 1.0
DEFAULT_FOV_HEIGHT = 1.0
DEFAULT_FOCAL_DISTANCE = 1.0

# Box-filter pooling window (fixed, independent of stride)
POOL_WINDOW = 2

# File formats
IMAGE_FORMATS = ["png", "jpg", "jpeg", "bmp"]
ARRAY_FORMATS = ["npy"]

__all__ = [
    "__version__",
    "EPSILON",
    "COLOR_MIN",
    "COLOR_MAX",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_SUPERSAMPLING",
    "DEFAULT_RAYTRACE_DEPTH",
    "DEFAULT_BLEND",
    "DEFAULT_BLEND_AMOUNT",
    "DEFAULT_TILE_SIZE",
    "TILE_SEED_STRIDE",
    "DEFAULT_FOV_WIDTH",
    "DEFAULT_FOV_HEIGHT",
    "DEFAULT_FOCAL_DISTANCE",
    "POOL_WINDOW",
    "IMAGE_FORMATS",
    "ARRAY_FORMATS",
]
