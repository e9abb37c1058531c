"""Configuration for the ray tracer from environment variables."""

import os
from pathlib import Path
from typing import Optional

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Paths
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", PROJECT_ROOT / "output"))
LOGS_DIR = Path(os.getenv("LOGS_DIR", PROJECT_ROOT / "logs"))
CONFIG_DIR = Path(os.getenv("CONFIG_DIR", PROJECT_ROOT / "config"))

# Render settings
RESOLUTION = tuple(map(int, os.getenv("RESOLUTION", "500,300").split(",")))
SUPERSAMPLING = int(os.getenv("SUPERSAMPLING", "1"))
RAYTRACE_DEPTH = int(os.getenv("RAYTRACE_DEPTH", "3"))
BLEND = os.getenv("BLEND", "true").lower() == "true"
BLEND_AMOUNT = float(os.getenv("BLEND_AMOUNT", "0.5"))
RENDER_SEED: Optional[int] = int(os.environ["RENDER_SEED"]) if os.getenv("RENDER_SEED") else None
RENDER_THREADS = int(os.getenv("RENDER_THREADS", "1"))
TILE_SIZE = int(os.getenv("TILE_SIZE", "32"))

# Camera settings
FOV_WIDTH = float(os.getenv("FOV_WIDTH", "1.0"))
FOV_HEIGHT = float(os.getenv("FOV_HEIGHT", "1.0"))
FOCAL_DISTANCE = float(os.getenv("FOCAL_DISTANCE", "1.0"))

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"

__all__ = [
    "PROJECT_ROOT",
    "OUTPUT_DIR",
    "LOGS_DIR",
    "CONFIG_DIR",
    "RESOLUTION",
    "SUPERSAMPLING",
    "RAYTRACE_DEPTH",
    "BLEND",
    "BLEND_AMOUNT",
    "RENDER_SEED",
    "RENDER_THREADS",
    "TILE_SIZE",
    "FOV_WIDTH",
    "FOV_HEIGHT",
    "FOCAL_DISTANCE",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_TO_FILE",
]
