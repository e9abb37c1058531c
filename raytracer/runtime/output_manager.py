"""Writes rendered frames and render reports to disk."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
from PIL import Image

from raytracer import config
from raytracer.constants import ARRAY_FORMATS, IMAGE_FORMATS
from raytracer.core import ConfigurationError
from raytracer.core.rendering.image import clamp_colors

logger = logging.getLogger(__name__)


def _resolve(name: Union[str, Path], output_dir: Optional[Path]) -> Path:
    path = Path(name)
    if not path.is_absolute():
        path = Path(output_dir if output_dir is not None else config.OUTPUT_DIR) / path
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def to_image_array(pixels: np.ndarray) -> np.ndarray:
    """Convert an [x, y] colour grid to an 8-bit (height, width, 3) image array."""
    clamped = clamp_colors(pixels)
    return np.rint(np.transpose(clamped, (1, 0, 2))).astype(np.uint8)


def save_frame(pixels: np.ndarray, name: Union[str, Path] = "frame.png",
               output_dir: Optional[Path] = None) -> str:
    """Save a pixel grid.

    Image formats are clamped to [0, 255] and written with Pillow; ``.npy``
    stores the raw unclamped grid.

    Args:
        pixels: Grid of shape (width, height, 3)
        name: File name or path; relative paths land in output_dir
        output_dir: Defaults to OUTPUT_DIR

    Returns:
        Path of the written file
    """
    path = _resolve(name, output_dir)
    suffix = path.suffix.lower().lstrip(".")

    if suffix in ARRAY_FORMATS:
        np.save(path, np.asarray(pixels, dtype=np.float64))
    elif suffix in IMAGE_FORMATS:
        Image.fromarray(to_image_array(pixels)).save(path)
    else:
        raise ConfigurationError(
            f"Unsupported output format {path.suffix!r}; use one of "
            f"{', '.join(IMAGE_FORMATS + ARRAY_FORMATS)}"
        )

    logger.info("Saved frame to %s", path)
    return str(path)


def save_metrics(metrics: Dict[str, Any], name: Union[str, Path] = "metrics.json",
                 output_dir: Optional[Path] = None) -> str:
    path = _resolve(name, output_dir)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(metrics, f, indent=2, default=str)
    return str(path)


__all__ = ["to_image_array", "save_frame", "save_metrics"]
