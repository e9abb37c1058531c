"""Builds a validated RenderConfig from environment defaults, a JSON file and overrides."""
import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from raytracer import config
from raytracer.core import ConfigurationError
from raytracer.core_types import CameraConfig, RenderConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "render.json"

_RENDER_KEYS = {f.name for f in fields(RenderConfig)}
_CAMERA_KEYS = {f.name for f in fields(CameraConfig)}


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Read render settings from a JSON file.

    Args:
        path: JSON file. When omitted, CONFIG_DIR/render.json is used if it
            exists.

    Returns:
        Mapping of setting names to values; empty when no default file exists

    Raises:
        ConfigurationError: If an explicit path is missing or the file is not
            a JSON object
    """
    if path is None:
        path = config.CONFIG_DIR / DEFAULT_CONFIG_NAME
        if not path.exists():
            return {}
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    logger.debug("Loaded render config from %s", path)
    return data


def env_defaults() -> Dict[str, Any]:
    """Render settings taken from environment variables (see raytracer.config)."""
    width, height = config.RESOLUTION
    return {
        "width": width,
        "height": height,
        "supersampling": config.SUPERSAMPLING,
        "max_depth": config.RAYTRACE_DEPTH,
        "blend": config.BLEND,
        "blend_amount": config.BLEND_AMOUNT,
        "seed": config.RENDER_SEED,
        "num_threads": config.RENDER_THREADS,
        "tile_size": config.TILE_SIZE,
        "camera": {
            "fov_width": config.FOV_WIDTH,
            "fov_height": config.FOV_HEIGHT,
            "focal_distance": config.FOCAL_DISTANCE,
        },
    }


def _camera_from(values: Any) -> CameraConfig:
    if isinstance(values, CameraConfig):
        return values
    if not isinstance(values, dict):
        raise ConfigurationError("camera settings must be an object")
    unknown = set(values) - _CAMERA_KEYS
    if unknown:
        raise ConfigurationError(f"Unknown camera settings: {', '.join(sorted(unknown))}")
    try:
        settings = {k: float(v) for k, v in values.items()}
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"camera settings must be numbers: {e}") from e
    return CameraConfig(**settings)


def initialize(path: Optional[Union[str, Path]] = None, **overrides: Any) -> RenderConfig:
    """Merge environment defaults, the config file and explicit overrides.

    Later sources win; camera settings are merged key by key. Values set to
    None are ignored, so unset CLI options keep the file or environment value.

    Raises:
        ConfigurationError: On unknown keys or invalid values
    """
    settings = env_defaults()
    camera = dict(settings.pop("camera"))

    for source in (load_config(path), overrides):
        unknown = set(source) - _RENDER_KEYS
        if unknown:
            raise ConfigurationError(f"Unknown render settings: {', '.join(sorted(unknown))}")
        for key, value in source.items():
            if key == "camera":
                if isinstance(value, CameraConfig):
                    value = {k: getattr(value, k) for k in _CAMERA_KEYS}
                if value is not None:
                    if not isinstance(value, dict):
                        raise ConfigurationError("camera settings must be an object")
                    camera.update(value)
            elif value is not None:
                settings[key] = value

    render_config = RenderConfig(camera=_camera_from(camera), **settings)
    logger.debug("Render config: %s", render_config)
    return render_config


__all__ = ["DEFAULT_CONFIG_NAME", "load_config", "env_defaults", "initialize"]
