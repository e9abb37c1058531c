"""Runtime helpers: configuration loading, the demo scene and frame output."""

from .initializer import load_config, initialize
from .demo_scene import build_demo_scene
from .output_manager import save_frame, save_metrics

__all__ = ["load_config", "initialize", "build_demo_scene", "save_frame", "save_metrics"]
