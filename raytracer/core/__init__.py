"""
Core of the ray tracer.

The numerical engine lives in :mod:`raytracer.core.rendering`; this module
holds the error classes shared by the engine and the runtime.
"""


# Error classes

class RenderError(Exception):
    """Base exception for ray tracer errors."""
    pass


class ConfigurationError(RenderError, ValueError):
    """Raised when render or camera configuration is invalid."""
    pass


class SceneConfigurationError(ConfigurationError):
    """Raised when a scene entity is malformed at construction time."""
    pass


class DegenerateVectorError(RenderError, ValueError):
    """Raised when a zero-length vector is normalized."""
    pass


__all__ = [
    "RenderError",
    "ConfigurationError",
    "SceneConfigurationError",
    "DegenerateVectorError",
]
