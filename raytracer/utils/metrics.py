"""Timing and pixel statistics for render reports."""
import time
from typing import Dict, Optional, Sequence

import numpy as np


class Timer:
    """Context manager measuring wall-clock time in seconds."""

    def __init__(self, name: str = ""):
        self.name = name
        self.start: Optional[float] = None
        self.elapsed = 0.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self.start

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


def compute_basic_stats(values: Sequence[float]) -> Dict[str, float]:
    if len(values) == 0:
        return {}
    return {"min": float(min(values)), "max": float(max(values)), "mean": float(sum(values) / len(values))}


def color_stats(pixels: np.ndarray) -> Dict[str, Dict[str, float]]:
    """Per-channel min/max/mean of an unclamped pixel grid."""
    flat = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
    return {
        channel: compute_basic_stats(flat[:, i].tolist())
        for i, channel in enumerate(("r", "g", "b"))
    }


def time_breakdown(**phases: float) -> Dict[str, Dict[str, float]]:
    """Share of total time spent in each named phase.

    Example:
        >>> time_breakdown(rendering=3.0, output=1.0)["rendering"]["percent"]
        75.0
    """
    total = sum(phases.values())
    report = {
        name: {"seconds": seconds, "percent": (100.0 * seconds / total) if total > 0 else 0.0}
        for name, seconds in phases.items()
    }
    report["total"] = {"seconds": total, "percent": 100.0 if total > 0 else 0.0}
    return report


__all__ = ["Timer", "compute_basic_stats", "color_stats", "time_breakdown"]
