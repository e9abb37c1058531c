"""Utility helpers."""

from .metrics import Timer, compute_basic_stats, color_stats, time_breakdown

__all__ = ["Timer", "compute_basic_stats", "color_stats", "time_breakdown"]
