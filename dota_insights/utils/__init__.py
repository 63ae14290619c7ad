"""Utility helpers."""

from .statistics import safe_mean, top_n, win_rate

__all__ = ["safe_mean", "win_rate", "top_n"]
