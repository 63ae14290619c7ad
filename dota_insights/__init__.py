"""Dota insights: pattern detection and draft scoring over OpenDota data."""

__version__ = "0.1.0"
