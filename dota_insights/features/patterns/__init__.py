"""Performance pattern detection feature."""

from .detector import PatternDetector
from .schemas import Pattern, PatternReport

__all__ = ["PatternDetector", "Pattern", "PatternReport"]
