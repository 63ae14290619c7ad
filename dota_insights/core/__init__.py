"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .exceptions import (
    ServiceException,
    DataUnavailableError,
    ProviderFailureError,
    ValidationError,
)
from .enums import (
    Bracket,
    MetaMetric,
    HeroRole,
    PatternCategory,
    PatternDirection,
    BuildTendency,
    ItemGroup,
)
from .logging import setup_logging
from .reference_cache import ReferenceDataCache

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "ServiceException",
    "DataUnavailableError",
    "ProviderFailureError",
    "ValidationError",
    # Enums
    "Bracket",
    "MetaMetric",
    "HeroRole",
    "PatternCategory",
    "PatternDirection",
    "BuildTendency",
    "ItemGroup",
    # Logging
    "setup_logging",
    # Cache
    "ReferenceDataCache",
]
