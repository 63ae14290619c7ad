"""
OpenDota client package.

This package provides the async HTTP client for the OpenDota REST API,
its response models, typed errors, and transformers to domain records.
"""

from .client import OpenDotaClient
from .errors import (
    OpenDotaAPIError,
    RateLimitError,
    NotFoundError,
    BadRequestError,
    ServiceUnavailableError,
    ResponseParseError,
)
from .endpoints import OpenDotaEndpoints
from .transformers import OpenDotaTransformer

__all__ = [
    "OpenDotaClient",
    "OpenDotaAPIError",
    "RateLimitError",
    "NotFoundError",
    "BadRequestError",
    "ServiceUnavailableError",
    "ResponseParseError",
    "OpenDotaEndpoints",
    "OpenDotaTransformer",
]
