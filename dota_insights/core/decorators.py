"""
Service layer decorators for common functionality.

This module provides the error handling decorator used by the insights
service: structured logging of every call, provider errors wrapped into
``ProviderFailureError``, service exceptions passed through unchanged.
"""

import functools
import inspect
from typing import Any, Awaitable, Callable, Dict, ParamSpec, TypeVar

import structlog

from .exceptions import ProviderFailureError, ServiceException, ValidationError
from .opendota.errors import OpenDotaAPIError

logger = structlog.get_logger(__name__)

# Type variables for generic decorator typing
P = ParamSpec("P")
R = TypeVar("R")


def _call_context(
    func: Callable[..., Any], service_name: str, args: Any, kwargs: Any
) -> Dict[str, Any]:
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()

    context: Dict[str, Any] = {
        "service": service_name,
        "operation": func.__name__,
    }
    for name, value in bound_args.arguments.items():
        if name != "self":
            # Limit values to avoid huge log entries
            context[name] = str(value)[:200] if value is not None else None
    return context


def service_error_handler(
    service_name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Decorator for handling async service method errors with structured logging.

    - ``ServiceException`` subclasses are logged and re-raised unchanged.
    - ``OpenDotaAPIError`` is wrapped in ``ProviderFailureError``.
    - ``ValueError`` is wrapped in ``ValidationError``.

    Anything else propagates untouched.

    :param service_name: Name of the service (e.g., "InsightsService")
    :returns: Decorated coroutine function with error handling

    :example:
        @service_error_handler("InsightsService")
        async def hero_matchups(self, hero_id: int) -> MatchupRankings:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        operation_name = func.__name__

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            context = _call_context(func, service_name, args, kwargs)
            logger.debug("Service method called", **context)

            try:
                result = await func(*args, **kwargs)
            except ServiceException as e:
                logger.error(
                    "Service operation failed",
                    error_type=e.__class__.__name__,
                    error_message=str(e),
                    error_context=e.context,
                    **context,
                )
                raise
            except OpenDotaAPIError as e:
                logger.error(
                    "Data provider call failed",
                    error_type=e.__class__.__name__,
                    error_message=str(e),
                    status_code=e.status_code,
                    **context,
                )
                raise ProviderFailureError(
                    message=e.message,
                    service=service_name,
                    operation=operation_name,
                    status_code=e.status_code,
                    original_error=e,
                ) from e
            except ValueError as e:
                logger.error(
                    "Validation error in service operation",
                    error_message=str(e),
                    **context,
                )
                raise ValidationError(
                    message=str(e),
                    service=service_name,
                    operation=operation_name,
                ) from e

            logger.debug("Service method completed successfully", **context)
            return result

        return wrapper

    return decorator
