"""
Service layer custom exceptions.

Two failure kinds matter to callers of the insights service:

- ``DataUnavailableError`` marks an empty or absent optional input. The
  service converts it into an empty result instead of letting it escape.
- ``ProviderFailureError`` marks a failed required fetch from the data
  provider and always reaches the caller.
"""

from typing import Any, Dict, Optional


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message


class DataUnavailableError(ServiceException):
    """Raised when the provider returns nothing for an optional input."""

    def __init__(
        self,
        message: str,
        resource: Optional[str] = None,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        unavailable_context = context or {}
        if resource:
            unavailable_context["resource"] = resource

        super().__init__(
            message=f"Data unavailable: {message}",
            service=service,
            operation=operation,
            context=unavailable_context,
        )


class ProviderFailureError(ServiceException):
    """Raised when a required data provider call fails outright."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        provider_context = context or {}
        if status_code:
            provider_context["status_code"] = status_code

        super().__init__(
            message=f"Provider failure: {message}",
            service=service,
            operation=operation,
            context=provider_context,
            original_error=original_error,
        )


class ValidationError(ServiceException):
    """Exception raised for input validation errors in services."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        validation_context = context or {}
        if field:
            validation_context["field"] = field
        if value is not None:
            validation_context["value"] = str(value)

        super().__init__(
            message=f"Validation error: {message}",
            service=service,
            operation=operation,
            context=validation_context,
        )
