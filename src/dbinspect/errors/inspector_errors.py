# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Inspector-Specific Error Classes.

Error Hierarchy:
    InspectorError (base inspector error)
    ├── InspectorConfigurationError
    ├── InspectorConnectionError
    │   └── InspectorTimeoutError
    └── InspectorQueryError

All errors:
    - Support proper error chaining with `raise ... from e`
    - Carry structured context for debugging
    - Expose the correlation ID of the failed command
    - Accept ModelInspectorErrorContext for bundled context parameters

Messages must never contain an unsanitized connection string; use
``sanitize_dsn`` before putting a DSN into a message or context.
"""

from typing import Optional
from uuid import UUID

from dbinspect.errors.model_inspector_error_context import (
    ModelInspectorErrorContext,
)


class InspectorError(Exception):
    """Base error class for database inspection errors.

    Structured Fields (via ModelInspectorErrorContext):
        operation: Operation being performed
        target_name: Target resource name
        correlation_id: Command correlation ID

    Example:
        >>> context = ModelInspectorErrorContext(
        ...     operation=EnumInspectorOperation.CONNECT,
        ...     target_name="postgresql://app:****@db:5432/app",
        ... )
        >>> raise InspectorError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelInspectorErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize InspectorError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled context (operation, target_name, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or ModelInspectorErrorContext()
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def correlation_id(self) -> Optional[UUID]:
        """Correlation ID of the command that failed, if any."""
        return self.context.correlation_id

    def to_dict(self) -> dict[str, object]:
        """Return the error as a flat dict suitable for structured logging."""
        data: dict[str, object] = {
            "error_type": type(self).__name__,
            "message": self.message,
        }
        if self.context.operation is not None:
            data["operation"] = self.context.operation.value
        if self.context.target_name is not None:
            data["target_name"] = self.context.target_name
        if self.context.correlation_id is not None:
            data["correlation_id"] = str(self.context.correlation_id)
        data.update(self.extra_context)
        return data


class InspectorConfigurationError(InspectorError):
    """Raised when configuration is missing or invalid.

    Used for unreadable or malformed config files, values failing validation,
    and a missing POSTGRES_URL when a command needs a connection.
    """


class InspectorConnectionError(InspectorError):
    """Raised when a database connection cannot be established.

    Example:
        >>> raise InspectorConnectionError(
        ...     "Error connecting to database",
        ...     context=context,
        ... )
    """


class InspectorTimeoutError(InspectorConnectionError):
    """Raised when connecting to the database exceeds the configured timeout."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelInspectorErrorContext] = None,
        timeout_seconds: Optional[float] = None,
        **extra_context: object,
    ) -> None:
        """Initialize InspectorTimeoutError.

        Args:
            message: Human-readable error message
            context: Bundled context
            timeout_seconds: Timeout that was exceeded
            **extra_context: Additional context information
        """
        if timeout_seconds is not None:
            extra_context["timeout_seconds"] = timeout_seconds
        super().__init__(message, context=context, **extra_context)


class InspectorQueryError(InspectorError):
    """Raised when one of the fixed inspection queries fails."""


__all__ = [
    "InspectorConfigurationError",
    "InspectorConnectionError",
    "InspectorError",
    "InspectorQueryError",
    "InspectorTimeoutError",
]
