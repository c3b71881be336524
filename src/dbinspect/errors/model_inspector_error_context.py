# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Inspector Error Context Model.

Bundles the structured fields shared by every inspector error so that the
error constructors stay small.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from dbinspect.enums import EnumInspectorOperation


class ModelInspectorErrorContext(BaseModel):
    """Structured context attached to inspector errors.

    Attributes:
        operation: Operation being performed (load_config, connect, query)
        target_name: Target resource name (config path, table name, sanitized DSN)
        correlation_id: Correlation ID shared by the error and its log lines

    Example:
        >>> context = ModelInspectorErrorContext(
        ...     operation=EnumInspectorOperation.QUERY,
        ...     target_name="tenants",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise InspectorQueryError("Error querying tenants", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[EnumInspectorOperation] = Field(
        default=None,
        description="Operation being performed (load_config, connect, query)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target resource name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Correlation ID for tracing one command invocation",
    )


__all__ = ["ModelInspectorErrorContext"]
