# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""dbinspect Errors Module.

Exports:
    ModelInspectorErrorContext: Bundled error context model
    InspectorError: Base inspector error class
    InspectorConfigurationError: Configuration loading/validation errors
    InspectorConnectionError: Database connection errors
    InspectorTimeoutError: Database connection timeouts
    InspectorQueryError: Inspection query failures

Correlation ID Assignment:
    Each DatabaseInspector generates one correlation ID with ``uuid4()``
    and passes it into every error context it raises, so the printed error
    and the log lines of one command can be matched.

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Passwords
        - Full connection strings with credentials

    SAFE to include:
        - Sanitized DSNs (``sanitize_dsn``)
        - Table names, operation names, timeout values
        - Correlation IDs
"""

from dbinspect.errors.inspector_errors import (
    InspectorConfigurationError,
    InspectorConnectionError,
    InspectorError,
    InspectorQueryError,
    InspectorTimeoutError,
)
from dbinspect.errors.model_inspector_error_context import (
    ModelInspectorErrorContext,
)

__all__: list[str] = [
    "InspectorConfigurationError",
    "InspectorConnectionError",
    "InspectorError",
    "InspectorQueryError",
    "InspectorTimeoutError",
    "ModelInspectorErrorContext",
]
