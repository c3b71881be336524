# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for dbinspect.

Exports:
    extract_ssl_mode, extract_host, extract_port: Connection string field
        extraction with display defaults
    extract_connection_fields: All three fields as one model
    sanitize_dsn: Mask the password in a DSN
    is_sensitive_key: Detect credential-like setting names
    sanitize_error_message: Redact credential-like exception messages
"""

from dbinspect.utils.util_connection_string import (
    DEFAULT_PORT_DISPLAY,
    HOST_NOT_SPECIFIED,
    SSL_MODE_NOT_SPECIFIED,
    extract_connection_fields,
    extract_host,
    extract_port,
    extract_ssl_mode,
)
from dbinspect.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    is_sensitive_key,
    sanitize_dsn,
    sanitize_error_message,
)

__all__: list[str] = [
    "DEFAULT_PORT_DISPLAY",
    "HOST_NOT_SPECIFIED",
    "SENSITIVE_PATTERNS",
    "SSL_MODE_NOT_SPECIFIED",
    "extract_connection_fields",
    "extract_host",
    "extract_port",
    "extract_ssl_mode",
    "is_sensitive_key",
    "sanitize_dsn",
    "sanitize_error_message",
]
