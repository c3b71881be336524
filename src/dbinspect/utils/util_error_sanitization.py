# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message and DSN sanitization utilities.

Connection strings carry credentials, and asyncpg error messages sometimes
echo them back. Everything printed to the console or written to a log goes
through one of these functions first.

Example:
    >>> sanitize_dsn("postgresql://app:secret@db:5432/app")
    'postgresql://app:****@db:5432/app'
    >>> try:
    ...     raise ConnectionError("cannot reach postgres://app:secret@db")
    ... except Exception as e:
    ...     sanitize_error_message(e)
    'ConnectionError: [REDACTED - potentially sensitive data]'
"""

from __future__ import annotations

import re
from typing import Final

# Checked case-insensitively; any match redacts the whole message.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "credential",
    "connection_string",
    "connstr",
    "user:pass",
    "pgpassword",
    "postgres://",
    "postgresql://",
)

# Userinfo is only matched inside the authority, before any "/", "?" or "#".
_DSN_PASSWORD_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"://([^:/@?#]+):([^@/?#]*)@"
)


def sanitize_dsn(dsn: str) -> str:
    """Mask the password portion of a DSN to prevent credential leaks."""
    return _DSN_PASSWORD_PATTERN.sub(r"://\1:****@", dsn)


def is_sensitive_key(name: str) -> bool:
    """Return True if a setting name looks like it holds a credential."""
    lowered = name.lower()
    return any(pattern in lowered for pattern in SENSITIVE_PATTERNS)


def sanitize_error_message(exception: Exception, max_length: int = 500) -> str:
    """Sanitize an exception message for safe inclusion in logs and output.

    Sanitization rules:
        1. If the message contains a credential-like pattern, only the
           exception type is kept
        2. Long messages are truncated

    Args:
        exception: The exception to sanitize
        max_length: Maximum length of the kept message (default 500)

    Returns:
        ``"{ExceptionType}: {sanitized_message}"``
    """
    exception_type = type(exception).__name__
    exception_str = str(exception)

    exception_lower = exception_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in exception_lower:
            return f"{exception_type}: [REDACTED - potentially sensitive data]"

    if len(exception_str) > max_length:
        exception_str = exception_str[:max_length] + "... [truncated]"

    return f"{exception_type}: {exception_str}"


__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "is_sensitive_key",
    "sanitize_dsn",
    "sanitize_error_message",
]
