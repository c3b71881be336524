# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Database access for dbinspect."""

from dbinspect.inspector.database_inspector import DatabaseInspector
from dbinspect.inspector.postgres_connection import PostgresConnectionContext

__all__: list[str] = [
    "DatabaseInspector",
    "PostgresConnectionContext",
]
