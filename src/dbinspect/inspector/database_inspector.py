# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Database inspector: fixed inspection queries over one connection.

Each public coroutine opens its own connection, runs its queries and closes
the connection again. Rows are converted into frozen models; a row that
fails validation is logged and skipped so one bad row never hides the rest
of a listing.

Usage:
    >>> inspector = DatabaseInspector(load_config())
    >>> tenants = await inspector.list_tenants()
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterable, Mapping
from contextlib import AsyncExitStack, asynccontextmanager
from typing import TYPE_CHECKING, Final, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, ValidationError

from dbinspect.enums import EnumInspectorOperation
from dbinspect.errors import (
    InspectorConfigurationError,
    InspectorConnectionError,
    InspectorQueryError,
    InspectorTimeoutError,
    ModelInspectorErrorContext,
)
from dbinspect.inspector.postgres_connection import PostgresConnectionContext
from dbinspect.models import (
    ModelConnectionInfo,
    ModelRole,
    ModelTableInfo,
    ModelTenant,
    ModelUser,
)
from dbinspect.utils.util_error_sanitization import (
    sanitize_dsn,
    sanitize_error_message,
)

if TYPE_CHECKING:
    import asyncpg

    from dbinspect.config import ModelInspectorConfig

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# =============================================================================
# Queries
# =============================================================================

# (ModelConnectionInfo field, query) pairs. Each runs on its own so that a
# permission error on one does not hide the others.
CONNECTION_INFO_QUERIES: Final[tuple[tuple[str, str], ...]] = (
    ("database_name", "SELECT current_database()"),
    ("version", "SELECT version()"),
    ("connected_user", "SELECT current_user"),
    ("server_encoding", "SHOW server_encoding"),
    ("timezone", "SHOW timezone"),
)

TABLES_QUERY: Final[str] = """
    SELECT
        t.table_schema,
        t.table_name,
        (
            SELECT count(*)
            FROM information_schema.columns c
            WHERE c.table_schema = t.table_schema
              AND c.table_name = t.table_name
        ) AS column_count
    FROM information_schema.tables t
    WHERE t.table_schema = 'public'
    ORDER BY t.table_schema, t.table_name
"""

TENANTS_QUERY: Final[str] = """
    SELECT id, name, created_at
    FROM tenants
    ORDER BY name
"""

ROLES_QUERY: Final[str] = """
    SELECT id, name, description, created_at
    FROM roles
    ORDER BY name
"""

USERS_QUERY: Final[str] = """
    SELECT id, username, email, created_at
    FROM users
    ORDER BY username
"""


# =============================================================================
# Inspector
# =============================================================================


class DatabaseInspector:
    """Runs the fixed inspection queries against the configured database.

    Errors raised by every coroutine carry this inspector's correlation ID.

    Raises:
        InspectorConfigurationError: ``postgres_url`` is empty.
        InspectorTimeoutError: The connection was not established in time.
        InspectorConnectionError: The connection attempt failed.
        InspectorQueryError: A listing query failed.
    """

    def __init__(
        self,
        config: ModelInspectorConfig,
        correlation_id: UUID | None = None,
    ) -> None:
        self._config = config
        self._correlation_id = correlation_id or uuid4()

    @property
    def correlation_id(self) -> UUID:
        return self._correlation_id

    def _context(
        self, operation: EnumInspectorOperation, target_name: str | None
    ) -> ModelInspectorErrorContext:
        return ModelInspectorErrorContext(
            operation=operation,
            target_name=target_name,
            correlation_id=self._correlation_id,
        )

    def _require_dsn(self) -> str:
        dsn = self._config.postgres_url
        if not dsn:
            raise InspectorConfigurationError(
                "POSTGRES_URL is not set in configuration",
                context=self._context(EnumInspectorOperation.CONNECT, None),
            )
        return dsn

    def _postgres_connection(self, dsn: str) -> PostgresConnectionContext:
        return PostgresConnectionContext(
            dsn=dsn,
            timeout=self._config.connect_timeout_seconds,
        )

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[asyncpg.Connection]:
        """Open a connection, translating failures into inspector errors."""
        dsn = self._require_dsn()
        sanitized = sanitize_dsn(dsn)
        context = self._context(EnumInspectorOperation.CONNECT, sanitized)

        async with AsyncExitStack() as stack:
            try:
                conn = await stack.enter_async_context(self._postgres_connection(dsn))
            except TimeoutError as e:
                logger.warning(
                    "Connection to %s timed out",
                    sanitized,
                    extra={"correlation_id": str(self._correlation_id)},
                )
                raise InspectorTimeoutError(
                    f"Connection timed out to {sanitized}",
                    context=context,
                    timeout_seconds=self._config.connect_timeout_seconds,
                ) from e
            except Exception as e:
                logger.warning(
                    "Connection to %s failed: %s",
                    sanitized,
                    type(e).__name__,
                    extra={"correlation_id": str(self._correlation_id)},
                )
                raise InspectorConnectionError(
                    f"Error connecting to database {sanitized}: "
                    f"{sanitize_error_message(e)}",
                    context=context,
                ) from e

            logger.debug(
                "Connected to %s",
                sanitized,
                extra={"correlation_id": str(self._correlation_id)},
            )
            yield conn

    async def _fetch(
        self, conn: asyncpg.Connection, label: str, query: str
    ) -> list[asyncpg.Record]:
        try:
            return list(await conn.fetch(query))
        except Exception as e:
            raise InspectorQueryError(
                f"Error querying {label}: {sanitize_error_message(e)}",
                context=self._context(EnumInspectorOperation.QUERY, label),
            ) from e

    def _to_models(
        self,
        rows: Iterable[Mapping[str, object]],
        model: type[ModelT],
        label: str,
    ) -> list[ModelT]:
        results: list[ModelT] = []
        for index, row in enumerate(rows):
            try:
                results.append(model.model_validate(dict(row)))
            except ValidationError as e:
                logger.warning(
                    "Skipping %s row %d: %d validation error(s)",
                    label,
                    index,
                    e.error_count(),
                    extra={"correlation_id": str(self._correlation_id)},
                )
        return results

    async def _list(
        self, label: str, query: str, model: type[ModelT]
    ) -> list[ModelT]:
        async with self._connect() as conn:
            rows = await self._fetch(conn, label, query)
        return self._to_models(rows, model, label)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def fetch_connection_info(self) -> ModelConnectionInfo:
        """Collect server-side metadata about the connection.

        A failing query leaves its field None instead of raising.
        """
        values: dict[str, str | None] = {}
        async with self._connect() as conn:
            for field_name, query in CONNECTION_INFO_QUERIES:
                try:
                    value = await conn.fetchval(query)
                except Exception as e:
                    logger.debug(
                        "Connection info query failed (%s): %s",
                        field_name,
                        sanitize_error_message(e),
                        extra={"correlation_id": str(self._correlation_id)},
                    )
                    continue
                values[field_name] = None if value is None else str(value)
        return ModelConnectionInfo(**values)

    async def list_tables(self) -> list[ModelTableInfo]:
        """List tables of the public schema with their column counts."""
        return await self._list("tables", TABLES_QUERY, ModelTableInfo)

    async def list_tenants(self) -> list[ModelTenant]:
        """List all tenants ordered by name."""
        return await self._list("tenants", TENANTS_QUERY, ModelTenant)

    async def list_roles(self) -> list[ModelRole]:
        """List all roles ordered by name."""
        return await self._list("roles", ROLES_QUERY, ModelRole)

    async def list_users(self) -> list[ModelUser]:
        """List all users ordered by username."""
        return await self._list("users", USERS_QUERY, ModelUser)


__all__: list[str] = [
    "CONNECTION_INFO_QUERIES",
    "DatabaseInspector",
    "ROLES_QUERY",
    "TABLES_QUERY",
    "TENANTS_QUERY",
    "USERS_QUERY",
]
