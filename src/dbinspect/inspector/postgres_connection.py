# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Short-lived PostgreSQL connection for one inspection command.

A command runs at most a handful of fixed queries, so no pool is created.
One ``asyncpg`` connection is opened when the command starts and released
when it ends.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import asyncpg

logger = logging.getLogger(__name__)


class PostgresConnectionContext:
    """Open one connection on enter and release it on exit.

    ``timeout`` bounds establishing the connection (wrapped in
    ``asyncio.wait_for``) and is also passed to asyncpg as
    ``command_timeout``, so a query stuck on a lock cannot hang the command.

    On exit the connection is closed gracefully within ``timeout``; if that
    fails it is terminated.

    Example:
        >>> async with PostgresConnectionContext(dsn, timeout=10.0) as conn:
        ...     name = await conn.fetchval("SELECT current_database()")
    """

    def __init__(self, dsn: str, timeout: float) -> None:
        self._dsn = dsn
        self._timeout = timeout
        self._conn: asyncpg.Connection | None = None

    async def __aenter__(self) -> asyncpg.Connection:
        import asyncpg as _asyncpg

        self._conn = await asyncio.wait_for(
            _asyncpg.connect(self._dsn, command_timeout=self._timeout),
            timeout=self._timeout,
        )
        return self._conn

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        conn, self._conn = self._conn, None
        if conn is None:
            return
        try:
            await conn.close(timeout=self._timeout)
        except Exception as e:
            logger.debug(
                "Graceful close failed (%s); terminating connection",
                type(e).__name__,
            )
            conn.terminate()


__all__: list[str] = [
    "PostgresConnectionContext",
]
