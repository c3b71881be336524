# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""dbinspect - command-line inspection tool for PostgreSQL databases.

Prints connection metadata, lists tables, tenants, roles and users, and
dumps the loaded configuration.

Key Components:
    - utils.util_connection_string: SSL mode, host and port extraction from
      a raw connection URL, with display defaults
    - config: config.json + environment loading into a frozen settings model
    - inspector.DatabaseInspector: fixed inspection queries over asyncpg
    - cli.commands: click command tree rendered with rich
"""

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
