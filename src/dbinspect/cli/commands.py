# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""dbinspect CLI Commands.

Provides the command-line interface for inspecting a PostgreSQL database:

- ``dbinspect db``: connection metadata and connection string properties
- ``dbinspect db tables``: tables of the public schema
- ``dbinspect tenants`` / ``roles`` / ``users``: directory listings
- ``dbinspect config``: dump the loaded configuration

Usage:
    ```bash
    dbinspect db
    dbinspect --config ./staging.json tenants
    POSTGRES_URL=postgres://app:secret@db:5432/app dbinspect users
    ```
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from collections.abc import Awaitable, Callable
from datetime import datetime
from pathlib import Path
from typing import Final

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dbinspect.config import ModelInspectorConfig, load_config
from dbinspect.errors import InspectorConnectionError, InspectorError
from dbinspect.inspector import DatabaseInspector
from dbinspect.models import (
    ModelConnectionInfo,
    ModelRole,
    ModelTableInfo,
    ModelTenant,
    ModelUser,
)
from dbinspect.utils import (
    extract_connection_fields,
    extract_ssl_mode,
    is_sensitive_key,
    sanitize_dsn,
)

logger = logging.getLogger(__name__)
console = Console()

_TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
_REDACTED: Final[str] = "****"
_VALID_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


# =============================================================================
# Logging
# =============================================================================


def configure_logging() -> None:
    """Configure root logging from ``DBINSPECT_LOG_LEVEL``.

    Defaults to WARNING so that normal command output is not interleaved
    with log lines. Invalid levels fall back to WARNING with a notice on
    stderr.
    """
    log_level = os.getenv("DBINSPECT_LOG_LEVEL", "WARNING").upper()
    if log_level not in _VALID_LOG_LEVELS:
        print(
            f"Warning: Invalid DBINSPECT_LOG_LEVEL '{log_level}', using WARNING. "
            f"Valid levels: {', '.join(sorted(_VALID_LOG_LEVELS))}",
            file=sys.stderr,
        )
        log_level = "WARNING"

    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# =============================================================================
# Command Group
# =============================================================================


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: config.json in the working directory)",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Inspect a PostgreSQL database: connection, tables, tenants, roles, users."""
    if verbose:
        logging.getLogger("dbinspect").setLevel(logging.DEBUG)
    ctx.obj = {"config_path": config_path}


def _load_config(ctx: click.Context) -> ModelInspectorConfig:
    obj = ctx.find_root().obj or {}
    return load_config(obj.get("config_path"))


def _print_error(error: InspectorError) -> None:
    logger.debug("Command failed: %s", error.to_dict())
    console.print(f"[red]Error: {escape(error.message)}[/red]")
    if error.correlation_id is not None:
        console.print(f"[dim](correlation_id={error.correlation_id})[/dim]")


def _run_command(
    ctx: click.Context,
    run: Callable[[ModelInspectorConfig], Awaitable[None]],
    on_connection_error: Callable[[ModelInspectorConfig], None] | None = None,
) -> None:
    """Load config and run an async command body with uniform error output.

    When the database cannot be reached, ``on_connection_error`` still gets
    the loaded config so the command can print what it knows offline.
    """
    config: ModelInspectorConfig | None = None
    try:
        config = _load_config(ctx)
        asyncio.run(run(config))
    except SystemExit:
        raise
    except InspectorError as e:
        _print_error(e)
        if (
            isinstance(e, InspectorConnectionError)
            and on_connection_error is not None
            and config is not None
        ):
            on_connection_error(config)
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Error: {type(e).__name__}[/red]")
        raise SystemExit(1)


def _format_timestamp(value: datetime | None) -> str:
    return value.strftime(_TIMESTAMP_FORMAT) if value else "-"


def _print_total(label: str, count: int, empty_message: str) -> None:
    if count == 0:
        console.print(f"[yellow]{empty_message}[/yellow]")
    else:
        console.print(f"\n{label}: {count}")


# =============================================================================
# db
# =============================================================================


def _print_connection_info(info: ModelConnectionInfo) -> None:
    console.print("[bold cyan]Database Connection Information:[/bold cyan]")
    console.print("-------------------------------")
    lines = (
        ("Database Name", info.database_name),
        ("Database Version", info.version),
        ("Connected User", info.connected_user),
        ("Server Encoding", info.server_encoding),
        ("Timezone", info.timezone),
    )
    for label, value in lines:
        if value is not None:
            console.print(f"{label}: {escape(value)}")


def _print_connection_string_properties(config: ModelInspectorConfig) -> None:
    """Print SSL mode, host and port parsed from the configured URL.

    Host and port come from the sanitized URL, since a URL with a password
    but no port makes the port lookup land inside the credentials.
    """
    fields = extract_connection_fields(sanitize_dsn(config.postgres_url))
    console.print("\n[bold cyan]Connection String Properties:[/bold cyan]")
    console.print("----------------------------")
    console.print(f"SSL Mode: {escape(extract_ssl_mode(config.postgres_url))}")
    console.print(f"Host: {escape(fields.host)}")
    console.print(f"Port: {escape(fields.port)}")


async def _run_db_info(config: ModelInspectorConfig) -> None:
    inspector = DatabaseInspector(config)
    info = await inspector.fetch_connection_info()
    _print_connection_info(info)
    _print_connection_string_properties(config)


def _render_tables(tables: list[ModelTableInfo]) -> None:
    if tables:
        table = Table(title="Database Tables")
        table.add_column("Schema", style="dim")
        table.add_column("Table Name", style="cyan")
        table.add_column("Columns", justify="right")
        for info in tables:
            table.add_row(info.table_schema, info.table_name, str(info.column_count))
        console.print(table)
    _print_total(
        "Total tables found", len(tables), "No tables found in the public schema."
    )


async def _run_db_tables(config: ModelInspectorConfig) -> None:
    inspector = DatabaseInspector(config)
    _render_tables(await inspector.list_tables())


@cli.group("db", invoke_without_command=True)
@click.pass_context
def db(ctx: click.Context) -> None:
    """Display database connection information.

    Shows the database name, server version, connected user, encoding and
    timezone, followed by the SSL mode, host and port found in POSTGRES_URL.
    """
    if ctx.invoked_subcommand is None:
        _run_command(
            ctx,
            _run_db_info,
            on_connection_error=_print_connection_string_properties,
        )


@db.command("tables")
@click.pass_context
def db_tables(ctx: click.Context) -> None:
    """List all tables in the public schema with their column counts."""
    _run_command(ctx, _run_db_tables)


# =============================================================================
# tenants / roles / users
# =============================================================================


def _render_tenants(tenants: list[ModelTenant]) -> None:
    if tenants:
        table = Table(title="Tenants")
        table.add_column("ID", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Created At", style="dim")
        for tenant in tenants:
            table.add_row(tenant.id, tenant.name, _format_timestamp(tenant.created_at))
        console.print(table)
    _print_total("Total tenants", len(tenants), "No tenants found.")


def _render_roles(roles: list[ModelRole]) -> None:
    if roles:
        table = Table(title="Roles")
        table.add_column("ID", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Description")
        table.add_column("Created At", style="dim")
        for role in roles:
            table.add_row(
                role.id,
                role.name,
                role.description or "-",
                _format_timestamp(role.created_at),
            )
        console.print(table)
    _print_total("Total roles", len(roles), "No roles found.")


def _render_users(users: list[ModelUser]) -> None:
    if users:
        table = Table(title="Users")
        table.add_column("ID", style="dim")
        table.add_column("Username", style="cyan")
        table.add_column("Email")
        table.add_column("Created At", style="dim")
        for user in users:
            table.add_row(
                user.id,
                user.username,
                user.email or "-",
                _format_timestamp(user.created_at),
            )
        console.print(table)
    _print_total("Total users", len(users), "No users found.")


async def _run_tenants(config: ModelInspectorConfig) -> None:
    _render_tenants(await DatabaseInspector(config).list_tenants())


async def _run_roles(config: ModelInspectorConfig) -> None:
    _render_roles(await DatabaseInspector(config).list_roles())


async def _run_users(config: ModelInspectorConfig) -> None:
    _render_users(await DatabaseInspector(config).list_users())


@cli.command("tenants")
@click.pass_context
def tenants(ctx: click.Context) -> None:
    """List all tenants in the database."""
    _run_command(ctx, _run_tenants)


@cli.command("roles")
@click.pass_context
def roles(ctx: click.Context) -> None:
    """List all roles in the database."""
    _run_command(ctx, _run_roles)


@cli.command("users")
@click.pass_context
def users(ctx: click.Context) -> None:
    """List all users in the database."""
    _run_command(ctx, _run_users)


# =============================================================================
# config
# =============================================================================


def _display_value(key: str, value: object) -> str:
    if is_sensitive_key(key):
        return _REDACTED
    if isinstance(value, str):
        return sanitize_dsn(value)
    return str(value)


@cli.command("config")
@click.option("--key", "-k", default=None, help="Show only this configuration key")
@click.pass_context
def config_cmd(ctx: click.Context, key: str | None) -> None:
    """Show the loaded configuration.

    Configuration is read from config.json in the working directory (or the
    file given with --config) and overridden by POSTGRES_URL,
    DBINSPECT_USERNAME, DBINSPECT_DEBUG and DBINSPECT_CONNECT_TIMEOUT.
    Passwords in URLs and values of credential-like keys are masked.
    """
    try:
        config = _load_config(ctx)
    except InspectorError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise SystemExit(1)

    settings = config.all_settings()
    if key is not None:
        normalized = key.lower()
        if normalized not in settings:
            console.print(f"[red]Unknown configuration key: {escape(key)}[/red]")
            raise SystemExit(1)
        settings = {normalized: settings[normalized]}

    console.print("[bold]Current Configuration:[/bold]")
    console.print("---------------------")
    for name, value in settings.items():
        console.print(f"{escape(name)}: {escape(_display_value(name, value))}")

    if config.debug:
        console.print("\n[bold]Debug Information:[/bold]")
        console.print("----------------")
        console.print(f"Postgres URL: {escape(sanitize_dsn(config.postgres_url))}")
        console.print(f"Username: {escape(config.username)}")
        console.print(f"Debug Mode: {config.debug}")


def main() -> None:
    """Entry point for the dbinspect CLI."""
    configure_logging()
    cli()


__all__ = ["cli", "configure_logging", "main"]


if __name__ == "__main__":
    main()
