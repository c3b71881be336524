# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Server-side metadata about the current database connection."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelConnectionInfo(BaseModel):
    """Results of the connection metadata queries.

    Each field is None when its query failed; a failed query never aborts
    the others.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    database_name: str | None = Field(
        default=None, description="SELECT current_database()"
    )
    version: str | None = Field(default=None, description="SELECT version()")
    connected_user: str | None = Field(default=None, description="SELECT current_user")
    server_encoding: str | None = Field(
        default=None, description="SHOW server_encoding"
    )
    timezone: str | None = Field(default=None, description="SHOW timezone")


__all__ = ["ModelConnectionInfo"]
