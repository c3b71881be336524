# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tenant, role and user rows.

The ``id`` columns may be UUID, integer or text depending on the schema;
they are normalized to strings since they are only ever displayed.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ModelDirectoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., description="Primary key rendered as text")
    created_at: datetime = Field(..., description="Creation timestamp")

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class ModelTenant(_ModelDirectoryEntry):
    """Row of the ``tenants`` table."""

    name: str = Field(..., description="Tenant name")


class ModelRole(_ModelDirectoryEntry):
    """Row of the ``roles`` table."""

    name: str = Field(..., description="Role name")
    description: str | None = Field(default=None, description="Role description")


class ModelUser(_ModelDirectoryEntry):
    """Row of the ``users`` table."""

    username: str = Field(..., description="Login name")
    email: str | None = Field(default=None, description="Email address")


__all__ = ["ModelRole", "ModelTenant", "ModelUser"]
