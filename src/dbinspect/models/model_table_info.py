# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Table listing row."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelTableInfo(BaseModel):
    """One table of the public schema with its column count."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    table_schema: str = Field(..., description="Schema the table belongs to")
    table_name: str = Field(..., description="Table name")
    column_count: int = Field(..., ge=0, description="Number of columns")


__all__ = ["ModelTableInfo"]
