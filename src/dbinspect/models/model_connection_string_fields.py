# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Display fields extracted from a raw connection string."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelConnectionStringFields(BaseModel):
    """SSL mode, host and port as shown by ``dbinspect db``.

    Values are display strings, so a missing field holds its display
    default (``"not specified"`` or ``"5432 (default)"``) rather than None.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ssl_mode: str = Field(..., description="Value of the sslmode query parameter")
    host: str = Field(..., description="Host between '@' and the port or path")
    port: str = Field(..., description="Port between the host and the path")


__all__ = ["ModelConnectionStringFields"]
