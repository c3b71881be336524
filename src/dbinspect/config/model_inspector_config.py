# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Settings model for the database inspector.

Keys in ``config.json`` are matched case-insensitively, so ``POSTGRES_URL``
and ``postgres_url`` both populate :attr:`ModelInspectorConfig.postgres_url`.
Keys the model does not know about are kept as extras so that
``dbinspect config`` can show everything that was loaded.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__: list[str] = [
    "ModelInspectorConfig",
]


class ModelInspectorConfig(BaseModel):
    """Loaded inspector configuration.

    Attributes:
        postgres_url: PostgreSQL connection string used by every query command.
        username: Operator name, shown in debug output only.
        debug: Whether ``dbinspect config`` prints its debug section.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    postgres_url: str = Field(default="", description="PostgreSQL connection string")
    username: str = Field(default="", description="Operator name")
    debug: bool = Field(default=False, description="Enable debug output")
    connect_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Connection timeout in seconds"
    )

    def all_settings(self) -> dict[str, object]:
        """Return every setting, extras included, keyed by lower-case name."""
        settings = {key.lower(): value for key, value in self.model_dump().items()}
        return dict(sorted(settings.items()))
