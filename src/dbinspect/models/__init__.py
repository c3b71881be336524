# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Immutable result models returned by the database inspector."""

from dbinspect.models.model_connection_info import ModelConnectionInfo
from dbinspect.models.model_connection_string_fields import (
    ModelConnectionStringFields,
)
from dbinspect.models.model_directory_entries import (
    ModelRole,
    ModelTenant,
    ModelUser,
)
from dbinspect.models.model_table_info import ModelTableInfo

__all__: list[str] = [
    "ModelConnectionInfo",
    "ModelConnectionStringFields",
    "ModelRole",
    "ModelTableInfo",
    "ModelTenant",
    "ModelUser",
]
