# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enum for the operations that can fail while inspecting a database."""

from __future__ import annotations

from enum import Enum

__all__: list[str] = [
    "EnumInspectorOperation",
]


class EnumInspectorOperation(str, Enum):
    """Operation being performed when an inspector error is raised."""

    LOAD_CONFIG = "load_config"
    CONNECT = "connect"
    QUERY = "query"
