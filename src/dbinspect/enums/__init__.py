# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the dbinspect package."""

from dbinspect.enums.enum_inspector_operation import EnumInspectorOperation

__all__: list[str] = [
    "EnumInspectorOperation",
]
