# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration loading for dbinspect."""

from dbinspect.config.config_loader import (
    DEFAULT_CONFIG_FILENAME,
    ENV_OVERRIDES,
    load_config,
)
from dbinspect.config.model_inspector_config import ModelInspectorConfig

__all__: list[str] = [
    "DEFAULT_CONFIG_FILENAME",
    "ENV_OVERRIDES",
    "ModelInspectorConfig",
    "load_config",
]
