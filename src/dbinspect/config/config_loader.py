# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration loading for dbinspect.

Resolution order (later wins):
    1. Model defaults.
    2. ``config.json`` in the working directory, or the file given with
       ``--config``.
    3. Environment variables listed in :data:`ENV_OVERRIDES`.

A missing default ``config.json`` only logs a warning so the tool still
works from environment variables alone. Every other problem raises
:class:`InspectorConfigurationError`.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from dbinspect.config.model_inspector_config import ModelInspectorConfig
from dbinspect.enums import EnumInspectorOperation
from dbinspect.errors import InspectorConfigurationError, ModelInspectorErrorContext

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME: Final[str] = "config.json"

# Environment variable -> settings key.
ENV_OVERRIDES: Final[dict[str, str]] = {
    "POSTGRES_URL": "postgres_url",
    "DBINSPECT_USERNAME": "username",
    "DBINSPECT_DEBUG": "debug",
    "DBINSPECT_CONNECT_TIMEOUT": "connect_timeout_seconds",
}


def _config_error(message: str, path: Path) -> InspectorConfigurationError:
    context = ModelInspectorErrorContext(
        operation=EnumInspectorOperation.LOAD_CONFIG,
        target_name=str(path),
    )
    return InspectorConfigurationError(message, context=context)


def _read_config_file(path: Path) -> dict[str, object]:
    """Read a JSON object from ``path`` with lower-cased keys."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise _config_error(f"Error reading config file {path}: {e}", path) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise _config_error(f"Error reading config file {path}: {e}", path) from e

    if not isinstance(data, dict):
        raise _config_error(
            f"Config file {path} must contain a JSON object, "
            f"got {type(data).__name__}",
            path,
        )
    return {str(key).lower(): value for key, value in data.items()}


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ModelInspectorConfig:
    """Load and validate the inspector configuration.

    Args:
        config_path: Explicit config file. When None, ``config.json`` in the
            current working directory is used if it exists.
        environ: Environment mapping, ``os.environ`` by default.

    Returns:
        The validated, frozen configuration.

    Raises:
        InspectorConfigurationError: If an explicit file is missing, a file
            cannot be read or parsed, or a value fails validation.
    """
    env = os.environ if environ is None else environ
    explicit = config_path is not None
    path = Path(config_path) if explicit else Path.cwd() / DEFAULT_CONFIG_FILENAME

    data: dict[str, object] = {}
    if path.is_file():
        data = _read_config_file(path)
        logger.debug("Loaded config file %s (%d keys)", path, len(data))
    elif explicit:
        raise _config_error(f"Config file not found: {path}", path)
    else:
        logger.warning(
            "No %s file found in %s; using environment variables and defaults",
            DEFAULT_CONFIG_FILENAME,
            path.parent,
        )

    for env_name, key in ENV_OVERRIDES.items():
        value = env.get(env_name)
        if value:
            data[key] = value
            logger.debug("Config key %s overridden by %s", key, env_name)

    try:
        return ModelInspectorConfig.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        )
        raise _config_error(f"Invalid configuration values: {fields}", path) from e


__all__: list[str] = [
    "DEFAULT_CONFIG_FILENAME",
    "ENV_OVERRIDES",
    "load_config",
]
