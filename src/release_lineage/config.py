"""Configuration loader for release lineage validation.

Settings are read from a JSON file. Every key is optional:

- ``doNotUseMarker``: label marker of releases excluded from validation
- ``managedContainerOption``: container option that marks a managed package
- ``ignoredFamilies``: package names never validated

Without an explicit path or ``RELEASE_LINEAGE_CONFIG`` the built-in defaults
are used.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .documents import DEFAULT_MANAGED_OPTION
from .lineage import DEFAULT_DO_NOT_USE_MARKER

CONFIG_PATH_ENV_VAR = "RELEASE_LINEAGE_CONFIG"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    do_not_use_marker: str = DEFAULT_DO_NOT_USE_MARKER
    managed_container_option: str = DEFAULT_MANAGED_OPTION
    ignored_families: frozenset[str] = frozenset()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating each present key."""
        marker = data.get("doNotUseMarker", DEFAULT_DO_NOT_USE_MARKER)
        if not isinstance(marker, str) or not marker:
            raise ConfigError("'doNotUseMarker' must be a non-empty string")

        option = data.get("managedContainerOption", DEFAULT_MANAGED_OPTION)
        if not isinstance(option, str) or not option:
            raise ConfigError("'managedContainerOption' must be a non-empty string")

        ignored = data.get("ignoredFamilies", [])
        if not isinstance(ignored, list) or any(
            not isinstance(name, str) or not name for name in ignored
        ):
            raise ConfigError("'ignoredFamilies' must be an array of non-empty strings")

        return cls(
            do_not_use_marker=marker,
            managed_container_option=option,
            ignored_families=frozenset(ignored),
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. RELEASE_LINEAGE_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON file.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return Settings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    return Settings.from_dict(data)
