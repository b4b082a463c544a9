"""Settings loader.

Reads optional settings from a JSON file and validates it against
``SETTINGS_SCHEMA``. Every field is optional; a missing default file yields the
built-in defaults.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator


DEFAULT_CONFIG_FILENAME = "npm-workspaces.json"
CONFIG_PATH_ENV_VAR = "NPM_WORKSPACES_CONFIG"
PROBE_TIMEOUT_ENV_VAR = "NPM_WORKSPACES_PROBE_TIMEOUT"
DEFAULT_PROBE_TIMEOUT = 10.0

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "versionProbeTimeout": {"type": "number", "exclusiveMinimum": 0},
        "extraWorkspaceIgnores": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
    },
}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    version_probe_timeout: float = DEFAULT_PROBE_TIMEOUT
    extra_workspace_ignores: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        return cls(
            version_probe_timeout=float(
                data.get("versionProbeTimeout", DEFAULT_PROBE_TIMEOUT)
            ),
            extra_workspace_ignores=tuple(data.get("extraWorkspaceIgnores", ())),
        )


def _resolve_config_path(path: Path | str | None = None) -> tuple[Path, bool]:
    """Resolve the configuration file path and whether it was asked for.

    Priority:
    1. Explicit path argument
    2. NPM_WORKSPACES_CONFIG environment variable
    3. npm-workspaces.json in the current directory
    """
    if path is not None:
        return Path(path), True

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path), True

    return Path.cwd() / DEFAULT_CONFIG_FILENAME, False


def _validate(data: Any) -> None:
    validator = Draft202012Validator(SETTINGS_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        first = errors[0]
        pointer = "/".join(str(p) for p in first.path)
        raise ConfigError(f"Invalid configuration at {pointer or '<root>'}: {first.message}")


def _apply_env_overrides(settings: Settings) -> Settings:
    raw_timeout = os.environ.get(PROBE_TIMEOUT_ENV_VAR, "").strip()
    if not raw_timeout:
        return settings
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ConfigError(f"{PROBE_TIMEOUT_ENV_VAR} must be a number, got {raw_timeout!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"{PROBE_TIMEOUT_ENV_VAR} must be positive, got {raw_timeout!r}")
    return Settings(
        version_probe_timeout=timeout,
        extra_workspace_ignores=settings.extra_workspace_ignores,
    )


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON file.

    Args:
        path: Optional path to the config file. If not provided, uses the
            NPM_WORKSPACES_CONFIG env var or falls back to npm-workspaces.json.

    Returns:
        A Settings object; defaults when no file was requested and none exists.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path, requested = _resolve_config_path(path)

    if not config_path.exists():
        if requested:
            raise ConfigError(f"Configuration file not found: {config_path}")
        return _apply_env_overrides(Settings())

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    _validate(data)
    return _apply_env_overrides(Settings.from_dict(data))
