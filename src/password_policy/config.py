from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from .passwords import DEFAULT_LENGTH, MIN_GENERATED_LENGTH


LOGGER = logging.getLogger(__name__)

CONFIG_DIR_NAME = "config"
SETTINGS_FILENAME = "password_policy.json"
SETTINGS_ENV_VAR = "PASSWORD_POLICY_SETTINGS"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    pass


def default_settings() -> dict[str, Any]:
    return {
        "generator": {
            "default_length": DEFAULT_LENGTH,
        },
        "logging": {
            "level": "WARNING",
        },
    }


def resolve_settings_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path).expanduser()
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.cwd() / CONFIG_DIR_NAME / SETTINGS_FILENAME


def load_json(path: Path, fallback: Any) -> Any:
    if not path.exists():
        return fallback
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (ValueError, OSError) as exc:
        LOGGER.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return fallback


def save_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


def load_settings(path: str | Path | None = None) -> dict[str, Any]:
    settings = default_settings()
    loaded = load_json(resolve_settings_path(path), {})
    if not isinstance(loaded, dict):
        LOGGER.warning("Settings file must contain a JSON object; using defaults")
        return settings
    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(settings.get(section), dict):
            settings[section].update(values)
        else:
            settings[section] = values
    return settings


def write_default_settings(path: str | Path | None = None, *, overwrite: bool = False) -> tuple[Path, bool]:
    target = resolve_settings_path(path)
    if target.exists() and not overwrite:
        return target, False
    try:
        save_json(target, default_settings())
    except OSError as exc:
        raise ConfigError(f"could not write settings file {target}: {exc}") from exc
    return target, True


def _section(settings: dict[str, Any], name: str) -> dict[str, Any]:
    section = settings.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"settings section '{name}' must be an object")
    return section


def generator_default_length(settings: dict[str, Any]) -> int:
    value = _section(settings, "generator").get("default_length", DEFAULT_LENGTH)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"generator.default_length must be an integer, got {value!r}")
    if value < MIN_GENERATED_LENGTH:
        raise ConfigError(f"generator.default_length must be at least {MIN_GENERATED_LENGTH}, got {value}")
    return value


def log_level(settings: dict[str, Any]) -> str:
    level = str(_section(settings, "logging").get("level", "WARNING")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level
