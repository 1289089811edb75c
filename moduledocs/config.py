"""
config.py

Responsibility: Load optional YAML configuration into a typed, frozen model.

Precedence (highest first): CLI flags, the config file, built-in defaults. A project
without a config file behaves exactly like the default settings.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from moduledocs.errors import ModuleDocsError

CONFIG_FILE_NAME = "moduledocs.yaml"
DEFAULT_TASK_NAME = "SettingsGradleWbs"

_KNOWN_KEYS = ("project_name", "build_dir", "task_name")


class ConfigError(ModuleDocsError, ValueError):
    pass


@dataclass(frozen=True)
class Config:
    """Resolved settings for one invocation. None means "derive from the project"."""

    project_name: str | None = None
    build_dir: str | None = None
    task_name: str = DEFAULT_TASK_NAME

    def with_overrides(self, **overrides: str | None) -> Config:
        """
        Return a copy with every non-None override applied.
        """
        applied = {k: v for k, v in overrides.items() if v is not None}
        for key, value in applied.items():
            if key not in _KNOWN_KEYS:
                raise ConfigError(f"Unknown config key: {key}")
            if not value.strip():
                raise ConfigError(f"`{key}` must not be empty.")
        return replace(self, **applied)


def _coerce_str(data: dict[str, Any], key: str) -> str | None:
    if key not in data or data[key] is None:
        return None
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"`{key}` must be a string when provided.")
    value = value.strip()
    if not value:
        raise ConfigError(f"`{key}` must not be empty.")
    return value


def parse_config(text: str) -> Config:
    """
    Parse YAML text into a Config.

    Recognized top-level keys:
    - project_name: str (diagram root label)
    - build_dir: str (relative paths resolve against the project root)
    - task_name: str
    """
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping/object at the top level.")

    unknown = sorted(str(k) for k in data if k not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    return Config(
        project_name=_coerce_str(data, "project_name"),
        build_dir=_coerce_str(data, "build_dir"),
        task_name=_coerce_str(data, "task_name") or DEFAULT_TASK_NAME,
    )


def load_config(root_dir: str | Path, config_path: str | Path | None = None) -> Config:
    """
    Load config from config_path, or from `moduledocs.yaml` under root_dir if present.

    An explicit config_path must exist; the implicit project file is optional.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Config file does not exist: {path}")
    else:
        path = Path(root_dir) / CONFIG_FILE_NAME
        if not path.is_file():
            return Config()
    try:
        return parse_config(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {path}") from e
