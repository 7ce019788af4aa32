"""Settings document: the source and target roots of a mirror run."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigError

DEFAULT_SETTINGS_FILE = "appsettings.json"


def _expand(p: str) -> str:
    return os.path.expandvars(os.path.expanduser(p))


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one run.

    Attributes:
        source: Root directory to mirror from.
        target: Root directory to mirror onto.
        ignore: Extra ignore names or gitignore-style patterns.
        log_dir: Directory for daily log files, or ``None`` for the default.
    """
    source: str
    target: str
    ignore: list[str] = field(default_factory=list)
    log_dir: str | None = None

    @staticmethod
    def from_dict(data: object) -> Settings:
        if not isinstance(data, dict):
            raise ConfigError("settings must be a JSON object")
        values = {}
        for key in ("source", "target"):
            value = data.get(key)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"settings field '{key}' must be a non-empty string")
            values[key] = _expand(value)

        ignore = data.get("ignore", [])
        if not isinstance(ignore, list) or not all(isinstance(i, str) for i in ignore):
            raise ConfigError("settings field 'ignore' must be a list of strings")

        log_dir = data.get("log_dir")
        if log_dir is not None:
            if not isinstance(log_dir, str):
                raise ConfigError("settings field 'log_dir' must be a string")
            log_dir = _expand(log_dir)

        return Settings(values["source"], values["target"], list(ignore), log_dir)


def load_settings(path: str | Path = DEFAULT_SETTINGS_FILE) -> Settings:
    """Read and validate the JSON settings document at *path*.

    Raises:
        ConfigError: If the file cannot be read or does not hold valid settings.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read settings file {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in settings file {path}: {exc}") from exc
    return Settings.from_dict(data)
