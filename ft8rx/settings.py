"""Locating and reading the INI settings file."""

from __future__ import annotations

import configparser
import os
from pathlib import Path
from typing import Any

DEFAULT_INI = ".ft8rx.ini"
PRESETS_FILE = ".ft8-presets.xml"
FALLBACK_PATH = "/tmp/xxx"


def full_path_for(value: str, suffix: str) -> str:
    """Expand a file name relative to the home directory, adding the suffix."""
    if value == "":
        return FALLBACK_PATH
    if value.startswith("/"):
        return value
    name = os.path.join(str(Path.home()), value)
    if not name.endswith(suffix):
        name += suffix
    return os.path.normpath(name)


def default_ini_path() -> str:
    """The settings file used when none is given."""
    return os.path.join(str(Path.home()), DEFAULT_INI)


class Settings:
    """Grouped key/value settings persisted as an INI file."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else Path(default_ini_path())
        self._parser = configparser.ConfigParser(interpolation=None)
        self._parser.optionxform = str  # keep key case
        if self.path.is_file():
            self._parser.read(self.path, encoding="utf-8")

    def __enter__(self) -> "Settings":
        return self

    def __exit__(self, *exc: object) -> None:
        self.sync()

    def get(self, group: str, key: str, default: Any = None) -> Any:
        """Return the stored value, converted to the type of the default."""
        if not self._parser.has_option(group, key):
            return default
        raw = self._parser.get(group, key)
        try:
            if isinstance(default, bool):
                return raw.strip().lower() in ("1", "true", "yes", "on")
            if isinstance(default, int):
                return int(raw)
            if isinstance(default, float):
                return float(raw)
        except ValueError:
            return default
        return raw

    def set(self, group: str, key: str, value: Any) -> None:
        """Store a value under the group."""
        if not self._parser.has_section(group):
            self._parser.add_section(group)
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._parser.set(group, key, str(value))

    def sync(self) -> None:
        """Write all settings to the file."""
        if self.path.parent and not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            self._parser.write(fh)