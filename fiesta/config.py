"""Server configuration stored in a TOML file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_PATH = "config.toml"

_GENERAL_SECTION = "General"
_DATABASE_SECTION = "Database"


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return the table called ``name``, matching the name case-insensitively."""
    for key, value in data.items():
        if key.lower() == name.lower():
            if not isinstance(value, dict):
                raise ValueError(f"section {key!r} must be a table")
            return value
    return {}


def _string(section: dict[str, Any], key: str, section_name: str) -> str:
    value = section.get(key, "")
    if not isinstance(value, str):
        raise ValueError(f"{section_name}.{key} must be a string, got {type(value).__name__}")
    return value


@dataclass
class GeneralConfig:
    """Settings of the server itself."""

    address: str = ""


@dataclass
class DatabaseConfig:
    """Connection settings of the database."""

    address: str = ""
    username: str = ""
    password: str = ""


@dataclass
class Config:
    """The whole configuration."""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Return the configuration as nested tables, as written to the file."""
        return {
            _GENERAL_SECTION: {"address": self.general.address},
            _DATABASE_SECTION: {
                "address": self.database.address,
                "username": self.database.username,
                "password": self.database.password,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a configuration from nested tables; missing keys keep their defaults."""
        general = _section(data, _GENERAL_SECTION)
        database = _section(data, _DATABASE_SECTION)
        return cls(
            general=GeneralConfig(address=_string(general, "address", _GENERAL_SECTION)),
            database=DatabaseConfig(
                address=_string(database, "address", _DATABASE_SECTION),
                username=_string(database, "username", _DATABASE_SECTION),
                password=_string(database, "password", _DATABASE_SECTION),
            ),
        )


def load_config(path: str | Path = DEFAULT_PATH) -> Config:
    """Read the configuration from ``path``.

    When the file cannot be opened, an empty configuration is written there
    and returned. A file that is not valid TOML raises an error.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError:
        config = Config()
        path.write_bytes(tomli_w.dumps(config.to_dict()).encode("utf-8"))
        path.chmod(0o644)
        return config
    return Config.from_dict(tomllib.loads(raw.decode("utf-8")))