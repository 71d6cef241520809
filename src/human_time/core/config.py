"""Configuration loading and management."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from human_time.core.clock import SystemClock, detect_timezone
from human_time.core.exceptions import ConfigError

CONFIG_NAME = "human-time.toml"
PYPROJECT_SECTION = "human-time"

OUTPUT_FORMATS = ("iso", "rfc3339", "epoch")


@dataclass
class HumanTimeConfig:
    """Loaded configuration."""

    timezone: str | None = None
    anchored: bool = False
    format: str = "iso"

    _source_path: Path | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output format: {self.format!r}. Available: {list(OUTPUT_FORMATS)}"
            )
        if self.timezone is not None and not isinstance(self.timezone, str):
            raise ConfigError(f"'timezone' must be a zone name, got {self.timezone!r}")
        if not isinstance(self.anchored, bool):
            raise ConfigError(f"'anchored' must be true or false, got {self.anchored!r}")

    @property
    def source_path(self) -> Path | None:
        return self._source_path

    def make_clock(self) -> SystemClock:
        """Build a system clock in the configured zone.

        The HUMAN_TIME_TZ environment variable overrides ``timezone``.
        """
        return SystemClock(detect_timezone(self))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HumanTimeConfig:
        unknown = set(data) - {"timezone", "anchored", "format"}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(
            timezone=data.get("timezone"),
            anchored=data.get("anchored", False),
            format=data.get("format", "iso"),
        )


def find_config_file() -> Path | None:
    """Find configuration file in priority order.

    Search order:
    1. ./human-time.toml (current directory)
    2. ./pyproject.toml [tool.human-time] section
    3. Git repository root human-time.toml
    4. ~/.config/human-time/config.toml
    """
    cwd = Path.cwd()
    if (cwd / CONFIG_NAME).exists():
        return cwd / CONFIG_NAME

    if (cwd / "pyproject.toml").exists():
        try:
            with open(cwd / "pyproject.toml", "rb") as f:
                pyproject = tomllib.load(f)
            if PYPROJECT_SECTION in pyproject.get("tool", {}):
                return cwd / "pyproject.toml"
        except tomllib.TOMLDecodeError:
            pass

    git_root = _find_git_root(cwd)
    if git_root and (git_root / CONFIG_NAME).exists():
        return git_root / CONFIG_NAME

    user_config = user_config_path()
    if user_config.exists():
        return user_config

    return None


def user_config_path() -> Path:
    return Path.home() / ".config" / "human-time" / "config.toml"


def _find_git_root(start: Path) -> Path | None:
    """Find git repository root."""
    current = start.resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return None


def load_config(path: Path | str | None = None) -> HumanTimeConfig:
    """Load configuration from file.

    Args:
        path: Explicit config path or None to auto-discover

    Raises:
        ConfigError: If the file is not valid TOML or holds bad values.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        return HumanTimeConfig()

    path = Path(path)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get(PYPROJECT_SECTION, {})

    config = HumanTimeConfig.from_dict(data)
    config._source_path = path

    return config


# Global config cache
_cached_config: HumanTimeConfig | None = None


def get_config() -> HumanTimeConfig:
    """Get the global configuration (cached)."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(path: Path | str | None = None) -> HumanTimeConfig:
    """Reload configuration (clears cache)."""
    global _cached_config
    _cached_config = load_config(path)
    return _cached_config
