"""Configuration for svg-text2chunks.

Settings are read from a YAML file. Lookup order when no explicit path is
given:

1. ``./svg-text2chunks.yaml``
2. ``~/.config/svg-text2chunks/config.yaml``

If neither exists, the built-in defaults are used.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from svg_text2chunks.exceptions import ConfigError
from svg_text2chunks.log import LOG_LEVELS

DEFAULT_FONT_FAMILY = "Times New Roman"
DEFAULT_FONT_SIZE = 12.0

# Non-positive font sizes: "skip" drops the span, "reject" raises.
FONT_SIZE_POLICIES = ("skip", "reject")

CONFIG_FILENAME = "svg-text2chunks.yaml"


@dataclass
class Config:
    """Conversion settings."""

    default_font_family: str = DEFAULT_FONT_FAMILY
    default_font_size: float = DEFAULT_FONT_SIZE
    font_size_policy: str = "skip"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check field values, raising ConfigError on the first problem."""
        if not isinstance(self.default_font_family, str):
            raise ConfigError(
                "default_font_family: expected string, "
                f"got {type(self.default_font_family).__name__}"
            )
        if not self.default_font_family.strip():
            raise ConfigError("default_font_family: must not be empty")

        size = self.default_font_size
        if isinstance(size, bool) or not isinstance(size, (int, float)):
            raise ConfigError(
                f"default_font_size: expected number, got {type(size).__name__}"
            )
        if size <= 0:
            raise ConfigError("default_font_size: must be greater than 0")
        self.default_font_size = float(size)

        if self.font_size_policy not in FONT_SIZE_POLICIES:
            raise ConfigError(
                f"font_size_policy: must be one of {', '.join(FONT_SIZE_POLICIES)}",
                details={"value": self.font_size_policy},
            )

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level: must be one of {', '.join(LOG_LEVELS)}",
                details={"value": self.log_level},
            )
        self.log_level = self.log_level.upper()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown setting(s): {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration from ``path`` or the default locations.

        Raises:
            FileNotFoundError: If an explicit path does not exist.
            ConfigError: If the file is not valid YAML or has bad values.
        """
        if path is not None:
            config_path = Path(path)
            if not config_path.is_file():
                raise FileNotFoundError(f"Config file not found: {config_path}")
        else:
            config_path = next(
                (p for p in cls.default_locations() if p.is_file()), None
            )
            if config_path is None:
                return cls()

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config root must be a mapping, got {type(data).__name__}",
                details={"path": str(config_path)},
            )
        return cls.from_dict(data)

    @staticmethod
    def default_locations() -> list[Path]:
        return [
            Path.cwd() / CONFIG_FILENAME,
            Path.home() / ".config" / "svg-text2chunks" / "config.yaml",
        ]
