"""Exception hierarchy for svg-text2chunks."""

from __future__ import annotations

from typing import Any


class Text2ChunksError(Exception):
    """Base class for all svg-text2chunks errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class SVGParseError(Text2ChunksError):
    """Raised when an SVG document cannot be parsed."""


class ConfigError(Text2ChunksError):
    """Raised when a configuration file or value is invalid."""


class InvalidFontSizeError(Text2ChunksError):
    """Raised when a span resolves to a non-positive font size."""

    def __init__(self, size: float, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Font size must be positive, got {size}", details)
        self.size = size
