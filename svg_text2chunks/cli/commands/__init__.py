"""CLI commands for svg-text2chunks."""

from svg_text2chunks.cli.commands.fonts import fonts
from svg_text2chunks.cli.commands.inspect import inspect

__all__ = ["inspect", "fonts"]
