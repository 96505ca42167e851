"""Command line interface for svg-text2chunks."""

from svg_text2chunks.cli.main import cli

__all__ = ["cli"]
