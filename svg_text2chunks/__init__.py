"""svg-text2chunks: Convert SVG text elements into positioned text chunks.

This library turns each ``<text>`` element into a rendering-ready model:
- Chunks anchored at explicit x/y positions
- Styled runs with resolved font, fill, stroke and decoration
- Text-anchor taken from the node that opened each chunk

Example:
    >>> from svg_text2chunks import TextChunkConverter
    >>> converter = TextChunkConverter()
    >>> result = converter.convert_file("input.svg")
"""

from svg_text2chunks.api import ConversionResult, TextChunkConverter
from svg_text2chunks.config import Config
from svg_text2chunks.exceptions import (
    ConfigError,
    InvalidFontSizeError,
    SVGParseError,
    Text2ChunksError,
)
from svg_text2chunks.text.chunks import convert

__version__ = "0.1.0"

__all__ = [
    # Main API
    "TextChunkConverter",
    "ConversionResult",
    "Config",
    "convert",
    # Exceptions
    "Text2ChunksError",
    "SVGParseError",
    "ConfigError",
    "InvalidFontSizeError",
    # Metadata
    "__version__",
]
