"""Text chunk conversion for svg-text2chunks.

This subpackage provides:
- Chunk segmentation of ``<text>`` elements
- Font, decoration and text-anchor resolution
- The rendering-ready text model
"""

from svg_text2chunks.text.anchor import convert_text_anchor
from svg_text2chunks.text.chunks import FUZZY_EPSILON, ChunkBuilder, convert, resolve_pos
from svg_text2chunks.text.decoration import convert_decoration
from svg_text2chunks.text.font import convert_font
from svg_text2chunks.text.model import (
    Element,
    Font,
    FontStretch,
    FontStyle,
    FontVariant,
    FontWeight,
    StyledRun,
    Text,
    TextAnchor,
    TextChunk,
    TextDecoration,
    TextDecorationStyle,
)

__all__ = [
    "FUZZY_EPSILON",
    "ChunkBuilder",
    "Element",
    "Font",
    "FontStretch",
    "FontStyle",
    "FontVariant",
    "FontWeight",
    "StyledRun",
    "Text",
    "TextAnchor",
    "TextChunk",
    "TextDecoration",
    "TextDecorationStyle",
    "convert",
    "convert_decoration",
    "convert_font",
    "convert_text_anchor",
    "resolve_pos",
]
