"""SVG parsing and attribute access for svg-text2chunks.

This subpackage provides:
- Safe SVG parsing with XXE protection (defusedxml)
- Typed attribute lookup (numbers, number lists, keywords, transforms)
- Text element preparation (anonymous tspans, attribute inheritance)
"""

from svg_text2chunks.svg.attributes import AId, AttributeResolver, ElementAttributes
from svg_text2chunks.svg.parser import (
    collect_definitions,
    find_text_elements,
    parse_svg,
    parse_svg_string,
)
from svg_text2chunks.svg.prepare import prepare_text_element
from svg_text2chunks.svg.transform import Transform, parse_transform

__all__ = [
    "AId",
    "AttributeResolver",
    "ElementAttributes",
    "Transform",
    "collect_definitions",
    "find_text_elements",
    "parse_svg",
    "parse_svg_string",
    "parse_transform",
    "prepare_text_element",
]
