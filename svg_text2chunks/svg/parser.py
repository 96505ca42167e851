"""Safe SVG parsing with defusedxml."""

from __future__ import annotations

from pathlib import Path
from xml.etree.ElementTree import Element, ElementTree

import defusedxml.ElementTree as ET

from svg_text2chunks.exceptions import SVGParseError

SVG_NS = "http://www.w3.org/2000/svg"

# Elements that can be referenced as a paint server.
PAINT_SERVER_TAGS = frozenset({"linearGradient", "radialGradient", "pattern"})


def local_name(tag: object) -> str:
    """Strip the ``{namespace}`` prefix from an element tag."""
    if not isinstance(tag, str):
        return ""
    return tag.split("}", 1)[-1]


def is_tag(element: Element, name: str) -> bool:
    return local_name(element.tag) == name


def parse_svg(path: Path | str) -> ElementTree:
    """Parse an SVG file.

    Raises:
        FileNotFoundError: If the file does not exist.
        SVGParseError: If the content is not well-formed XML.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"SVG file not found: {path}")
    try:
        return ET.parse(str(path))
    except ET.ParseError as e:
        raise SVGParseError(f"Failed to parse SVG: {e}", details={"path": str(path)}) from e


def parse_svg_string(content: str) -> ElementTree:
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise SVGParseError(f"Failed to parse SVG string: {e}") from e
    return ElementTree(root)


def find_text_elements(root: Element) -> list[Element]:
    """Return every ``<text>`` element in document order."""
    return [el for el in root.iter() if is_tag(el, "text")]


def collect_definitions(root: Element) -> list[Element]:
    """Return the paint servers that can be referenced by ``url(#id)``."""
    return [
        el
        for el in root.iter()
        if local_name(el.tag) in PAINT_SERVER_TAGS and el.get("id")
    ]
