"""Pytest configuration and shared fixtures for svg-text2chunks tests."""

from collections.abc import Callable, Generator
from pathlib import Path
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as ET
import pytest

from svg_text2chunks.svg.attributes import ElementAttributes


@pytest.fixture
def parse_element() -> Callable[[str], Element]:
    """Return a helper that parses an XML snippet into an element."""

    def _parse(xml: str) -> Element:
        return ET.fromstring(xml)

    return _parse


@pytest.fixture
def make_attrs() -> Callable[..., ElementAttributes]:
    """Return a helper building ElementAttributes from keyword attributes.

    Underscores in keyword names become dashes (``font_size`` -> ``font-size``).
    """

    def _make(tag: str = "tspan", **attrib: str) -> ElementAttributes:
        element = Element(tag, {k.replace("_", "-"): v for k, v in attrib.items()})
        return ElementAttributes(element)

    return _make


@pytest.fixture
def temp_svg(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary SVG file with two positioned tspans."""
    svg_content = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <text id="greeting" x="10" font-family="Arial" font-size="24">
    <tspan>Hello</tspan>
    <tspan x="50" y="20" font-weight="bold">World</tspan>
  </text>
</svg>"""
    svg_path = tmp_path / "test.svg"
    svg_path.write_text(svg_content, encoding="utf-8")
    yield svg_path


@pytest.fixture
def simple_svg_content() -> str:
    """Return a simple SVG string with one bare text element."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <text x="10" y="50" font-family="Arial" font-size="24">Test</text>
</svg>"""


@pytest.fixture
def tspan_svg_content() -> str:
    """Return SVG with tspan elements on two lines."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="300" height="100" viewBox="0 0 300 100">
  <text id="two-lines" x="10" y="50" font-family="Arial" font-size="24">
    <tspan>Hello</tspan>
    <tspan x="10" y="80">World</tspan>
  </text>
</svg>"""


@pytest.fixture
def gradient_svg_content() -> str:
    """Return SVG whose text is filled with a gradient."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="300" height="100">
  <defs>
    <linearGradient id="grad"><stop offset="0" stop-color="red"/></linearGradient>
  </defs>
  <text x="10" y="50" fill="url(#grad)" text-decoration="underline">
    <tspan>Gradient</tspan>
  </text>
</svg>"""


@pytest.fixture
def no_text_svg_content() -> str:
    """Return SVG without any text elements."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="blue"/>
</svg>"""


@pytest.fixture
def malformed_svg_content() -> str:
    """Return malformed SVG for error testing."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg">
  <text x="10" y="50">Unclosed text
</svg>"""
