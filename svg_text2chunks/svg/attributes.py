"""Typed attribute access for SVG elements.

Lookups go through the closed :class:`AId` enumeration. Values come from
presentation attributes, overridden by declarations in the inline
``style`` attribute. Cascade from ancestors is not computed here.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Protocol
from xml.etree.ElementTree import Element

from svg_text2chunks.svg.transform import Transform, parse_transform

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"^([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)(px)?$")
_LIST_SEP_RE = re.compile(r"[\s,]+")


class AId(str, Enum):
    """Attribute identifiers understood by the text converter."""

    X = "x"
    Y = "y"
    TRANSFORM = "transform"
    FILL = "fill"
    FILL_OPACITY = "fill-opacity"
    STROKE = "stroke"
    STROKE_WIDTH = "stroke-width"
    STROKE_OPACITY = "stroke-opacity"
    COLOR = "color"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    FONT_STYLE = "font-style"
    FONT_VARIANT = "font-variant"
    FONT_WEIGHT = "font-weight"
    FONT_STRETCH = "font-stretch"
    TEXT_ANCHOR = "text-anchor"
    TEXT_DECORATION = "text-decoration"


PREDEFINED_VALUES: dict[AId, frozenset[str]] = {
    AId.FONT_STYLE: frozenset({"normal", "italic", "oblique", "inherit"}),
    AId.FONT_VARIANT: frozenset({"normal", "small-caps", "inherit"}),
    AId.FONT_WEIGHT: frozenset(
        {"normal", "bold", "bolder", "lighter", "inherit"}
        | {str(n) for n in range(100, 1000, 100)}
    ),
    AId.FONT_STRETCH: frozenset(
        {
            "normal",
            "wider",
            "narrower",
            "ultra-condensed",
            "extra-condensed",
            "condensed",
            "semi-condensed",
            "semi-expanded",
            "expanded",
            "extra-expanded",
            "ultra-expanded",
            "inherit",
        }
    ),
    AId.TEXT_ANCHOR: frozenset({"start", "middle", "end", "inherit"}),
    AId.TEXT_DECORATION: frozenset(
        {"none", "underline", "overline", "line-through", "blink", "inherit"}
    ),
}


def parse_style(style: str | None) -> dict[str, str]:
    """Split an inline CSS ``style`` attribute into a property dict.

    Entries without a colon are ignored.
    """
    if not style:
        return {}
    result: dict[str, str] = {}
    for item in style.split(";"):
        if ":" not in item:
            continue
        key, value = item.split(":", 1)
        key = key.strip()
        if key:
            result[key] = value.strip()
    return result


def parse_number(value: str | None) -> float | None:
    """Parse a plain number or a ``px`` length; anything else is None."""
    if value is None:
        return None
    match = _NUMBER_RE.match(value.strip())
    if not match:
        return None
    return float(match.group(1))


def parse_number_list(value: str | None) -> list[float] | None:
    if value is None:
        return None
    tokens = [t for t in _LIST_SEP_RE.split(value.strip()) if t]
    numbers = []
    for token in tokens:
        number = parse_number(token)
        if number is None:
            logger.debug("Invalid number list value: %r", value)
            return None
        numbers.append(number)
    return numbers


class AttributeResolver(Protocol):
    """Typed lookups over a node's final attribute values."""

    def get_number(self, aid: AId) -> float | None: ...

    def get_string(self, aid: AId) -> str | None: ...

    def get_number_list(self, aid: AId) -> list[float] | None: ...

    def get_predefined(self, aid: AId) -> str | None: ...

    def get_transform(self, aid: AId) -> Transform | None: ...


class ElementAttributes:
    """AttributeResolver over an ``xml.etree`` element."""

    def __init__(self, element: Element) -> None:
        self.element = element
        self._style = parse_style(element.get("style"))

    def raw(self, aid: AId) -> str | None:
        name = aid.value
        if name in self._style:
            return self._style[name]
        return self.element.get(name)

    def has(self, aid: AId) -> bool:
        return self.raw(aid) is not None

    def get_number(self, aid: AId) -> float | None:
        return parse_number(self.raw(aid))

    def get_string(self, aid: AId) -> str | None:
        return self.raw(aid)

    def get_number_list(self, aid: AId) -> list[float] | None:
        return parse_number_list(self.raw(aid))

    def get_predefined(self, aid: AId) -> str | None:
        value = self.raw(aid)
        if value is None:
            return None
        keyword = value.strip()
        if keyword in PREDEFINED_VALUES.get(aid, ()):
            return keyword
        return None

    def get_transform(self, aid: AId) -> Transform | None:
        value = self.raw(aid)
        if value is None:
            return None
        ts = parse_transform(value)
        if ts is None:
            logger.warning("Failed to parse transform: %r", value)
        return ts
