"""Fill and stroke resolution.

Turns the ``fill``/``stroke`` family of attributes into paint descriptors.
Paint servers (gradients, patterns) are not evaluated here, only linked by
id when they are present in the definitions.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union
from xml.etree.ElementTree import Element

from svg_text2chunks.svg.attributes import AId, AttributeResolver

logger = logging.getLogger(__name__)

_URL_RE = re.compile(r"^url\(\s*['\"]?#([^)'\"]+)['\"]?\s*\)\s*(.*)$")
_RGB_RE = re.compile(r"^rgb\(\s*([^,\s]+)\s*,?\s*([^,\s]+)\s*,?\s*([^,\s)]+)\s*\)$")

NAMED_COLORS = {
    "black": (0, 0, 0),
    "silver": (192, 192, 192),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "white": (255, 255, 255),
    "maroon": (128, 0, 0),
    "red": (255, 0, 0),
    "purple": (128, 0, 128),
    "fuchsia": (255, 0, 255),
    "magenta": (255, 0, 255),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "olive": (128, 128, 0),
    "yellow": (255, 255, 0),
    "navy": (0, 0, 128),
    "blue": (0, 0, 255),
    "teal": (0, 128, 128),
    "aqua": (0, 255, 255),
    "cyan": (0, 255, 255),
    "orange": (255, 165, 0),
}


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def black(cls) -> Color:
        return cls(0, 0, 0)


@dataclass(frozen=True)
class PaintLink:
    """Reference to a paint server by element id."""

    id: str


Paint = Union[Color, PaintLink]


@dataclass(frozen=True)
class Fill:
    paint: Paint
    opacity: float = 1.0


@dataclass(frozen=True)
class Stroke:
    paint: Paint
    width: float = 1.0
    opacity: float = 1.0


def _channel(token: str) -> int | None:
    try:
        if token.endswith("%"):
            value = float(token[:-1]) * 255.0 / 100.0
        else:
            value = float(token)
    except ValueError:
        return None
    return max(0, min(255, round(value)))


def parse_color(value: str | None) -> Color | None:
    """Parse ``#rgb``, ``#rrggbb``, ``rgb(...)`` or a basic color name."""
    if value is None:
        return None
    value = value.strip()
    lowered = value.lower()

    if lowered.startswith("#"):
        digits = lowered[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            return None
        try:
            return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        except ValueError:
            return None

    match = _RGB_RE.match(lowered)
    if match:
        channels = [_channel(t) for t in match.groups()]
        if any(c is None for c in channels):
            return None
        return Color(*channels)

    if lowered in NAMED_COLORS:
        return Color(*NAMED_COLORS[lowered])
    return None


def _opacity(attrs: AttributeResolver, aid: AId) -> float:
    value = attrs.get_number(aid)
    if value is None:
        return 1.0
    return max(0.0, min(1.0, value))


def _current_color(attrs: AttributeResolver) -> Color:
    return parse_color(attrs.get_string(AId.COLOR)) or Color.black()


def resolve_paint(
    defs: Sequence[Element], attrs: AttributeResolver, value: str
) -> Paint | None:
    """Resolve one paint value. Returns None for ``none`` or unusable input."""
    value = value.strip()
    if value == "none":
        return None
    if value == "currentColor":
        return _current_color(attrs)

    match = _URL_RE.match(value)
    if match:
        link_id, fallback = match.group(1), match.group(2).strip()
        if any(el.get("id") == link_id for el in defs):
            return PaintLink(link_id)
        if fallback:
            logger.debug("Paint server #%s not found, using fallback %r", link_id, fallback)
            return resolve_paint(defs, attrs, fallback)
        logger.debug("Paint server #%s not found", link_id)
        return None

    color = parse_color(value)
    if color is None:
        logger.debug("Unsupported paint value: %r", value)
    return color


def convert_fill(defs: Sequence[Element], attrs: AttributeResolver) -> Fill | None:
    """Resolve the fill of a node. An absent ``fill`` means black."""
    value = attrs.get_string(AId.FILL)
    paint = Color.black() if value is None else resolve_paint(defs, attrs, value)
    if paint is None:
        return None
    return Fill(paint, _opacity(attrs, AId.FILL_OPACITY))


def convert_stroke(defs: Sequence[Element], attrs: AttributeResolver) -> Stroke | None:
    """Resolve the stroke of a node. An absent ``stroke`` means none."""
    value = attrs.get_string(AId.STROKE)
    if value is None:
        return None
    paint = resolve_paint(defs, attrs, value)
    if paint is None:
        return None

    width = attrs.get_number(AId.STROKE_WIDTH)
    if width is None:
        width = 1.0
    if width <= 0.0:
        return None
    return Stroke(paint, width, _opacity(attrs, AId.STROKE_OPACITY))
