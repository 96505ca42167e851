"""Normalize a ``<text>`` element before chunk conversion.

The chunk converter only looks at direct ``<tspan>`` children and at their
own attribute values. This module turns an element as written by hand into
that shape:

- character data directly inside ``<text>`` (its ``text`` and the ``tail``
  of each child) becomes an anonymous ``<tspan>`` without position;
- unless ``xml:space="preserve"`` is set, whitespace in that character
  data is collapsed to single spaces and trimmed at the start and end of
  the element; whitespace-only data between tspans is dropped;
- inheritable presentation attributes of ``<text>`` (``text-anchor``
  included) are copied onto tspans that do not set them.

Only one level is handled. Nested tspans are left untouched.
"""

from __future__ import annotations

import copy
import re
from xml.etree.ElementTree import Element

from svg_text2chunks.svg.attributes import AId, ElementAttributes

INHERITED_ATTRIBUTES = (
    AId.FILL,
    AId.FILL_OPACITY,
    AId.STROKE,
    AId.STROKE_WIDTH,
    AId.STROKE_OPACITY,
    AId.COLOR,
    AId.FONT_FAMILY,
    AId.FONT_SIZE,
    AId.FONT_STYLE,
    AId.FONT_VARIANT,
    AId.FONT_WEIGHT,
    AId.FONT_STRETCH,
    AId.TEXT_ANCHOR,
)

XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"

_WHITESPACE_RE = re.compile(r"[ \t\r\n]+")


def _tspan_tag(text_elem: Element) -> str:
    tag = text_elem.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag.split("}", 1)[0] + "}tspan"
    return "tspan"


def _anonymous_tspan(tag: str, text: str) -> Element:
    span = Element(tag)
    span.text = text
    return span


def _collapse(pieces: list[str | Element]) -> list[str | Element]:
    """Collapse whitespace of the character data in ``pieces``."""
    result: list[str | Element] = []
    last = len(pieces) - 1
    for i, piece in enumerate(pieces):
        if isinstance(piece, str):
            piece = _WHITESPACE_RE.sub(" ", piece)
            if i == 0:
                piece = piece.lstrip(" ")
            if i == last:
                piece = piece.rstrip(" ")
        result.append(piece)
    return result


def prepare_text_element(text_elem: Element) -> Element:
    """Return a normalized copy of ``text_elem``; the input is not modified."""
    prepared = copy.deepcopy(text_elem)
    tag = _tspan_tag(prepared)

    pieces: list[str | Element] = []
    if prepared.text and prepared.text.strip():
        pieces.append(prepared.text)
    for child in list(prepared):
        tail = child.tail
        child.tail = None
        pieces.append(child)
        if tail and tail.strip():
            pieces.append(tail)

    if prepared.get(XML_SPACE) != "preserve":
        pieces = _collapse(pieces)

    children = [
        _anonymous_tspan(tag, piece) if isinstance(piece, str) else piece
        for piece in pieces
    ]

    prepared.text = None
    for child in list(prepared):
        prepared.remove(child)
    prepared.extend(children)

    root_attrs = ElementAttributes(prepared)
    for child in children:
        if child.tag != tag:
            continue
        child_attrs = ElementAttributes(child)
        for aid in INHERITED_ATTRIBUTES:
            value = root_attrs.raw(aid)
            if value is not None and not child_attrs.has(aid):
                child.set(aid.value, value)

    return prepared
