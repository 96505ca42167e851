"""Text anchor resolution."""

from __future__ import annotations

from svg_text2chunks.svg.attributes import AId, AttributeResolver
from svg_text2chunks.text.model import TextAnchor

_ANCHORS = {a.value: a for a in TextAnchor}


def convert_text_anchor(attrs: AttributeResolver) -> TextAnchor:
    """Map ``text-anchor`` to TextAnchor; anything unrecognized is START."""
    value = attrs.get_predefined(AId.TEXT_ANCHOR)
    return _ANCHORS.get(value or "", TextAnchor.START)
