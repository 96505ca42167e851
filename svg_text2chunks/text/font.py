"""Font resolution."""

from __future__ import annotations

from svg_text2chunks.config import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE
from svg_text2chunks.exceptions import InvalidFontSizeError
from svg_text2chunks.svg.attributes import AId, AttributeResolver
from svg_text2chunks.text.model import (
    Font,
    FontStretch,
    FontStyle,
    FontVariant,
    FontWeight,
)

_STYLES = {s.value: s for s in FontStyle}
_VARIANTS = {v.value: v for v in FontVariant}
_WEIGHTS = {w.value: w for w in FontWeight}
_STRETCHES = {s.value: s for s in FontStretch}


def _keyword(attrs: AttributeResolver, aid: AId, table: dict, default):
    value = attrs.get_predefined(aid)
    if value is None:
        return default
    return table.get(value, default)


def validate_font_size(size: float) -> float:
    if size <= 0.0:
        raise InvalidFontSizeError(size)
    return size


def convert_font(
    attrs: AttributeResolver,
    default_family: str = DEFAULT_FONT_FAMILY,
    default_size: float = DEFAULT_FONT_SIZE,
) -> Font:
    """Build a Font from a node's attributes.

    Keyword properties fall back to NORMAL when absent or unrecognized.
    The size falls back to ``default_size`` when absent or not numeric.

    Raises:
        InvalidFontSizeError: If the size is zero or negative.
    """
    size = attrs.get_number(AId.FONT_SIZE)
    if size is None:
        size = default_size
    size = validate_font_size(size)

    family = attrs.get_string(AId.FONT_FAMILY)
    if family is None or not family.strip():
        family = default_family

    return Font(
        family=family.strip(),
        size=size,
        style=_keyword(attrs, AId.FONT_STYLE, _STYLES, FontStyle.NORMAL),
        variant=_keyword(attrs, AId.FONT_VARIANT, _VARIANTS, FontVariant.NORMAL),
        weight=_keyword(attrs, AId.FONT_WEIGHT, _WEIGHTS, FontWeight.NORMAL),
        stretch=_keyword(attrs, AId.FONT_STRETCH, _STRETCHES, FontStretch.NORMAL),
    )
