"""Text decoration resolution.

A tspan's own ``text-decoration`` keyword never looks at ancestors. The
``text`` element's value is matched by substring, so ``"underline
overline"`` enables both. For each kind only one source is used: the
span if it declares the kind, otherwise the root.
"""

from __future__ import annotations

from collections.abc import Sequence
from xml.etree.ElementTree import Element

from svg_text2chunks.paint import convert_fill, convert_stroke
from svg_text2chunks.svg.attributes import AId, AttributeResolver
from svg_text2chunks.text.model import TextDecoration, TextDecorationStyle

DECORATION_KINDS = ("underline", "overline", "line-through")


def root_decoration_kinds(root_attrs: AttributeResolver) -> set[str]:
    text = root_attrs.get_string(AId.TEXT_DECORATION) or ""
    return {kind for kind in DECORATION_KINDS if kind in text}


def span_decoration_kinds(span_attrs: AttributeResolver) -> set[str]:
    keyword = span_attrs.get_predefined(AId.TEXT_DECORATION)
    return {keyword} if keyword in DECORATION_KINDS else set()


def _style(defs: Sequence[Element], attrs: AttributeResolver) -> TextDecorationStyle:
    return TextDecorationStyle(
        fill=convert_fill(defs, attrs),
        stroke=convert_stroke(defs, attrs),
    )


def convert_decoration(
    defs: Sequence[Element],
    root_attrs: AttributeResolver,
    span_attrs: AttributeResolver,
) -> TextDecoration:
    in_root = root_decoration_kinds(root_attrs)
    in_span = span_decoration_kinds(span_attrs)

    def gen_style(kind: str) -> TextDecorationStyle | None:
        if kind in in_span:
            return _style(defs, span_attrs)
        if kind in in_root:
            return _style(defs, root_attrs)
        return None

    return TextDecoration(
        underline=gen_style("underline"),
        overline=gen_style("overline"),
        line_through=gen_style("line-through"),
    )
