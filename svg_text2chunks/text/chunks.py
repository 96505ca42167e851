"""Split a ``<text>`` element into positioned text chunks.

A chunk starts whenever a tspan moves the current position. Tspans without
explicit ``x``/``y`` (or with values equal to the current position) are
appended to the open chunk. Only direct children of ``<text>`` are read.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from xml.etree.ElementTree import Element as XmlElement

from svg_text2chunks.config import Config
from svg_text2chunks.exceptions import InvalidFontSizeError
from svg_text2chunks.paint import convert_fill, convert_stroke
from svg_text2chunks.svg.attributes import AId, AttributeResolver, ElementAttributes
from svg_text2chunks.svg.parser import is_tag, local_name
from svg_text2chunks.svg.transform import Transform
from svg_text2chunks.text.anchor import convert_text_anchor
from svg_text2chunks.text.decoration import convert_decoration
from svg_text2chunks.text.font import convert_font
from svg_text2chunks.text.model import Element, StyledRun, Text, TextChunk

logger = logging.getLogger(__name__)

# Absolute tolerance for every position comparison.
FUZZY_EPSILON = 1e-9


def fuzzy_eq(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=0.0, abs_tol=FUZZY_EPSILON)


def resolve_pos(attrs: AttributeResolver, aid: AId) -> float | None:
    """Return the first value of a coordinate list, or None if unset."""
    values = attrs.get_number_list(aid)
    if not values:
        return None
    if len(values) > 1:
        logger.warning(
            "List of 'x', 'y' coordinates are not supported in a 'text' element."
        )
    return values[0]


def span_text(span: XmlElement) -> str | None:
    """Text content of a tspan, or None when it has none."""
    return span.text or None


class ChunkBuilder:
    """Walks the tspans of one text element and collects chunks."""

    def __init__(self, defs: Sequence[XmlElement], config: Config | None = None) -> None:
        self.defs = defs
        self.config = config or Config()

    def build(self, text_elem: XmlElement) -> list[TextChunk]:
        chunks: list[TextChunk] = []
        runs: list[StyledRun] = []

        root_attrs = ElementAttributes(text_elem)
        prev_x = resolve_pos(root_attrs, AId.X)
        prev_y = resolve_pos(root_attrs, AId.Y)
        prev_x = 0.0 if prev_x is None else prev_x
        prev_y = 0.0 if prev_y is None else prev_y

        chunk_source: AttributeResolver = root_attrs

        for span in text_elem:
            if not is_tag(span, "tspan"):
                logger.debug("Unsupported <%s> inside <text> skipped", local_name(span.tag))
                continue
            if len(span):
                logger.debug("Nested elements inside <tspan> are not supported")

            text = span_text(span)
            if text is None:
                continue

            attrs = ElementAttributes(span)
            run = self._make_run(root_attrs, attrs, text)
            if run is None:
                continue

            x = resolve_pos(attrs, AId.X)
            y = resolve_pos(attrs, AId.Y)
            if x is not None or y is not None:
                new_x = prev_x if x is None else x
                new_y = prev_y if y is None else y

                if runs and (not fuzzy_eq(new_x, prev_x) or not fuzzy_eq(new_y, prev_y)):
                    chunks.append(self._make_chunk(prev_x, prev_y, runs, chunk_source))
                    runs = []

                prev_x, prev_y = new_x, new_y
                chunk_source = attrs

            runs.append(run)

        if runs:
            chunks.append(self._make_chunk(prev_x, prev_y, runs, chunk_source))

        return chunks

    def _make_run(
        self,
        root_attrs: AttributeResolver,
        attrs: AttributeResolver,
        text: str,
    ) -> StyledRun | None:
        try:
            font = convert_font(
                attrs,
                default_family=self.config.default_font_family,
                default_size=self.config.default_font_size,
            )
        except InvalidFontSizeError as e:
            if self.config.font_size_policy == "reject":
                raise
            logger.warning("Skipping tspan %r: %s", text, e)
            return None

        return StyledRun(
            text=text,
            fill=convert_fill(self.defs, attrs),
            stroke=convert_stroke(self.defs, attrs),
            font=font,
            decoration=convert_decoration(self.defs, root_attrs, attrs),
        )

    @staticmethod
    def _make_chunk(
        x: float, y: float, runs: list[StyledRun], chunk_source: AttributeResolver
    ) -> TextChunk:
        return TextChunk(
            x=x,
            y=y,
            anchor=convert_text_anchor(chunk_source),
            runs=tuple(runs),
        )


def convert(
    defs: Sequence[XmlElement],
    text_elem: XmlElement,
    config: Config | None = None,
) -> Element:
    """Convert a ``<text>`` element into a text Element.

    The chunk list may be empty when no tspan carries text.
    """
    attrs = ElementAttributes(text_elem)
    ts = attrs.get_transform(AId.TRANSFORM) or Transform()
    chunks = ChunkBuilder(defs, config).build(text_elem)
    return Element(id="", kind=Text(chunks=tuple(chunks)), transform=ts)
