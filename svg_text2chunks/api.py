"""High-level conversion API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from xml.etree.ElementTree import ElementTree

from svg_text2chunks.config import Config
from svg_text2chunks.exceptions import Text2ChunksError
from svg_text2chunks.svg.parser import (
    collect_definitions,
    find_text_elements,
    parse_svg,
    parse_svg_string,
)
from svg_text2chunks.svg.prepare import prepare_text_element
from svg_text2chunks.text.chunks import convert
from svg_text2chunks.text.model import Element

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of converting every ``<text>`` of one document."""

    success: bool
    source: str | None = None
    text_count: int = 0
    elements: list[Element] = field(default_factory=list)
    source_ids: list[str | None] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def chunk_count(self) -> int:
        return sum(len(el.kind.chunks) for el in self.elements)


class TextChunkConverter:
    """Converts the text elements of SVG documents into text chunks.

    Example:
        >>> converter = TextChunkConverter()
        >>> result = converter.convert_file("input.svg")
        >>> for element in result.elements:
        ...     print(len(element.kind.chunks))
    """

    def __init__(self, config: Config | None = None, prepare: bool = True) -> None:
        self.config = config or Config()
        self.prepare = prepare

    def convert_file(self, path: Path | str) -> ConversionResult:
        tree = parse_svg(path)
        return self.convert_tree(tree, source=str(path))

    def convert_string(self, svg_content: str) -> ConversionResult:
        tree = parse_svg_string(svg_content)
        return self.convert_tree(tree, source="<string>")

    def convert_tree(self, tree: ElementTree, source: str | None = None) -> ConversionResult:
        root = tree.getroot()
        result = ConversionResult(success=True, source=source)
        if root is None:
            result.success = False
            result.errors.append("Document has no root element")
            return result

        defs = collect_definitions(root)
        text_elements = find_text_elements(root)
        result.text_count = len(text_elements)
        logger.info("Found %d text element(s) in %s", len(text_elements), source)

        for text_elem in text_elements:
            elem_id = text_elem.get("id")
            node = prepare_text_element(text_elem) if self.prepare else text_elem
            try:
                element = convert(defs, node, self.config)
            except Text2ChunksError as e:
                result.success = False
                result.errors.append(f"text id={elem_id}: {e}")
                logger.error("Failed to convert text id=%s: %s", elem_id, e)
                continue

            if not element.kind.chunks:
                result.warnings.append(f"text id={elem_id}: no text content")
            result.elements.append(element)
            result.source_ids.append(elem_id)

        return result
