"""Rendering-ready text model produced by the chunk converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from svg_text2chunks.paint import Fill, Stroke
from svg_text2chunks.svg.transform import Transform


class TextAnchor(Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class FontStyle(Enum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class FontVariant(Enum):
    NORMAL = "normal"
    SMALL_CAPS = "small-caps"


class FontWeight(Enum):
    NORMAL = "normal"
    BOLD = "bold"
    BOLDER = "bolder"
    LIGHTER = "lighter"
    W100 = "100"
    W200 = "200"
    W300 = "300"
    W400 = "400"
    W500 = "500"
    W600 = "600"
    W700 = "700"
    W800 = "800"
    W900 = "900"


class FontStretch(Enum):
    NORMAL = "normal"
    WIDER = "wider"
    NARROWER = "narrower"
    ULTRA_CONDENSED = "ultra-condensed"
    EXTRA_CONDENSED = "extra-condensed"
    CONDENSED = "condensed"
    SEMI_CONDENSED = "semi-condensed"
    SEMI_EXPANDED = "semi-expanded"
    EXPANDED = "expanded"
    EXTRA_EXPANDED = "extra-expanded"
    ULTRA_EXPANDED = "ultra-expanded"


@dataclass(frozen=True)
class Font:
    family: str
    size: float
    style: FontStyle = FontStyle.NORMAL
    variant: FontVariant = FontVariant.NORMAL
    weight: FontWeight = FontWeight.NORMAL
    stretch: FontStretch = FontStretch.NORMAL


@dataclass(frozen=True)
class TextDecorationStyle:
    fill: Fill | None = None
    stroke: Stroke | None = None


@dataclass(frozen=True)
class TextDecoration:
    """Decoration slots; None means the line is not drawn."""

    underline: TextDecorationStyle | None = None
    overline: TextDecorationStyle | None = None
    line_through: TextDecorationStyle | None = None

    def active_kinds(self) -> list[str]:
        kinds = []
        if self.underline is not None:
            kinds.append("underline")
        if self.overline is not None:
            kinds.append("overline")
        if self.line_through is not None:
            kinds.append("line-through")
        return kinds


@dataclass(frozen=True)
class StyledRun:
    """One contiguous piece of text with resolved style."""

    text: str
    fill: Fill | None
    stroke: Stroke | None
    font: Font
    decoration: TextDecoration = field(default_factory=TextDecoration)


@dataclass(frozen=True)
class TextChunk:
    """Runs sharing one anchor position and text-anchor value."""

    x: float
    y: float
    anchor: TextAnchor
    runs: tuple[StyledRun, ...]

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass(frozen=True)
class Text:
    chunks: tuple[TextChunk, ...] = ()


@dataclass(frozen=True)
class Element:
    """Converted element handed to the layout stage."""

    id: str
    kind: Text
    transform: Transform = field(default_factory=Transform)
