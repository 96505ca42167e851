"""Unit tests for svg_text2chunks.text.anchor module."""

from __future__ import annotations

import pytest

from svg_text2chunks.text.anchor import convert_text_anchor
from svg_text2chunks.text.model import TextAnchor


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("start", TextAnchor.START),
        ("middle", TextAnchor.MIDDLE),
        ("end", TextAnchor.END),
        ("inherit", TextAnchor.START),
        ("center", TextAnchor.START),
    ],
)
def test_text_anchor_keywords(make_attrs, value: str, expected: TextAnchor) -> None:
    assert convert_text_anchor(make_attrs(text_anchor=value)) is expected


def test_absent_text_anchor_is_start(make_attrs) -> None:
    assert convert_text_anchor(make_attrs()) is TextAnchor.START


def test_text_anchor_from_style(make_attrs) -> None:
    attrs = make_attrs(text_anchor="start", style="text-anchor: end")
    assert convert_text_anchor(attrs) is TextAnchor.END
