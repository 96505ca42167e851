"""Unit tests for svg_text2chunks.svg.attributes module."""

from __future__ import annotations

from svg_text2chunks.svg.attributes import (
    AId,
    parse_number,
    parse_number_list,
    parse_style,
)
from svg_text2chunks.svg.transform import Transform


class TestParseStyle:
    """Tests for parse_style helper function."""

    def test_parse_style_none_returns_empty_dict(self) -> None:
        assert parse_style(None) == {}

    def test_parse_style_multiple_properties(self) -> None:
        result = parse_style("font-family: Arial; font-weight: bold; font-size: 24px")
        assert result == {
            "font-family": "Arial",
            "font-weight": "bold",
            "font-size": "24px",
        }

    def test_parse_style_ignores_malformed_entries(self) -> None:
        result = parse_style("font-family: Arial; malformed; font-weight: 700")
        assert result == {"font-family": "Arial", "font-weight": "700"}


class TestParseNumbers:
    """Tests for number and number list parsing."""

    def test_plain_and_px_numbers(self) -> None:
        assert parse_number("24") == 24.0
        assert parse_number(" 1.5px ") == 1.5
        assert parse_number("-.5") == -0.5
        assert parse_number("1e2") == 100.0

    def test_non_numeric(self) -> None:
        assert parse_number("abc") is None
        assert parse_number("50%") is None
        assert parse_number(None) is None

    def test_number_list_separators(self) -> None:
        assert parse_number_list("1, 2 3,4") == [1.0, 2.0, 3.0, 4.0]

    def test_empty_number_list(self) -> None:
        assert parse_number_list("   ") == []

    def test_invalid_number_list(self) -> None:
        assert parse_number_list("1 two 3") is None


class TestElementAttributes:
    """Tests for ElementAttributes lookups."""

    def test_style_overrides_presentation_attribute(self, make_attrs) -> None:
        attrs = make_attrs(fill="red", style="fill: blue")
        assert attrs.get_string(AId.FILL) == "blue"

    def test_missing_attribute(self, make_attrs) -> None:
        attrs = make_attrs()
        assert attrs.get_string(AId.FILL) is None
        assert attrs.get_number(AId.FONT_SIZE) is None
        assert attrs.get_number_list(AId.X) is None
        assert attrs.get_predefined(AId.FONT_WEIGHT) is None
        assert attrs.get_transform(AId.TRANSFORM) is None

    def test_predefined_closed_vocabulary(self, make_attrs) -> None:
        assert make_attrs(font_weight=" 700 ").get_predefined(AId.FONT_WEIGHT) == "700"
        assert make_attrs(font_weight="heavy").get_predefined(AId.FONT_WEIGHT) is None

    def test_transform(self, make_attrs) -> None:
        attrs = make_attrs("text", transform="translate(3 4)")
        assert attrs.get_transform(AId.TRANSFORM) == Transform(e=3.0, f=4.0)

    def test_invalid_transform_is_none(self, make_attrs) -> None:
        attrs = make_attrs("text", transform="translate(oops)")
        assert attrs.get_transform(AId.TRANSFORM) is None
