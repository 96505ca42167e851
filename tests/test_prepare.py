"""Unit tests for svg_text2chunks.svg.prepare module."""

from __future__ import annotations

from svg_text2chunks.svg.prepare import prepare_text_element


def texts(element) -> list[str | None]:
    return [child.text for child in element]


class TestAnonymousSpans:
    """Bare character data becomes tspans."""

    def test_bare_text(self, parse_element) -> None:
        prepared = prepare_text_element(parse_element('<text x="1">Hello</text>'))
        assert prepared.text is None
        assert texts(prepared) == ["Hello"]
        assert prepared[0].get("x") is None

    def test_text_and_tails_keep_order(self, parse_element) -> None:
        text_elem = parse_element("<text>A<tspan>B</tspan>C<tspan>D</tspan></text>")
        prepared = prepare_text_element(text_elem)
        assert texts(prepared) == ["A", "B", "C", "D"]
        assert all(child.tail is None for child in prepared)

    def test_whitespace_only_data_dropped(self, parse_element) -> None:
        text_elem = parse_element("<text>\n  <tspan>B</tspan>\n</text>")
        assert texts(prepare_text_element(text_elem)) == ["B"]

    def test_whitespace_collapsed_and_trimmed(self, parse_element) -> None:
        text_elem = parse_element(
            '<text x="1">\n    Hello \t <tspan>W</tspan>  and\n  more\n</text>'
        )
        assert texts(prepare_text_element(text_elem)) == ["Hello ", "W", " and more"]

    def test_preserve_keeps_whitespace(self, parse_element) -> None:
        text_elem = parse_element(
            '<text xml:space="preserve">  Hello\n  <tspan>W</tspan></text>'
        )
        assert texts(prepare_text_element(text_elem)) == ["  Hello\n  ", "W"]

    def test_namespaced_tag(self, parse_element) -> None:
        text_elem = parse_element('<text xmlns="http://www.w3.org/2000/svg">Hi</text>')
        prepared = prepare_text_element(text_elem)
        assert prepared[0].tag == "{http://www.w3.org/2000/svg}tspan"

    def test_input_not_modified(self, parse_element) -> None:
        text_elem = parse_element("<text>A<tspan>B</tspan></text>")
        prepare_text_element(text_elem)
        assert text_elem.text == "A"
        assert len(text_elem) == 1


class TestInheritance:
    """Inheritable attributes are copied onto tspans."""

    def test_font_attributes_copied(self, parse_element) -> None:
        text_elem = parse_element(
            '<text font-family="Arial" style="font-size: 20px"><tspan>a</tspan></text>'
        )
        span = prepare_text_element(text_elem)[0]
        assert span.get("font-family") == "Arial"
        assert span.get("font-size") == "20px"

    def test_span_value_kept(self, parse_element) -> None:
        text_elem = parse_element(
            '<text fill="red"><tspan style="fill: blue">a</tspan></text>'
        )
        span = prepare_text_element(text_elem)[0]
        assert span.get("fill") is None
        assert span.get("style") == "fill: blue"

    def test_anchor_copied_decoration_not_copied(self, parse_element) -> None:
        text_elem = parse_element(
            '<text text-anchor="middle" text-decoration="underline">'
            '<tspan>a</tspan><tspan text-anchor="end">b</tspan></text>'
        )
        prepared = prepare_text_element(text_elem)
        assert prepared[0].get("text-anchor") == "middle"
        assert prepared[1].get("text-anchor") == "end"
        assert all(span.get("text-decoration") is None for span in prepared)
