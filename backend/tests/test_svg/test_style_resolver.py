"""Tests for style precedence."""

from lxml import etree

from tests.conftest import STYLED_SVG

from svguri.models.render_tree import NodeKind
from svguri.svg.parser import parse_svg_document
from svguri.svg.style_resolver import resolve_attributes
from svguri.svg.stylesheet import extract_style_classes


def _elements(svg: str, name: str) -> tuple[list, dict]:
    root = parse_svg_document(svg)
    found = [el for el in root.iter(etree.Element) if etree.QName(el).localname == name]
    return found, extract_style_classes(root)


def _resolve_one(svg: str, name: str, kind: NodeKind, **kwargs) -> dict[str, str]:
    nodes, classes = _elements(svg, name)
    return resolve_attributes(nodes[0], kind, classes, **kwargs)


class TestClassStyles:
    def test_inline_beats_class(self):
        rects, classes = _elements(STYLED_SVG, "rect")
        attrs = resolve_attributes(rects[0], NodeKind.RECT, classes)
        assert attrs["fill"] == "yellow"
        assert attrs["strokeWidth"] == "3"
        assert attrs["x"] == "0"

    def test_class_applies_without_inline(self):
        rects, classes = _elements(STYLED_SVG, "rect")
        assert resolve_attributes(rects[1], NodeKind.RECT, classes)["fill"] == "green"

    def test_caller_override_beats_class(self):
        rects, classes = _elements(STYLED_SVG, "rect")
        overrides = {"a": {"fill": "pink", "stroke-opacity": "0.5", "bogus": "1"}}
        attrs = resolve_attributes(rects[1], NodeKind.RECT, classes, class_overrides=overrides)
        assert attrs["fill"] == "pink"
        assert attrs["strokeOpacity"] == "0.5"
        assert "bogus" not in attrs

    def test_override_for_class_missing_from_stylesheet_ignored(self):
        svg = '<svg ><rect class="z"/></svg>'
        attrs = _resolve_one(svg, "rect", NodeKind.RECT, class_overrides={"z": {"fill": "red"}})
        assert attrs == {}

    def test_multiple_class_tokens(self):
        svg = "<svg ><style>.a { fill: green } .c { stroke: purple }</style><rect class='a c'/></svg>"
        attrs = _resolve_one(svg, "rect", NodeKind.RECT)
        assert attrs == {"fill": "green", "stroke": "purple"}

    def test_class_style_filtered_by_kind(self):
        svg = "<svg ><style>.a { r: 4; d: M0; fill: red }</style><circle class='a'/></svg>"
        assert _resolve_one(svg, "circle", NodeKind.CIRCLE) == {"r": "4", "fill": "red"}


class TestRuntimeFill:
    def test_replaces_inline_fill(self):
        svg = '<svg ><rect fill="blue"/></svg>'
        assert _resolve_one(svg, "rect", NodeKind.RECT, fill="red")["fill"] == "red"

    def test_preserves_inline_none(self):
        svg = '<svg ><rect fill="none"/></svg>'
        assert _resolve_one(svg, "rect", NodeKind.RECT, fill="red")["fill"] == "none"

    def test_overrides_class_none(self):
        svg = "<svg ><style>.n { fill: none }</style><rect class='n'/></svg>"
        assert _resolve_one(svg, "rect", NodeKind.RECT, fill="red")["fill"] == "red"

    def test_overrides_caller_override_none(self):
        svg = "<svg ><style>.n { fill: blue }</style><rect class='n'/></svg>"
        attrs = _resolve_one(
            svg, "rect", NodeKind.RECT, class_overrides={"n": {"fill": "none"}}, fill="red"
        )
        assert attrs["fill"] == "red"

    def test_beats_class_fill(self):
        rects, classes = _elements(STYLED_SVG, "rect")
        assert resolve_attributes(rects[1], NodeKind.RECT, classes, fill="red")["fill"] == "red"

    def test_applies_when_no_fill_declared(self):
        svg = '<svg ><path d="M0 0"/></svg>'
        assert _resolve_one(svg, "path", NodeKind.PATH, fill="red") == {"d": "M0 0", "fill": "red"}


class TestInlineStyleAttribute:
    def test_style_beats_presentation_attribute(self):
        svg = '<svg ><rect fill="red" style="fill: blue; stroke-width: 2px"/></svg>'
        attrs = _resolve_one(svg, "rect", NodeKind.RECT)
        assert attrs == {"fill": "blue", "strokeWidth": "2"}

    def test_style_none_survives_runtime_fill(self):
        svg = '<svg ><rect fill="blue" style="fill:none"/></svg>'
        assert _resolve_one(svg, "rect", NodeKind.RECT, fill="red")["fill"] == "none"

    def test_style_fill_replaced_by_runtime_fill(self):
        svg = '<svg ><rect style="fill: blue"/></svg>'
        assert _resolve_one(svg, "rect", NodeKind.RECT, fill="red")["fill"] == "red"


def test_unknown_attributes_dropped():
    svg = '<svg ><circle cx="1" width="4" onclick="x()" data-id="7"/></svg>'
    assert _resolve_one(svg, "circle", NodeKind.CIRCLE) == {"cx": "1"}
