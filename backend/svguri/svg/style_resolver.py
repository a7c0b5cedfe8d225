"""Style resolution: merges class style, caller overrides, runtime fill and inline attributes.

Precedence, lowest first:
  1. stylesheet rules for the element's classes
  2. caller-supplied overrides for those classes
  3. runtime fill (skipped when the element's own inline fill is "none")
  4. inline presentation attributes, then the inline ``style`` attribute
"""

from __future__ import annotations

from collections.abc import Mapping

from lxml import etree

from svguri.models.render_tree import NodeKind
from svguri.svg.attributes import normalize_attributes, parse_inline_style
from svguri.svg.stylesheet import StyleClassMap

NO_FILL = "none"


def class_tokens(node: etree._Element) -> list[str]:
    return (node.get("class") or "").split()


def inline_pairs(node: etree._Element) -> list[tuple[str, str]]:
    """Raw inline attributes in document order, ``style`` declarations last."""
    pairs = [
        (etree.QName(name).localname, value)
        for name, value in node.attrib.items()
        if etree.QName(name).localname not in ("class", "style")
    ]
    return pairs + parse_inline_style(node.get("style"))


def resolve_attributes(
    node: etree._Element,
    kind: NodeKind,
    style_classes: StyleClassMap,
    *,
    class_overrides: Mapping[str, Mapping[str, str]] | None = None,
    fill: str | None = None,
) -> dict[str, str]:
    """Flatten every style source for ``node`` into one render-schema map."""
    resolved: dict[str, str] = {}

    for name in class_tokens(node):
        if name not in style_classes:
            continue
        resolved.update(normalize_attributes(style_classes[name].items(), kind))
        if class_overrides and name in class_overrides:
            resolved.update(normalize_attributes(class_overrides[name].items(), kind))

    inline = normalize_attributes(inline_pairs(node), kind)

    # Only the element's own inline "none" survives the runtime fill.
    if fill and inline.get("fill") != NO_FILL:
        resolved["fill"] = fill
        if "fill" in inline:
            inline["fill"] = fill

    resolved.update(inline)
    return resolved
