"""DOM -> render tree transducer.

Walks the parsed document depth-first. Elements outside the supported kinds
are dropped together with their whole subtree, so a valid ``<circle>`` inside
an unsupported ``<foreignObject>`` never renders. Attributes outside a kind's
allow-list are dropped the same way. Neither is reported as an error; the
result is a partial rendering.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Union

from lxml import etree

from svguri.models.render_tree import ATTRIBUTE_RECORDS, NodeKind, RenderNode
from svguri.svg.attributes import strip_units
from svguri.svg.baseline import correct_baseline
from svguri.svg.style_resolver import resolve_attributes
from svguri.svg.stylesheet import StyleClassMap

logger = logging.getLogger(__name__)

Child = Union[RenderNode, str]


@dataclass
class SvgTransducer:
    """One transduction pass. Not reusable across documents: keys restart per instance."""

    style_classes: StyleClassMap = field(default_factory=dict)
    class_overrides: Mapping[str, Mapping[str, str]] | None = None
    fill: str | None = None
    width: str | None = None
    height: str | None = None
    svg_ref: Callable[[Any], None] | None = None

    def __post_init__(self) -> None:
        # Document-order position of each accepted element.
        self._keys = itertools.count()
        self._skipped: set[str] = set()

    def transduce(self, root: etree._Element) -> RenderNode | None:
        node = self._inspect(root, is_root=True)
        if self._skipped:
            logger.debug("Skipped unsupported elements: %s", ", ".join(sorted(self._skipped)))
        return node

    def _inspect(self, node: etree._Element, *, is_root: bool = False) -> RenderNode | None:
        if not isinstance(node.tag, str):
            # comments / processing instructions that survived parsing
            return None
        name = etree.QName(node).localname
        kind = NodeKind.from_tag(name)
        if kind is None:
            self._skipped.add(name)
            return None

        key = next(self._keys)
        children: list[Child] = []
        if node.text:
            children.append(node.text)
        for child in node:
            rendered = self._inspect(child)
            if rendered is not None:
                children.append(rendered)
            if child.tail:
                children.append(child.tail)

        return self._build(node, kind, key, _trim_children(children), is_root=is_root)

    def _build(
        self,
        node: etree._Element,
        kind: NodeKind,
        key: int,
        children: list[Child],
        *,
        is_root: bool,
    ) -> RenderNode:
        attrs = resolve_attributes(
            node,
            kind,
            self.style_classes,
            class_overrides=self.class_overrides,
            fill=self.fill,
        )

        ref = None
        if kind is NodeKind.SVG and is_root:
            if self.width:
                attrs["width"] = strip_units("width", str(self.width))
            if self.height:
                attrs["height"] = strip_units("height", str(self.height))
            ref = self.svg_ref
        elif kind.is_text and attrs.get("y"):
            attrs["y"] = correct_baseline(attrs["y"], node)

        return RenderNode(
            kind=kind,
            key=key,
            attributes=ATTRIBUTE_RECORDS[kind].model_validate(attrs),
            children=children,
            ref=ref,
        )


def _trim_children(children: list[Child]) -> list[Child]:
    """Drop whitespace-only text runs; keep everything else verbatim."""
    return [c for c in children if not isinstance(c, str) or c.strip()]
