"""Render tree model — renderer-agnostic drawing primitives.

Every node carries one of 15 element kinds and a typed attribute record for
that kind. Records are closed (``extra="forbid"``) so an attribute outside the
kind's allow-list cannot be stored. At the host boundary a record flattens to
the camelCase string map the vector renderer expects (``to_props``).
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NodeKind(str, enum.Enum):
    SVG = "svg"
    G = "g"
    CIRCLE = "circle"
    PATH = "path"
    RECT = "rect"
    LINE = "line"
    DEFS = "defs"
    LINEAR_GRADIENT = "linearGradient"
    RADIAL_GRADIENT = "radialGradient"
    STOP = "stop"
    ELLIPSE = "ellipse"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    TEXT = "text"
    TSPAN = "tspan"

    @classmethod
    def from_tag(cls, name: str) -> NodeKind | None:
        """Map an element's local name to its kind; ``None`` means unsupported."""
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def is_text(self) -> bool:
        return self in (NodeKind.TEXT, NodeKind.TSPAN)


# ── Attribute records ────────────────────────────────────────────────────


class CommonAttributes(BaseModel):
    """Presentation attributes accepted by every kind."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    fill: str | None = None
    fill_opacity: str | None = None
    stroke: str | None = None
    stroke_width: str | None = None
    stroke_opacity: str | None = None
    opacity: str | None = None
    stroke_linecap: str | None = None
    stroke_linejoin: str | None = None
    stroke_dasharray: str | None = None
    stroke_dashoffset: str | None = None
    x: str | None = None
    y: str | None = None
    rotate: str | None = None
    scale: str | None = None
    origin: str | None = None
    origin_x: str | None = None
    origin_y: str | None = None
    transform: str | None = None

    @classmethod
    def allowed_names(cls) -> frozenset[str]:
        """Render-schema (camelCase) names this record accepts."""
        return frozenset(f.alias or name for name, f in cls.model_fields.items())

    def to_props(self) -> dict[str, str]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SvgAttributes(CommonAttributes):
    view_box: str | None = None
    width: str | None = None
    height: str | None = None


class GroupAttributes(CommonAttributes):
    id: str | None = None


class CircleAttributes(CommonAttributes):
    cx: str | None = None
    cy: str | None = None
    r: str | None = None


class PathAttributes(CommonAttributes):
    d: str | None = None


class RectAttributes(CommonAttributes):
    width: str | None = None
    height: str | None = None
    rx: str | None = None
    ry: str | None = None


class LineAttributes(CommonAttributes):
    x1: str | None = None
    y1: str | None = None
    x2: str | None = None
    y2: str | None = None


class DefsAttributes(CommonAttributes):
    id: str | None = None


class LinearGradientAttributes(LineAttributes):
    id: str | None = None
    gradient_units: str | None = None
    gradient_transform: str | None = None


class RadialGradientAttributes(CircleAttributes):
    fx: str | None = None
    fy: str | None = None
    id: str | None = None
    gradient_units: str | None = None
    gradient_transform: str | None = None


class StopAttributes(CommonAttributes):
    offset: str | None = None
    stop_color: str | None = None
    stop_opacity: str | None = None


class EllipseAttributes(CommonAttributes):
    cx: str | None = None
    cy: str | None = None
    rx: str | None = None
    ry: str | None = None


class PointsAttributes(CommonAttributes):
    points: str | None = None


class TextAttributes(CommonAttributes):
    font_family: str | None = None
    font_size: str | None = None
    font_weight: str | None = None
    text_anchor: str | None = None


ATTRIBUTE_RECORDS: dict[NodeKind, type[CommonAttributes]] = {
    NodeKind.SVG: SvgAttributes,
    NodeKind.G: GroupAttributes,
    NodeKind.CIRCLE: CircleAttributes,
    NodeKind.PATH: PathAttributes,
    NodeKind.RECT: RectAttributes,
    NodeKind.LINE: LineAttributes,
    NodeKind.DEFS: DefsAttributes,
    NodeKind.LINEAR_GRADIENT: LinearGradientAttributes,
    NodeKind.RADIAL_GRADIENT: RadialGradientAttributes,
    NodeKind.STOP: StopAttributes,
    NodeKind.ELLIPSE: EllipseAttributes,
    NodeKind.POLYGON: PointsAttributes,
    NodeKind.POLYLINE: PointsAttributes,
    NodeKind.TEXT: TextAttributes,
    NodeKind.TSPAN: TextAttributes,
}


# ── Render node ──────────────────────────────────────────────────────────


class RenderNode(BaseModel):
    """One drawing primitive plus its ordered children (nodes or text runs)."""

    model_config = ConfigDict(frozen=True)

    kind: NodeKind
    key: int = 0
    attributes: CommonAttributes = Field(default_factory=CommonAttributes)
    children: list[Union[RenderNode, str]] = Field(default_factory=list)
    # Host element attachment point; only set on the root svg.
    ref: Callable[[Any], None] | None = Field(default=None, exclude=True, repr=False)

    @property
    def props(self) -> dict[str, str]:
        return self.attributes.to_props()

    def attach(self, handle: Any) -> None:
        """Hand the host's element handle to the caller's callback, if any."""
        if self.ref is not None:
            self.ref(handle)

    def iter_nodes(self):
        """Yield this node and every descendant node, pre-order."""
        yield self
        for child in self.children:
            if isinstance(child, RenderNode):
                yield from child.iter_nodes()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "key": self.key,
            "props": self.props,
            "children": [c.to_dict() if isinstance(c, RenderNode) else c for c in self.children],
        }
