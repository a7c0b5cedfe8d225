"""svguri: turn SVG text into a render-node tree for a host vector renderer."""

from svguri.engine.context import RenderOptions, RenderState
from svguri.engine.fetcher import SvgFetchError
from svguri.engine.renderer import SvgRenderer, build_render_tree, render_svg
from svguri.models.render_tree import NodeKind, RenderNode
from svguri.svg.parser import SvgParseError

__version__ = "0.1.0"

__all__ = [
    "NodeKind",
    "RenderNode",
    "RenderOptions",
    "RenderState",
    "SvgFetchError",
    "SvgParseError",
    "SvgRenderer",
    "build_render_tree",
    "render_svg",
]
