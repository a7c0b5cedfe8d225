"""svguri render engine."""

from svguri.engine.context import RenderOptions, RenderState
from svguri.engine.renderer import SvgRenderer, build_render_tree, render_svg

__all__ = [
    "RenderOptions",
    "RenderState",
    "SvgRenderer",
    "build_render_tree",
    "render_svg",
]
