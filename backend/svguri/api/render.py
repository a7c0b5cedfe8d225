"""POST /api/render: SVG text or an http(s) URI to render tree."""

from __future__ import annotations

import logging
import time
from urllib.parse import urlparse

from fastapi import APIRouter

from svguri.engine.context import RenderOptions
from svguri.engine.renderer import SvgRenderer
from svguri.models.requests import RenderOptionsRequest, RenderRequest, RenderUrlRequest
from svguri.models.responses import RenderResponse

router = APIRouter()
logger = logging.getLogger(__name__)

# Local files are never served over HTTP.
REMOTE_SCHEMES = ("http", "https")


def _renderer_for(req: RenderOptionsRequest) -> SvgRenderer:
    return SvgRenderer(
        RenderOptions(fill=req.fill, classes=req.classes, width=req.width, height=req.height)
    )


def _response(renderer: SvgRenderer, start: float) -> RenderResponse:
    state = renderer.state
    return RenderResponse(
        tree=state.tree.to_dict() if state.tree is not None else None,
        node_count=state.node_count,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
    )


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    start = time.perf_counter()
    renderer = _renderer_for(req)
    if renderer.generate(req.svg) is None:
        logger.warning("Render produced no tree (%d chars of input)", len(req.svg))
    return _response(renderer, start)


@router.post("/render/url", response_model=RenderResponse)
async def render_url(req: RenderUrlRequest) -> RenderResponse:
    start = time.perf_counter()
    renderer = _renderer_for(req)
    scheme = urlparse(req.uri).scheme.lower()
    if scheme not in REMOTE_SCHEMES:
        logger.warning("Rejected render URI with scheme %r: %s", scheme, req.uri)
        return _response(renderer, start)
    if await renderer.load(req.uri) is None:
        logger.warning("Render produced no tree for %s", req.uri)
    return _response(renderer, start)
