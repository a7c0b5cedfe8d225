"""Render orchestrator — parse, extract styles and transduce in one atomic pass."""

from __future__ import annotations

import itertools
import logging
import time
from pathlib import Path
from typing import Any

import httpx

from svguri.engine.context import RenderOptions, RenderState
from svguri.engine.fetcher import SvgFetchError, fetch_svg_text, resolve_source
from svguri.models.render_tree import RenderNode
from svguri.svg.parser import SvgParseError, parse_svg_document
from svguri.svg.stylesheet import extract_style_classes
from svguri.svg.transducer import SvgTransducer

logger = logging.getLogger(__name__)


def build_render_tree(svg_text: str, options: RenderOptions | None = None) -> RenderNode | None:
    """Run one generation pass. Raises SvgParseError on unparsable input."""
    options = options or RenderOptions()
    root = parse_svg_document(svg_text)
    style_classes = extract_style_classes(root)
    transducer = SvgTransducer(
        style_classes=style_classes,
        class_overrides=options.classes,
        fill=options.fill,
        width=options.width,
        height=options.height,
        svg_ref=options.svg_ref,
    )
    return transducer.transduce(root)


def render_svg(svg_text: str, **kwargs: Any) -> RenderNode | None:
    """Stateless convenience: ``None`` when the text cannot be parsed."""
    try:
        return build_render_tree(svg_text, RenderOptions(**kwargs))
    except SvgParseError as e:
        logger.warning("ERROR SVG: %s", e)
        return None


class SvgRenderer:
    """Owns the current render tree and the runtime overrides that produced it.

    Failures never touch the current state: whatever rendered last keeps
    rendering. Fetches are tagged with a monotonic request number and only the
    response to the newest request may update the state. Local files are only
    read when the renderer is created with ``allow_local=True``.
    """

    def __init__(
        self,
        options: RenderOptions | None = None,
        client: httpx.AsyncClient | None = None,
        *,
        allow_local: bool = False,
    ) -> None:
        self.options = options or RenderOptions()
        self._client = client
        self._allow_local = allow_local
        self._state = RenderState(fill=self.options.fill)
        self._requests = itertools.count(1)
        self._latest_request = 0
        self._uri: str | None = None

    @property
    def state(self) -> RenderState:
        return self._state

    @property
    def tree(self) -> RenderNode | None:
        return self._state.tree

    # ── Generation ───────────────────────────────────────────────────────

    def generate(self, svg_text: str | None) -> RenderNode | None:
        """Regenerate the tree from ``svg_text``; ``None`` if nothing was produced."""
        if not svg_text:
            return None

        start = time.perf_counter()
        try:
            tree = build_render_tree(svg_text, self.options)
        except SvgParseError as e:
            logger.warning("ERROR SVG: %s", e)
            return None

        self._state = RenderState(
            tree=tree,
            fill=self.options.fill,
            source_text=svg_text,
            generation=self._state.generation + 1,
        )
        elapsed = (time.perf_counter() - start) * 1000
        logger.info("Generated render tree: %d nodes in %.1fms", self._state.node_count, elapsed)
        return tree

    async def load(self, source: str | Path | dict | None) -> RenderNode | None:
        """Fetch ``source`` and generate from it, unless a newer load overtakes this one."""
        uri = resolve_source(source)
        if not uri:
            return None
        request = next(self._requests)
        self._latest_request = request
        self._uri = uri

        try:
            svg_text = await fetch_svg_text(uri, self._client, allow_local=self._allow_local)
        except SvgFetchError as e:
            if request != self._latest_request:
                logger.debug("Ignoring failed stale request %d for %s: %s", request, uri, e)
            else:
                logger.error("ERROR SVG: %s", e)
            return None

        if request != self._latest_request:
            logger.info("Discarding stale response for %s (request %d, latest %d)", uri, request, self._latest_request)
            return None

        tree = self.generate(svg_text)
        if self.options.on_load is not None:
            self.options.on_load()
        return tree

    # ── Input updates ────────────────────────────────────────────────────

    async def set_source(self, source: str | Path | dict | None) -> RenderNode | None:
        """Load ``source`` only when it resolves to a different URI than the last one."""
        uri = resolve_source(source)
        if not uri or uri == self._uri:
            return None
        return await self.load(uri)

    def set_svg_text(self, svg_text: str | None) -> RenderNode | None:
        if svg_text == self._state.source_text:
            return None
        return self.generate(svg_text)

    def set_fill(self, fill: str | None) -> RenderNode | None:
        """Change the runtime fill; the current document is regenerated with it."""
        if fill == self.options.fill:
            return None
        self.options.fill = fill
        if self._state.source_text is None:
            self._state = RenderState(fill=fill, generation=self._state.generation)
            return None
        return self.generate(self._state.source_text)
