"""SVG parser — facade over lxml.

Cuts the top-level ``<svg>...</svg>`` span out of raw text (anything around it,
such as an XML prolog or a doctype, is ignored) and parses it into an lxml
element tree.
"""

from __future__ import annotations

import logging
import re

from lxml import etree

logger = logging.getLogger(__name__)

_SVG_OPEN_RE = re.compile(r"<svg(?=[\s/>])")
_SVG_CLOSE = "</svg>"


class SvgParseError(ValueError):
    """Raised when the text holds no parsable ``<svg>`` span."""


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def extract_svg_span(svg_text: str) -> str:
    """Substring from the first ``<svg`` tag through the last ``</svg>``."""
    open_match = _SVG_OPEN_RE.search(svg_text)
    if open_match is None:
        raise SvgParseError("No <svg> start tag found")
    end = svg_text.rfind(_SVG_CLOSE)
    if end < open_match.start():
        raise SvgParseError("No </svg> end tag found")
    return svg_text[open_match.start():end + len(_SVG_CLOSE)]


def parse_svg_document(svg_text: str) -> etree._Element:
    """Parse raw SVG text into the root ``<svg>`` element."""
    if not svg_text:
        raise SvgParseError("Empty SVG text")
    span = extract_svg_span(svg_text)
    try:
        root = etree.fromstring(span, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise SvgParseError(f"Malformed SVG: {e}") from e

    logger.debug("Parsed SVG span: %d chars, %d elements", len(span), sum(1 for _ in root.iter()))
    return root
