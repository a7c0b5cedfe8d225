"""Vertical text position correction.

SVG anchors text at its baseline; the target surface anchors it at the top of
the text box. Subtracting the nearest enclosing font size from ``y`` is a rough
stand-in for the font ascent. It is a heuristic: it ignores the actual font
metrics, ``dy`` offsets and font sizes set through classes.
"""

from __future__ import annotations

import math
import re

from lxml import etree

_NUMBER_RE = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def _leading_number(value: str | None) -> float | None:
    if value is None:
        return None
    m = _NUMBER_RE.match(value)
    if m is None:
        return None
    number = float(m.group(0))
    return number if math.isfinite(number) else None


def _fmt(value: float) -> str:
    if math.isclose(value, round(value)):
        return str(int(round(value)))
    return f"{value:.3f}".rstrip("0").rstrip(".")


def nearest_font_size(node: etree._Element | None) -> float | None:
    """Font size from ``node`` or its closest ancestor that declares one."""
    while node is not None:
        size = _leading_number(node.get("font-size"))
        if size is not None:
            return size
        node = node.getparent()
    return None


def correct_baseline(y: str, node: etree._Element) -> str:
    try:
        y_value = float(y)
    except ValueError:
        # coordinate lists and the like
        return y
    if not math.isfinite(y_value):
        return y
    font_size = nearest_font_size(node)
    if font_size is None:
        return y
    return _fmt(y_value - font_size)
