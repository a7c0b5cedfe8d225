"""Attribute name and value normalization plus allow-list filtering."""

from __future__ import annotations

import re
from collections.abc import Iterable

from svguri.models.render_tree import ATTRIBUTE_RECORDS, NodeKind

# Attributes whose values are lengths or coordinates: "12px" / "50%" lose the unit.
LENGTH_ATTRIBUTES = frozenset({
    "width", "height",
    "x", "y", "cx", "cy", "fx", "fy",
    "r", "rx", "ry",
    "x1", "y1", "x2", "y2",
    "strokeWidth", "strokeDashoffset",
    "fontSize",
})

_UNIT_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(?:px|%)\s*$")


def camel_case(name: str) -> str:
    """``stroke-width`` -> ``strokeWidth``. Names without hyphens pass through."""
    head, *rest = name.strip().split("-")
    return head + "".join(token[:1].upper() + token[1:] for token in rest if token)


def strip_units(name: str, value: str) -> str:
    if name not in LENGTH_ATTRIBUTES:
        return value
    m = _UNIT_RE.match(value)
    return m.group(1) if m else value


def allowed_attributes(kind: NodeKind) -> frozenset[str]:
    """Kind-specific plus common attribute names, in render-schema form."""
    return ATTRIBUTE_RECORDS[kind].allowed_names()


def normalize_attributes(pairs: Iterable[tuple[str, str]], kind: NodeKind) -> dict[str, str]:
    """Normalize raw (name, value) pairs and keep only those ``kind`` accepts.

    Pairs are processed in order; a later duplicate replaces an earlier one.
    Rejected names are dropped without complaint.
    """
    allowed = allowed_attributes(kind)
    result: dict[str, str] = {}
    for raw_name, raw_value in pairs:
        name = camel_case(raw_name)
        if name not in allowed:
            continue
        result[name] = strip_units(name, raw_value)
    return result


def parse_inline_style(text: str | None) -> list[tuple[str, str]]:
    """Split a ``style="fill: red; stroke-width: 2"`` attribute into pairs."""
    pairs: list[tuple[str, str]] = []
    if not text:
        return pairs
    for decl in text.split(";"):
        if ":" not in decl:
            continue
        key, value = decl.split(":", 1)
        key = key.strip().lower()
        value = value.strip()
        if key and value:
            pairs.append((key, value))
    return pairs
