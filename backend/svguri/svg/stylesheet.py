"""Embedded stylesheet extraction: ``<style>`` text to a classname table.

Only rules whose selector is a single class (``.name``), or a comma list of
such, are honored. Everything else in the stylesheet is ignored.
"""

from __future__ import annotations

import logging
import re

import tinycss2
from lxml import etree

from svguri.svg.attributes import camel_case

logger = logging.getLogger(__name__)

StyleClassMap = dict[str, dict[str, str]]

_CLASS_SELECTOR_RE = re.compile(r"^\.(-?[_a-zA-Z][_a-zA-Z0-9-]*)$")


def extract_style_classes(root: etree._Element) -> StyleClassMap:
    """Collect class rules from every ``<style>`` element under ``root``."""
    css_text = "".join(
        "".join(node.itertext())
        for node in root.iter(etree.Element)
        if etree.QName(node).localname == "style"
    )
    if not css_text.strip():
        return {}
    return parse_stylesheet(css_text)


def parse_stylesheet(css_text: str) -> StyleClassMap:
    classes: StyleClassMap = {}
    rules = tinycss2.parse_stylesheet(css_text, skip_comments=True, skip_whitespace=True)
    for rule in rules:
        if rule.type != "qualified-rule":
            # at-rules and parse errors
            continue
        names = _class_names(tinycss2.serialize(rule.prelude))
        if not names:
            logger.debug("Skipping unsupported selector %r", tinycss2.serialize(rule.prelude).strip())
            continue
        declarations = _declarations(rule.content)
        if not declarations:
            continue
        for name in names:
            classes.setdefault(name, {}).update(declarations)
    return classes


def _class_names(selector_text: str) -> list[str]:
    names: list[str] = []
    for part in selector_text.split(","):
        m = _CLASS_SELECTOR_RE.match(part.strip())
        if m is None:
            return []
        names.append(m.group(1))
    return names


def _declarations(content: list) -> dict[str, str]:
    declarations: dict[str, str] = {}
    for decl in tinycss2.parse_declaration_list(content, skip_comments=True, skip_whitespace=True):
        if decl.type != "declaration":
            continue
        value = tinycss2.serialize(decl.value).strip()
        if value:
            declarations[camel_case(decl.lower_name)] = value
    return declarations
