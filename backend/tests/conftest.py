"""Shared test fixtures."""

from __future__ import annotations

import pytest


ICON_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
<svg xmlns="http://www.w3.org/2000/svg" width="24px" height="24px" viewBox="0 0 24 24">
  <g id="layer" stroke-width="2px" stroke-linecap="round">
    <circle cx="12" cy="12" r="10" fill="blue"/>
    <path d="M8 14s1.5 2 4 2 4-2 4-2" fill="none" stroke="black"/>
  </g>
</svg>
<!-- trailing content is ignored -->'''

STYLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <style>
    .a { fill: green; stroke-width: 3px; }
    .b, .c { stroke: purple; }
    rect > .a { fill: orange; }
    @media print { .a { fill: black; } }
  </style>
  <rect class="a" x="0" y="0" width="10" height="10" fill="yellow"/>
  <rect class="a" x="10" y="0" width="10" height="10"/>
  <circle class="c" cx="50" cy="50" r="5"/>
</svg>'''

TEXT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <text font-size="10" x="5" y="20">Hello</text>
  <text font-size="4" x="5" y="40">
    <tspan y="20">nested</tspan>
  </text>
</svg>'''

GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <defs>
    <linearGradient id="grad" x1="0" y1="0" x2="1" y2="0">
      <stop offset="0%" stop-color="#fff"/>
      <stop offset="100%" stop-color="#000" stop-opacity="0.5"/>
    </linearGradient>
    <radialGradient id="glow" cx="50%" cy="50%" r="50%" fx="40%">
      <stop offset="0" stop-color="red"/>
    </radialGradient>
  </defs>
  <ellipse cx="50" cy="50" rx="40" ry="20" fill="url(#grad)"/>
  <polygon points="0,0 10,0 5,10"/>
  <polyline points="0,0 10,10 20,0" fill="none"/>
  <line x1="0" y1="0" x2="100" y2="100" stroke="red"/>
</svg>'''

FOREIGN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <foreignObject width="100" height="100">
    <g><circle cx="5" cy="5" r="5"/></g>
  </foreignObject>
  <title>Icon</title>
  <circle cx="50" cy="50" r="5"/>
</svg>'''


@pytest.fixture
def icon_svg() -> str:
    return ICON_SVG


@pytest.fixture
def styled_svg() -> str:
    return STYLED_SVG


@pytest.fixture
def text_svg() -> str:
    return TEXT_SVG


@pytest.fixture
def gradient_svg() -> str:
    return GRADIENT_SVG


@pytest.fixture
def foreign_svg() -> str:
    return FOREIGN_SVG
