"""Render options and render state.

RenderOptions are caller inputs. RenderState is what a successful generation
pass produces; it is swapped in whole, never edited in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from svguri.models.render_tree import RenderNode


@dataclass
class RenderOptions:
    """Caller-supplied inputs that shape every generation pass."""

    # Runtime fill override, applied to every resolved fill except "none"
    fill: str | None = None
    # classname -> {attribute: value}, layered over the document's own class rules
    classes: dict[str, dict[str, str]] = field(default_factory=dict)
    # Explicit size for the root <svg>, overriding the document's width/height
    width: str | None = None
    height: str | None = None
    # Fired once after a successful fetch
    on_load: Callable[[], None] | None = None
    # Receives the host's handle for the root svg element
    svg_ref: Callable[[Any], None] | None = None


@dataclass(frozen=True)
class RenderState:
    tree: RenderNode | None = None
    fill: str | None = None
    source_text: str | None = None
    generation: int = 0

    @property
    def node_count(self) -> int:
        return sum(1 for _ in self.tree.iter_nodes()) if self.tree is not None else 0
