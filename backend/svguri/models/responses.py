"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from svguri.models.render_tree import NodeKind


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"
    node_kinds: int = len(NodeKind)


class RenderResponse(BaseModel):
    tree: dict[str, Any] | None = None
    node_count: int = 0
    processing_time_ms: float = 0.0
