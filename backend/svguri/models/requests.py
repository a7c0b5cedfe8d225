"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RenderOptionsRequest(BaseModel):
    fill: str | None = Field(default=None, description="Runtime fill applied to every fill except 'none'")
    classes: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Per-class attribute overrides (classname -> attribute -> value)",
    )
    width: str | None = Field(default=None, description="Overrides the root svg width")
    height: str | None = Field(default=None, description="Overrides the root svg height")


class RenderRequest(RenderOptionsRequest):
    svg: str = Field(..., description="Raw SVG code")


class RenderUrlRequest(RenderOptionsRequest):
    uri: str = Field(..., description="http(s) URI of the SVG document")
