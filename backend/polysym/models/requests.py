"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SymmetryRequest(BaseModel):
    vertices: list[tuple[float, float]] = Field(
        ...,
        description="Polygon vertices in winding order, as [x, y] pairs",
    )
    abs_tol: float | None = Field(
        default=None,
        ge=0.0,
        description="Absolute tolerance in units of the polygon's bbox diagonal",
    )
    rel_tol: float | None = Field(default=None, ge=0.0, description="Relative tolerance")
    require_simple: bool | None = Field(
        default=None,
        description="Reject self-intersecting polygons (defaults to server setting)",
    )
