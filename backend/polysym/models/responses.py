"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from polysym import __version__


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__


class AxisModel(BaseModel):
    kind: str
    anchor: int
    start: tuple[float, float]
    end: tuple[float, float]


class SymmetryResponse(BaseModel):
    symmetric: bool
    axis: AxisModel | None = None
    vertex_count: int
    winding: int = 0
    candidates_checked: int = 0
    processing_time_ms: float = 0.0


class ErrorDetail(BaseModel):
    error: str
    message: str
