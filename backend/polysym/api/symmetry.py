"""POST /api/symmetry — mirror symmetry check for one polygon."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from polysym.config import Settings
from polysym.dependencies import get_settings
from polysym.engine.config import SymmetryConfig
from polysym.engine.detector import SymmetryDetector
from polysym.engine.polygon import Polygon
from polysym.errors import PolygonError
from polysym.models.requests import SymmetryRequest
from polysym.models.responses import AxisModel, ErrorDetail, SymmetryResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def _build_config(req: SymmetryRequest, settings: Settings) -> SymmetryConfig:
    config = SymmetryConfig.from_settings(settings)
    if req.abs_tol is not None:
        config.abs_tol = req.abs_tol
    if req.rel_tol is not None:
        config.rel_tol = req.rel_tol
    if req.require_simple is not None:
        config.require_simple = req.require_simple
    return config


# Sync route: runs in the FastAPI threadpool
@router.post("/symmetry", response_model=SymmetryResponse)
def symmetry(req: SymmetryRequest, settings: Settings = Depends(get_settings)) -> SymmetryResponse:
    start = time.perf_counter()
    detector = SymmetryDetector(_build_config(req, settings))

    try:
        polygon = Polygon(req.vertices)
        axis, checked = detector.search(polygon)
    except PolygonError as e:
        logger.warning("Rejected polygon (%s): %s", e.code, e)
        detail = ErrorDetail(error=e.code, message=str(e))
        raise HTTPException(status_code=422, detail=detail.model_dump()) from e

    elapsed = (time.perf_counter() - start) * 1000
    return SymmetryResponse(
        symmetric=axis is not None,
        axis=AxisModel(
            kind=axis.kind.value,
            anchor=axis.anchor,
            start=axis.line.a.as_tuple(),
            end=axis.line.b.as_tuple(),
        )
        if axis
        else None,
        vertex_count=polygon.count,
        winding=polygon.winding,
        candidates_checked=checked,
        processing_time_ms=round(elapsed, 3),
    )
