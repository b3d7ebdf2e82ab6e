"""Detector configuration — tolerances and input checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from polysym.geometry.tolerance import Tolerance

if TYPE_CHECKING:
    from polysym.config import Settings


@dataclass
class SymmetryConfig:
    """Controls how strictly candidate axes are verified."""

    # Coordinate match: abs_tol is in units of the polygon's bbox diagonal
    abs_tol: float = 1e-9
    rel_tol: float = 1e-9

    # Reject self-intersecting input before trying any axis
    require_simple: bool = False

    @property
    def tolerance(self) -> Tolerance:
        return Tolerance(abs_tol=self.abs_tol, rel_tol=self.rel_tol)

    @classmethod
    def from_settings(cls, settings: Settings) -> SymmetryConfig:
        return cls(
            abs_tol=settings.symmetry_abs_tol,
            rel_tol=settings.symmetry_rel_tol,
            require_simple=settings.require_simple_polygon,
        )
