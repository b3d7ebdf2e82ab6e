"""Float comparison tolerance shared by every geometric equality test."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Tolerance:
    """Absolute/relative tolerance for float equality.

    ``abs_tol`` is multiplied by a caller-supplied ``scale`` so that it can be
    expressed in units of the geometry being compared (polygon diagonal for
    coordinates, product of line lengths for slope products).
    """

    abs_tol: float = 1e-9
    rel_tol: float = 1e-9

    def __post_init__(self) -> None:
        if self.abs_tol < 0 or self.rel_tol < 0:
            raise ValueError(
                f"Tolerances must be non-negative, got abs_tol={self.abs_tol} rel_tol={self.rel_tol}"
            )

    @classmethod
    def exact(cls) -> Tolerance:
        """Zero tolerance: plain ``==`` semantics."""
        return cls(abs_tol=0.0, rel_tol=0.0)

    def close(self, a: float, b: float, scale: float = 1.0) -> bool:
        return math.isclose(a, b, rel_tol=self.rel_tol, abs_tol=self.abs_tol * scale)


DEFAULT_TOLERANCE = Tolerance()
