"""PolySym mirror symmetry engine."""

from polysym.engine.axes import AxisKind, CandidateAxis, candidate_axes
from polysym.engine.config import SymmetryConfig
from polysym.engine.detector import SymmetryDetector, find_mirror_axis, has_mirror_symmetry
from polysym.engine.polygon import Polygon

__all__ = [
    "AxisKind",
    "CandidateAxis",
    "candidate_axes",
    "SymmetryConfig",
    "SymmetryDetector",
    "find_mirror_axis",
    "has_mirror_symmetry",
    "Polygon",
]
