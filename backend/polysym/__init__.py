"""PolySym: mirror symmetry detection for simple polygons."""

__version__ = "0.1.0"
