"""
polysym-check — mirror symmetry check from the command line.

Usage:
  polysym-check square.json                   # JSON array of [x, y] pairs
  cat poly.json | polysym-check -             # read from stdin
  polysym-check poly.json --abs-tol 1e-6      # loosen coordinate matching
  polysym-check poly.json --require-simple    # reject self-intersecting input

Exit status: 0 symmetric, 1 not symmetric, 2 input rejected.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from polysym.config import settings
from polysym.engine.config import SymmetryConfig
from polysym.engine.detector import SymmetryDetector
from polysym.errors import PolygonError

logger = logging.getLogger(__name__)

EXIT_SYMMETRIC = 0
EXIT_ASYMMETRIC = 1
EXIT_REJECTED = 2


def load_vertices(source: str) -> list[list[float]]:
    """Read a JSON vertex list from a path, or stdin when ``source`` is "-"."""
    if source == "-":
        text = sys.stdin.read()
    else:
        with open(source, encoding="utf-8") as f:
            text = f.read()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {source}: {e}") from e
    if isinstance(data, dict):
        data = data.get("vertices", data)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of [x, y] pairs in {source}")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polysym-check",
        description="Decide whether a simple polygon has a mirror axis",
    )
    parser.add_argument("input", help='JSON file of [x, y] vertex pairs, or "-" for stdin')
    parser.add_argument("--abs-tol", type=float, default=settings.symmetry_abs_tol,
                        help="Absolute tolerance in units of the bbox diagonal")
    parser.add_argument("--rel-tol", type=float, default=settings.symmetry_rel_tol,
                        help="Relative tolerance")
    parser.add_argument("--require-simple", action="store_true",
                        help="Reject self-intersecting polygons")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each rejected axis")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(
            logging, settings.polysym_log_level.upper(), logging.INFO
        ),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        vertices = load_vertices(args.input)
        config = SymmetryConfig(
            abs_tol=args.abs_tol,
            rel_tol=args.rel_tol,
            require_simple=args.require_simple,
        )
        axis = SymmetryDetector(config).find_axis(vertices)
    except OSError as e:
        print(f"Cannot read {args.input}: {e}", file=sys.stderr)
        return EXIT_REJECTED
    except PolygonError as e:
        print(f"Rejected ({e.code}): {e}", file=sys.stderr)
        return EXIT_REJECTED
    except ValueError as e:
        print(f"Rejected: {e}", file=sys.stderr)
        return EXIT_REJECTED

    if axis is None:
        print("not symmetric")
        return EXIT_ASYMMETRIC

    (ax, ay), (bx, by) = axis.line.a.as_tuple(), axis.line.b.as_tuple()
    print(f"symmetric: {axis.kind.value} axis ({ax:g}, {ay:g}) -> ({bx:g}, {by:g})")
    return EXIT_SYMMETRIC


if __name__ == "__main__":
    sys.exit(main())
