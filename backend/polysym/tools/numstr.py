"""
numstr — digit-string utilities for the "123456789101112..." sequence.

Usage:
  numstr generate 1000000 solution.txt         # writes 1..999999 concatenated
  numstr compare solution.txt --offset 0 --offset 9
  numstr compare solution.txt --start 100 --count 25

These tools are independent of the symmetry engine.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

# Offsets checked when none are given on the command line
DEFAULT_OFFSET_START = 10**12
DEFAULT_OFFSET_COUNT = 25


def generate(length: int, path: str | Path) -> int:
    """Write the integers 1 .. length-1 concatenated to ``path``.

    Returns the number of characters written.
    """
    if length < 1:
        raise ValueError(f"length must be a positive integer, got {length}")

    written = 0
    with open(path, "w", encoding="ascii") as f:
        for i in range(1, length):
            s = str(i)
            f.write(s)
            written += len(s)
    logger.info("Wrote %d digits (1..%d) to %s", written, length - 1, path)
    return written


def char_at(offset: int) -> str:
    """Digit at 0-based ``offset`` of the infinite string "123456789101112..."."""
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")

    digits, count, first = 1, 9, 1
    # Skip whole blocks of same-width numbers: 9 one-digit, 90 two-digit, ...
    while offset >= digits * count:
        offset -= digits * count
        digits += 1
        count *= 10
        first *= 10

    number = first + offset // digits
    return str(number)[offset % digits]


@dataclass
class OffsetCheck:
    offset: int
    computed: str
    expected: str

    @property
    def ok(self) -> bool:
        return self.computed == self.expected

    def format(self) -> str:
        status = "SUCCESS" if self.ok else "FAILURE"
        return (
            f"char_at( {self.offset} ) = {self.computed}  "
            f"solution file = {self.expected or '<eof>'} : {status}"
        )


@dataclass
class OffsetReport:
    solution: str
    checks: list[OffsetCheck] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for c in self.checks if c.ok)

    @property
    def failed(self) -> int:
        return len(self.checks) - self.passed

    @property
    def ok(self) -> bool:
        return self.failed == 0


def compare_offsets(solution_path: str | Path, offsets: Iterable[int]) -> OffsetReport:
    """Compare char_at() against the byte at each offset of a solution file."""
    report = OffsetReport(solution=str(solution_path))
    with open(solution_path, "rb") as f:
        for offset in offsets:
            f.seek(offset)
            expected = f.read(1).decode("ascii", errors="replace")
            report.checks.append(OffsetCheck(offset, char_at(offset), expected))
    logger.info("Compared %d offsets: %d failed", len(report.checks), report.failed)
    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numstr", description="Digit-string utilities")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Write 1..LENGTH-1 concatenated to a file")
    gen.add_argument("length", type=int, help="Exclusive upper bound of the series")
    gen.add_argument("path", help="Output file")

    cmp_ = sub.add_parser("compare", help="Check char_at() against a solution file")
    cmp_.add_argument("solution", help="File produced by 'numstr generate'")
    cmp_.add_argument("--offset", type=int, action="append", default=[],
                      help="Offset to check (repeatable)")
    cmp_.add_argument("--start", type=int, default=DEFAULT_OFFSET_START,
                      help="First offset of a contiguous range")
    cmp_.add_argument("--count", type=int, default=DEFAULT_OFFSET_COUNT,
                      help="Length of the contiguous range")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.command == "generate":
        try:
            generate(args.length, args.path)
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 2
        return 0

    offsets = args.offset or range(args.start, args.start + args.count)
    print(f"opening file {args.solution}")
    try:
        report = compare_offsets(args.solution, offsets)
    except (OSError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 2
    for check in report.checks:
        print(check.format())
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
