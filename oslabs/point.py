"""A two-dimensional integer point."""

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create a point and print its coordinates."""
    p = Point(1, 2)
    print(f"point(x, y) = {p.x}, {p.y} (using library)")
    x, y = p.x, p.y
    print(f"point(x, y) = {x}, {y} (using library)")
    return 0