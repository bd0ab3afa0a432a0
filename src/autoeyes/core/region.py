"""Rectangular screen regions with derived corner and center points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


class Point(NamedTuple):
    """Screen point in pixels."""

    x: int
    y: int


@dataclass(frozen=True)
class Region:
    """Immutable rectangle in screen coordinates.

    Corner and center points are computed once in the constructor and cannot
    be assigned, so they always agree with the rectangle. ``right`` and
    ``bottom`` are exclusive edges (``x + width``, ``y + height``).
    """

    x: int
    y: int
    width: int
    height: int
    center: Point = field(init=False, repr=False, compare=False)
    top_left: Point = field(init=False, repr=False, compare=False)
    top_right: Point = field(init=False, repr=False, compare=False)
    bottom_left: Point = field(init=False, repr=False, compare=False)
    bottom_right: Point = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Invalid region dimensions: width={self.width}, height={self.height}. "
                f"Dimensions must be positive."
            )

        right = self.x + self.width
        bottom = self.y + self.height
        object.__setattr__(
            self, "center", Point(self.x + self.width // 2, self.y + self.height // 2)
        )
        object.__setattr__(self, "top_left", Point(self.x, self.y))
        object.__setattr__(self, "top_right", Point(right, self.y))
        object.__setattr__(self, "bottom_left", Point(self.x, bottom))
        object.__setattr__(self, "bottom_right", Point(right, bottom))

    @classmethod
    def from_point_size(cls, point: tuple[int, int], size: tuple[int, int]) -> Region:
        """Create a region from its top-left point and (width, height)."""
        return cls(int(point[0]), int(point[1]), int(size[0]), int(size[1]))

    @classmethod
    def from_tuple(cls, region: tuple[int, int, int, int]) -> Region:
        """Create a region from a (left, top, width, height) tuple."""
        left, top, width, height = region
        return cls(int(left), int(top), int(width), int(height))

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Return the region as a (left, top, width, height) tuple."""
        return (self.x, self.y, self.width, self.height)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def offset(self, dx: int, dy: int) -> Point:
        """Screen point at (dx, dy) relative to the region's top-left corner."""
        return Point(self.x + dx, self.y + dy)
