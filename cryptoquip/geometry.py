"""Points, rectangles and segments used to describe regions of an image."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    """A pixel position; ``x`` grows to the right, ``y`` grows downwards."""

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """A half-open rectangle: ``top_left`` is inside, ``bottom_right`` is not."""

    top_left: Point
    bottom_right: Point

    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x


@dataclass(frozen=True)
class Segment:
    """A half-open span ``[start, end)`` along one axis."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Bad segment: start ({self.start}) must be <= end ({self.end})"
            )


def iter_rect(rect: Rect) -> Iterator[Point]:
    """Yield every point inside ``rect`` row by row, left to right."""
    for y in range(rect.top_left.y, rect.bottom_right.y):
        for x in range(rect.top_left.x, rect.bottom_right.x):
            yield Point(x, y)