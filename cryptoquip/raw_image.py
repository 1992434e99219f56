"""An 8-bit greyscale image and the box detection run over it."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .geometry import Point, Rect, Segment

WHITE = 255


def is_black(pixel: int) -> bool:
    """Anything darker than pure white counts as ink."""
    return pixel < WHITE


def segmentify(length: int, is_span_black: Callable[[int], bool]) -> list[Segment]:
    """Split ``range(length)`` into the runs for which ``is_span_black`` holds."""
    segments: list[Segment] = []
    start: int | None = None

    for i in range(length):
        black = is_span_black(i)
        if black and start is None:
            start = i
        elif not black and start is not None:
            segments.append(Segment(start, i))
            start = None

    if start is not None:
        segments.append(Segment(start, length))

    return segments


@dataclass
class RawImage:
    """Row-major greyscale pixels, one byte each."""

    data: bytearray
    width: int
    height: int

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytearray):
            self.data = bytearray(self.data)

    @classmethod
    def blank(cls, width: int, height: int) -> RawImage:
        """A white image of the given size."""
        return cls(bytearray([WHITE]) * (width * height), width, height)

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def _checked_index(self, x: int, y: int) -> int:
        ind = self.index(x, y)
        if x < 0 or y < 0 or ind >= len(self.data):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return ind

    def __getitem__(self, point: tuple[int, int]) -> int:
        x, y = point
        return self.data[self._checked_index(x, y)]

    def __setitem__(self, point: tuple[int, int], value: int) -> None:
        x, y = point
        self.data[self._checked_index(x, y)] = value

    def _row_slice(self, y: int, x_start: int, x_end: int) -> slice:
        if not 0 <= x_start <= x_end <= self.width:
            raise IndexError(f"columns {x_start}..{x_end} are outside the image")
        start = self.index(x_start, y)
        end = self.index(x_end, y)
        if y < 0 or end > len(self.data):
            raise IndexError(f"row {y} is outside the image")
        return slice(start, end)

    def is_row_black(self, row: int) -> bool:
        pixels = self.data[self._row_slice(row, 0, self.width)]
        return any(is_black(p) for p in pixels)

    def is_col_black(self, col: int, span: Segment) -> bool:
        if not 0 <= col < self.width:
            raise IndexError(f"column {col} is outside the image")
        if span.start == span.end:
            return False
        self._checked_index(col, span.end - 1)
        column = self.data[self.index(col, span.start) : self.index(col, span.end) : self.width]
        return any(is_black(p) for p in column)

    def fill(self, rect: Rect, color: int) -> None:
        """Paint every pixel inside ``rect`` with ``color``."""
        run = bytes([color]) * rect.width()
        for y in range(rect.top_left.y, rect.bottom_right.y):
            self.data[self._row_slice(y, rect.top_left.x, rect.bottom_right.x)] = run

    def pixels_from_relative(self, source: RawImage, rect: Rect, y_start: int) -> None:
        """Copy ``rect`` of ``source`` here, keeping x and moving its top to ``y_start``."""
        left, right = rect.top_left.x, rect.bottom_right.x
        for y in range(rect.top_left.y, rect.bottom_right.y):
            target_y = y_start + (y - rect.top_left.y)
            self.data[self._row_slice(target_y, left, right)] = source.data[
                source._row_slice(y, left, right)
            ]

    def pixels_from(self, source: RawImage, rect: Rect) -> None:
        """Paste ``source``, from its top left corner, into ``rect`` of this image."""
        left, right = rect.top_left.x, rect.bottom_right.x
        for y in range(rect.top_left.y, rect.bottom_right.y):
            source_y = y - rect.top_left.y
            self.data[self._row_slice(y, left, right)] = source.data[
                source._row_slice(source_y, 0, right - left)
            ]

    def rectangulate(self) -> list[list[Rect]]:
        """Find the inked boxes: bands of inked rows, each cut into inked columns."""
        rows: list[list[Rect]] = []
        for row in segmentify(self.height, self.is_row_black):
            cols = segmentify(self.width, lambda x, row=row: self.is_col_black(x, row))
            rows.append(
                [
                    Rect(Point(col.start, row.start), Point(col.end, row.end))
                    for col in cols
                ]
            )
        return rows