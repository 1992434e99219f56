"""Locating the header, puzzle and clue bands of a puzzle image."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .context import ImageContext
from .geometry import Rect
from .raw_image import RawImage

INDENT_THRESHOLD = 10
PUZZLE_PADDING = 75
CLUE_PADDING = 50

Boxes = Sequence[Sequence[Rect]]


class ImageParseError(Exception):
    """The detected boxes do not have the layout of a puzzle."""


def get_rect(image: RawImage, row: Sequence[Rect]) -> Rect:
    """The full-width band spanning a row of boxes, top of the first to bottom of the last."""
    if not row:
        raise ValueError("a row of boxes must not be empty")
    first, last = row[0], row[-1]
    return Rect(
        top_left=type(first.top_left)(0, first.top_left.y),
        bottom_right=type(last.bottom_right)(image.width, last.bottom_right.y),
    )


def split_answer(image: RawImage, rows: Boxes) -> Rect:
    """The band holding the puzzle rows that sit above the indented answer row."""
    if len(rows) < 2:
        raise ValueError("at least two rows are needed to split off the answer")

    answer_ind = next(
        (
            i
            for i in reversed(range(len(rows)))
            if _first_box(rows[i]).top_left.x > INDENT_THRESHOLD
        ),
        None,
    )
    if answer_ind is None:
        raise ImageParseError("Unable to find the Answer row")

    puzzle_rows = rows[:answer_ind]
    if not puzzle_rows:
        raise ImageParseError("No puzzle rows found above the Answer row")

    first = get_rect(image, puzzle_rows[0])
    last = get_rect(image, puzzle_rows[-1])
    return Rect(first.top_left, last.bottom_right)


def _first_box(row: Sequence[Rect]) -> Rect:
    if not row:
        raise ValueError("a row of boxes must not be empty")
    return row[0]


@dataclass
class ParsedImage:
    """An image together with the bands that are kept when it is cropped."""

    image: RawImage
    header: Rect
    puzzle: Rect
    clue: Rect

    def new_image_from_padding(self) -> RawImage:
        """Stack header, puzzle and clue into a new image with fixed gaps between them."""
        height = (
            self.header.height()
            + PUZZLE_PADDING
            + self.puzzle.height()
            + CLUE_PADDING
            + self.clue.height()
        )
        target = RawImage.blank(self.image.width, height)

        y = 0
        target.pixels_from_relative(self.image, self.header, y)
        y += self.header.height() + PUZZLE_PADDING

        target.pixels_from_relative(self.image, self.puzzle, y)
        y += self.puzzle.height() + CLUE_PADDING

        target.pixels_from_relative(self.image, self.clue, y)
        return target


def parse_image(raw_image: RawImage, boxes: Boxes, ctx: ImageContext) -> ParsedImage:
    """Work out the header, puzzle and clue bands from the detected rows of boxes."""
    if len(boxes) < 4:
        raise ImageParseError(
            f"Not enough rows were found: {len(boxes)} - Expected: 4"
        )

    for i, row in enumerate(boxes):
        if not row:
            raise ImageParseError(f"Empty Row: {i}")

    clue_ind = len(boxes) - (2 if ctx.is_sunday() else 1)

    header = get_rect(raw_image, boxes[0])
    clue = get_rect(raw_image, boxes[clue_ind])
    puzzle = split_answer(raw_image, boxes[1:-1])

    return ParsedImage(image=raw_image, header=header, puzzle=puzzle, clue=clue)