"""Placing a cropped puzzle onto a letter-sized page."""

from __future__ import annotations

from .context import ImageContext
from .geometry import Point, Rect
from .raw_image import RawImage

LETTER_HEIGHT_IN = 11.0
LETTER_WIDTH_IN = 8.5

MARGIN_IN = 1.0
HEIGHT_IN = 3.0

WIDTH_SUN_IN = LETTER_WIDTH_IN - MARGIN_IN * 2.0


def scale_factor(image: RawImage, ctx: ImageContext) -> float:
    """Pixels per inch: Sunday puzzles fill the printable width, others a fixed height."""
    if ctx.is_sunday():
        return image.width / WIDTH_SUN_IN
    return image.height / HEIGHT_IN


def letter_size(factor: float) -> tuple[int, int]:
    """Width and height in pixels of a letter page at ``factor`` pixels per inch."""
    return int(LETTER_WIDTH_IN * factor) + 1, int(LETTER_HEIGHT_IN * factor) + 1


def _copy_corners(target: RawImage, source: RawImage, factor: float) -> None:
    margin = int(MARGIN_IN * factor)

    top = Rect(
        Point(margin, margin),
        Point(margin + source.width, margin + source.height),
    )
    bottom = Rect(
        Point(margin, target.height - (margin + top.height())),
        Point(margin + source.width, target.height - margin),
    )

    target.pixels_from(source, top)
    target.pixels_from(source, bottom)


def scale(image: RawImage, ctx: ImageContext) -> RawImage:
    """A letter page holding two copies of ``image``, one at the top and one at the bottom."""
    factor = scale_factor(image, ctx)
    page = RawImage.blank(*letter_size(factor))
    _copy_corners(page, image, factor)
    return page