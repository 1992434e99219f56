"""The full editing pipeline from downloaded image to printable page."""

from __future__ import annotations

from collections.abc import Sequence

from .context import ImageContext
from .geometry import Rect
from .parsed_image import parse_image
from .raw_image import WHITE, RawImage
from .scale import scale


class EditError(Exception):
    """The image could not be edited."""


def hide_date(image: RawImage, boxes: Sequence[Sequence[Rect]]) -> None:
    """Blank out the boxes of the first row that lie in the left quarter of the image."""
    if not boxes:
        raise EditError("Unable to find first row of boxes")

    quarter = image.width // 4
    for rect in boxes[0]:
        if rect.top_left.x < quarter:
            image.fill(rect, WHITE)


def edit_image(image: RawImage, ctx: ImageContext) -> RawImage:
    """Hide the date, crop away the answer area and lay the puzzle out on a letter page."""
    working = RawImage(bytearray(image.data), image.width, image.height)

    boxes = working.rectangulate()
    hide_date(working, boxes)

    parsed = parse_image(working, boxes, ctx)
    cropped = parsed.new_image_from_padding()
    return scale(cropped, ctx)