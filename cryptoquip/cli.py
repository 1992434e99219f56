"""The command that picks, edits and shows a puzzle."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import cache, menu, request
from .context import ImageContext, get_image_contexts
from .display import display, write_png
from .edit import edit_image
from .pdf import download_pdf_binary, extract_image
from .raw_image import RawImage


def handle_image(
    image: RawImage, ctx: ImageContext, debug_path: Path | None = None
) -> RawImage:
    """Edit the image, optionally save a copy, and show it."""
    page = edit_image(image, ctx)
    if debug_path is not None:
        write_png(page, debug_path)
    display(page)
    return page


def handle_selection(ctx: ImageContext) -> RawImage:
    """Download the chosen puzzle and show it."""
    raw = download_pdf_binary(ctx, None)
    return handle_image(raw, ctx)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cryptoquip", description="Print a Cryptoquip.")
    parser.add_argument(
        "--cache",
        nargs="?",
        const=str(cache.CACHE_PATH),
        default=None,
        help="use (and fill) a local cache of the PDF",
    )
    args = parser.parse_args(argv)
    cache_path = Path(args.cache) if args.cache is not None else None

    try:
        if cache_path is not None and cache.check_cache(cache_path):
            raw = extract_image(cache.read_cache(cache_path))
            handle_image(raw, cache.cached_context(), cache_path.with_name("test.png"))
            return 0

        images = get_image_contexts(request.get_home_page())
        chosen = menu.choose_image(images)
        if chosen is None:
            return 0
        if cache_path is None:
            handle_selection(chosen)
        else:
            handle_image(download_pdf_binary(chosen, cache_path), chosen)
    except Exception as exc:  # report any failure and exit non-zero
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())