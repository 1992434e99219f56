"""Finding the puzzle PDF and pulling its image out."""

from __future__ import annotations

import io
import re
import zlib
from pathlib import Path

from bs4 import BeautifulSoup
from PIL import Image

from .cache import write_cache
from .context import ImageContext
from .raw_image import RawImage
from .request import get_image_page, get_pdf


class PdfError(Exception):
    """The PDF could not be located or read."""


_OBJ_RE = re.compile(rb"(\d+)\s+(\d+)\s+obj\b")
_LENGTH_RE = re.compile(rb"/Length\s+(\d+)(?!\s+\d+\s+R)")
_WIDTH_RE = re.compile(rb"/Width\s+(\d+)")
_HEIGHT_RE = re.compile(rb"/Height\s+(\d+)")
_IMAGE_RE = re.compile(rb"/Subtype\s*/Image\b")


def extract_pdf_url(page: str) -> str:
    """The link to the PDF on a puzzle's page."""
    document = BeautifulSoup(page, "html.parser")
    content = document.select_one("#asset-content")
    if content is None:
        raise PdfError("Cannot find main content body")
    anchor = content.select_one("a")
    if anchor is None:
        raise PdfError("Cannot find anchor tag")
    href = anchor.get("href")
    if href is None:
        raise PdfError("Cannot find url from anchor tag")
    return href if isinstance(href, str) else " ".join(href)


def _stream_bounds(data: bytes, header: bytes, keyword_end: int) -> tuple[int, int]:
    start = keyword_end
    if data[start : start + 2] == b"\r\n":
        start += 2
    elif data[start : start + 1] in (b"\n", b"\r"):
        start += 1
    length = _LENGTH_RE.search(header)
    if length is not None:
        end = start + int(length.group(1))
        if end <= len(data):
            return start, end
    end = data.find(b"endstream", start)
    if end < 0:
        raise PdfError("Error while attempting to read PDF")
    return start, end


def _decode(header: bytes, stream: bytes, width: int, height: int) -> bytes:
    try:
        if b"/DCTDecode" in header:
            with Image.open(io.BytesIO(stream)) as img:
                return img.convert("L").tobytes()
        if b"/FlateDecode" in header:
            stream = zlib.decompress(stream)
    except (zlib.error, OSError) as exc:
        raise PdfError(
            "Error while attempting to extract the image from the PDF"
        ) from exc
    if len(stream) >= width * height * 3 and b"/DeviceRGB" in header:
        rgb = Image.frombytes("RGB", (width, height), stream[: width * height * 3])
        return rgb.convert("L").tobytes()
    return stream


def extract_image(data: bytes) -> RawImage:
    """The first image stored in the PDF, as greyscale pixels."""
    if not data.lstrip().startswith(b"%PDF"):
        raise PdfError("Error while attempting to read PDF")

    pos = 0
    while (match := _OBJ_RE.search(data, pos)) is not None:
        body_start = match.end()
        stream_at = data.find(b"stream", body_start)
        end_obj = data.find(b"endobj", body_start)
        if stream_at < 0 or (0 <= end_obj < stream_at):
            pos = end_obj + 6 if end_obj >= 0 else len(data)
            continue
        header = data[body_start:stream_at]
        start, end = _stream_bounds(data, header, stream_at + len(b"stream"))
        pos = end
        if not _IMAGE_RE.search(header):
            continue
        width = _WIDTH_RE.search(header)
        height = _HEIGHT_RE.search(header)
        if width is None or height is None:
            raise PdfError("Error while attempting to extract the image from the PDF")
        w, h = int(width.group(1)), int(height.group(1))
        return RawImage(bytearray(_decode(header, data[start:end], w, h)), w, h)

    raise PdfError("No images were found in the PDF")


def download_pdf_binary(
    context: ImageContext, cache_path: Path | None = None
) -> RawImage:
    """Download a puzzle's PDF, optionally keep a copy, and return its image."""
    page = get_image_page(context)
    pdf_bytes = get_pdf(extract_pdf_url(page))
    if cache_path is not None:
        write_cache(pdf_bytes, cache_path)
    return extract_image(pdf_bytes)