import zlib
from datetime import datetime, timezone

import pytest
import responses

from cryptoquip.context import ImageContext
from cryptoquip.pdf import PdfError, download_pdf_binary, extract_image, extract_pdf_url
from cryptoquip.request import URL


def _pdf(pixels: bytes, width: int, height: int) -> bytes:
    stream = zlib.compress(pixels)
    return (
        b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n"
        b"2 0 obj\n<< /Type /XObject /Subtype /Image /Width %d /Height %d "
        b"/ColorSpace /DeviceGray /BitsPerComponent 8 /Filter /FlateDecode "
        b"/Length %d >>\nstream\n" % (width, height, len(stream))
        + stream
        + b"\nendstream\nendobj\n%%EOF\n"
    )


def test_extract_image_round_trip():
    pixels = bytes([0, 255, 10, 20, 30, 40])
    image = extract_image(_pdf(pixels, 3, 2))
    assert (image.width, image.height) == (3, 2)
    assert bytes(image.data) == pixels


def test_extract_image_not_pdf():
    with pytest.raises(PdfError, match="read PDF"):
        extract_image(b"garbage")


def test_extract_image_without_images():
    with pytest.raises(PdfError, match="No images"):
        extract_image(b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n")


def test_extract_pdf_url():
    page = '<div id="asset-content"><p><a href="/x/file.pdf">pdf</a></p></div>'
    assert extract_pdf_url(page) == "/x/file.pdf"


@pytest.mark.parametrize(
    "page, message",
    [
        ("<div></div>", "main content"),
        ('<div id="asset-content"></div>', "anchor"),
        ('<div id="asset-content"><a>x</a></div>', "url"),
    ],
)
def test_extract_pdf_url_errors(page, message):
    with pytest.raises(PdfError, match=message):
        extract_pdf_url(page)


def test_download_pdf_binary_writes_cache(tmp_path):
    pixels = bytes([1, 2, 3, 4])
    data = _pdf(pixels, 2, 2)
    ctx = ImageContext(0, "/puzzle", datetime(2024, 1, 1, tzinfo=timezone.utc))
    cache = tmp_path / "cache.pdf"
    with responses.RequestsMock() as mocked:
        mocked.add(
            responses.GET,
            URL + "puzzle",
            body='<div id="asset-content"><a href="https://example.com/p.pdf">p</a></div>',
        )
        mocked.add(responses.GET, "https://example.com/p.pdf", body=data)
        image = download_pdf_binary(ctx, cache)
    assert bytes(image.data) == pixels
    assert cache.read_bytes() == data