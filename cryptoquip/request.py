"""Fetching pages and files from the puzzle site."""

from __future__ import annotations

import requests

from .context import ImageContext

URL = "https://www.cecildaily.com/diversions/cryptoquip/"
UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:79.0) Gecko/20100101 Firefox/79.0"

TIMEOUT = 30


class RequestError(Exception):
    """A request to the site failed."""

    def __init__(self, message: str, url: str, status: int | None = None) -> None:
        super().__init__(f"{message} (url: '{url}')")
        self.url = url
        self.status = status


def _request(url: str) -> requests.Response:
    # Without a browser user agent some requests are answered with 429.
    try:
        response = requests.get(url, headers={"User-Agent": UA}, timeout=TIMEOUT)
    except requests.RequestException as exc:
        raise RequestError("Unable to make request", url) from exc

    if 400 <= response.status_code < 500:
        raise RequestError(
            f"Returned status '{response.status_code}'", url, response.status_code
        )
    return response


def _get_text(url: str) -> str:
    content = _request(url).content
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RequestError("Unable to parse request body as UTF-8", url) from exc


def _get_bytes(url: str) -> bytes:
    return _request(url).content


def get_home_page() -> str:
    """The listing page with the recent puzzles."""
    return _get_text(URL)


def image_page_url(context: ImageContext) -> str:
    """The absolute address of a puzzle's own page."""
    return URL + context.url.removeprefix("/")


def get_image_page(context: ImageContext) -> str:
    """The page of one listed puzzle."""
    return _get_text(image_page_url(context))


def get_pdf(url: str) -> bytes:
    """The raw bytes of the puzzle PDF."""
    return _get_bytes(url)