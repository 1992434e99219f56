from datetime import datetime, timezone

import pytest
import requests
import responses

from cryptoquip.context import ImageContext
from cryptoquip.request import (
    UA,
    URL,
    RequestError,
    get_home_page,
    get_image_page,
    get_pdf,
    image_page_url,
)


def context(url):
    return ImageContext(ordinal=0, url=url, date=datetime(2024, 1, 1, tzinfo=timezone.utc))


def test_image_page_url_strips_one_leading_slash():
    assert image_page_url(context("/puzzle/1")) == URL + "puzzle/1"
    assert image_page_url(context("puzzle/1")) == URL + "puzzle/1"
    assert image_page_url(context("//puzzle")) == URL + "/puzzle"


def test_home_page_sends_user_agent():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body="<html>home</html>")
        assert get_home_page() == "<html>home</html>"
        assert rsps.calls[0].request.headers["User-Agent"] == UA


def test_image_page_is_fetched_from_joined_url():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL + "puzzle/7", body="page")
        assert get_image_page(context("/puzzle/7")) == "page"


def test_pdf_returns_bytes():
    pdf_url = "https://files.example.com/puzzle.pdf"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, pdf_url, body=b"%PDF-\xff\x00")
        assert get_pdf(pdf_url) == b"%PDF-\xff\x00"


def test_client_error_status_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, status=404)
        with pytest.raises(RequestError, match="Returned status '404'") as info:
            get_home_page()
    assert info.value.status == 404
    assert info.value.url == URL


def test_server_error_is_passed_through():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, status=500, body="oops")
        assert get_home_page() == "oops"


def test_invalid_utf8_body_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"\xff\xfe")
        with pytest.raises(RequestError, match="UTF-8"):
            get_home_page()


def test_connection_failure_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=requests.exceptions.ConnectionError())
        with pytest.raises(RequestError, match="Unable to make request"):
            get_home_page()