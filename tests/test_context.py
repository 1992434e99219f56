from datetime import datetime, timedelta, timezone

import pytest

from cryptoquip.context import ContextParseError, ImageContext, get_image_contexts


def card(href='href="/cryptoquip/a.html"', stamp='datetime="2024-03-03T00:00:00-05:00"'):
    return (
        '<div class="card-container">'
        f"<time {stamp}></time>"
        f'<div class="card-body"><a {href}>Puzzle</a></div>'
        "</div>"
    )


def page(*cards):
    return (
        "<html><body>"
        '<div id="main-page-container"><div class="card-grid">'
        + "".join(cards)
        + "</div></div></body></html>"
    )


def test_parses_cards_in_order():
    html = page(
        card(),
        card(
            href='href="/cryptoquip/b.html"',
            stamp='datetime="2024-03-02T08:30:00Z"',
        ),
    )
    contexts = get_image_contexts(html)
    assert [c.ordinal for c in contexts] == [0, 1]
    assert [c.url for c in contexts] == ["/cryptoquip/a.html", "/cryptoquip/b.html"]
    assert contexts[0].date == datetime(2024, 3, 3, tzinfo=timezone(timedelta(hours=-5)))
    assert contexts[1].date == datetime(2024, 3, 2, 8, 30, tzinfo=timezone.utc)


def test_sunday_and_formatting():
    ctx = get_image_contexts(page(card()))[0]
    assert ctx.is_sunday()
    assert ctx.day_str() == "Sunday"
    assert ctx.date_str() == "03/03/24"
    assert ctx.formatted_date() == f"{ctx.day_str()} - {ctx.date_str()}"


def test_weekday_is_not_sunday():
    ctx = ImageContext(0, "/x", datetime(2024, 3, 2, tzinfo=timezone.utc))
    assert not ctx.is_sunday()


def test_empty_grid_gives_no_contexts():
    assert get_image_contexts(page()) == []


def test_missing_container():
    with pytest.raises(ContextParseError, match="Unable to find main content body"):
        get_image_contexts("<html><body><div class='card-grid'></div></body></html>")


def test_missing_card_body():
    html = page('<div class="card-container"><time datetime="2024-03-03T00:00:00Z"></time></div>')
    with pytest.raises(ContextParseError, match="Cannot find card body tag"):
        get_image_contexts(html)


def test_missing_anchor():
    html = page(
        '<div class="card-container"><time datetime="2024-03-03T00:00:00Z"></time>'
        '<div class="card-body"></div></div>'
    )
    with pytest.raises(ContextParseError, match="Cannot find anchor tag from card body"):
        get_image_contexts(html)


def test_missing_href():
    with pytest.raises(ContextParseError, match="Cannot find url from anchor tag"):
        get_image_contexts(page(card(href="")))


def test_missing_time():
    html = page('<div class="card-container"><div class="card-body"><a href="/a">A</a></div></div>')
    with pytest.raises(ContextParseError, match="Cannot find date within the image card"):
        get_image_contexts(html)


def test_missing_datetime_attribute():
    with pytest.raises(ContextParseError, match="'datetime' attribute"):
        get_image_contexts(page(card(stamp="")))


@pytest.mark.parametrize("stamp", ['datetime="yesterday"', 'datetime="2024-03-03T00:00:00"'])
def test_unparseable_datetime(stamp):
    with pytest.raises(ContextParseError, match="Cannot parse datetime"):
        get_image_contexts(page(card(stamp=stamp)))