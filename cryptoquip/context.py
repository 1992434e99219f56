"""Puzzle listings scraped from the home page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from bs4 import BeautifulSoup, Tag


class ContextParseError(Exception):
    """The home page did not have the expected structure."""


@dataclass(frozen=True)
class ImageContext:
    """One listed puzzle: its position in the list, page link and publication date."""

    ordinal: int
    url: str
    date: datetime

    def is_sunday(self) -> bool:
        return self.date.weekday() == 6

    def day_str(self) -> str:
        return self.date.strftime("%A")

    def date_str(self) -> str:
        return self.date.strftime("%m/%d/%y")

    def formatted_date(self) -> str:
        return f"{self.day_str()} - {self.date_str()}"


def _attr(element: Tag, name: str) -> str | None:
    value = element.get(name)
    if value is None:
        return None
    return value if isinstance(value, str) else " ".join(value)


def _extract_url(card: Tag) -> str:
    body = card.select_one(".card-body")
    if body is None:
        raise ContextParseError("Cannot find card body tag within the image card")
    anchor = body.select_one("a")
    if anchor is None:
        raise ContextParseError("Cannot find anchor tag from card body")
    href = _attr(anchor, "href")
    if href is None:
        raise ContextParseError("Cannot find url from anchor tag")
    return href


def _parse_rfc3339(text: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ContextParseError("Cannot parse datetime") from exc
    if parsed.tzinfo is None:
        raise ContextParseError("Cannot parse datetime")
    return parsed


def _extract_date(card: Tag) -> datetime:
    time = card.select_one("time")
    if time is None:
        raise ContextParseError("Cannot find date within the image card")
    iso = _attr(time, "datetime")
    if iso is None:
        raise ContextParseError("Cannot find 'datetime' attribute from time tag")
    return _parse_rfc3339(iso)


def _extract_cards(document: BeautifulSoup) -> list[Tag]:
    content = document.select_one("#main-page-container")
    if content is None:
        raise ContextParseError("Unable to find main content body")
    return [
        card
        for grid in content.select("div .card-grid")
        for card in grid.select("div .card-container")
    ]


def get_image_contexts(page: str) -> list[ImageContext]:
    """Parse the home page into the list of available puzzles, newest first."""
    document = BeautifulSoup(page, "html.parser")
    return [
        ImageContext(ordinal=i, url=_extract_url(card), date=_extract_date(card))
        for i, card in enumerate(_extract_cards(document))
    ]