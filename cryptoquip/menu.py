"""Choosing a puzzle from the listing on the terminal."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from .context import ImageContext
from .text import multi_line

_MAX_INDEX = 2**64 - 1
_NUMBER_RE = re.compile(r"\+?[0-9]+")


class MenuError(Exception):
    """The menu could not be shown or read."""


class SelectionError(Exception):
    """The user's input was not a valid choice."""


class Align(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass
class ColSizes:
    ord_col: int = 0
    day_col: int = 0
    date_col: int = 0


@dataclass(frozen=True)
class MenuOption:
    """One line of the menu."""

    context: ImageContext

    @property
    def ord_str(self) -> str:
        return str(self.context.ordinal)

    @property
    def day_str(self) -> str:
        return self.context.day_str()

    @property
    def date_str(self) -> str:
        return self.context.date_str()

    def formatted(self, col_sizes: ColSizes) -> str:
        ord_ = align(self.ord_str, col_sizes.ord_col, Align.RIGHT)
        day = align(self.day_str, col_sizes.day_col, Align.LEFT)
        date = align(self.date_str, col_sizes.date_col, Align.LEFT)
        return f"{ord_} - {day} - {date}"


def align(text: str, width: int, alignment: Align) -> str:
    """Pad ``text`` with spaces to ``width``."""
    if len(text) > width:
        raise ValueError(f"'{text}' is wider than {width}")
    return text.rjust(width) if alignment is Align.RIGHT else text.ljust(width)


def bifurcate(options: Sequence[MenuOption]) -> tuple[list[MenuOption], list[MenuOption]]:
    """Split into two columns: even positions left, odd positions right."""
    return list(options[0::2]), list(options[1::2])


def calc_cols(options: Sequence[MenuOption]) -> ColSizes:
    """The widest entry of each column."""
    return ColSizes(
        ord_col=max((len(o.ord_str) for o in options), default=0),
        day_col=max((len(o.day_str) for o in options), default=0),
        date_col=max((len(o.date_str) for o in options), default=0),
    )


def format_menu(options: Sequence[MenuOption]) -> str:
    """The menu text, in two columns."""
    left, right = bifurcate(options)
    left_cols, right_cols = calc_cols(left), calc_cols(right)
    lines = [
        multi_line(
            "Which Crytoquip to download?",
            " - press Enter to download the most recent",
            " - press q to Quit",
            "",
        )
    ]
    lines.extend(
        f"  {a.formatted(left_cols)} | {b.formatted(right_cols)}"
        for a, b in zip(left, right)
    )
    if len(left) > len(right):
        lines.append(f"  {left[-1].formatted(left_cols)}")
    return "\n".join(lines)


def parse_selection(text: str, menu_len: int) -> int | None:
    """The chosen index, or None to quit. Empty input picks the first entry."""
    text = text.strip()
    if text.lower() == "q":
        return None
    if not text:
        index = 0
    elif _NUMBER_RE.fullmatch(text):
        index = int(text)
        if index > _MAX_INDEX:
            raise SelectionError(f"Number out of bounds, must be 0 to {menu_len - 1}")
    else:
        raise SelectionError("Unknown input (must be a number or Q)")
    if index >= menu_len:
        raise SelectionError(f"Number out of bounds, must be 0 to {menu_len - 1}")
    return index


def _read_stdin() -> str:
    return input("> ")


def get_user_selection(
    menu_len: int, read_line: Callable[[], str] = _read_stdin
) -> int | None:
    """Ask until a valid choice is given; None means quit."""
    while True:
        try:
            line = read_line()
        except (EOFError, OSError) as exc:
            raise MenuError("Unable to read from stdin") from exc
        try:
            return parse_selection(line, menu_len)
        except SelectionError as err:
            print(err)


def choose_image(
    images: Sequence[ImageContext], read_line: Callable[[], str] = _read_stdin
) -> ImageContext | None:
    """Show the menu and return the chosen puzzle, or None if the user quit."""
    options = [MenuOption(ctx) for ctx in images]
    if not options:
        raise MenuError("No images found")
    print(format_menu(options))
    index = get_user_selection(len(options), read_line)
    return None if index is None else options[index].context