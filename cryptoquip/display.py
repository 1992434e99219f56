"""Saving the finished page and opening it in an image viewer."""

from __future__ import annotations

import subprocess
import sys
import tempfile
from datetime import datetime
from pathlib import Path

from PIL import Image

from .raw_image import RawImage


class DisplayError(Exception):
    """The image could not be saved or shown."""


def temp_file_name() -> Path:
    """A timestamped PNG path in the temporary directory."""
    stamp = datetime.now().astimezone().isoformat()
    for ch in "-T:":
        stamp = stamp.replace(ch, "_")
    return Path(tempfile.gettempdir()) / f"cryptoquip_{stamp}.png"


def write_png(image: RawImage, path: Path) -> None:
    """Write the image as an 8-bit greyscale PNG."""
    try:
        png = Image.frombytes("L", (image.width, image.height), bytes(image.data))
    except ValueError as exc:
        raise DisplayError("Unable to write image data to temp file") from exc
    try:
        png.save(path, format="PNG")
    except OSError as exc:
        raise DisplayError("Unable to create a temp file to save image") from exc


def open_in_viewer(path: Path) -> None:
    """Open the file with the platform's default viewer."""
    if sys.platform.startswith("win"):
        command = ["cmd", "/C", "start", str(path)]
    else:
        command = ["xdg-open", str(path)]
    try:
        subprocess.run(command, capture_output=True, check=False)
    except OSError as exc:
        raise DisplayError("Unable to open image in new window") from exc


def display(image: RawImage) -> Path:
    """Save the image to a temporary file, open it, and return the file's path."""
    path = temp_file_name()
    write_png(image, path)
    open_in_viewer(path)
    return path