"""A local copy of the last downloaded PDF."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .context import ImageContext

CACHE_PATH = Path("./out/cache.pdf")


def check_cache(path: Path = CACHE_PATH) -> bool:
    """Whether a cached PDF exists."""
    return Path(path).exists()


def write_cache(data: bytes, path: Path = CACHE_PATH) -> None:
    """Store the PDF bytes."""
    Path(path).write_bytes(data)


def read_cache(path: Path = CACHE_PATH) -> bytes:
    """Load the cached PDF bytes."""
    return Path(path).read_bytes()


def cached_context() -> ImageContext:
    """The context used for a cached PDF: no link, dated now."""
    return ImageContext(ordinal=0, url="", date=datetime.now().astimezone())