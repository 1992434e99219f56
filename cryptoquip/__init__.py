"""Download, crop and lay out the daily Cryptoquip puzzle for printing."""

__version__ = "0.2.0"