# File: site_scraper/errors.py
"""site_scraper.errors: Exception hierarchy shared by the scraping pipeline.

Only :class:`SitemapFetchError` and :class:`InvalidArgumentError` ever reach
the caller of a run; page and write failures are logged and absorbed where
they happen.
"""
from __future__ import annotations

from typing import Optional

__all__ = (
    "ScraperError",
    "FetchError",
    "SitemapFetchError",
    "PageFetchError",
    "FileWriteError",
    "InvalidArgumentError",
)


class ScraperError(Exception):
    """Base class for every error raised by site_scraper."""


class FetchError(ScraperError):
    """HTTP request failed: transport error or non-success status."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(reason)


class SitemapFetchError(FetchError):
    """The sitemap could not be retrieved; a batch run cannot start."""


class PageFetchError(FetchError):
    """A single page could not be retrieved or parsed."""


class FileWriteError(ScraperError):
    """An output artifact could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InvalidArgumentError(ScraperError, ValueError):
    """A command-line argument does not look like an http(s) URL."""
