# site_scraper/crawler/models.py
"""
Data models for the SiteScraper pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal, Optional

ERROR_TITLE = "Error"

ArtifactKind = Literal["text", "markdown", "xml"]


@dataclass(slots=True, frozen=True)
class PageRecord:
    """Everything extracted from one page; markdown is filled after conversion."""

    url: str
    title: str
    html: str
    text: str
    markdown: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.html and not self.text

    def with_markdown(self, markdown: str) -> PageRecord:
        return replace(self, markdown=markdown)


@dataclass(slots=True, frozen=True)
class PageResult:
    """Outcome of fetching and extracting one URL.

    A failed result still carries an empty record so callers can treat
    "no content" uniformly, while ``ok`` tells a fetch failure apart from a
    page that legitimately had nothing left after stripping.
    """

    url: str
    record: PageRecord
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_empty(self) -> bool:
        return self.record.is_empty

    @classmethod
    def success(cls, record: PageRecord) -> PageResult:
        return cls(url=record.url, record=record)

    @classmethod
    def failure(cls, url: str, error: str) -> PageResult:
        empty = PageRecord(url=url, title=ERROR_TITLE, html="", text="")
        return cls(url=url, record=empty, error=error)


@dataclass(slots=True)
class OutputArtifact:
    """One file the writer tried to produce; ``path`` is None when the write failed."""

    kind: ArtifactKind
    directory: Path
    filename: str
    content: str
    path: Optional[Path] = None

    @property
    def written(self) -> bool:
        return self.path is not None
