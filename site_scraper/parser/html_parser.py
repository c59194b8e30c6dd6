# === FILE: site_scraper/parser/html_parser.py ===
"""HTML extraction utilities for SiteScraper.

:func:`parse_html` turns a raw HTML document into the three things the rest
of the pipeline needs:

* title: ``<title>`` text from ``<head>``, or :data:`UNTITLED` if absent.
* html:  inner markup of ``<body>`` once noise elements are removed
         (empty when the document has no body).
* text:  visible body text with whitespace collapsed to single spaces.

Parsing is static (BeautifulSoup on the lxml tree builder): no script in the
page is ever executed and no sub-resource is loaded.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_scraper.config import DEFAULT_NOISE_SELECTORS
from site_scraper.utils import normalize_whitespace

__all__: Sequence[str] = ("ParsedPage", "parse_html", "strip_noise", "UNTITLED")

UNTITLED = "Untitled"


@dataclass(slots=True, frozen=True)
class ParsedPage:
    """Result of stripping and serialising one HTML document."""

    title: str
    html: str
    text: str


def strip_noise(soup: BeautifulSoup, selectors: Iterable[str]) -> int:
    """Remove every element matching *selectors*, one selector at a time.

    Returns the number of elements removed. Elements inside a subtree that
    was already removed are skipped.
    """
    removed = 0
    for selector in selectors:
        for element in soup.select(selector):
            if element.decomposed:
                continue
            element.decompose()
            removed += 1
    return removed


def parse_html(
    markup: str | bytes,
    noise_selectors: Iterable[str] = DEFAULT_NOISE_SELECTORS,
) -> ParsedPage:
    """Parse *markup*, strip noise elements and serialise what is left."""
    soup = BeautifulSoup(markup, "lxml")

    title_tag = soup.select_one("head > title")
    title = normalize_whitespace(title_tag.get_text()) if title_tag is not None else ""

    strip_noise(soup, noise_selectors)

    body = soup.body
    if not isinstance(body, Tag):
        # Head-only documents (e.g. meta-refresh stubs) have no content.
        return ParsedPage(title=title or UNTITLED, html="", text="")

    html = body.decode_contents().strip()
    text = normalize_whitespace(body.get_text())

    return ParsedPage(title=title or UNTITLED, html=html, text=text)
