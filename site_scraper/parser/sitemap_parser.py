# File: site_scraper/parser/sitemap_parser.py
"""site_scraper.parser.sitemap_parser: Harvesting page URLs out of a sitemap body."""

from __future__ import annotations

import re
from typing import Iterable, List

from site_scraper.utils import has_extension, remove_duplicates


def site_url_pattern(site_url: str) -> re.Pattern[str]:
    """Regex matching absolute URLs under *site_url* (scheme + host)."""
    return re.compile(re.escape(site_url.rstrip("/")) + r"/[^\s<]+")


def harvest_urls(content: str, site_url: str, asset_extensions: Iterable[str]) -> List[str]:
    """Return the unique page URLs found in *content*.

    The body is treated as plain text: every substring that looks like a URL
    on *site_url* is collected, duplicates are dropped (first occurrence
    wins) and URLs ending with an asset extension are filtered out.

    Args:
        content: raw sitemap text (``<urlset>`` XML, but no schema is assumed).
        site_url: scheme and host, e.g. ``https://example.com``.
        asset_extensions: suffixes such as ``.png`` to skip.

    Example:
    ```python
    from site_scraper.parser.sitemap_parser import harvest_urls

    urls = harvest_urls(xml_text, "https://example.com", [".png", ".xml"])
    ```
    """
    found = site_url_pattern(site_url).findall(content)
    extensions = tuple(asset_extensions)
    return [url for url in remove_duplicates(found) if not has_extension(url, extensions)]
