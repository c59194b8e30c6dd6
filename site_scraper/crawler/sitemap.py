# site_scraper/crawler/sitemap.py
"""
Sitemap resolution: download the sitemap and harvest its page URLs.
"""
from __future__ import annotations

from typing import List

from site_scraper.config import ScraperConfig
from site_scraper.crawler.fetcher import Fetcher
from site_scraper.errors import SitemapFetchError
from site_scraper.logger import logger
from site_scraper.parser.sitemap_parser import harvest_urls


async def resolve_sitemap(fetcher: Fetcher, config: ScraperConfig) -> List[str]:
    """
    Return the ordered, unique, asset-free page URLs listed in the sitemap.

    Raises SitemapFetchError when the sitemap cannot be retrieved.
    """
    sitemap_url = str(config.sitemap_url)
    try:
        content = await fetcher.fetch_text(sitemap_url, error_cls=SitemapFetchError)
    except SitemapFetchError as exc:
        logger.error("Failed to fetch sitemap %s: %s", sitemap_url, exc.reason)
        raise SitemapFetchError(
            sitemap_url, f"Failed to fetch sitemap: {exc.reason}", status=exc.status
        ) from exc

    urls = harvest_urls(content, config.site_url, config.asset_extensions)
    logger.info("Found %d unique page URLs in sitemap.", len(urls))
    return urls
