# site_scraper/crawler/extractor.py
"""
Page extraction: fetch one URL and turn it into a PageResult.
"""
from __future__ import annotations

from site_scraper.config import ScraperConfig
from site_scraper.crawler.fetcher import Fetcher
from site_scraper.crawler.models import PageRecord, PageResult
from site_scraper.errors import PageFetchError
from site_scraper.logger import logger
from site_scraper.parser.html_parser import parse_html


async def extract_page(fetcher: Fetcher, url: str, config: ScraperConfig) -> PageResult:
    """
    Fetch *url*, strip its noise elements and return the extracted record.

    Never raises for a page-level problem: network errors, bad statuses,
    timeouts and parser failures are logged and come back as a failed
    PageResult with empty html and text.
    """
    logger.info("Processing: %s", url)
    try:
        markup = await fetcher.fetch_text(url, error_cls=PageFetchError)
        parsed = parse_html(markup, config.noise_selectors)
    except PageFetchError as exc:
        logger.error("Error processing %s: %s", url, exc.reason)
        return PageResult.failure(url, exc.reason)
    except Exception as exc:
        logger.error("Error processing %s: %s", url, exc)
        return PageResult.failure(url, str(exc) or type(exc).__name__)

    record = PageRecord(url=url, title=parsed.title, html=parsed.html, text=parsed.text)
    return PageResult.success(record)
