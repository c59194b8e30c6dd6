# File: site_scraper/engine.py
"""site_scraper.engine: Orchestration layer driving single-page and sitemap runs."""

from __future__ import annotations

import asyncio
from typing import Optional

from site_scraper.aggregator import ScrapeReport
from site_scraper.config import ScraperConfig
from site_scraper.crawler.extractor import extract_page
from site_scraper.crawler.fetcher import Fetcher
from site_scraper.crawler.models import PageRecord, PageResult
from site_scraper.crawler.sitemap import resolve_sitemap
from site_scraper.logger import logger
from site_scraper.parser.markdown import html_to_markdown
from site_scraper.report.writer import ArtifactWriter, CombinedWriter
from site_scraper.utils import validate_url

__all__ = ["Orchestrator", "Engine", "start_scrape"]


class Orchestrator:
    """Runs the fetch → extract → convert → write pipeline, one page at a time."""

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config
        self.fetcher = Fetcher(config)
        self.writer = ArtifactWriter(config)
        self.combined: Optional[CombinedWriter] = (
            CombinedWriter(config) if config.layout == "combined" else None
        )

    async def __aenter__(self) -> Orchestrator:
        await self.fetcher.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.fetcher.__aexit__(exc_type, exc, tb)

    async def scrape_url(self, url: str) -> ScrapeReport:
        """Single-page mode: nothing is written when the page yields no content."""
        report = ScrapeReport(mode="single", resolved_urls=1)
        result = await extract_page(self.fetcher, url, self.config)
        if result.is_empty:
            logger.error("No content extracted from %s", url)
            report.add_result(result)
            report.aborted = True
            return report
        self._emit(result, report)
        self._finish(report)
        return report

    async def scrape_sitemap(self) -> ScrapeReport:
        """Batch mode: every sitemap page in order; failed pages are skipped.

        SitemapFetchError propagates, nothing else does.
        """
        urls = await resolve_sitemap(self.fetcher, self.config)
        report = ScrapeReport(mode="batch", resolved_urls=len(urls))
        for url in urls:
            result = await extract_page(self.fetcher, url, self.config)
            if result.is_empty:
                report.add_result(result)
                continue
            self._emit(result, report)
        self._finish(report)
        logger.info(
            "Finished: %d processed, %d skipped, %d failed",
            len(report.processed),
            len(report.skipped),
            len(report.failed),
        )
        return report

    def _emit(self, result: PageResult, report: ScrapeReport) -> None:
        record = result.record
        try:
            record = record.with_markdown(html_to_markdown(record.html))
        except Exception as exc:
            logger.error("Markdown conversion failed for %s: %s", record.url, exc)
            report.add_result(PageResult.failure(record.url, f"markdown conversion failed: {exc}"))
            return
        self._persist(record, report)

    def _persist(self, record: PageRecord, report: ScrapeReport) -> None:
        if self.combined is not None:
            self.combined.add(record)
            report.processed.append(record.url)
            return
        report.add_artifacts(record.url, self.writer.write_page(record))

    def _finish(self, report: ScrapeReport) -> None:
        if self.combined is not None:
            report.add_files("", self.combined.flush())


async def start_scrape(config: ScraperConfig, url: Optional[str] = None) -> ScrapeReport:
    """
    Run one scrape and return its report.

    Parameters
    ----------
    config : ScraperConfig
        Run configuration.
    url : str, optional
        Single page to scrape; the configured sitemap is used when omitted.
    """
    async with Orchestrator(config) as orchestrator:
        if url is None:
            return await orchestrator.scrape_sitemap()
        return await orchestrator.scrape_url(url)


class Engine:
    """Synchronous facade used by the CLI: validate, run, report."""

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config

    def run(self, url: Optional[str] = None) -> ScrapeReport:
        """Validate *url* (if any), run the scrape and return the report."""
        if url is not None:
            validate_url(url)
        logger.info("Starting %s run…", "single-page" if url else "sitemap")
        try:
            return asyncio.run(start_scrape(self.config, url))
        except Exception as exc:
            logger.error("Scrape failed: %s", exc)
            raise
