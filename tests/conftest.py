# File: tests/conftest.py
import logging
from pathlib import Path

import pytest

from site_scraper.config import ScraperConfig
from site_scraper.crawler.models import PageRecord
from site_scraper.logger import LOGGER_NAME, init_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """
    CLI tests reconfigure the project logger onto CliRunner streams;
    restore a plain console logger after every test.
    """
    yield
    init_logging()


@pytest.fixture()
def scraper_log(caplog):
    """
    The project logger does not propagate, so hook caplog onto it directly.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    yield caplog
    lg.removeHandler(caplog.handler)


@pytest.fixture()
def basic_config(tmp_path: Path) -> ScraperConfig:
    """
    Return a ScraperConfig writing into a temporary directory.
    """
    return ScraperConfig(
        sitemap_url="https://example.com/page-sitemap.xml",
        site_url="https://example.com",
        output_dir=tmp_path,
        timeout=5.0,
    )


@pytest.fixture()
def sample_record() -> PageRecord:
    """
    Provide a PageRecord whose Markdown is already filled in.
    """
    return PageRecord(
        url="https://example.com/about?tab=1",
        title="About & Contact",
        html='<h1>About</h1><p>We wash <a href="/cars">cars</a>.</p>',
        text="About We wash cars.",
        markdown="# About\n\nWe wash [cars](/cars).",
    )
