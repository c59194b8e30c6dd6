# File: site_scraper/report/__init__.py
"""site_scraper.report: Writing scraped pages to text, Markdown and XML files."""

from __future__ import annotations

from site_scraper.report.writer import ArtifactWriter, CombinedWriter, write_artifact
from site_scraper.report.xml_report import render_page_xml

__all__ = ["ArtifactWriter", "CombinedWriter", "write_artifact", "render_page_xml"]
