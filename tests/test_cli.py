# File: tests/test_cli.py
"""Tests for the CLI (`site_scraper.cli`) using click.testing.CliRunner.
Cover `run` in both modes, `config`, `--version` and error handling.
"""
import json

import pytest
from click.testing import CliRunner

import site_scraper.engine as engine_module
from site_scraper.aggregator import ScrapeReport
from site_scraper.cli import cli
from site_scraper.errors import SitemapFetchError


@pytest.fixture(autouse=True)
def patch_start_scrape(monkeypatch):
    """Replace the engine's start_scrape so no request leaves the test."""
    calls = []

    async def fake_scrape(cfg, url=None):
        calls.append((cfg, url))
        report = ScrapeReport(mode="single" if url else "batch", resolved_urls=1)
        report.processed.append(url or "https://example.com/page1")
        report.files.append("scraped_text/example.com_page1.txt")
        return report

    monkeypatch.setattr(engine_module, "start_scrape", fake_scrape)
    return calls


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every CLI test where no configs/default.yaml exists."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "SiteScraper" in result.output


def test_show_config_defaults():
    runner = CliRunner()
    result = runner.invoke(cli, ["config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["sitemap_url"] == "https://jacksonswash.com/page-sitemap.xml"
    assert data["layout"] == "per-page"


def test_show_config_from_file(tmp_path):
    cfg_file = tmp_path / "scraper.json"
    cfg_file.write_text(
        json.dumps({"sitemap_url": "https://example.com/sitemap.xml", "site_url": "https://example.com/"}),
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["site_url"] == "https://example.com"


def test_bad_config_exits(tmp_path):
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text("timeout: -1\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output


def test_run_single_url(patch_start_scrape):
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "https://example.com/about"])
    assert result.exit_code == 0
    assert "Scraping single page: https://example.com/about" in result.output
    assert "1 processed" in result.output
    assert patch_start_scrape[0][1] == "https://example.com/about"


def test_run_batch_without_url(patch_start_scrape):
    runner = CliRunner()
    result = runner.invoke(cli, ["run"])
    assert result.exit_code == 0
    assert "Scraping sitemap: https://jacksonswash.com/page-sitemap.xml" in result.output
    assert patch_start_scrape[0][1] is None


def test_run_malformed_url_does_nothing(patch_start_scrape):
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "example.com/about"])
    assert result.exit_code == 1
    assert "Invalid URL" in result.output
    assert patch_start_scrape == []


def test_run_overrides_and_report(tmp_path, patch_start_scrape):
    report_path = tmp_path / "out" / "report.json"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "run",
            "--output-dir", str(tmp_path / "scraped"),
            "--layout", "combined",
            "--report", str(report_path),
        ],
    )
    assert result.exit_code == 0
    cfg, _ = patch_start_scrape[0]
    assert cfg.output_dir == tmp_path / "scraped"
    assert cfg.layout == "combined"
    data = json.loads(report_path.read_text(encoding="utf-8"))
    assert data["mode"] == "batch"


def test_run_sitemap_failure_exits(monkeypatch):
    async def failing(cfg, url=None):
        raise SitemapFetchError(str(cfg.sitemap_url), "Failed to fetch sitemap: Not Found", status=404)

    monkeypatch.setattr(engine_module, "start_scrape", failing)
    runner = CliRunner()
    result = runner.invoke(cli, ["run"])
    assert result.exit_code == 1
    assert "Not Found" in result.output


def test_run_unexpected_error_exits(monkeypatch):
    async def broken(cfg, url=None):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(engine_module, "start_scrape", broken)
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "https://example.com/about"])
    assert result.exit_code == 1
    assert "Scrape failed: disk on fire" in result.output
