import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from site_scraper.config import DEFAULT_NOISE_SELECTORS, ScraperConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,expect_exc",
    [
        ("sitemap_url: http://example.com/sitemap.xml\nsite_url: http://example.com/", None),
        (json.dumps({"sitemap_url": "http://example.com/sitemap.xml", "site_url": "http://example.com"}), None),
        ("{}", None),
        ("unknown_field: 1", ValidationError),
        ("site_url: example.com", ValidationError),
        ("layout: zip", ValidationError),
        ("not: a: mapping", ValueError),
        ("- just\n- a list", TypeError),
    ],
)
def test_load_config_variants(tmp_path, content, expect_exc):
    suffix = ".json" if content.strip().startswith("{") else ".yaml"
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, ScraperConfig)
        assert not cfg.site_url.endswith("/")


def test_load_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert str(cfg.sitemap_url) == "https://jacksonswash.com/page-sitemap.xml"
    assert cfg.site_url == "https://jacksonswash.com"
    assert cfg.noise_selectors == list(DEFAULT_NOISE_SELECTORS)
    assert cfg.text_path == Path(".") / "scraped_text"


def test_load_config_picks_up_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("layout: combined\n", encoding="utf-8")
    assert load_config(None).layout == "combined"


def test_load_config_explicit_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_file(tmp_path, "x", ".ini"))


def test_asset_extensions_are_normalized():
    cfg = ScraperConfig(asset_extensions=["PDF", ".Zip"])
    assert cfg.asset_extensions == [".pdf", ".zip"]


def test_config_is_frozen():
    cfg = ScraperConfig()
    with pytest.raises(ValidationError):
        cfg.layout = "combined"
