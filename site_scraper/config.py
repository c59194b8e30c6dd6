# === FILE: site_scraper/config.py ===
"""
Module for loading and validating SiteScraper configuration.
Pydantic describes the schema and checks the data; every field has a
documented default so a run works without any config file at all.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Literal, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
)

DEFAULT_SITEMAP_URL = "https://jacksonswash.com/page-sitemap.xml"
DEFAULT_SITE_URL = "https://jacksonswash.com"

DEFAULT_NOISE_SELECTORS: tuple[str, ...] = (
    "script",
    "style",
    "header",
    "nav",
    "button",
    "footer",
    "noscript",
    "form",
    ".modal",
    ".dropdown",
    ".popup",
    ".tooltip",
    "[hidden]",
    '[aria-hidden="true"]',
    ".hidden",
)

DEFAULT_ASSET_EXTENSIONS: tuple[str, ...] = (
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".svg",
    ".xml",
    ".css",
    ".js",
)

Layout = Literal["per-page", "combined"]


class ScraperConfig(BaseModel):
    """Configuration for one scraping run."""
    model_config = ConfigDict(extra="forbid", frozen=True, validate_default=True)

    sitemap_url: HttpUrl = Field(
        DEFAULT_SITEMAP_URL, description="Sitemap fetched in batch mode."
    )
    site_url: str = Field(
        DEFAULT_SITE_URL, description="Scheme + host that harvested page URLs must start with."
    )
    output_dir: Path = Field(Path("."), description="Root directory for all output.")
    text_dir: str = Field("scraped_text", min_length=1, description="Sub-directory for .txt files.")
    markdown_dir: str = Field(
        "scraped_markdown", min_length=1, description="Sub-directory for .md files."
    )
    xml_dir: str = Field("scraped_xml", min_length=1, description="Sub-directory for .xml files.")
    layout: Layout = Field(
        "per-page", description="per-page files, or the two combined scraped-content files."
    )
    noise_selectors: List[str] = Field(
        default_factory=lambda: list(DEFAULT_NOISE_SELECTORS),
        description="CSS selectors removed from every page, in order.",
    )
    asset_extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ASSET_EXTENSIONS),
        description="URL suffixes dropped from the sitemap.",
    )
    timeout: float = Field(300.0, gt=0, description="Total timeout per request (seconds).")
    disambiguate_collisions: bool = Field(
        True, description="Suffix a URL digest when two URLs map to one filename."
    )

    @field_validator("site_url", mode="before")
    def _strip_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str):
            if not v.startswith(("http://", "https://")):
                raise ValueError("site_url must start with http:// or https://")
            return v.rstrip("/")
        return v

    @field_validator("asset_extensions")
    def _lowercase_extensions(cls, v: List[str]) -> List[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

    # Convenience helpers ---------------------------------------------------
    @property
    def text_path(self) -> Path:
        return self.output_dir / self.text_dir

    @property
    def markdown_path(self) -> Path:
        return self.output_dir / self.markdown_dir

    @property
    def xml_path(self) -> Path:
        return self.output_dir / self.xml_dir


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> ScraperConfig:
    """
    Read YAML or JSON and return a validated ScraperConfig.

    Without *path* the project's ``configs/default.yaml`` is used when it
    exists, otherwise the built-in defaults. An explicit path that does not
    exist raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ScraperConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return ScraperConfig(**data)


__all__ = [
    "ScraperConfig",
    "load_config",
    "DEFAULT_NOISE_SELECTORS",
    "DEFAULT_ASSET_EXTENSIONS",
    "DEFAULT_SITEMAP_URL",
    "DEFAULT_SITE_URL",
]
