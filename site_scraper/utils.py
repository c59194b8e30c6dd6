# File: site_scraper/utils.py
"""site_scraper.utils: Pure helpers for URLs, filenames, whitespace and XML text."""

from __future__ import annotations

import hashlib
import re
from typing import Collection, Iterable, List, Sequence

from site_scraper.errors import InvalidArgumentError
from site_scraper.logger import logger

__all__: Sequence[str] = (
    "sanitize_filename",
    "disambiguate_filename",
    "normalize_whitespace",
    "escape_xml",
    "escape_cdata",
    "has_extension",
    "is_http_url",
    "validate_url",
    "remove_duplicates",
)

_SCHEME_RE = re.compile(r"^https?://")
_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_.-]")
_UNDERSCORES_RE = re.compile(r"_+")
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_filename(url: str, extension: str) -> str:
    """Map *url* to a filesystem-safe name ending with *extension*.

    >>> sanitize_filename("https://example.com/foo?bar=1", ".txt")
    'example.com_foo_bar_1.txt'
    """
    name = _SCHEME_RE.sub("", url)
    name = _UNSAFE_RE.sub("_", name)
    name = _UNDERSCORES_RE.sub("_", name)
    if name.endswith("."):
        name = name[:-1]
    return f"{name}{extension}"


def disambiguate_filename(filename: str, url: str, extension: str) -> str:
    """Insert a short digest of *url* before *extension* in *filename*."""
    digest = hashlib.sha1(url.encode("utf-8")).hexdigest()[:8]
    stem = filename[: -len(extension)] if extension and filename.endswith(extension) else filename
    return f"{stem}-{digest}{extension}"


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def escape_xml(value: str) -> str:
    """Escape ``&``, ``<`` and ``>`` (ampersand first)."""
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_cdata(value: str) -> str:
    """Split every ``]]>`` so *value* can sit inside one CDATA section."""
    return value.replace("]]>", "]]]]><![CDATA[>")


def has_extension(url: str, extensions: Iterable[str]) -> bool:
    """Case-insensitive check whether *url* ends with one of *extensions*."""
    lowered = url.lower()
    return any(lowered.endswith(ext.lower()) for ext in extensions)


def is_http_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def validate_url(value: str) -> str:
    """Return *value* unchanged or raise InvalidArgumentError."""
    if not is_http_url(value):
        raise InvalidArgumentError(
            f"Invalid URL: {value!r}. Provide a URL starting with http:// or https://"
        )
    return value


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Remove duplicate URLs, keeping first-seen order."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique
