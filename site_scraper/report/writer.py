# site_scraper/report/writer.py

"""
Persisting scraped pages to disk.

Per-page layout writes one ``.txt``, ``.md`` and ``.xml`` file per page into
three directories; the combined layout appends every page to two files.
A failed write is logged and never stops the run.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Union

from site_scraper.config import ScraperConfig
from site_scraper.crawler.models import ArtifactKind, OutputArtifact, PageRecord
from site_scraper.errors import FileWriteError
from site_scraper.logger import logger
from site_scraper.report.xml_report import render_page_xml
from site_scraper.utils import disambiguate_filename, sanitize_filename

TEXT_EXT = ".txt"
MARKDOWN_EXT = ".md"
XML_EXT = ".xml"

COMBINED_TEXT_FILE = "scraped-content.txt"
COMBINED_MARKDOWN_FILE = "scraped-content.md"


def _write_text(path: Path, content: str) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(str(path), exc.strerror or str(exc)) from exc
    return path


def write_artifact(
    directory: Union[str, Path],
    url: str,
    content: str,
    extension: str,
    label: str,
    filename: Optional[str] = None,
) -> Optional[Path]:
    """
    Write *content* to ``directory/<sanitized url><extension>``.

    :param directory: output directory, created when missing
    :param url: page URL the filename is derived from
    :param content: full file contents (an existing file is overwritten)
    :param extension: extension including the dot
    :param label: human readable kind used in log lines
    :param filename: precomputed filename, skips sanitizing *url*
    :return: path of the written file, or None if the write failed
    """
    directory = Path(directory)
    name = filename or sanitize_filename(url, extension)
    try:
        path = _write_text(directory / name, content)
    except FileWriteError as exc:
        logger.error("Failed to write %s file %s in %s: %s", label, name, directory, exc.reason)
        return None
    logger.info("%s saved to %s", label, path)
    return path


class ArtifactWriter:
    """Writes the text, Markdown and XML artifacts for each page of a run."""

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config
        self._claimed: Dict[str, str] = {}

    def _filename(self, url: str, extension: str) -> str:
        name = sanitize_filename(url, extension)
        if not self.config.disambiguate_collisions:
            return name
        owner = self._claimed.setdefault(name, url)
        if owner != url:
            unique = disambiguate_filename(name, url, extension)
            logger.warning("Filename collision: %s and %s both map to %s, using %s", owner, url, name, unique)
            self._claimed.setdefault(unique, url)
            return unique
        return name

    def write_page(self, record: PageRecord) -> List[OutputArtifact]:
        """Write all three artifacts for *record*; failures leave ``path`` unset."""
        plan: List[tuple[ArtifactKind, Path, str, str, str]] = [
            ("text", self.config.text_path, TEXT_EXT, "Text", record.text),
            ("markdown", self.config.markdown_path, MARKDOWN_EXT, "Markdown", record.markdown),
            (
                "xml",
                self.config.xml_path,
                XML_EXT,
                "XML",
                render_page_xml(record.url, record.title, record.markdown),
            ),
        ]
        artifacts: List[OutputArtifact] = []
        for kind, directory, extension, label, content in plan:
            filename = self._filename(record.url, extension)
            path = write_artifact(directory, record.url, content, extension, label, filename=filename)
            artifacts.append(
                OutputArtifact(kind=kind, directory=directory, filename=filename, content=content, path=path)
            )
        return artifacts


class CombinedWriter:
    """Accumulates every page into two combined files written at the end of a run."""

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config
        self._text: List[str] = []
        self._markdown: List[str] = []

    @staticmethod
    def _separator(url: str) -> str:
        return f"\n\n--- Page: {url} ---\n\n"

    def add(self, record: PageRecord) -> None:
        self._text.append(self._separator(record.url) + record.text)
        self._markdown.append(self._separator(record.url) + record.markdown)

    @property
    def page_count(self) -> int:
        return len(self._text)

    def flush(self) -> List[OutputArtifact]:
        """Write both combined files; an empty run still produces empty files."""
        directory = Path(self.config.output_dir)
        artifacts: List[OutputArtifact] = []
        for kind, filename, label, parts in (
            ("text", COMBINED_TEXT_FILE, "Text", self._text),
            ("markdown", COMBINED_MARKDOWN_FILE, "Markdown", self._markdown),
        ):
            content = "".join(parts)
            path = write_artifact(directory, filename, content, "", label, filename=filename)
            artifacts.append(
                OutputArtifact(kind=kind, directory=directory, filename=filename, content=content, path=path)
            )
        return artifacts
