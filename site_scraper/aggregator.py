# File: site_scraper/aggregator.py
"""site_scraper.aggregator: Run summary collected while the orchestrator works."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Literal, Optional, TypedDict, Union

from site_scraper.crawler.models import OutputArtifact, PageResult

Mode = Literal["single", "batch"]


class PageFailure(TypedDict):
    """A page whose fetch or parse failed."""

    url: str
    error: str


class WriteFailure(TypedDict):
    """An artifact that could not be written."""

    url: str
    kind: str
    filename: str


@dataclass(slots=True)
class ScrapeReport:
    """Results of one run: which pages produced output, which were skipped, what was written."""

    mode: Mode
    resolved_urls: int = 0
    processed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[PageFailure] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    write_failures: List[WriteFailure] = field(default_factory=list)
    aborted: bool = False

    def add_result(self, result: PageResult) -> None:
        """Record a page that produced nothing (failed fetch or empty after stripping)."""
        if not result.ok:
            self.failed.append({"url": result.url, "error": result.error or ""})
        else:
            self.skipped.append(result.url)

    def add_artifacts(self, url: str, artifacts: Iterable[OutputArtifact]) -> None:
        """Record the outcome of writing one page."""
        self.processed.append(url)
        self.add_files(url, artifacts)

    def add_files(self, url: str, artifacts: Iterable[OutputArtifact]) -> None:
        for artifact in artifacts:
            if artifact.path is not None:
                self.files.append(str(artifact.path))
            else:
                self.write_failures.append(
                    {"url": url, "kind": artifact.kind, "filename": artifact.filename}
                )

    @property
    def completed(self) -> bool:
        return not self.aborted

    def summary(self) -> Dict[str, int]:
        return {
            "resolved": self.resolved_urls,
            "processed": len(self.processed),
            "skipped": len(self.skipped),
            "failed": len(self.failed),
            "files": len(self.files),
            "write_failures": len(self.write_failures),
        }

    def json(self, *, pretty: bool = False) -> str:
        """JSON representation of the report."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def render_json(report: ScrapeReport, output_path: Union[Path, str], pretty: Optional[bool] = True) -> Path:
    """Save *report* as JSON at *output_path*, creating parent directories."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report.json(pretty=bool(pretty)), encoding="utf-8")
    return output
