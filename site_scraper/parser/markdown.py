# File: site_scraper/parser/markdown.py
"""site_scraper.parser.markdown: HTML fragment → Markdown via markdownify."""

from __future__ import annotations

from markdownify import ATX, MarkdownConverter


class LinkMarkdownConverter(MarkdownConverter):
    """Markdownify converter with the scraper's anchor rule.

    ``<a href="...">`` becomes ``[trimmed text](href)``. An anchor without a
    usable ``href`` keeps only its content, with no brackets.
    """

    def __init__(self, **options) -> None:
        options.setdefault("heading_style", ATX)
        super().__init__(**options)

    def convert_a(self, el, text, parent_tags):
        href = el.get("href") or ""
        if not href:
            return text
        return f"[{text.strip()}]({href})"


def html_to_markdown(fragment: str, **options) -> str:
    """Convert a cleaned HTML fragment to Markdown."""
    if not fragment:
        return ""
    return LinkMarkdownConverter(**options).convert(fragment).strip()


__all__ = ["LinkMarkdownConverter", "html_to_markdown"]
