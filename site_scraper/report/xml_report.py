# File: site_scraper/report/xml_report.py
"""site_scraper.report.xml_report: XML wrapper around a page's Markdown, rendered with Jinja2."""

from __future__ import annotations

from functools import lru_cache

from jinja2 import Environment, PackageLoader, Template

from site_scraper.utils import escape_cdata, escape_xml

PAGE_TEMPLATE = "page.xml.j2"


@lru_cache(maxsize=1)
def _page_template() -> Template:
    # Escaping is done by the xml_text and cdata filters only.
    env = Environment(
        loader=PackageLoader("site_scraper.report", "templates"),
        autoescape=False,
        keep_trailing_newline=True,
    )
    env.filters["xml_text"] = escape_xml
    env.filters["cdata"] = escape_cdata
    return env.get_template(PAGE_TEMPLATE)


def render_page_xml(url: str, title: str, markdown: str) -> str:
    """Render the ``<page>`` document for one scraped page.

    Args:
        url: page URL, written entity-escaped into ``<link>``.
        title: page title, entity-escaped into ``<title>``.
        markdown: page Markdown, embedded verbatim in a CDATA section
            (any ``]]>`` inside it is split across two sections).

    Example:
    ```python
    from site_scraper.report.xml_report import render_page_xml
    xml = render_page_xml("https://example.com/a", "A & B", "# Heading")
    ```
    """
    return _page_template().render(url=url, title=title, markdown=markdown)
