"""site_scraper.parser: Pure parsing helpers (sitemap text, HTML, Markdown)."""
