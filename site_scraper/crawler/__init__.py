"""site_scraper.crawler: Network side of the pipeline (fetching, extraction, sitemap)."""
