# setup.py
from setuptools import setup, find_packages

setup(
    name="site_scraper",
    version="0.1.0",
    description="SiteScraper: sitemap-driven page scraper producing text, Markdown and XML",
    packages=find_packages(include=["site_scraper", "site_scraper.*"]),
    package_data={"site_scraper.report": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "lxml>=5.0",
        "markdownify>=1.0",
        "jinja2>=3.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "site-scraper=site_scraper.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
