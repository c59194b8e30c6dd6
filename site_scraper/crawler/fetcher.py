# site_scraper/crawler/fetcher.py
"""
Fetcher module: plain HTTP GET of sitemap and page bodies over one aiohttp session.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Type

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_scraper.config import ScraperConfig
from site_scraper.errors import FetchError, PageFetchError


class Fetcher:
    """Issues GET requests and returns the decoded body, or raises FetchError.

    Usable as an async context manager, in which case it owns its session;
    an externally created session can be passed in instead.
    """

    def __init__(self, config: ScraperConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch_text(self, url: str, error_cls: Type[FetchError] = PageFetchError) -> str:
        """
        GET *url* and return its body as text.

        Raises *error_cls* for a non-2xx status (reason text included), for
        transport errors and for timeouts.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                if not 200 <= resp.status < 300:
                    reason = resp.reason or f"HTTP {resp.status}"
                    raise error_cls(url, reason, status=resp.status)
                return await resp.text(errors="replace")
        except asyncio.TimeoutError as exc:
            raise error_cls(url, f"timed out after {self.config.timeout} s") from exc
        except ClientError as exc:
            raise error_cls(url, str(exc) or type(exc).__name__) from exc
