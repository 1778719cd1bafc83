# link_scout/crawler/fetcher.py
"""
Fetch capabilities consumed by the crawl engine.

A fetcher turns an identifier into ``(body, links)`` or raises
:class:`~link_scout.crawler.models.FetchFailure`. Implementations must tolerate
concurrent calls from unrelated crawl branches.
"""
from __future__ import annotations

import asyncio
import random
from typing import Iterable, List, Mapping, Protocol, Sequence, Tuple, runtime_checkable

from aiohttp import ClientError, ClientSession, InvalidURL
from link_scout.config import CrawlConfig
from link_scout.crawler.link_extractor import extract_links
from link_scout.crawler.models import FetchFailure, Identifier
from link_scout.logger import get_logger

logger = get_logger("fetcher")


@runtime_checkable
class Fetcher(Protocol):
    async def fetch(self, identifier: Identifier) -> Tuple[str, List[Identifier]]:
        ...


class MappingFetcher:
    """Serves canned pages from a mapping; unknown identifiers fail with ``not found``."""

    def __init__(
        self,
        pages: Mapping[Identifier, Tuple[str, Iterable[Identifier]]],
        delay: float = 0.0,
    ) -> None:
        self.pages = {url: (body, list(links)) for url, (body, links) in pages.items()}
        self.delay = delay
        self.calls: List[Identifier] = []

    async def fetch(self, identifier: Identifier) -> Tuple[str, List[Identifier]]:
        self.calls.append(identifier)
        if self.delay:
            await asyncio.sleep(self.delay)
        try:
            body, links = self.pages[identifier]
        except KeyError:
            raise FetchFailure(identifier, "not found") from None
        return body, list(links)


class HttpFetcher:
    """Fetches pages over HTTP with a concurrency cap, retries/backoff and timeout."""

    RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)

    def __init__(self, session: ClientSession, config: CrawlConfig) -> None:
        self.session = session
        self.config = config
        self._slots = asyncio.Semaphore(config.concurrency)

    async def fetch(self, identifier: Identifier) -> Tuple[str, List[Identifier]]:
        """
        GET the URL and return its text and the links found in it.

        Raises FetchFailure on 4xx, non-HTML content, or when retries run out.
        """
        attempts = 0
        while True:
            try:
                async with self._slots:
                    return await self._get(identifier)
            except InvalidURL as exc:
                raise FetchFailure(identifier, f"invalid url ({exc})") from exc
            except (ClientError, asyncio.TimeoutError) as exc:
                attempts += 1
                if attempts > self.config.retry_times:
                    reason = str(exc) or type(exc).__name__
                    raise FetchFailure(identifier, reason) from exc
                backoff = min(60, 2**attempts + random.random())
                logger.debug(
                    "Retry %d/%d for %s after %.2f s", attempts, self.config.retry_times, identifier, backoff
                )
                await asyncio.sleep(backoff)

    async def _get(self, url: Identifier) -> Tuple[str, List[Identifier]]:
        async with self.session.get(url, raise_for_status=False) as resp:
            status = resp.status
            if status in self.RETRY_STATUS:
                raise ClientError(f"retryable status {status}")
            if status >= 400:
                raise FetchFailure(url, f"http {status}")
            mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
            if mime not in ("text/html", "application/xhtml+xml"):
                raise FetchFailure(url, f"unsupported content type {mime or 'unknown'}")
            text = await resp.text()
            final_url = str(resp.url)
        return text, extract_links(final_url, text, same_host_only=self.config.same_host_only)


__all__ = ["Fetcher", "MappingFetcher", "HttpFetcher"]
