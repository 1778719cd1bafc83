# === FILE: link_scout/crawler/session.py ===
"""
Crawl engine: depth-bounded recursive traversal with a per-run dedup table.

Every identifier is fetched at most once per :class:`CrawlSession`. The first
branch to look up an identifier claims it by storing a future in the table;
branches that discover the same identifier later (or concurrently) await that
future instead of fetching again. Children of a branch run as tasks of one
:class:`asyncio.TaskGroup`, so a branch returns only after its whole subtree has.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional

from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.models import (
    CrawlStats,
    FetchFailed,
    FetchFailure,
    FetchResult,
    Found,
    Identifier,
    Observation,
)
from link_scout.logger import get_logger

__all__ = ("CrawlSession", "CrawlReport", "ObservationSink", "crawl")

ObservationSink = Callable[[Observation], None]


@dataclass(slots=True)
class CrawlReport:
    """Everything one run produced, in emission order."""

    start_url: Identifier
    max_depth: int
    observations: List[Observation] = field(default_factory=list)
    stats: CrawlStats = field(default_factory=CrawlStats)

    @property
    def found(self) -> List[Found]:
        return [o for o in self.observations if isinstance(o, Found)]

    @property
    def failed(self) -> List[FetchFailed]:
        return [o for o in self.observations if isinstance(o, FetchFailed)]


class CrawlSession:
    """State of a single crawl run: the dedup table, its lock and the emitted observations."""

    def __init__(self, fetcher: Fetcher, sink: Optional[ObservationSink] = None) -> None:
        self.fetcher = fetcher
        self.sink = sink
        self.stats = CrawlStats()
        self.observations: List[Observation] = []
        self.logger = get_logger("session")
        self._table: Dict[Identifier, asyncio.Future[FetchResult]] = {}
        self._lock = asyncio.Lock()

    @property
    def table(self) -> Mapping[Identifier, FetchResult]:
        """Read-only snapshot of the resolved entries of the dedup table."""
        resolved = {
            key: fut.result() for key, fut in self._table.items() if fut.done() and not fut.cancelled()
        }
        return MappingProxyType(resolved)

    async def crawl(self, identifier: Identifier, depth: int) -> None:
        """Visit *identifier* and, depth permitting, everything it links to."""
        if depth <= 0:
            self.stats.pruned += 1
            return

        while True:
            async with self._lock:
                pending = self._table.get(identifier)
                owner = pending is None
                if owner:
                    pending = asyncio.get_running_loop().create_future()
                    self._table[identifier] = pending

            if owner:
                try:
                    result = await self._resolve(identifier)
                except BaseException:
                    # release the claim so waiters and later branches can fetch again
                    if self._table.get(identifier) is pending:
                        del self._table[identifier]
                    pending.cancel()
                    raise
                pending.set_result(result)
                break

            try:
                result = await asyncio.shield(pending)
            except asyncio.CancelledError:
                if asyncio.current_task().cancelling():
                    raise
                # the owner was cancelled: claim again
                continue
            self.stats.reused += 1
            self.logger.debug("Reusing result for %s (depth %d)", identifier, depth)
            break

        if not result.ok:
            if owner:
                self._emit(FetchFailed(identifier, result.error.reason, depth))
            return

        if owner:
            self._emit(Found(identifier, result.content, depth))

        if not result.links:
            return
        async with asyncio.TaskGroup() as group:
            for link in result.links:
                group.create_task(self.crawl(link, depth - 1))

    async def _resolve(self, identifier: Identifier) -> FetchResult:
        self.stats.fetches += 1
        try:
            content, links = await self.fetcher.fetch(identifier)
            return FetchResult(content=content, links=tuple(links))
        except FetchFailure as exc:
            self.logger.warning("Fetch failed %s: %s", identifier, exc.reason)
            return FetchResult(error=exc)
        except Exception as exc:
            # covers malformed (body, links) values too; siblings keep running
            self.logger.warning("Fetcher error for %s: %r", identifier, exc)
            return FetchResult(error=FetchFailure(identifier, str(exc) or type(exc).__name__))

    def _emit(self, observation: Observation) -> None:
        if isinstance(observation, Found):
            self.stats.found += 1
        else:
            self.stats.failed += 1
        self.observations.append(observation)
        if self.sink is None:
            return
        try:
            self.sink(observation)
        except Exception:
            self.logger.exception("Observation sink failed for %s", observation.identifier)


async def crawl(
    identifier: Identifier,
    depth: int,
    fetcher: Fetcher,
    sink: Optional[ObservationSink] = None,
) -> CrawlReport:
    """Run one crawl in a fresh session and return its report."""
    session = CrawlSession(fetcher, sink)
    await session.crawl(identifier, depth)
    return CrawlReport(
        start_url=identifier,
        max_depth=depth,
        observations=list(session.observations),
        stats=session.stats,
    )
