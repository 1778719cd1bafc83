# File: link_scout/engine.py
"""link_scout.engine: Orchestration layer для запуска обхода по конфигурации."""

from __future__ import annotations

import time
from typing import Optional

from aiohttp import ClientSession, ClientTimeout

from link_scout.config import CrawlConfig
from link_scout.crawler.fetcher import Fetcher, HttpFetcher
from link_scout.crawler.session import CrawlReport, ObservationSink, crawl
from link_scout.logger import logger
from link_scout.sample import sample_fetcher

__all__ = ["start_crawl"]


async def start_crawl(
    config: CrawlConfig,
    fetcher: Optional[Fetcher] = None,
    sink: Optional[ObservationSink] = None,
) -> CrawlReport:
    """Запускает обход от config.start_url на глубину config.max_depth и возвращает отчёт.

    Если fetcher не передан, он выбирается по config.source: встроенный пример
    или HTTP через aiohttp (сессия открывается и закрывается вокруг обхода).
    """
    logger.info("Старт обхода: %s (depth=%d, source=%s)", config.start_url, config.max_depth, config.source)
    start = time.monotonic()

    if fetcher is not None:
        report = await crawl(config.start_url, config.max_depth, fetcher, sink)
    elif config.source == "sample":
        report = await crawl(config.start_url, config.max_depth, sample_fetcher(), sink)
    else:
        timeout = ClientTimeout(total=config.timeout)
        async with ClientSession(timeout=timeout, headers={"User-Agent": config.user_agent}) as session:
            report = await crawl(config.start_url, config.max_depth, HttpFetcher(session, config), sink)

    duration = time.monotonic() - start
    stats = report.stats
    logger.info(
        "Завершено за %.2f с: найдено %d, ошибок %d, запросов %d, повторных посещений %d",
        duration,
        stats.found,
        stats.failed,
        stats.fetches,
        stats.reused,
    )
    return report
