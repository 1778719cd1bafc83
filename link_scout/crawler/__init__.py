"""link_scout.crawler: crawl engine, fetchers and data models."""

from link_scout.crawler.fetcher import Fetcher, HttpFetcher, MappingFetcher
from link_scout.crawler.models import (
    CrawlStats,
    FetchFailed,
    FetchFailure,
    FetchResult,
    Found,
    Identifier,
    Observation,
)
from link_scout.crawler.session import CrawlReport, CrawlSession, crawl

__all__ = [
    "CrawlReport",
    "CrawlSession",
    "CrawlStats",
    "FetchFailed",
    "FetchFailure",
    "FetchResult",
    "Fetcher",
    "Found",
    "HttpFetcher",
    "Identifier",
    "MappingFetcher",
    "Observation",
    "crawl",
]
