# link_scout/__init__.py
"""
LinkScout package initializer.
Defines package version and exposes the crawl entry point.
The CLI lives in :mod:`link_scout.cli` (console script ``link-scout``).
"""
__version__ = "0.1.0"

from link_scout.crawler import CrawlReport, CrawlSession, crawl  # noqa: E402

__all__ = ["__version__", "CrawlReport", "CrawlSession", "crawl"]
