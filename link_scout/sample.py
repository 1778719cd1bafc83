# File: link_scout/sample.py
"""link_scout.sample: встроенный набор страниц для офлайн-запуска (`crawl --sample`)."""

from __future__ import annotations

from typing import Dict, Tuple

from link_scout.crawler.fetcher import MappingFetcher

SAMPLE_START_URL = "https://golang.org/"

# /cmd/ is linked but absent on purpose: it exercises the failure path.
SAMPLE_PAGES: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    "https://golang.org/": (
        "The Go Programming Language",
        (
            "https://golang.org/pkg/",
            "https://golang.org/cmd/",
        ),
    ),
    "https://golang.org/pkg/": (
        "Packages",
        (
            "https://golang.org/",
            "https://golang.org/cmd/",
            "https://golang.org/pkg/fmt/",
            "https://golang.org/pkg/os/",
        ),
    ),
    "https://golang.org/pkg/fmt/": (
        "Package fmt",
        (
            "https://golang.org/",
            "https://golang.org/pkg/",
        ),
    ),
    "https://golang.org/pkg/os/": (
        "Package os",
        (
            "https://golang.org/",
            "https://golang.org/pkg/",
        ),
    ),
}


def sample_fetcher(delay: float = 0.0) -> MappingFetcher:
    """Return a fresh fetcher over SAMPLE_PAGES (call log is per instance)."""
    return MappingFetcher(SAMPLE_PAGES, delay=delay)


__all__ = ["SAMPLE_PAGES", "SAMPLE_START_URL", "sample_fetcher"]
