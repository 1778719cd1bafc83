# File: tests/conftest.py
import asyncio
from typing import Dict, List, Tuple

import pytest

from link_scout.crawler.fetcher import MappingFetcher
from link_scout.logger import LOGGER_NAME, get_logger

#: link graph with cycles; "C" is linked but has no page
GRAPH_PAGES: Dict[str, Tuple[str, List[str]]] = {
    "A": ("content of A", ["B", "C"]),
    "B": ("content of B", ["A", "C", "D", "E"]),
    "D": ("content of D", ["A", "B"]),
    "E": ("content of E", ["A", "B"]),
}


class DelayedFetcher:
    """MappingFetcher variant with a per-identifier delay and in-flight tracking."""

    def __init__(self, pages, delays=None, default_delay: float = 0.0) -> None:
        self.pages = pages
        self.delays = delays or {}
        self.default_delay = default_delay
        self.calls: List[str] = []
        self.completed: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, identifier):
        self.calls.append(identifier)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(identifier, self.default_delay))
            return await MappingFetcher(self.pages).fetch(identifier)
        finally:
            self.in_flight -= 1
            self.completed.append(identifier)


@pytest.fixture()
def graph_fetcher() -> MappingFetcher:
    """Fetcher over the cyclic A..E fixture."""
    return MappingFetcher(GRAPH_PAGES)


@pytest.fixture()
def delayed_fetcher_factory():
    """Build DelayedFetcher instances inside a test."""
    return DelayedFetcher


@pytest.fixture(autouse=True)
def reset_project_logger():
    """Drop handlers bound to streams of a finished test (e.g. CliRunner)."""
    yield
    lg = get_logger()
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()
    assert lg.name == LOGGER_NAME
