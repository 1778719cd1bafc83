# link_scout/crawler/models.py
"""
Data models for the LinkScout crawl engine.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple, Union

Identifier = str


class FetchFailure(Exception):
    """Raised by a fetcher when an identifier cannot be resolved."""

    def __init__(self, identifier: Identifier, reason: str) -> None:
        super().__init__(f"{reason}: {identifier}")
        self.identifier = identifier
        self.reason = reason


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of resolving one identifier: body and outbound links, or the failure."""

    content: str = ""
    links: Tuple[Identifier, ...] = ()
    error: Optional[FetchFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class Found:
    """Success observation."""

    identifier: Identifier
    content: str
    depth: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class FetchFailed:
    """Failure observation; ``reason`` is the fetcher's message, passed through."""

    identifier: Identifier
    reason: str
    depth: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


Observation = Union[Found, FetchFailed]


@dataclass(slots=True)
class CrawlStats:
    """Counters collected during one crawl run."""

    fetches: int = 0
    reused: int = 0
    found: int = 0
    failed: int = 0
    pruned: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
