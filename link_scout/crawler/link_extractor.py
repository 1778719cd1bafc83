# link_scout/crawler/link_extractor.py
"""
Link extraction for the HTTP fetcher.
"""
from __future__ import annotations

from typing import List
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup
from bs4.element import Tag


def extract_links(page_url: str, html: str, same_host_only: bool = False) -> List[str]:
    """
    Extract absolute HTTP(S) links from HTML, in document order, without duplicates.

    Ignores mailto:, javascript:, tel: and (optionally) other hosts. Fragments are dropped.
    """
    soup = BeautifulSoup(html, "html.parser")
    base_netloc = urlparse(page_url).netloc.lower()
    links: List[str] = []
    seen = set()
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if not raw or raw.startswith(("mailto:", "javascript:", "tel:")):
            continue
        absolute, _ = urldefrag(urljoin(page_url, raw))
        parsed = urlparse(absolute)
        if parsed.scheme not in ("http", "https"):
            continue
        if same_host_only and parsed.netloc.lower() != base_netloc:
            continue
        if absolute not in seen:
            seen.add(absolute)
            links.append(absolute)
    return links
