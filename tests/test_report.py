# File: tests/test_report.py
import json

import pytest

from link_scout.crawler.models import FetchFailed, Found
from link_scout.crawler.session import crawl
from link_scout.report import format_observation, render_json
from link_scout.sample import SAMPLE_START_URL, sample_fetcher


def test_format_observation():
    assert format_observation(Found("http://x/", 'Say "hi"', 2)) == 'found: http://x/ "Say \\"hi\\""'
    assert format_observation(FetchFailed("http://x/y", "not found", 1)) == "not found: http://x/y"


@pytest.mark.asyncio()
async def test_render_json(tmp_path):
    report = await crawl(SAMPLE_START_URL, 2, sample_fetcher())
    out = render_json(report, tmp_path / "nested" / "report.json")

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["start_url"] == SAMPLE_START_URL
    assert data["max_depth"] == 2
    assert [f["identifier"] for f in data["found"]] == [SAMPLE_START_URL, "https://golang.org/pkg/"]
    assert data["failed"] == [{"identifier": "https://golang.org/cmd/", "reason": "not found", "depth": 1}]
    assert data["stats"]["fetches"] == 3
