# File: tests/test_link_extractor.py
import pytest

from link_scout.crawler.link_extractor import extract_links

PAGE = """
<html><body>
  <a href="/docs/">Docs</a>
  <a href="guide.html#intro">Guide</a>
  <a href="guide.html">Guide again</a>
  <a href="https://other.example.org/x">Other</a>
  <a href="mailto:team@example.com">Mail</a>
  <a href="javascript:void(0)">JS</a>
  <a href="ftp://example.com/file">FTP</a>
  <a href="">Empty</a>
  <a>No href</a>
</body></html>
"""


@pytest.mark.parametrize(
    "same_host_only,expected",
    [
        (
            False,
            [
                "http://example.com/docs/",
                "http://example.com/base/guide.html",
                "https://other.example.org/x",
            ],
        ),
        (
            True,
            [
                "http://example.com/docs/",
                "http://example.com/base/guide.html",
            ],
        ),
    ],
)
def test_extract_links(same_host_only, expected):
    links = extract_links("http://example.com/base/index.html", PAGE, same_host_only=same_host_only)
    assert links == expected


def test_extract_links_without_anchors():
    assert extract_links("http://example.com/", "<p>nothing here</p>") == []
