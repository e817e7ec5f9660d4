"""GitBook detection and URL discovery."""

from gitbook_text.discovery.base import BaseDiscoverer
from gitbook_text.discovery.crawler import (
    CrawlerDiscoverer,
    crawl_and_save,
    extract_gitbook_links,
)
from gitbook_text.discovery.detector import GITBOOK_FINGERPRINTS, is_gitbook
from gitbook_text.discovery.manual import ManualDiscoverer

__all__ = [
    "BaseDiscoverer",
    "CrawlerDiscoverer",
    "GITBOOK_FINGERPRINTS",
    "ManualDiscoverer",
    "crawl_and_save",
    "extract_gitbook_links",
    "is_gitbook",
]
