"""Page fetching over HTTP."""

from gitbook_text.fetcher.base import BaseFetcher, FetchResult
from gitbook_text.fetcher.http_fetcher import HttpFetcher

__all__ = [
    "BaseFetcher",
    "FetchResult",
    "HttpFetcher",
]
