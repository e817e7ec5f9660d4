"""Shared fixtures for the gitbook-text test suite."""

from __future__ import annotations

import pytest

from gitbook_text.fetcher.base import BaseFetcher, FetchResult


class FakeFetcher(BaseFetcher):
    """In-memory fetcher: serves ``pages`` and fails for any other URL."""

    def __init__(self, pages: dict[str, str], failing: set[str] | None = None):
        super().__init__(config=None)  # type: ignore[arg-type]
        self.pages = pages
        self.failing = failing or set()
        self.requested: list[str] = []

    async def fetch(self, url: str) -> FetchResult:
        self.requested.append(url)
        if url in self.failing or url not in self.pages:
            return FetchResult(url=url, final_url=url, text="", status_code=404)
        return FetchResult(url=url, final_url=url, text=self.pages[url], status_code=200)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass


@pytest.fixture
def fake_fetcher_cls():
    return FakeFetcher
