"""HTTP fetcher backed by httpx."""

import logging

import httpx

from gitbook_text.config import FetcherConfig
from gitbook_text.fetcher.base import BaseFetcher, FetchResult

logger = logging.getLogger(__name__)


class HttpFetcher(BaseFetcher):
    """Plain HTTP fetcher sending a browser User-Agent."""

    def __init__(self, config: FetcherConfig | None = None):
        super().__init__(config or FetcherConfig())
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        """Initialize HTTP client."""
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=self.config.follow_redirects,
            timeout=self.config.timeout_ms / 1000,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Clean up HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a page via HTTP."""
        if not self._client:
            raise RuntimeError("Fetcher not initialized. Use 'async with' context manager.")

        try:
            response = await self._client.get(url)
            return FetchResult(
                url=url,
                final_url=str(response.url),
                text=response.text,
                status_code=response.status_code,
            )

        except (httpx.HTTPError, httpx.InvalidURL, UnicodeDecodeError) as e:
            logger.debug("Fetch of %s failed", url, exc_info=True)
            return FetchResult(
                url=url,
                final_url=url,
                text="",
                status_code=0,
                error=str(e) or type(e).__name__,
            )
