"""Base class for page fetchers."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from gitbook_text.config import FetcherConfig
from gitbook_text.errors import NetworkError


class FetchResult(BaseModel):
    """Result of fetching a page."""

    url: str
    final_url: str  # After redirects
    text: str
    status_code: int
    error: str | None = None

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300 and not self.error

    def raise_for_error(self) -> None:
        """Raise NetworkError unless the fetch succeeded."""
        if not self.success:
            raise NetworkError(self.url, self.error or f"HTTP {self.status_code}")


class BaseFetcher(ABC):
    """Abstract base class for page fetchers."""

    def __init__(self, config: FetcherConfig):
        self.config = config

    @abstractmethod
    async def fetch(self, url: str) -> FetchResult:
        """Fetch a page. Failures are reported in the result, not raised."""
        pass

    async def fetch_text(self, url: str) -> str:
        """Fetch a page and return its body, raising NetworkError on failure."""
        result = await self.fetch(url)
        result.raise_for_error()
        return result.text

    @abstractmethod
    async def __aenter__(self):
        """Async context manager entry."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        pass
