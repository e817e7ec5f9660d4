"""Base class for URL discovery."""

from abc import ABC, abstractmethod


class BaseDiscoverer(ABC):
    """Abstract base class for URL discovery strategies."""

    @abstractmethod
    async def discover(self) -> list[str]:
        """Return the discovered page URLs, sorted and deduplicated."""
        ...
