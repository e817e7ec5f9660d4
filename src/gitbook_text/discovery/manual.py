"""Link-list file discovery."""

from pathlib import Path

from gitbook_text.discovery.base import BaseDiscoverer
from gitbook_text.errors import StorageError


class ManualDiscoverer(BaseDiscoverer):
    """Discover URLs from a link-list file, one URL per line."""

    def __init__(self, links_file: Path):
        self.links_file = Path(links_file)

    async def discover(self) -> list[str]:
        """Read the link list, ignoring blank lines."""
        try:
            with open(self.links_file, "r", encoding="utf-8") as f:
                urls = {line.strip() for line in f if line.strip()}
        except OSError as e:
            raise StorageError(self.links_file, e.strerror or str(e)) from e

        return sorted(urls)
