"""Same-domain crawler-based link discovery."""

import logging
from pathlib import Path
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from gitbook_text.config import DiscoveryConfig, FetcherConfig
from gitbook_text.discovery.base import BaseDiscoverer
from gitbook_text.discovery.detector import is_gitbook
from gitbook_text.errors import NotGitBookError
from gitbook_text.fetcher import BaseFetcher, HttpFetcher
from gitbook_text.output.links import write_links
from gitbook_text.utils.url_utils import (
    is_doc_url,
    is_same_domain,
    normalize_url,
    validate_base_url,
)

logger = logging.getLogger(__name__)


class CrawlerDiscoverer(BaseDiscoverer):
    """Discover every page of a site by following same-host links."""

    def __init__(self, base_url: str, config: DiscoveryConfig, fetcher: BaseFetcher):
        self.base_url = base_url
        self.config = config
        self.fetcher = fetcher

    async def discover(self) -> list[str]:
        """Crawl the site starting from base_url.

        Traversal state lives only for the duration of this call. Pages are
        popped from the end of the frontier, so the walk is depth-first; the
        result does not depend on the order.

        Raises:
            InvalidURLError: If base_url is not an absolute http(s) URL.
            NetworkError: If the seed page cannot be fetched.
        """
        validate_base_url(self.base_url)
        seed = normalize_url(self.base_url)

        frontier: list[str] = [seed]
        queued: set[str] = {seed}
        visited: set[str] = set()
        found: set[str] = set()
        max_pages = self.config.max_pages

        while frontier:
            current_url = frontier.pop()
            queued.discard(current_url)

            if current_url in visited:
                continue

            if max_pages > 0 and len(visited) >= max_pages:
                logger.warning("Stopping crawl after %d pages (max_pages)", max_pages)
                break

            visited.add(current_url)
            logger.info("Exploring %s", current_url)

            result = await self.fetcher.fetch(current_url)
            if not result.success:
                if current_url == seed:
                    result.raise_for_error()
                logger.warning(
                    "Error while retrieving %s: %s",
                    current_url,
                    result.error or f"HTTP {result.status_code}",
                )
                continue

            # Relative links resolve against the URL the page was served from
            for link in self._extract_links(result.text, result.final_url or current_url):
                normalized = normalize_url(link)
                found.add(normalized)
                if normalized not in visited and normalized not in queued:
                    frontier.append(normalized)
                    queued.add(normalized)

        links = sorted(found)
        logger.info("%d page(s) found", len(links))
        return links

    def _extract_links(self, html: str, page_url: str) -> list[str]:
        """Return the eligible absolute links of a page, resolved against page_url."""
        soup = BeautifulSoup(html, "lxml")
        links = []

        for a in soup.find_all("a", href=True):
            try:
                absolute = urljoin(page_url, a["href"])
                if not is_same_domain(absolute, self.base_url):
                    continue
                if not is_doc_url(absolute, self.config.skip_extensions):
                    continue
            except ValueError:
                logger.debug("Skipping malformed link %r on %s", a["href"], page_url)
                continue
            links.append(absolute)

        return links


async def extract_gitbook_links(
    base_url: str,
    config: DiscoveryConfig | None = None,
    fetcher: BaseFetcher | None = None,
) -> list[str]:
    """Crawl a GitBook site and return every page URL found on it."""
    config = config or DiscoveryConfig()
    if fetcher is not None:
        return await CrawlerDiscoverer(base_url, config, fetcher).discover()

    async with HttpFetcher(FetcherConfig()) as owned:
        return await CrawlerDiscoverer(base_url, config, owned).discover()


async def crawl_and_save(
    base_url: str,
    output_file: Path = Path("links.txt"),
    config: DiscoveryConfig | None = None,
    fetcher: BaseFetcher | None = None,
) -> list[str]:
    """Check that base_url is a GitBook, crawl it, and write the link list.

    Raises:
        NotGitBookError: If the site carries no GitBook fingerprint.
    """
    if fetcher is None:
        async with HttpFetcher(FetcherConfig()) as owned:
            return await crawl_and_save(base_url, output_file, config, owned)

    validate_base_url(base_url)
    if not await is_gitbook(base_url, fetcher):
        raise NotGitBookError(base_url)

    links = await extract_gitbook_links(base_url, config, fetcher)
    await write_links(output_file, links)
    logger.info("%d link(s) saved in %s", len(links), output_file)
    return links
