"""GitBook site detection."""

import logging

from gitbook_text.fetcher.base import BaseFetcher

logger = logging.getLogger(__name__)

# Matched as substrings of the lower-cased page body
GITBOOK_FINGERPRINTS = frozenset({"gitbook", "data-gitbook", "__gitbook__", "gitbook.com"})


def has_gitbook_fingerprint(html: str) -> bool:
    """Check whether a page body carries any GitBook marker."""
    html_lower = html.lower()
    return any(marker in html_lower for marker in GITBOOK_FINGERPRINTS)


async def is_gitbook(url: str, fetcher: BaseFetcher) -> bool:
    """Fetch ``url`` once and report whether it is served by GitBook.

    Raises:
        NetworkError: If the page cannot be fetched.
    """
    html = await fetcher.fetch_text(url)
    detected = has_gitbook_fingerprint(html)
    logger.debug("GitBook fingerprint %s on %s", "found" if detected else "absent", url)
    return detected
