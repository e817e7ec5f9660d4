"""URL manipulation utilities."""

from collections.abc import Iterable
from urllib.parse import urlparse

from gitbook_text.errors import InvalidURLError

MARKDOWN_SUFFIX = ".md"


def normalize_url(url: str) -> str:
    """Strip trailing slashes so that `/a/` and `/a` compare equal."""
    return url.rstrip("/")


def validate_base_url(url: str) -> str:
    """Return the host of an absolute http(s) URL, or raise InvalidURLError."""
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError as e:
        raise InvalidURLError(url) from e
    if parsed.scheme not in ("http", "https") or not host:
        raise InvalidURLError(url)
    return host


def is_same_domain(url1: str, url2: str) -> bool:
    """Check if two URLs have exactly the same host (subdomains differ)."""
    try:
        return urlparse(url1).hostname == urlparse(url2).hostname
    except ValueError:
        return False


def is_doc_url(url: str, skip_extensions: Iterable[str]) -> bool:
    """Check if a URL can be a documentation page (no fragment, not an asset)."""
    if "#" in url:
        return False

    lowered = url.lower()
    for ext in skip_extensions:
        if lowered.endswith(ext):
            return False

    return True


def url_to_filename(url: str) -> str:
    """Flatten a URL into a filename by replacing `/` and `:` with `_`."""
    return url.replace("/", "_").replace(":", "_")


def ensure_md_suffix(url: str) -> str:
    """Point a page URL at its raw Markdown source."""
    if url.endswith(MARKDOWN_SUFFIX):
        return url
    return url + MARKDOWN_SUFFIX
