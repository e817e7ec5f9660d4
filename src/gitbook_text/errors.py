"""Error types raised by gitbook-text."""

from pathlib import Path


class GitBookError(Exception):
    """Base class for all gitbook-text errors."""


class NetworkError(GitBookError):
    """A fetch failed: transport error, non-2xx status, or unreadable body."""

    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"Network error for {url}: {detail}")


class InvalidURLError(GitBookError):
    """The base URL is unparsable or not absolute."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url}")


class StorageError(GitBookError):
    """Reading or writing a local file or directory failed."""

    def __init__(self, path: Path | str, detail: str):
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"I/O error on {path}: {detail}")


class NotGitBookError(GitBookError):
    """The site does not carry any GitBook fingerprint."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"{url} does not seem to be a GitBook site")
