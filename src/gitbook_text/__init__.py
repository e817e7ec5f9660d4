"""Download GitBook documentation pages and convert them to plain text."""

from gitbook_text.converter import markdown_to_text, txt_sanitize
from gitbook_text.discovery import crawl_and_save, extract_gitbook_links, is_gitbook
from gitbook_text.errors import (
    GitBookError,
    InvalidURLError,
    NetworkError,
    NotGitBookError,
    StorageError,
)
from gitbook_text.output import url_to_filename

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "GitBookError",
    "InvalidURLError",
    "NetworkError",
    "NotGitBookError",
    "StorageError",
    "crawl_and_save",
    "extract_gitbook_links",
    "is_gitbook",
    "markdown_to_text",
    "txt_sanitize",
    "url_to_filename",
]
