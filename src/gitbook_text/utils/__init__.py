"""Utility functions."""

from gitbook_text.utils.url_utils import (
    ensure_md_suffix,
    is_doc_url,
    is_same_domain,
    normalize_url,
    url_to_filename,
)

__all__ = [
    "ensure_md_suffix",
    "is_doc_url",
    "is_same_domain",
    "normalize_url",
    "url_to_filename",
]
