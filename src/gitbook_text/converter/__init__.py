"""Markdown to plain text conversion."""

from gitbook_text.converter.markdown import markdown_to_text
from gitbook_text.converter.sanitizer import txt_sanitize

__all__ = [
    "markdown_to_text",
    "txt_sanitize",
]
