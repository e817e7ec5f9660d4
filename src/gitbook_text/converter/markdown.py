"""Markdown to plain text conversion."""

from collections.abc import Iterable

from markdown_it import MarkdownIt
from markdown_it.token import Token

_parser = MarkdownIt("commonmark")

# Tokens whose content is literal text to keep verbatim
_TEXT_TOKENS = {"text", "text_special", "code_inline", "fence", "code_block"}
_BREAK_TOKENS = {"softbreak", "hardbreak"}


def markdown_to_text(md: str) -> str:
    """Convert Markdown to plain text, dropping all formatting.

    Text runs and code are appended in document order and every soft or
    hard line break becomes a newline. Headings, emphasis, list markers,
    raw HTML and block boundaries produce no output, so consecutive blocks
    are joined without a separator.
    """
    parts: list[str] = []
    _collect(_parser.parse(md), parts)
    return "".join(parts)


def _collect(tokens: Iterable[Token], parts: list[str]) -> None:
    for token in tokens:
        if token.type in _TEXT_TOKENS:
            parts.append(token.content)
        elif token.type in _BREAK_TOKENS:
            parts.append("\n")
        elif token.children:
            # inline tokens and images (alt text) nest their text runs
            _collect(token.children, parts)
