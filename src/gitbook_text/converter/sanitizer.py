"""Removal of GitBook template annotations from converted text."""

import re
from collections.abc import Callable

_Replacement = str | Callable[[re.Match[str]], str]

# Applied strictly in order. Each pass only sees what earlier passes left.
_PASSES: list[tuple[re.Pattern[str], _Replacement]] = [
    # {% code ... title="X" ... %}BODY{% endcode %} -> "X BODY".
    # Runs before the quote strip below, which would destroy the title delimiters.
    (
        re.compile(r'\{%\s*code[^}]*title\s*=\s*"([^"]+)"[^}]*%}(.*?)\{%\s*endcode\s*%\}'),
        lambda m: f"{m.group(1)} {m.group(2)}",
    ),
    # Untitled code blocks keep their body only. Must follow the titled pass,
    # whose blocks it would also match. BODY cannot span lines, so whitespace
    # is collapsed only at the end.
    (
        re.compile(r"\{%\s*code[^}]*%}(.*?)\{%\s*endcode\s*%\}"),
        lambda m: m.group(1),
    ),
    # Any other tag carrying a title keeps the title
    (re.compile(r'\{%\s*[^}]*title\s*=\s*"([^"]+)"[^}]*%\}'), r"\1"),
    # Catch-all for every remaining tag, closing tags included
    (re.compile(r"\{%\s*[^}]*%\}"), ""),
    (re.compile(r'["-]'), ""),
    (re.compile(r"\s+"), " "),
]


def _apply_passes(text: str) -> str:
    for pattern, replacement in _PASSES:
        text = pattern.sub(replacement, text)
    return text.strip()


def txt_sanitize(txt: str) -> str:
    """Strip GitBook ``{% ... %}`` tags, quotes and dashes, and collapse whitespace.

    Titled code blocks become ``title body``, untitled ones their body, and
    other titled tags their title; every other tag is removed.

    >>> txt_sanitize('{% code title="example.rs" %}fn main() {}{% endcode %}')
    'example.rs fn main() {}'
    """
    result = _apply_passes(txt)
    # Stripping dashes can assemble a new tag, e.g. "{-% x %}"
    while True:
        again = _apply_passes(result)
        if again == result:
            return result
        result = again
