"""Raw Markdown and plain-text document stores."""

from pathlib import Path

import aiofiles  # type: ignore[import-untyped]

from gitbook_text.errors import StorageError
from gitbook_text.utils.url_utils import url_to_filename


class DocumentStore:
    """Write each downloaded page to a Markdown file and a text file.

    Both files are named after the page URL (see ``url_to_filename``). Two
    URLs that flatten to the same name overwrite each other.
    """

    def __init__(self, markdown_dir: Path, text_dir: Path):
        self.markdown_dir = Path(markdown_dir)
        self.text_dir = Path(text_dir)

    def prepare(self) -> None:
        """Create both output directories. Must run before any write."""
        for directory in (self.markdown_dir, self.text_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageError(directory, e.strerror or str(e)) from e

    def markdown_path(self, url: str) -> Path:
        return self.markdown_dir / f"{url_to_filename(url)}.md"

    def text_path(self, url: str) -> Path:
        return self.text_dir / f"{url_to_filename(url)}.txt"

    async def save_markdown(self, url: str, content: str) -> Path:
        """Save the unmodified page source."""
        return await self._write(self.markdown_path(url), content)

    async def save_text(self, url: str, content: str) -> Path:
        """Save the converted and sanitized text."""
        return await self._write(self.text_path(url), content)

    @staticmethod
    async def _write(path: Path, content: str) -> Path:
        try:
            async with aiofiles.open(path, "w", encoding="utf-8") as f:
                await f.write(content)
        except OSError as e:
            raise StorageError(path, e.strerror or str(e)) from e
        return path
