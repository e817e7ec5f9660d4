"""Link-list file writer."""

from pathlib import Path

import aiofiles  # type: ignore[import-untyped]

from gitbook_text.errors import StorageError


async def write_links(path: Path, links: list[str]) -> Path:
    """Overwrite ``path`` with one URL per line."""
    path = Path(path)
    try:
        if path.parent != Path("."):
            path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(path, "w", encoding="utf-8") as f:
            await f.write("\n".join(links))
    except OSError as e:
        raise StorageError(path, e.strerror or str(e)) from e
    return path
