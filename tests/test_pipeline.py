"""Tests for the concurrent fetch-convert-save pipeline."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest
import respx
from rich.console import Console

from gitbook_text.config import FetcherConfig, PipelineConfig
from gitbook_text.errors import StorageError
from gitbook_text.fetcher import HttpFetcher
from gitbook_text.output import DocumentStore
from gitbook_text.pipeline import Pipeline

_PAGE_MD = '# Install\n\nRun `pip-install`\n\n{% code title="setup.sh" %}make all{% endcode %}\n'


@pytest.fixture
def store(tmp_path: Path) -> DocumentStore:
    return DocumentStore(tmp_path / "data" / "md", tmp_path / "data" / "txt")


def _quiet_console() -> Console:
    return Console(quiet=True)


class TestPipeline:
    async def test_partial_failure(self, store: DocumentStore, fake_fetcher_cls) -> None:
        fetcher = fake_fetcher_cls(
            {
                "https://x.com/a.md": "# A\n\nalpha",
                "https://x.com/b.md": "# B\n\nbeta",
            },
        )
        pipeline = Pipeline(PipelineConfig(), fetcher, store, _quiet_console())

        result = await pipeline.process_all(
            {"https://x.com/a", "https://x.com/b", "https://x.com/missing"}
        )

        assert (result.success_count, result.failure_count) == (2, 1)
        assert [o.url for o in result.failures] == ["https://x.com/missing.md"]
        assert len(list(store.markdown_dir.iterdir())) == 2
        assert len(list(store.text_dir.iterdir())) == 2

    async def test_writes_raw_and_sanitized_text(self, store: DocumentStore, fake_fetcher_cls) -> None:
        fetcher = fake_fetcher_cls({"https://x.com/guide/install.md": _PAGE_MD})
        pipeline = Pipeline(PipelineConfig(), fetcher, store, _quiet_console())

        await pipeline.process_all(["https://x.com/guide/install"])

        raw = store.markdown_dir / "https___x.com_guide_install.md.md"
        text = store.text_dir / "https___x.com_guide_install.md.txt"
        assert raw.read_text() == _PAGE_MD
        assert text.read_text() == "InstallRun pipinstallsetup.sh make all"

    async def test_md_suffix_not_duplicated(self, store: DocumentStore, fake_fetcher_cls) -> None:
        fetcher = fake_fetcher_cls({"https://x.com/a.md": "alpha"})
        pipeline = Pipeline(PipelineConfig(), fetcher, store, _quiet_console())

        result = await pipeline.process_all(["https://x.com/a", "https://x.com/a.md"])

        assert fetcher.requested == ["https://x.com/a.md"]
        assert result.success_count == 1

    async def test_bounded_concurrency(self, store: DocumentStore, fake_fetcher_cls) -> None:
        pages = {f"https://x.com/p{i}.md": f"page {i}" for i in range(10)}
        fetcher = fake_fetcher_cls(pages)
        pipeline = Pipeline(PipelineConfig(max_concurrent=2), fetcher, store, _quiet_console())

        result = await pipeline.process_all([url[: -len(".md")] for url in pages])

        assert result.success_count == 10
        assert result.failure_count == 0

    async def test_failed_fetch_writes_nothing(self, store: DocumentStore, fake_fetcher_cls) -> None:
        fetcher = fake_fetcher_cls({})
        pipeline = Pipeline(PipelineConfig(), fetcher, store, _quiet_console())

        result = await pipeline.process_all(["https://x.com/gone"])

        assert result.failure_count == 1
        assert list(store.markdown_dir.iterdir()) == []
        assert list(store.text_dir.iterdir()) == []

    async def test_write_failure_is_a_task_failure(self, tmp_path: Path, fake_fetcher_cls) -> None:
        store = DocumentStore(tmp_path / "md", tmp_path / "txt")
        fetcher = fake_fetcher_cls({"https://x.com/a.md": "alpha"})
        pipeline = Pipeline(PipelineConfig(), fetcher, store, _quiet_console())

        async def broken_save_text(url: str, content: str) -> Path:
            raise StorageError(store.text_path(url), "disk full")

        store.save_text = broken_save_text  # type: ignore[method-assign]
        result = await pipeline.process_all(["https://x.com/a"])

        assert result.failure_count == 1
        assert "disk full" in (result.failures[0].error or "")

    async def test_over_http(self, store: DocumentStore) -> None:
        with respx.mock:
            respx.get("https://docs.example.com/a.md").mock(
                return_value=httpx.Response(200, text="Hello *world*")
            )
            respx.get("https://docs.example.com/b.md").mock(return_value=httpx.Response(404))
            async with HttpFetcher(FetcherConfig()) as fetcher:
                pipeline = Pipeline(PipelineConfig(), fetcher, store, _quiet_console())
                result = await pipeline.process_all(
                    ["https://docs.example.com/a", "https://docs.example.com/b"]
                )

        assert (result.success_count, result.failure_count) == (1, 1)
        text = store.text_dir / "https___docs.example.com_a.md.txt"
        assert text.read_text() == "Hello world"
