"""Concurrent fetch, convert and save of discovered pages."""

import asyncio
import logging
import time
from collections.abc import Iterable

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from gitbook_text.config import PipelineConfig
from gitbook_text.converter import markdown_to_text, txt_sanitize
from gitbook_text.fetcher import BaseFetcher
from gitbook_text.output import DocumentStore
from gitbook_text.utils.url_utils import ensure_md_suffix

logger = logging.getLogger(__name__)


class TaskOutcome(BaseModel):
    """Outcome of processing a single page."""

    url: str
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


class PipelineResult:
    """Aggregated outcomes of a pipeline run."""

    def __init__(self):
        self.outcomes: list[TaskOutcome] = []
        self.pipeline_start: float = 0.0
        self.pipeline_end: float = 0.0

    @property
    def success_count(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    @property
    def failure_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.success)

    @property
    def failures(self) -> list[TaskOutcome]:
        return [o for o in self.outcomes if not o.success]


class Pipeline:
    """Download every page's Markdown source and store it with its plain text."""

    def __init__(
        self,
        config: PipelineConfig,
        fetcher: BaseFetcher,
        store: DocumentStore,
        console: Console | None = None,
    ):
        self.config = config
        self.fetcher = fetcher
        self.store = store
        self.console = console or Console()

    async def process_all(self, urls: Iterable[str]) -> PipelineResult:
        """Process every URL concurrently.

        A failing page never stops the others; it is reported as a failed
        outcome. Nothing is retried.
        """
        result = PipelineResult()
        result.pipeline_start = time.monotonic()

        md_urls = sorted({ensure_md_suffix(url) for url in urls})
        self.console.print(f"[blue]Downloading {len(md_urls)} page(s)...[/blue]")

        # Directories must exist before any task writes into them
        self.store.prepare()

        semaphore = (
            asyncio.Semaphore(self.config.max_concurrent)
            if self.config.max_concurrent > 0
            else None
        )
        tasks = [self._process_page(url, semaphore) for url in md_urls]

        for next_done in asyncio.as_completed(tasks):
            outcome = await next_done
            result.outcomes.append(outcome)
            if outcome.success:
                self.console.print(f"[green]Saved page: {escape(outcome.url)}[/green]")
            else:
                self.console.print(
                    f"[red]Error: {escape(outcome.url)}: {escape(outcome.error or '')}[/red]"
                )

        result.pipeline_end = time.monotonic()
        self._print_summary(result)
        return result

    async def _process_page(
        self, url: str, semaphore: asyncio.Semaphore | None
    ) -> TaskOutcome:
        if semaphore is None:
            return await self._run_page(url)
        async with semaphore:
            return await self._run_page(url)

    async def _run_page(self, url: str) -> TaskOutcome:
        """Fetch, convert and save a single page."""
        try:
            markdown = await self.fetcher.fetch_text(url)
            await self.store.save_markdown(url, markdown)

            text = txt_sanitize(markdown_to_text(markdown))
            await self.store.save_text(url, text)
        except Exception as e:
            logger.debug("Processing %s failed", url, exc_info=True)
            return TaskOutcome(url=url, error=str(e) or type(e).__name__)

        return TaskOutcome(url=url)

    def _print_summary(self, result: PipelineResult) -> None:
        """Print the post-run summary."""
        total_time = result.pipeline_end - result.pipeline_start

        self.console.print()
        self.console.print("[bold]Summary[/bold]")
        self.console.print(f"  Succeeded: [green]{result.success_count}[/green]")
        self.console.print(f"  Failed:    [red]{result.failure_count}[/red]")
        self.console.print(f"  Time:      {total_time:.1f}s")

        if result.failure_count:
            self.console.print()
            self.console.print(
                f"[yellow]{result.failure_count} page(s) could not be downloaded[/yellow]"
            )
