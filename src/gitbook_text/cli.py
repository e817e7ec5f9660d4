"""Command-line interface for gitbook-text."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gitbook_text import __version__
from gitbook_text.config import AppConfig
from gitbook_text.discovery import (
    CrawlerDiscoverer,
    ManualDiscoverer,
    crawl_and_save,
    is_gitbook,
)
from gitbook_text.errors import GitBookError, NotGitBookError, StorageError
from gitbook_text.fetcher import HttpFetcher
from gitbook_text.output import DocumentStore
from gitbook_text.pipeline import Pipeline, PipelineResult
from gitbook_text.utils.url_utils import validate_base_url

app = typer.Typer(
    name="gitbook-text",
    help="Download GitBook documentation and convert it to plain text.",
    rich_markup_mode="rich",
)

console = Console()

DEFAULT_LINKS_FILE = Path("links.txt")


def version_callback(value: bool):
    if value:
        console.print(f"gitbook-text version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Crawl a GitBook site and save its pages as Markdown and plain text.

    Without a command, downloads the pages listed in links.txt.
    """
    if ctx.invoked_subcommand is None:
        download(
            input_file=DEFAULT_LINKS_FILE,
            config_file=None,
            max_concurrent=None,
            verbose=False,
        )


@app.command()
def crawl(
    url: str = typer.Argument(..., help="Base URL of the GitBook site"),
    output: Path = typer.Option(
        DEFAULT_LINKS_FILE,
        "--output",
        "-o",
        help="File receiving the discovered links",
    ),
    max_pages: Optional[int] = typer.Option(
        None,
        "--max-pages",
        help="Maximum pages to visit while crawling (0 = unlimited)",
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="TOML configuration file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """
    Discover every page of a GitBook site and write them to a link list.

    Examples:

        gitbook-text crawl https://docs.example.com

        gitbook-text crawl https://docs.example.com -o pages.txt
    """
    config = _load_config(config_file, verbose, max_pages=max_pages)
    try:
        validate_base_url(url)
    except GitBookError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    console.print(f"[blue]Checking that {url} is a GitBook...[/blue]")

    async def run() -> list[str]:
        async with HttpFetcher(config.fetcher) as fetcher:
            return await crawl_and_save(url, output, config.discovery, fetcher)

    links = _run(run(), verbose)
    console.print(f"[green]{len(links)} link(s) saved in {output}[/green]")


@app.command()
def download(
    input_file: Path = typer.Option(
        DEFAULT_LINKS_FILE,
        "--input",
        "-i",
        help="Link list produced by the crawl command",
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="TOML configuration file"
    ),
    max_concurrent: Optional[int] = typer.Option(
        None,
        "--max-concurrent",
        help="Maximum simultaneous downloads (0 = unlimited)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """Download the pages of a link list and convert them to text."""
    config = _load_config(config_file, verbose, max_concurrent=max_concurrent)

    async def run() -> PipelineResult:
        try:
            urls = await ManualDiscoverer(input_file).discover()
        except StorageError:
            console.print(
                f"[dim]Use 'gitbook-text crawl <URL> -o {input_file}' to create it.[/dim]"
            )
            raise
        if not urls:
            raise GitBookError(f"No URL found in {input_file}")
        return await _download_pages(config, urls)

    _run(run(), verbose)


@app.command("all")
def all_command(
    url: str = typer.Argument(..., help="Base URL of the GitBook site"),
    max_pages: Optional[int] = typer.Option(
        None,
        "--max-pages",
        help="Maximum pages to visit while crawling (0 = unlimited)",
    ),
    max_concurrent: Optional[int] = typer.Option(
        None,
        "--max-concurrent",
        help="Maximum simultaneous downloads (0 = unlimited)",
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="TOML configuration file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """Crawl a GitBook site and download every page found."""
    config = _load_config(
        config_file, verbose, max_pages=max_pages, max_concurrent=max_concurrent
    )

    async def run() -> PipelineResult:
        validate_base_url(url)
        console.print(f"[blue]Checking that {url} is a GitBook...[/blue]")
        async with HttpFetcher(config.fetcher) as fetcher:
            if not await is_gitbook(url, fetcher):
                raise NotGitBookError(url)
            console.print("[green]GitBook detected[/green]")

            links = await CrawlerDiscoverer(url, config.discovery, fetcher).discover()
            console.print(f"[green]Found {len(links)} page(s)[/green]")

        return await _download_pages(config, links)

    _run(run(), verbose)


async def _download_pages(config: AppConfig, urls: list[str]) -> PipelineResult:
    store = DocumentStore(config.output.markdown_dir, config.output.text_dir)
    async with HttpFetcher(config.fetcher) as fetcher:
        pipeline = Pipeline(config.pipeline, fetcher, store, console)
        return await pipeline.process_all(urls)


def _load_config(
    config_file: Path | None,
    verbose: bool,
    max_pages: int | None = None,
    max_concurrent: int | None = None,
) -> AppConfig:
    """Build the configuration from an optional TOML file and CLI overrides."""
    try:
        config = AppConfig.from_toml(config_file) if config_file else AppConfig()
    except Exception as e:
        console.print(f"[red]Invalid config file {config_file}: {e}[/red]")
        raise typer.Exit(1)

    config.verbose = config.verbose or verbose
    if max_pages is not None:
        config.discovery = config.discovery.model_copy(update={"max_pages": max_pages})
    if max_concurrent is not None:
        config.pipeline = config.pipeline.model_copy(
            update={"max_concurrent": max_concurrent}
        )

    _configure_logging(config.verbose)
    return config


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def _run(coro, verbose: bool):
    """Run a coroutine, turning hard errors into a non-zero exit."""
    try:
        return asyncio.run(coro)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        raise typer.Exit(130)
    except GitBookError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
