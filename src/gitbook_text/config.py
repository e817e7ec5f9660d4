"""Configuration management with Pydantic models."""

from pathlib import Path

from pydantic import BaseModel, Field

BROWSER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class FetcherConfig(BaseModel):
    """Configuration for page fetching."""

    # GitBook blocks obvious bots, so requests pose as a desktop browser
    user_agent: str = BROWSER_USER_AGENT
    timeout_ms: int = Field(default=30000, ge=1000, le=120000)
    follow_redirects: bool = True


class DiscoveryConfig(BaseModel):
    """Configuration for link discovery."""

    skip_extensions: list[str] = Field(
        default_factory=lambda: [
            ".pdf", ".zip", ".jpg", ".png",
            ".jpeg", ".gif", ".svg", ".ico", ".webp",
            ".css", ".js", ".woff", ".woff2", ".ttf", ".eot",
            ".tar", ".gz",
        ]
    )
    max_pages: int = Field(default=0, ge=0)  # 0 = unlimited


class OutputConfig(BaseModel):
    """Configuration for output locations."""

    links_file: Path = Path("links.txt")
    markdown_dir: Path = Path("data/md")
    text_dir: Path = Path("data/txt")


class PipelineConfig(BaseModel):
    """Configuration for the download pipeline."""

    max_concurrent: int = Field(default=0, ge=0)  # 0 = one task per URL


class AppConfig(BaseModel):
    """Main application configuration."""

    fetcher: FetcherConfig = Field(default_factory=FetcherConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    verbose: bool = False

    @classmethod
    def from_toml(cls, path: Path) -> "AppConfig":
        """Load config from a TOML file."""
        try:
            import tomllib  # type: ignore[import-not-found]
        except ModuleNotFoundError:
            import tomli as tomllib  # type: ignore[import-not-found]
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return cls.model_validate(data)
