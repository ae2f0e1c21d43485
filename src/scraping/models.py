"""Request and result types shared by scrape engines."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.monitoring.logger import get_logger


class ScrapeFormat(str, Enum):
    """Output formats a caller can request."""

    MARKDOWN = "markdown"
    HTML = "html"
    RAW_HTML = "raw_html"
    LINKS = "links"
    SCREENSHOT = "screenshot"
    SCREENSHOT_FULL_PAGE = "screenshot@full_page"


@dataclass
class ScrapeOptions:
    """Caller options for a single scrape."""

    formats: list[ScrapeFormat] = field(default_factory=lambda: [ScrapeFormat.MARKDOWN])
    wait_for: float = 0.0
    timeout: float | None = None

    def __post_init__(self) -> None:
        self.formats = [ScrapeFormat(f) for f in self.formats]
        if self.wait_for < 0:
            raise ValueError("wait_for must be >= 0")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be > 0")

    @property
    def wants_screenshot(self) -> bool:
        return ScrapeFormat.SCREENSHOT in self.formats


@dataclass
class ScrapeMeta:
    """A scrape request as seen by an engine."""

    url: str
    options: ScrapeOptions = field(default_factory=ScrapeOptions)
    logger: Any = None

    def __post_init__(self) -> None:
        if not self.url or not self.url.strip():
            raise ValueError("url must be a non-empty string")
        if self.logger is None:
            self.logger = get_logger("scrape").bind(url=self.url)

    def child(self, **extra: Any) -> Any:
        """Get a logger scoped with extra context.

        Args:
            **extra: Key-value pairs to bind (e.g. method=...)

        Returns:
            Bound logger
        """
        return self.logger.bind(**extra)


@dataclass
class EngineScrapeResult:
    """Normalized result returned by every engine."""

    url: str
    html: str
    status_code: int
    error: str | None = None
    screenshot: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation, without screenshot when absent
        """
        data: dict[str, Any] = {
            "url": self.url,
            "html": self.html,
            "error": self.error,
            "status_code": self.status_code,
        }
        if self.screenshot is not None:
            data["screenshot"] = self.screenshot
        return data
