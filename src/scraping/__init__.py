"""Scraping module - Engines, request/result types, specialty checks."""

from .engines import ScraperApiEngine, scrape_url_with_scraper_api
from .errors import (
    AddFeatureError,
    ConfigurationError,
    EngineError,
    EngineTimeoutError,
    ScrapeError,
)
from .models import EngineScrapeResult, ScrapeFormat, ScrapeMeta, ScrapeOptions
from .specialty import specialty_scrape_check

__all__ = [
    "ScraperApiEngine",
    "scrape_url_with_scraper_api",
    "ScrapeError",
    "EngineError",
    "EngineTimeoutError",
    "AddFeatureError",
    "ConfigurationError",
    "EngineScrapeResult",
    "ScrapeFormat",
    "ScrapeMeta",
    "ScrapeOptions",
    "specialty_scrape_check",
]
