"""Scrape engines."""

from .scraperapi import ScraperApiEngine, scrape_url_with_scraper_api

__all__ = ["ScraperApiEngine", "scrape_url_with_scraper_api"]
