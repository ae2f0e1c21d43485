"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ["APP_ENV"] = "development"
os.environ["DEBUG"] = "true"
os.environ["LOG_TO_FILE"] = "false"
os.environ["SCRAPER_API_KEY"] = "test-key"
os.environ["SCRAPER_API_URL"] = "https://api.scraperapi.test/"


@pytest.fixture
def log_records():
    """Collect loguru records emitted during a test."""
    from loguru import logger

    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")

    yield records

    logger.remove(handler_id)


@pytest.fixture
def sample_envelope():
    """Successful ScraperAPI envelope."""
    return {
        "body": "<html><body><h1>Hello</h1></body></html>",
        "headers": {
            "Date": "Sat, 17 Oct 2026 10:00:00 GMT",
            "Content-Type": "text/html; charset=utf-8",
        },
    }
