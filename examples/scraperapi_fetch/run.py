"""ScraperAPI fetch example.

Renders one page through ScraperAPI and prints a short summary.
Requires SCRAPER_API_KEY in the environment or in .env.

Usage:
    python -m examples.scraperapi_fetch.run https://example.com [--screenshot]
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from src.monitoring.logger import get_logger, setup_logging
from src.scraping import (
    ScrapeError,
    ScrapeFormat,
    ScrapeMeta,
    ScrapeOptions,
    ScraperApiEngine,
)

logger = get_logger(__name__)


async def main(url: str, screenshot: bool = False) -> int:
    """Fetch a single URL.

    Args:
        url: Page to render
        screenshot: Also request a screenshot

    Returns:
        Process exit code
    """
    formats = [ScrapeFormat.HTML]
    if screenshot:
        formats.append(ScrapeFormat.SCREENSHOT)

    engine = ScraperApiEngine()
    meta = ScrapeMeta(url=url, options=ScrapeOptions(formats=formats))

    try:
        result = await engine.scrape(meta)
    except ScrapeError as e:
        logger.error(f"Scrape failed: {type(e).__name__}: {e}")
        return 1

    logger.info("=" * 60)
    logger.info(f"URL:         {result.url}")
    logger.info(f"Status:      {result.status_code} {result.error or ''}")
    logger.info(f"HTML length: {len(result.html)}")
    if result.screenshot:
        logger.info(f"Screenshot:  {len(result.screenshot)} chars")
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    setup_logging()

    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    if not args:
        print(__doc__)
        sys.exit(2)

    sys.exit(asyncio.run(main(args[0], screenshot="--screenshot" in sys.argv)))
