"""ScraperAPI engine.

Fetches a page through the ScraperAPI rendering service and normalizes the
JSON envelope it returns into an ``EngineScrapeResult``. One upstream call per
scrape, raced against the effective timeout; retries belong to the caller.
"""

import asyncio
import inspect
import json
import time
from typing import Any, Callable, Mapping

import httpx

from src.core.config import settings
from src.monitoring.logger import get_logger, log_scraping_event

from ..errors import ConfigurationError, EngineError, EngineTimeoutError
from ..models import EngineScrapeResult, ScrapeMeta
from ..specialty import specialty_scrape_check

logger = get_logger(__name__)

# Checked in this order; the first one present decides.
UPSTREAM_HEADER_NAMES = ("Date", "date", "Content-Type", "content-type")


def is_hidden_engine_error(headers: Mapping[str, Any]) -> bool:
    """Guess whether ScraperAPI failed without saying so.

    A real upstream response always echoes a Date or Content-Type header.
    When neither is there, the provider most likely never reached the site.

    Args:
        headers: Upstream headers echoed in the envelope

    Returns:
        True if the response should be treated as a provider failure
    """
    for name in UPSTREAM_HEADER_NAMES:
        value = headers.get(name)
        if value is not None:
            return not value
    return True


def _is_set(value: Any) -> bool:
    """Whether an envelope field is set. Empty lists and objects count as set."""
    return value is not None and value is not False and value != 0 and value != ""


def _first_present(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


class ScraperApiEngine:
    """Scrape engine backed by the ScraperAPI rendering service."""

    name = "scraperapi"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        default_timeout: float | None = None,
        specialty_check: Callable[[Any, Mapping[str, Any] | None], Any] = specialty_scrape_check,
    ) -> None:
        """Initialize engine.

        Args:
            api_key: ScraperAPI key (defaults to SCRAPER_API_KEY)
            base_url: Endpoint URL (defaults to SCRAPER_API_URL)
            client: Shared async HTTP client; a short-lived one is opened per call otherwise
            default_timeout: Timeout in seconds when the caller gives none
            specialty_check: Header policy hook, sync or async

        Raises:
            ConfigurationError: If no API key is configured
        """
        api_key = api_key if api_key is not None else settings.scraper_api_key
        if not api_key or not api_key.strip():
            raise ConfigurationError("SCRAPER_API_KEY is not set")

        self.api_key = api_key
        self.base_url = base_url or settings.scraper_api_url
        self.default_timeout = (
            default_timeout if default_timeout is not None else settings.scraper_api_default_timeout
        )
        self._client = client
        self._specialty_check = specialty_check

    def effective_timeout(self, meta: ScrapeMeta, time_to_run: float | None = None) -> float:
        """Compute how long to wait for the provider.

        Args:
            meta: Scrape request
            time_to_run: Caller budget in seconds, overrides the request's own timeout

        Returns:
            Timeout in seconds, including the requested wait
        """
        base = _first_present(time_to_run, meta.options.timeout, self.default_timeout)
        return base + meta.options.wait_for

    async def scrape(self, meta: ScrapeMeta, time_to_run: float | None = None) -> EngineScrapeResult:
        """Scrape a URL through ScraperAPI.

        Args:
            meta: Scrape request
            time_to_run: Caller budget in seconds

        Returns:
            Normalized scrape result

        Raises:
            EngineTimeoutError: If the provider did not answer in time
            EngineError: If the provider reported or implied a failure
        """
        start_time = time.time()

        try:
            result = await self._scrape(meta, time_to_run)
        except Exception as e:
            cause = getattr(e, "cause", None)
            log_scraping_event(
                url=meta.url,
                engine=self.name,
                duration=time.time() - start_time,
                success=False,
                status_code=cause.get("status_code") if isinstance(cause, dict) else None,
                error=type(e).__name__,
            )
            raise

        log_scraping_event(
            url=meta.url,
            engine=self.name,
            duration=time.time() - start_time,
            success=True,
            status_code=result.status_code,
        )
        return result

    async def _scrape(self, meta: ScrapeMeta, time_to_run: float | None) -> EngineScrapeResult:
        timeout = self.effective_timeout(meta, time_to_run)
        params = {
            "api_key": self.api_key,
            "url": meta.url,
            "render": "true",
            "screenshot": "true" if meta.options.wants_screenshot else "false",
        }

        response = await self._fetch(meta, params, timeout)
        payload = self._decode(meta, response)
        envelope = payload if isinstance(payload, dict) else {}

        headers = envelope.get("headers")
        if not isinstance(headers, Mapping):
            headers = {}

        inner = envelope.get("body")
        inner_error = inner.get("error") if isinstance(inner, dict) else None

        if (
            _is_set(envelope.get("errors"))
            or _is_set(inner_error)
            or is_hidden_engine_error(headers)
        ):
            meta.logger.bind(
                error_detail=_first_present(inner_error, envelope.get("errors"), inner, payload),
            ).error("ScraperAPI threw an error")
            raise EngineError(
                "Engine error #34",
                cause={"body": payload, "status_code": response.status_code},
            )

        if not isinstance(inner, str):
            meta.logger.bind(body=payload).error("ScraperAPI: Body is not a string")
            raise EngineError(
                "Engine error #35",
                cause={"body": payload, "status_code": response.status_code},
            )

        check = self._specialty_check(
            meta.child(method="ScraperApiEngine.scrape/specialty_scrape_check"),
            envelope.get("headers"),
        )
        if inspect.isawaitable(check):
            await check

        screenshot = envelope.get("screenshot")
        return EngineScrapeResult(
            url=_first_present(envelope.get("resolved-url"), meta.url),
            html=inner,
            status_code=response.status_code,
            error=response.reason_phrase if response.status_code >= 300 else None,
            screenshot=f"data:image/png;base64,{screenshot}" if screenshot else None,
        )

    async def _fetch(
        self, meta: ScrapeMeta, params: dict[str, str], timeout: float
    ) -> httpx.Response:
        request = asyncio.ensure_future(self._get(params))

        try:
            done, _ = await asyncio.wait({request}, timeout=timeout)
        except asyncio.CancelledError:
            request.cancel()
            raise

        if not done:
            request.cancel()
            await asyncio.gather(request, return_exceptions=True)
            meta.logger.bind(timeout=timeout).warning("ScraperAPI timed out")
            raise EngineTimeoutError("ScraperAPI timed out", timeout)

        try:
            return request.result()
        except httpx.HTTPStatusError as e:
            # Error statuses are still envelopes worth reading
            return e.response

    async def _get(self, params: dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(self.base_url, params=params)

        # The race in _fetch owns the deadline
        async with httpx.AsyncClient(timeout=None) as client:
            return await client.get(self.base_url, params=params)

    def _decode(self, meta: ScrapeMeta, response: httpx.Response) -> Any:
        try:
            return json.loads(response.content.decode("utf-8", errors="replace"))
        except json.JSONDecodeError as e:
            meta.logger.bind(error=e).error("Failed to parse ScraperAPI response")
            raise EngineError("Failed to parse ScraperAPI response", cause=e) from e


async def scrape_url_with_scraper_api(
    meta: ScrapeMeta, time_to_run: float | None = None
) -> EngineScrapeResult:
    """Scrape a URL with an engine built from settings.

    Args:
        meta: Scrape request
        time_to_run: Caller budget in seconds

    Returns:
        Normalized scrape result
    """
    return await ScraperApiEngine().scrape(meta, time_to_run)
