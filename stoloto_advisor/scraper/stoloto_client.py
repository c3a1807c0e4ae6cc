"""Async HTTP client for the StolotoAPI draws catalog.

Every attempt is bounded by a timeout; failed attempts (network errors,
timeouts, non-2xx responses) are retried with exponential backoff.
"""

import asyncio
from collections.abc import Awaitable, Callable

import aiohttp
from loguru import logger
from pydantic import ValidationError

from stoloto_advisor.config import settings
from stoloto_advisor.schemas.stoloto import StolotoDrawsResponse

HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class StolotoAPIError(Exception):
    """Upstream catalog could not be fetched or did not match the expected schema."""


class StolotoClient:
    """Fetches the draws catalog with bounded retries.

    ``sleep`` is awaited between attempts with the backoff delay in seconds.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        draws_path: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        retry_delay: float | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ):
        self.base_url = (base_url or settings.STOLOTO_API_URL).rstrip("/")
        self.draws_path = draws_path or settings.STOLOTO_DRAWS_PATH
        self.timeout = timeout if timeout is not None else settings.STOLOTO_TIMEOUT_SECONDS
        self.max_retries = max_retries if max_retries is not None else settings.STOLOTO_MAX_RETRIES
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {self.max_retries}")
        self.retry_delay = (
            retry_delay if retry_delay is not None else settings.STOLOTO_RETRY_DELAY_SECONDS
        )
        self._sleep = sleep or asyncio.sleep

    @property
    def draws_url(self) -> str:
        return f"{self.base_url}{self.draws_path}"

    def backoff_delay(self, attempt: int) -> float:
        """Delay after a failed ``attempt`` (1-based): base * 2^(attempt-1)."""
        return self.retry_delay * 2 ** (attempt - 1)

    async def _get_with_retry(self, client: aiohttp.ClientSession, url: str) -> bytes:
        last_error: Exception | None = None

        for attempt in range(1, self.max_retries + 1):
            try:
                async with client.get(
                    url,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as resp:
                    if 200 <= resp.status < 300:
                        body = await resp.read()
                        if attempt > 1:
                            logger.info(
                                "StolotoAPI succeeded on attempt {}/{}",
                                attempt, self.max_retries,
                            )
                        return body

                    text = await resp.text()
                    last_error = StolotoAPIError(
                        f"StolotoAPI returned status {resp.status}: {text[:200]}"
                    )
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_error = e

            if attempt < self.max_retries:
                delay = self.backoff_delay(attempt)
                logger.warning(
                    "StolotoAPI attempt {}/{} failed: {!r}. Retrying in {:.2f}s",
                    attempt, self.max_retries, last_error, delay,
                )
                await self._sleep(delay)

        logger.error(
            "StolotoAPI: all {} attempts exhausted. Last error: {!r}",
            self.max_retries, last_error,
        )
        raise StolotoAPIError(
            f"Request to {url} failed after {self.max_retries} attempts: {last_error}"
        ) from last_error

    async def get_all_draws(self) -> StolotoDrawsResponse:
        """Fetch and validate the list of games from ``/api/draws/``.

        Raises:
            StolotoAPIError: after retry exhaustion, or when the body is not
                JSON matching ``StolotoDrawsResponse``.
        """
        url = self.draws_url
        logger.debug("Fetching all draws from {}", url)

        async with aiohttp.ClientSession(headers=HEADERS) as client:
            body = await self._get_with_retry(client, url)

        try:
            data = StolotoDrawsResponse.model_validate_json(body)
        except ValidationError as e:
            logger.warning("StolotoAPI payload failed validation: {} error(s)", e.error_count())
            raise StolotoAPIError(f"Invalid StolotoAPI payload: {e}") from e

        logger.debug("Fetched {} games from StolotoAPI", len(data.games))
        return data
