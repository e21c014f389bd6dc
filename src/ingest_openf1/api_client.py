"""
OpenF1 API client with:
- Linear backoff retry on HTTP 429 (rate limited)
- Descriptive errors for every other non-2xx status
- Session-based connection pooling
"""
import time
from typing import Any, Callable, Optional

import requests

from src.config import cfg
from src.utils.logger import logger


class OpenF1APIError(RuntimeError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"API error {status_code}: {url}")


def backoff_delay(attempt: int, base_delay: float | None = None) -> float:
    """
    Seconds to wait before retrying after the given 0-based attempt.

    Linear: base × (attempt + 1), i.e. 2s, 4s, 6s, 8s with the default base.
    """
    base = cfg.api.retry_base_delay if base_delay is None else base_delay
    return base * (attempt + 1)


class OpenF1Client:
    """
    HTTP client for the OpenF1 REST API.

    Only HTTP 429 is retried; any other failure surfaces to the caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        max_retries: int | None = None,
        retry_base_delay: float | None = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.base_url = (base_url or cfg.api.base_url).rstrip("/")
        self.max_retries = cfg.api.max_retries if max_retries is None else max_retries
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        self.retry_base_delay = (
            cfg.api.retry_base_delay if retry_base_delay is None else retry_base_delay
        )
        self._sleep = sleep

        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def get(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> list[dict]:
        """
        Fetch data from an OpenF1 endpoint.

        Args:
            endpoint: API endpoint path (e.g. '/sessions').
            params: Query parameters dict.

        Returns:
            List of records (dicts) from the API response.

        Raises:
            OpenF1APIError: on a non-2xx status, or when still rate limited
                after ``max_retries`` retries.
        """
        params = params or {}
        url = f"{self.base_url}{endpoint}"

        for attempt in range(self.max_retries + 1):
            logger.debug(f"Fetching: {url} params={params}")
            response = self.session.get(url, params=params, timeout=cfg.api.timeout)

            # Response.ok is also true for 3xx
            if 200 <= response.status_code < 300:
                return response.json()

            if response.status_code == 429 and attempt < self.max_retries:
                wait = backoff_delay(attempt, self.retry_base_delay)
                logger.warning(f"429 from {endpoint}, retry in {wait:g}s")
                self._sleep(wait)
                continue

            full_url = response.url or url
            logger.error(f"HTTP {response.status_code} for {full_url}")
            raise OpenF1APIError(response.status_code, full_url)
