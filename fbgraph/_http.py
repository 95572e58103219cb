"""Thin HTTP client wrapping requests.Session with auth, error mapping, and retry."""

from __future__ import annotations

import logging
import math
import time
from typing import Any

import requests

from . import __version__
from ._errors import handle_error, has_error
from ._exceptions import UncategorizedApiError

logger = logging.getLogger(__name__)

# Retry config
_MAX_RETRIES = 3
_INITIAL_BACKOFF = 0.5  # seconds
_RETRYABLE_STATUS = {429, 500, 502, 503, 504}


class HTTPClient:
    """Minimal HTTP client with Bearer auth, Graph error mapping, and automatic retry."""

    def __init__(self, access_token: str, base_url: str, timeout: int = 30):
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"Bearer {access_token}"
        self._session.headers["User-Agent"] = f"fbgraph-python/{__version__}"
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def _retry_delay(self, resp: requests.Response, attempt: int) -> float:
        retry_after = resp.headers.get("Retry-After")
        if retry_after and resp.status_code == 429:
            try:
                delay = float(retry_after)
            except ValueError:
                logger.debug("Unparseable Retry-After header: %s", retry_after)
            else:
                if math.isfinite(delay):
                    return max(0.0, delay)
                logger.debug("Non-finite Retry-After header: %s", retry_after)
        return _INITIAL_BACKOFF * (2**attempt)

    def _request_with_retry(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send request with retry on 429/5xx and transport failures."""
        for attempt in range(_MAX_RETRIES):
            try:
                resp = self._session.request(method, url, timeout=self._timeout, **kwargs)
            except (requests.Timeout, requests.ConnectionError) as e:
                logger.warning("Request failed (attempt %d/%d): %s", attempt + 1, _MAX_RETRIES, e)
                if attempt < _MAX_RETRIES - 1:
                    time.sleep(_INITIAL_BACKOFF * (2**attempt))
                    continue
                raise UncategorizedApiError(str(e), method=method, path=url) from e

            if not has_error(resp):
                return resp

            if resp.status_code not in _RETRYABLE_STATUS or attempt == _MAX_RETRIES - 1:
                handle_error(resp, method=method, path=url)

            delay = self._retry_delay(resp, attempt)
            logger.debug(
                "Retrying %s %s (attempt %d, delay %.1fs)", method, url, attempt + 1, delay
            )
            resp.close()
            time.sleep(delay)

        # Should not reach here: the last attempt always returns or raises
        raise UncategorizedApiError("Max retries exceeded", method=method, path=url)

    def request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        """Send request and raise typed exception on error."""
        return self._request_with_retry(method, f"{self._base_url}{path}", **kwargs)

    def close(self) -> None:
        self._session.close()
