"""HTTP resource fetcher backed by requests and a thread pool."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor

import requests

from pykoord.errors import ResourceError
from pykoord.fetch.base import ResourceFetcher

logger = logging.getLogger(__name__)


class HttpFetcher(ResourceFetcher):
    """Fetch definitions over HTTP(S).

    Args:
        session: requests session to use. A new one is created if omitted.
        timeout: Per-request timeout in seconds.
        max_workers: Number of concurrent requests.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = 10.0,
        max_workers: int = 4,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="pykoord-fetch"
        )

    def _get(self, url: str) -> str:
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ResourceError(f"Request to {url} failed: {exc}") from exc
        if response.status_code != requests.codes.ok:
            raise ResourceError(f"GET {url} returned HTTP {response.status_code}")
        text = response.text.strip()
        if not text:
            raise ResourceError(f"GET {url} returned an empty body")
        return text

    def fetch(self, url: str) -> Future[str]:
        return self._executor.submit(self._get, url)

    def close(self) -> None:
        self._executor.shutdown(wait=False)
        self.session.close()
