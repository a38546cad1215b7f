"""Base class for asynchronous resource fetchers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Future


class ResourceFetcher(ABC):
    """Fetches a text resource by URL.

    ``fetch`` returns immediately with a Future. The Future resolves with
    the payload, or fails with an exception (normally a ResourceError).
    Implementations may complete the Future before returning.
    """

    @abstractmethod
    def fetch(self, url: str) -> Future[str]:
        """Start fetching ``url`` and return a Future for its payload."""

    def close(self) -> None:
        """Release any resources held by the fetcher."""
