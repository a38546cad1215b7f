"""Fetchers that resolve from in-memory tables."""

from __future__ import annotations

from concurrent.futures import Future

from pykoord.errors import ResourceError
from pykoord.fetch.base import ResourceFetcher


class StaticFetcher(ResourceFetcher):
    """Resolve URLs from a dict, synchronously.

    URLs missing from the table fail with ResourceError, which makes this
    useful for offline use and for tests.
    """

    def __init__(self, resources: dict[str, str] | None = None) -> None:
        self.resources = dict(resources or {})
        self.requested: list[str] = []

    def fetch(self, url: str) -> Future[str]:
        self.requested.append(url)
        future: Future[str] = Future()
        if url in self.resources:
            future.set_result(self.resources[url])
        else:
            future.set_exception(ResourceError(f"No resource for {url}"))
        return future
