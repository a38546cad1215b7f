"""Shared test fixtures."""

from concurrent.futures import Future

import pytest

from pykoord.config import EngineConfig
from pykoord.crs.resolver import CRSFactory
from pykoord.fetch.base import ResourceFetcher
from pykoord.fetch.static import StaticFetcher

from crs_definitions import LAMBERT93, UTM33N

DEFS_URL = "https://defs.test/ref"


class DeferredFetcher(ResourceFetcher):
    """Hands out unresolved futures; tests resolve them explicitly."""

    def __init__(self) -> None:
        self.pending: dict[str, Future] = {}

    def fetch(self, url: str) -> Future:
        future: Future = Future()
        self.pending[url] = future
        return future

    def resolve(self, url: str, payload: str) -> None:
        self.pending.pop(url).set_result(payload)

    def reject(self, url: str, error: Exception) -> None:
        self.pending.pop(url).set_exception(error)


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig(defs_url=DEFS_URL)


@pytest.fixture
def static_fetcher() -> StaticFetcher:
    """Serves Lambert 93 and UTM 33N; everything else is missing."""
    return StaticFetcher({
        f"{DEFS_URL}/epsg/2154/proj4/": LAMBERT93,
        f"{DEFS_URL}/epsg/32633/proj4/": UTM33N,
    })


@pytest.fixture
def factory(config, static_fetcher) -> CRSFactory:
    """A factory isolated from the process-wide one, with offline fetching."""
    return CRSFactory(config=config, fetcher=static_fetcher)


@pytest.fixture
def deferred_fetcher() -> DeferredFetcher:
    return DeferredFetcher()


@pytest.fixture
def deferred_factory(config, deferred_fetcher) -> CRSFactory:
    return CRSFactory(config=config, fetcher=deferred_fetcher)


@pytest.fixture
def lambert93() -> str:
    return LAMBERT93
