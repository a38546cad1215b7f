"""Tests for the definition fetchers."""

from unittest.mock import Mock

import pytest
import requests

from pykoord.errors import ResourceError
from pykoord.fetch.http import HttpFetcher
from pykoord.fetch.static import StaticFetcher

URL = "https://defs.test/ref/epsg/2154/proj4/"


def _response(status=200, text=""):
    response = Mock(spec=requests.Response)
    response.status_code = status
    response.text = text
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def fetcher(session):
    fetcher = HttpFetcher(session=session, timeout=2.5, max_workers=1)
    yield fetcher
    fetcher.close()


class TestHttpFetcher:
    def test_ok(self, fetcher, session, lambert93):
        session.get.return_value = _response(text=f"  {lambert93}\n")
        assert fetcher.fetch(URL).result(timeout=5) == lambert93
        session.get.assert_called_once_with(URL, timeout=2.5)

    def test_http_error(self, fetcher, session):
        session.get.return_value = _response(status=404, text="Not found")
        with pytest.raises(ResourceError, match="HTTP 404"):
            fetcher.fetch(URL).result(timeout=5)

    def test_empty_body(self, fetcher, session):
        session.get.return_value = _response(text="   ")
        with pytest.raises(ResourceError, match="empty body"):
            fetcher.fetch(URL).result(timeout=5)

    def test_request_exception(self, fetcher, session):
        session.get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(ResourceError, match="connection refused"):
            fetcher.fetch(URL).result(timeout=5)

    def test_close_closes_session(self, session):
        HttpFetcher(session=session).close()
        session.close.assert_called_once()


class TestStaticFetcher:
    def test_hit(self, lambert93):
        fetcher = StaticFetcher({URL: lambert93})
        future = fetcher.fetch(URL)
        assert future.done()
        assert future.result() == lambert93
        assert fetcher.requested == [URL]

    def test_miss(self):
        future = StaticFetcher().fetch(URL)
        with pytest.raises(ResourceError, match="No resource"):
            future.result()


class TestFactoryOverHttp:
    def test_factory_fetches_through_session(self, config, session, lambert93):
        from pykoord.crs.resolver import CRSFactory

        session.get.return_value = _response(text=lambert93)
        factory = CRSFactory(config=config, fetcher=HttpFetcher(session=session))
        crs = factory.get("EPSG:2154").wait(timeout=5)
        assert crs.proj_name == "lcc"
        session.get.assert_called_once_with(URL, timeout=10.0)
