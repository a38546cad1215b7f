"""Tests for the CRS state machine and its continuation queue."""

import pytest

from pykoord.crs.crs import CRS, CRSState
from pykoord.errors import ConfigError, NotReadyError, ResourceError
from pykoord.fetch.static import StaticFetcher

URL = "https://defs.test/ref/epsg/2154/proj4/"


class TestStates:
    def test_new_crs_is_parsing(self):
        crs = CRS("TEST:1")
        assert crs.state is CRSState.PARSING
        assert not crs.is_ready

    def test_apply_constants_moves_to_derived(self):
        crs = CRS("TEST:1")
        crs.apply_constants({"proj_name": "merc", "a": 1.0})
        assert crs.state is CRSState.DERIVED
        assert crs.a == 1.0

    def test_projection_requires_ready(self):
        with pytest.raises(NotReadyError, match="TEST:1"):
            CRS("TEST:1").projection

    def test_ready_crs_is_read_only(self, factory):
        crs = factory.get("EPSG:4326")
        with pytest.raises(AttributeError, match="read-only"):
            crs.long0 = 1.0

    def test_defaults(self):
        crs = CRS("TEST:1")
        assert crs.axis == "enu"
        assert crs.k0 == 1.0
        assert crs.x0 == 0.0


class TestDeferredReadiness:
    def test_pending_until_fetch_resolves(self, deferred_factory, deferred_fetcher, lambert93):
        crs = deferred_factory.get("EPSG:2154")
        assert crs.state is CRSState.PARSING
        deferred_fetcher.resolve(URL, lambert93)
        assert crs.is_ready
        assert crs.proj_name == "lcc"

    def test_continuations_run_in_order(self, deferred_factory, deferred_fetcher, lambert93):
        calls = []
        crs = deferred_factory.get("EPSG:2154", on_ready=lambda c: calls.append(("first", c)))
        crs.when_ready(lambda c: calls.append(("second", c)))
        deferred_factory.get("EPSG:2154", on_ready=lambda c: calls.append(("third", c)))
        assert calls == []

        deferred_fetcher.resolve(URL, lambert93)
        assert [name for name, _ in calls] == ["first", "second", "third"]
        assert all(c is crs for _, c in calls)

    def test_continuations_run_once(self, deferred_factory, deferred_fetcher, lambert93):
        calls = []
        crs = deferred_factory.get("EPSG:2154", on_ready=calls.append)
        deferred_fetcher.resolve(URL, lambert93)
        crs.when_ready(calls.append)
        assert calls == [crs, crs]

    def test_registered_after_ready_runs_immediately(self, factory):
        calls = []
        factory.get("EPSG:4326").when_ready(calls.append)
        assert len(calls) == 1

    def test_continuation_added_while_draining_keeps_order(self, deferred_factory, deferred_fetcher, lambert93):
        calls = []

        def first(crs):
            calls.append("first")
            crs.when_ready(lambda _c: calls.append("nested"))

        crs = deferred_factory.get("EPSG:2154", on_ready=first)
        crs.when_ready(lambda _c: calls.append("second"))
        deferred_fetcher.resolve(URL, lambert93)
        assert calls == ["first", "second", "nested"]

    def test_failing_continuation_does_not_block_others(self, deferred_factory, deferred_fetcher, lambert93, caplog):
        calls = []
        errors = []

        def broken(_crs):
            raise RuntimeError("boom")

        crs = deferred_factory.get("EPSG:2154", on_ready=broken)
        crs.when_ready(broken, errors.append)
        crs.when_ready(calls.append)
        deferred_fetcher.resolve(URL, lambert93)
        assert calls == [crs]
        assert len(errors) == 1
        assert str(errors[0]) == "boom"
        assert "Continuation for CRS EPSG:2154 raised" in caplog.text

    def test_failing_error_callback_is_logged(self, deferred_factory, deferred_fetcher, lambert93, caplog):
        def broken(_exc):
            raise RuntimeError("boom")

        calls = []
        crs = deferred_factory.get("EPSG:2154", on_ready=lambda c: 1 / 0, on_error=broken)
        crs.when_ready(calls.append)
        deferred_fetcher.resolve(URL, lambert93)
        assert calls == [crs]
        assert "Error callback for CRS EPSG:2154 raised" in caplog.text

    def test_immediate_continuation_error_propagates(self, factory):
        crs = factory.get("EPSG:4326")

        def broken(_crs):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            crs.when_ready(broken)
        with pytest.raises(RuntimeError, match="boom"):
            factory.get("EPSG:4326", on_ready=broken)

    def test_wait_returns_ready_crs(self, deferred_factory, deferred_fetcher, lambert93):
        crs = deferred_factory.get("EPSG:2154")
        deferred_fetcher.resolve(URL, lambert93)
        assert crs.wait(1) is crs
        assert crs.future.done()


class TestDeferredFailure:
    def test_fallback_after_rejected_fetch(self, deferred_factory, deferred_fetcher):
        crs = deferred_factory.get("EPSG:2154")
        deferred_fetcher.reject(URL, ResourceError("HTTP 404"))
        assert crs.is_ready
        assert crs.proj_name == "longlat"

    def test_strict_rejection_reaches_all_continuations(self, deferred_factory, deferred_fetcher):
        deferred_factory.config.strict_definitions = True
        errors = []
        crs = deferred_factory.get("EPSG:2154", on_error=errors.append)
        crs.when_ready(lambda _c: None, errors.append)
        deferred_fetcher.reject(URL, ResourceError("HTTP 404"))
        assert crs.state is CRSState.FAILED
        assert len(errors) == 2
        assert all(isinstance(e, ResourceError) for e in errors)

    def test_bad_fetched_definition_fails_crs(self, deferred_factory, deferred_fetcher):
        errors = []
        crs = deferred_factory.get("EPSG:2154", on_error=errors.append)
        deferred_fetcher.resolve(URL, "+proj=lcc +lat_1=10 +lat_2=-10 +ellps=GRS80")
        assert crs.state is CRSState.FAILED
        assert len(errors) == 1

    @pytest.mark.parametrize(
        "definition",
        [
            "+proj=merc +a=0 +b=0",
            "+proj=lcc +lat_1=90 +lat_2=60 +ellps=GRS80",
            "+proj=merc +lat_0=120 +ellps=GRS80",
        ],
    )
    def test_numerically_invalid_fetched_definition_fails_crs(self, deferred_factory, deferred_fetcher, definition):
        errors = []
        crs = deferred_factory.get("EPSG:2154", on_error=errors.append)
        deferred_fetcher.resolve(URL, definition)
        assert crs.state is CRSState.FAILED
        assert len(errors) == 1
        assert isinstance(errors[0], ConfigError)
        with pytest.raises(ConfigError):
            crs.wait(1)
        retry = deferred_factory.get("EPSG:2154")
        assert retry is not crs
        assert retry.state is CRSState.PARSING

    def test_static_fetcher_records_requests(self):
        fetcher = StaticFetcher({"a": "b"})
        assert fetcher.fetch("a").result() == "b"
        with pytest.raises(ResourceError):
            fetcher.fetch("c").result()
        assert fetcher.requested == ["a", "c"]
