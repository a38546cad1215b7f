"""Tests for engine configuration."""

import pytest

from pykoord.config import DEFAULT_DEFS_URL, EngineConfig
from pykoord.crs import resolver
from pykoord.projections import projection_registry


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.defs_url == DEFAULT_DEFS_URL
        assert config.timeout == 10.0
        assert config.strict_definitions is False
        assert config.warn_on_overwrite is True
        assert config.max_workers == 4

    def test_from_empty_env(self):
        assert EngineConfig.from_env({}) == EngineConfig()

    def test_from_env(self):
        config = EngineConfig.from_env({
            "PYKOORD_DEFS_URL": "https://mirror.example/ref/",
            "PYKOORD_TIMEOUT": "2.5",
            "PYKOORD_STRICT_DEFINITIONS": "yes",
            "PYKOORD_WARN_ON_OVERWRITE": "0",
            "PYKOORD_MAX_WORKERS": "8",
        })
        assert config.defs_url == "https://mirror.example/ref"
        assert config.timeout == 2.5
        assert config.strict_definitions is True
        assert config.warn_on_overwrite is False
        assert config.max_workers == 8

    @pytest.mark.parametrize("value,expected", [
        ("1", True), ("true", True), ("ON", True), ("0", False), ("no", False), ("", False),
    ])
    def test_boolean_values(self, value, expected):
        config = EngineConfig.from_env({"PYKOORD_STRICT_DEFINITIONS": value})
        assert config.strict_definitions is expected

    def test_invalid_number(self):
        with pytest.raises(ValueError):
            EngineConfig.from_env({"PYKOORD_TIMEOUT": "soon"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("PYKOORD_MAX_WORKERS", "2")
        assert EngineConfig.from_env().max_workers == 2


class TestDefaultFactory:
    def test_configured_from_env(self, monkeypatch):
        monkeypatch.setattr(resolver, "_default_factory", None)
        monkeypatch.setattr(projection_registry, "warn_on_overwrite", True)
        monkeypatch.setenv("PYKOORD_DEFS_URL", "https://mirror.example/ref")
        monkeypatch.setenv("PYKOORD_WARN_ON_OVERWRITE", "false")
        factory = resolver.default_factory()
        assert factory.config.defs_url == "https://mirror.example/ref"
        assert factory.loader.registry.warn_on_overwrite is False
        assert resolver.default_factory() is factory
