"""Tests for CLI."""

import pytest

from pykoord._version import __version__
from pykoord.cli import main
from pykoord.crs import resolver


@pytest.fixture(autouse=True)
def isolated_factory(monkeypatch, factory):
    """Route the CLI's default factory to the offline test factory."""
    monkeypatch.setattr(resolver, "_default_factory", factory)
    return factory


class TestCliInfo:
    def test_info_command(self, capsys):
        ret = main(["info", "EPSG:4326"])
        assert ret == 0
        output = capsys.readouterr().out
        assert "CRS: EPSG:4326" in output
        assert "proj_name: longlat" in output
        assert "datum: Datum(wgs84" in output

    def test_info_proj_string(self, capsys):
        ret = main(["info", "+proj=utm +zone=32 +ellps=WGS84 +units=m"])
        assert ret == 0
        output = capsys.readouterr().out
        assert "proj_name: utm" in output
        assert "zone: 32" in output

    def test_info_fetched_code(self, capsys):
        ret = main(["info", "EPSG:2154"])
        assert ret == 0
        assert "proj_name: lcc" in capsys.readouterr().out

    def test_info_parse_error(self, capsys):
        ret = main(["info", 'PROJCS["broken"'])
        assert ret == 1
        assert "Error:" in capsys.readouterr().err

    def test_info_unknown_projection(self, capsys):
        ret = main(["info", "+proj=nosuch +ellps=WGS84"])
        assert ret == 1
        assert "nosuch" in capsys.readouterr().err


class TestCliTransform:
    def test_transform(self, capsys):
        ret = main([
            "transform", "--from", "EPSG:4326", "--to", "EPSG:3857",
            "--precision", "2", "-122.4194", "37.7749",
        ])
        assert ret == 0
        assert capsys.readouterr().out.strip() == "-13627665.27 4547675.35"

    def test_transform_with_height(self, capsys):
        ret = main(["transform", "--from", "EPSG:4326", "--to", "EPSG:4326", "1", "2", "3"])
        assert ret == 0
        assert capsys.readouterr().out.strip() == "1.000000 2.000000 3.000000"

    def test_transform_domain_error(self, capsys):
        ret = main([
            "transform", "--from", "EPSG:4326",
            "--to", "+proj=ortho +lat_0=0 +lon_0=0 +ellps=WGS84", "120", "0",
        ])
        assert ret == 1
        assert "Error:" in capsys.readouterr().err


class TestCliMisc:
    def test_projections(self, capsys):
        ret = main(["projections"])
        assert ret == 0
        names = capsys.readouterr().out.split()
        assert "merc" in names
        assert "sterea" in names
        assert names == sorted(names)

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command(self, capsys):
        ret = main([])
        assert ret == 0
        assert "usage" in capsys.readouterr().out.lower()
