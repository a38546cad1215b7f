"""Tests for proj-string parsing."""

import math

import pytest

from pykoord.core.common import D2R
from pykoord.errors import ParseError
from pykoord.parser import parse_definition, parse_proj_string


class TestProjStringKeys:
    def test_projection_and_angles(self):
        params = parse_proj_string("+proj=lcc +lat_1=49 +lat_2=44 +lat_0=46.5 +lon_0=3")
        assert params["proj_name"] == "lcc"
        assert params["lat1"] == pytest.approx(49 * D2R)
        assert params["lat2"] == pytest.approx(44 * D2R)
        assert params["lat0"] == pytest.approx(46.5 * D2R)
        assert params["long0"] == pytest.approx(3 * D2R)

    def test_floats(self):
        params = parse_proj_string("+proj=tmerc +x_0=400000 +y_0=-100000 +k=0.9996 +a=6377563.396")
        assert params["x0"] == 400000.0
        assert params["y0"] == -100000.0
        assert params["k0"] == 0.9996
        assert params["a"] == 6377563.396

    def test_oblique_mercator_keys(self):
        params = parse_proj_string(
            "+proj=omerc +lonc=115 +alpha=53.3 +gamma=53.1 +lon_1=-100 +lon_2=-90 +no_off"
        )
        assert params["longc"] == pytest.approx(115 * D2R)
        assert params["alpha"] == pytest.approx(53.3 * D2R)
        assert params["gamma"] == pytest.approx(53.1 * D2R)
        assert params["long1"] == pytest.approx(-100 * D2R)
        assert params["long2"] == pytest.approx(-90 * D2R)
        assert params["no_uoff"] is True

    def test_czech_flag(self):
        assert parse_proj_string("+proj=krovak +czech")["czech"] is True

    def test_k_0_alias(self):
        assert parse_proj_string("+proj=stere +k_0=0.994")["k0"] == 0.994

    def test_title_keeps_spaces(self):
        params = parse_proj_string("+title=Google Mercator +proj=merc")
        assert params["title"] == "Google Mercator"
        assert params["proj_name"] == "merc"

    def test_zone_and_south_flag(self):
        params = parse_proj_string("+proj=utm +zone=33 +south")
        assert params["zone"] == 33
        assert params["utm_south"] is True

    def test_bad_zone_raises(self):
        with pytest.raises(ParseError, match="zone"):
            parse_proj_string("+proj=utm +zone=north")

    def test_towgs84_list(self):
        params = parse_proj_string("+proj=longlat +towgs84=446.448,-125.157,542.06,0.15,0.247,0.842,-20.489")
        assert params["datum_params"] == [446.448, -125.157, 542.06, 0.15, 0.247, 0.842, -20.489]

    def test_named_prime_meridian(self):
        params = parse_proj_string("+proj=longlat +pm=paris")
        assert params["from_greenwich"] == pytest.approx(2.337229166667 * D2R)

    def test_numeric_prime_meridian(self):
        params = parse_proj_string("+proj=longlat +pm=-9.5")
        assert params["from_greenwich"] == pytest.approx(-9.5 * D2R)

    def test_units_set_to_meter(self):
        assert parse_proj_string("+proj=tmerc +units=us-ft")["to_meter"] == pytest.approx(0.3048006096)

    def test_explicit_to_meter_wins(self):
        params = parse_proj_string("+proj=tmerc +units=ft +to_meter=0.5")
        assert params["to_meter"] == 0.5

    def test_unknown_keys_kept_raw(self):
        params = parse_proj_string("+proj=merc +wktext +foo=bar")
        assert params["wktext"] is True
        assert params["foo"] == "bar"

    def test_no_defs_flag(self):
        assert parse_proj_string("+proj=merc +no_defs")["no_defs"] is True

    def test_invalid_number_raises(self):
        with pytest.raises(ParseError, match="lat_0"):
            parse_proj_string("+proj=merc +lat_0=abc")

    def test_not_a_proj_string(self):
        with pytest.raises(ParseError):
            parse_proj_string("proj=merc")


class TestParseDefinition:
    def test_dispatches_proj_string(self):
        assert parse_definition("+proj=longlat")["proj_name"] == "longlat"

    def test_dispatches_wkt(self):
        params = parse_definition('GEOGCS["x",DATUM["WGS84",SPHEROID["WGS84",6378137,298.257223563]]]')
        assert params["proj_name"] == "longlat"

    @pytest.mark.parametrize("text", ["", "   ", "EPSG:4326", "hello world"])
    def test_rejects_other_text(self, text):
        with pytest.raises(ParseError):
            parse_definition(text)

    def test_sphere_mercator_string(self):
        params = parse_definition(
            "+proj=merc +a=6378137 +b=6378137 +lat_ts=0 +lon_0=0 +x_0=0 +y_0=0 +k=1 +units=m"
        )
        assert params["a"] == params["b"] == 6378137.0
        assert params["lat_ts"] == 0.0
        assert params["k0"] == 1.0
        assert math.isclose(params["to_meter"], 1.0)
