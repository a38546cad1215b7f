"""Tests for datum classification and geocentric conversions."""

import math

import pytest

from pykoord.core.common import D2R, HALF_PI
from pykoord.core.point import Point
from pykoord.crs.datum import Datum, DatumType, classify_params
from pykoord.errors import DomainError, UnsupportedDatumError

A = 6378137.0
B = 6356752.314245179
ES = (A * A - B * B) / (A * A)
EP2 = (A * A - B * B) / (B * B)


def wgs84_datum(datum_type=DatumType.WGS84, params=()):
    return Datum(datum_type, params, a=A, b=B, es=ES, ep2=EP2)


class TestClassifyParams:
    def test_none(self):
        assert classify_params(None) == (DatumType.WGS84, ())

    def test_three_param(self):
        datum_type, params = classify_params([1, 2, 3])
        assert datum_type is DatumType.THREE_PARAM
        assert params == (1.0, 2.0, 3.0)

    def test_seven_param_with_zero_translation(self):
        datum_type, params = classify_params([0, 0, 0, 1, 0, 0, 0])
        assert datum_type is DatumType.SEVEN_PARAM
        assert params[3] == pytest.approx(4.84813681109536e-6)
        assert params[6] == 1.0

    def test_zero_seven_param(self):
        assert classify_params([0] * 7)[0] is DatumType.WGS84


class TestCompare:
    def test_same(self):
        assert wgs84_datum().compare(wgs84_datum())

    def test_different_type(self):
        assert not wgs84_datum().compare(wgs84_datum(DatumType.THREE_PARAM, (1, 2, 3)))

    def test_different_params(self):
        a = wgs84_datum(DatumType.THREE_PARAM, (1.0, 2.0, 3.0))
        b = wgs84_datum(DatumType.THREE_PARAM, (1.0, 2.0, 4.0))
        assert not a.compare(b)

    def test_es_tolerance(self):
        other = Datum(DatumType.WGS84, (), a=A, b=B, es=ES + 1e-12, ep2=EP2)
        assert wgs84_datum().compare(other)

    def test_grid_shift_unsupported(self):
        grid = wgs84_datum(DatumType.GRIDSHIFT)
        with pytest.raises(UnsupportedDatumError):
            grid.compare(wgs84_datum(DatumType.GRIDSHIFT))


class TestGeocentric:
    def test_equator_prime_meridian(self):
        p = wgs84_datum().geodetic_to_geocentric(Point(0.0, 0.0, 0.0))
        assert p.as_tuple() == pytest.approx((A, 0.0, 0.0))

    def test_north_pole(self):
        p = wgs84_datum().geodetic_to_geocentric(Point(0.0, HALF_PI, 0.0))
        assert p.z == pytest.approx(B)
        assert abs(p.x) < 1e-6

    def test_latitude_slightly_past_pole_is_clamped(self):
        p = wgs84_datum().geodetic_to_geocentric(Point(0.0, HALF_PI * 1.0005, 0.0))
        assert p.z == pytest.approx(B)

    def test_latitude_out_of_range(self):
        with pytest.raises(DomainError):
            wgs84_datum().geodetic_to_geocentric(Point(0.0, 2.0, 0.0))

    @pytest.mark.parametrize("lon, lat, h", [(2.35, 48.85, 35.0), (-122.4, 37.8, 0.0), (151.2, -33.9, 500.0)])
    def test_round_trip_iterative(self, lon, lat, h):
        datum = wgs84_datum()
        p = datum.geodetic_to_geocentric(Point(lon * D2R, lat * D2R, h))
        datum.geocentric_to_geodetic(p)
        assert p.x == pytest.approx(lon * D2R, abs=1e-12)
        assert p.y == pytest.approx(lat * D2R, abs=1e-12)
        assert p.z == pytest.approx(h, abs=1e-4)

    def test_round_trip_closed_form(self):
        datum = wgs84_datum()
        p = datum.geodetic_to_geocentric(Point(0.3, 0.8, 100.0))
        datum.geocentric_to_geodetic_noniter(p)
        assert p.x == pytest.approx(0.3, abs=1e-12)
        assert p.y == pytest.approx(0.8, abs=1e-9)
        assert p.z == pytest.approx(100.0, abs=0.01)

    def test_earth_center(self):
        p = wgs84_datum().geocentric_to_geodetic(Point(0.0, 0.0, 0.0))
        assert p.y == HALF_PI
        assert p.z == -B


class TestShifts:
    def test_three_param_round_trip(self):
        datum = wgs84_datum(DatumType.THREE_PARAM, (606.0, 23.0, 413.0))
        p = Point(4000000.0, 500000.0, 4900000.0)
        datum.geocentric_to_wgs84(p)
        assert p.as_tuple() == pytest.approx((4000606.0, 500023.0, 4900413.0))
        datum.geocentric_from_wgs84(p)
        assert p.as_tuple() == pytest.approx((4000000.0, 500000.0, 4900000.0))

    def test_seven_param_round_trip(self):
        _, params = classify_params([446.448, -125.157, 542.06, 0.15, 0.247, 0.842, -20.489])
        datum = wgs84_datum(DatumType.SEVEN_PARAM, params)
        p = Point(3980000.0, -100000.0, 4970000.0)
        datum.geocentric_to_wgs84(p)
        assert math.dist(p.as_tuple(), (3980000.0, -100000.0, 4970000.0)) > 100
        datum.geocentric_from_wgs84(p)
        assert p.as_tuple() == pytest.approx((3980000.0, -100000.0, 4970000.0), abs=1e-3)

    def test_is_shifted(self):
        assert wgs84_datum(DatumType.SEVEN_PARAM, (0,) * 7).is_shifted
        assert not wgs84_datum().is_shifted
