"""Forward/inverse round trips for every built-in projection."""

import pytest

from pykoord.core.common import D2R
from pykoord.core.point import Point
from crs_definitions import (
    BORNEO_RSO,
    BRITISH_NATIONAL_GRID,
    LAMBERT93,
    RD_NEW,
    SJTSK_KROVAK,
    SWISS_LV03,
    UTM33N,
)

ETRS_LAEA = "+proj=laea +lat_0=52 +lon_0=10 +x_0=4321000 +y_0=3210000 +ellps=GRS80 +units=m"
NSIDC_NORTH = "+proj=stere +lat_0=90 +lat_ts=70 +lon_0=-45 +k=1 +x_0=0 +y_0=0 +ellps=WGS84"
CONUS_ALBERS = "+proj=aea +lat_0=23 +lon_0=-96 +lat_1=29.5 +lat_2=45.5 +x_0=0 +y_0=0 +ellps=GRS80"
OMERC_TWO_POINT = (
    "+proj=omerc +lat_0=40 +lat_1=35 +lon_1=-100 +lat_2=45 +lon_2=-90 +k=0.9996 +ellps=GRS80"
)

CASES = [
    ("merc ellipsoid", "+proj=merc +ellps=WGS84 +lat_ts=20", [(10, 45), (-120, -60), (179, 80)]),
    ("merc sphere", "+proj=merc +a=6378137 +b=6378137", [(10, 45), (-120, -60)]),
    ("tmerc ellipsoid", BRITISH_NATIONAL_GRID, [(-1, 52), (-4, 55), (0.5, 50.5)]),
    ("tmerc sphere", "+proj=tmerc +a=6371000 +lon_0=10 +x_0=500000", [(12, 40), (5, -30)]),
    ("utm north", UTM33N, [(15, 50), (13, 10)]),
    ("utm south", "+proj=utm +zone=56 +south +ellps=WGS84", [(151.2, -33.9), (153, -20)]),
    ("lcc two parallels", LAMBERT93, [(2.35, 48.85), (-4, 43), (8, 51)]),
    ("lcc one parallel", "+proj=lcc +lat_1=45 +lat_0=45 +lon_0=0 +k_0=0.99 +ellps=clrk80", [(3, 46), (-5, 40)]),
    ("lcc southern", "+proj=lcc +lat_1=-20 +lat_2=-40 +lat_0=-30 +lon_0=140 +ellps=GRS80", [(145, -35), (130, -25)]),
    ("laea oblique", ETRS_LAEA, [(10, 52), (-5, 40), (30, 65)]),
    ("laea north pole", "+proj=laea +lat_0=90 +lon_0=0 +ellps=WGS84", [(45, 80), (-100, 60)]),
    ("laea south pole sphere", "+proj=laea +lat_0=-90 +lon_0=0 +a=6371228", [(20, -70), (-150, -50)]),
    ("laea equatorial sphere", "+proj=laea +lat_0=0 +lon_0=0 +a=6371228", [(30, 20), (-60, -10)]),
    ("laea equatorial", "+proj=laea +lat_0=0 +lon_0=0 +ellps=WGS84", [(30, 20), (-60, -10)]),
    ("laea oblique sphere", "+proj=laea +lat_0=45 +lon_0=-100 +a=6371228", [(-90, 50), (-120, 30)]),
    ("stere north", NSIDC_NORTH, [(-45, 75), (10, 65)]),
    ("stere south", "+proj=stere +lat_0=-90 +lat_ts=-71 +lon_0=0 +k=1 +ellps=WGS84", [(30, -75), (-120, -80)]),
    ("stere oblique", "+proj=stere +lat_0=45 +lon_0=10 +k=1 +ellps=WGS84", [(12, 47), (5, 40)]),
    ("stere equatorial", "+proj=stere +lat_0=0 +lon_0=0 +k=1 +ellps=WGS84", [(20, 10), (-30, -40)]),
    ("stere equatorial sphere", "+proj=stere +lat_0=0 +lon_0=0 +a=6371000", [(20, 10), (-30, -40)]),
    ("stere oblique sphere", "+proj=stere +lat_0=60 +lon_0=0 +a=6371000", [(10, 65), (-20, 50)]),
    ("stere polar sphere", "+proj=stere +lat_0=90 +lon_0=0 +a=6371000", [(45, 70), (-135, 50)]),
    ("sterea", RD_NEW, [(5.387, 52.156), (4.9, 52.37), (6.5, 53.2)]),
    ("sinu ellipsoid", "+proj=sinu +lon_0=0 +ellps=WGS84", [(10, 45), (-100, -30)]),
    ("sinu sphere", "+proj=sinu +a=6371007.181 +x_0=1000 +y_0=2000", [(10, 45), (-100, -30)]),
    ("aea", CONUS_ALBERS, [(-96, 23), (-80, 40), (-120, 48)]),
    ("aea sphere", "+proj=aea +lat_1=20 +lat_2=60 +a=6371000", [(10, 40), (-30, 70)]),
    ("eqc", "+proj=eqc +lat_ts=30 +lon_0=10 +ellps=WGS84", [(20, 40), (-50, -60)]),
    ("cea", "+proj=cea +lat_ts=30 +a=6371228", [(20, 40), (-50, -60)]),
    ("mill", "+proj=mill +a=6371000", [(20, 40), (-50, -60)]),
    ("ortho oblique", "+proj=ortho +lat_0=40 +lon_0=-100 +a=6371000", [(-90, 45), (-110, 30)]),
    ("ortho polar", "+proj=ortho +lat_0=90 +lon_0=0 +a=6371000", [(45, 60), (-120, 50)]),
    ("gnom oblique", "+proj=gnom +lat_0=40 +lon_0=-100 +a=6371000", [(-90, 45), (-110, 30)]),
    ("gnom polar", "+proj=gnom +lat_0=90 +lon_0=0 +a=6371000", [(45, 60), (-120, 50)]),
    ("omerc azimuth", BORNEO_RSO, [(115.8, 5.4), (117.5, 6.8), (110.5, 1.5)]),
    ("omerc two points", OMERC_TWO_POINT, [(-95, 40), (-101, 36), (-88, 46)]),
    ("omerc natural origin", BORNEO_RSO + " +no_uoff", [(115.8, 5.4), (110.5, 1.5)]),
    ("omerc unrectified", BORNEO_RSO + " +no_rot", [(115.8, 5.4), (110.5, 1.5)]),
    ("omerc sphere", "+proj=omerc +lat_0=30 +lonc=20 +alpha=-30 +a=6371000", [(22, 33), (15, 25)]),
    ("somerc", SWISS_LV03, [(8.49, 47.06), (6.14, 46.2), (9.5, 46.8)]),
    ("krovak", SJTSK_KROVAK, [(16.84, 50.21), (14.42, 50.08), (21.26, 48.72)]),
    ("krovak czech", SJTSK_KROVAK + " +czech", [(14.42, 50.08), (17.1, 48.15)]),
    ("cass sphere", "+proj=cass +lat_0=50 +lon_0=10 +a=6371000", [(12, 52), (5, 45)]),
    ("poly", "+proj=poly +lat_0=0 +lon_0=-54 +ellps=GRS80", [(-50, -10), (-60, 5), (-54, 0)]),
    ("poly sphere", "+proj=poly +lat_0=30 +lon_0=0 +a=6371000", [(10, 40), (-20, 15)]),
    ("eqdc", "+proj=eqdc +lat_1=20 +lat_2=60 +lat_0=40 +lon_0=-96 +ellps=GRS80", [(-96, 40), (-80, 25), (-120, 55)]),
    ("eqdc sphere", "+proj=eqdc +lat_1=20 +lat_2=60 +a=6371000", [(10, 40), (-30, 70)]),
    ("eqdc tangent", "+proj=eqdc +lat_1=45 +lat_0=45 +ellps=WGS84", [(5, 50), (-10, 30)]),
    ("eqdc southern", "+proj=eqdc +lat_1=-20 +lat_2=-40 +lon_0=140 +ellps=GRS80", [(145, -35), (130, -25)]),
    ("aeqd north pole", "+proj=aeqd +lat_0=90 +lon_0=0 +ellps=WGS84", [(45, 80), (-100, 10)]),
    ("aeqd south pole", "+proj=aeqd +lat_0=-90 +lon_0=0 +ellps=WGS84", [(30, -75), (-150, 20)]),
    ("aeqd oblique", "+proj=aeqd +lat_0=40 +lon_0=-100 +ellps=WGS84", [(-90, 45), (60, -10)]),
    ("aeqd equatorial sphere", "+proj=aeqd +lat_0=0 +lon_0=0 +a=6371000", [(30, 20), (-120, -50)]),
    ("aeqd polar sphere", "+proj=aeqd +lat_0=90 +lon_0=0 +a=6371000", [(45, 60), (-120, -50)]),
    ("moll", "+proj=moll +lon_0=10 +ellps=WGS84", [(20, 40), (-150, -70), (10, 0)]),
]


def _cases():
    for name, definition, points in CASES:
        for lon, lat in points:
            yield pytest.param(definition, lon, lat, id=f"{name}-{lon},{lat}")


@pytest.mark.parametrize("definition, lon, lat", list(_cases()))
def test_round_trip(factory, definition, lon, lat):
    crs = factory.get(definition)
    p = crs.forward(Point(lon * D2R, lat * D2R))
    assert abs(p.x) < 1e8 and abs(p.y) < 1e8
    crs.inverse(p)
    assert p.x == pytest.approx(lon * D2R, abs=1e-9)
    assert p.y == pytest.approx(lat * D2R, abs=1e-9)


class TestGaussSphere:
    def test_round_trip(self, factory):
        crs = factory.get("+proj=gauss +lat_0=52 +lon_0=5 +ellps=bessel")
        p = crs.forward(Point(5.5 * D2R, 52.3 * D2R))
        assert p.y != pytest.approx(52.3 * D2R, abs=1e-6)
        crs.inverse(p)
        assert p.as_tuple()[:2] == pytest.approx((5.5 * D2R, 52.3 * D2R), abs=1e-12)

    def test_sterea_sets_title(self, factory):
        assert factory.get(RD_NEW).title == "Oblique Stereographic Alternative"


class TestSphereBranch:
    """With a == b the spherical formulas are selected."""

    @pytest.mark.parametrize(
        "definition",
        [
            "+proj=merc +a=6371000 +b=6371000",
            "+proj=tmerc +a=6371000 +b=6371000",
            "+proj=laea +lat_0=45 +a=6371000 +b=6371000",
            "+proj=stere +lat_0=45 +a=6371000 +b=6371000",
            "+proj=aea +lat_1=20 +lat_2=60 +a=6371000 +b=6371000",
        ],
    )
    def test_equal_axes_match_sphere(self, factory, definition):
        explicit = factory.get(definition)
        radius_only = factory.get(definition.replace(" +b=6371000", ""))
        assert explicit.sphere and radius_only.sphere
        p = explicit.forward(Point(10 * D2R, 50 * D2R))
        q = radius_only.forward(Point(10 * D2R, 50 * D2R))
        assert p == q

    def test_albers_sphere_reference_point(self, factory):
        # Unit sphere worked example from Snyder, Map Projections (1987), p. 291
        crs = factory.get("+proj=aea +lat_1=29.5 +lat_2=45.5 +lat_0=23 +lon_0=-96 +a=1")
        p = crs.forward(Point(-75 * D2R, 35 * D2R))
        assert p.x == pytest.approx(0.2952720, abs=1e-7)
        assert p.y == pytest.approx(0.2416774, abs=1e-7)
        crs.inverse(p)
        assert p.as_tuple()[:2] == pytest.approx((-75 * D2R, 35 * D2R), abs=1e-12)

    def test_web_mercator_origin_scale(self, factory):
        crs = factory.get("EPSG:3857")
        p = crs.forward(Point(1 * D2R, 0.0))
        assert p.x == pytest.approx(6378137.0 * D2R)
        assert p.y == pytest.approx(0.0, abs=1e-6)


class TestReferencePoints:
    """Worked examples from EPSG Guidance Note 7-2."""

    def test_hotine_oblique_mercator_borneo(self, factory):
        crs = factory.get(BORNEO_RSO)
        lon = 115 + 48 / 60 + 19.8196 / 3600
        lat = 5 + 23 / 60 + 14.1129 / 3600
        p = crs.forward(Point(lon * D2R, lat * D2R))
        assert p.x == pytest.approx(679245.73, abs=0.01)
        assert p.y == pytest.approx(596562.78, abs=0.01)
        crs.inverse(p)
        assert p.as_tuple()[:2] == pytest.approx((lon * D2R, lat * D2R), abs=1e-10)

    def test_swiss_oblique_mercator(self, factory):
        crs = factory.get(SWISS_LV03)
        lon = 8 + 29 / 60 + 11.11127 / 3600
        lat = 47 + 3 / 60 + 28.95659 / 3600
        p = crs.forward(Point(lon * D2R, lat * D2R))
        assert p.x == pytest.approx(679520.05, abs=0.01)
        assert p.y == pytest.approx(212273.44, abs=0.01)

    @pytest.mark.parametrize(
        "suffix, sign",
        [("", -1.0), (" +czech", 1.0)],
        ids=["easting-northing", "czech"],
    )
    def test_krovak(self, factory, suffix, sign):
        crs = factory.get(SJTSK_KROVAK + suffix)
        lon = 16 + 50 / 60 + 59.179 / 3600
        lat = 50 + 12 / 60 + 32.442 / 3600
        p = crs.forward(Point(lon * D2R, lat * D2R))
        # Westing in x, southing in y
        assert p.x == pytest.approx(sign * 568990.995, abs=0.01)
        assert p.y == pytest.approx(sign * 1050538.631, abs=0.01)
        crs.inverse(p)
        assert p.as_tuple()[:2] == pytest.approx((lon * D2R, lat * D2R), abs=1e-10)

    def test_krovak_defaults(self, factory):
        crs = factory.get("+proj=krovak +ellps=bessel +k=0.9999")
        assert crs.lat0 == pytest.approx(49.5 * D2R)
        assert crs.long0 == pytest.approx((24 + 50 / 60) * D2R)
        p = crs.forward(Point(16.84 * D2R, 50.21 * D2R))
        q = factory.get(SJTSK_KROVAK).forward(Point(16.84 * D2R, 50.21 * D2R))
        assert p.as_tuple()[:2] == pytest.approx(q.as_tuple()[:2], abs=1e-6)

    def test_omerc_gamma_defaults_to_azimuth(self, factory):
        without = factory.get("+proj=omerc +lat_0=4 +lonc=115 +alpha=53.3 +ellps=WGS84")
        explicit = factory.get(
            "+proj=omerc +lat_0=4 +lonc=115 +alpha=53.3 +gamma=53.3 +ellps=WGS84"
        )
        point = Point(116 * D2R, 5 * D2R)
        assert without.forward(point.copy()) == explicit.forward(point.copy())


class TestCassiniEllipsoid:
    """The ellipsoidal series round-trips closely near the central meridian."""

    PALESTINE_GRID = (
        "+proj=cass +lat_0=31.73409694444445 +lon_0=35.21208055555556 "
        "+x_0=170251.555 +y_0=126867.909 +a=6378300.789 +b=6356566.435"
    )

    @pytest.mark.parametrize("lon, lat", [(35.5, 32.0), (34.8, 31.0), (35.21, 33.2)])
    def test_round_trip(self, factory, lon, lat):
        crs = factory.get(self.PALESTINE_GRID)
        p = crs.forward(Point(lon * D2R, lat * D2R))
        crs.inverse(p)
        assert p.x == pytest.approx(lon * D2R, abs=1e-9)
        assert p.y == pytest.approx(lat * D2R, abs=1e-9)

    def test_origin_maps_to_false_origin(self, factory):
        crs = factory.get(self.PALESTINE_GRID)
        p = crs.forward(Point(35.21208055555556 * D2R, 31.73409694444445 * D2R))
        assert p.x == pytest.approx(170251.555, abs=1e-6)
        assert p.y == pytest.approx(126867.909, abs=1e-6)


class TestProjectionConstants:
    def test_utm_constants(self, factory):
        crs = factory.get("+proj=utm +zone=56 +south +ellps=WGS84")
        assert crs.long0 == pytest.approx(153 * D2R)
        assert crs.y0 == 10000000.0
        assert crs.x0 == 500000.0
        assert crs.k0 == 0.9996

    def test_utm_central_meridian_easting(self, factory):
        crs = factory.get(UTM33N)
        p = crs.forward(Point(15 * D2R, 0.0))
        assert p.x == pytest.approx(500000.0)
        assert p.y == pytest.approx(0.0, abs=1e-6)

    def test_merc_lat_ts_scale(self, factory):
        crs = factory.get("+proj=merc +a=6371000 +lat_ts=60")
        assert crs.k0 == pytest.approx(0.5)

    def test_lcc_default_parallels(self, factory):
        crs = factory.get("+proj=lcc +lat_0=45 +ellps=GRS80")
        assert crs.lat1 == crs.lat2 == crs.lat0

    def test_unknown_parameters_preserved(self, factory):
        assert factory.get("+proj=merc +ellps=WGS84 +foo=bar").extra["foo"] == "bar"
