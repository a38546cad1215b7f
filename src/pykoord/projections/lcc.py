"""Lambert Conformal Conic projection (one or two standard parallels)."""

from __future__ import annotations

import math

from pykoord.core.common import EPSLN, HALF_PI, adjust_lon, msfnz, phi2z, tsfnz
from pykoord.core.point import Point
from pykoord.errors import ConfigError, DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class LambertConformalConic(Projection):
    """Lambert Conformal Conic.

    With only ``lat_1`` given (1SP variant), ``lat_2`` defaults to it.
    """

    def init(self) -> None:
        c = self.crs
        if c.lat1 is None:
            c.lat1 = c.lat0
        if c.lat2 is None:
            c.lat2 = c.lat1
        if abs(c.lat1 + c.lat2) < EPSLN:
            raise ConfigError("lcc: standard parallels are equal and opposite")
        if max(abs(c.lat1), abs(c.lat2)) > HALF_PI - EPSLN:
            raise ConfigError("lcc: standard parallel lies on a pole")

        sin1 = math.sin(c.lat1)
        ms1 = msfnz(c.e, sin1, math.cos(c.lat1))
        ts1 = tsfnz(c.e, c.lat1, sin1)
        sin2 = math.sin(c.lat2)
        ms2 = msfnz(c.e, sin2, math.cos(c.lat2))
        ts2 = tsfnz(c.e, c.lat2, sin2)
        ts0 = tsfnz(c.e, c.lat0, math.sin(c.lat0))

        if abs(c.lat1 - c.lat2) > EPSLN:
            c.ns = math.log(ms1 / ms2) / math.log(ts1 / ts2)
        else:
            c.ns = sin1
        c.f0 = ms1 / (c.ns * math.pow(ts1, c.ns))
        c.rh = c.a * c.f0 * math.pow(ts0, c.ns)

    def forward(self, p: Point) -> Point:
        c = self.crs
        lon = p.x
        lat = p.y
        if abs(lat) > HALF_PI + EPSLN:
            raise DomainError(f"lcc: latitude out of range: {lat}")

        con = abs(abs(lat) - HALF_PI)
        if con > EPSLN:
            ts = tsfnz(c.e, lat, math.sin(lat))
            rh1 = c.a * c.f0 * math.pow(ts, c.ns)
        else:
            if lat * c.ns <= 0:
                raise DomainError("lcc: pole opposite the cone apex cannot be projected")
            rh1 = 0.0
        theta = c.ns * adjust_lon(lon - c.long0)
        p.x = c.k0 * (rh1 * math.sin(theta)) + c.x0
        p.y = c.k0 * (c.rh - rh1 * math.cos(theta)) + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / c.k0
        y = c.rh - (p.y - c.y0) / c.k0
        if c.ns > 0:
            rh1 = math.sqrt(x * x + y * y)
            con = 1.0
        else:
            rh1 = -math.sqrt(x * x + y * y)
            con = -1.0
        theta = 0.0
        if rh1 != 0:
            theta = math.atan2(con * x, con * y)
        if rh1 != 0 or c.ns > 0:
            ts = math.pow(rh1 / (c.a * c.f0), 1.0 / c.ns)
            lat = phi2z(c.e, ts)
        else:
            lat = -HALF_PI
        p.x = adjust_lon(theta / c.ns + c.long0)
        p.y = lat
        return p

    @classmethod
    def type_name(cls) -> str:
        return "lcc"


projection_registry.register(LambertConformalConic)
