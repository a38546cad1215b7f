"""Mercator projection (spherical and ellipsoidal)."""

from __future__ import annotations

import math

from pykoord.core.common import (
    EPSLN,
    FORTPI,
    HALF_PI,
    adjust_lon,
    msfnz,
    phi2z,
    tsfnz,
)
from pykoord.core.point import Point
from pykoord.errors import DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class Mercator(Projection):
    """Mercator, with optional latitude of true scale (``lat_ts``).

    Web Mercator (EPSG:3857) is this projection on a sphere of radius
    6378137 m.
    """

    def init(self) -> None:
        c = self.crs
        if c.lat_ts:
            if c.sphere:
                c.k0 = math.cos(c.lat_ts)
            else:
                c.k0 = msfnz(c.e, math.sin(c.lat_ts), math.cos(c.lat_ts))

    def forward(self, p: Point) -> Point:
        c = self.crs
        lon = p.x
        lat = p.y
        if abs(lat) > HALF_PI + EPSLN or math.isnan(lat):
            raise DomainError(f"merc: latitude out of range: {lat}")
        if abs(abs(lat) - HALF_PI) <= EPSLN:
            raise DomainError("merc: cannot project a pole")

        x = c.x0 + c.a * c.k0 * adjust_lon(lon - c.long0)
        if c.sphere:
            y = c.y0 + c.a * c.k0 * math.log(math.tan(FORTPI + 0.5 * lat))
        else:
            ts = tsfnz(c.e, lat, math.sin(lat))
            y = c.y0 - c.a * c.k0 * math.log(ts)
        p.x = x
        p.y = y
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = p.x - c.x0
        y = p.y - c.y0
        if c.sphere:
            lat = HALF_PI - 2.0 * math.atan(math.exp(-y / (c.a * c.k0)))
        else:
            ts = math.exp(-y / (c.a * c.k0))
            lat = phi2z(c.e, ts)
        p.x = adjust_lon(c.long0 + x / (c.a * c.k0))
        p.y = lat
        return p

    @classmethod
    def type_name(cls) -> str:
        return "merc"


projection_registry.register(Mercator)
