"""Krovak oblique conformal conic projection (S-JTSK)."""

from __future__ import annotations

import math

from pykoord.core.common import D2R, FORTPI, adjust_lon
from pykoord.core.point import Point
from pykoord.errors import ConvergenceError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

# Pseudo standard parallel of the conic step
S0 = 78.5 * D2R
# Defaults of the Czechoslovak definition
LAT0 = 49.5 * D2R
LONG0 = (24.0 + 50.0 / 60.0) * D2R
ALPHA = 30.28813972222222 * D2R

MAX_ITER = 15
TOL = 1.0e-10


class Krovak(Projection):
    """Krovak.

    Points go from the Bessel ellipsoid to the Gauss sphere, are rotated
    about the oblique pole given by ``alpha`` and projected on a
    Lambert cone with standard parallel 78.5 degrees. Forward output is
    easting/northing, which are negative over the Czech and Slovak
    republics (EPSG:5514 axes). With ``+czech`` the signs flip to the
    positive westing/southing of the traditional grid.
    """

    def init(self) -> None:
        c = self.crs
        if not c.lat0:
            c.lat0 = LAT0
        if not c.long0:
            c.long0 = LONG0
        c.ad = ALPHA if c.alpha is None else c.alpha
        c.czech = bool(c.extra.get("czech"))

        sinfi0 = math.sin(c.lat0)
        c.alfa = math.sqrt(1.0 + c.es * math.pow(math.cos(c.lat0), 4) / (1.0 - c.es))
        u0 = math.asin(sinfi0 / c.alfa)
        g = self._esratio(sinfi0, c.alfa * c.e / 2.0)
        c.k = (
            math.tan(u0 / 2.0 + FORTPI)
            / math.pow(math.tan(c.lat0 / 2.0 + FORTPI), c.alfa)
            * g
        )
        n0 = math.sqrt(1.0 - c.es) / (1.0 - c.es * sinfi0 * sinfi0)
        c.n = math.sin(S0)
        c.ro0 = c.k0 * n0 / math.tan(S0)

    def forward(self, p: Point) -> Point:
        c = self.crs
        lat = p.y
        dlon = adjust_lon(p.x - c.long0)
        gfi = self._esratio(math.sin(lat), c.alfa * c.e / 2.0)
        u = 2.0 * (math.atan(c.k * math.pow(math.tan(lat / 2.0 + FORTPI), c.alfa) / gfi) - FORTPI)
        deltav = -dlon * c.alfa
        s = math.asin(
            math.cos(c.ad) * math.sin(u) + math.sin(c.ad) * math.cos(u) * math.cos(deltav)
        )
        eps = c.n * math.asin(math.cos(u) * math.sin(deltav) / math.cos(s))
        ro = c.ro0 * math.pow(math.tan(S0 / 2.0 + FORTPI) / math.tan(s / 2.0 + FORTPI), c.n)
        southing = ro * math.cos(eps)
        westing = ro * math.sin(eps)
        sign = 1.0 if c.czech else -1.0
        p.x = sign * c.a * westing + c.x0
        p.y = sign * c.a * southing + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        sign = 1.0 if c.czech else -1.0
        westing = sign * (p.x - c.x0) / c.a
        southing = sign * (p.y - c.y0) / c.a
        ro = math.sqrt(westing * westing + southing * southing)
        eps = math.atan2(westing, southing) / c.n
        d = 2.0 * (
            math.atan(math.pow(c.ro0 / ro, 1.0 / c.n) * math.tan(S0 / 2.0 + FORTPI)) - FORTPI
        )
        u = math.asin(math.cos(c.ad) * math.sin(d) - math.sin(c.ad) * math.cos(d) * math.cos(eps))
        deltav = math.asin(math.cos(d) * math.sin(eps) / math.cos(u))

        kpow = math.pow(c.k, -1.0 / c.alfa) * math.pow(math.tan(u / 2.0 + FORTPI), 1.0 / c.alfa)
        fi1 = u
        for _ in range(MAX_ITER):
            lat = 2.0 * (math.atan(kpow * self._esratio(math.sin(fi1), c.e / 2.0)) - FORTPI)
            if abs(fi1 - lat) < TOL:
                break
            fi1 = lat
        else:
            raise ConvergenceError("krovak: latitude did not converge")
        p.x = adjust_lon(c.long0 - deltav / c.alfa)
        p.y = lat
        return p

    def _esratio(self, sinphi: float, power: float) -> float:
        e = self.crs.e
        return math.pow((1.0 + e * sinphi) / (1.0 - e * sinphi), power)

    @classmethod
    def type_name(cls) -> str:
        return "krovak"


projection_registry.register(Krovak)
