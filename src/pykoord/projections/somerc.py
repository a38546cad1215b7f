"""Swiss Oblique Mercator (Swiss Oblique Cylindrical) projection."""

from __future__ import annotations

import math

from pykoord.core.common import EPSLN, FORTPI, HALF_PI, adjust_lon, asinz
from pykoord.core.point import Point
from pykoord.errors import ConvergenceError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

NITER = 6


class SwissObliqueMercator(Projection):
    """Conformal double projection: ellipsoid to the Gauss sphere, then an
    oblique Mercator on the sphere centered at ``lat_0``/``lon_0``."""

    def init(self) -> None:
        c = self.crs
        c.hlf_e = 0.5 * c.e
        cp = math.cos(c.lat0)
        cp *= cp
        c.c = math.sqrt(1.0 + c.es * cp * cp / (1.0 - c.es))
        sp = math.sin(c.lat0)
        c.sinp0 = sp / c.c
        phip0 = math.asin(c.sinp0)
        c.cosp0 = math.cos(phip0)
        sp *= c.e
        c.K = math.log(math.tan(FORTPI + 0.5 * phip0)) - c.c * (
            math.log(math.tan(FORTPI + 0.5 * c.lat0))
            - c.hlf_e * math.log((1.0 + sp) / (1.0 - sp))
        )
        c.kR = c.k0 * math.sqrt(1.0 - c.es) / (1.0 - sp * sp)

    def forward(self, p: Point) -> Point:
        c = self.crs
        lam = adjust_lon(p.x - c.long0)
        sp = c.e * math.sin(p.y)
        phip = 2.0 * math.atan(math.exp(
            c.c * (
                math.log(math.tan(FORTPI + 0.5 * p.y))
                - c.hlf_e * math.log((1.0 + sp) / (1.0 - sp))
            ) + c.K
        )) - HALF_PI
        lamp = c.c * lam
        cp = math.cos(phip)
        phipp = asinz(c.cosp0 * math.sin(phip) - c.sinp0 * cp * math.cos(lamp))
        lampp = asinz(cp * math.sin(lamp) / math.cos(phipp))
        p.x = c.a * c.kR * lampp + c.x0
        p.y = c.a * c.kR * math.log(math.tan(FORTPI + 0.5 * phipp)) + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / (c.a * c.kR)
        y = (p.y - c.y0) / (c.a * c.kR)
        phipp = 2.0 * (math.atan(math.exp(y)) - FORTPI)
        cp = math.cos(phipp)
        phip = asinz(c.cosp0 * math.sin(phipp) + c.sinp0 * cp * math.cos(x))
        lamp = asinz(cp * math.sin(x) / math.cos(phip))
        con = (c.K - math.log(math.tan(FORTPI + 0.5 * phip))) / c.c
        phi = phip
        for _ in range(NITER):
            esp = c.e * math.sin(phi)
            delp = (
                con
                + math.log(math.tan(FORTPI + 0.5 * phi))
                - c.hlf_e * math.log((1.0 + esp) / (1.0 - esp))
            ) * (1.0 - esp * esp) * math.cos(phi) / (1.0 - c.es)
            phi -= delp
            if abs(delp) < EPSLN:
                break
        else:
            raise ConvergenceError("somerc: latitude did not converge")
        p.x = adjust_lon(c.long0 + lamp / c.c)
        p.y = phi
        return p

    @classmethod
    def type_name(cls) -> str:
        return "somerc"


projection_registry.register(SwissObliqueMercator)
