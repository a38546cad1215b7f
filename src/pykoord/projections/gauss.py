"""Gauss conformal sphere: maps the ellipsoid conformally onto a sphere.

Used on its own and as the first stage of the oblique stereographic
alternative (``sterea``).
"""

from __future__ import annotations

import math

from pykoord.core.common import FORTPI, HALF_PI, MAX_ITER, srat
from pykoord.core.point import Point
from pykoord.errors import ConvergenceError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

INVERSE_TOL = 1.0e-14


class GaussSphere(Projection):
    """Ellipsoidal (lon, lat) to conformal-sphere (lon, lat), in radians."""

    def init(self) -> None:
        c = self.crs
        sphi = math.sin(c.lat0)
        cphi = math.cos(c.lat0)
        cphi *= cphi
        c.rc = math.sqrt(1.0 - c.es) / (1.0 - c.es * sphi * sphi)
        c.C = math.sqrt(1.0 + c.es * cphi * cphi / (1.0 - c.es))
        c.phic0 = math.asin(sphi / c.C)
        c.ratexp = 0.5 * c.C * c.e
        c.K = math.tan(0.5 * c.phic0 + FORTPI) / (
            math.pow(math.tan(0.5 * c.lat0 + FORTPI), c.C) * srat(c.e * sphi, c.ratexp)
        )

    def forward(self, p: Point) -> Point:
        c = self.crs
        lon = p.x
        lat = p.y
        p.y = (
            2.0
            * math.atan(
                c.K
                * math.pow(math.tan(0.5 * lat + FORTPI), c.C)
                * srat(c.e * math.sin(lat), c.ratexp)
            )
            - HALF_PI
        )
        p.x = c.C * lon
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        lon = p.x / c.C
        num = math.pow(math.tan(0.5 * p.y + FORTPI) / c.K, 1.0 / c.C)
        lat = p.y
        for _ in range(MAX_ITER):
            new_lat = 2.0 * math.atan(num * srat(c.e * math.sin(lat), -0.5 * c.e)) - HALF_PI
            if abs(new_lat - lat) < INVERSE_TOL:
                p.x = lon
                p.y = new_lat
                return p
            lat = new_lat
        raise ConvergenceError("gauss: inverse did not converge")

    @classmethod
    def type_name(cls) -> str:
        return "gauss"


projection_registry.register(GaussSphere)
