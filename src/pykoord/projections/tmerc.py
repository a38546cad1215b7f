"""Transverse Mercator projection (Snyder's series for the ellipsoid)."""

from __future__ import annotations

import math

from pykoord.core.common import (
    EPSLN,
    HALF_PI,
    MAX_ITER,
    adjust_lon,
    asinz,
    e0fn,
    e1fn,
    e2fn,
    e3fn,
    mlfn,
    sign,
)
from pykoord.core.point import Point
from pykoord.errors import ConvergenceError, DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class TransverseMercator(Projection):
    """Transverse Mercator.

    Accurate to well under a millimeter within a few degrees of the
    central meridian; accuracy degrades far from it.
    """

    def init(self) -> None:
        c = self.crs
        c.e0 = e0fn(c.es)
        c.e1 = e1fn(c.es)
        c.e2 = e2fn(c.es)
        c.e3 = e3fn(c.es)
        c.ml0 = c.a * mlfn(c.e0, c.e1, c.e2, c.e3, c.lat0)

    def forward(self, p: Point) -> Point:
        c = self.crs
        lat = p.y
        dlon = adjust_lon(p.x - c.long0)
        sin_phi = math.sin(lat)
        cos_phi = math.cos(lat)

        if c.sphere:
            b = cos_phi * math.sin(dlon)
            if abs(abs(b) - 1.0) < EPSLN:
                raise DomainError("tmerc: point projects into infinity")
            x = 0.5 * c.a * c.k0 * math.log((1.0 + b) / (1.0 - b))
            con = math.atan2(math.tan(lat), math.cos(dlon))
            y = c.a * c.k0 * (con - c.lat0)
        else:
            al = cos_phi * dlon
            als = al * al
            cs = c.ep2 * cos_phi * cos_phi
            tq = math.tan(lat)
            t = tq * tq
            con = 1.0 - c.es * sin_phi * sin_phi
            n = c.a / math.sqrt(con)
            ml = c.a * mlfn(c.e0, c.e1, c.e2, c.e3, lat)
            x = c.k0 * n * al * (
                1.0 + als / 6.0 * (
                    1.0 - t + cs + als / 20.0 * (5.0 - 18.0 * t + t * t + 72.0 * cs - 58.0 * c.ep2)
                )
            )
            y = c.k0 * (
                ml - c.ml0 + n * tq * (
                    als * (
                        0.5 + als / 24.0 * (
                            5.0 - t + 9.0 * cs + 4.0 * cs * cs + als / 30.0 * (
                                61.0 - 58.0 * t + t * t + 600.0 * cs - 330.0 * c.ep2
                            )
                        )
                    )
                )
            )
        p.x = x + c.x0
        p.y = y + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = p.x - c.x0
        y = p.y - c.y0

        if c.sphere:
            f = math.sinh(x / (c.a * c.k0))
            d = c.lat0 + y / (c.a * c.k0)
            g = math.cos(d)
            h = math.sqrt((1.0 - g * g) / (1.0 + f * f))
            lat = asinz(h)
            if d < 0:
                lat = -lat
            if f == 0 and g == 0:
                lon = c.long0
            else:
                lon = adjust_lon(math.atan2(f, g) + c.long0)
            p.x = lon
            p.y = lat
            return p

        con = (c.ml0 + y / c.k0) / c.a
        phi = con
        for _ in range(MAX_ITER):
            delta = (
                con + c.e1 * math.sin(2.0 * phi) - c.e2 * math.sin(4.0 * phi)
                + c.e3 * math.sin(6.0 * phi)
            ) / c.e0 - phi
            phi += delta
            if abs(delta) <= EPSLN:
                break
        else:
            raise ConvergenceError("tmerc: latitude failed to converge")

        if abs(phi) < HALF_PI:
            sin_phi = math.sin(phi)
            cos_phi = math.cos(phi)
            tan_phi = math.tan(phi)
            cs = c.ep2 * cos_phi * cos_phi
            cs2 = cs * cs
            t = tan_phi * tan_phi
            t2 = t * t
            con = 1.0 - c.es * sin_phi * sin_phi
            n = c.a / math.sqrt(con)
            r = n * (1.0 - c.es) / con
            d = x / (n * c.k0)
            ds = d * d
            lat = phi - (n * tan_phi * ds / r) * (
                0.5 - ds / 24.0 * (
                    5.0 + 3.0 * t + 10.0 * cs - 4.0 * cs2 - 9.0 * c.ep2 - ds / 30.0 * (
                        61.0 + 90.0 * t + 298.0 * cs + 45.0 * t2 - 252.0 * c.ep2 - 3.0 * cs2
                    )
                )
            )
            lon = adjust_lon(
                c.long0 + d * (
                    1.0 - ds / 6.0 * (
                        1.0 + 2.0 * t + cs - ds / 20.0 * (
                            5.0 - 2.0 * cs + 28.0 * t - 3.0 * cs2 + 8.0 * c.ep2 + 24.0 * t2
                        )
                    )
                ) / cos_phi
            )
        else:
            lat = HALF_PI * sign(y)
            lon = c.long0
        p.x = lon
        p.y = lat
        return p

    @classmethod
    def type_name(cls) -> str:
        return "tmerc"


projection_registry.register(TransverseMercator)
