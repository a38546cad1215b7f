"""Hotine Oblique Mercator projection."""

from __future__ import annotations

import math

from pykoord.core.common import (
    EPSLN,
    FORTPI,
    HALF_PI,
    PI,
    TWO_PI,
    adjust_lon,
    asinz,
    phi2z,
    tsfnz,
)
from pykoord.core.point import Point
from pykoord.errors import ConfigError, DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

TOL = 1.0e-7


class HotineObliqueMercator(Projection):
    """Hotine Oblique Mercator.

    The central line is given either by its azimuth ``alpha`` at the
    projection center (``lonc``, ``lat_0``) or by two points
    (``lat_1``/``lon_1`` and ``lat_2``/``lon_2``). ``gamma`` sets the
    rectification angle and defaults to the azimuth. With ``+no_uoff``
    the false origin sits at the natural origin instead of the center
    (variant A); ``+no_rot`` skips rectification.
    """

    def init(self) -> None:
        c = self.crs
        lat0 = c.lat0
        com = math.sqrt(1.0 - c.es)
        if abs(lat0) > EPSLN:
            sinph0 = math.sin(lat0)
            cosph0 = math.cos(lat0)
            con = 1.0 - c.es * sinph0 * sinph0
            b = cosph0 * cosph0
            c.B = math.sqrt(1.0 + c.es * b * b / (1.0 - c.es))
            c.A = c.B * c.k0 * com / con
            d = c.B * com / (cosph0 * math.sqrt(con))
            f = d * d - 1.0
            if f <= 0.0:
                f = 0.0
            else:
                f = math.sqrt(f)
                if lat0 < 0:
                    f = -f
            f += d
            c.E = f * math.pow(tsfnz(c.e, lat0, sinph0), c.B)
        else:
            c.B = 1.0 / com
            c.A = c.k0
            c.E = d = f = 1.0

        if c.alpha is not None or c.gamma is not None:
            alpha_c = c.alpha
            if alpha_c is not None:
                gamma0 = asinz(math.sin(alpha_c) / d)
                gamma = alpha_c if c.gamma is None else c.gamma
            else:
                gamma0 = gamma = c.gamma
                alpha_c = asinz(d * math.sin(gamma0))
            lamc = c.long0 if c.longc is None else c.longc
            c.lam0 = lamc - asinz(0.5 * (f - 1.0 / f) * math.tan(gamma0)) / c.B
        else:
            alpha_c, gamma0 = self._central_line(d)
            gamma = alpha_c

        c.singam = math.sin(gamma0)
        c.cosgam = math.cos(gamma0)
        c.sinrot = math.sin(gamma)
        c.cosrot = math.cos(gamma)
        c.ArB = c.A / c.B
        c.no_rot = bool(c.extra.get("no_rot"))
        if c.extra.get("no_uoff"):
            c.u_0 = 0.0
        else:
            c.u_0 = abs(c.ArB * math.atan(math.sqrt(max(d * d - 1.0, 0.0)) / math.cos(alpha_c)))
            if lat0 < 0:
                c.u_0 = -c.u_0
        half = 0.5 * gamma0
        c.v_pole_n = c.ArB * math.log(math.tan(FORTPI - half))
        c.v_pole_s = c.ArB * math.log(math.tan(FORTPI + half))

    def _central_line(self, d: float) -> tuple[float, float]:
        """Azimuth and initial line angle from the two-point definition."""
        c = self.crs
        lat1 = c.lat1 or 0.0
        lat2 = c.lat2 or 0.0
        lon1 = c.long1 or 0.0
        lon2 = c.long2 or 0.0
        con = abs(lat1)
        if (
            abs(lat1 - lat2) <= TOL
            or con <= TOL
            or abs(con - HALF_PI) <= TOL
            or abs(abs(c.lat0) - HALF_PI) <= TOL
            or abs(abs(lat2) - HALF_PI) <= TOL
        ):
            raise ConfigError("omerc: invalid points for the central line")
        h = math.pow(tsfnz(c.e, lat1, math.sin(lat1)), c.B)
        low = math.pow(tsfnz(c.e, lat2, math.sin(lat2)), c.B)
        f = c.E / h
        p = (low - h) / (low + h)
        if p == 0.0:
            raise ConfigError("omerc: central line points coincide")
        j = c.E * c.E
        j = (j - low * h) / (j + low * h)
        con = lon1 - lon2
        if con < -PI:
            lon2 -= TWO_PI
        elif con > PI:
            lon2 += TWO_PI
        c.lam0 = adjust_lon(
            0.5 * (lon1 + lon2) - math.atan(j * math.tan(0.5 * c.B * (lon1 - lon2)) / p) / c.B
        )
        con = f - 1.0 / f
        if con == 0.0:
            raise ConfigError("omerc: central line passes through the pole")
        gamma0 = math.atan(2.0 * math.sin(c.B * adjust_lon(lon1 - c.lam0)) / con)
        return asinz(d * math.sin(gamma0)), gamma0

    def forward(self, p: Point) -> Point:
        c = self.crs
        lam = adjust_lon(p.x - c.lam0)
        phi = p.y
        if abs(abs(phi) - HALF_PI) > EPSLN:
            w = c.E / math.pow(tsfnz(c.e, phi, math.sin(phi)), c.B)
            temp = 1.0 / w
            s = 0.5 * (w - temp)
            t = 0.5 * (w + temp)
            sinblam = math.sin(c.B * lam)
            u = (s * c.singam - sinblam * c.cosgam) / t
            if abs(abs(u) - 1.0) < EPSLN:
                raise DomainError("omerc: point maps to infinity")
            v = 0.5 * c.ArB * math.log((1.0 - u) / (1.0 + u))
            temp = math.cos(c.B * lam)
            if abs(temp) < TOL:
                u = c.A * lam
            else:
                u = c.ArB * math.atan2(s * c.cosgam + sinblam * c.singam, temp)
        else:
            v = c.v_pole_n if phi > 0 else c.v_pole_s
            u = c.ArB * phi

        if c.no_rot:
            x = u
            y = v
        else:
            u -= c.u_0
            x = v * c.cosrot + u * c.sinrot
            y = u * c.cosrot - v * c.sinrot
        p.x = c.a * x + c.x0
        p.y = c.a * y + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / c.a
        y = (p.y - c.y0) / c.a
        if c.no_rot:
            v = y
            u = x
        else:
            v = x * c.cosrot - y * c.sinrot
            u = y * c.cosrot + x * c.sinrot + c.u_0
        qp = math.exp(-v / c.ArB)
        if qp == 0.0:
            raise DomainError("omerc: point outside the projection domain")
        temp = 1.0 / qp
        sp = 0.5 * (qp - temp)
        tp = 0.5 * (qp + temp)
        vp = math.sin(u / c.ArB)
        up = (vp * c.cosgam + sp * c.singam) / tp
        if abs(abs(up) - 1.0) < EPSLN:
            lam = 0.0
            phi = -HALF_PI if up < 0 else HALF_PI
        else:
            ts = c.E / math.sqrt((1.0 + up) / (1.0 - up))
            phi = phi2z(c.e, math.pow(ts, 1.0 / c.B))
            lam = -math.atan2(sp * c.cosgam - vp * c.singam, math.cos(u / c.ArB)) / c.B
        p.x = adjust_lon(lam + c.lam0)
        p.y = phi
        return p

    @classmethod
    def type_name(cls) -> str:
        return "omerc"


projection_registry.register(HotineObliqueMercator)
