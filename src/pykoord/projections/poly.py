"""American Polyconic projection."""

from __future__ import annotations

import math

from pykoord.core.common import adjust_lon, msfnz, pj_enfn, pj_mlfn
from pykoord.core.point import Point
from pykoord.errors import ConvergenceError, DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

TOL = 1.0e-10
CONV = 1.0e-10
ITOL = 1.0e-12
MAX_ITER = 20


class Polyconic(Projection):
    def init(self) -> None:
        c = self.crs
        if c.sphere:
            c.ml0 = -c.lat0
        else:
            c.en = pj_enfn(c.es)
            c.ml0 = pj_mlfn(c.lat0, math.sin(c.lat0), math.cos(c.lat0), c.en)

    def forward(self, p: Point) -> Point:
        c = self.crs
        lam = adjust_lon(p.x - c.long0)
        phi = p.y
        if abs(phi) <= TOL:
            x = lam
            y = c.ml0 if c.sphere else -c.ml0
        elif c.sphere:
            cot = 1.0 / math.tan(phi)
            e = lam * math.sin(phi)
            x = math.sin(e) * cot
            y = phi - c.lat0 + cot * (1.0 - math.cos(e))
        else:
            sp = math.sin(phi)
            cp = math.cos(phi)
            ms = msfnz(c.e, sp, cp) / sp if abs(cp) > TOL else 0.0
            lam *= sp
            x = ms * math.sin(lam)
            y = (pj_mlfn(phi, sp, cp, c.en) - c.ml0) + ms * (1.0 - math.cos(lam))
        p.x = c.a * x + c.x0
        p.y = c.a * y + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / c.a
        y = (p.y - c.y0) / c.a
        if c.sphere:
            y += c.lat0
            if abs(y) <= TOL:
                lam = x
                phi = 0.0
            else:
                phi = y
                b = x * x + y * y
                for _ in range(MAX_ITER):
                    tp = math.tan(phi)
                    dphi = (y * (phi * tp + 1.0) - phi - 0.5 * (phi * phi + b) * tp) / (
                        (phi - y) / tp - 1.0
                    )
                    phi -= dphi
                    if abs(dphi) <= CONV:
                        break
                else:
                    raise ConvergenceError("poly: latitude did not converge")
                lam = self._longitude(x, phi, 0.0)
        else:
            y += c.ml0
            if abs(y) <= TOL:
                lam = x
                phi = 0.0
            else:
                r = y * y + x * x
                phi = y
                for _ in range(MAX_ITER):
                    sp = math.sin(phi)
                    cp = math.cos(phi)
                    s2ph = sp * cp
                    if abs(cp) < ITOL:
                        raise DomainError("poly: point outside the projection domain")
                    mlp = math.sqrt(1.0 - c.es * sp * sp)
                    cc = sp * mlp / cp
                    ml = pj_mlfn(phi, sp, cp, c.en)
                    mlb = ml * ml + r
                    mlp = (1.0 - c.es) / (mlp * mlp * mlp)
                    dphi = (ml + ml + cc * mlb - 2.0 * y * (cc * ml + 1.0)) / (
                        c.es * s2ph * (mlb - 2.0 * y * ml) / cc
                        + 2.0 * (y - ml) * (cc * mlp - 1.0 / s2ph)
                        - mlp
                        - mlp
                    )
                    phi += dphi
                    if abs(dphi) <= ITOL:
                        break
                else:
                    raise ConvergenceError("poly: latitude did not converge")
                lam = self._longitude(x, phi, c.es)
        p.x = adjust_lon(c.long0 + lam)
        p.y = phi
        return p

    @staticmethod
    def _longitude(x: float, phi: float, es: float) -> float:
        s = math.sin(phi)
        arg = x * math.tan(phi) * math.sqrt(1.0 - es * s * s)
        if abs(arg) > 1.0:
            raise DomainError("poly: point outside the projection domain")
        return math.asin(arg) / s

    @classmethod
    def type_name(cls) -> str:
        return "poly"


projection_registry.register(Polyconic)
