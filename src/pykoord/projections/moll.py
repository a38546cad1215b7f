"""Mollweide equal-area projection."""

from __future__ import annotations

import math

from pykoord.core.common import EPSLN, HALF_PI, PI, adjust_lon
from pykoord.core.point import Point
from pykoord.errors import DomainError
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry

C_X = 2.0 * math.sqrt(2.0) / PI
C_Y = math.sqrt(2.0)
C_P = PI

MAX_ITER = 30
LOOP_TOL = 1.0e-12


class Mollweide(Projection):
    """Mollweide on the sphere of radius ``a``; eccentricity is ignored."""

    def forward(self, p: Point) -> Point:
        c = self.crs
        lam = adjust_lon(p.x - c.long0)
        phi = p.y
        k = C_P * math.sin(phi)
        # Newton iteration for theta' = 2 theta in theta' + sin(theta') = pi sin(phi)
        for _ in range(MAX_ITER if abs(phi) < HALF_PI - EPSLN else 0):
            v = (phi + math.sin(phi) - k) / (1.0 + math.cos(phi))
            phi -= v
            if abs(v) < LOOP_TOL:
                phi *= 0.5
                break
        else:
            phi = -HALF_PI if phi < 0 else HALF_PI
        p.x = c.a * C_X * lam * math.cos(phi) + c.x0
        p.y = c.a * C_Y * math.sin(phi) + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / c.a
        y = (p.y - c.y0) / c.a
        s = y / C_Y
        if abs(s) > 1.0 + EPSLN:
            raise DomainError("moll: point outside the projection domain")
        theta = math.asin(max(-1.0, min(1.0, s)))
        cos_theta = math.cos(theta)
        if cos_theta < EPSLN:
            lam = 0.0
        else:
            lam = x / (C_X * cos_theta)
            if abs(lam) > PI + EPSLN:
                raise DomainError("moll: point outside the projection domain")
        theta += theta
        phi = math.asin(max(-1.0, min(1.0, (theta + math.sin(theta)) / C_P)))
        p.x = adjust_lon(c.long0 + lam)
        p.y = phi
        return p

    @classmethod
    def type_name(cls) -> str:
        return "moll"


projection_registry.register(Mollweide)
