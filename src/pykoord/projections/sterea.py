"""Oblique Stereographic Alternative (double stereographic).

Projects through the Gauss conformal sphere, then applies a spherical
stereographic projection centered on the conformal origin.
"""

from __future__ import annotations

import math

from pykoord.core.common import adjust_lon
from pykoord.core.point import Point
from pykoord.errors import ConfigError
from pykoord.projections.base import Projection
from pykoord.projections.gauss import GaussSphere
from pykoord.projections.registry import projection_registry


class ObliqueStereographic(Projection):
    depends_on = "gauss"

    def __init__(self, crs) -> None:
        super().__init__(crs)
        self.gauss = GaussSphere(crs)

    def init(self) -> None:
        c = self.crs
        self.gauss.init()
        if not c.rc:
            raise ConfigError("sterea: conformal sphere radius is zero")
        c.sinc0 = math.sin(c.phic0)
        c.cosc0 = math.cos(c.phic0)
        c.R2 = 2.0 * c.rc
        if not c.title:
            c.title = "Oblique Stereographic Alternative"

    def forward(self, p: Point) -> Point:
        c = self.crs
        p.x = adjust_lon(p.x - c.long0)
        self.gauss.forward(p)
        sinc = math.sin(p.y)
        cosc = math.cos(p.y)
        cosl = math.cos(p.x)
        k = c.k0 * c.R2 / (1.0 + c.sinc0 * sinc + c.cosc0 * cosc * cosl)
        x = k * cosc * math.sin(p.x)
        y = k * (c.cosc0 * sinc - c.sinc0 * cosc * cosl)
        p.x = c.a * x + c.x0
        p.y = c.a * y + c.y0
        return p

    def inverse(self, p: Point) -> Point:
        c = self.crs
        x = (p.x - c.x0) / c.a / c.k0
        y = (p.y - c.y0) / c.a / c.k0
        rho = math.sqrt(x * x + y * y)
        if rho:
            z = 2.0 * math.atan2(rho, c.R2)
            sinc = math.sin(z)
            cosc = math.cos(z)
            lat = math.asin(cosc * c.sinc0 + y * sinc * c.cosc0 / rho)
            lon = math.atan2(x * sinc, rho * c.cosc0 * cosc - y * c.sinc0 * sinc)
        else:
            lat = c.phic0
            lon = 0.0
        p.x = lon
        p.y = lat
        self.gauss.inverse(p)
        p.x = adjust_lon(p.x + c.long0)
        return p

    @classmethod
    def type_name(cls) -> str:
        return "sterea"


projection_registry.register(ObliqueStereographic)
