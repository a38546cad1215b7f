"""Geographic pass-through ("longlat") and local identity projections."""

from __future__ import annotations

from pykoord.core.point import Point
from pykoord.projections.base import Projection
from pykoord.projections.registry import projection_registry


class LongLat(Projection):
    """Geodetic coordinates, no projection.

    The pipeline converts degrees to radians around this projection, so
    forward and inverse leave the point untouched.
    """

    def forward(self, p: Point) -> Point:
        return p

    def inverse(self, p: Point) -> Point:
        return p

    @classmethod
    def type_name(cls) -> str:
        return "longlat"


class Identity(LongLat):
    """Local (engineering) coordinate systems."""

    @classmethod
    def type_name(cls) -> str:
        return "identity"


projection_registry.register(LongLat)
projection_registry.register(Identity)
