"""Base class for all projection algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pykoord.core.point import Point

if TYPE_CHECKING:
    from pykoord.crs.crs import CRS


class Projection(ABC):
    """A cartographic projection bound to one CRS.

    ``init()`` computes constants once and stores them on the CRS.
    ``forward()`` takes geodetic longitude/latitude in radians and returns
    projected coordinates including false easting/northing; ``inverse()``
    is its numeric inverse. Both mutate and return the point.

    Subclasses that reuse another algorithm's constants name it in
    ``depends_on`` so the loader resolves it first.
    """

    depends_on: str | None = None

    def __init__(self, crs: CRS) -> None:
        self.crs = crs

    def init(self) -> None:
        """Compute constants for the owning CRS."""

    @abstractmethod
    def forward(self, p: Point) -> Point:
        """Geodetic (lon, lat radians) -> projected (x, y)."""

    @abstractmethod
    def inverse(self, p: Point) -> Point:
        """Projected (x, y) -> geodetic (lon, lat radians)."""

    @classmethod
    @abstractmethod
    def type_name(cls) -> str:
        """Registry name (e.g., 'merc')."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.crs.srs_code!r})"
