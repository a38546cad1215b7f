"""Mutable coordinate triple."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass
class Point:
    """A coordinate triple.

    The meaning of the components (degrees, radians, meters, geocentric
    Cartesian) depends on the CRS and the pipeline stage the point is in.
    Transforms mutate the point in place and also return it.

    Attributes:
        x: Easting / longitude / geocentric X.
        y: Northing / latitude / geocentric Y.
        z: Height / geocentric Z (default 0).
    """

    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_any(cls, value: Any) -> Point:
        """Build a Point from a Point, a sequence, or an ``"x,y[,z]"`` string.

        Examples:
            >>> Point.from_any("2.35,48.85")
            Point(x=2.35, y=48.85, z=0.0)
            >>> Point.from_any((1, 2, 3))
            Point(x=1.0, y=2.0, z=3.0)
        """
        if isinstance(value, Point):
            return value
        if isinstance(value, str):
            parts: Sequence[Any] = [p for p in value.split(",") if p.strip()]
        else:
            parts = list(value)
        if len(parts) not in (2, 3):
            raise ValueError(f"Expected 2 or 3 coordinates, got {len(parts)}: {value!r}")
        z = float(parts[2]) if len(parts) == 3 else 0.0
        return cls(float(parts[0]), float(parts[1]), z)

    def copy(self) -> Point:
        return Point(self.x, self.y, self.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)
