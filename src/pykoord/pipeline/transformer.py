"""Reusable source/destination CRS pair with array support."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from pykoord.core.point import Point
from pykoord.crs.crs import CRS
from pykoord.crs.resolver import CRSFactory, default_factory
from pykoord.pipeline.reproject import transform

logger = logging.getLogger(__name__)


class Transformer:
    """Transform coordinates from one CRS to another.

    CRS arguments may be :class:`CRS` objects or any definition accepted
    by :meth:`CRSFactory.get`. Both CRSs must become ready; a CRS whose
    definition is still being fetched is waited for up to ``timeout``
    seconds.

    Examples:
        >>> t = Transformer("EPSG:4326", "EPSG:3857")
        >>> x, y, _ = t.transform(-122.4194, 37.7749)
        >>> round(x), round(y)
        (-13627665, 4547675)
    """

    def __init__(
        self,
        source: CRS | str,
        dest: CRS | str,
        factory: CRSFactory | None = None,
        timeout: float | None = None,
    ) -> None:
        self.factory = factory or default_factory()
        self.source = self._resolve(source, timeout)
        self.dest = self._resolve(dest, timeout)
        self._wgs84 = self.factory.wgs84

    def _resolve(self, crs: CRS | str, timeout: float | None) -> CRS:
        if isinstance(crs, str):
            crs = self.factory.get(crs)
        if not crs.is_ready:
            crs.wait(timeout)
        return crs

    def transform_point(self, point: Any) -> Point:
        """Transform a single point (mutated in place if a Point)."""
        return transform(self.source, self.dest, point, self._wgs84)

    def transform(self, x: float, y: float, z: float = 0.0) -> tuple[float, float, float]:
        """Transform one coordinate triple."""
        return self.transform_point(Point(x, y, z)).as_tuple()

    def transform_arrays(
        self,
        x: np.ndarray,
        y: np.ndarray,
        z: np.ndarray | None = None,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Transform coordinate arrays point by point.

        Args:
            x, y: Coordinate arrays of equal length.
            z: Optional heights (zeros if omitted).

        Returns:
            Tuple of (new_x, new_y, new_z) float64 arrays.
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        z = np.zeros_like(x) if z is None else np.asarray(z, dtype=np.float64)
        if not (x.shape == y.shape == z.shape):
            raise ValueError(
                f"Coordinate arrays differ in shape: {x.shape}, {y.shape}, {z.shape}"
            )

        new_x = np.empty_like(x)
        new_y = np.empty_like(y)
        new_z = np.empty_like(z)
        for i in range(x.size):
            p = self.transform_point(Point(float(x.flat[i]), float(y.flat[i]), float(z.flat[i])))
            new_x.flat[i] = p.x
            new_y.flat[i] = p.y
            new_z.flat[i] = p.z
        logger.debug("Transformed %d points %s -> %s", x.size, self.source.srs_code, self.dest.srs_code)
        return new_x, new_y, new_z

    def __repr__(self) -> str:
        return f"Transformer({self.source.srs_code!r} -> {self.dest.srs_code!r})"
