"""Static catalog of ellipsoids, datums, units and built-in definitions."""

from pykoord.catalog.datums import DATUMS, DatumDefinition, get_datum
from pykoord.catalog.definitions import DEFINITIONS
from pykoord.catalog.ellipsoids import ELLIPSOIDS, Ellipsoid, get_ellipsoid
from pykoord.catalog.units import PRIME_MERIDIANS, UNITS, WKT_PROJECTIONS

__all__ = [
    "DATUMS",
    "DEFINITIONS",
    "ELLIPSOIDS",
    "PRIME_MERIDIANS",
    "UNITS",
    "WKT_PROJECTIONS",
    "DatumDefinition",
    "Ellipsoid",
    "get_datum",
    "get_ellipsoid",
]
