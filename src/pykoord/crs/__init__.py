"""CRS descriptors, datum model and resolution."""

from pykoord.crs.crs import CRS, CRSState
from pykoord.crs.datum import Datum, DatumType
from pykoord.crs.resolver import CRSFactory, default_factory, derive_constants, get_crs

__all__ = [
    "CRS",
    "CRSFactory",
    "CRSState",
    "Datum",
    "DatumType",
    "default_factory",
    "derive_constants",
    "get_crs",
]
