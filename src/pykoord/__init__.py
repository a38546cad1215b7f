"""pykoord: coordinate reference system transformations in Python."""

from pykoord._version import __version__
from pykoord.core.point import Point
from pykoord.crs.crs import CRS
from pykoord.crs.resolver import CRSFactory, get_crs
from pykoord.errors import (
    ConfigError,
    ConvergenceError,
    DomainError,
    NotReadyError,
    ParseError,
    ProjectionError,
    ResourceError,
    UnsupportedDatumError,
)
from pykoord.pipeline import Transformer, transform

__all__ = [
    "__version__",
    "CRS",
    "CRSFactory",
    "Point",
    "Transformer",
    "get_crs",
    "transform",
    "ProjectionError",
    "ParseError",
    "ConfigError",
    "DomainError",
    "ConvergenceError",
    "NotReadyError",
    "UnsupportedDatumError",
    "ResourceError",
]
