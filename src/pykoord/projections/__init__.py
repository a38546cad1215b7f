"""Projection algorithms."""

from pykoord.projections.base import Projection
from pykoord.projections.registry import get_projection, projection_registry

__all__ = ["Projection", "get_projection", "projection_registry"]
