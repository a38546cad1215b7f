"""Core data model and numeric helpers for pykoord."""

from pykoord.core.point import Point

__all__ = ["Point"]
