"""Projection registry and discovery."""

from __future__ import annotations

import logging

from pykoord.projections.base import Projection

logger = logging.getLogger(__name__)


class ProjectionRegistry:
    """Registry for projection classes, keyed by type name.

    Registering a name twice replaces the earlier class (last write wins).
    """

    def __init__(self, warn_on_overwrite: bool = True) -> None:
        self._projections: dict[str, type[Projection]] = {}
        self.warn_on_overwrite = warn_on_overwrite

    def register(self, cls: type[Projection]) -> None:
        """Register a projection class."""
        name = cls.type_name()
        previous = self._projections.get(name)
        if previous is not None and previous is not cls and self.warn_on_overwrite:
            logger.warning(
                "Projection '%s' re-registered: %s replaces %s",
                name,
                cls.__qualname__,
                previous.__qualname__,
            )
        self._projections[name] = cls

    def get(self, type_name: str) -> type[Projection]:
        """Get a projection class by type name."""
        if type_name not in self._projections:
            raise KeyError(
                f"Unknown projection '{type_name}'. "
                f"Available: {self.available}"
            )
        return self._projections[type_name]

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._projections

    @property
    def available(self) -> list[str]:
        """Sorted list of registered projection names."""
        return sorted(self._projections)


# Global registry
projection_registry = ProjectionRegistry()

_registered = False


def _ensure_registered() -> None:
    """Lazy-register all built-in projections."""
    global _registered
    if _registered:
        return
    _registered = True

    # Modules register themselves on import
    from pykoord.projections import (  # noqa: F401
        aea,
        aeqd,
        cass,
        cea,
        eqc,
        eqdc,
        gauss,
        gnom,
        krovak,
        laea,
        lcc,
        longlat,
        merc,
        mill,
        moll,
        omerc,
        ortho,
        poly,
        sinu,
        somerc,
        stere,
        sterea,
        tmerc,
        utm,
    )


def get_projection(type_name: str) -> type[Projection]:
    """Get a projection class by type name (convenience function)."""
    _ensure_registered()
    return projection_registry.get(type_name)
