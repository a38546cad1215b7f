"""Resolution of projection algorithms by name."""

from __future__ import annotations

import importlib
import inspect
import logging
from concurrent.futures import Future
from typing import TYPE_CHECKING

from pykoord.errors import ResourceError

from pykoord.projections.base import Projection

if TYPE_CHECKING:
    from pykoord.projections.registry import ProjectionRegistry

logger = logging.getLogger(__name__)


class AlgorithmLoader:
    """Resolve a projection name to its implementation class.

    Names missing from the registry are looked up as modules in
    ``packages`` (``<package>.<name>``); importing such a module registers
    the projection. Dependencies named by ``depends_on`` are resolved
    before the dependent algorithm.

    Args:
        registry: Projection registry. Defaults to the global one.
        packages: Packages searched for projection modules.
    """

    def __init__(
        self,
        registry: ProjectionRegistry | None = None,
        packages: tuple[str, ...] = ("pykoord.projections",),
    ) -> None:
        if registry is None:
            from pykoord.projections.registry import _ensure_registered, projection_registry

            _ensure_registered()
            registry = projection_registry
        self.registry = registry
        self.packages = packages

    def load(self, name: str) -> Future[type[Projection]]:
        """Return a Future for the projection class registered as ``name``."""
        future: Future[type[Projection]] = Future()
        try:
            future.set_result(self.resolve(name))
        except ResourceError as exc:
            future.set_exception(exc)
        return future

    def resolve(self, name: str, _chain: tuple[str, ...] = ()) -> type[Projection]:
        if name in _chain:
            raise ResourceError(f"Circular projection dependency: {' -> '.join(_chain + (name,))}")
        if name not in self.registry:
            self._import(name)
        cls = self.registry.get(name)
        if cls.depends_on:
            self.resolve(cls.depends_on, _chain + (name,))
        return cls

    def _import(self, name: str) -> None:
        for package in self.packages:
            module = f"{package}.{name}"
            try:
                imported = importlib.import_module(module)
            except ModuleNotFoundError as exc:
                if exc.name is None or not module.startswith(exc.name):
                    raise ResourceError(f"Failed to import {module}: {exc}") from exc
                continue
            logger.info("Loaded projection module %s", module)
            if name not in self.registry:
                # Module was imported earlier and registered elsewhere
                for obj in vars(imported).values():
                    if (
                        inspect.isclass(obj)
                        and issubclass(obj, Projection)
                        and not inspect.isabstract(obj)
                        and obj.type_name() == name
                    ):
                        self.registry.register(obj)
            if name in self.registry:
                return
        raise ResourceError(f"No implementation found for projection {name!r}")
