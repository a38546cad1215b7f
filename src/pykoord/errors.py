"""Exception hierarchy for pykoord.

Every error raised by the engine derives from :class:`ProjectionError`, so
callers can catch the whole family at once. Some classes also derive from a
builtin exception where the builtin describes the same failure.
"""

from __future__ import annotations


class ProjectionError(Exception):
    """Base class for all pykoord errors."""


class ParseError(ProjectionError, ValueError):
    """Definition text is neither a valid proj-string nor valid WKT."""


class ConfigError(ProjectionError, ValueError):
    """Definition parses but its parameters are semantically invalid.

    Examples: an unknown axis code, equal standard parallels in a conic
    projection, a UTM definition without a zone.
    """


class DomainError(ProjectionError, ValueError):
    """Input coordinate lies outside the valid domain of an algorithm."""


class ConvergenceError(ProjectionError, ArithmeticError):
    """An iterative solver hit its iteration cap without converging."""


class NotReadyError(ProjectionError, RuntimeError):
    """A CRS was used for projection math before it reached READY."""


class UnsupportedDatumError(ProjectionError):
    """The datum requires a grid shift, which is not implemented."""


class ResourceError(ProjectionError):
    """A remote definition or algorithm could not be fetched."""
