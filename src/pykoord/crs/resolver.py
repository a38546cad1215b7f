"""CRS resolution: derive constants from parsed parameters and drive the
CRS lifecycle (definition fetch, algorithm load, init, readiness)."""

from __future__ import annotations

import logging
import math
import threading
from concurrent.futures import Future
from typing import Any

from pykoord.catalog.datums import get_datum
from pykoord.catalog.definitions import DEFINITIONS
from pykoord.catalog.ellipsoids import ELLIPSOIDS, get_ellipsoid
from pykoord.config import EngineConfig
from pykoord.core.common import EPSLN, HALF_PI, RA4, RA6, SIXTH
from pykoord.crs.crs import CRS, CRSState, ErrorCallback, ReadyCallback
from pykoord.crs.datum import Datum, DatumType, classify_params
from pykoord.errors import ConfigError, ProjectionError, ResourceError
from pykoord.fetch.base import ResourceFetcher
from pykoord.fetch.loader import AlgorithmLoader
from pykoord.parser import (
    is_proj_string,
    is_wkt,
    normalize_identifier,
    parse_definition,
    split_authority,
)

logger = logging.getLogger(__name__)

# Direction letter -> (enu component, sign)
AXIS_DIRECTIONS = {
    "e": (0, 1.0),
    "w": (0, -1.0),
    "n": (1, 1.0),
    "s": (1, -1.0),
    "u": (2, 1.0),
    "d": (2, -1.0),
}

# Parameters that become CRS attributes; anything else lands in ``extra``
_KNOWN_PARAMS = frozenset({
    "title", "proj_name", "units", "datum_code", "datum_name", "nadgrids",
    "ellps", "a", "b", "rf", "lat0", "lat1", "lat2", "lat_ts", "long0",
    "long1", "long2", "longc", "alpha", "gamma", "x0", "y0", "k0", "r_a",
    "zone", "utm_south", "datum_params", "to_meter", "from_greenwich",
    "axis", "srs_code", "geocs_code", "local_cs",
})

_LATITUDES = ("lat0", "lat1", "lat2", "lat_ts")

# Raised while deriving constants or initializing a projection
_SETUP_ERRORS = (ProjectionError, ArithmeticError, ValueError)


def as_projection_error(exc: Exception) -> ProjectionError:
    """Map a numeric failure during CRS setup to :class:`ConfigError`.

    Parameters that pass parsing can still drive the constant formulas
    outside their domain (a log of zero, a square root of a negative).
    Library errors pass through unchanged.
    """
    if isinstance(exc, ProjectionError):
        return exc
    return ConfigError(f"Invalid CRS parameters: {exc}")


def validate_axis(axis: str) -> str:
    """Check a 3-character axis code such as ``"enu"`` or ``"neu"``."""
    axis = axis.strip().lower()
    if len(axis) != 3 or any(ch not in AXIS_DIRECTIONS for ch in axis):
        raise ConfigError(
            f"Invalid axis {axis!r}: expected 3 characters from 'ewnsud'"
        )
    if len({AXIS_DIRECTIONS[ch][0] for ch in axis}) != 3:
        raise ConfigError(f"Invalid axis {axis!r}: each direction must appear once")
    return axis


def derive_constants(params: dict[str, Any]) -> dict[str, Any]:
    """Derive ellipsoid, datum and axis constants from parsed parameters.

    Explicit parameters in the definition always win over values adopted
    from a catalog datum.

    Returns:
        Mapping of CRS attribute names to values, including a ``datum``
        (:class:`~pykoord.crs.datum.Datum`) and an ``extra`` mapping of
        unrecognized parameters.

    Raises:
        ConfigError: On missing projection name, an invalid axis code,
            non-positive or prolate ellipsoid axes, or a latitude
            parameter outside [-90, 90] degrees.
    """
    p = dict(params)

    if p.get("nadgrids") == "@null":
        p["datum_code"] = "none"

    datum_code = p.get("datum_code")
    if datum_code and datum_code != "none":
        entry = get_datum(datum_code)
        if entry is not None:
            if "datum_params" not in p and entry.towgs84 is not None:
                p["datum_params"] = list(entry.towgs84)
            if entry.nadgrids and "nadgrids" not in p:
                p["nadgrids"] = entry.nadgrids
            if not any(k in p for k in ("ellps", "a", "b", "rf")):
                p["ellps"] = entry.ellipse
            p.setdefault("datum_name", entry.name)
        else:
            logger.debug("Datum %r not in catalog", datum_code)

    # Ellipsoid
    if "a" in p:
        a = float(p["a"])
        b = p.get("b")
        rf = p.get("rf")
    else:
        ellipsoid = get_ellipsoid(p.get("ellps"))
        if ellipsoid is None:
            if p.get("ellps"):
                logger.warning("Unknown ellipsoid %r, using WGS84", p["ellps"])
            ellipsoid = ELLIPSOIDS["WGS84"]
        a = ellipsoid.a
        b = p.get("b", ellipsoid.b)
        rf = p.get("rf", ellipsoid.rf)
    if not (math.isfinite(a) and a > 0):
        raise ConfigError(f"Semi-major axis must be positive, got {a}")
    if b is None:
        b = a * (1.0 - 1.0 / rf) if rf else a
    b = float(b)
    if not (0 < b <= a + EPSLN):
        raise ConfigError(f"Semi-minor axis must be in (0, a], got {b}")
    for key in _LATITUDES:
        value = p.get(key)
        if value is not None and not abs(value) <= HALF_PI + EPSLN:
            raise ConfigError(f"Latitude parameter {key} out of range: {value}")

    sphere = rf == 0 or abs(a - b) < EPSLN
    if sphere:
        b = a
    a2 = a * a
    b2 = b * b
    es = (a2 - b2) / a2
    if p.get("r_a"):
        a *= 1.0 - es * (SIXTH + es * (RA4 + es * RA6))
        a2 = a * a
        b = a
        b2 = b * b
        es = 0.0
        sphere = True
    e = math.sqrt(es)
    ep2 = (a2 - b2) / b2

    # Datum
    nadgrids = p.get("nadgrids")
    if datum_code == "none":
        datum_type, shift = DatumType.NODATUM, ()
    elif nadgrids and nadgrids != "@null" and not p.get("datum_params"):
        datum_type, shift = DatumType.GRIDSHIFT, ()
    else:
        datum_type, shift = classify_params(p.get("datum_params"))
    datum = Datum(datum_type, shift, a=a, b=b, es=es, ep2=ep2, nadgrids=nadgrids)

    if not p.get("proj_name"):
        raise ConfigError("CRS definition has no projection (+proj or PROJECTION)")

    constants = {k: v for k, v in p.items() if k in _KNOWN_PARAMS}
    constants.update(
        a=a, b=b, rf=rf, a2=a2, b2=b2, es=es, e=e, ep2=ep2, sphere=sphere,
        datum=datum,
        axis=validate_axis(p.get("axis") or "enu"),
        k0=float(p.get("k0") or 1.0),
        extra={k: v for k, v in p.items() if k not in _KNOWN_PARAMS},
    )
    constants.pop("srs_code", None)
    return constants


class CRSFactory:
    """Creates and caches CRS objects, driving them to readiness.

    A CRS is requested by proj-string, WKT, or authority code. Local
    definitions are derived synchronously. Codes missing from the
    definition store are fetched through ``fetcher``; the CRS stays in
    PARSING state meanwhile and continuations queue on it.

    Args:
        config: Engine settings.
        fetcher: Definition fetcher. Defaults to an HTTP fetcher built on
            first use.
        loader: Projection algorithm loader.
        definitions: Initial definition store (code -> definition text).
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        fetcher: ResourceFetcher | None = None,
        loader: AlgorithmLoader | None = None,
        definitions: dict[str, str] | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self._fetcher = fetcher
        self.loader = loader or AlgorithmLoader()
        self.definitions: dict[str, str] = {
            normalize_identifier(code): text
            for code, text in (DEFINITIONS if definitions is None else definitions).items()
        }
        self._cache: dict[str, CRS] = {}
        self._lock = threading.Lock()

    @property
    def fetcher(self) -> ResourceFetcher:
        if self._fetcher is None:
            from pykoord.fetch.http import HttpFetcher

            self._fetcher = HttpFetcher(
                timeout=self.config.timeout, max_workers=self.config.max_workers
            )
        return self._fetcher

    def register_definition(self, code: str, definition: str) -> None:
        """Add or replace a definition in the store."""
        self.definitions[normalize_identifier(code)] = definition

    @property
    def wgs84(self) -> CRS:
        return self.get("WGS84")

    def get(
        self,
        srs: str,
        on_ready: ReadyCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> CRS:
        """Return the CRS for ``srs``, creating it if needed.

        ``on_ready`` / ``on_error`` are queued on the CRS and run once it
        is READY or FAILED.

        Raises:
            ParseError, ConfigError: For malformed local definitions.
            ResourceError: If a local definition names an unknown
                projection algorithm.
        """
        if is_wkt(srs) or is_proj_string(srs):
            crs = self._get_inline(srs)
        else:
            crs = self._get_code(normalize_identifier(srs))
        if on_ready is not None or on_error is not None:
            crs.when_ready(on_ready or (lambda _crs: None), on_error)
        return crs

    def _get_inline(self, definition: str) -> CRS:
        with self._lock:
            cached = self._cache.get(definition)
        if cached is not None:
            return cached
        crs = CRS(definition, definition=definition)
        try:
            params = parse_definition(definition)
            crs.srs_code = params.get("srs_code") or definition
            crs.apply_constants(derive_constants(params))
            self._load_algorithm(crs, raise_errors=True)
        except _SETUP_ERRORS as exc:
            error = as_projection_error(exc)
            if crs.state is not CRSState.FAILED:
                crs.fail(error)
            if error is exc:
                raise
            raise error from exc
        with self._lock:
            self._cache.setdefault(definition, crs)
        return crs

    def _get_code(self, code: str) -> CRS:
        with self._lock:
            cached = self._cache.get(code)
            if cached is not None:
                return cached
            crs = CRS(code)
            self._cache[code] = crs
            definition = self.definitions.get(code)

        if definition is not None:
            try:
                self._derive(crs, definition)
                self._load_algorithm(crs, raise_errors=True)
            except _SETUP_ERRORS as exc:
                error = as_projection_error(exc)
                self._forget(code)
                if crs.state is not CRSState.FAILED:
                    crs.fail(error)
                if error is exc:
                    raise
                raise error from exc
            return crs

        auth, number = split_authority(code)
        url = f"{self.config.defs_url}/{auth}/{number}/proj4/"
        logger.info("Fetching definition for %s from %s", code, url)
        future = self.fetcher.fetch(url)
        future.add_done_callback(lambda f: self._on_definition(crs, f))
        return crs

    def _forget(self, key: str) -> None:
        with self._lock:
            self._cache.pop(key, None)

    def _derive(self, crs: CRS, definition: str) -> None:
        crs.definition = definition
        params = parse_definition(definition)
        crs.apply_constants(derive_constants(params))

    def _on_definition(self, crs: CRS, future: Future[str]) -> None:
        try:
            definition = future.result().strip()
        except Exception as exc:
            if self.config.strict_definitions:
                self._forget(crs.srs_code)
                crs.fail(ResourceError(f"Definition fetch failed for {crs.srs_code}: {exc}"))
                return
            logger.warning(
                "Failed to load definition for %s (%s); falling back to WGS84",
                crs.srs_code,
                exc,
            )
            definition = self.definitions["WGS84"]
        else:
            logger.info("Loaded definition for %s", crs.srs_code)

        try:
            self._derive(crs, definition)
        except _SETUP_ERRORS as exc:
            self._forget(crs.srs_code)
            crs.fail(as_projection_error(exc))
            return
        self.definitions[crs.srs_code] = definition
        self._load_algorithm(crs, raise_errors=False)

    def _load_algorithm(self, crs: CRS, raise_errors: bool) -> None:
        assert crs.proj_name is not None
        future = self.loader.load(crs.proj_name)
        if future.done():
            self._init_projection(crs, future, raise_errors)
        else:
            future.add_done_callback(lambda f: self._init_projection(crs, f, False))

    def _init_projection(self, crs: CRS, future: Future[Any], raise_errors: bool) -> None:
        try:
            projection_cls = future.result()
            projection = projection_cls(crs)
            projection.init()
        except _SETUP_ERRORS as exc:
            error = as_projection_error(exc)
            self._forget(crs.srs_code)
            crs.fail(error)
            if not raise_errors:
                return
            if error is exc:
                raise
            raise error from exc
        crs.mark_ready(projection)


_default_factory: CRSFactory | None = None
_default_lock = threading.Lock()


def default_factory() -> CRSFactory:
    """The process-wide factory, configured from the environment."""
    global _default_factory
    with _default_lock:
        if _default_factory is None:
            config = EngineConfig.from_env()
            _default_factory = CRSFactory(config=config)
            _default_factory.loader.registry.warn_on_overwrite = config.warn_on_overwrite
        return _default_factory


def get_crs(
    srs: str,
    on_ready: ReadyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> CRS:
    """Get a CRS from the default factory (convenience function)."""
    return default_factory().get(srs, on_ready=on_ready, on_error=on_error)
