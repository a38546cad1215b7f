"""CRS descriptor with its readiness lifecycle."""

from __future__ import annotations

import enum
import logging
import threading
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Callable

from pykoord.core.point import Point
from pykoord.errors import NotReadyError

if TYPE_CHECKING:
    from pykoord.crs.datum import Datum
    from pykoord.projections.base import Projection

logger = logging.getLogger(__name__)

ReadyCallback = Callable[["CRS"], Any]
ErrorCallback = Callable[[Exception], Any]


class CRSState(enum.Enum):
    PARSING = "parsing"
    DERIVED = "derived"
    READY = "ready"
    FAILED = "failed"


class CRS:
    """A coordinate reference system.

    Created in PARSING state, moves to DERIVED once ellipsoid, datum and
    axis constants are computed, and to READY once its projection algorithm
    has been resolved and initialized. A CRS is read-only once READY:
    projections store their constants on it during ``init`` and never
    write to it afterwards.

    Continuations registered with :meth:`when_ready` before readiness run
    exactly once, in registration order, as soon as the CRS is READY (or
    receive the error if it FAILED).

    Examples:
        >>> from pykoord import get_crs
        >>> crs = get_crs("EPSG:3857")
        >>> crs.is_ready, crs.proj_name, crs.sphere
        (True, 'merc', True)
    """

    # Defaults for parameters a definition may omit
    title: str | None = None
    proj_name: str | None = None
    units: str | None = None
    datum_code: str | None = None
    datum_name: str | None = None
    ellps: str | None = None
    lat0: float = 0.0
    lat1: float | None = None
    lat2: float | None = None
    lat_ts: float | None = None
    long0: float = 0.0
    longc: float | None = None
    alpha: float | None = None
    gamma: float | None = None
    long1: float | None = None
    long2: float | None = None
    x0: float = 0.0
    y0: float = 0.0
    k0: float = 1.0
    zone: int | None = None
    utm_south: bool = False
    to_meter: float | None = None
    from_greenwich: float = 0.0
    axis: str = "enu"
    local_cs: bool = False
    datum: Datum | None = None

    def __init__(self, srs_code: str, definition: str | None = None) -> None:
        object.__setattr__(self, "_state", CRSState.PARSING)
        self.srs_code = srs_code
        self.definition = definition
        self.error: Exception | None = None
        self._queue: list[tuple[ReadyCallback, ErrorCallback | None]] = []
        self._draining = False
        self._lock = threading.Lock()
        self._projection: Projection | None = None
        self._future: Future[CRS] = Future()

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_state") is CRSState.READY:
            raise AttributeError(f"CRS {self.srs_code} is ready and read-only")
        object.__setattr__(self, name, value)

    # ── State ───────────────────────────────────────────────────────

    @property
    def state(self) -> CRSState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is CRSState.READY

    @property
    def projection(self) -> Projection:
        self.require_ready()
        assert self._projection is not None
        return self._projection

    def require_ready(self) -> None:
        if self._state is not CRSState.READY:
            raise NotReadyError(
                f"CRS {self.srs_code} is not ready (state: {self._state.value})"
            )

    def apply_constants(self, constants: dict[str, Any]) -> None:
        """Store derived constants and move to DERIVED."""
        for key, value in constants.items():
            setattr(self, key, value)
        self._set_state(CRSState.DERIVED)

    def _set_state(self, state: CRSState) -> None:
        object.__setattr__(self, "_state", state)

    # ── Continuations ───────────────────────────────────────────────

    def when_ready(
        self, on_ready: ReadyCallback, on_error: ErrorCallback | None = None
    ) -> None:
        """Run ``on_ready(crs)`` once the CRS is READY.

        If the CRS is already READY the callback runs immediately and any
        exception it raises propagates to the caller. If the CRS fails,
        ``on_error(exc)`` runs instead (when given).

        A queued ``on_ready`` that raises has its exception passed to its
        ``on_error``, or logged when there is none; later continuations
        still run.
        """
        with self._lock:
            if self._draining or self._state not in (CRSState.READY, CRSState.FAILED):
                self._queue.append((on_ready, on_error))
                return
        if self._state is CRSState.READY:
            on_ready(self)
        elif on_error is not None:
            assert self.error is not None
            on_error(self.error)

    def wait(self, timeout: float | None = None) -> CRS:
        """Block until READY and return self; raise the failure otherwise."""
        return self._future.result(timeout)

    @property
    def future(self) -> Future[CRS]:
        """Future resolved with this CRS on readiness, or its error."""
        return self._future

    def mark_ready(self, projection: Projection) -> None:
        """Attach the initialized projection and drain queued continuations."""
        with self._lock:
            object.__setattr__(self, "_projection", projection)
            object.__setattr__(self, "_draining", True)
            self._set_state(CRSState.READY)
        logger.info("CRS %s ready (%s)", self.srs_code, self.proj_name)
        self._drain()
        self._future.set_result(self)

    def fail(self, error: Exception) -> None:
        """Move to FAILED and deliver ``error`` to queued continuations."""
        with self._lock:
            self.error = error
            self._draining = True
            self._set_state(CRSState.FAILED)
        logger.warning("CRS %s failed: %s", self.srs_code, error)
        self._drain()
        self._future.set_exception(error)

    def _drain(self) -> None:
        while True:
            with self._lock:
                if not self._queue:
                    object.__setattr__(self, "_draining", False)
                    return
                on_ready, on_error = self._queue.pop(0)
            self._dispatch(on_ready, on_error)

    def _dispatch(self, on_ready: ReadyCallback, on_error: ErrorCallback | None) -> None:
        if self._state is CRSState.READY:
            try:
                on_ready(self)
            except Exception as exc:
                if on_error is None:
                    logger.exception("Continuation for CRS %s raised", self.srs_code)
                else:
                    self._report(on_error, exc)
        elif on_error is not None:
            assert self.error is not None
            self._report(on_error, self.error)

    def _report(self, on_error: ErrorCallback, error: Exception) -> None:
        try:
            on_error(error)
        except Exception:
            logger.exception("Error callback for CRS %s raised", self.srs_code)

    # ── Projection ──────────────────────────────────────────────────

    @property
    def is_geographic(self) -> bool:
        return self.proj_name in ("longlat", "identity")

    def forward(self, point: Point) -> Point:
        """Project geodetic radians to this CRS's projected coordinates."""
        return self.projection.forward(point)

    def inverse(self, point: Point) -> Point:
        """Unproject this CRS's coordinates to geodetic radians."""
        return self.projection.inverse(point)

    def __repr__(self) -> str:
        return f"CRS({self.srs_code!r}, proj={self.proj_name}, state={self._state.value})"
