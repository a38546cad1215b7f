"""Engine configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_DEFS_URL = "https://spatialreference.org/ref"


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class EngineConfig:
    """Settings shared by a :class:`~pykoord.crs.resolver.CRSFactory`.

    Attributes:
        defs_url: Base URL of the definition lookup service. Definitions are
            fetched from ``{defs_url}/{authority}/{code}/proj4/``.
        timeout: HTTP timeout in seconds for definition fetches.
        strict_definitions: If True, a failed definition fetch is reported
            as a ResourceError instead of falling back to WGS84.
        warn_on_overwrite: Log a warning when a projection name is
            registered twice.
        max_workers: Thread pool size of the HTTP fetcher.
    """

    defs_url: str = DEFAULT_DEFS_URL
    timeout: float = 10.0
    strict_definitions: bool = False
    warn_on_overwrite: bool = True
    max_workers: int = 4

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> EngineConfig:
        """Build a config from ``PYKOORD_*`` environment variables.

        Recognized: PYKOORD_DEFS_URL, PYKOORD_TIMEOUT,
        PYKOORD_STRICT_DEFINITIONS, PYKOORD_WARN_ON_OVERWRITE,
        PYKOORD_MAX_WORKERS. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        config = cls()
        if "PYKOORD_DEFS_URL" in env:
            config.defs_url = env["PYKOORD_DEFS_URL"].rstrip("/")
        if "PYKOORD_TIMEOUT" in env:
            config.timeout = float(env["PYKOORD_TIMEOUT"])
        if "PYKOORD_STRICT_DEFINITIONS" in env:
            config.strict_definitions = _env_bool(env["PYKOORD_STRICT_DEFINITIONS"])
        if "PYKOORD_WARN_ON_OVERWRITE" in env:
            config.warn_on_overwrite = _env_bool(env["PYKOORD_WARN_ON_OVERWRITE"])
        if "PYKOORD_MAX_WORKERS" in env:
            config.max_workers = int(env["PYKOORD_MAX_WORKERS"])
        return config
