"""Universal Transverse Mercator."""

from __future__ import annotations

from pykoord.core.common import D2R
from pykoord.errors import ConfigError
from pykoord.projections.registry import projection_registry
from pykoord.projections.tmerc import TransverseMercator


class UTM(TransverseMercator):
    """UTM zone ``zone`` (1-60), southern hemisphere with ``+south``."""

    depends_on = "tmerc"

    def init(self) -> None:
        c = self.crs
        if not c.zone:
            raise ConfigError("utm: zone must be specified")
        if not 1 <= abs(c.zone) <= 60:
            raise ConfigError(f"utm: zone out of range: {c.zone}")
        c.lat0 = 0.0
        c.long0 = (6 * abs(c.zone) - 183) * D2R
        c.x0 = 500000.0
        c.y0 = 10000000.0 if c.utm_south else 0.0
        c.k0 = 0.9996
        super().init()

    @classmethod
    def type_name(cls) -> str:
        return "utm"


projection_registry.register(UTM)
