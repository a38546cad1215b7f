"""Geodetic datum: classification and geocentric conversions."""

from __future__ import annotations

import enum
import math
from typing import Sequence

from pykoord.core.common import HALF_PI, PI, SEC_TO_RAD
from pykoord.core.point import Point
from pykoord.errors import DomainError, UnsupportedDatumError

COS_67P5 = 0.38268343236508977
AD_C = 1.0026000

GEOCENTRIC_MAX_ITER = 30
GEOCENTRIC_TOL = 1.0e-24
ES_TOLERANCE = 5.0e-11


class DatumType(enum.Enum):
    WGS84 = "wgs84"
    NODATUM = "nodatum"
    THREE_PARAM = "3param"
    SEVEN_PARAM = "7param"
    GRIDSHIFT = "gridshift"


def classify_params(
    params: Sequence[float] | None,
) -> tuple[DatumType, tuple[float, ...]]:
    """Classify raw Bursa-Wolf parameters and convert them to working units.

    Rotations (components 4-6) go from arc-seconds to radians and the scale
    (component 7) from ppm to a ``1 + ppm/1e6`` factor.
    """
    if not params:
        return DatumType.WGS84, ()
    values = [float(v) for v in params]
    datum_type = DatumType.WGS84
    if any(values[:3]):
        datum_type = DatumType.THREE_PARAM
    if len(values) > 3 and any(values[3:7]):
        datum_type = DatumType.SEVEN_PARAM
        values += [0.0] * (7 - len(values))
        values[3] *= SEC_TO_RAD
        values[4] *= SEC_TO_RAD
        values[5] *= SEC_TO_RAD
        values[6] = values[6] / 1.0e6 + 1.0
    return datum_type, tuple(values)


class Datum:
    """A datum bound to the ellipsoid constants of its CRS.

    Attributes:
        datum_type: Classification used by the datum shift.
        params: Shift parameters in working units (see classify_params).
        a, b, es, ep2: Ellipsoid constants.
    """

    def __init__(
        self,
        datum_type: DatumType,
        params: Sequence[float],
        a: float,
        b: float,
        es: float,
        ep2: float,
        nadgrids: str | None = None,
    ) -> None:
        self.datum_type = datum_type
        self.params = tuple(params)
        self.a = a
        self.b = b
        self.es = es
        self.ep2 = ep2
        self.nadgrids = nadgrids

    @property
    def is_shifted(self) -> bool:
        """True for 3- and 7-parameter datums."""
        return self.datum_type in (DatumType.THREE_PARAM, DatumType.SEVEN_PARAM)

    def compare(self, other: Datum) -> bool:
        """Return True if both datums describe the same frame."""
        if self.datum_type != other.datum_type:
            return False
        if self.a != other.a or abs(self.es - other.es) > ES_TOLERANCE:
            return False
        if self.datum_type == DatumType.THREE_PARAM:
            return self.params[:3] == other.params[:3]
        if self.datum_type == DatumType.SEVEN_PARAM:
            return self.params[:7] == other.params[:7]
        if self.datum_type == DatumType.GRIDSHIFT:
            raise UnsupportedDatumError(
                f"Grid shift transformations are not implemented ({self.nadgrids})"
            )
        return True

    # ── Geodetic <-> geocentric ─────────────────────────────────────

    def geodetic_to_geocentric(self, p: Point) -> Point:
        """Convert (lon, lat, h) in radians/meters to geocentric X, Y, Z."""
        lon = p.x
        lat = p.y
        height = p.z or 0.0

        # Latitudes slightly past the pole are rounding noise
        if -1.001 * HALF_PI < lat < -HALF_PI:
            lat = -HALF_PI
        elif HALF_PI < lat < 1.001 * HALF_PI:
            lat = HALF_PI
        elif lat < -HALF_PI or lat > HALF_PI:
            raise DomainError(f"geocentric: latitude out of range: {lat}")

        if lon > PI:
            lon -= 2 * PI
        sin_lat = math.sin(lat)
        cos_lat = math.cos(lat)
        rn = self.a / math.sqrt(1.0 - self.es * sin_lat * sin_lat)
        p.x = (rn + height) * cos_lat * math.cos(lon)
        p.y = (rn + height) * cos_lat * math.sin(lon)
        p.z = (rn * (1 - self.es) + height) * sin_lat
        return p

    def geocentric_to_geodetic(self, p: Point) -> Point:
        """Convert geocentric X, Y, Z to (lon, lat, h) by fixed-point iteration."""
        x, y, z = p.x, p.y, p.z or 0.0
        dist_xy = math.sqrt(x * x + y * y)
        dist = math.sqrt(x * x + y * y + z * z)

        if dist_xy / self.a < 1.0e-12:
            lon = 0.0
            if dist / self.a < 1.0e-12:
                # Center of the earth
                p.x, p.y, p.z = 0.0, HALF_PI, -self.b
                return p
        else:
            lon = math.atan2(y, x)

        ct = z / dist
        st = dist_xy / dist
        rx = 1.0 / math.sqrt(1.0 - self.es * (2.0 - self.es) * st * st)
        cphi0 = st * (1.0 - self.es) * rx
        sphi0 = ct * rx
        height = 0.0
        cphi = cphi0
        sphi = sphi0
        for _ in range(GEOCENTRIC_MAX_ITER):
            rn = self.a / math.sqrt(1.0 - self.es * sphi0 * sphi0)
            height = dist_xy * cphi0 + z * sphi0 - rn * (1.0 - self.es * sphi0 * sphi0)
            rk = self.es * rn / (rn + height)
            rx = 1.0 / math.sqrt(1.0 - rk * (2.0 - rk) * st * st)
            cphi = st * (1.0 - rk) * rx
            sphi = ct * rx
            sdphi = sphi * cphi0 - cphi * sphi0
            cphi0 = cphi
            sphi0 = sphi
            if sdphi * sdphi <= GEOCENTRIC_TOL:
                break

        p.x = lon
        p.y = math.atan(sphi / abs(cphi))
        p.z = height
        return p

    def geocentric_to_geodetic_noniter(self, p: Point) -> Point:
        """Closed-form (Bowring) inverse of :meth:`geodetic_to_geocentric`."""
        x, y, z = p.x, p.y, p.z or 0.0
        at_pole = False
        lat = 0.0
        if x != 0.0:
            lon = math.atan2(y, x)
        elif y > 0:
            lon = HALF_PI
        elif y < 0:
            lon = -HALF_PI
        else:
            at_pole = True
            lon = 0.0
            if z > 0.0:
                lat = HALF_PI
            elif z < 0.0:
                lat = -HALF_PI
            else:
                p.x, p.y, p.z = 0.0, HALF_PI, -self.b
                return p

        w2 = x * x + y * y
        w = math.sqrt(w2)
        t0 = z * AD_C
        s0 = math.sqrt(t0 * t0 + w2)
        sin_b0 = t0 / s0
        cos_b0 = w / s0
        sin3_b0 = sin_b0 * sin_b0 * sin_b0
        t1 = z + self.b * self.ep2 * sin3_b0
        sum_ = w - self.a * self.es * cos_b0 * cos_b0 * cos_b0
        s1 = math.sqrt(t1 * t1 + sum_ * sum_)
        sin_p1 = t1 / s1
        cos_p1 = sum_ / s1
        rn = self.a / math.sqrt(1.0 - self.es * sin_p1 * sin_p1)
        if cos_p1 >= COS_67P5:
            height = w / cos_p1 - rn
        elif cos_p1 <= -COS_67P5:
            height = w / -cos_p1 - rn
        else:
            height = z / sin_p1 + rn * (self.es - 1.0)
        if not at_pole:
            lat = math.atan(sin_p1 / cos_p1)
        p.x, p.y, p.z = lon, lat, height
        return p

    # ── Shifts ──────────────────────────────────────────────────────

    def geocentric_to_wgs84(self, p: Point) -> Point:
        """Apply this datum's shift, taking geocentric coordinates to WGS84."""
        t = self.params
        if self.datum_type == DatumType.THREE_PARAM:
            p.x += t[0]
            p.y += t[1]
            p.z += t[2]
        elif self.datum_type == DatumType.SEVEN_PARAM:
            rx, ry, rz, m = t[3], t[4], t[5], t[6]
            x = m * (p.x - rz * p.y + ry * p.z) + t[0]
            y = m * (rz * p.x + p.y - rx * p.z) + t[1]
            z = m * (-ry * p.x + rx * p.y + p.z) + t[2]
            p.x, p.y, p.z = x, y, z
        return p

    def geocentric_from_wgs84(self, p: Point) -> Point:
        """Inverse of :meth:`geocentric_to_wgs84`."""
        t = self.params
        if self.datum_type == DatumType.THREE_PARAM:
            p.x -= t[0]
            p.y -= t[1]
            p.z -= t[2]
        elif self.datum_type == DatumType.SEVEN_PARAM:
            rx, ry, rz, m = t[3], t[4], t[5], t[6]
            xt = (p.x - t[0]) / m
            yt = (p.y - t[1]) / m
            zt = (p.z - t[2]) / m
            p.x = xt + rz * yt - ry * zt
            p.y = -rz * xt + yt + rx * zt
            p.z = ry * xt - rx * yt + zt
        return p

    def __repr__(self) -> str:
        return f"Datum({self.datum_type.value}, params={list(self.params)})"
