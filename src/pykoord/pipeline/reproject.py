"""Point transformation between two ready CRSs."""

from __future__ import annotations

import logging
from typing import Any

from pykoord.core.common import D2R, R2D
from pykoord.core.point import Point
from pykoord.crs.crs import CRS
from pykoord.crs.datum import DatumType
from pykoord.crs.resolver import AXIS_DIRECTIONS
from pykoord.pipeline.datum_shift import datum_transform

logger = logging.getLogger(__name__)

_SHIFTED = (DatumType.THREE_PARAM, DatumType.SEVEN_PARAM)


def adjust_axis(crs: CRS, denorm: bool, p: Point) -> Point:
    """Convert between ``crs``'s axis order and east-north-up.

    With ``denorm=False`` the point is read in the CRS's axis order and
    rewritten as (east, north, up); with ``denorm=True`` the reverse.

    Examples:
        >>> class _Crs: axis = "neu"
        >>> adjust_axis(_Crs, False, Point(48.85, 2.35))
        Point(x=2.35, y=48.85, z=0.0)
    """
    values = (p.x, p.y, p.z)
    out = [0.0, 0.0, 0.0]
    for i, direction in enumerate(crs.axis):
        component, sign = AXIS_DIRECTIONS[direction]
        if denorm:
            out[i] = sign * values[component]
        else:
            out[component] = sign * values[i]
    p.x, p.y, p.z = out
    return p


def _needs_wgs84_hop(source: CRS, dest: CRS) -> bool:
    if source.datum is None or dest.datum is None:
        return False
    shifted = (
        source.datum.datum_type in _SHIFTED and dest.datum_code != "WGS84"
    ) or (
        dest.datum.datum_type in _SHIFTED and source.datum_code != "WGS84"
    )
    return shifted and not source.datum.compare(dest.datum)


def transform(source: CRS, dest: CRS, point: Any, wgs84: CRS | None = None) -> Point:
    """Transform ``point`` from ``source`` to ``dest`` coordinates.

    Geographic CRSs take and return degrees; projected CRSs use their
    units. The point is mutated in place when it is a :class:`Point`.

    Args:
        source: Ready source CRS.
        dest: Ready destination CRS.
        point: Point, ``(x, y[, z])`` sequence or ``"x,y[,z]"`` string.
        wgs84: CRS used as the intermediate frame when a datum shift
            needs one. Defaults to the default factory's WGS84.

    Raises:
        NotReadyError: If either CRS is not ready.
        DomainError, ConvergenceError: From the projection algorithms.
        UnsupportedDatumError: For grid shift datums.
    """
    source.require_ready()
    dest.require_ready()
    p = Point.from_any(point)

    if _needs_wgs84_hop(source, dest):
        if wgs84 is None:
            from pykoord.crs.resolver import default_factory

            wgs84 = default_factory().wgs84
        logger.debug("Routing %s -> %s through WGS84", source.srs_code, dest.srs_code)
        transform(source, wgs84, p, wgs84)
        source = wgs84

    if source.axis != "enu":
        adjust_axis(source, False, p)

    if source.is_geographic:
        p.x *= D2R
        p.y *= D2R
    else:
        if source.to_meter:
            p.x *= source.to_meter
            p.y *= source.to_meter
        source.inverse(p)

    if source.from_greenwich:
        p.x += source.from_greenwich

    datum_transform(source.datum, dest.datum, p)

    if dest.from_greenwich:
        p.x -= dest.from_greenwich

    if dest.is_geographic:
        p.x *= R2D
        p.y *= R2D
    else:
        dest.forward(p)
        if dest.to_meter:
            p.x /= dest.to_meter
            p.y /= dest.to_meter

    if dest.axis != "enu":
        adjust_axis(dest, True, p)
    return p
