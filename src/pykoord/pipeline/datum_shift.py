"""Datum shift between two geodetic frames via geocentric coordinates."""

from __future__ import annotations

import logging

from pykoord.core.point import Point
from pykoord.crs.datum import Datum, DatumType
from pykoord.errors import UnsupportedDatumError

logger = logging.getLogger(__name__)

# Number of points that went through the geocentric path
shift_counter = 0


def datum_transform(source: Datum, dest: Datum, p: Point) -> Point:
    """Move a geodetic point (radians, meters) from ``source`` to ``dest``.

    The point is left untouched when either datum is NODATUM or both
    datums compare equal. Otherwise it is converted to geocentric
    coordinates, shifted to WGS84 by the source parameters, shifted from
    WGS84 by the destination parameters, and converted back.

    Raises:
        UnsupportedDatumError: If either datum is a grid shift.
    """
    global shift_counter

    if source.datum_type is DatumType.NODATUM or dest.datum_type is DatumType.NODATUM:
        return p
    if DatumType.GRIDSHIFT in (source.datum_type, dest.datum_type):
        grids = source.nadgrids or dest.nadgrids
        raise UnsupportedDatumError(f"Grid shift transformations are not implemented ({grids})")
    if source.compare(dest):
        return p

    if (
        source.a != dest.a
        or source.es != dest.es
        or source.is_shifted
        or dest.is_shifted
    ):
        shift_counter += 1
        logger.debug("Datum shift %r -> %r", source, dest)
        source.geodetic_to_geocentric(p)
        if source.is_shifted:
            source.geocentric_to_wgs84(p)
        if dest.is_shifted:
            dest.geocentric_from_wgs84(p)
        dest.geocentric_to_geodetic(p)
    return p
