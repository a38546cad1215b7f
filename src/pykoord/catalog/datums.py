"""Named geodetic datums and their shifts to WGS84."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DatumDefinition:
    """Catalog entry for a datum.

    Attributes:
        ellipse: Name of the ellipsoid in the ellipsoid catalog.
        name: Descriptive datum name.
        towgs84: Up to 7 Bursa-Wolf parameters (meters, arc-seconds, ppm),
            or None for grid-based datums.
        nadgrids: Grid file list for grid-shift datums.
    """

    ellipse: str
    name: str
    towgs84: tuple[float, ...] | None = None
    nadgrids: str | None = None


DATUMS: dict[str, DatumDefinition] = {
    "WGS84": DatumDefinition(
        ellipse="WGS84", name="WGS84", towgs84=(0.0, 0.0, 0.0)
    ),
    "GGRS87": DatumDefinition(
        ellipse="GRS80",
        name="Greek_Geodetic_Reference_System_1987",
        towgs84=(-199.87, 74.79, 246.62),
    ),
    "NAD83": DatumDefinition(
        ellipse="GRS80", name="North_American_Datum_1983", towgs84=(0.0, 0.0, 0.0)
    ),
    "NAD27": DatumDefinition(
        ellipse="clrk66",
        name="North_American_Datum_1927",
        nadgrids="@conus,@alaska,@ntv2_0.gsb,@ntv1_can.dat",
    ),
    "potsdam": DatumDefinition(
        ellipse="bessel",
        name="Potsdam Rauenberg 1950 DHDN",
        towgs84=(606.0, 23.0, 413.0),
    ),
    "carthage": DatumDefinition(
        ellipse="clrk80", name="Carthage 1934 Tunisia", towgs84=(-263.0, 6.0, 431.0)
    ),
    "hermannskogel": DatumDefinition(
        ellipse="bessel", name="Hermannskogel", towgs84=(653.0, -212.0, 449.0)
    ),
    "ire65": DatumDefinition(
        ellipse="mod_airy",
        name="Ireland 1965",
        towgs84=(482.530, -130.596, 564.557, -1.042, -0.214, -0.631, 8.15),
    ),
    "nzgd49": DatumDefinition(
        ellipse="intl",
        name="New Zealand Geodetic Datum 1949",
        towgs84=(59.47, -5.04, 187.44, 0.47, -0.1, 1.024, -4.5993),
    ),
    "OSGB36": DatumDefinition(
        ellipse="airy",
        name="Airy 1830",
        towgs84=(446.448, -125.157, 542.060, 0.1502, 0.2470, 0.8421, -20.4894),
    ),
}
DATUMS["OSB36"] = DATUMS["OSGB36"]

# WKT datum names that refer to catalog entries
WKT_DATUM_ALIASES: dict[str, str] = {
    "wgs84": "WGS84",
    "wgs_1984": "WGS84",
    "d_wgs_1984": "WGS84",
    "world geodetic system 1984": "WGS84",
    "north_american_datum_1983": "NAD83",
    "d_north_american_1983": "NAD83",
    "north_american_datum_1927": "NAD27",
    "osgb_1936": "OSGB36",
    "ossb_1936": "OSGB36",
    "deutsches_hauptdreiecksnetz": "potsdam",
    "new_zealand_geodetic_datum_1949": "nzgd49",
    "greek_geodetic_reference_system_1987": "GGRS87",
    "ireland_1965": "ire65",
}


def get_datum(code: str | None) -> DatumDefinition | None:
    """Look up a datum by code, or None if unknown."""
    if not code:
        return None
    return DATUMS.get(code)


def datum_code_for_wkt_name(name: str) -> str | None:
    """Map a WKT ``DATUM`` name to a catalog code, if one matches."""
    if name in DATUMS:
        return name
    return WKT_DATUM_ALIASES.get(name.strip().lower())
