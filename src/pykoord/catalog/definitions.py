"""Built-in CRS definitions, keyed by code."""

from __future__ import annotations

_WEB_MERCATOR = (
    "+title=Google Mercator +proj=merc +a=6378137 +b=6378137 +lat_ts=0.0 "
    "+lon_0=0.0 +x_0=0.0 +y_0=0 +k=1.0 +units=m +nadgrids=@null +no_defs"
)

DEFINITIONS: dict[str, str] = {
    "WGS84": "+title=long/lat:WGS84 +proj=longlat +ellps=WGS84 +datum=WGS84 +units=degrees",
    "EPSG:4326": (
        "+title=long/lat:WGS84 +proj=longlat +a=6378137.0 +b=6356752.31424518 "
        "+ellps=WGS84 +datum=WGS84 +units=degrees"
    ),
    "EPSG:4269": (
        "+title=long/lat:NAD83 +proj=longlat +a=6378137.0 +b=6356752.31414036 "
        "+ellps=GRS80 +datum=NAD83 +units=degrees"
    ),
    "EPSG:3857": _WEB_MERCATOR,
    "EPSG:3875": _WEB_MERCATOR,
    "EPSG:3785": _WEB_MERCATOR,
    "EPSG:900913": _WEB_MERCATOR,
    "EPSG:102113": _WEB_MERCATOR,
    "GOOGLE": _WEB_MERCATOR,
}
