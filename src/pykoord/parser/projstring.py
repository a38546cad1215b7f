"""Parser for proj-string definitions (``+proj=merc +lon_0=0 ...``)."""

from __future__ import annotations

import logging
import re
from typing import Any

from pykoord.catalog.units import PRIME_MERIDIANS, UNITS
from pykoord.core.common import D2R
from pykoord.errors import ParseError

logger = logging.getLogger(__name__)

# A token starts at a '+' that begins the string or follows whitespace,
# so values such as "+title=Google Mercator" may contain spaces.
_TOKEN_SPLIT = re.compile(r"(?:^|\s+)\+")

# proj key -> (parameter key, converter)
_ANGLES = {
    "lat_0": "lat0",
    "lat_1": "lat1",
    "lat_2": "lat2",
    "lat_ts": "lat_ts",
    "lon_0": "long0",
    "lonc": "longc",
    "alpha": "alpha",
    "gamma": "gamma",
    "lon_1": "long1",
    "lon_2": "long2",
    "from_greenwich": "from_greenwich",
}
_FLOATS = {
    "a": "a",
    "b": "b",
    "rf": "rf",
    "x_0": "x0",
    "y_0": "y0",
    "k_0": "k0",
    "k": "k0",
    "to_meter": "to_meter",
}
_STRINGS = {
    "title": "title",
    "proj": "proj_name",
    "units": "units",
    "datum": "datum_code",
    "nadgrids": "nadgrids",
    "ellps": "ellps",
    "axis": "axis",
}
_FLAGS = {
    "r_a": "r_a",
    "south": "utm_south",
    "no_defs": "no_defs",
    "czech": "czech",
    "no_uoff": "no_uoff",
    "no_off": "no_uoff",
    "no_rot": "no_rot",
}


def _to_float(key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ParseError(f"Invalid numeric value for +{key}: {value!r}") from None


def is_proj_string(text: str) -> bool:
    return text.lstrip().startswith("+")


def parse_proj_string(text: str) -> dict[str, Any]:
    """Parse a proj-string into a parameter mapping.

    Angles are returned in radians. Flags without a value are True.
    Keys this parser does not know are kept verbatim (lowercased) with
    their raw string value.

    Examples:
        >>> params = parse_proj_string("+proj=utm +zone=33 +south")
        >>> params["proj_name"], params["zone"], params["utm_south"]
        ('utm', 33, True)
    """
    if not is_proj_string(text):
        raise ParseError(f"Not a proj-string: {text[:40]!r}")

    params: dict[str, Any] = {}
    for token in _TOKEN_SPLIT.split(text.strip()):
        token = token.strip()
        if not token:
            continue
        key, sep, value = token.partition("=")
        key = key.strip().lower()
        value = value.strip()
        if not sep:
            params[_FLAGS.get(key, key)] = True
            continue

        if key in _ANGLES:
            params[_ANGLES[key]] = _to_float(key, value) * D2R
        elif key in _FLOATS:
            params[_FLOATS[key]] = _to_float(key, value)
        elif key in _STRINGS:
            params[_STRINGS[key]] = value if key == "title" else value.replace(" ", "")
        elif key in _FLAGS:
            params[_FLAGS[key]] = value.lower() not in ("false", "0", "no")
        elif key == "zone":
            try:
                params["zone"] = int(value)
            except ValueError:
                raise ParseError(f"Invalid UTM zone: {value!r}") from None
        elif key == "towgs84":
            params["datum_params"] = [
                _to_float(key, v) for v in value.split(",") if v.strip()
            ]
        elif key == "pm":
            name = value.replace(" ", "")
            degrees = PRIME_MERIDIANS.get(name)
            if degrees is None:
                degrees = _to_float(key, name)
            params["from_greenwich"] = degrees * D2R
        else:
            logger.debug("Keeping unrecognized proj parameter +%s", key)
            params[key] = value

    units = params.get("units")
    if units in UNITS and "to_meter" not in params:
        params["to_meter"] = UNITS[units]

    return params
