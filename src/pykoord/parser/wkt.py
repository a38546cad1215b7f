"""Parser for WKT (Well-Known Text, version 1) CRS definitions.

Grammar: ``NAME[arg, arg, ...]`` where an argument is a quoted string, a
number, a bare keyword (``EAST``) or a nested node. Commas inside nested
brackets or quotes do not split the parent's arguments.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pykoord.catalog.datums import datum_code_for_wkt_name
from pykoord.catalog.units import WKT_PROJECTIONS
from pykoord.core.common import D2R
from pykoord.errors import ParseError

logger = logging.getLogger(__name__)

_NODE = re.compile(r"^\s*(?P<name>\w+)\s*\[(?P<body>.*)\]\s*$", re.DOTALL)

WKT_ROOTS = ("PROJCS", "GEOGCS", "GEOCCS", "LOCAL_CS")

_AXIS_DIRECTIONS = {
    "EAST": "e",
    "WEST": "w",
    "NORTH": "n",
    "SOUTH": "s",
    "UP": "u",
    "DOWN": "d",
}

_LINEAR_UNITS = {"metre": "m", "meter": "m", "foot": "ft", "us survey foot": "us-ft"}

# PARAMETER name -> (parameter key, is_angle)
_PARAMETERS = {
    "false_easting": ("x0", False),
    "false_northing": ("y0", False),
    "scale_factor": ("k0", False),
    "central_meridian": ("long0", True),
    "longitude_of_center": ("long0", True),
    "latitude_of_origin": ("lat0", True),
    "latitude_of_center": ("lat0", True),
    "standard_parallel_1": ("lat1", True),
    "standard_parallel_2": ("lat2", True),
    "pseudo_standard_parallel_1": ("lat_ts", True),
    "azimuth": ("alpha", True),
    "rectified_grid_angle": ("gamma", True),
    "latitude_of_point_1": ("lat1", True),
    "longitude_of_point_1": ("long1", True),
    "latitude_of_point_2": ("lat2", True),
    "longitude_of_point_2": ("long2", True),
}


def is_wkt(text: str) -> bool:
    stripped = text.lstrip().upper()
    return any(stripped.startswith(root) for root in WKT_ROOTS)


def split_arguments(body: str) -> list[str]:
    """Split a node body on top-level commas.

    Examples:
        >>> split_arguments('"WGS84",SPHEROID["WGS84",6378137,298.25],1')
        ['"WGS84"', 'SPHEROID["WGS84",6378137,298.25]', '1']
    """
    args: list[str] = []
    depth = 0
    in_quote = False
    current: list[str] = []
    for ch in body:
        if ch == '"':
            in_quote = not in_quote
        elif not in_quote:
            if ch == "[":
                depth += 1
            elif ch == "]":
                depth -= 1
                if depth < 0:
                    raise ParseError("Unbalanced ']' in WKT")
            elif ch == "," and depth == 0:
                args.append("".join(current).strip())
                current = []
                continue
        current.append(ch)
    if depth != 0 or in_quote:
        raise ParseError("Unbalanced brackets or quotes in WKT")
    tail = "".join(current).strip()
    if tail or args:
        args.append(tail)
    return args


def _unquote(value: str) -> str:
    return value.strip().strip('"')


def _number(node: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ParseError(f"{node}: expected a number, got {value!r}") from None


class _WktReader:
    """Walks a WKT tree and fills one parameter mapping."""

    def __init__(self) -> None:
        self.params: dict[str, Any] = {}
        self._axis_index = 0
        self._root: str | None = None

    def visit(self, text: str, parent: str | None = None) -> None:
        m = _NODE.match(text)
        if not m:
            raise ParseError(f"Malformed WKT node: {text[:40]!r}")
        name = m.group("name").upper()
        args = split_arguments(m.group("body"))
        if self._root is None:
            self._root = name

        if name == "TOWGS84":
            label = ""
        else:
            label = _unquote(args.pop(0)) if args else ""

        children = [a for a in args if _NODE.match(a)]
        values = [a for a in args if not _NODE.match(a)]
        self._apply(name, label, values, parent)

        for child in children:
            self.visit(child, parent=name)

    def _apply(self, name: str, label: str, values: list[str], parent: str | None) -> None:
        p = self.params
        if name == "LOCAL_CS":
            p["proj_name"] = "identity"
            p["local_cs"] = True
            p["srs_code"] = label
        elif name == "GEOGCS":
            p.setdefault("proj_name", "longlat")
            p["geocs_code"] = label
            p.setdefault("srs_code", label)
            if parent is None:
                p["units"] = "degrees"
        elif name == "PROJCS":
            p["srs_code"] = label
        elif name == "PROJECTION":
            proj_name = WKT_PROJECTIONS.get(label)
            if proj_name is None:
                logger.debug("Unmapped WKT projection %r", label)
                proj_name = label
            p["proj_name"] = proj_name
        elif name == "DATUM":
            p["datum_name"] = label
            code = datum_code_for_wkt_name(label)
            if code is not None:
                p["datum_code"] = code
        elif name == "LOCAL_DATUM":
            p["datum_code"] = "none"
        elif name == "SPHEROID":
            p["ellps"] = label
            p["a"] = _number(name, values[0])
            p["rf"] = _number(name, values[1])
        elif name == "PRIMEM":
            p["from_greenwich"] = _number(name, values[0]) * D2R
        elif name == "UNIT":
            if parent in ("PROJCS", "LOCAL_CS"):
                p["units"] = _LINEAR_UNITS.get(label.lower(), label)
                p["to_meter"] = _number(name, values[0])
        elif name == "PARAMETER":
            target = _PARAMETERS.get(label.lower())
            if target is None:
                p[label.lower()] = _number(name, values[0])
                return
            key, is_angle = target
            value = _number(name, values[0])
            p[key] = value * D2R if is_angle else value
        elif name == "TOWGS84":
            p["datum_params"] = [_number(name, v) for v in values]
        elif name == "AXIS":
            # Only axes of the outermost CRS define the coordinate order
            if parent != self._root:
                return
            direction = _AXIS_DIRECTIONS.get(_unquote(values[0]).upper()) if values else None
            if direction is None:
                raise ParseError(f"Unknown AXIS direction in {label!r}")
            axis = list(p.get("axis", "enu"))
            position = {"x": 0, "y": 1, "z": 2}.get(label.lower(), self._axis_index)
            if position > 2:
                raise ParseError("More than three AXIS nodes in WKT")
            axis[position] = direction
            p["axis"] = "".join(axis)
            self._axis_index += 1


def parse_wkt(text: str) -> dict[str, Any]:
    """Parse a WKT definition into a parameter mapping.

    Examples:
        >>> params = parse_wkt(
        ...     'GEOGCS["WGS84",DATUM["WGS84",'
        ...     'SPHEROID["WGS84",6378137,298.257223563]]]'
        ... )
        >>> params["a"], params["rf"], params["datum_code"]
        (6378137.0, 298.257223563, 'WGS84')
    """
    if not _NODE.match(text):
        raise ParseError(f"Not a WKT definition: {text[:40]!r}")
    reader = _WktReader()
    reader.visit(text.strip())
    return reader.params
