"""Rewriting of URN and URL style CRS identifiers to ``AUTH:CODE``."""

from __future__ import annotations

import re

_OGC_URL = re.compile(
    r"^https?://www\.opengis\.net/def/crs/(?P<auth>[^/]+)/[^/]*/(?P<code>[^/]+)/?$",
    re.IGNORECASE,
)


def normalize_identifier(text: str) -> str:
    """Rewrite a CRS identifier to canonical ``AUTH:CODE`` form.

    Handles:
        urn:ogc:def:crs:EPSG::4326              -> EPSG:4326
        urn:x-ogc:def:crs:EPSG:6.6:4326         -> EPSG:4326
        http://www.opengis.net/gml/srs/epsg.xml#4326 -> EPSG:4326
        http://www.opengis.net/def/crs/EPSG/0/3857   -> EPSG:3857
        http://.../IGNF/RIG.xml#LAMB93          -> IGNF:LAMB93

    Anything else is upper-cased and returned as-is.
    """
    code = text.strip()
    if code.lower().startswith("urn:"):
        parts = code.split(":")
        if (
            len(parts) >= 6
            and parts[1].lower() in ("ogc", "x-ogc")
            and parts[2].lower() == "def"
            and parts[3].lower() == "crs"
        ):
            code = f"{parts[4]}:{parts[-1]}"
    elif code.lower().startswith(("http://", "https://")):
        m = _OGC_URL.match(code)
        if m:
            code = f"{m.group('auth')}:{m.group('code')}"
        elif "#" in code:
            base, _, number = code.partition("#")
            if re.search(r"epsg", base, re.IGNORECASE):
                code = f"EPSG:{number}"
            elif "RIG.xml" in base:
                code = f"IGNF:{number}"
    return code.upper()


def split_authority(code: str) -> tuple[str, str]:
    """Split ``AUTH:CODE`` into ``(auth, number)``; ``("", code)`` otherwise."""
    auth, sep, number = code.partition(":")
    if not sep:
        return "", code
    return auth.lower(), number
