"""Definition parsing: proj-strings, WKT and CRS identifiers."""

from __future__ import annotations

from typing import Any

from pykoord.errors import ParseError
from pykoord.parser.identifiers import normalize_identifier, split_authority
from pykoord.parser.projstring import is_proj_string, parse_proj_string
from pykoord.parser.wkt import is_wkt, parse_wkt


def parse_definition(text: str) -> dict[str, Any]:
    """Parse a proj-string or WKT definition into a parameter mapping.

    Both syntaxes produce the same keys, so downstream derivation does not
    care which one was used.

    Raises:
        ParseError: If the text is neither syntax or yields no parameters.
    """
    if not isinstance(text, str) or not text.strip():
        raise ParseError("Empty CRS definition")
    if is_wkt(text):
        params = parse_wkt(text)
    elif is_proj_string(text):
        params = parse_proj_string(text)
    else:
        raise ParseError(f"Unrecognized CRS definition: {text[:60]!r}")
    if not params:
        raise ParseError(f"CRS definition has no parameters: {text[:60]!r}")
    return params


__all__ = [
    "is_proj_string",
    "is_wkt",
    "normalize_identifier",
    "parse_definition",
    "parse_proj_string",
    "parse_wkt",
    "split_authority",
]
