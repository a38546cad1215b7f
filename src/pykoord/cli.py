"""pykoord CLI: inspect CRS definitions and transform coordinates."""

from __future__ import annotations

import argparse
import logging
import sys

from pykoord._version import __version__
from pykoord.errors import ProjectionError

_INFO_FIELDS = (
    "title", "proj_name", "units", "datum_code", "datum_name", "ellps",
    "a", "b", "rf", "es", "sphere", "lat0", "lat1", "lat2", "lat_ts",
    "long0", "x0", "y0", "k0", "zone", "to_meter", "from_greenwich", "axis",
)


def _get_ready(srs: str, timeout: float):
    from pykoord.crs.resolver import default_factory

    crs = default_factory().get(srs)
    return crs.wait(timeout)


def cmd_info(args: argparse.Namespace) -> int:
    """Show the derived parameters of a CRS."""
    crs = _get_ready(args.definition, args.timeout)
    print(f"CRS: {crs.srs_code}")
    for name in _INFO_FIELDS:
        value = getattr(crs, name, None)
        if value is None:
            continue
        print(f"{name}: {value}")
    print(f"datum: {crs.datum}")
    return 0


def cmd_transform(args: argparse.Namespace) -> int:
    """Transform one coordinate triple."""
    from pykoord.pipeline import transform

    source = _get_ready(args.source, args.timeout)
    dest = _get_ready(args.dest, args.timeout)
    coords = [args.x, args.y] + ([args.z] if args.z is not None else [])
    p = transform(source, dest, coords)
    if args.z is None:
        print(f"{p.x:.{args.precision}f} {p.y:.{args.precision}f}")
    else:
        print(f"{p.x:.{args.precision}f} {p.y:.{args.precision}f} {p.z:.{args.precision}f}")
    return 0


def cmd_projections(args: argparse.Namespace) -> int:
    """List registered projection algorithms."""
    from pykoord.projections.registry import _ensure_registered, projection_registry

    _ensure_registered()
    for name in projection_registry.available:
        print(name)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pykoord",
        description="pykoord: coordinate reference system transformations",
    )
    parser.add_argument(
        "--version", action="version", version=f"pykoord {__version__}"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument(
        "--timeout", type=float, default=30.0,
        help="Seconds to wait for remote definitions",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # info
    info_parser = subparsers.add_parser("info", help="Show derived CRS parameters")
    info_parser.add_argument("definition", help="EPSG code, proj-string or WKT")

    # transform
    tr_parser = subparsers.add_parser("transform", help="Transform a coordinate")
    tr_parser.add_argument("--from", dest="source", required=True, help="Source CRS")
    tr_parser.add_argument("--to", dest="dest", required=True, help="Destination CRS")
    tr_parser.add_argument("--precision", type=int, default=6)
    tr_parser.add_argument("x", type=float)
    tr_parser.add_argument("y", type=float)
    tr_parser.add_argument("z", type=float, nargs="?")

    # projections
    subparsers.add_parser("projections", help="List projection algorithms")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    commands = {
        "info": cmd_info,
        "transform": cmd_transform,
        "projections": cmd_projections,
    }

    try:
        return commands[args.command](args)
    except ProjectionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
