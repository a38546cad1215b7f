"""Prime meridians, linear units and WKT projection names."""

from __future__ import annotations

# Degrees east of Greenwich
PRIME_MERIDIANS: dict[str, float] = {
    "greenwich": 0.0,
    "lisbon": -9.131906111111,
    "paris": 2.337229166667,
    "bogota": -74.080916666667,
    "madrid": -3.687938888889,
    "rome": 12.452333333333,
    "bern": 7.439583333333,
    "jakarta": 106.807719444444,
    "ferro": -17.666666666667,
    "brussels": 4.367975,
    "stockholm": 18.058277777778,
    "athens": 23.7163375,
    "oslo": 10.722916666667,
}

# Meters per unit
UNITS: dict[str, float] = {
    "m": 1.0,
    "km": 1000.0,
    "dm": 0.1,
    "cm": 0.01,
    "mm": 0.001,
    "ft": 0.3048,
    "us-ft": 1200.0 / 3937.0,
    "yd": 0.9144,
    "us-yd": 3600.0 / 3937.0,
    "mi": 1609.344,
    "us-mi": 6336000.0 / 3937.0,
    "fath": 1.8288,
    "link": 0.201168,
    "ch": 20.1168,
    "ind-yd": 0.91398530,
    "ind-ft": 0.30479951,
}

# Projection names used in WKT PROJECTION nodes -> registry names
WKT_PROJECTIONS: dict[str, str] = {
    "Lambert Tangential Conformal Conic Projection": "lcc",
    "Lambert_Conformal_Conic": "lcc",
    "Lambert_Conformal_Conic_1SP": "lcc",
    "Lambert_Conformal_Conic_2SP": "lcc",
    "Mercator": "merc",
    "Popular Visualisation Pseudo Mercator": "merc",
    "Mercator_1SP": "merc",
    "Mercator_Auxiliary_Sphere": "merc",
    "Transverse_Mercator": "tmerc",
    "Transverse Mercator": "tmerc",
    "Lambert Azimuthal Equal Area": "laea",
    "Lambert_Azimuthal_Equal_Area": "laea",
    "Universal Transverse Mercator System": "utm",
    "Albers_Conic_Equal_Area": "aea",
    "Albers": "aea",
    "Oblique_Stereographic": "sterea",
    "Polar_Stereographic": "stere",
    "Stereographic": "stere",
    "Sinusoidal": "sinu",
    "Equirectangular": "eqc",
    "Cylindrical_Equal_Area": "cea",
    "Miller_Cylindrical": "mill",
    "Orthographic": "ortho",
    "Gnomonic": "gnom",
    "Hotine_Oblique_Mercator": "omerc",
    "Hotine_Oblique_Mercator_Azimuth_Center": "omerc",
    "Hotine_Oblique_Mercator_Azimuth_Natural_Origin": "omerc",
    "Oblique_Mercator": "omerc",
    "Swiss_Oblique_Cylindrical": "somerc",
    "Krovak": "krovak",
    "Cassini_Soldner": "cass",
    "Cassini": "cass",
    "Polyconic": "poly",
    "American_Polyconic": "poly",
    "Equidistant_Conic": "eqdc",
    "Azimuthal_Equidistant": "aeqd",
    "Mollweide": "moll",
}
