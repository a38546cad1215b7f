"""Named reference ellipsoids."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Ellipsoid:
    """A reference ellipsoid.

    Exactly one of ``b`` and ``rf`` is needed; the other is derived.

    Attributes:
        a: Semi-major axis in meters.
        b: Semi-minor axis in meters, if given directly.
        rf: Inverse flattening, if given instead of ``b``.
        name: Human-readable name.
    """

    a: float
    b: float | None = None
    rf: float | None = None
    name: str = ""

    @property
    def semi_minor(self) -> float:
        if self.b is not None:
            return self.b
        if not self.rf:
            return self.a
        return self.a * (1.0 - 1.0 / self.rf)


ELLIPSOIDS: dict[str, Ellipsoid] = {
    "MERIT": Ellipsoid(a=6378137.0, rf=298.257, name="MERIT 1983"),
    "SGS85": Ellipsoid(a=6378136.0, rf=298.257, name="Soviet Geodetic System 85"),
    "GRS80": Ellipsoid(a=6378137.0, rf=298.257222101, name="GRS 1980(IUGG, 1980)"),
    "IAU76": Ellipsoid(a=6378140.0, rf=298.257, name="IAU 1976"),
    "airy": Ellipsoid(a=6377563.396, b=6356256.910, name="Airy 1830"),
    "APL4.": Ellipsoid(a=6378137.0, rf=298.25, name="Appl. Physics. 1965"),
    "NWL9D": Ellipsoid(a=6378145.0, rf=298.25, name="Naval Weapons Lab., 1965"),
    "mod_airy": Ellipsoid(a=6377340.189, b=6356034.446, name="Modified Airy"),
    "andrae": Ellipsoid(a=6377104.43, rf=300.0, name="Andrae 1876 (Den., Iclnd.)"),
    "aust_SA": Ellipsoid(a=6378160.0, rf=298.25, name="Australian Natl & S. Amer. 1969"),
    "GRS67": Ellipsoid(a=6378160.0, rf=298.2471674270, name="GRS 67(IUGG 1967)"),
    "bessel": Ellipsoid(a=6377397.155, rf=299.1528128, name="Bessel 1841"),
    "bess_nam": Ellipsoid(a=6377483.865, rf=299.1528128, name="Bessel 1841 (Namibia)"),
    "clrk66": Ellipsoid(a=6378206.4, b=6356583.8, name="Clarke 1866"),
    "clrk80": Ellipsoid(a=6378249.145, rf=293.4663, name="Clarke 1880 mod."),
    "CPM": Ellipsoid(a=6375738.7, rf=334.29, name="Comm. des Poids et Mesures 1799"),
    "delmbr": Ellipsoid(a=6376428.0, rf=311.5, name="Delambre 1810 (Belgium)"),
    "engelis": Ellipsoid(a=6378136.05, rf=298.2566, name="Engelis 1985"),
    "evrst30": Ellipsoid(a=6377276.345, rf=300.8017, name="Everest 1830"),
    "evrst48": Ellipsoid(a=6377304.063, rf=300.8017, name="Everest 1948"),
    "evrst56": Ellipsoid(a=6377301.243, rf=300.8017, name="Everest 1956"),
    "evrst69": Ellipsoid(a=6377295.664, rf=300.8017, name="Everest 1969"),
    "evrstSS": Ellipsoid(a=6377298.556, rf=300.8017, name="Everest (Sabah & Sarawak)"),
    "fschr60": Ellipsoid(a=6378166.0, rf=298.3, name="Fischer (Mercury Datum) 1960"),
    "fschr60m": Ellipsoid(a=6378155.0, rf=298.3, name="Fischer 1960"),
    "fschr68": Ellipsoid(a=6378150.0, rf=298.3, name="Fischer 1968"),
    "helmert": Ellipsoid(a=6378200.0, rf=298.3, name="Helmert 1906"),
    "hough": Ellipsoid(a=6378270.0, rf=297.0, name="Hough"),
    "intl": Ellipsoid(a=6378388.0, rf=297.0, name="International 1909 (Hayford)"),
    "kaula": Ellipsoid(a=6378163.0, rf=298.24, name="Kaula 1961"),
    "lerch": Ellipsoid(a=6378139.0, rf=298.257, name="Lerch 1979"),
    "mprts": Ellipsoid(a=6397300.0, rf=191.0, name="Maupertius 1738"),
    "new_intl": Ellipsoid(a=6378157.5, b=6356772.2, name="New International 1967"),
    "plessis": Ellipsoid(a=6376523.0, b=6355863.0, name="Plessis 1817 (France)"),
    "krass": Ellipsoid(a=6378245.0, rf=298.3, name="Krassovsky, 1942"),
    "SEasia": Ellipsoid(a=6378155.0, b=6356773.3205, name="Southeast Asia"),
    "walbeck": Ellipsoid(a=6376896.0, b=6355834.8467, name="Walbeck"),
    "WGS60": Ellipsoid(a=6378165.0, rf=298.3, name="WGS 60"),
    "WGS66": Ellipsoid(a=6378145.0, rf=298.25, name="WGS 66"),
    "WGS72": Ellipsoid(a=6378135.0, rf=298.26, name="WGS 72"),
    "WGS84": Ellipsoid(a=6378137.0, rf=298.257223563, name="WGS 84"),
    "sphere": Ellipsoid(a=6370997.0, b=6370997.0, name="Normal Sphere (r=6370997)"),
}


def get_ellipsoid(name: str | None) -> Ellipsoid | None:
    """Look up an ellipsoid by name, or None if unknown."""
    if not name:
        return None
    return ELLIPSOIDS.get(name)
