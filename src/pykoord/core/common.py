"""Numeric constants and helper functions shared by the projections.

The series helpers (``e0fn``..``e3fn``, ``mlfn``, ``pj_enfn``, ``pj_mlfn``)
compute meridional distance on the ellipsoid. ``msfnz``, ``tsfnz`` and
``qsfnz`` are the standard conformal and authalic latitude functions
(Snyder, "Map Projections: A Working Manual", USGS PP 1395).
"""

from __future__ import annotations

import math

from pykoord.errors import ConvergenceError

PI = math.pi
HALF_PI = math.pi / 2
TWO_PI = math.pi * 2
FORTPI = math.pi / 4
R2D = 180.0 / math.pi
D2R = math.pi / 180.0
SEC_TO_RAD = 4.84813681109536e-6
EPSLN = 1.0e-10
MAX_ITER = 20

SRS_WGS84_SEMIMAJOR = 6378137.0

# Authalic radius series
SIXTH = 1.0 / 6.0
RA4 = 17.0 / 360.0
RA6 = 67.0 / 3024.0

# Meridional distance series (pj_enfn)
C00 = 1.0
C02 = 0.25
C04 = 0.046875
C06 = 0.01953125
C08 = 0.01068115234375
C22 = 0.75
C44 = 0.46875
C46 = 0.01302083333333333333
C48 = 0.00712076822916666666
C66 = 0.36458333333333333333
C68 = 0.00569661458333333333
C88 = 0.3076171875


def sign(x: float) -> int:
    return -1 if x < 0 else 1


def adjust_lon(x: float) -> float:
    """Wrap a longitude in radians into (-pi, pi]."""
    if -PI < x <= PI:
        return x
    x = math.fmod(x + PI, TWO_PI)
    if x <= 0:
        x += TWO_PI
    return x - PI


def adjust_lat(x: float) -> float:
    """Clamp a latitude in radians into [-pi/2, pi/2]."""
    return max(-HALF_PI, min(HALF_PI, x))


def asinz(x: float) -> float:
    """``asin`` that clamps its argument into [-1, 1]."""
    if abs(x) > 1.0:
        x = 1.0 if x > 1.0 else -1.0
    return math.asin(x)


def msfnz(eccent: float, sinphi: float, cosphi: float) -> float:
    con = eccent * sinphi
    return cosphi / math.sqrt(1.0 - con * con)


def tsfnz(eccent: float, phi: float, sinphi: float) -> float:
    con = eccent * sinphi
    com = 0.5 * eccent
    con = math.pow((1.0 - con) / (1.0 + con), com)
    return math.tan(0.5 * (HALF_PI - phi)) / con


def phi2z(eccent: float, ts: float) -> float:
    """Latitude from the conformal ``ts`` value (inverse of :func:`tsfnz`)."""
    eccnth = 0.5 * eccent
    phi = HALF_PI - 2 * math.atan(ts)
    for _ in range(16):
        con = eccent * math.sin(phi)
        dphi = HALF_PI - 2 * math.atan(ts * math.pow((1.0 - con) / (1.0 + con), eccnth)) - phi
        phi += dphi
        if abs(dphi) <= 1.0e-10:
            return phi
    raise ConvergenceError("phi2z: no convergence")


def qsfnz(eccent: float, sinphi: float) -> float:
    if eccent > 1.0e-7:
        con = eccent * sinphi
        return (1.0 - eccent * eccent) * (
            sinphi / (1.0 - con * con)
            - (0.5 / eccent) * math.log((1.0 - con) / (1.0 + con))
        )
    return 2.0 * sinphi


def e0fn(x: float) -> float:
    return 1.0 - 0.25 * x * (1.0 + x / 16.0 * (3.0 + 1.25 * x))


def e1fn(x: float) -> float:
    return 0.375 * x * (1.0 + 0.25 * x * (1.0 + 0.46875 * x))


def e2fn(x: float) -> float:
    return 0.05859375 * x * x * (1.0 + 0.75 * x)


def e3fn(x: float) -> float:
    return x * x * x * (35.0 / 3072.0)


def mlfn(e0: float, e1: float, e2: float, e3: float, phi: float) -> float:
    return (
        e0 * phi
        - e1 * math.sin(2.0 * phi)
        + e2 * math.sin(4.0 * phi)
        - e3 * math.sin(6.0 * phi)
    )


def srat(esinp: float, exp: float) -> float:
    return math.pow((1.0 - esinp) / (1.0 + esinp), exp)


def pj_enfn(es: float) -> list[float]:
    """Coefficients for :func:`pj_mlfn`."""
    en = [0.0] * 5
    en[0] = C00 - es * (C02 + es * (C04 + es * (C06 + es * C08)))
    en[1] = es * (C22 - es * (C04 + es * (C06 + es * C08)))
    t = es * es
    en[2] = t * (C44 - es * (C46 + es * C48))
    t *= es
    en[3] = t * (C66 - es * C68)
    en[4] = t * es * C88
    return en


def pj_mlfn(phi: float, sphi: float, cphi: float, en: list[float]) -> float:
    cphi *= sphi
    sphi *= sphi
    return en[0] * phi - cphi * (en[1] + sphi * (en[2] + sphi * (en[3] + sphi * en[4])))


def pj_inv_mlfn(arg: float, es: float, en: list[float]) -> float:
    """Latitude from meridional distance, by Newton iteration."""
    k = 1.0 / (1.0 - es)
    phi = arg
    for _ in range(MAX_ITER):
        s = math.sin(phi)
        t = 1.0 - es * s * s
        t = (pj_mlfn(phi, s, math.cos(phi), en) - arg) * (t * math.sqrt(t)) * k
        phi -= t
        if abs(t) < EPSLN:
            return phi
    raise ConvergenceError("pj_inv_mlfn: no convergence")
