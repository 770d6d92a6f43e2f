"""Geospatial utilities (no external dependencies).

Area methods:
    - "equirectangular" (default): project every vertex onto a local tangent plane
      centered on the first vertex (x scaled by cos of the mean latitude), then
      apply the planar shoelace formula. Flat-earth approximation, good for plots
      of tens of hectares; the error grows with the extent of the walk and near
      the poles.
    - "spherical": spherical-excess line integral on a sphere of the same radius.
      Slower to degrade on large areas, identical within rounding on small plots.

Both use the WGS84 equatorial radius, so 1 degree of latitude ~ 111319.5 m.
"""

from __future__ import annotations

import math
from typing import Final, Sequence

from walk_area.models import MIN_POLYGON_POINTS, GeoPoint

EARTH_RADIUS_M: Final[float] = 6_378_137.0  # WGS84 equatorial radius
MEAN_EARTH_RADIUS_M: Final[float] = 6_371_000.0

METHOD_EQUIRECTANGULAR: Final[str] = "equirectangular"
METHOD_SPHERICAL: Final[str] = "spherical"
AREA_METHODS: Final[tuple[str, ...]] = (METHOD_EQUIRECTANGULAR, METHOD_SPHERICAL)
DEFAULT_METHOD: Final[str] = METHOD_EQUIRECTANGULAR


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute Haversine distance in meters between two lat/lon points.

    Args:
        lat1: Latitude 1 in degrees.
        lon1: Longitude 1 in degrees.
        lat2: Latitude 2 in degrees.
        lon2: Longitude 2 in degrees.

    Returns:
        Distance in meters.
    """

    r = MEAN_EARTH_RADIUS_M
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return r * c


def path_perimeter_m(points: Sequence[GeoPoint], closed: bool = True) -> float:
    """Sum of great-circle legs along the path (plus last -> first if closed)."""

    if len(points) < 2:
        return 0.0
    total = 0.0
    for a, b in zip(points, points[1:]):
        total += haversine_m(a.latitude, a.longitude, b.latitude, b.longitude)
    if closed:
        a, b = points[-1], points[0]
        total += haversine_m(a.latitude, a.longitude, b.latitude, b.longitude)
    return total


def _wrap_deg(delta: float) -> float:
    """Wrap a longitude difference into [-180, 180)."""

    return (delta + 180.0) % 360.0 - 180.0


def _equirectangular_area(points: Sequence[GeoPoint], r: float) -> float:
    origin = points[0]
    mean_lat = math.radians(sum(p.latitude for p in points) / len(points))
    k = math.pi / 180.0 * r
    kx = k * math.cos(mean_lat)

    # Coordinates relative to the first vertex keep the cross products small.
    xy = [
        (_wrap_deg(p.longitude - origin.longitude) * kx, (p.latitude - origin.latitude) * k)
        for p in points
    ]
    s = 0.0
    n = len(xy)
    for i in range(n):
        x1, y1 = xy[i]
        x2, y2 = xy[(i + 1) % n]
        s += x1 * y2 - x2 * y1
    return abs(s) / 2.0


def _spherical_area(points: Sequence[GeoPoint], r: float) -> float:
    s = 0.0
    n = len(points)
    for i in range(n):
        p1 = points[i]
        p2 = points[(i + 1) % n]
        d_lambda = math.radians(_wrap_deg(p2.longitude - p1.longitude))
        s += d_lambda * (2.0 + math.sin(math.radians(p1.latitude)) + math.sin(math.radians(p2.latitude)))
    return abs(s) * r * r / 2.0


def polygon_area_m2(
    points: Sequence[GeoPoint],
    method: str = DEFAULT_METHOD,
    earth_radius_m: float = EARTH_RADIUS_M,
) -> float:
    """Area enclosed by the walked polygon, in square meters.

    The vertices are taken in order and the last one is implicitly connected back
    to the first (an explicit closing copy of the first vertex is dropped).
    Orientation does not matter. A self-intersecting walk still gets
    a number, but opposite-winding lobes cancel each other out.

    Args:
        points: Ordered vertices, at least 3.
        method: "equirectangular" or "spherical".
        earth_radius_m: Sphere radius used by both methods.

    Returns:
        Non-negative area in square meters.

    Raises:
        ValueError: If fewer than 3 points or an unknown method is given.
    """

    if len(points) < MIN_POLYGON_POINTS:
        raise ValueError(f"至少需要 {MIN_POLYGON_POINTS} 个点才能构成多边形，实际：{len(points)}")
    first, last = points[0], points[-1]
    if len(points) > MIN_POLYGON_POINTS and (first.latitude, first.longitude) == (last.latitude, last.longitude):
        # explicitly closed ring; the closing edge is implicit anyway
        points = points[:-1]
    if method == METHOD_EQUIRECTANGULAR:
        return _equirectangular_area(points, earth_radius_m)
    if method == METHOD_SPHERICAL:
        return _spherical_area(points, earth_radius_m)
    raise ValueError(f"未知的面积算法：{method!r}。可选：{', '.join(AREA_METHODS)}")
