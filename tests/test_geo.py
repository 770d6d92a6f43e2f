"""Tests for walk_area/geo.py."""
import math

import pytest

from walk_area.geo import (
    EARTH_RADIUS_M,
    METHOD_EQUIRECTANGULAR,
    METHOD_SPHERICAL,
    haversine_m,
    path_perimeter_m,
    polygon_area_m2,
)
from walk_area.models import GeoPoint


# --- polygon_area_m2 ---

def test_equator_square_area(equator_square):
    side = 0.001 * math.pi / 180.0 * EARTH_RADIUS_M
    area = polygon_area_m2(equator_square)
    assert abs(area - side * side) / (side * side) < 1e-3
    assert abs(area - 12390.0) / 12390.0 < 0.01


def test_square_100m_within_one_percent(square_100m):
    area = polygon_area_m2(square_100m)
    assert abs(area - 10_000.0) / 10_000.0 < 0.01


@pytest.mark.parametrize("method", [METHOD_EQUIRECTANGULAR, METHOD_SPHERICAL])
def test_concave_polygon(l_shape, method):
    area = polygon_area_m2(l_shape, method=method)
    assert abs(area - 30_000.0) / 30_000.0 < 0.01


def test_methods_agree_on_small_plot(square_100m):
    a = polygon_area_m2(square_100m, method=METHOD_EQUIRECTANGULAR)
    b = polygon_area_m2(square_100m, method=METHOD_SPHERICAL)
    assert abs(a - b) / a < 1e-3


def test_spherical_equator_square(equator_square):
    area = polygon_area_m2(equator_square, method=METHOD_SPHERICAL)
    assert abs(area - 12390.0) / 12390.0 < 0.01


@pytest.mark.parametrize("method", [METHOD_EQUIRECTANGULAR, METHOD_SPHERICAL])
def test_reverse_order_same_area(square_100m, l_shape, method):
    for path in (square_100m, l_shape):
        fwd = polygon_area_m2(path, method=method)
        rev = polygon_area_m2(list(reversed(path)), method=method)
        assert abs(fwd - rev) <= 1e-9 * fwd


def test_rotating_start_vertex_same_area(l_shape):
    rotated = l_shape[2:] + l_shape[:2]
    assert abs(polygon_area_m2(rotated) - polygon_area_m2(l_shape)) < 1e-6


def test_deterministic(l_shape):
    assert polygon_area_m2(l_shape) == polygon_area_m2(l_shape)
    assert polygon_area_m2(l_shape, method=METHOD_SPHERICAL) == polygon_area_m2(l_shape, method=METHOD_SPHERICAL)


def test_explicit_closing_vertex_ignored(square_100m):
    closed = square_100m + [square_100m[0]]
    assert abs(polygon_area_m2(closed) - polygon_area_m2(square_100m)) < 1e-6


@pytest.mark.parametrize("method", [METHOD_EQUIRECTANGULAR, METHOD_SPHERICAL])
def test_identical_points_zero(method):
    pts = [GeoPoint(31.5, 74.3)] * 5
    assert polygon_area_m2(pts, method=method) < 1e-6


@pytest.mark.parametrize("method", [METHOD_EQUIRECTANGULAR, METHOD_SPHERICAL])
def test_collinear_points_zero(method):
    pts = [GeoPoint(10.0 + i * 0.0001, 20.0 + i * 0.0002) for i in range(6)]
    assert polygon_area_m2(pts, method=method) < 1e-2


def test_walking_there_and_back_is_zero():
    out = [GeoPoint(0.0, 0.0), GeoPoint(0.0, 0.001), GeoPoint(0.0, 0.002)]
    pts = out + list(reversed(out[1:-1]))
    assert polygon_area_m2(pts) < 1e-6


def test_self_intersecting_bowtie_cancels():
    # Two triangles of opposite winding: signed areas cancel.
    pts = [GeoPoint(0, 0), GeoPoint(0.001, 0.001), GeoPoint(0, 0.001), GeoPoint(0.001, 0)]
    assert polygon_area_m2(pts) < 1e-3


def test_antimeridian_crossing(make_square):
    ref = make_square(-17.0, 0.0, 100.0)
    # Same square moved so that it straddles 180/-180.
    lon0 = 179.9995
    pts = []
    for p in ref:
        lon = lon0 + p.longitude
        pts.append(GeoPoint(p.latitude, lon - 360.0 if lon > 180.0 else lon))
    assert any(p.longitude < 0 for p in pts)
    area = polygon_area_m2(pts)
    assert abs(area - 10_000.0) / 10_000.0 < 0.01
    assert abs(polygon_area_m2(pts, method=METHOD_SPHERICAL) - 10_000.0) / 10_000.0 < 0.01


def test_custom_radius_scales_quadratically(equator_square):
    a = polygon_area_m2(equator_square, earth_radius_m=EARTH_RADIUS_M)
    b = polygon_area_m2(equator_square, earth_radius_m=2 * EARTH_RADIUS_M)
    assert abs(b / a - 4.0) < 1e-9


def test_too_few_points_raises():
    with pytest.raises(ValueError, match="至少需要 3"):
        polygon_area_m2([GeoPoint(0, 0), GeoPoint(0, 1)])


def test_unknown_method_raises(equator_square):
    with pytest.raises(ValueError, match="未知的面积算法"):
        polygon_area_m2(equator_square, method="planar")


# --- haversine_m / path_perimeter_m ---

def test_haversine_one_degree_latitude():
    d = haversine_m(0.0, 0.0, 1.0, 0.0)
    assert abs(d - 111_195.0) < 1.0


def test_haversine_same_point():
    assert haversine_m(31.5, 74.3, 31.5, 74.3) == 0.0


def test_perimeter_closed_vs_open(square_100m):
    closed = path_perimeter_m(square_100m)
    opened = path_perimeter_m(square_100m, closed=False)
    assert abs(closed - 400.0) < 2.0
    assert abs(opened - 300.0) < 2.0


def test_perimeter_short_path():
    assert path_perimeter_m([GeoPoint(1, 1)]) == 0.0
