"""Shared fixtures: small walks with known areas."""
import math

import pytest

from walk_area.geo import EARTH_RADIUS_M
from walk_area.models import GeoPoint

M_PER_DEG = math.pi / 180.0 * EARTH_RADIUS_M


def square_walk(lat0, lon0, side_m):
    """Counter-clockwise square with the south-west corner at (lat0, lon0)."""
    dlat = side_m / M_PER_DEG
    dlon = side_m / (M_PER_DEG * math.cos(math.radians(lat0 + dlat / 2)))
    return [
        GeoPoint(lat0, lon0),
        GeoPoint(lat0, lon0 + dlon),
        GeoPoint(lat0 + dlat, lon0 + dlon),
        GeoPoint(lat0 + dlat, lon0),
    ]


@pytest.fixture
def equator_square():
    """The ~0.001 degree square at the origin."""
    return [GeoPoint(0, 0), GeoPoint(0, 0.001), GeoPoint(0.001, 0.001), GeoPoint(0.001, 0)]


@pytest.fixture
def square_100m():
    """100 m x 100 m plot in Lahore."""
    return square_walk(31.5204, 74.3587, 100.0)


@pytest.fixture
def l_shape():
    """Concave L-shaped plot: 3 of 4 cells of a 200 m square, area 30000 m²."""
    lat0, lon0 = 47.0, 8.0
    dlat = 100.0 / M_PER_DEG
    dlon = 100.0 / (M_PER_DEG * math.cos(math.radians(lat0 + dlat)))
    xy = [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]
    return [GeoPoint(lat0 + y * dlat, lon0 + x * dlon) for x, y in xy]


@pytest.fixture
def make_square():
    """Factory fixture: make_square(lat0, lon0, side_m) -> square walk."""
    return square_walk
