"""Area entry points used by the session, CLI and UI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from walk_area.geo import DEFAULT_METHOD, EARTH_RADIUS_M, path_perimeter_m, polygon_area_m2
from walk_area.models import MIN_POLYGON_POINTS, AreaResult, GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AreaParams:
    """Parameters controlling the area approximation."""

    method: str = DEFAULT_METHOD
    earth_radius_m: float = EARTH_RADIUS_M


def has_enough_points(path: Sequence[GeoPoint]) -> bool:
    return len(path) >= MIN_POLYGON_POINTS


def compute_area(path: Sequence[GeoPoint], params: AreaParams | None = None) -> float | None:
    """Area of the walked path in square meters.

    Args:
        path: Recorded points in walk order.
        params: Approximation settings; defaults to AreaParams().

    Returns:
        Area in m², or None when the path has fewer than 3 points. In that case
        the calculator is not invoked at all.
    """

    if not has_enough_points(path):
        logger.warning("点数不足（%s < %s），无法计算面积", len(path), MIN_POLYGON_POINTS)
        return None
    p = params or AreaParams()
    area_m2 = polygon_area_m2(tuple(path), method=p.method, earth_radius_m=p.earth_radius_m)
    logger.debug("面积=%.3f m²（points=%s, method=%s）", area_m2, len(path), p.method)
    return area_m2


def measure_path(path: Sequence[GeoPoint], params: AreaParams | None = None) -> AreaResult | None:
    """Area plus closed perimeter, or None when there are not enough points."""

    p = params or AreaParams()
    snapshot = tuple(path)
    area_m2 = compute_area(snapshot, p)
    if area_m2 is None:
        return None
    return AreaResult(
        area_m2=area_m2,
        perimeter_m=path_perimeter_m(snapshot, closed=True),
        points=len(snapshot),
        method=p.method,
    )
