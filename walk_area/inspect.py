"""Inspect a recorded walk before measuring it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from walk_area.geo import path_perimeter_m
from walk_area.models import MIN_POLYGON_POINTS, GeoPoint


@dataclass(frozen=True, slots=True)
class InspectResult:
    """High-level walk inspection result."""

    points: int
    enough_points: bool
    min_lat: float | None
    max_lat: float | None
    min_lon: float | None
    max_lon: float | None
    open_length_m: float
    closed_perimeter_m: float
    duplicates_consecutive: int
    mean_accuracy_m: float | None


def inspect_points(points: Sequence[GeoPoint]) -> InspectResult:
    """Inspect already-loaded points."""

    if not points:
        return InspectResult(
            points=0,
            enough_points=False,
            min_lat=None,
            max_lat=None,
            min_lon=None,
            max_lon=None,
            open_length_m=0.0,
            closed_perimeter_m=0.0,
            duplicates_consecutive=0,
            mean_accuracy_m=None,
        )

    dupe = 0
    for i in range(1, len(points)):
        a, b = points[i - 1], points[i]
        if a.latitude == b.latitude and a.longitude == b.longitude:
            dupe += 1

    lats = [p.latitude for p in points]
    lons = [p.longitude for p in points]
    accs = [p.accuracy_m for p in points if p.accuracy_m is not None]
    return InspectResult(
        points=len(points),
        enough_points=len(points) >= MIN_POLYGON_POINTS,
        min_lat=min(lats),
        max_lat=max(lats),
        min_lon=min(lons),
        max_lon=max(lons),
        open_length_m=path_perimeter_m(points, closed=False),
        closed_perimeter_m=path_perimeter_m(points, closed=True),
        duplicates_consecutive=dupe,
        mean_accuracy_m=(sum(accs) / len(accs)) if accs else None,
    )
