"""Data models for recorded walk points and measurement results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A single recorded location sample.

    Attributes:
        latitude: Latitude in decimal degrees, [-90, 90].
        longitude: Longitude in decimal degrees, [-180, 180].
        accuracy_m: Horizontal accuracy radius in meters as reported by the
            location provider. Informational only, never used for the area.
    """

    latitude: float
    longitude: float
    accuracy_m: float | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.latitude) or not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"纬度超出范围 [-90, 90]：{self.latitude!r}")
        if not math.isfinite(self.longitude) or not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"经度超出范围 [-180, 180]：{self.longitude!r}")


@dataclass(frozen=True, slots=True)
class AreaResult:
    """Area of one completed walk.

    Note:
        area_m2 is always in square meters; unit conversion happens at display time.
    """

    area_m2: float
    perimeter_m: float
    points: int
    method: str


MIN_POLYGON_POINTS: Final[int] = 3
