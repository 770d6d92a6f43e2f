"""Walk session: the append-only path of one walk and its final measurement."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from walk_area.area import AreaParams, compute_area
from walk_area.models import GeoPoint
from walk_area.units import AreaUnit, convert

logger = logging.getLogger(__name__)

NOT_ENOUGH_POINTS_MESSAGE: Final[str] = (
    "Not enough points to form a shape. Please record at least 3 points by walking the perimeter."
)


class SessionStateError(RuntimeError):
    """Raised when a session operation is called in the wrong state."""


@dataclass(frozen=True, slots=True)
class WalkResult:
    """Outcome of a stopped walk."""

    points: tuple[GeoPoint, ...]
    area_m2: float | None
    error: str | None = None

    @property
    def has_area(self) -> bool:
        return self.area_m2 is not None

    def converted(self, unit: AreaUnit) -> float:
        """Area in ``unit``; 0.0 if there is no area."""

        if self.area_m2 is None:
            return 0.0
        return convert(self.area_m2, unit)


class WalkSession:
    """Single-writer recorder for one walk at a time.

    Lifecycle:
        idle --start()--> tracking --add_sample()*--> tracking --stop()--> idle

    start() clears the previous walk. Points can only be appended while
    tracking; once stopped, the path is frozen and measured exactly once.
    """

    def __init__(self, params: AreaParams | None = None) -> None:
        self._params = params or AreaParams()
        self._points: list[GeoPoint] = []
        self._tracking = False
        self._accuracy_m: float | None = None
        self._result: WalkResult | None = None
        self._error: str | None = None

    @property
    def is_tracking(self) -> bool:
        return self._tracking

    @property
    def points(self) -> tuple[GeoPoint, ...]:
        return tuple(self._points)

    @property
    def current_accuracy_m(self) -> float | None:
        return self._accuracy_m

    @property
    def result(self) -> WalkResult | None:
        return self._result

    @property
    def error(self) -> str | None:
        return self._error

    def start(self) -> None:
        if self._tracking:
            raise SessionStateError("已经在记录中，请先 stop()")
        self._points = []
        self._result = None
        self._error = None
        self._accuracy_m = None
        self._tracking = True
        logger.info("开始记录新的行走路径")

    def add_point(self, point: GeoPoint) -> None:
        if not self._tracking:
            raise SessionStateError("未在记录中，不能追加点")
        self._points.append(point)
        self._accuracy_m = point.accuracy_m
        self._error = None

    def add_sample(self, latitude: float, longitude: float, accuracy_m: float | None = None) -> GeoPoint:
        """Append a raw provider sample and return the recorded point."""

        point = GeoPoint(latitude=latitude, longitude=longitude, accuracy_m=accuracy_m)
        self.add_point(point)
        return point

    def stop(self) -> WalkResult:
        """Stop tracking and measure the frozen path."""

        if not self._tracking:
            raise SessionStateError("未在记录中，无需 stop()")
        self._tracking = False
        self._accuracy_m = None

        snapshot = tuple(self._points)
        area_m2 = compute_area(snapshot, self._params)
        error: str | None = None
        if area_m2 is None and snapshot:
            error = NOT_ENOUGH_POINTS_MESSAGE
        self._error = error
        self._result = WalkResult(points=snapshot, area_m2=area_m2, error=error)
        logger.info("停止记录：points=%s, area_m2=%s", len(snapshot), area_m2)
        return self._result

    def fail(self, message: str) -> None:
        """Location provider failure: stop tracking without measuring."""

        self._tracking = False
        self._accuracy_m = None
        self._error = message
        logger.warning("定位失败，已停止记录：%s", message)
