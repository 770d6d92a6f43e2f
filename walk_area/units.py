"""Area units: conversion factors from square meters and display labels.

The unit set is closed. Adding a unit means adding one member plus one entry in
each table below; the module refuses to import if a table is not total.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class AreaUnit(Enum):
    """Supported area units. Values are the short display symbols."""

    SQ_METERS = "m²"
    SQ_FEET = "ft²"
    ACRES = "acres"
    HECTARES = "ha"
    KANAL = "kanal"
    MARLA = "marla"


# Multiply square meters by these to get the unit.
UNIT_CONVERSIONS: Final[dict[AreaUnit, float]] = {
    AreaUnit.SQ_METERS: 1.0,
    AreaUnit.SQ_FEET: 10.7639,
    AreaUnit.ACRES: 0.000247105,
    AreaUnit.HECTARES: 0.0001,
    AreaUnit.KANAL: 0.00197684,  # 1 kanal = 505.857 m²
    AreaUnit.MARLA: 0.0395369,  # 1 marla = 25.29285 m²
}

UNIT_LABELS: Final[dict[AreaUnit, str]] = {
    AreaUnit.SQ_METERS: "Square Meters",
    AreaUnit.SQ_FEET: "Square Feet",
    AreaUnit.ACRES: "Acres",
    AreaUnit.HECTARES: "Hectares",
    AreaUnit.KANAL: "Kanal",
    AreaUnit.MARLA: "Marla",
}

DEFAULT_UNIT: Final[AreaUnit] = AreaUnit.SQ_METERS

# Extra spellings accepted by parse_unit (symbols are matched too).
_ALIASES: Final[dict[str, AreaUnit]] = {
    "m2": AreaUnit.SQ_METERS,
    "sqm": AreaUnit.SQ_METERS,
    "ft2": AreaUnit.SQ_FEET,
    "sqft": AreaUnit.SQ_FEET,
    "acre": AreaUnit.ACRES,
    "hectare": AreaUnit.HECTARES,
    "hectares": AreaUnit.HECTARES,
}


def _check_tables() -> None:
    for name, table in (("UNIT_CONVERSIONS", UNIT_CONVERSIONS), ("UNIT_LABELS", UNIT_LABELS)):
        missing = [u.name for u in AreaUnit if u not in table]
        if missing:
            raise RuntimeError(f"{name} 缺少单位：{', '.join(missing)}")
    bad = [u.name for u, f in UNIT_CONVERSIONS.items() if not f > 0.0]
    if bad:
        raise RuntimeError(f"UNIT_CONVERSIONS 中存在非正的换算系数：{', '.join(bad)}")


_check_tables()


def list_units() -> tuple[AreaUnit, ...]:
    """All units in declaration order."""

    return tuple(AreaUnit)


def factor(unit: AreaUnit) -> float:
    """Scale factor from square meters to ``unit``.

    Raises:
        KeyError: If ``unit`` is not an AreaUnit member.
    """

    return UNIT_CONVERSIONS[unit]


def label(unit: AreaUnit) -> str:
    """Human readable name, e.g. "Acres"."""

    return UNIT_LABELS[unit]


def convert(area_m2: float, unit: AreaUnit) -> float:
    """Convert square meters to ``unit`` at full float precision (no rounding)."""

    return area_m2 * UNIT_CONVERSIONS[unit]


def to_square_meters(value: float, unit: AreaUnit) -> float:
    """Inverse of :func:`convert`."""

    return value / UNIT_CONVERSIONS[unit]


def parse_unit(text: str) -> AreaUnit:
    """Resolve a unit from user/config text.

    Accepts member names ("ACRES", "sq_feet"), symbols ("ha", "m²") and a few
    aliases ("m2", "sqft").

    Raises:
        KeyError: If the text names no known unit.
    """

    s = text.strip()
    for u in AreaUnit:
        if s.upper() == u.name or s.lower() == u.value:
            return u
    try:
        return _ALIASES[s.lower()]
    except KeyError:
        choices = ", ".join(u.name.lower() for u in AreaUnit)
        raise KeyError(f"未知面积单位：{text!r}。可选：{choices}") from None


def format_area(value: float, unit: AreaUnit, max_fraction_digits: int = 4) -> str:
    """Presentation formatting: thousands separators, trailing zeros trimmed."""

    s = f"{value:,.{max_fraction_digits}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return f"{s} {unit.value}"
