"""CSV input/output for the walked path (``Latitude,Longitude``)."""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Final, Iterable, Iterator, Sequence, TextIO

from walk_area.models import GeoPoint

logger = logging.getLogger(__name__)

PATH_CSV_HEADER: Final[tuple[str, str]] = ("Latitude", "Longitude")


@dataclass(frozen=True, slots=True)
class PathCsvSummary:
    """Quick summary of CSV parsing."""

    rows_total: int
    rows_parsed: int
    rows_skipped: int
    fieldnames: Sequence[str]


def _parse_float(value: str) -> float:
    return float(value.strip())


def _column_map(fieldnames: Sequence[str]) -> dict[str, str]:
    """Map lower-cased, stripped header names to the header as written."""

    return {name.strip().lower(): name for name in fieldnames}


def _resolve_columns(fieldnames: Sequence[str] | None) -> tuple[str, str]:
    cols = _column_map(fieldnames or ())
    try:
        return cols["latitude"], cols["longitude"]
    except KeyError as exc:
        raise KeyError(f"CSV缺少必要字段：{exc}. 实际字段：{list(fieldnames or ())}") from exc


def format_coord(value: float) -> str:
    """Shortest round-trip digits of ``value`` in fixed notation (no exponent).

    >>> format_coord(-1e-06)
    '-0.000001'
    """

    return format(Decimal(repr(value)), "f")


def write_path_rows(points: Iterable[GeoPoint], f: TextIO) -> int:
    """Write the path to an open text stream. Returns the number of rows.

    Coordinates keep the digits of repr(), so point order and precision survive
    a round trip, but tiny values are written as 0.000001 rather than 1e-06.
    """

    w = csv.writer(f, lineterminator="\n")
    w.writerow(PATH_CSV_HEADER)
    n = 0
    for pt in points:
        w.writerow((format_coord(pt.latitude), format_coord(pt.longitude)))
        n += 1
    return n


def path_csv_text(points: Iterable[GeoPoint]) -> str:
    """Return the export as a string (for downloads)."""

    buf = io.StringIO()
    write_path_rows(points, buf)
    return buf.getvalue()


def write_path_csv(points: Iterable[GeoPoint], out_path: str | Path) -> int:
    """Export the walked path to a CSV file."""

    p = Path(out_path)
    with p.open("w", encoding="utf-8", newline="") as f:
        n = write_path_rows(points, f)
    logger.info("已导出 %s 个点到 %s", n, p)
    return n


def _iter_rows(reader: csv.DictReader, counts: dict[str, int]) -> Iterator[GeoPoint]:
    """Parse rows of an already-opened reader, counting total/skipped rows.

    The skip count is logged once the reader is exhausted.
    """

    if not reader.fieldnames:
        return
    lat_col, lon_col = _resolve_columns(reader.fieldnames)
    for row in reader:
        counts["total"] += 1
        try:
            yield GeoPoint(latitude=_parse_float(row[lat_col]), longitude=_parse_float(row[lon_col]))
        except (ValueError, TypeError, AttributeError):
            # 空行/损坏行直接跳过
            counts["skipped"] += 1
            continue
    if counts["skipped"] > 0:
        logger.warning("CSV中有 %s 行解析失败已跳过", counts["skipped"])


def iter_path_points(csv_path: str | Path) -> Iterator[GeoPoint]:
    """Yield GeoPoint objects from an exported walk CSV.

    Header names are matched case-insensitively. Broken rows are skipped and
    their count is logged at WARNING.

    Raises:
        KeyError: If the latitude/longitude columns are missing.
    """

    p = Path(csv_path)
    with p.open("r", encoding="utf-8-sig", newline="") as f:
        yield from _iter_rows(csv.DictReader(f), {"total": 0, "skipped": 0})


def read_path_rows(f: TextIO) -> tuple[list[GeoPoint], PathCsvSummary]:
    """Parse a walk CSV from an open text stream."""

    counts = {"total": 0, "skipped": 0}
    reader = csv.DictReader(f)
    parsed = list(_iter_rows(reader, counts))
    summary = PathCsvSummary(
        rows_total=counts["total"],
        rows_parsed=len(parsed),
        rows_skipped=counts["skipped"],
        fieldnames=tuple(reader.fieldnames or ()),
    )
    return parsed, summary


def load_path_csv(csv_path: str | Path) -> tuple[list[GeoPoint], PathCsvSummary]:
    """Load all points into memory.

    Args:
        csv_path: Path to the exported CSV.

    Returns:
        (points, summary)
    """

    p = Path(csv_path)
    with p.open("r", encoding="utf-8-sig", newline="") as f:
        return read_path_rows(f)
