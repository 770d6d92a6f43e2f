"""Command-line interface for walk_area.

Run:
    python -m walk_area area --csv walk_path.csv --unit acres
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict

from walk_area.area import AreaParams, measure_path
from walk_area.csv_io import load_path_csv
from walk_area.geo import AREA_METHODS, DEFAULT_METHOD
from walk_area.inspect import inspect_points
from walk_area.session import NOT_ENOUGH_POINTS_MESSAGE
from walk_area.units import DEFAULT_UNIT, convert, factor, format_area, label, list_units, parse_unit


def _cmd_area(args: argparse.Namespace) -> int:
    unit = parse_unit(args.unit)
    points, summary = load_path_csv(args.csv)
    params = AreaParams(method=args.method)
    result = measure_path(points, params)
    if result is None:
        print(f"{NOT_ENOUGH_POINTS_MESSAGE}（当前 {summary.rows_parsed} 个点）", file=sys.stderr)
        return 1

    units = list_units() if args.all_units else (unit,)

    if args.json:
        import json

        payload = asdict(result) | {
            "rows_total": summary.rows_total,
            "rows_skipped": summary.rows_skipped,
            "converted": {u.name.lower(): convert(result.area_m2, u) for u in units},
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    print(f"points={result.points}, perimeter={result.perimeter_m:.1f} m, method={result.method}")
    for u in units:
        print(f"{label(u)}: {format_area(convert(result.area_m2, u), u)}")
    return 0


def _cmd_units(args: argparse.Namespace) -> int:
    for u in list_units():
        print(f"{u.name.lower():<10} {u.value:<6} {label(u):<14} x{factor(u)}")
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    points, summary = load_path_csv(args.csv)
    res = inspect_points(points)

    print("### CSV字段")
    print(", ".join(summary.fieldnames))
    print()

    print("### 行数")
    print(f"total_rows={summary.rows_total}, parsed={summary.rows_parsed}, skipped={summary.rows_skipped}")
    print()

    print("### 经纬度范围")
    print(f"lat=[{res.min_lat}, {res.max_lat}], lon=[{res.min_lon}, {res.max_lon}]")
    print()

    print("### 路径长度（米）")
    print(f"open={res.open_length_m:.1f}, closed={res.closed_perimeter_m:.1f}")
    print()

    print("### 连续重复点")
    print(res.duplicates_consecutive)
    if not res.enough_points:
        print()
        print(NOT_ENOUGH_POINTS_MESSAGE)

    if args.json:
        import json

        payload = asdict(res) | {
            "rows_total": summary.rows_total,
            "rows_parsed": summary.rows_parsed,
            "rows_skipped": summary.rows_skipped,
            "fieldnames": list(summary.fieldnames),
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""

    p = argparse.ArgumentParser(prog="walk_area")
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="日志级别",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_area = sub.add_parser("area", help="根据行走路径CSV计算围合面积")
    p_area.add_argument("--csv", type=str, default="walk_path.csv", help="输入CSV路径（Latitude,Longitude）")
    p_area.add_argument(
        "--unit",
        type=str,
        default=DEFAULT_UNIT.name.lower(),
        help="显示单位，例如 sq_meters / acres / ha / kanal / marla",
    )
    p_area.add_argument("--all-units", action="store_true", help="输出所有单位")
    p_area.add_argument(
        "--method",
        type=str,
        default=DEFAULT_METHOD,
        choices=list(AREA_METHODS),
        help="面积算法：equirectangular(局部平面, 适合几十公顷以内) / spherical(球面超量)",
    )
    p_area.add_argument("--json", action="store_true", help="输出JSON（便于后处理）")
    p_area.set_defaults(func=_cmd_area)

    p_units = sub.add_parser("units", help="列出支持的面积单位及换算系数")
    p_units.set_defaults(func=_cmd_units)

    p_ins = sub.add_parser("inspect", help="查看路径CSV的点数/范围/周长等")
    p_ins.add_argument("--csv", type=str, default="walk_path.csv", help="输入CSV路径")
    p_ins.add_argument("--json", action="store_true", help="额外输出JSON（便于后处理）")
    p_ins.set_defaults(func=_cmd_inspect)

    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        return int(args.func(args))
    except KeyError as exc:
        print(exc.args[0] if exc.args else exc, file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
