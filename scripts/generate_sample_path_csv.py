from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from walk_area.csv_io import write_path_csv
from walk_area.geo import EARTH_RADIUS_M
from walk_area.models import GeoPoint


M_PER_DEG: Final[float] = math.pi / 180.0 * EARTH_RADIUS_M


@dataclass(frozen=True, slots=True)
class Plot:
    name: str
    lat: float
    lon: float
    width_m: float
    height_m: float


def generate_points(
    *,
    plot: Plot,
    step_m: float,
    jitter_m: float,
    seed: int,
) -> list[GeoPoint]:
    """Walk the rectangle counter-clockwise from its south-west corner, with GPS jitter."""

    rng = random.Random(seed)
    kx = M_PER_DEG * math.cos(math.radians(plot.lat))
    corners = [
        (0.0, 0.0),
        (plot.width_m, 0.0),
        (plot.width_m, plot.height_m),
        (0.0, plot.height_m),
    ]

    out: list[GeoPoint] = []
    for (x1, y1), (x2, y2) in zip(corners, corners[1:] + corners[:1]):
        leg = math.hypot(x2 - x1, y2 - y1)
        steps = max(1, int(leg // step_m))
        for i in range(steps):
            t = i / steps
            x = x1 + (x2 - x1) * t + rng.gauss(0.0, jitter_m)
            y = y1 + (y2 - y1) * t + rng.gauss(0.0, jitter_m)
            out.append(
                GeoPoint(
                    latitude=round(plot.lat + y / M_PER_DEG, 7),
                    longitude=round(plot.lon + x / kx, 7),
                    accuracy_m=rng.choice([3.0, 5.0, 8.0, 12.0]),
                )
            )
    return out


def main() -> int:
    p = argparse.ArgumentParser(description="Generate a fake walk_path.csv for demo/testing.")
    p.add_argument("--out", type=str, default="sample_data/walk_path.csv", help="Output CSV path")
    p.add_argument("--width-m", type=float, default=120.0, help="Plot width (east-west), meters")
    p.add_argument("--height-m", type=float, default=80.0, help="Plot height (north-south), meters")
    p.add_argument("--lat", type=float, default=31.5204, help="South-west corner latitude")
    p.add_argument("--lon", type=float, default=74.3587, help="South-west corner longitude")
    p.add_argument("--step-m", type=float, default=5.0, help="Distance between samples, meters")
    p.add_argument("--jitter-m", type=float, default=1.5, help="GPS noise (std dev), meters")
    p.add_argument("--seed", type=int, default=42, help="Random seed (reproducible)")
    args = p.parse_args()

    plot = Plot("sample_plot", args.lat, args.lon, args.width_m, args.height_m)
    points = generate_points(plot=plot, step_m=args.step_m, jitter_m=args.jitter_m, seed=args.seed)
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    write_path_csv(points, out_path)

    print(
        f"Generated: {out_path} (points={len(points)}, seed={args.seed}, "
        f"expected≈{plot.width_m * plot.height_m:.0f} m²)"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
