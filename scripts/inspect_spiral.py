"""Inspect a single spiral segment: end pose, bounding box and optional sampling.

Usage:
  uv run python scripts/inspect_spiral.py \\
      --s0 0 --x0 0 --y0 0 --hdg0 0 \\
      --length 10 --curv-start 0 --curv-end 0.1 \\
      --sample-step 0.5

Settings (``ROADGEOM_*``) are read from the environment or a ``.env`` file.
"""

from __future__ import annotations

import argparse
import math
import sys

from dotenv import load_dotenv

load_dotenv()

from roadgeom.config.settings import GeometrySettings, configure_logging  # noqa: E402
from roadgeom.geometry.base import InvalidGeometryError  # noqa: E402
from roadgeom.geometry.spiral import Spiral  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Evaluate an Euler spiral road-geometry segment")
    ap.add_argument("--s0", type=float, default=0.0, help="Start arclength")
    ap.add_argument("--x0", type=float, default=0.0, help="Start x coordinate")
    ap.add_argument("--y0", type=float, default=0.0, help="Start y coordinate")
    ap.add_argument("--hdg0", type=float, default=0.0, help="Start heading (rad)")
    ap.add_argument("--length", type=float, required=True, help="Segment arclength (m)")
    ap.add_argument("--curv-start", type=float, required=True, help="Curvature at s0 (1/m)")
    ap.add_argument("--curv-end", type=float, required=True, help="Curvature at s0+length (1/m)")
    ap.add_argument("--offset", type=float, default=0.0, help="Lateral offset t for sampling (m)")
    ap.add_argument(
        "--sample-step",
        type=float,
        default=None,
        help="Print sampled points as CSV with this arclength step (m)",
    )
    args = ap.parse_args()

    settings = GeometrySettings.from_env()
    configure_logging(settings)

    try:
        spiral = Spiral(
            args.s0,
            args.x0,
            args.y0,
            args.hdg0,
            args.length,
            args.curv_start,
            args.curv_end,
            settings=settings,
        )
    except InvalidGeometryError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        sys.exit(1)

    end_pt, end_hdg = spiral.end_pose()
    bbox = spiral.get_bbox()

    print(f"Variant   : {spiral.curvature.kind}  c_dot={spiral.c_dot:.6g}")
    print(f"End point : ({end_pt.x:.6f}, {end_pt.y:.6f})  heading {math.degrees(end_hdg):.3f}°")
    print(
        f"BBox      : min=({bbox.min.x:.6f}, {bbox.min.y:.6f}) "
        f"max=({bbox.max.x:.6f}, {bbox.max.y:.6f})"
    )

    if args.sample_step is not None:
        try:
            points = spiral.sample(args.sample_step, t=args.offset)
        except ValueError as exc:
            print(f"[!] {exc}", file=sys.stderr)
            sys.exit(1)

        print()
        print("x,y")
        for pt in points:
            print(f"{pt.x:.6f},{pt.y:.6f}")


if __name__ == "__main__":
    main()
