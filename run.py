import argparse
import logging
import sys

import numpy as np

from planeview import Matrix, PlaneviewError, PointCloud, ViewerConfig, rank
from planeview.render import plot_points, plot_transition

logger = logging.getLogger("planeview.run")


def parse_matrix(text):
    """Parse ``"1 2; 3 4"`` (rows separated by ``;``) into a matrix."""
    rows = [row.replace(",", " ").split() for row in text.split(";") if row.strip()]
    return Matrix.from_rows([[float(v) for v in row] for row in rows])


def run_demo(args):
    config = ViewerConfig.from_args(args)
    cloud = PointCloud(config, rng=np.random.default_rng(args.seed))
    cloud.fill_random(args.points)
    before = cloud.points()
    plot_points(before, f"{args.prefix}_before.png", config, title="Random point cloud")
    print(f"Saved {args.prefix}_before.png: initial cloud of {len(cloud)} points.")

    # scripted session: drag right and up, zoom in twice, turn three steps
    cloud.move_to(0, 0)
    cloud.drag_to(40, -25)
    for _ in range(2):
        cloud.zoom(-1, about=(0.0, 0.0))
    for _ in range(3):
        cloud.turn(1, about=(0.0, 0.0))

    plot_transition(before, cloud.points(), f"{args.prefix}_after.png", config, title="After drag, zoom and turn")
    print(f"Saved {args.prefix}_after.png: transformed cloud.")


def run_rref(args):
    matrix = parse_matrix(args.matrix)
    reduced = matrix.rref(args.atol)
    print(reduced, end="")
    print(f"rank: {rank(matrix, args.atol)}")


def main():
    parser = argparse.ArgumentParser(description="Demos for the planeview matrix core.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="transform a random cloud and plot it")
    demo.add_argument("--points", type=int, default=100, help="number of random points")
    demo.add_argument("--width", type=int, default=None, help="canvas width in pixels")
    demo.add_argument("--height", type=int, default=None, help="canvas height in pixels")
    demo.add_argument("--seed", type=int, default=2025)
    demo.add_argument("--prefix", default="cloud", help="output file prefix")

    reduce_cmd = sub.add_parser("rref", help="print the reduced row-echelon form of a matrix")
    reduce_cmd.add_argument("matrix", help='rows separated by ";", e.g. "1 2; 3 4"')
    reduce_cmd.add_argument("--atol", type=float, default=1e-5)

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "demo":
            run_demo(args)
        elif args.command == "rref":
            run_rref(args)
    except (PlaneviewError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
