import argparse
import logging
import sys
import time

from points_io import ParseError, read_points, write_points
from skyline_dc import SkylineBuilder
from visualization import save_skyline_plot

logger = logging.getLogger(__name__)

USAGE_MESSAGE = "Insert the input file"


def get_parser():
    parser = argparse.ArgumentParser(
        prog="skyline",
        description="Compute the skyline (2D Pareto frontier) of the points in a file",
        epilog="""
Input file format:
  <number of points>
  <x> <y>
  ...
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("paths", nargs="*", metavar="FILE", help="Input file with points")
    parser.add_argument(
        "--y-floor",
        type=int,
        default=None,
        help="Smallest y coordinate in the input, enables early exit of the merge scan",
    )
    parser.add_argument("--plot", metavar="IMAGE", default=None, help="Save a plot of points and skyline")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if len(args.paths) != 1:
        parser.print_usage()
        print(USAGE_MESSAGE)
        return 0

    filename = args.paths[0]
    try:
        points = read_points(filename)
    except ParseError as e:
        logger.error(f"Failed to parse {filename}: {e}")
        return 1
    logger.info(f"Loaded {len(points)} points from {filename}")

    start_time = time.time()
    try:
        skyline = SkylineBuilder(y_floor=args.y_floor).compute_skyline(points)
    except ValueError as e:
        logger.error(str(e))
        return 1
    logger.info(f"Skyline computed in {time.time() - start_time:.4f} sec.")

    write_points(skyline, sys.stdout)

    if args.plot:
        save_skyline_plot(points, skyline, args.plot)
        logger.info(f"Plot saved to {args.plot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
