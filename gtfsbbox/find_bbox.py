import argparse
import logging
import sys

from gtfsbbox.config import OUTPUT_FORMATS, parse_config_file, validate_config
from gtfsbbox.exceptions import BBoxError
from gtfsbbox.export import format_bbox
from gtfsbbox.log import LOGGER
from gtfsbbox.shapes import bbox_of_shapes_file, shapes_path

logger = LOGGER.get_logger('find_bbox')


def parse_args(arg_list: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute the bounding box of all points in the shapes.txt file of a GTFS feed "
                    "and print it in OSM bbox format (left,bottom,right,top).")

    parser.add_argument("gtfs_dir", help="Path to the GTFS directory containing the shapes file")
    parser.add_argument("-c", "--config", dest="config_file", help="Path to YAML config file (optional)")
    parser.add_argument("-f", "--shapes-file", dest="shapes_file",
                        help="Shapes file name inside gtfs_dir. Default is 'shapes.txt'.")
    parser.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS,
                        help="Output format. Default is 'osm'.")
    parser.add_argument("--progress", dest="progress", action="store_true", default=None,
                        help="Show a progress bar on stderr")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", dest="verbose", action="store_true",
                           help="Enable verbose output (DEBUG level logging)")
    verbosity.add_argument("-q", "--quiet", dest="quiet", action="store_true",
                           help="Only log warnings and errors")

    args = parser.parse_args(arg_list)

    if args.verbose:
        LOGGER.set_level(logging.DEBUG)
    elif args.quiet:
        LOGGER.set_level(logging.WARNING)
    else:
        LOGGER.set_level(logging.INFO)

    return args


def find_bbox(args: argparse.Namespace) -> str:
    """Return the formatted bounding box of the shapes file selected by args."""
    config = parse_config_file(args.config_file)
    if args.shapes_file:
        config.shapes_file = args.shapes_file
    if args.output_format:
        config.output_format = args.output_format
    if args.progress is not None:
        config.progress = args.progress
    validate_config(config)

    path = shapes_path(args.gtfs_dir, config.shapes_file)
    bbox, num_points = bbox_of_shapes_file(path, config.fields.lat, config.fields.lon, config.progress)
    return format_bbox(bbox, config.output_format, num_points)


def main(arg_list: list[str] | None = None) -> int:
    args = parse_args(arg_list)

    try:
        result = find_bbox(args)
    except (BBoxError, OSError) as e:
        logger.error("Bounding box calculation failed for '%s': %s", args.gtfs_dir, e)
        return 1

    print(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
