import re
import sys
from pathlib import Path
from typing import Iterable, Iterator, Union

from tqdm import tqdm

from gtfsbbox.exceptions import InsufficientDataError, InvalidNumberError, MalformedRecordError, ShapesReadError
from gtfsbbox.geom import Point, Rect
from gtfsbbox.log import LOGGER

DEFAULT_SHAPES_FILE = "shapes.txt"
LAT_FIELD = 2
LON_FIELD = 3

# decimal or exponent notation, inf, infinity or nan; no whitespace or digit separators
FLOAT_REGEX = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)", re.IGNORECASE)

logger = LOGGER.get_logger('shapes')


def shapes_path(gtfs_dir: Union[str, Path], shapes_file: Union[str, Path] = DEFAULT_SHAPES_FILE) -> Path:
    return Path(gtfs_dir) / shapes_file


def _parse_field(line: str, fields: list[str], index: int, name: str) -> float:
    if index >= len(fields):
        raise MalformedRecordError(f"missing {name} in record: {line!r}")
    text = fields[index]
    if not FLOAT_REGEX.fullmatch(text):
        raise InvalidNumberError(f"invalid float: {text}")
    return float(text)


def point_from_line(line: str, lat_field: int = LAT_FIELD, lon_field: int = LON_FIELD) -> Point:
    """Decode one shapes record into a Point(x=lon, y=lat)."""
    fields = line.split(",")
    lat = _parse_field(line, fields, lat_field, "lat")
    lon = _parse_field(line, fields, lon_field, "lon")
    return Point(lon, lat)


def read_records(path: Union[str, Path]) -> Iterator[str]:
    """Yield the records of a shapes file one by one, header skipped."""
    with open(path, 'r', encoding="UTF-8") as file:
        lines = iter(file)
        try:
            next(lines, None)
            for line in lines:
                yield line.rstrip("\r\n")
        except UnicodeDecodeError as e:
            raise ShapesReadError(f"cannot read {path}: {e}") from e


def compute_bbox(records: Iterable[str], lat_field: int = LAT_FIELD, lon_field: int = LON_FIELD) -> tuple[Rect, int]:
    """
    Fold records into their bounding box.

    The box is seeded from the first two points, every further point is folded in with Rect.expand().

    Returns:
        the bounding box and the number of points it was computed from
    """
    records = iter(records)

    first = next(records, None)
    if first is None:
        raise InsufficientDataError("at least one point in the file is required")
    p1 = point_from_line(first, lat_field, lon_field)

    second = next(records, None)
    if second is None:
        raise InsufficientDataError("at least two points in the file are required")
    p2 = point_from_line(second, lat_field, lon_field)

    bbox = Rect.from_points(p1, p2)
    num_points = 2
    for record in records:
        bbox.expand(point_from_line(record, lat_field, lon_field))
        num_points += 1

    return bbox, num_points


def bbox_of_shapes_file(path: Union[str, Path], lat_field: int = LAT_FIELD, lon_field: int = LON_FIELD,
                        progress: bool = False) -> tuple[Rect, int]:
    logger.info("parsing %s", path)
    records = read_records(path)
    progress_bar = tqdm(records, desc="points", unit=" points", file=sys.stderr, disable=not progress)
    try:
        bbox, num_points = compute_bbox(progress_bar, lat_field, lon_field)
    finally:
        progress_bar.close()
        records.close()
    logger.info("completed bbox calculation of %d points", num_points)
    logger.debug("Bounding box found: %s", bbox)
    return bbox, num_points
