from typing import Optional

import geojson

from gtfsbbox.exceptions import InvalidInputError
from gtfsbbox.geom import Rect

# geojson rounds geometry coordinates to 6 decimals unless told otherwise
GEOJSON_PRECISION = 15


def bbox_to_geojson(bbox: Rect, num_points: Optional[int] = None) -> geojson.Feature:
    """
    Return the bounding box as a GeoJSON Feature.

    The geometry is the closed rectangle ring, counter-clockwise from the lower left corner.
    The feature also carries the RFC 7946 bbox member [left, bottom, right, top].
    """
    left, bottom, right, top = bbox.as_tuple()
    ring = [(left, bottom), (right, bottom), (right, top), (left, top), (left, bottom)]
    polygon = geojson.Polygon([ring], precision=GEOJSON_PRECISION)

    properties = {}
    if num_points is not None:
        properties["num_points"] = num_points

    return geojson.Feature(geometry=polygon, properties=properties, bbox=[left, bottom, right, top])


def format_bbox(bbox: Rect, output_format: str = "osm", num_points: Optional[int] = None) -> str:
    match output_format:
        case "osm":
            return bbox.osm_bbox_fmt()
        case "geojson":
            return geojson.dumps(bbox_to_geojson(bbox, num_points))
        case _:
            raise InvalidInputError(f"Invalid output format '{output_format}'.")
