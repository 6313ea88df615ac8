from typing import NamedTuple

import numpy as np


def format_float(value: float) -> str:
    """Return the shortest decimal text that parses back to the same float.

    Positional notation only, integral values lose the trailing '.0'.
    """
    return np.format_float_positional(value, unique=True, trim='-')


class Point(NamedTuple):
    """Geographic point, x is longitude and y is latitude."""
    x: float
    y: float


class Rect:
    """
    Axis-aligned bounding box.

    Built from exactly two points and grown in place with expand().
    Holds min.x <= max.x and min.y <= max.y at all times.
    """

    def __init__(self, min_point: Point, max_point: Point):
        self.min = min_point
        self.max = max_point

    @classmethod
    def from_points(cls, a: Point, b: Point) -> 'Rect':
        # fmin/fmax ignore a nan argument, the result is nan only if both are
        min_point = Point(float(np.fmin(a.x, b.x)), float(np.fmin(a.y, b.y)))
        max_point = Point(float(np.fmax(a.x, b.x)), float(np.fmax(a.y, b.y)))
        return cls(min_point, max_point)

    def expand(self, point: Point):
        # a value can only move one bound per axis, max is checked first
        if point.x > self.max.x:
            self.max = self.max._replace(x=point.x)
        elif point.x < self.min.x:
            self.min = self.min._replace(x=point.x)

        if point.y > self.max.y:
            self.max = self.max._replace(y=point.y)
        elif point.y < self.min.y:
            self.min = self.min._replace(y=point.y)

    def contains(self, point: Point) -> bool:
        return self.min.x <= point.x <= self.max.x and self.min.y <= point.y <= self.max.y

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return (left, bottom, right, top)."""
        return self.min.x, self.min.y, self.max.x, self.max.y

    def osm_bbox_fmt(self) -> str:
        left, bottom, right, top = self.as_tuple()
        return f"{format_float(left)},{format_float(bottom)},{format_float(right)},{format_float(top)}"

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self):
        return f"Rect(min={self.min}, max={self.max})"
