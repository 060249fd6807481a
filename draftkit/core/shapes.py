"""
DraftKit Core Shapes Module

Defines the pure-geometry shape classes: BoundingBox, the abstract Shape,
and the shape variants Point, Line, Ray, XLine and Circle.

Shapes know nothing about documents, layers or linetypes. Entities in
draftkit.entity wrap them for that.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union
import math

import numpy as np

from .vector import Vector, INVALID
from . import transform as tf


@dataclass
class BoundingBox:
    """Axis-aligned bounding box."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Vector:
        return Vector(
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2
        )

    def contains(self, point: Vector) -> bool:
        """Check if point is inside bounding box."""
        return (self.min_x <= point.x <= self.max_x and
                self.min_y <= point.y <= self.max_y)

    def intersects(self, other: 'BoundingBox') -> bool:
        """Check if two bounding boxes overlap."""
        return not (self.max_x < other.min_x or
                    self.min_x > other.max_x or
                    self.max_y < other.min_y or
                    self.min_y > other.max_y)

    def union(self, other: 'BoundingBox') -> 'BoundingBox':
        return BoundingBox(
            min_x=min(self.min_x, other.min_x),
            min_y=min(self.min_y, other.min_y),
            max_x=max(self.max_x, other.max_x),
            max_y=max(self.max_y, other.max_y)
        )


class Shape(ABC):
    """
    Abstract base class for all shapes.

    Every shape must implement:
    - clone(): Create an independent copy
    - transform(): Apply an affine matrix to the defining parameters
    - get_vector_to(): Shortest vector from a point to the shape
    - get_bounding_box(): Axis-aligned bounds, None if unbounded

    Move, rotate, scale and mirror are all expressed as transforms so the
    variants only implement the matrix case.
    """

    @abstractmethod
    def clone(self) -> 'Shape':
        """Create a copy of this shape."""
        pass

    @abstractmethod
    def transform(self, matrix: np.ndarray) -> bool:
        """Apply a 4x4 homogeneous transform in place."""
        pass

    @abstractmethod
    def get_vector_to(self, point: Vector, limited: bool = True) -> Vector:
        """
        Return the shortest vector from point to this shape.

        Args:
            point: Query point
            limited: Respect the shape's natural limits (segment ends,
                the start of a ray). Unlimited queries treat the shape as
                extended to infinity where that makes sense.

        Returns:
            The vector, or INVALID if it is undefined
        """
        pass

    @abstractmethod
    def get_bounding_box(self) -> Optional[BoundingBox]:
        pass

    def is_valid(self) -> bool:
        return True

    def get_distance_to(self, point: Vector, limited: bool = True) -> float:
        v = self.get_vector_to(point, limited)
        if not v.is_valid():
            return math.inf
        return v.get_magnitude()

    def move(self, offset: Vector) -> bool:
        return self.transform(tf.translation(offset))

    def rotate(self, angle: float, center: Optional[Vector] = None) -> bool:
        return self.transform(tf.rotation(angle, center))

    def scale(self, factors: Union[float, Vector], center: Optional[Vector] = None) -> bool:
        return self.transform(tf.scaling(factors, center))

    def mirror(self, axis_start: Vector, axis_end: Vector) -> bool:
        return self.transform(tf.mirroring(axis_start, axis_end))


class Point(Shape):
    """A single point."""

    def __init__(self, position: Vector = Vector()):
        self.position = position

    def clone(self) -> 'Point':
        return Point(self.position)

    def transform(self, matrix: np.ndarray) -> bool:
        self.position = self.position.transform(matrix)
        return True

    def get_vector_to(self, point: Vector, limited: bool = True) -> Vector:
        return self.position - point

    def get_bounding_box(self) -> Optional[BoundingBox]:
        p = self.position
        return BoundingBox(p.x, p.y, p.x, p.y)

    def is_valid(self) -> bool:
        return self.position.is_valid()

    def __repr__(self) -> str:
        return f"Point({self.position!r})"


class Line(Shape):
    """A line segment between two points."""

    def __init__(self, start_point: Vector = Vector(), end_point: Vector = Vector()):
        self.start_point = start_point
        self.end_point = end_point

    def clone(self) -> 'Line':
        return Line(self.start_point, self.end_point)

    def transform(self, matrix: np.ndarray) -> bool:
        self.start_point = self.start_point.transform(matrix)
        self.end_point = self.end_point.transform(matrix)
        return True

    def get_middle_point(self) -> Vector:
        return (self.start_point + self.end_point) / 2

    def get_length(self) -> float:
        return self.start_point.get_distance_to(self.end_point)

    def get_angle(self) -> float:
        return self.start_point.get_angle_to(self.end_point)

    def get_vector_to(self, point: Vector, limited: bool = True) -> Vector:
        d = self.end_point - self.start_point
        length_sq = d.dot(d)
        if length_sq == 0.0:
            # Line is actually a point
            return self.start_point - point
        t = (point - self.start_point).dot(d) / length_sq
        if limited:
            t = max(0.0, min(1.0, t))
        return self.start_point + d * t - point

    def get_bounding_box(self) -> Optional[BoundingBox]:
        return BoundingBox(
            min_x=min(self.start_point.x, self.end_point.x),
            min_y=min(self.start_point.y, self.end_point.y),
            max_x=max(self.start_point.x, self.end_point.x),
            max_y=max(self.start_point.y, self.end_point.y)
        )

    def is_valid(self) -> bool:
        return self.start_point.is_valid() and self.end_point.is_valid()

    def __repr__(self) -> str:
        return f"Line({self.start_point!r}, {self.end_point!r})"


class XLine(Shape):
    """
    An infinite construction line through base_point along direction.

    The direction's length carries no geometric meaning; base_point +
    direction is only used as a second defining point for editing.
    A zero direction leaves the line degenerate: it is not rejected, but
    queries that need a direction return INVALID.
    """

    def __init__(self, base_point: Vector = Vector(), direction: Vector = Vector()):
        self.base_point = base_point
        self.direction = direction

    @classmethod
    def from_line(cls, line: Line):
        """Extend a line segment to an infinite shape starting at its start point."""
        return cls(line.start_point, line.end_point - line.start_point)

    def clone(self):
        return type(self)(self.base_point, self.direction)

    def transform(self, matrix: np.ndarray) -> bool:
        second = self.get_second_point().transform(matrix)
        self.base_point = self.base_point.transform(matrix)
        self.direction = second - self.base_point
        return True

    def get_second_point(self) -> Vector:
        return self.base_point + self.direction

    def set_second_point(self, point: Vector) -> None:
        self.direction = point - self.base_point

    def get_angle(self) -> float:
        return self.direction.get_angle()

    def get_direction1(self) -> float:
        return self.get_angle()

    def get_direction2(self) -> float:
        return (self.get_angle() + math.pi) % (2 * math.pi)

    def get_length(self) -> float:
        if self.direction.is_zero():
            return 0.0
        return math.inf

    def reverse(self) -> bool:
        self.direction = -self.direction
        return True

    def _parameter_of(self, point: Vector) -> Optional[float]:
        length_sq = self.direction.dot(self.direction)
        if length_sq == 0.0:
            return None
        return (point - self.base_point).dot(self.direction) / length_sq

    def get_vector_to(self, point: Vector, limited: bool = True) -> Vector:
        t = self._parameter_of(point)
        if t is None:
            return INVALID
        return self.base_point + self.direction * t - point

    def get_bounding_box(self) -> Optional[BoundingBox]:
        return None

    def is_valid(self) -> bool:
        return (self.base_point.is_valid() and self.direction.is_valid() and
                not self.direction.is_zero())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base_point!r}, {self.direction!r})"


class Ray(XLine):
    """
    A semi-infinite line starting at base_point and running along direction.

    The second point (base_point + direction) is a handle for the
    direction, not an end point.
    """

    def get_vector_to(self, point: Vector, limited: bool = True) -> Vector:
        t = self._parameter_of(point)
        if t is None:
            return INVALID
        if limited:
            t = max(0.0, t)
        return self.base_point + self.direction * t - point


class Circle(Shape):
    """A full circle."""

    def __init__(self, center: Vector = Vector(), radius: float = 0.0):
        self.center = center
        self.radius = radius

    def clone(self) -> 'Circle':
        return Circle(self.center, self.radius)

    def transform(self, matrix: np.ndarray) -> bool:
        self.center = self.center.transform(matrix)
        # Non-uniform scaling would make an ellipse; keep the mean radius
        self.radius *= math.sqrt(abs(tf.determinant(matrix)))
        return True

    def get_vector_to(self, point: Vector, limited: bool = True) -> Vector:
        v = point - self.center
        if v.get_magnitude() == 0.0:
            return INVALID
        return self.center + v.normalize() * self.radius - point

    def get_bounding_box(self) -> Optional[BoundingBox]:
        c = self.center
        r = self.radius
        return BoundingBox(c.x - r, c.y - r, c.x + r, c.y + r)

    def is_valid(self) -> bool:
        return self.center.is_valid() and self.radius > 0.0

    def __repr__(self) -> str:
        return f"Circle({self.center!r}, {self.radius:g})"
