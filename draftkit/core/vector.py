"""
DraftKit Vector Primitive

Defines the coordinate value type shared by all shapes and entities.
"""

from dataclasses import dataclass
from typing import Optional
import math

import numpy as np

from ..config import settings


@dataclass(frozen=True)
class Vector:
    """
    An immutable 2D/3D coordinate.

    A vector with valid=False is the "invalid" sentinel returned by
    queries that have no defined answer. Invalid vectors never compare
    fuzzy-equal to anything.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    valid: bool = True

    @staticmethod
    def from_polar(radius: float, angle: float) -> 'Vector':
        """Create a vector in the xy plane from radius and angle (radians)."""
        return Vector(radius * math.cos(angle), radius * math.sin(angle))

    def __add__(self, other: 'Vector') -> 'Vector':
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z,
                      self.valid and other.valid)

    def __sub__(self, other: 'Vector') -> 'Vector':
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z,
                      self.valid and other.valid)

    def __neg__(self) -> 'Vector':
        return Vector(-self.x, -self.y, -self.z, self.valid)

    def __mul__(self, factor: float) -> 'Vector':
        return Vector(self.x * factor, self.y * factor, self.z * factor, self.valid)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> 'Vector':
        return Vector(self.x / divisor, self.y / divisor, self.z / divisor, self.valid)

    def is_valid(self) -> bool:
        return self.valid

    def is_zero(self, tolerance: Optional[float] = None) -> bool:
        """Check if all coordinates are within tolerance of zero."""
        if tolerance is None:
            tolerance = settings.point_tolerance
        return (abs(self.x) <= tolerance and
                abs(self.y) <= tolerance and
                abs(self.z) <= tolerance)

    def equals_fuzzy(self, other: 'Vector', tolerance: Optional[float] = None) -> bool:
        """
        Compare two vectors coordinate by coordinate within a tolerance.

        Args:
            other: Vector to compare with
            tolerance: Maximum difference per coordinate, defaults to
                the configured point tolerance

        Returns:
            True if both vectors are valid and every coordinate matches
        """
        if not (self.valid and other.valid):
            return False
        if tolerance is None:
            tolerance = settings.point_tolerance
        return (abs(self.x - other.x) <= tolerance and
                abs(self.y - other.y) <= tolerance and
                abs(self.z - other.z) <= tolerance)

    def dot(self, other: 'Vector') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def get_magnitude(self) -> float:
        """Euclidean length of the vector."""
        if not self.valid:
            return 0.0
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def get_magnitude_2d(self) -> float:
        if not self.valid:
            return 0.0
        return math.hypot(self.x, self.y)

    def get_angle(self) -> float:
        """Angle in the xy plane, normalized to [0, 2*pi)."""
        if not self.valid or (self.x == 0.0 and self.y == 0.0):
            return 0.0
        return math.atan2(self.y, self.x) % (2 * math.pi)

    def get_angle_to(self, other: 'Vector') -> float:
        """Angle of the vector pointing from this point to other."""
        return (other - self).get_angle()

    def get_distance_to(self, other: 'Vector') -> float:
        """Calculate Euclidean distance to another point."""
        if not (self.valid and other.valid):
            return math.inf
        return (other - self).get_magnitude()

    def normalize(self) -> 'Vector':
        """Unit vector with the same direction; a zero vector stays zero."""
        length = self.get_magnitude()
        if length == 0.0:
            return Vector(0.0, 0.0, 0.0, self.valid)
        return self / length

    def transform(self, matrix: np.ndarray) -> 'Vector':
        """
        Apply a 4x4 homogeneous transform.
        """
        if not self.valid:
            return self
        x, y, z, w = matrix @ np.array([self.x, self.y, self.z, 1.0])
        return Vector(float(x / w), float(y / w), float(z / w))

    def rotate(self, angle: float, center: Optional['Vector'] = None) -> 'Vector':
        """Rotate point around center by angle (radians)."""
        from .transform import rotation
        return self.transform(rotation(angle, center))

    def scale(self, factor, center: Optional['Vector'] = None) -> 'Vector':
        """Scale by a scalar or a Vector of per-axis factors around center."""
        from .transform import scaling
        return self.transform(scaling(factor, center))

    def mirror(self, axis_start: 'Vector', axis_end: 'Vector') -> 'Vector':
        """Mirror across the line through axis_start and axis_end."""
        from .transform import mirroring
        return self.transform(mirroring(axis_start, axis_end))

    def __repr__(self) -> str:
        if not self.valid:
            return "Vector(invalid)"
        return f"Vector({self.x:g}, {self.y:g}, {self.z:g})"


INVALID = Vector(valid=False)
