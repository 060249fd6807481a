"""
Affine Transforms for DraftKit

Builds 4x4 homogeneous matrices for the operations applied to shapes:
- Translation (movement, including z)
- Rotation around a center, about the z axis
- Scaling around a center, in the xy plane
- Mirroring across an axis in the xy plane

Rotation, scaling and mirroring leave z unchanged.
"""

from typing import Optional, Tuple, Union
import math

import numpy as np

from .vector import Vector


def identity() -> np.ndarray:
    return np.identity(4)


def translation(offset: Vector) -> np.ndarray:
    """Matrix moving every point by offset."""
    m = np.identity(4)
    m[0, 3] = offset.x
    m[1, 3] = offset.y
    m[2, 3] = offset.z
    return m


def _about(center: Optional[Vector], m: np.ndarray) -> np.ndarray:
    """Conjugate m so it operates around center instead of the origin."""
    if center is None or (center.x == 0.0 and center.y == 0.0 and center.z == 0.0):
        return m
    return translation(center) @ m @ translation(-center)


def _planar(a: float, b: float, c: float, d: float) -> np.ndarray:
    """Embed the 2x2 xy matrix [[a, b], [c, d]], z untouched."""
    m = np.identity(4)
    m[0, 0], m[0, 1] = a, b
    m[1, 0], m[1, 1] = c, d
    return m


def rotation(angle: float, center: Optional[Vector] = None) -> np.ndarray:
    """Counter-clockwise rotation by angle (radians)."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return _about(center, _planar(cos_a, -sin_a, sin_a, cos_a))


def scale_factors(factors: Union[float, Vector]) -> Tuple[float, float]:
    """Normalize a scalar or Vector scale argument to (sx, sy)."""
    if isinstance(factors, Vector):
        return factors.x, factors.y
    return float(factors), float(factors)


def scaling(factors: Union[float, Vector], center: Optional[Vector] = None) -> np.ndarray:
    sx, sy = scale_factors(factors)
    return _about(center, _planar(sx, 0.0, 0.0, sy))


def mirroring(axis_start: Vector, axis_end: Vector) -> np.ndarray:
    """
    Reflection across the line through axis_start and axis_end.

    A zero-length axis has no defined reflection and yields the identity.
    """
    dx = axis_end.x - axis_start.x
    dy = axis_end.y - axis_start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return identity()
    # Householder-style reflection about the axis direction
    a = (dx * dx - dy * dy) / length_sq
    b = 2 * dx * dy / length_sq
    return _about(axis_start, _planar(a, b, b, -a))


def determinant(matrix: np.ndarray) -> float:
    """Signed area scale of the xy part of matrix."""
    return float(np.linalg.det(matrix[:2, :2]))
