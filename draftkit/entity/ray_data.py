"""
Ray entity data.

A ray shape attached to a document. Its two handles are the base point
and the second point (base point + direction); the second point only
steers the direction and is not an end of the ray.
"""

from ..core.shapes import Ray
from .direction_handles import DirectionHandlesMixin
from .entity_data import EntityData


class RayData(DirectionHandlesMixin, EntityData):
    """Document-attached ray."""

    shape_class = Ray
