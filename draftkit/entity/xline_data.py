"""
Construction line entity data.

Infinite in both directions, but edited exactly like a ray: through its
base point and second point.
"""

from ..core.shapes import XLine
from .direction_handles import DirectionHandlesMixin
from .entity_data import EntityData


class XLineData(DirectionHandlesMixin, EntityData):
    """Document-attached construction line."""

    shape_class = XLine
