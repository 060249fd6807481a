"""
Handles shared by the directional entities (rays and construction lines).

Both are defined by a base point and a direction, and both are edited
through the base point and the second point (base point + direction).
"""

from typing import List, Optional, TYPE_CHECKING
import logging

from ..core.shapes import Line
from ..core.vector import Vector
from .entity_data import ProjectionRenderingHint

if TYPE_CHECKING:
    from ..core.document import Document

logger = logging.getLogger(__name__)


class DirectionHandlesMixin:
    """
    Base point / second point editing for EntityData variants.

    Subclasses set shape_class to an XLine-like shape and list this mixin
    before EntityData in their bases.
    """

    shape_class = None

    def __init__(self, base_point: Vector = Vector(), direction: Vector = Vector(),
                 document: Optional['Document'] = None):
        self.shape = self.shape_class(base_point, direction)
        super().__init__(document)

    @classmethod
    def from_line(cls, line: Line, document: Optional['Document'] = None):
        """Start at the line's start point, pointing through its end point."""
        return cls(line.start_point, line.end_point - line.start_point, document)

    @property
    def base_point(self) -> Vector:
        return self.shape.base_point

    @base_point.setter
    def base_point(self, point: Vector):
        self.shape.base_point = point

    @property
    def direction(self) -> Vector:
        return self.shape.direction

    @direction.setter
    def direction(self, vector: Vector):
        self.shape.direction = vector

    @property
    def second_point(self) -> Vector:
        return self.shape.get_second_point()

    @second_point.setter
    def second_point(self, point: Vector):
        self.shape.set_second_point(point)

    def get_reference_points(
        self, hint: ProjectionRenderingHint = ProjectionRenderingHint.THREE_D
    ) -> List[Vector]:
        # Same handles in every view
        return [self.base_point, self.second_point]

    def move_reference_point(self, reference_point: Vector, target_point: Vector) -> bool:
        """
        Move the base point or the second point.

        Both handles are read before anything changes and at most one is
        moved. If reference_point matches both (zero direction), the base
        point wins and the direction is kept, so the degenerate shape moves
        as a whole. Moving the base point keeps the direction; moving the
        second point changes the direction only.
        """
        base_point = self.base_point
        second_point = self.second_point

        if reference_point.equals_fuzzy(base_point):
            self.base_point = target_point
            return True
        if reference_point.equals_fuzzy(second_point):
            self.second_point = target_point
            return True

        logger.debug("%r matches no reference point of %r", reference_point, self)
        return False
