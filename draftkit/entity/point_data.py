"""Point entity data."""

from typing import List, Optional, TYPE_CHECKING

from ..core.shapes import Point
from ..core.vector import Vector
from .entity_data import EntityData, ProjectionRenderingHint

if TYPE_CHECKING:
    from ..core.document import Document


class PointData(EntityData):
    """Document-attached point with its position as the only handle."""

    def __init__(self, position: Vector = Vector(), document: Optional['Document'] = None):
        self.shape = Point(position)
        super().__init__(document)

    @property
    def position(self) -> Vector:
        return self.shape.position

    @position.setter
    def position(self, point: Vector):
        self.shape.position = point

    def get_reference_points(
        self, hint: ProjectionRenderingHint = ProjectionRenderingHint.THREE_D
    ) -> List[Vector]:
        return [self.position]

    def move_reference_point(self, reference_point: Vector, target_point: Vector) -> bool:
        if not reference_point.equals_fuzzy(self.position):
            return False
        self.position = target_point
        return True
