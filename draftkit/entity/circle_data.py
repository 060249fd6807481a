"""Circle entity data."""

from typing import List, Optional, TYPE_CHECKING

from ..core.shapes import Circle
from ..core.vector import Vector
from .entity_data import EntityData, ProjectionRenderingHint

if TYPE_CHECKING:
    from ..core.document import Document


class CircleData(EntityData):
    """
    Document-attached circle.

    Handles are the center followed by the quadrant points at 0, 90, 180
    and 270 degrees. Dragging the center moves the circle, dragging a
    quadrant point changes the radius.
    """

    def __init__(self, center: Vector = Vector(), radius: float = 0.0,
                 document: Optional['Document'] = None):
        self.shape = Circle(center, radius)
        super().__init__(document)

    @property
    def center(self) -> Vector:
        return self.shape.center

    @center.setter
    def center(self, point: Vector):
        self.shape.center = point

    @property
    def radius(self) -> float:
        return self.shape.radius

    @radius.setter
    def radius(self, value: float):
        self.shape.radius = value

    def get_reference_points(
        self, hint: ProjectionRenderingHint = ProjectionRenderingHint.THREE_D
    ) -> List[Vector]:
        c = self.center
        r = self.radius
        return [
            c,
            c + Vector(r, 0),
            c + Vector(0, r),
            c - Vector(r, 0),
            c - Vector(0, r),
        ]

    def move_reference_point(self, reference_point: Vector, target_point: Vector) -> bool:
        center, *quadrants = self.get_reference_points()

        if reference_point.equals_fuzzy(center):
            self.center = target_point
            return True
        for quadrant in quadrants:
            if reference_point.equals_fuzzy(quadrant):
                self.radius = center.get_distance_to(target_point)
                return True
        return False
