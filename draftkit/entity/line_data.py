"""Line segment entity data."""

from typing import List, Optional, TYPE_CHECKING

from ..core.shapes import Line
from ..core.vector import Vector
from .entity_data import EntityData, ProjectionRenderingHint

if TYPE_CHECKING:
    from ..core.document import Document


class LineData(EntityData):
    """
    Document-attached line segment.

    Handles are the start point, the end point and the middle point.
    Dragging the middle point moves the whole line.
    """

    def __init__(self, start_point: Vector = Vector(), end_point: Vector = Vector(),
                 document: Optional['Document'] = None):
        self.shape = Line(start_point, end_point)
        super().__init__(document)

    @property
    def start_point(self) -> Vector:
        return self.shape.start_point

    @start_point.setter
    def start_point(self, point: Vector):
        self.shape.start_point = point

    @property
    def end_point(self) -> Vector:
        return self.shape.end_point

    @end_point.setter
    def end_point(self, point: Vector):
        self.shape.end_point = point

    def get_reference_points(
        self, hint: ProjectionRenderingHint = ProjectionRenderingHint.THREE_D
    ) -> List[Vector]:
        return [self.start_point, self.end_point, self.shape.get_middle_point()]

    def move_reference_point(self, reference_point: Vector, target_point: Vector) -> bool:
        start_point, end_point, middle_point = self.get_reference_points()

        if reference_point.equals_fuzzy(start_point):
            self.start_point = target_point
            return True
        if reference_point.equals_fuzzy(end_point):
            self.end_point = target_point
            return True
        if reference_point.equals_fuzzy(middle_point):
            return self.move(target_point - middle_point)
        return False
