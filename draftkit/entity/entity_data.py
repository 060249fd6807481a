"""
DraftKit Entity Data

EntityData binds a pure-geometry shape to a document. It carries the
document-scoped properties (layer, linetype) and the reference-point
protocol that interactive tools use to find and drag control points.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, TYPE_CHECKING, Union
from uuid import UUID, uuid4
import copy
import logging
import math
import weakref

from ..core.shapes import Shape, BoundingBox
from ..core.vector import Vector

if TYPE_CHECKING:
    from ..core.document import Document

logger = logging.getLogger(__name__)


class ProjectionRenderingHint(Enum):
    """View the reference points are requested for."""
    THREE_D = 0
    TOP = 1
    SIDE = 2
    FRONT = 3


class EntityData(ABC):
    """
    Abstract base class for all document-attached entities.

    Every variant owns one shape (self.shape) and must implement:
    - get_reference_points(): Handles a tool may drag, in a stable order
    - move_reference_point(): Relocate one handle, True if it matched

    The owning document is held through a weak reference. Layer and
    linetype ids always refer to records of that document; copying an
    entity into another document re-resolves them there (see rebind()).
    """

    def __init__(self, document: Optional['Document'] = None):
        self.id: UUID = uuid4()
        self.shape: Shape
        self._document_ref: Optional[weakref.ref] = None

        # Document-scoped, resolved on attachment
        self.layer_id: Optional[UUID] = None
        self.linetype_id: Optional[UUID] = None
        # Layer name kept while detached
        self._layer_name: Optional[str] = None

        self.color: str = "BYLAYER"
        self.line_weight: Optional[float] = None  # None means by layer
        self.selected: bool = False

        if document is not None:
            self.attach(document)

    @property
    def document(self) -> Optional['Document']:
        """The owning document, or None when unattached or already gone."""
        if self._document_ref is None:
            return None
        return self._document_ref()

    def attach(self, document: 'Document') -> None:
        """
        Attach to a document and register with it, resolving only what is missing.

        A layer the document does not know is mapped by name, falling
        back to the current layer. An unknown linetype becomes the
        document's BYLAYER linetype.
        """
        layer_name = self.get_layer_name()
        self._release()
        self._document_ref = weakref.ref(document)
        if document.get_layer(self.layer_id) is None:
            self.layer_id = document.resolve_layer_id(layer_name)
        if document.get_linetype(self.linetype_id) is None:
            self.linetype_id = document.get_linetype_by_layer_id()
        self._layer_name = None
        document.entities[self.id] = self
        logger.debug("Attached %s %s to %s", type(self).__name__, self.id, document.name)

    def rebind(self, document: Optional['Document']) -> None:
        """
        Move this entity into the context of document.

        Used after copying. The linetype is always reset to the target
        document's BYLAYER linetype, whatever this entity held before.
        The layer is kept if the target knows it, otherwise mapped by
        name, falling back to the target's current layer. With no
        document, both ids are cleared and resolved by a later attach().
        """
        layer_name = self.get_layer_name()
        self._release()
        self._layer_name = None
        if document is None:
            self._document_ref = None
            self.layer_id = None
            self.linetype_id = None
            return

        self._document_ref = weakref.ref(document)

        self.linetype_id = document.get_linetype_by_layer_id()
        if document.get_layer(self.layer_id) is None:
            self.layer_id = document.resolve_layer_id(layer_name)
        document.entities[self.id] = self
        logger.debug("Rebound %s %s to %s (layer %s)",
                     type(self).__name__, self.id, document.name, layer_name)

    def detach(self) -> None:
        """
        Unregister from the document and drop the reference to it.

        All properties are kept. The layer name is remembered so a later
        attach() to another document can find the layer of the same name.
        """
        self._layer_name = self.get_layer_name()
        self._release()
        self._document_ref = None

    def _release(self) -> None:
        """Remove this entity from the registry of its current document."""
        document = self.document
        if document is not None and document.entities.get(self.id) is self:
            del document.entities[self.id]

    def get_layer_name(self) -> Optional[str]:
        document = self.document
        if document is None:
            return self._layer_name
        layer = document.get_layer(self.layer_id)
        return layer.name if layer else None

    def get_effective_linetype_id(self) -> Optional[UUID]:
        """Linetype the entity is drawn with, resolved through the document."""
        document = self.document
        if document is None:
            return None
        return document.get_effective_linetype_id(self)

    def clone(self) -> 'EntityData':
        """Copy with its own shape and id, still pointing at the same document."""
        clone = copy.copy(self)
        clone.id = uuid4()
        clone.shape = self.shape.clone()
        clone.selected = False
        return clone

    def copy_to(self, document: Optional['Document']) -> 'EntityData':
        """Copy this entity and rebind the copy to document."""
        clone = self.clone()
        clone.rebind(document)
        return clone

    @classmethod
    def from_data(cls, document: Optional['Document'], data: 'EntityData') -> 'EntityData':
        """
        Create an entity attached to document from another of the same variant.

        Raises:
            TypeError: if data is a different variant
        """
        if type(data) is not cls:
            raise TypeError(
                f"Cannot create {cls.__name__} from {type(data).__name__}"
            )
        return data.copy_to(document)

    # Reference point protocol

    @abstractmethod
    def get_reference_points(
        self, hint: ProjectionRenderingHint = ProjectionRenderingHint.THREE_D
    ) -> List[Vector]:
        """Return the handles of this entity, in display order."""
        pass

    @abstractmethod
    def move_reference_point(self, reference_point: Vector, target_point: Vector) -> bool:
        """
        Move the handle at reference_point to target_point.

        Returns:
            True if reference_point matched a handle, False otherwise (the
            entity is then unchanged)
        """
        pass

    def get_closest_reference_point(
        self, position: Vector, max_distance: float = math.inf
    ) -> Optional[Vector]:
        """Closest handle within max_distance of position, or None."""
        best = None
        best_distance = math.inf
        for point in self.get_reference_points():
            distance = point.get_distance_to(position)
            if distance <= max_distance and distance < best_distance:
                best = point
                best_distance = distance
        return best

    # Shape pass-throughs

    def get_vector_to(self, point: Vector, limited: bool = True) -> Vector:
        return self.shape.get_vector_to(point, limited)

    def get_distance_to(self, point: Vector, limited: bool = True) -> float:
        return self.shape.get_distance_to(point, limited)

    def get_bounding_box(self) -> Optional[BoundingBox]:
        return self.shape.get_bounding_box()

    def is_valid(self) -> bool:
        return self.shape.is_valid()

    def move(self, offset: Vector) -> bool:
        return self.shape.move(offset)

    def rotate(self, angle: float, center: Optional[Vector] = None) -> bool:
        return self.shape.rotate(angle, center)

    def scale(self, factors: Union[float, Vector], center: Optional[Vector] = None) -> bool:
        return self.shape.scale(factors, center)

    def mirror(self, axis_start: Vector, axis_end: Vector) -> bool:
        return self.shape.mirror(axis_start, axis_end)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.shape!r})"
