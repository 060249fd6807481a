"""
DraftKit Document Model

The Document class is the root container for all drawing data and the
context that supplies document-scoped defaults to attached entities.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, TYPE_CHECKING
from uuid import UUID, uuid4
import logging

from ..config import settings
from .layer import Layer
from .linetype import Linetype, BY_LAYER, BY_BLOCK, CONTINUOUS
from .shapes import BoundingBox

if TYPE_CHECKING:
    from ..entity.entity_data import EntityData

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Document:
    """
    The root document containing all drawing data.

    A Document owns its linetypes, layers and entities. Entities only hold
    a weak reference back to it, so closing or dropping a document never
    depends on the entities being gone first.

    A new document always contains the BYLAYER, BYBLOCK and CONTINUOUS
    linetypes and a default layer, which is current.
    """
    name: str = "Untitled"
    id: UUID = field(default_factory=uuid4)
    linetypes: Dict[UUID, Linetype] = field(default_factory=dict)
    layers: Dict[UUID, Layer] = field(default_factory=dict)
    entities: Dict[UUID, 'EntityData'] = field(default_factory=dict)
    current_layer_id: Optional[UUID] = None

    def __post_init__(self):
        for name in (BY_LAYER, BY_BLOCK, CONTINUOUS):
            if self.get_linetype_by_name(name) is None:
                self.add_linetype(Linetype(name))

        default_layer = self.get_layer_by_name(settings.default_layer_name)
        if default_layer is None:
            default_layer = Layer(name=settings.default_layer_name)
            self.add_layer(default_layer)
        if self.current_layer_id is None:
            self.current_layer_id = default_layer.id

    # Linetypes

    def add_linetype(self, linetype: Linetype) -> bool:
        """Add a linetype. Names are unique, ignoring case."""
        if self.get_linetype_by_name(linetype.name) is not None:
            logger.warning("Linetype %r already exists in %s", linetype.name, self.name)
            return False
        self.linetypes[linetype.id] = linetype
        return True

    def get_linetype(self, linetype_id: Optional[UUID]) -> Optional[Linetype]:
        if linetype_id is None:
            return None
        return self.linetypes.get(linetype_id)

    def get_linetype_by_name(self, name: str) -> Optional[Linetype]:
        """Find a linetype by name (case insensitive)."""
        key = name.upper()
        for linetype in self.linetypes.values():
            if linetype.name.upper() == key:
                return linetype
        return None

    def get_linetype_by_layer_id(self) -> Optional[UUID]:
        """Id of this document's BYLAYER linetype."""
        linetype = self.get_linetype_by_name(BY_LAYER)
        return linetype.id if linetype else None

    def get_linetype_by_block_id(self) -> Optional[UUID]:
        linetype = self.get_linetype_by_name(BY_BLOCK)
        return linetype.id if linetype else None

    def get_linetype_continuous_id(self) -> Optional[UUID]:
        linetype = self.get_linetype_by_name(settings.default_linetype_name)
        return linetype.id if linetype else None

    # Layers

    def add_layer(self, layer: Layer) -> bool:
        """
        Add a layer to the document.

        A layer without a linetype, or with a linetype this document does
        not define, is given the default linetype.

        Returns:
            False if a layer with the same name exists
        """
        if self.get_layer_by_name(layer.name) is not None:
            logger.warning("Layer %r already exists in %s", layer.name, self.name)
            return False
        if layer.linetype_id not in self.linetypes:
            if layer.linetype_id is not None:
                logger.warning("Layer %r refers to an unknown linetype, using %s",
                               layer.name, settings.default_linetype_name)
            layer.linetype_id = self.get_linetype_continuous_id()
        self.layers[layer.id] = layer
        return True

    def remove_layer(self, layer_id: UUID) -> bool:
        """Remove a layer (cannot remove the default, current or a used layer)."""
        layer = self.layers.get(layer_id)
        if layer is None:
            return False
        if layer.name.upper() == settings.default_layer_name.upper():
            return False
        if layer_id == self.current_layer_id:
            return False
        if self.get_entities_on_layer(layer_id):
            logger.warning("Layer %r still has entities, not removed", layer.name)
            return False
        del self.layers[layer_id]
        return True

    def get_layer(self, layer_id: Optional[UUID]) -> Optional[Layer]:
        if layer_id is None:
            return None
        return self.layers.get(layer_id)

    def get_layer_by_name(self, name: str) -> Optional[Layer]:
        """Find a layer by name (case insensitive)."""
        key = name.upper()
        for layer in self.layers.values():
            if layer.name.upper() == key:
                return layer
        return None

    def get_layers(self) -> List[Layer]:
        return list(self.layers.values())

    def set_current_layer(self, layer_id: UUID) -> bool:
        """Set current active layer."""
        layer = self.layers.get(layer_id)
        if layer is None or layer.locked:
            return False
        self.current_layer_id = layer_id
        return True

    def get_current_layer_id(self) -> Optional[UUID]:
        return self.current_layer_id

    def resolve_layer_id(self, layer_name: Optional[str]) -> Optional[UUID]:
        """
        Map a layer name to a layer of this document.

        Returns:
            Id of the layer with that name, or the current layer id if
            there is none
        """
        if layer_name:
            layer = self.get_layer_by_name(layer_name)
            if layer is not None:
                return layer.id
        return self.current_layer_id

    # Entities

    def add_entity(self, entity: 'EntityData') -> bool:
        """
        Register an entity with this document.

        Unattached entities are attached here and get their document-scoped
        properties resolved. Entities created with this document, or copied
        into it, are registered by attach() and rebind() already. Entities
        that belong to another document must be copied in with
        import_entity() instead.
        """
        owner = entity.document
        if owner is not None and owner is not self:
            logger.warning("Entity %s belongs to document %s, not added to %s",
                           entity.id, owner.name, self.name)
            return False
        if entity.id in self.entities:
            return False
        entity.attach(self)
        logger.debug("Added %s %s to %s", type(entity).__name__, entity.id, self.name)
        return True

    def import_entity(self, entity: 'EntityData') -> 'EntityData':
        """
        Copy an entity from any document into this one (paste, import).

        Returns:
            The new entity owned by this document
        """
        copy = entity.copy_to(self)
        logger.debug("Imported %s %s as %s into %s",
                     type(entity).__name__, entity.id, copy.id, self.name)
        return copy

    def remove_entity(self, entity_id: UUID) -> bool:
        """Remove an entity by id and detach it."""
        entity = self.entities.pop(entity_id, None)
        if entity is None:
            return False
        entity.detach()
        return True

    def get_entity(self, entity_id: UUID) -> Optional['EntityData']:
        return self.entities.get(entity_id)

    def get_entities(self) -> List['EntityData']:
        return list(self.entities.values())

    def get_entities_on_layer(self, layer_id: UUID) -> List['EntityData']:
        return [e for e in self.entities.values() if e.layer_id == layer_id]

    def get_effective_linetype_id(self, entity: 'EntityData') -> Optional[UUID]:
        """
        Resolve the linetype an entity is actually drawn with.

        BYLAYER follows the entity's layer, BYBLOCK falls back to the
        default linetype since this model has no block references.
        """
        linetype = self.get_linetype(entity.linetype_id)
        if linetype is None:
            return None
        if linetype.is_by_layer:
            layer = self.get_layer(entity.layer_id)
            if layer is None:
                return self.get_linetype_continuous_id()
            return layer.linetype_id
        if linetype.is_by_block:
            return self.get_linetype_continuous_id()
        return linetype.id

    def get_bounding_box(self) -> Optional[BoundingBox]:
        """
        Calculate the bounding box of all bounded entities.

        Returns:
            BoundingBox of all entities, or None if there are none
        """
        result = None
        for entity in self.entities.values():
            box = entity.get_bounding_box()
            if box is None:
                continue
            result = box if result is None else result.union(box)
        return result

    def close(self) -> None:
        """Detach all entities and drop them from the document."""
        for entity in list(self.entities.values()):
            entity.detach()
        self.entities.clear()
        logger.debug("Closed document %s", self.name)
