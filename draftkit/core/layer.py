"""
DraftKit Layer System

A layer groups entities that share display properties.
"""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from ..config import settings


@dataclass
class Layer:
    """
    A named layer.

    Entities whose linetype is BYLAYER are drawn with linetype_id of the
    layer they are on. The id refers to a linetype of the same document.
    """
    name: str = "Layer"
    linetype_id: Optional[UUID] = None
    color: str = field(default_factory=lambda: settings.default_layer_color)
    line_weight: float = field(default_factory=lambda: settings.default_line_weight)
    visible: bool = True
    locked: bool = False
    id: UUID = field(default_factory=uuid4)
