"""
DraftKit Linetypes

Linetype records owned by a Document. Ids are generated per record, so the
same name has a different id in every document.
"""

from dataclasses import dataclass, field
from typing import Tuple
from uuid import UUID, uuid4


BY_LAYER = "BYLAYER"
BY_BLOCK = "BYBLOCK"
CONTINUOUS = "CONTINUOUS"

RESERVED_NAMES = (BY_LAYER, BY_BLOCK, CONTINUOUS)


@dataclass
class Linetype:
    """
    A named line style.

    pattern holds dash lengths in drawing units: positive values are
    dashes, negative values gaps, zero a dot. An empty pattern is a solid
    line.
    """
    name: str
    description: str = ""
    pattern: Tuple[float, ...] = ()
    id: UUID = field(default_factory=uuid4)

    @property
    def is_by_layer(self) -> bool:
        return self.name.upper() == BY_LAYER

    @property
    def is_by_block(self) -> bool:
        return self.name.upper() == BY_BLOCK

    @property
    def pattern_length(self) -> float:
        return sum(abs(d) for d in self.pattern)
