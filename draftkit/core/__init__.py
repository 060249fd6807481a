"""
DraftKit Core Module

Contains the core data structures:
- Vector: Coordinate value type with fuzzy comparison
- Shapes: Point, Line, Ray, XLine, Circle
- Linetype, Layer: Document-scoped style records
- Document: Root container for all drawing data
"""

# Import order matters - vector first, then shapes, then document
from .vector import Vector, INVALID
from .shapes import BoundingBox, Shape, Point, Line, Ray, XLine, Circle
from .linetype import Linetype, BY_LAYER, BY_BLOCK, CONTINUOUS
from .layer import Layer
from .document import Document

__all__ = [
    'Vector', 'INVALID',
    'BoundingBox', 'Shape', 'Point', 'Line', 'Ray', 'XLine', 'Circle',
    'Linetype', 'BY_LAYER', 'BY_BLOCK', 'CONTINUOUS',
    'Layer',
    'Document',
]
