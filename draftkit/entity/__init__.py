"""
DraftKit Entity Module

Document-attached wrappers around the core shapes. Every variant exposes
the same reference point protocol to editing tools.
"""

from .entity_data import EntityData, ProjectionRenderingHint
from .point_data import PointData
from .line_data import LineData
from .ray_data import RayData
from .xline_data import XLineData
from .circle_data import CircleData

__all__ = [
    'EntityData',
    'ProjectionRenderingHint',
    'PointData',
    'LineData',
    'RayData',
    'XLineData',
    'CircleData',
]
