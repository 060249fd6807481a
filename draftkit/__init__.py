"""
DraftKit

Shape and entity data model for CAD drawings.
"""

__version__ = "0.1.0"
