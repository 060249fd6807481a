"""
DraftKit Model Settings

Model-wide defaults shared by the core and entity modules.
"""

from dataclasses import dataclass


@dataclass
class ModelSettings:
    """Tolerances and default names used when building documents."""
    point_tolerance: float = 1.0e-9      # Fuzzy point comparison
    angle_tolerance: float = 1.0e-9      # radians
    default_layer_name: str = "0"
    default_linetype_name: str = "CONTINUOUS"
    default_layer_color: str = "#FFFFFF"
    default_line_weight: float = 0.25    # mm


# Read at call time, so host applications may adjust fields in place
settings = ModelSettings()
