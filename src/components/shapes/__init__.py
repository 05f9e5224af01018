"""
Shapes component - Component shape tokens and style typography.
"""

from ._impl import (
    DEFAULT_BASE_SHAPES,
    DEFAULT_BASE_TYPOGRAPHY,
    DEFAULT_SHAPE_RULE,
    DEFAULT_STYLE_TYPOGRAPHY_RULE,
    ComponentRule,
    ShapeRule,
    StyleTypographyRule,
    generate_style_typography,
    pick_component_shapes,
)
from .component import build_shape_rules, build_style_typography_rules, run_pick
from .models import PickShapesInput, StyleOutput
from .ports import ShapeRulesPort

__all__ = [
    # Component entry points
    "run_pick",
    # Models
    "ComponentRule",
    "PickShapesInput",
    "ShapeRule",
    "StyleOutput",
    "StyleTypographyRule",
    # Ports
    "ShapeRulesPort",
    # Functions
    "build_shape_rules",
    "build_style_typography_rules",
    "generate_style_typography",
    "pick_component_shapes",
    # Constants
    "DEFAULT_BASE_SHAPES",
    "DEFAULT_BASE_TYPOGRAPHY",
    "DEFAULT_SHAPE_RULE",
    "DEFAULT_STYLE_TYPOGRAPHY_RULE",
]
