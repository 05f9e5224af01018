"""
Typography component - Hierarchy optimizer and typography colours.
"""

from ._impl import (
    DEFAULT_TYPOGRAPHY_RULES,
    NO_RULE,
    TypographyRule,
    optimize_typography,
    optimize_typography_colors,
)
from .component import build_typography_rules, run_optimize
from .models import OptimizeTypographyInput, TypographyOutput
from .ports import TypographyRulesPort

__all__ = [
    # Component entry points
    "run_optimize",
    # Models
    "OptimizeTypographyInput",
    "TypographyOutput",
    "TypographyRule",
    # Ports
    "TypographyRulesPort",
    # Functions
    "build_typography_rules",
    "optimize_typography",
    "optimize_typography_colors",
    # Constants
    "DEFAULT_TYPOGRAPHY_RULES",
    "NO_RULE",
]
