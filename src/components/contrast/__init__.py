"""
Contrast component - WCAG contrast report and lightness-search repair.
"""

from ._impl import (
    AA_RATIO,
    AAA_RATIO,
    DEFAULT_CONFIG,
    SEMANTIC_PAIRS,
    ContrastConfig,
    check_pair,
    check_palette_contrast,
    count_violations,
    fix_contrast_to_target,
    get_contrast_severity,
    is_aa_compliant,
    is_aaa_compliant,
    repair_foreground,
)
from .component import build_contrast_config, run_check, run_fix
from .models import (
    CheckContrastInput,
    ContrastCheck,
    ContrastPair,
    ContrastReportOutput,
    ContrastViolations,
    FixContrastInput,
    FixContrastOutput,
)
from .ports import ContrastRulesPort

__all__ = [
    # Component entry points
    "run_check",
    "run_fix",
    # Models
    "CheckContrastInput",
    "ContrastCheck",
    "ContrastPair",
    "ContrastReportOutput",
    "ContrastViolations",
    "FixContrastInput",
    "FixContrastOutput",
    # Ports
    "ContrastRulesPort",
    # Functions
    "build_contrast_config",
    "check_pair",
    "check_palette_contrast",
    "count_violations",
    "fix_contrast_to_target",
    "get_contrast_severity",
    "is_aa_compliant",
    "is_aaa_compliant",
    "repair_foreground",
    # Config
    "ContrastConfig",
    "DEFAULT_CONFIG",
    # Constants
    "AA_RATIO",
    "AAA_RATIO",
    "SEMANTIC_PAIRS",
]
