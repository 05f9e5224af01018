"""
Engine component - Design generation facade over the token components.
"""

from .component import generate_design
from .models import DesignError, DesignOutput, GenerateDesignInput, PaletteMode
from .ports import DesignRulesPort

__all__ = [
    # Component entry points
    "generate_design",
    # Models
    "DesignError",
    "DesignOutput",
    "GenerateDesignInput",
    "PaletteMode",
    # Ports
    "DesignRulesPort",
]
