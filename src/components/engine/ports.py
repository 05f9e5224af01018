"""
Engine port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.components.capabilities import VibeCatalogPort
from src.components.contrast import ContrastRulesPort
from src.components.shapes import ShapeRulesPort
from src.components.typography import TypographyRulesPort


class DesignRulesPort(
    ContrastRulesPort, TypographyRulesPort, ShapeRulesPort, VibeCatalogPort, Protocol
):
    """Every rules section the engine forwards to its components."""
