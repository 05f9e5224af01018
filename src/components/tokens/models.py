"""
Tokens component output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DesignTokens:
    """Exportable token documents."""

    css_variables: str
    json_tokens: str
