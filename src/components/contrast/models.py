"""
Contrast component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from src.domain.entities import ColorSet, ContrastTarget, FullPalette

Severity = Literal["pass", "warn", "fail"]


@dataclass(frozen=True)
class ContrastCheck:
    """One foreground/background measurement."""

    foreground: str
    background: str
    ratio: float
    aa_compliant: bool
    aaa_compliant: bool
    label: str
    severity: Severity


@dataclass(frozen=True)
class ContrastViolations:
    """Number of failing checks per standard."""

    aa: int
    aaa: int


@dataclass(frozen=True)
class ContrastPair:
    """Report row definition: label plus palette field names."""

    label: str
    foreground_field: str
    background_field: str


@dataclass(frozen=True)
class CheckContrastInput:
    """Input for a contrast report."""

    palette: ColorSet
    extra_pairs: tuple[ContrastPair, ...] = ()


@dataclass(frozen=True)
class ContrastReportOutput:
    """Report over the expanded palette."""

    palette: FullPalette
    checks: list[ContrastCheck] = field(default_factory=list)
    violations: ContrastViolations = field(default_factory=lambda: ContrastViolations(0, 0))
    success: bool = True


@dataclass(frozen=True)
class FixContrastInput:
    """Input for contrast repair."""

    colors: ColorSet
    target: ContrastTarget = "aa"


@dataclass(frozen=True)
class FixContrastOutput:
    """Repaired palette with the post-repair report."""

    colors: ColorSet
    adjusted: list[str] = field(default_factory=list)
    checks: list[ContrastCheck] = field(default_factory=list)
    violations: ContrastViolations = field(default_factory=lambda: ContrastViolations(0, 0))
    success: bool = True
