from typing import Literal

from pydantic import BaseModel, ConfigDict

from src.domain.entities import (
    ColorLocks,
    ColorSet,
    ComponentShapes,
    ContrastTarget,
    FontPair,
    FullPalette,
    HarmonyType,
    TypographyColors,
    TypographyTokens,
    TypographyTrendHints,
)

# --- Shared Enums/Types ---
Tier = Literal["free", "pro"]
PaletteMode = Literal["base", "harmony"]
Severity = Literal["pass", "warn", "fail"]


# --- Vibes ---
class VibeSummary(BaseModel):
    id: str
    label: str
    description: str
    is_dark_ui: bool
    pro: bool


class VibesResponse(BaseModel):
    tier: Tier
    vibes: list[VibeSummary]


# --- Palette ---
class PaletteRequest(BaseModel):
    vibe_id: str
    seed: float
    prev_palette: ColorSet | None = None
    locks: ColorLocks | None = None
    dark_mode: bool = False
    tier: Tier = "free"


class PaletteResponse(BaseModel):
    colors: ColorSet
    palette: FullPalette


class HarmonyRequest(BaseModel):
    vibe_id: str
    seed: float
    harmony_type: HarmonyType | None = None
    prev_palette: ColorSet | None = None
    locks: ColorLocks | None = None
    tier: Tier = "free"


class HarmonyResponse(BaseModel):
    harmony_type: HarmonyType
    colors: ColorSet
    palette: FullPalette


# --- Contrast ---
class ContrastCheckModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    foreground: str
    background: str
    ratio: float
    aa_compliant: bool
    aaa_compliant: bool
    label: str
    severity: Severity


class ViolationsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    aa: int
    aaa: int


class ContrastCheckRequest(BaseModel):
    colors: ColorSet


class ContrastFixRequest(BaseModel):
    colors: ColorSet
    target: ContrastTarget = "aa"
    include_derived: bool = True
    tier: Tier = "free"


class ContrastResponse(BaseModel):
    palette: FullPalette
    checks: list[ContrastCheckModel]
    violations: ViolationsModel
    adjusted: list[str] = []


# --- Typography ---
class TypographyRequest(BaseModel):
    vibe_id: str
    colors: ColorSet
    seed: float = 0.0
    current: TypographyTokens | None = None
    trend_hints: TypographyTrendHints | None = None
    tier: Tier = "free"


class TypographyResponse(BaseModel):
    typography: TypographyTokens
    colors: TypographyColors


# --- Design ---
class DesignRequest(BaseModel):
    vibe_id: str
    seed: float
    style_seed: float | None = None
    prev_palette: ColorSet | None = None
    locks: ColorLocks | None = None
    mode: PaletteMode = "base"
    harmony_type: HarmonyType | None = None
    dark_mode: bool = False
    contrast_target: ContrastTarget | None = None
    tier: Tier = "free"
    fonts: FontPair | None = None
    trend_hints: TypographyTrendHints | None = None


class DesignErrorModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    message: str
    feature: str | None = None


class DesignResponse(BaseModel):
    colors: ColorSet
    palette: FullPalette
    contrast: list[ContrastCheckModel]
    violations: ViolationsModel
    typography: TypographyTokens
    typography_colors: TypographyColors
    shapes: ComponentShapes
    css_variables: str
    json_tokens: str
    errors: list[DesignErrorModel] = []
    success: bool = True
