from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.components.C1_ColorSpace import normalize_hex

# --- Enums / Literals ---
ColorKey = Literal["primary", "secondary", "accent", "background", "text"]
SizeToken = Literal["xs", "sm", "md", "lg", "xl", "2xl"]
FontStyle = Literal["normal", "italic"]
TextTransform = Literal["none", "uppercase"]
RadiusToken = Literal["none", "sm", "md", "lg", "xl", "full"]
ShadowToken = Literal["none", "xs", "sm", "md", "lg", "xl", "2xl"]
BorderToken = Literal["none", "subtle", "strong"]
HarmonyType = Literal[
    "analogous", "split-complementary", "triadic", "tetradic", "complementary"
]
ContrastTarget = Literal["aa", "aaa"]

BASE_COLOR_KEYS: tuple[ColorKey, ...] = ("primary", "secondary", "accent", "background", "text")
SIZE_ORDER: tuple[SizeToken, ...] = ("xs", "sm", "md", "lg", "xl", "2xl")
HARMONY_TYPES: tuple[HarmonyType, ...] = (
    "tetradic",
    "analogous",
    "complementary",
    "triadic",
    "split-complementary",
)

Range = tuple[float, float]


def size_index(size: SizeToken) -> int:
    return SIZE_ORDER.index(size)


# --- Vibes ---

class VibePreset(BaseModel):
    """Static configuration of one creative style. Never mutated at runtime."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str = ""
    description: str = ""
    primary_hue: float = Field(ge=0, le=360)
    primary_hue_range: Range | None = None
    primary_sat_range: Range
    primary_light_range: Range
    bg_lightness: float = Field(ge=0, le=100)
    is_dark_ui: bool = False

    @field_validator("primary_sat_range", "primary_light_range")
    @classmethod
    def _percent_range(cls, value: Range) -> Range:
        low, high = value
        if not 0 <= low <= high <= 100:
            raise ValueError(f"range {value} must satisfy 0 <= min <= max <= 100")
        return value

    @field_validator("primary_hue_range")
    @classmethod
    def _hue_range(cls, value: Range | None) -> Range | None:
        if value is not None and value[0] > value[1]:
            raise ValueError(f"hue range {value} must satisfy min <= max")
        return value

    def hue_range(self) -> Range:
        if self.primary_hue_range is not None:
            return self.primary_hue_range
        return (self.primary_hue - 30, self.primary_hue + 30)


# --- Colors ---

class ColorSet(BaseModel):
    """The five base colours, each normalised to #rrggbb."""

    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str
    background: str
    text: str

    @field_validator("*", mode="before")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_hex(value)

    def base(self) -> "ColorSet":
        return ColorSet(**{key: getattr(self, key) for key in BASE_COLOR_KEYS})


class FullPalette(ColorSet):
    """Base colours plus the derived surface/text/border tokens."""

    on_primary: str
    on_secondary: str
    on_accent: str
    surface: str
    surface_alt: str
    text_muted: str
    border_subtle: str
    border_strong: str


class ColorLocks(BaseModel):
    """Per-key flags forcing regeneration to reuse the previous value."""

    model_config = ConfigDict(frozen=True)

    primary: bool = False
    secondary: bool = False
    accent: bool = False
    background: bool = False
    text: bool = False

    def is_locked(self, key: ColorKey) -> bool:
        return bool(getattr(self, key))


# --- Typography ---

class TextStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: SizeToken
    weight: int = Field(ge=1, le=1000)
    style: FontStyle = "normal"
    transform: TextTransform = "none"


class TypographyTokens(BaseModel):
    """
    Four text style slots.

    subheading may be omitted on input; the optimizer always fills it.
    """

    model_config = ConfigDict(frozen=True)

    heading: TextStyle
    subheading: TextStyle | None = None
    body: TextStyle
    accent: TextStyle


class WeightPair(BaseModel):
    body: int
    heading: int


class TypographyTrend(BaseModel):
    rule: str | None = None
    rationale: str | None = None
    context: str | None = None
    recommended_scale_ratio: float | None = None
    recommended_weight_pairs: list[WeightPair] = Field(default_factory=list)


class TypographyTrendHints(BaseModel):
    """Trend data refreshed offline; only weight pairs are consumed."""

    trends: list[TypographyTrend] = Field(default_factory=list)


class TypographyColors(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading: str
    subheading: str
    body: str
    accent: str


# --- Shapes ---

class ComponentShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    radius: RadiusToken = "md"
    shadow: ShadowToken = "none"
    border: BorderToken = "none"


class ComponentShapes(BaseModel):
    model_config = ConfigDict(frozen=True)

    button_primary: ComponentShape
    button_secondary: ComponentShape
    card: ComponentShape


class FontPair(BaseModel):
    """Font family names chosen by the external font catalogue."""

    heading: str = "system-ui"
    body: str = "system-ui"

    @model_validator(mode="after")
    def _strip(self) -> "FontPair":
        if not self.heading.strip() or not self.body.strip():
            raise ValueError("font family names must not be empty")
        return self
