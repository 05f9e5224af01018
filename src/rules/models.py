from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.domain.entities import (
    BorderToken,
    RadiusToken,
    ShadowToken,
    SizeToken,
    VibePreset,
)


class UnknownVibeError(KeyError):
    """Raised when a vibe id is not in the catalogue."""

    def __init__(self, vibe_id: str) -> None:
        self.vibe_id = vibe_id
        super().__init__(vibe_id)

    def __str__(self) -> str:
        return f"Unknown vibe: {self.vibe_id!r}"


class ComponentOptions(BaseModel):
    radius_options: list[RadiusToken] = Field(default_factory=list)
    shadow_options: list[ShadowToken] = Field(default_factory=list)
    border_options: list[BorderToken] = Field(default_factory=list)


class ShapeRuleConfig(BaseModel):
    button_primary: ComponentOptions = Field(default_factory=ComponentOptions)
    button_secondary: ComponentOptions = Field(default_factory=ComponentOptions)
    card: ComponentOptions = Field(default_factory=ComponentOptions)


Chance = float


class StyleTypographyConfig(BaseModel):
    heading_sizes: list[SizeToken] = Field(default_factory=list)
    subheading_sizes: list[SizeToken] = Field(default_factory=list)
    body_sizes: list[SizeToken] = Field(default_factory=list)
    accent_sizes: list[SizeToken] = Field(default_factory=list)
    heading_weights: list[int] = Field(default_factory=list)
    subheading_weights: list[int] = Field(default_factory=list)
    body_weights: list[int] = Field(default_factory=list)
    accent_weights: list[int] = Field(default_factory=list)
    heading_italic_chance: Chance = Field(0.0, ge=0, le=1)
    subheading_italic_chance: Chance = Field(0.0, ge=0, le=1)
    body_italic_chance: Chance = Field(0.0, ge=0, le=1)
    accent_italic_chance: Chance = Field(0.0, ge=0, le=1)
    heading_uppercase_chance: Chance = Field(0.0, ge=0, le=1)
    subheading_uppercase_chance: Chance = Field(0.0, ge=0, le=1)
    body_uppercase_chance: Chance = Field(0.0, ge=0, le=1)
    accent_uppercase_chance: Chance = Field(0.0, ge=0, le=1)

    @field_validator("heading_weights", "subheading_weights", "body_weights", "accent_weights")
    @classmethod
    def _weights_in_range(cls, value: list[int]) -> list[int]:
        for weight in value:
            if not 100 <= weight <= 900:
                raise ValueError(f"font weight {weight} outside 100-900")
        return value


class TypographyRuleConfig(BaseModel):
    min_heading_weight: int | None = Field(None, ge=100, le=900)
    max_heading_weight: int | None = Field(None, ge=300, le=900)
    max_body_weight: int | None = Field(None, ge=100, le=900)
    min_heading_size: SizeToken | None = None
    heading_italic_chance: Chance = Field(0.0, ge=0, le=1)
    subheading_italic_chance: Chance = Field(0.0, ge=0, le=1)


class ContrastTuning(BaseModel):
    muted_saturation_threshold: float = Field(20.0, ge=0, le=100)
    muted_window_light_bg: tuple[float, float] = (40.0, 70.0)
    muted_window_dark_bg: tuple[float, float] = (30.0, 60.0)
    search_iterations: int = Field(20, ge=1, le=64)

    @field_validator("muted_window_light_bg", "muted_window_dark_bg")
    @classmethod
    def _window(cls, value: tuple[float, float]) -> tuple[float, float]:
        low, high = value
        if not 0 <= low <= high <= 100:
            raise ValueError(f"window {value} must satisfy 0 <= min <= max <= 100")
        return value


class VibeCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    schema_version: int = 1
    vibes: list[VibePreset] = Field(min_length=1)
    pro_vibes: list[str] = Field(default_factory=list)
    typography_rules: dict[str, TypographyRuleConfig] = Field(default_factory=dict)
    shape_rules: dict[str, ShapeRuleConfig] = Field(default_factory=dict)
    style_typography: dict[str, StyleTypographyConfig] = Field(default_factory=dict)
    contrast: ContrastTuning = Field(default_factory=ContrastTuning)

    @model_validator(mode="after")
    def _references_known_vibes(self) -> "VibeCatalog":
        ids = [vibe.id for vibe in self.vibes]
        duplicates = sorted({vibe_id for vibe_id in ids if ids.count(vibe_id) > 1})
        if duplicates:
            raise ValueError(f"duplicate vibe ids: {duplicates}")

        known = set(ids)
        sections = {
            "pro_vibes": self.pro_vibes,
            "shape_rules": self.shape_rules,
            "style_typography": self.style_typography,
        }
        for name, keys in sections.items():
            unknown = sorted(set(keys) - known)
            if unknown:
                raise ValueError(f"{name} references unknown vibes: {unknown}")
        return self

    def vibe_ids(self) -> list[str]:
        return [vibe.id for vibe in self.vibes]

    def get_vibe(self, vibe_id: str) -> VibePreset:
        for vibe in self.vibes:
            if vibe.id == vibe_id:
                return vibe
        raise UnknownVibeError(vibe_id)
