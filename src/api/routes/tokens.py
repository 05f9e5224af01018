"""Design-token endpoints: vibes, palettes, contrast, typography and full designs."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.adapters.catalog_rules import CatalogRulesAdapter
from src.api.deps import get_catalog_rules
from src.api.schemas import (
    ContrastCheckModel,
    ContrastCheckRequest,
    ContrastFixRequest,
    ContrastResponse,
    DesignErrorModel,
    DesignRequest,
    DesignResponse,
    HarmonyRequest,
    HarmonyResponse,
    PaletteRequest,
    PaletteResponse,
    Tier,
    TypographyRequest,
    TypographyResponse,
    VibesResponse,
    VibeSummary,
    ViolationsModel,
)
from src.components.capabilities import (
    available_vibe_ids,
    capabilities_for_tier,
    is_feature_enabled,
    is_vibe_available,
)
from src.components.contrast import (
    CheckContrastInput,
    FixContrastInput,
    run_check,
    run_fix,
)
from src.components.engine import GenerateDesignInput, generate_design
from src.components.harmony import generate_harmony_palette, random_harmony_type
from src.components.palette import GeneratePaletteInput, derive_full_palette, run_generate
from src.components.shapes import build_style_typography_rules, generate_style_typography
from src.components.typography import OptimizeTypographyInput, run_optimize
from src.domain.entities import VibePreset
from src.rules.models import UnknownVibeError

router = APIRouter()


def _resolve_vibe(rules: CatalogRulesAdapter, vibe_id: str, tier: Tier) -> VibePreset:
    try:
        vibe = rules.get_vibe(vibe_id)
    except UnknownVibeError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    if not is_vibe_available(vibe_id, rules, capabilities_for_tier(tier)):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Vibe '{vibe_id}' is not available on the {tier} tier",
        )
    return vibe


def _require_feature(tier: Tier, feature: str) -> None:
    if not is_feature_enabled(capabilities_for_tier(tier), feature):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Feature '{feature}' is not available on the {tier} tier",
        )


# --- Vibes ---


@router.get("/vibes", response_model=VibesResponse)
def list_vibes(
    tier: Tier = "free",
    rules: CatalogRulesAdapter = Depends(get_catalog_rules),
) -> VibesResponse:
    """List the vibes available to a tier, in catalogue order."""
    pro = rules.get_pro_vibe_ids()
    summaries = []
    for vibe_id in available_vibe_ids(rules, capabilities_for_tier(tier)):
        vibe = rules.get_vibe(vibe_id)
        summaries.append(
            VibeSummary(
                id=vibe.id,
                label=vibe.label,
                description=vibe.description,
                is_dark_ui=vibe.is_dark_ui,
                pro=vibe.id in pro,
            )
        )
    return VibesResponse(tier=tier, vibes=summaries)


# --- Palettes ---


@router.post("/palette", response_model=PaletteResponse)
def create_palette(
    body: PaletteRequest,
    rules: CatalogRulesAdapter = Depends(get_catalog_rules),
) -> PaletteResponse:
    """Generate a base palette for a vibe and seed."""
    vibe = _resolve_vibe(rules, body.vibe_id, body.tier)
    result = run_generate(
        GeneratePaletteInput(
            vibe=vibe,
            seed=body.seed,
            prev_palette=body.prev_palette,
            locks=body.locks,
            dark_mode=body.dark_mode,
        )
    )
    return PaletteResponse(colors=result.colors, palette=result.palette)


@router.post("/harmony", response_model=HarmonyResponse)
def create_harmony_palette(
    body: HarmonyRequest,
    rules: CatalogRulesAdapter = Depends(get_catalog_rules),
) -> HarmonyResponse:
    """Generate a harmony-mode palette (pro)."""
    _require_feature(body.tier, "harmony_mode")
    vibe = _resolve_vibe(rules, body.vibe_id, body.tier)

    harmony_type = body.harmony_type or random_harmony_type(body.seed)
    colors = generate_harmony_palette(
        vibe, body.seed, body.prev_palette, body.locks, harmony_type
    )
    return HarmonyResponse(
        harmony_type=harmony_type,
        colors=colors,
        palette=derive_full_palette(colors),
    )


# --- Contrast ---


@router.post("/contrast/check", response_model=ContrastResponse)
def check_contrast(body: ContrastCheckRequest) -> ContrastResponse:
    """Report WCAG contrast over the palette's semantic pairs."""
    result = run_check(CheckContrastInput(palette=body.colors))
    return ContrastResponse(
        palette=result.palette,
        checks=[ContrastCheckModel.model_validate(c) for c in result.checks],
        violations=ViolationsModel.model_validate(result.violations),
    )


@router.post("/contrast/fix", response_model=ContrastResponse)
def fix_contrast(
    body: ContrastFixRequest,
    rules: CatalogRulesAdapter = Depends(get_catalog_rules),
) -> ContrastResponse:
    """Repair failing pairs toward AA or AAA (pro)."""
    _require_feature(body.tier, "wcag_auto_fix")

    colors = derive_full_palette(body.colors) if body.include_derived else body.colors
    result = run_fix(FixContrastInput(colors=colors, target=body.target), rules=rules)
    return ContrastResponse(
        palette=derive_full_palette(result.colors),
        checks=[ContrastCheckModel.model_validate(c) for c in result.checks],
        violations=ViolationsModel.model_validate(result.violations),
        adjusted=result.adjusted,
    )


# --- Typography ---


@router.post("/typography", response_model=TypographyResponse)
def create_typography(
    body: TypographyRequest,
    rules: CatalogRulesAdapter = Depends(get_catalog_rules),
) -> TypographyResponse:
    """Optimize typography tokens; starts from the vibe's style typography if none given."""
    vibe = _resolve_vibe(rules, body.vibe_id, body.tier)
    current = body.current or generate_style_typography(
        vibe, body.seed, rules=build_style_typography_rules(rules)
    )
    result = run_optimize(
        OptimizeTypographyInput(
            current=current,
            vibe=vibe,
            colors=body.colors,
            seed=body.seed,
            trend_hints=body.trend_hints,
        ),
        rules=rules,
    )
    return TypographyResponse(typography=result.typography, colors=result.colors)


# --- Design ---


@router.post("/design", response_model=DesignResponse)
def create_design(
    body: DesignRequest,
    rules: CatalogRulesAdapter = Depends(get_catalog_rules),
) -> DesignResponse:
    """
    Generate a complete design.

    A pro vibe on the free tier is refused with 403. Other steps the tier
    cannot use are skipped and listed in errors with success=false.
    """
    vibe = _resolve_vibe(rules, body.vibe_id, body.tier)
    result = generate_design(
        GenerateDesignInput(
            vibe=vibe,
            seed=body.seed,
            style_seed=body.style_seed,
            prev_palette=body.prev_palette,
            locks=body.locks,
            mode=body.mode,
            harmony_type=body.harmony_type,
            dark_mode=body.dark_mode,
            contrast_target=body.contrast_target,
            capabilities=capabilities_for_tier(body.tier),
            fonts=body.fonts,
            trend_hints=body.trend_hints,
        ),
        rules=rules,
    )
    return DesignResponse(
        colors=result.colors,
        palette=result.palette,
        contrast=[ContrastCheckModel.model_validate(c) for c in result.contrast],
        violations=ViolationsModel.model_validate(result.violations),
        typography=result.typography,
        typography_colors=result.typography_colors,
        shapes=result.shapes,
        css_variables=result.tokens.css_variables,
        json_tokens=result.tokens.json_tokens,
        errors=[DesignErrorModel.model_validate(e) for e in result.errors],
        success=result.success,
    )
