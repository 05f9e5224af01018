import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from src.adapters.catalog_rules import CatalogRulesAdapter
from src.components.C1_ColorSpace import InvalidHexColorError, normalize_hex
from src.components.capabilities import (
    Tier,
    available_vibe_ids,
    capabilities_for_tier,
    is_vibe_available,
)
from src.components.contrast import check_pair, get_contrast_severity
from src.components.engine import GenerateDesignInput, generate_design
from src.components.palette import GeneratePaletteInput, run_generate
from src.domain.entities import VibePreset
from src.rules.loader import CatalogValidationError
from src.rules.models import UnknownVibeError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

CATALOG_PATH = "vibes.yaml"


def get_rules(path: str) -> CatalogRulesAdapter:
    if not Path(path).exists():
        logger.error(f"Vibe catalog {path} not found.")
        sys.exit(1)

    try:
        return CatalogRulesAdapter.from_path(Path(path))
    except CatalogValidationError as e:
        logger.error(f"Vibe catalog {path} is invalid: {e}")
        sys.exit(1)


def _emit(payload: object) -> None:
    print(json.dumps(payload, indent=2))


def get_vibe(rules: CatalogRulesAdapter, vibe_id: str, tier: Tier) -> VibePreset:
    vibe = rules.get_vibe(vibe_id)
    if not is_vibe_available(vibe_id, rules, capabilities_for_tier(tier)):
        logger.error(f"Vibe '{vibe_id}' requires the pro tier.")
        sys.exit(1)
    return vibe


def handle_vibes(rules: CatalogRulesAdapter, args: argparse.Namespace) -> None:
    pro = rules.get_pro_vibe_ids()
    ids = available_vibe_ids(rules, capabilities_for_tier(args.tier))
    _emit(
        [
            {"id": vibe_id, "label": rules.get_vibe(vibe_id).label, "pro": vibe_id in pro}
            for vibe_id in ids
        ]
    )


def handle_palette(rules: CatalogRulesAdapter, args: argparse.Namespace) -> None:
    vibe = get_vibe(rules, args.vibe, args.tier)
    result = run_generate(
        GeneratePaletteInput(vibe=vibe, seed=args.seed, dark_mode=args.dark)
    )
    _emit(result.palette.model_dump() if args.full else result.colors.model_dump())


def handle_contrast(args: argparse.Namespace) -> None:
    fg = normalize_hex(args.foreground)
    bg = normalize_hex(args.background)
    check = check_pair(fg, bg, "custom")
    _emit(dataclasses.asdict(check))
    logger.info("Contrast %.2f:1 (%s)", check.ratio, get_contrast_severity(check.ratio))


def handle_design(rules: CatalogRulesAdapter, args: argparse.Namespace) -> None:
    result = generate_design(
        GenerateDesignInput(
            vibe=get_vibe(rules, args.vibe, args.tier),
            seed=args.seed,
            style_seed=args.style_seed,
            mode=args.mode,
            dark_mode=args.dark,
            contrast_target=args.target,
            capabilities=capabilities_for_tier(args.tier),
        ),
        rules=rules,
    )

    for error in result.errors:
        logger.warning(f"{error.code}: {error.message}")

    if args.css:
        print(result.tokens.css_variables)
    else:
        print(result.tokens.json_tokens)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vibe Token Engine CLI")
    parser.add_argument("--catalog", default=CATALOG_PATH, help="Path to the vibe catalog YAML")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # vibes
    vibes_parser = subparsers.add_parser("vibes", help="List vibes available to a tier")
    vibes_parser.add_argument("--tier", choices=["free", "pro"], default="free")

    # palette
    palette_parser = subparsers.add_parser("palette", help="Generate a palette")
    palette_parser.add_argument("vibe", help="Vibe id")
    palette_parser.add_argument("--seed", type=float, default=0.0)
    palette_parser.add_argument("--dark", action="store_true", help="Invert for dark mode")
    palette_parser.add_argument("--full", action="store_true", help="Include derived roles")
    palette_parser.add_argument("--tier", choices=["free", "pro"], default="free")

    # contrast
    contrast_parser = subparsers.add_parser("contrast", help="Check one colour pair")
    contrast_parser.add_argument("foreground", help="Foreground hex colour")
    contrast_parser.add_argument("background", help="Background hex colour")

    # design
    design_parser = subparsers.add_parser("design", help="Generate a complete design")
    design_parser.add_argument("vibe", help="Vibe id")
    design_parser.add_argument("--seed", type=float, default=0.0)
    design_parser.add_argument("--style-seed", type=float, default=None)
    design_parser.add_argument("--mode", choices=["base", "harmony"], default="base")
    design_parser.add_argument("--dark", action="store_true")
    design_parser.add_argument("--target", choices=["aa", "aaa"], default=None)
    design_parser.add_argument("--tier", choices=["free", "pro"], default="free")
    design_parser.add_argument("--css", action="store_true", help="Print CSS variables")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "contrast":
            handle_contrast(args)
            return

        rules = get_rules(args.catalog)
        if args.command == "vibes":
            handle_vibes(rules, args)
        elif args.command == "palette":
            handle_palette(rules, args)
        elif args.command == "design":
            handle_design(rules, args)
    except UnknownVibeError as e:
        logger.error(str(e))
        sys.exit(1)
    except InvalidHexColorError as e:
        logger.error(f"Invalid colour: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
