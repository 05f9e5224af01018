import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import VibeCatalog

logger = logging.getLogger(__name__)


class CatalogValidationError(ValueError):
    """Raised when the vibe catalogue is not valid YAML or fails the schema."""


def _strip_markdown_fences(content: str) -> str:
    """Return the first ```yaml block, or the whole content when there is none."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def parse_catalog(content: str) -> VibeCatalog:
    """
    Parse catalogue text.
    Raises CatalogValidationError on bad YAML or schema.
    """
    try:
        data = yaml.safe_load(_strip_markdown_fences(content))
    except yaml.YAMLError as e:
        raise CatalogValidationError(f"Invalid YAML syntax in vibe catalog: {e}") from e

    if data is None:
        raise CatalogValidationError("Vibe catalog is empty")

    try:
        return VibeCatalog.model_validate(data)
    except ValidationError as e:
        raise CatalogValidationError(f"Vibe catalog validation failed:\n{e}") from e


def load_catalog(path: Path) -> VibeCatalog:
    """
    Load and validate the vibe catalogue file.
    Raises FileNotFoundError if file missing.
    Raises CatalogValidationError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Vibe catalog not found at: {path}")

    catalog = parse_catalog(path.read_text())
    logger.info("Loaded %d vibes from %s", len(catalog.vibes), path)
    return catalog
