"""
Brand persistence layer.

Reads and writes brand definitions as ``brand.yaml``::

    font:
      sans_serif: "Inter, sans-serif"
    light:
      surface: "Grey 50"
      primary: "#1976D2"
    dark:
      surface: "Grey 900"
    high_contrast:
      light:
        primary: Black

Every section is optional; missing seeds fall back to the defaults.

Default location: {project_root}/brand.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..core.enums import INTERACTIVE_STATES, STORABLE_THEME_TYPES, ComponentState, PaletteType
from ..core.errors import BrandError
from . import defaults
from .brand import Brand, BrandFont, BrandTheme, BrandVariant

logger = logging.getLogger(__name__)

BRAND_FILE = "brand.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_brand_path(project_root: Path) -> Path:
    """Get the brand.yaml file path."""
    return project_root / BRAND_FILE


def brand_exists(project_root: Path) -> bool:
    """Check if a brand.yaml exists in the project."""
    return get_brand_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise BrandError(f"Brand section '{key}' must be a mapping, got {type(value).__name__}")
    return value


def _theme(seeds: dict[str, Any], fallback: dict[PaletteType, str]) -> BrandTheme:
    merged: dict[str, Any] = {palette.value: color for palette, color in fallback.items()}
    merged.update(seeds)
    return BrandTheme(**merged)


def brand_from_dict(data: dict[str, Any]) -> Brand:
    """Build a Brand from raw YAML data.

    Raises:
        BrandError: If a section has the wrong shape or a seed fails validation.
    """
    if not isinstance(data, dict):
        raise BrandError(f"Brand document must be a mapping, got {type(data).__name__}")

    try:
        font = BrandFont(**_section(data, "font"))
        variant = BrandVariant(
            light=_theme(_section(data, "light"), dict(defaults.LIGHT_SEEDS)),
            dark=_theme(_section(data, "dark"), dict(defaults.DARK_SEEDS)),
        )
        high_contrast_data = _section(data, "high_contrast")
        high_contrast = BrandVariant(
            light=_theme(
                _section(high_contrast_data, "light"), dict(defaults.HIGH_CONTRAST_LIGHT_SEEDS)
            ),
            dark=_theme(
                _section(high_contrast_data, "dark"), dict(defaults.HIGH_CONTRAST_DARK_SEEDS)
            ),
        )
        return Brand(font=font, variant=variant, high_contrast=high_contrast)
    except ValidationError as e:
        raise BrandError(f"Invalid brand definition: {e}") from e
    except TypeError as e:
        raise BrandError(f"Failed to parse brand: {e}") from e


def brand_to_dict(brand: Brand) -> dict[str, Any]:
    """Serialize a Brand into the brand.yaml document shape."""
    return {
        "font": brand.font.model_dump(mode="json"),
        "light": brand.variant.light.model_dump(mode="json"),
        "dark": brand.variant.dark.model_dump(mode="json"),
        "high_contrast": {
            "light": brand.high_contrast.light.model_dump(mode="json"),
            "dark": brand.high_contrast.dark.model_dump(mode="json"),
        },
    }


def load_brand(path: Path, *, use_defaults: bool = False) -> Brand:
    """Load a Brand from a YAML file.

    Args:
        path: brand.yaml file, or a directory containing one.
        use_defaults: If True, return the default Brand when the file doesn't exist.

    Returns:
        Brand instance.

    Raises:
        BrandError: If the file is missing (when use_defaults=False) or invalid.
    """
    brand_path = get_brand_path(path) if path.is_dir() else path

    if not brand_path.exists():
        if use_defaults:
            logger.debug(f"No brand file at {brand_path}, using defaults")
            return Brand()
        raise BrandError(f"Brand file not found: {brand_path}")

    try:
        content = brand_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise BrandError(f"Invalid YAML in {brand_path}: {e}") from e
    except OSError as e:
        raise BrandError(f"Cannot read {brand_path}: {e}") from e

    if not data:
        logger.warning(f"Empty brand file at {brand_path}, using defaults")
        return Brand()

    brand = brand_from_dict(data)
    logger.info(f"Loaded brand from {brand_path}")
    return brand


def save_brand(brand: Brand, path: Path) -> Path:
    """Save a Brand to YAML.

    Args:
        brand: Brand to save.
        path: Target file, or a directory to write brand.yaml into.

    Returns:
        Path to the saved file.
    """
    brand_path = get_brand_path(path) if path.is_dir() else path
    brand_path.write_text(
        yaml.dump(
            brand_to_dict(brand),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    logger.info(f"Saved brand to {brand_path}")
    return brand_path


# =============================================================================
# Validation
# =============================================================================


class BrandValidationResult:
    """Result of brand contrast validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __repr__(self) -> str:
        return f"BrandValidationResult(errors={len(self.errors)}, warnings={len(self.warnings)})"


def validate_brand(brand: Brand) -> BrandValidationResult:
    """Check every derived palette for unmet foreground contrast.

    Unmet contrast in a default state is an error; in any other state it is a
    warning.
    """
    result = BrandValidationResult()
    for theme_type in STORABLE_THEME_TYPES:
        theme = brand.theme(theme_type)
        for palette_type in PaletteType:
            brand_state = theme.state(palette_type)
            for state in INTERACTIVE_STATES:
                contrast = brand_state.states[state].foreground_contrast
                if contrast.is_met:
                    continue
                message = (
                    f"{theme_type}/{palette_type}/{state}: foreground contrast "
                    f"{contrast.ratio:.2f} is below target"
                )
                if state == ComponentState.DEFAULT:
                    result.add_error(message)
                else:
                    result.add_warning(message)
    return result
