"""
Brand definition models.

A brand is a small declarative input: three font stacks and, for each theme
type, one seed color per semantic palette category. Everything else (state
palettes, elevation tiers, the text-like "variant" palettes that draw a
category color as text on the surface) is derived
deterministically from those seeds.

Models are frozen pydantic models; seed colors are validated through
``Color.parse`` and stored as canonical ``#RRGGBBAA`` strings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.color import Color
from ..core.derivation import ColorPalette, DerivedPalette, derive_elevation, derive_state
from ..core.enums import (
    INTERACTIVE_STATES,
    ComponentState,
    Elevation,
    FontFaceType,
    PaletteType,
    ThemeType,
)
from ..core.values import FontFamilyValue
from . import defaults

ELEVATION_TIERS: dict[PaletteType, Elevation] = {
    PaletteType.ELEVATION_1: Elevation.LOWEST,
    PaletteType.ELEVATION_2: Elevation.LOW,
    PaletteType.ELEVATION_3: Elevation.MID,
    PaletteType.ELEVATION_4: Elevation.HIGH,
    PaletteType.ELEVATION_5: Elevation.HIGHEST,
}

# =============================================================================
# Derived palettes
# =============================================================================


@dataclass(frozen=True)
class BrandState:
    """Per-state palettes derived from one seed color."""

    default: ColorPalette
    states: Mapping[ComponentState, DerivedPalette]

    def palette(self, state: ComponentState) -> ColorPalette:
        if state.is_structural:
            state = ComponentState.DEFAULT
        return self.states[state].palette


@lru_cache(maxsize=1024)
def derive_brand_state(
    seed: Color, elevation: Elevation | None = None, tint: Color | None = None
) -> BrandState:
    """Derive every interactive-state palette for a seed color.

    Args:
        seed: Background seed for the palette category.
        elevation: When given, the seed is a surface and the default palette is
            first raised or lowered to this tier.
        tint: When given, the seed is a surface and the palette draws text in
            this tint on it (the text-like variant of a category).

    Returns:
        BrandState with one derived palette per interactive state.
    """
    if tint is None:
        default = ColorPalette.from_background(seed)
    else:
        default = ColorPalette.on_surface(seed, tint)
    if elevation is not None:
        default = derive_elevation(default, elevation).palette
    states = MappingProxyType(
        {state: derive_state(default, state) for state in INTERACTIVE_STATES}
    )
    return BrandState(default=default, states=states)


# =============================================================================
# Fonts
# =============================================================================


class BrandFont(BaseModel):
    """Font stacks, normalized as canonical font-family lists."""

    model_config = ConfigDict(frozen=True, validate_default=True, extra="forbid")

    sans_serif: str = Field(default=defaults.SANS_SERIF_STACK, description="Sans-serif stack")
    serif: str = Field(default=defaults.SERIF_STACK, description="Serif stack")
    monospace: str = Field(default=defaults.MONOSPACE_STACK, description="Monospace stack")

    @field_validator("sans_serif", "serif", "monospace", mode="before")
    @classmethod
    def _canonical_stack(cls, v: Any) -> str:
        return FontFamilyValue(v).value

    def family(self, face: FontFaceType) -> FontFamilyValue:
        stacks = {
            FontFaceType.SANS_SERIF: self.sans_serif,
            FontFaceType.SERIF: self.serif,
            FontFaceType.MONOSPACE: self.monospace,
        }
        return FontFamilyValue(stacks[face])


# =============================================================================
# Themes
# =============================================================================


class BrandTheme(BaseModel):
    """Seed colors for one theme type, one per semantic palette category."""

    model_config = ConfigDict(frozen=True, validate_default=True, extra="forbid")

    surface: str = Field(default=defaults.LIGHT_SEEDS[PaletteType.SURFACE])
    primary: str = Field(default=defaults.LIGHT_SEEDS[PaletteType.PRIMARY])
    secondary: str = Field(default=defaults.LIGHT_SEEDS[PaletteType.SECONDARY])
    tertiary: str = Field(default=defaults.LIGHT_SEEDS[PaletteType.TERTIARY])
    error: str = Field(default=defaults.LIGHT_SEEDS[PaletteType.ERROR])
    warning: str = Field(default=defaults.LIGHT_SEEDS[PaletteType.WARNING])
    success: str = Field(default=defaults.LIGHT_SEEDS[PaletteType.SUCCESS])
    info: str = Field(default=defaults.LIGHT_SEEDS[PaletteType.INFO])

    @field_validator("*", mode="before")
    @classmethod
    def _canonical_color(cls, v: Any) -> str:
        if isinstance(v, Color):
            return v.hex
        if not isinstance(v, str):
            raise ValueError(f"Seed colors must be strings, got {type(v).__name__}")
        return Color.parse(v).hex

    @classmethod
    def from_seeds(cls, seeds: Mapping[PaletteType, str | Color]) -> BrandTheme:
        """Build a theme from a palette-category mapping."""
        return cls(**{palette.value: color for palette, color in seeds.items()})

    def seed(self, palette_type: PaletteType) -> Color:
        """Seed color for a category; elevation tiers use the surface seed."""
        if palette_type in ELEVATION_TIERS:
            palette_type = PaletteType.SURFACE
        return Color.parse(getattr(self, palette_type.value))

    def state(self, palette_type: PaletteType, *, variant: bool = False) -> BrandState:
        """Derived palettes for a category.

        With ``variant``, the category color becomes text on the surface instead
        of a filled background; the surface and elevation categories are unchanged.
        """
        elevation = ELEVATION_TIERS.get(palette_type)
        if variant and elevation is None and palette_type != PaletteType.SURFACE:
            return derive_brand_state(
                self.seed(PaletteType.SURFACE), tint=self.seed(palette_type)
            )
        return derive_brand_state(self.seed(palette_type), elevation)


class BrandVariant(BaseModel):
    """Light and dark themes for one contrast mode."""

    model_config = ConfigDict(frozen=True)

    light: BrandTheme = Field(default_factory=lambda: BrandTheme.from_seeds(defaults.LIGHT_SEEDS))
    dark: BrandTheme = Field(default_factory=lambda: BrandTheme.from_seeds(defaults.DARK_SEEDS))

    @classmethod
    def high_contrast_default(cls) -> BrandVariant:
        return cls(
            light=BrandTheme.from_seeds(defaults.HIGH_CONTRAST_LIGHT_SEEDS),
            dark=BrandTheme.from_seeds(defaults.HIGH_CONTRAST_DARK_SEEDS),
        )


class Brand(BaseModel):
    """Complete brand input for the theme builder."""

    model_config = ConfigDict(frozen=True)

    font: BrandFont = Field(default_factory=BrandFont)
    variant: BrandVariant = Field(default_factory=BrandVariant)
    high_contrast: BrandVariant = Field(default_factory=BrandVariant.high_contrast_default)

    def theme(self, theme_type: ThemeType) -> BrandTheme:
        """Seed theme for any theme type except ``SYSTEM``."""
        if theme_type == ThemeType.SYSTEM:
            raise ValueError("System theme has no seeds; resolve it to light or dark first")
        brand_variant = self.high_contrast if theme_type.is_high_contrast else self.variant
        if theme_type.is_dark:
            return brand_variant.dark
        return brand_variant.light

    def palette(
        self,
        theme_type: ThemeType,
        palette_type: PaletteType,
        state: ComponentState,
        *,
        variant: bool = False,
    ) -> ColorPalette:
        """Resolved palette for one (theme type, category, state) cell."""
        theme = self.theme(theme_type)
        return theme.state(palette_type, variant=variant).palette(state)
