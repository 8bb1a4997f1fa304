"""
Appliers: turn brand data into coordinate-addressed theme writes.

Each applier returns a list of ``ThemeWrite`` for one component type and one
contrast mode. The builder commits them in order.
"""

from __future__ import annotations

from typing import NamedTuple

from ..core.color import Color
from ..core.derivation import ColorPalette
from ..core.enums import (
    INTERACTIVE_STATES,
    ComponentType,
    FontFaceType,
    LineStyle,
    PaletteType,
    StyleType,
    ThemeType,
)
from ..core.values import ColorValue, KeywordValue, NumberValue, SpacingValue, StyleValue
from . import defaults
from .brand import Brand
from .coordinate import ThemeCoordinate


class ThemeWrite(NamedTuple):
    """One pending store write."""

    coordinate: ThemeCoordinate
    value: StyleValue


def contrast_theme_types(high_contrast: bool) -> tuple[ThemeType, ThemeType]:
    """The (dark, light) pair for a contrast mode."""
    if high_contrast:
        return ThemeType.HIGH_CONTRAST_DARK, ThemeType.HIGH_CONTRAST_LIGHT
    return ThemeType.DARK, ThemeType.LIGHT


def literal_write(
    high_contrast: bool, component_type: ComponentType, style_type: StyleType, value: StyleValue
) -> ThemeWrite:
    """A single value applied across both theme types and every interactive state."""
    coordinate = (
        ThemeCoordinate()
        .with_component_types(component_type)
        .with_contrast_theme_types(high_contrast)
        .with_all_component_states()
        .with_style_types(style_type)
    )
    return ThemeWrite(coordinate, value)


# =============================================================================
# Colors
# =============================================================================

_TEXT_COLORS: tuple[tuple[StyleType, str], ...] = (
    (StyleType.ACCENT_COLOR, "accent"),
    (StyleType.BORDER_COLOR, "border"),
    (StyleType.CARET_COLOR, "caret"),
    (StyleType.COLOR, "foreground"),
    (StyleType.TEXT_DECORATION_COLOR, "text_decoration"),
)


def _palette_colors(
    palette: ColorPalette, *, has_background: bool, outline_only: bool
) -> list[tuple[StyleType, Color]]:
    colors: list[tuple[StyleType, Color]] = []
    if has_background:
        colors.append((StyleType.BACKGROUND_COLOR, palette.background))
    if not outline_only:
        colors.extend((style, getattr(palette, field)) for style, field in _TEXT_COLORS)
    colors.append((StyleType.OUTLINE_COLOR, palette.outline))
    return colors


def color_writes(
    brand: Brand,
    high_contrast: bool,
    component_type: ComponentType,
    palette_type: PaletteType,
    *,
    variant: bool = False,
    has_background: bool = False,
    outline_only: bool = False,
) -> list[ThemeWrite]:
    """Palette colors for every (theme type, interactive state) cell.

    Args:
        brand: Brand supplying the seeds.
        high_contrast: Write the high-contrast pair instead of light/dark.
        component_type: Target component.
        palette_type: Palette category to draw from.
        variant: Use the text-on-surface variant of the category.
        has_background: Also write ``background-color``.
        outline_only: Write only ``outline-color`` (plus background when requested).

    Returns:
        One write per (theme type, state, style).
    """
    writes = []
    for theme_type in contrast_theme_types(high_contrast):
        for state in INTERACTIVE_STATES:
            palette = brand.palette(theme_type, palette_type, state, variant=variant)
            for style_type, color in _palette_colors(
                palette, has_background=has_background, outline_only=outline_only
            ):
                coordinate = (
                    ThemeCoordinate()
                    .with_component_types(component_type)
                    .with_theme_types(theme_type)
                    .with_component_states(state)
                    .with_style_types(style_type)
                )
                writes.append(ThemeWrite(coordinate, ColorValue(color)))
    return writes


# =============================================================================
# Typography
# =============================================================================


def font_writes(
    brand: Brand,
    high_contrast: bool,
    component_type: ComponentType,
    *,
    face: FontFaceType | None = None,
    size: str | None = None,
    weight: str | None = None,
    line_height: str | None = None,
    margin_bottom: str | None = None,
) -> list[ThemeWrite]:
    """Font family, size, weight and line height, plus bottom-margin spacing.

    When ``margin_bottom`` is given the margin becomes ``0 0 <margin_bottom> 0``
    and padding is reset to zero.
    """
    values: list[tuple[StyleType, StyleValue]] = []
    if face is not None:
        values.append((StyleType.FONT_FAMILY, brand.font.family(face)))
    if size is not None:
        values.append((StyleType.FONT_SIZE, NumberValue(size)))
    if weight is not None:
        values.append((StyleType.FONT_WEIGHT, NumberValue(weight)))
    if line_height is not None:
        values.append((StyleType.LINE_HEIGHT, NumberValue(line_height)))
    if margin_bottom is not None:
        zero = defaults.SIZE_0
        values.append((StyleType.MARGIN, SpacingValue([zero, zero, margin_bottom, zero])))
        values.append((StyleType.PADDING, SpacingValue(zero)))
    return [literal_write(high_contrast, component_type, style, value) for style, value in values]


# =============================================================================
# Focus outline
# =============================================================================


def outline_writes(
    brand: Brand,
    high_contrast: bool,
    component_type: ComponentType,
    palette_type: PaletteType,
) -> list[ThemeWrite]:
    """Outline color from the palette's text-like variant plus fixed outline geometry."""
    writes = color_writes(
        brand, high_contrast, component_type, palette_type, variant=True, outline_only=True
    )
    writes.append(
        literal_write(
            high_contrast,
            component_type,
            StyleType.OUTLINE_OFFSET,
            NumberValue(defaults.FOCUS_OUTLINE_OFFSET),
        )
    )
    writes.append(
        literal_write(
            high_contrast, component_type, StyleType.OUTLINE_STYLE, KeywordValue(LineStyle.SOLID)
        )
    )
    writes.append(
        literal_write(
            high_contrast, component_type, StyleType.OUTLINE_WIDTH, NumberValue(defaults.THICK)
        )
    )
    return writes
