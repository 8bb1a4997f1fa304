"""
tonekit - accessible design-token resolution.

Expands a small brand definition (seed colors and font stacks) into validated,
canonical CSS values for every component type, theme type and interaction
state, keeping WCAG contrast on every derived foreground/background pair.
"""

from __future__ import annotations

from ._version import __version__
from .core import (
    Color,
    ColorValue,
    FontFamilyValue,
    FunctionValue,
    GlobalValue,
    ImageValue,
    KeywordValue,
    NumberValue,
    SpacingValue,
    StyleValue,
    ToneKitError,
    contrast_ratio,
    ensure_minimum_contrast,
    relative_luminance,
)
from .core.enums import ComponentState, ComponentType, PaletteType, StyleType, ThemeType
from .theme import Brand, ThemeBuilder, ThemeCoordinate, ThemeStore, build_theme

__all__ = [
    "__version__",
    "Brand",
    "Color",
    "ColorValue",
    "ComponentState",
    "ComponentType",
    "FontFamilyValue",
    "FunctionValue",
    "GlobalValue",
    "ImageValue",
    "KeywordValue",
    "NumberValue",
    "PaletteType",
    "SpacingValue",
    "StyleType",
    "StyleValue",
    "ThemeBuilder",
    "ThemeCoordinate",
    "ThemeStore",
    "ThemeType",
    "ToneKitError",
    "build_theme",
    "contrast_ratio",
    "ensure_minimum_contrast",
    "relative_luminance",
]
