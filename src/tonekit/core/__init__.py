"""
Core color science and CSS primitive values.
"""

from .color import Color
from .contrast import ContrastResult, contrast_ratio, ensure_minimum_contrast, relative_luminance
from .derivation import ColorPalette, DerivedPalette, derive_elevation, derive_state
from .errors import (
    BrandError,
    ColorError,
    StyleValueError,
    ThemeFrozenError,
    ThemeWriteError,
    ToneKitError,
)
from .values import (
    ColorValue,
    FontFamilyValue,
    FunctionValue,
    GlobalValue,
    ImageValue,
    KeywordValue,
    NumberValue,
    SpacingValue,
    StyleValue,
)

__all__ = [
    "BrandError",
    "Color",
    "ColorError",
    "ColorPalette",
    "ColorValue",
    "ContrastResult",
    "DerivedPalette",
    "FontFamilyValue",
    "FunctionValue",
    "GlobalValue",
    "ImageValue",
    "KeywordValue",
    "NumberValue",
    "SpacingValue",
    "StyleValue",
    "StyleValueError",
    "ThemeFrozenError",
    "ThemeWriteError",
    "ToneKitError",
    "contrast_ratio",
    "derive_elevation",
    "derive_state",
    "ensure_minimum_contrast",
    "relative_luminance",
]
