"""Theme coordinates, store, brand models, and the builder."""

from .brand import Brand, BrandFont, BrandState, BrandTheme, BrandVariant
from .builder import ThemeBuilder, build_theme
from .coordinate import ThemeCoordinate, ThemeKey
from .css_generator import (
    CssSettings,
    generate_inline_style,
    generate_stylesheet,
    generate_theme_css,
    generate_variables,
)
from .loader import (
    BrandValidationResult,
    brand_exists,
    load_brand,
    save_brand,
    validate_brand,
)
from .store import ThemeStore

__all__ = [
    "Brand",
    "BrandFont",
    "BrandState",
    "BrandTheme",
    "BrandValidationResult",
    "BrandVariant",
    "CssSettings",
    "ThemeBuilder",
    "ThemeCoordinate",
    "ThemeKey",
    "ThemeStore",
    "brand_exists",
    "build_theme",
    "generate_inline_style",
    "generate_stylesheet",
    "generate_theme_css",
    "generate_variables",
    "load_brand",
    "save_brand",
    "validate_brand",
]
