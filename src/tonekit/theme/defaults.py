"""
Default brand seeds, font stacks, and sizing tokens.
"""

from __future__ import annotations

from types import MappingProxyType

from ..core.enums import PaletteType

# =============================================================================
# Seeds
# =============================================================================

LIGHT_SEEDS = MappingProxyType(
    {
        PaletteType.SURFACE: "Grey 50",
        PaletteType.PRIMARY: "Blue 700",
        PaletteType.SECONDARY: "Indigo 600",
        PaletteType.TERTIARY: "Teal 600",
        PaletteType.ERROR: "Red A700",
        PaletteType.WARNING: "Amber 700",
        PaletteType.SUCCESS: "Green 600",
        PaletteType.INFO: "Light Blue A700",
    }
)

DARK_SEEDS = MappingProxyType(
    {
        PaletteType.SURFACE: "Grey 900",
        PaletteType.PRIMARY: "Blue 300",
        PaletteType.SECONDARY: "Indigo 300",
        PaletteType.TERTIARY: "Teal 300",
        PaletteType.ERROR: "Red 300",
        PaletteType.WARNING: "Amber 300",
        PaletteType.SUCCESS: "Green 300",
        PaletteType.INFO: "Light Blue 300",
    }
)

HIGH_CONTRAST_LIGHT_SEEDS = MappingProxyType(
    {
        PaletteType.SURFACE: "White",
        PaletteType.PRIMARY: "Black",
        PaletteType.SECONDARY: "Blue 700",
        PaletteType.TERTIARY: "Purple 800",
        PaletteType.ERROR: "Red A700",
        PaletteType.WARNING: "Black",
        PaletteType.SUCCESS: "Green 800",
        PaletteType.INFO: "Blue 700",
    }
)

HIGH_CONTRAST_DARK_SEEDS = MappingProxyType(
    {
        PaletteType.SURFACE: "Black",
        PaletteType.PRIMARY: "Aqua",
        PaletteType.SECONDARY: "Yellow A400",
        PaletteType.TERTIARY: "Fuchsia",
        PaletteType.ERROR: "Red A400",
        PaletteType.WARNING: "Yellow A400",
        PaletteType.SUCCESS: "Lime A200",
        PaletteType.INFO: "Aqua",
    }
)

# =============================================================================
# Fonts
# =============================================================================

SANS_SERIF_STACK = (
    "system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, "
    "Helvetica, Arial, sans-serif"
)
SERIF_STACK = "ui-serif, Georgia, Cambria, 'Times New Roman', Times, serif"
MONOSPACE_STACK = (
    "ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "
    "'Liberation Mono', 'Courier New', monospace"
)

# =============================================================================
# Sizing
# =============================================================================

SIZE_0 = "0"
SIZE_1 = "4px"
SIZE_2 = "8px"
SIZE_3 = "16px"

THIN = "1px"
THICK = "2px"

FULL = "100%"

RELATIVE_SMALL_1 = "0.75rem"
RELATIVE = "1rem"
RELATIVE_LARGE_1 = "1.25rem"
RELATIVE_LARGE_2 = "1.5rem"
RELATIVE_LARGE_3 = "1.75rem"
RELATIVE_LARGE_4 = "2rem"
RELATIVE_LARGE_5 = "2.5rem"

ROOT_FONT_SIZE = "16px"
LINE_HEIGHT = "1.5"
FOCUS_OUTLINE_OFFSET = SIZE_1
