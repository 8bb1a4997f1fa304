"""
Enumerations for the four theme axes and the keyword literals used by structural styles.

Every axis is a ``StrEnum`` so members serialize as their plain string values in
YAML, JSON, and CSS output.
"""

from __future__ import annotations

from enum import StrEnum

# =============================================================================
# Theme axes
# =============================================================================


class ComponentType(StrEnum):
    """Component categories that receive styles."""

    GLOBAL_BODY = "global-body"
    GLOBAL_FOCUS = "global-focus"
    GLOBAL_HTML = "global-html"
    HEADING_1 = "heading-1"
    HEADING_2 = "heading-2"
    HEADING_3 = "heading-3"
    HEADING_4 = "heading-4"
    HEADING_5 = "heading-5"
    HEADING_6 = "heading-6"
    LINK = "link"
    SURFACE = "surface"
    TEXT = "text"


class ThemeType(StrEnum):
    """Theme variants.

    ``SYSTEM`` is resolved to ``LIGHT`` or ``DARK`` at lookup time and is never stored.
    """

    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"
    HIGH_CONTRAST_LIGHT = "high-contrast-light"
    HIGH_CONTRAST_DARK = "high-contrast-dark"

    @property
    def is_high_contrast(self) -> bool:
        return self in (ThemeType.HIGH_CONTRAST_LIGHT, ThemeType.HIGH_CONTRAST_DARK)

    @property
    def is_dark(self) -> bool:
        return self in (ThemeType.DARK, ThemeType.HIGH_CONTRAST_DARK)


STORABLE_THEME_TYPES: tuple[ThemeType, ...] = (
    ThemeType.LIGHT,
    ThemeType.DARK,
    ThemeType.HIGH_CONTRAST_LIGHT,
    ThemeType.HIGH_CONTRAST_DARK,
)


class ComponentState(StrEnum):
    """Interaction states.

    ``HIDDEN`` and ``READ_ONLY`` are structural: consumers derive them, the store
    never holds entries for them.
    """

    DEFAULT = "default"
    DISABLED = "disabled"
    DRAGGED = "dragged"
    FOCUSED = "focused"
    HIDDEN = "hidden"
    HOVERED = "hovered"
    PRESSED = "pressed"
    READ_ONLY = "read-only"
    VISITED = "visited"

    @property
    def is_structural(self) -> bool:
        return self in (ComponentState.HIDDEN, ComponentState.READ_ONLY)


INTERACTIVE_STATES: tuple[ComponentState, ...] = tuple(
    state for state in ComponentState if not state.is_structural
)


class StyleType(StrEnum):
    """Style properties, valued by their CSS property name."""

    ACCENT_COLOR = "accent-color"
    ALIGN_CONTENT = "align-content"
    ALIGN_ITEMS = "align-items"
    ALIGN_SELF = "align-self"
    BACKGROUND_COLOR = "background-color"
    BACKGROUND_IMAGE = "background-image"
    BORDER_COLOR = "border-color"
    BORDER_RADIUS = "border-radius"
    BORDER_STYLE = "border-style"
    BORDER_WIDTH = "border-width"
    BOX_SIZING = "box-sizing"
    CARET_COLOR = "caret-color"
    COLOR = "color"
    COLOR_SCHEME = "color-scheme"
    DISPLAY = "display"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    FONT_STYLE = "font-style"
    FONT_WEIGHT = "font-weight"
    HEIGHT = "height"
    HYPHENS = "hyphens"
    JUSTIFY_CONTENT = "justify-content"
    JUSTIFY_ITEMS = "justify-items"
    JUSTIFY_SELF = "justify-self"
    LETTER_SPACING = "letter-spacing"
    LINE_BREAK = "line-break"
    LINE_HEIGHT = "line-height"
    MARGIN = "margin"
    MAX_HEIGHT = "max-height"
    MAX_WIDTH = "max-width"
    MIN_HEIGHT = "min-height"
    MIN_WIDTH = "min-width"
    OUTLINE_COLOR = "outline-color"
    OUTLINE_OFFSET = "outline-offset"
    OUTLINE_STYLE = "outline-style"
    OUTLINE_WIDTH = "outline-width"
    OVERFLOW_WRAP = "overflow-wrap"
    OVERFLOW_X = "overflow-x"
    OVERFLOW_Y = "overflow-y"
    OVERSCROLL_BEHAVIOR_X = "overscroll-behavior-x"
    OVERSCROLL_BEHAVIOR_Y = "overscroll-behavior-y"
    PADDING = "padding"
    POSITION = "position"
    SCROLL_BEHAVIOR = "scroll-behavior"
    TEXT_ALIGN = "text-align"
    TEXT_DECORATION_COLOR = "text-decoration-color"
    TEXT_DECORATION_LINE = "text-decoration-line"
    TEXT_DECORATION_STYLE = "text-decoration-style"
    TEXT_DECORATION_THICKNESS = "text-decoration-thickness"
    TEXT_ORIENTATION = "text-orientation"
    TEXT_OVERFLOW = "text-overflow"
    TEXT_SIZE_ADJUST = "text-size-adjust"
    TEXT_TRANSFORM = "text-transform"
    UNICODE_BIDI = "unicode-bidi"
    VERTICAL_ALIGN = "vertical-align"
    WEBKIT_TAP_HIGHLIGHT_COLOR = "-webkit-tap-highlight-color"
    WEBKIT_TEXT_SIZE_ADJUST = "-webkit-text-size-adjust"
    WHITE_SPACE = "white-space"
    WIDTH = "width"
    WORD_BREAK = "word-break"
    WORD_SPACING = "word-spacing"
    WRITING_MODE = "writing-mode"
    Z_INDEX = "z-index"


# Focus outline geometry is global; per-state overrides are rejected on FOCUSED.
FOCUS_OUTLINE_STYLES: frozenset[StyleType] = frozenset(
    {StyleType.OUTLINE_OFFSET, StyleType.OUTLINE_STYLE, StyleType.OUTLINE_WIDTH}
)


class PaletteType(StrEnum):
    """Semantic palette categories carried by a brand theme."""

    ELEVATION_1 = "elevation-1"
    ELEVATION_2 = "elevation-2"
    ELEVATION_3 = "elevation-3"
    ELEVATION_4 = "elevation-4"
    ELEVATION_5 = "elevation-5"
    ERROR = "error"
    INFO = "info"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    SURFACE = "surface"
    TERTIARY = "tertiary"
    WARNING = "warning"


class FontFaceType(StrEnum):
    """Font stacks carried by a brand."""

    SANS_SERIF = "sans-serif"
    SERIF = "serif"
    MONOSPACE = "monospace"


class Elevation(StrEnum):
    """Elevation tiers, from recessed to raised."""

    LOWEST = "lowest"
    LOW = "low"
    MID = "mid"
    HIGH = "high"
    HIGHEST = "highest"


# =============================================================================
# Keyword literals
# =============================================================================


class BoxSizing(StrEnum):
    BORDER_BOX = "border-box"
    CONTENT_BOX = "content-box"


class ScrollBehavior(StrEnum):
    AUTO = "auto"
    SMOOTH = "smooth"


class Overflow(StrEnum):
    AUTO = "auto"
    CLIP = "clip"
    HIDDEN = "hidden"
    SCROLL = "scroll"
    VISIBLE = "visible"


class TextDecorationLine(StrEnum):
    NONE = "none"
    UNDERLINE = "underline"
    OVERLINE = "overline"
    LINE_THROUGH = "line-through"


class LineStyle(StrEnum):
    """Line styles shared by borders, outlines, and text decorations."""

    NONE = "none"
    SOLID = "solid"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    WAVY = "wavy"


class FontWeight(StrEnum):
    NORMAL = "400"
    MEDIUM = "500"
    SEMIBOLD = "600"
    BOLD = "700"
