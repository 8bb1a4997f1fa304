"""
Error types for tonekit value parsing, theme writes, and brand loading.
"""

from __future__ import annotations

from typing import Any


class ToneKitError(Exception):
    """Base exception for all tonekit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StyleValueError(ToneKitError, ValueError):
    """
    Raised when a CSS primitive value cannot be normalized.

    Examples:
    - Unknown length unit or malformed number
    - Unknown or mis-cased CSS function identifier
    - Unsafe image URL scheme
    - Control characters in the input
    """

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)


class ColorError(StyleValueError):
    """
    Raised when a color cannot be constructed or parsed.

    Examples:
    - Channel outside 0-255
    - Unrecognized color name or hex length
    - Alpha outside 0-1 in an ``rgba()`` literal
    """

    pass


class ThemeWriteError(ToneKitError, ValueError):
    """
    Raised when a coordinate write violates a theme store rule.

    Examples:
    - Writing to the ``system`` theme alias
    - Writing hidden or read-only states
    - External writes to high-contrast variants
    - Per-state overrides of the focus outline geometry
    """

    pass


class ThemeFrozenError(ToneKitError):
    """Raised when writing to a theme store that has been frozen."""

    pass


class BrandError(ToneKitError):
    """Raised when a brand definition cannot be loaded, validated, or saved."""

    pass
