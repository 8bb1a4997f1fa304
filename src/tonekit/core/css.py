"""
CSS name normalization and declaration formatting.
"""

from __future__ import annotations

import re

_DASH_RUNS = re.compile(r"[\s\-]+")
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def to_css_name(name: str) -> str:
    """Normalize an identifier into a CSS-safe, lower-case, hyphenated name.

    Underscores become hyphens, runs of whitespace or hyphens collapse to one
    hyphen, and leading/trailing hyphens are trimmed.

    >>> to_css_name("  My__Theme  Prefix ")
    'my-theme-prefix'
    """
    name = name.replace("_", "-")
    name = _DASH_RUNS.sub("-", name)
    return name.strip("-").lower()


def has_control_chars(text: str) -> bool:
    return bool(_CONTROL_CHARS.search(text))


def format_declaration(value: str, property_name: str = "", var_prefix: str = "") -> str:
    """Format a canonical value as a CSS declaration.

    Args:
        value: Canonical CSS value.
        property_name: CSS property. Blank returns the bare value.
        var_prefix: Custom-property prefix. Blank emits ``property:value;``,
            otherwise ``--prefix-property:value;``.

    Returns:
        The declaration, or an empty string for an empty value.
    """
    if not value:
        return ""
    name = (property_name or "").strip().lower()
    if not name:
        return value
    prefix = to_css_name(var_prefix or "")
    if not prefix:
        return f"{name}:{value};"
    return f"--{prefix}-{name}:{value};"
