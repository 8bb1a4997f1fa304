"""
CSS generator for built theme stores.

Serializes a frozen ``ThemeStore`` into stylesheet rules scoped by
``[data-theme="..."]``, into custom-property blocks, or into inline style
strings for a single component.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..core.css import to_css_name
from ..core.enums import (
    INTERACTIVE_STATES,
    STORABLE_THEME_TYPES,
    ComponentState,
    ComponentType,
    StyleType,
    ThemeType,
)
from ..core.values import StyleValue
from .store import ThemeStore


class CssSettings(BaseModel):
    """Naming used when serializing a theme to CSS."""

    model_config = ConfigDict(frozen=True)

    var_prefix: str = Field(default="tk", description="Custom property prefix")
    class_prefix: str = Field(default="tk", description="Class name prefix")
    theme_attribute: str = Field(default="data-theme", description="Theme scoping attribute")


_ELEMENT_SELECTORS: dict[ComponentType, str] = {
    ComponentType.GLOBAL_BODY: "body",
    ComponentType.GLOBAL_HTML: "html",
    ComponentType.HEADING_1: "h1",
    ComponentType.HEADING_2: "h2",
    ComponentType.HEADING_3: "h3",
    ComponentType.HEADING_4: "h4",
    ComponentType.HEADING_5: "h5",
    ComponentType.HEADING_6: "h6",
    ComponentType.LINK: "a",
    ComponentType.TEXT: "p",
}

_STATE_SUFFIXES: dict[ComponentState, tuple[str, ...]] = {
    ComponentState.DEFAULT: ("",),
    ComponentState.DISABLED: (":disabled", '[aria-disabled="true"]'),
    ComponentState.DRAGGED: ("[data-dragging]",),
    ComponentState.FOCUSED: (":focus-visible",),
    ComponentState.HOVERED: (":hover",),
    ComponentState.PRESSED: (":active",),
    ComponentState.VISITED: (":visited",),
}

_DOCUMENT_COMPONENTS = (ComponentType.GLOBAL_HTML, ComponentType.GLOBAL_BODY)


def _selectors(
    component: ComponentType, state: ComponentState, scope: str, settings: CssSettings
) -> list[str]:
    """Scoped selectors for a (component, state) rule; empty when the pair is not rendered."""
    if component == ComponentType.GLOBAL_FOCUS:
        return [f"{scope} :focus-visible"] if state == ComponentState.FOCUSED else []
    if component in _DOCUMENT_COMPONENTS and state != ComponentState.DEFAULT:
        return []

    if component == ComponentType.SURFACE:
        base = f".{to_css_name(settings.class_prefix)}-surface"
    else:
        base = _ELEMENT_SELECTORS[component]

    if component == ComponentType.GLOBAL_HTML:
        return [f"html{scope}"]
    return [f"{scope} {base}{suffix}" for suffix in _STATE_SUFFIXES[state]]


def _declarations(entries: dict[StyleType, StyleValue], indent: int = 2) -> list[str]:
    prefix = " " * indent
    return [f"{prefix}{entries[style].to_css(style.value)}" for style in sorted(entries)]


def generate_theme_css(
    store: ThemeStore,
    theme_type: ThemeType,
    settings: CssSettings | None = None,
    *,
    scope_value: str | None = None,
) -> str:
    """
    Generate stylesheet rules for one stored theme type.

    Args:
        store: Built theme store.
        theme_type: Stored theme type to render (not ``SYSTEM``).
        settings: Naming settings.
        scope_value: Attribute value for the scope selector; defaults to the
            theme type's own name.

    Returns:
        CSS rules, one per rendered (component, state) pair.
    """
    if theme_type == ThemeType.SYSTEM:
        raise ValueError("Resolve the system theme to light or dark before rendering")
    settings = settings or CssSettings()
    scope = f'[{settings.theme_attribute}="{scope_value or theme_type.value}"]'

    lines: list[str] = []
    for component in ComponentType:
        for state in INTERACTIVE_STATES:
            entries = store.entries_for(component, theme_type, state)
            if not entries:
                continue
            selectors = _selectors(component, state, scope, settings)
            if not selectors:
                continue
            lines.append(f"{', '.join(selectors)} {{")
            lines.extend(_declarations(entries))
            lines.append("}")
    return "\n".join(lines)


def generate_stylesheet(store: ThemeStore, settings: CssSettings | None = None) -> str:
    """
    Generate a complete stylesheet for every stored theme type.

    ``[data-theme="system"]`` follows the operating system: light rules by
    default, dark rules inside a ``prefers-color-scheme: dark`` media query.
    """
    settings = settings or CssSettings()
    lines: list[str] = [
        "/* tonekit theme */",
        "/* Auto-generated - do not edit */",
        "",
    ]

    for theme_type in STORABLE_THEME_TYPES:
        css = generate_theme_css(store, theme_type, settings)
        if css:
            lines.append(f"/* {theme_type.value} */")
            lines.append(css)
            lines.append("")

    system_light = generate_theme_css(store, ThemeType.LIGHT, settings, scope_value="system")
    if system_light:
        lines.append("/* system */")
        lines.append(system_light)
        lines.append("")

    system_dark = generate_theme_css(store, ThemeType.DARK, settings, scope_value="system")
    if system_dark:
        lines.append("@media (prefers-color-scheme: dark) {")
        lines.extend(f"  {line}" for line in system_dark.splitlines())
        lines.append("}")
        lines.append("")

    return "\n".join(lines)


def generate_variables(
    store: ThemeStore, theme_type: ThemeType, settings: CssSettings | None = None
) -> str:
    """
    Generate a custom-property block for one theme type.

    Each entry becomes ``--{prefix}-{component}-{state}-{property}``.
    """
    settings = settings or CssSettings()
    scope = f'[{settings.theme_attribute}="{theme_type.value}"]'
    lines = [f"{scope} {{"]
    for key in sorted(k for k in store if k.theme_type == theme_type):
        name = f"{key.component_type.value}-{key.component_state.value}-{key.style_type.value}"
        lines.append(f"  {store[key].to_css(name, settings.var_prefix)}")
    lines.append("}")
    return "\n".join(lines)


def generate_inline_style(
    store: ThemeStore,
    component: ComponentType,
    theme_type: ThemeType,
    state: ComponentState = ComponentState.DEFAULT,
    *,
    var_prefix: str = "",
    prefers_dark: bool = False,
) -> str:
    """
    Generate an inline ``style`` attribute value for one component.

    Aliases resolve the same way as ``ThemeStore.resolve``: ``SYSTEM`` follows
    ``prefers_dark`` and structural states read the default entries.
    """
    if theme_type == ThemeType.SYSTEM:
        theme_type = ThemeType.DARK if prefers_dark else ThemeType.LIGHT
    if state.is_structural:
        state = ComponentState.DEFAULT

    entries = store.entries_for(component, theme_type, state)
    declarations = [entries[style].to_css(style.value, var_prefix) for style in sorted(entries)]
    return "".join(declarations)

