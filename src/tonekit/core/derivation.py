"""
Interaction-state and elevation derivation for color palettes.

Each transform nudges the palette's background and border along the HSV value
axis, then repairs the foreground against the new background so every derived
pair keeps its stated minimum contrast (or reports that it could not).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from .color import Color
from .contrast import AA_LARGE, AA_TEXT, ContrastResult, ensure_minimum_contrast
from .enums import ComponentState, Elevation

logger = logging.getLogger(__name__)

# (background delta, border delta) in HSV value points.
STATE_DELTAS: dict[ComponentState, tuple[float, float]] = {
    ComponentState.HOVERED: (6.0, 8.0),
    ComponentState.FOCUSED: (8.0, 10.0),
    ComponentState.PRESSED: (12.0, 14.0),
    ComponentState.DRAGGED: (16.0, 18.0),
}

DISABLED_DESATURATE = 60.0
DISABLED_BLEND = 0.15
VISITED_DESATURATE = 30.0

ELEVATION_DELTAS: dict[Elevation, float] = {
    Elevation.LOWEST: -12.0,
    Elevation.LOW: -8.0,
    Elevation.MID: 0.0,
    Elevation.HIGH: 8.0,
    Elevation.HIGHEST: 12.0,
}
ELEVATION_BORDER_EXTRA = 2.0

FOREGROUND_SHIFT = 90.0
ACCENT_SHIFT = 60.0


def state_min_ratio(state: ComponentState) -> float:
    """Minimum foreground contrast for a state (3.0 for disabled, 4.5 otherwise)."""
    return AA_LARGE if state == ComponentState.DISABLED else AA_TEXT


def _toward_opposite_pole(color: Color, amount: float) -> Color:
    return color.shift_value(-amount if color.value >= 50 else amount)


def _blend(value: float, target: float, weight: float) -> float:
    return value + (target - value) * weight


@dataclass(frozen=True)
class ColorPalette:
    """The seven colors a component draws from in one state."""

    background: Color
    border: Color
    foreground: Color
    accent: Color
    caret: Color
    outline: Color
    text_decoration: Color

    @classmethod
    def from_background(cls, background: Color, min_ratio: float = AA_TEXT) -> ColorPalette:
        """Seed a full palette from a single background color."""
        background = background.with_alpha(1.0)
        foreground = ensure_minimum_contrast(
            _toward_opposite_pole(background, FOREGROUND_SHIFT), background, min_ratio
        ).color
        accent = ensure_minimum_contrast(
            _toward_opposite_pole(foreground, ACCENT_SHIFT), background, AA_LARGE
        ).color
        return cls(
            background=background,
            border=_toward_opposite_pole(background, ACCENT_SHIFT),
            foreground=foreground,
            accent=accent,
            caret=foreground,
            outline=accent,
            text_decoration=accent,
        )

    @classmethod
    def on_surface(cls, surface: Color, tint: Color, min_ratio: float = AA_TEXT) -> ColorPalette:
        """Palette for tinted text drawn directly on a surface (links, focus rings)."""
        base = cls.from_background(surface, min_ratio)
        foreground = ensure_minimum_contrast(tint.with_alpha(1.0), base.background, min_ratio).color
        accent = ensure_minimum_contrast(tint.with_alpha(1.0), base.background, AA_LARGE).color
        return replace(
            base,
            foreground=foreground,
            accent=accent,
            caret=foreground,
            outline=accent,
            text_decoration=accent,
        )


@dataclass(frozen=True)
class DerivedPalette:
    """A derived palette plus the foreground repair that produced it."""

    palette: ColorPalette
    foreground_contrast: ContrastResult


def _repair(palette: ColorPalette, min_ratio: float, context: str) -> DerivedPalette:
    result = ensure_minimum_contrast(palette.foreground, palette.background, min_ratio)
    if not result.is_met:
        logger.warning(
            f"{context}: foreground {result.color.hex} reaches {result.ratio:.2f} "
            f"against {palette.background.hex}, below {min_ratio}"
        )
    accent = ensure_minimum_contrast(palette.accent, palette.background, AA_LARGE).color
    repaired = replace(
        palette,
        foreground=result.color,
        caret=result.color,
        accent=accent,
        outline=accent,
        text_decoration=accent,
    )
    return DerivedPalette(repaired, result)


def derive_state(palette: ColorPalette, state: ComponentState) -> DerivedPalette:
    """Derive the palette for an interaction state.

    Args:
        palette: The default-state palette.
        state: Target state. Structural states (hidden, read-only) are rejected.

    Returns:
        DerivedPalette whose foreground meets the state minimum ratio when reachable.
    """
    if state.is_structural:
        raise ValueError(f"Structural state {state} has no derived palette")

    min_ratio = state_min_ratio(state)
    direction = -1 if palette.background.value >= 50 else 1

    if state in STATE_DELTAS:
        bg_delta, border_delta = STATE_DELTAS[state]
        nudged = replace(
            palette,
            background=palette.background.shift_value(direction * bg_delta),
            border=palette.border.shift_value(direction * border_delta),
        )
    elif state == ComponentState.DISABLED:

        def disable(color: Color) -> Color:
            hue, saturation, value = color.to_hsv()
            return Color.from_hsv(
                hue,
                max(0.0, saturation - DISABLED_DESATURATE),
                _blend(value, 50.0, DISABLED_BLEND),
                color.alpha,
            )

        nudged = replace(
            palette, background=disable(palette.background), border=disable(palette.border)
        )
    elif state == ComponentState.VISITED:

        def desaturate(color: Color) -> Color:
            return color.with_saturation(max(0.0, color.saturation - VISITED_DESATURATE))

        nudged = replace(
            palette,
            foreground=desaturate(palette.foreground),
            accent=desaturate(palette.accent),
        )
    else:
        nudged = palette

    return _repair(nudged, min_ratio, f"state {state}")


def derive_elevation(palette: ColorPalette, tier: Elevation) -> DerivedPalette:
    """Derive a surface palette for an elevation tier.

    Lower tiers darken, higher tiers lighten; the border moves two extra points
    in the same direction.
    """
    delta = ELEVATION_DELTAS[tier]
    if delta:
        border_delta = delta + (ELEVATION_BORDER_EXTRA if delta > 0 else -ELEVATION_BORDER_EXTRA)
        palette = replace(
            palette,
            background=palette.background.shift_value(delta),
            border=palette.border.shift_value(border_delta),
        )
    return _repair(palette, AA_TEXT, f"elevation {tier}")
