"""Tests for palette seeding, state derivation, and elevation tiers."""

from __future__ import annotations

import pytest


def _gray(value: float):
    from tonekit.core import Color

    return Color.from_hsv(0, 0, value)


class TestColorPalette:
    """Test palette seeding from a background."""

    def test_from_light_background(self):
        from tonekit.core import Color, ColorPalette, contrast_ratio

        palette = ColorPalette.from_background(Color.WHITE)
        assert palette.background == Color.WHITE
        assert contrast_ratio(palette.foreground, palette.background) >= 4.5
        assert contrast_ratio(palette.accent, palette.background) >= 3.0
        assert palette.caret == palette.foreground
        assert palette.outline == palette.accent == palette.text_decoration
        assert palette.border.value == pytest.approx(40.0, abs=0.5)

    def test_from_dark_background(self):
        from tonekit.core import ColorPalette, contrast_ratio

        palette = ColorPalette.from_background(_gray(10))
        assert palette.foreground.value > palette.background.value
        assert contrast_ratio(palette.foreground, palette.background) >= 4.5
        assert palette.border.value > palette.background.value

    def test_background_made_opaque(self):
        from tonekit.core import Color, ColorPalette

        palette = ColorPalette.from_background(Color(250, 250, 250, 0.2))
        assert palette.background.is_opaque

    def test_on_surface_keeps_tint_readable(self):
        from tonekit.core import Color, ColorPalette, contrast_ratio

        surface = Color.parse("Grey 900")
        palette = ColorPalette.on_surface(surface, Color.parse("Blue 900"))
        assert palette.background == surface
        assert contrast_ratio(palette.foreground, surface) >= 4.5
        assert contrast_ratio(palette.outline, surface) >= 3.0
        assert palette.foreground.hue == pytest.approx(Color.parse("Blue 900").hue, abs=5.0)


class TestDeriveState:
    """Test interaction-state nudges and foreground repair."""

    def test_hover_on_light_background(self):
        from tonekit.core import ColorPalette, derive_state
        from tonekit.core.enums import ComponentState

        palette = ColorPalette.from_background(_gray(90))
        derived = derive_state(palette, ComponentState.HOVERED)
        assert derived.palette.background.value == pytest.approx(84.0, abs=0.5)
        assert derived.palette.border.value == pytest.approx(palette.border.value - 8, abs=0.5)
        assert derived.foreground_contrast.is_met

    def test_hover_on_dark_background_lightens(self):
        from tonekit.core import ColorPalette, derive_state
        from tonekit.core.enums import ComponentState

        palette = ColorPalette.from_background(_gray(10))
        derived = derive_state(palette, ComponentState.HOVERED)
        assert derived.palette.background.value == pytest.approx(16.0, abs=0.5)

    def test_state_deltas_grow(self):
        from tonekit.core import ColorPalette, derive_state
        from tonekit.core.enums import ComponentState

        palette = ColorPalette.from_background(_gray(90))
        values = [
            derive_state(palette, state).palette.background.value
            for state in (
                ComponentState.DEFAULT,
                ComponentState.HOVERED,
                ComponentState.FOCUSED,
                ComponentState.PRESSED,
                ComponentState.DRAGGED,
            )
        ]
        assert values == sorted(values, reverse=True)

    def test_default_state_unchanged(self):
        from tonekit.core import ColorPalette, derive_state
        from tonekit.core.enums import ComponentState

        palette = ColorPalette.from_background(_gray(90))
        derived = derive_state(palette, ComponentState.DEFAULT)
        assert derived.palette == palette

    def test_disabled_desaturates_and_blends(self):
        from tonekit.core import Color, ColorPalette, derive_state
        from tonekit.core.enums import ComponentState

        seed = Color.parse("#1976D2")
        palette = ColorPalette.from_background(seed)
        derived = derive_state(palette, ComponentState.DISABLED)
        background = derived.palette.background
        assert background.saturation <= seed.saturation - 60 + 1.0
        assert background.value == pytest.approx(seed.value + (50 - seed.value) * 0.15, abs=0.6)
        assert derived.foreground_contrast.ratio >= 3.0

    def test_visited_keeps_background(self):
        from tonekit.core import Color, ColorPalette, derive_state
        from tonekit.core.enums import ComponentState

        palette = ColorPalette.on_surface(Color.WHITE, Color.parse("Blue 700"))
        derived = derive_state(palette, ComponentState.VISITED)
        assert derived.palette.background == palette.background
        assert derived.palette.foreground.saturation < palette.foreground.saturation

    def test_every_state_meets_its_target(self):
        from tonekit.core import Color, ColorPalette, contrast_ratio, derive_state
        from tonekit.core.derivation import state_min_ratio
        from tonekit.core.enums import INTERACTIVE_STATES

        for seed in ("#FAFAFA", "#212121", "#1976D2", "#FFA000", "#808080"):
            palette = ColorPalette.from_background(Color.parse(seed))
            for state in INTERACTIVE_STATES:
                derived = derive_state(palette, state).palette
                ratio = contrast_ratio(derived.foreground, derived.background)
                assert ratio >= state_min_ratio(state), (seed, state, ratio)

    def test_structural_states_rejected(self):
        from tonekit.core import ColorPalette, derive_state
        from tonekit.core.enums import ComponentState

        palette = ColorPalette.from_background(_gray(90))
        with pytest.raises(ValueError):
            derive_state(palette, ComponentState.HIDDEN)
        with pytest.raises(ValueError):
            derive_state(palette, ComponentState.READ_ONLY)

    def test_state_min_ratio(self):
        from tonekit.core.derivation import state_min_ratio
        from tonekit.core.enums import ComponentState

        assert state_min_ratio(ComponentState.DISABLED) == 3.0
        assert state_min_ratio(ComponentState.HOVERED) == 4.5


class TestDeriveElevation:
    """Test elevation tiers."""

    def test_lowest_darkens(self):
        from tonekit.core import ColorPalette, derive_elevation
        from tonekit.core.enums import Elevation

        palette = ColorPalette.from_background(_gray(70))
        derived = derive_elevation(palette, Elevation.LOWEST)
        assert derived.palette.background.value == pytest.approx(
            palette.background.value - 12, abs=0.5
        )

    def test_high_lightens_with_border_extra(self):
        from tonekit.core import ColorPalette, derive_elevation
        from tonekit.core.enums import Elevation

        palette = ColorPalette.from_background(_gray(70))
        derived = derive_elevation(palette, Elevation.HIGH)
        assert derived.palette.background.value == pytest.approx(
            palette.background.value + 8, abs=0.5
        )
        assert derived.palette.border.value == pytest.approx(palette.border.value + 10, abs=0.5)

    def test_mid_is_unchanged(self):
        from tonekit.core import ColorPalette, derive_elevation
        from tonekit.core.enums import Elevation

        palette = ColorPalette.from_background(_gray(70))
        derived = derive_elevation(palette, Elevation.MID)
        assert derived.palette.background == palette.background
        assert derived.palette.border == palette.border

    def test_tiers_are_ordered(self):
        from tonekit.core import ColorPalette, derive_elevation
        from tonekit.core.enums import Elevation

        palette = ColorPalette.from_background(_gray(50))
        values = [derive_elevation(palette, tier).palette.background.value for tier in Elevation]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_foreground_repaired(self):
        from tonekit.core import ColorPalette, contrast_ratio, derive_elevation
        from tonekit.core.enums import Elevation

        palette = ColorPalette.from_background(_gray(50))
        for tier in Elevation:
            derived = derive_elevation(palette, tier).palette
            assert contrast_ratio(derived.foreground, derived.background) >= 4.5
