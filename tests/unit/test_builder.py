"""Tests for the theme builder lifecycle and component recipes."""

from __future__ import annotations

import pytest


def _link_color(theme_type=None, state=None):
    from tonekit.core.enums import ComponentState, ComponentType, StyleType, ThemeType
    from tonekit.theme import ThemeCoordinate

    return (
        ThemeCoordinate()
        .with_component_types(ComponentType.LINK)
        .with_theme_types(theme_type or ThemeType.LIGHT)
        .with_component_states(state or ComponentState.DEFAULT)
        .with_style_types(StyleType.COLOR)
    )


class TestThemeBuilderLifecycle:
    """Test create/set/build and the reset after build."""

    def test_build_returns_frozen_store(self):
        from tonekit.theme import ThemeBuilder

        store = ThemeBuilder().create().build()
        assert store.is_frozen
        assert len(store) > 0

    def test_builder_resets_after_build(self):
        from tonekit.core import ColorValue
        from tonekit.core.enums import ComponentState, ComponentType, StyleType, ThemeType
        from tonekit.theme import ThemeBuilder

        builder = ThemeBuilder()
        first = builder.create().set(_link_color(), ColorValue("red")).build()
        assert not builder.is_ready

        second = builder.build()
        assert first is not second
        key = (ComponentType.LINK, ThemeType.LIGHT, ComponentState.DEFAULT, StyleType.COLOR)
        assert first.lookup(*key) == ColorValue("red")
        assert second.lookup(*key) != ColorValue("red")

    def test_build_is_deterministic(self):
        from tonekit.theme import build_theme

        assert dict(build_theme().items()) == dict(build_theme().items())

    def test_set_before_create_uses_default_brand(self):
        from tonekit.core import ColorValue
        from tonekit.core.enums import ComponentState, ComponentType, StyleType, ThemeType
        from tonekit.theme import ThemeBuilder

        store = ThemeBuilder().set(_link_color(), ColorValue("red")).build()
        assert store.lookup(
            ComponentType.LINK, ThemeType.LIGHT, ComponentState.DEFAULT, StyleType.COLOR
        ) == ColorValue("red")
        assert store.lookup(
            ComponentType.TEXT, ThemeType.LIGHT, ComponentState.DEFAULT, StyleType.FONT_SIZE
        ) is not None

    def test_set_rejects_high_contrast(self):
        from tonekit.core import ColorValue
        from tonekit.core.enums import ThemeType
        from tonekit.core.errors import ThemeWriteError
        from tonekit.theme import ThemeBuilder

        builder = ThemeBuilder().create()
        with pytest.raises(ThemeWriteError, match="High Contrast"):
            builder.set(_link_color(ThemeType.HIGH_CONTRAST_DARK), ColorValue("red"))

    def test_set_rejects_focus_geometry(self):
        from tonekit.core import NumberValue
        from tonekit.core.enums import ComponentState, ComponentType, StyleType, ThemeType
        from tonekit.core.errors import ThemeWriteError
        from tonekit.theme import ThemeBuilder, ThemeCoordinate

        builder = ThemeBuilder().create()
        coordinate = (
            ThemeCoordinate()
            .with_component_types(ComponentType.GLOBAL_FOCUS)
            .with_theme_types(ThemeType.LIGHT)
            .with_component_states(ComponentState.FOCUSED)
            .with_style_types(StyleType.OUTLINE_WIDTH)
        )
        with pytest.raises(ThemeWriteError):
            builder.set(coordinate, NumberValue("5px"))

    def test_built_store_is_read_only(self, built_store):
        from tonekit.core import ColorValue
        from tonekit.core.errors import ThemeFrozenError

        with pytest.raises(ThemeFrozenError):
            built_store.set(_link_color(), ColorValue("red"))


class TestThemeBuilderContent:
    """Test the entries produced for the default brand."""

    def test_no_alias_keys(self, built_store):
        from tonekit.core.enums import ThemeType

        assert all(key.theme_type != ThemeType.SYSTEM for key in built_store)
        assert all(not key.component_state.is_structural for key in built_store)

    def test_every_component_and_theme_present(self, built_store):
        from tonekit.core.enums import STORABLE_THEME_TYPES, ComponentType

        components = {key.component_type for key in built_store}
        themes = {key.theme_type for key in built_store}
        assert components == set(ComponentType)
        assert themes == set(STORABLE_THEME_TYPES)

    def test_body_text_contrast(self, built_store):
        from tonekit.core import contrast_ratio
        from tonekit.core.derivation import state_min_ratio
        from tonekit.core.enums import (
            INTERACTIVE_STATES,
            STORABLE_THEME_TYPES,
            ComponentType,
            StyleType,
        )

        for theme_type in STORABLE_THEME_TYPES:
            for state in INTERACTIVE_STATES:
                entries = built_store.entries_for(ComponentType.GLOBAL_BODY, theme_type, state)
                foreground = entries[StyleType.COLOR].color
                background = entries[StyleType.BACKGROUND_COLOR].color
                assert contrast_ratio(foreground, background) >= state_min_ratio(state)

    def test_link_readable_on_body(self, built_store):
        from tonekit.core import contrast_ratio
        from tonekit.core.enums import (
            STORABLE_THEME_TYPES,
            ComponentState,
            ComponentType,
            StyleType,
        )

        for theme_type in STORABLE_THEME_TYPES:
            link = built_store.lookup(
                ComponentType.LINK, theme_type, ComponentState.DEFAULT, StyleType.COLOR
            )
            body = built_store.lookup(
                ComponentType.GLOBAL_BODY,
                theme_type,
                ComponentState.DEFAULT,
                StyleType.BACKGROUND_COLOR,
            )
            assert contrast_ratio(link.color, body.color) >= 4.5

    def test_heading_recipe(self, built_store):
        from tonekit.core.enums import ComponentState, ComponentType, StyleType, ThemeType

        entries = built_store.entries_for(
            ComponentType.HEADING_1, ThemeType.LIGHT, ComponentState.DEFAULT
        )
        assert entries[StyleType.FONT_SIZE].value == "2.5rem"
        assert entries[StyleType.FONT_WEIGHT].value == "700"
        assert entries[StyleType.MARGIN].value == "0 0 1.5rem"
        assert entries[StyleType.PADDING].value == "0"

    def test_text_recipe(self, built_store):
        from tonekit.core.enums import ComponentState, ComponentType, StyleType, ThemeType

        entries = built_store.entries_for(
            ComponentType.TEXT, ThemeType.DARK, ComponentState.HOVERED
        )
        assert entries[StyleType.FONT_SIZE].value == "1rem"
        assert entries[StyleType.LINE_HEIGHT].value == "1.5"
        assert entries[StyleType.MARGIN].value == "0 0 1rem"

    def test_link_decoration(self, built_store):
        from tonekit.core.enums import ComponentState, ComponentType, StyleType, ThemeType

        entries = built_store.entries_for(
            ComponentType.LINK, ThemeType.LIGHT, ComponentState.VISITED
        )
        assert entries[StyleType.TEXT_DECORATION_LINE].value == "underline"
        assert entries[StyleType.TEXT_DECORATION_THICKNESS].value == "1px"
        assert StyleType.BACKGROUND_COLOR not in entries

    def test_focus_outline(self, built_store):
        from tonekit.core.enums import ComponentState, ComponentType, StyleType, ThemeType

        entries = built_store.entries_for(
            ComponentType.GLOBAL_FOCUS, ThemeType.HIGH_CONTRAST_DARK, ComponentState.FOCUSED
        )
        assert entries[StyleType.OUTLINE_WIDTH].value == "2px"
        assert entries[StyleType.OUTLINE_STYLE].value == "solid"
        assert entries[StyleType.OUTLINE_OFFSET].value == "4px"
        assert StyleType.OUTLINE_COLOR in entries
        assert StyleType.COLOR not in entries

    def test_html_root(self, built_store):
        from tonekit.core.enums import ComponentState, ComponentType, StyleType, ThemeType

        entries = built_store.entries_for(
            ComponentType.GLOBAL_HTML, ThemeType.LIGHT, ComponentState.DEFAULT
        )
        assert entries[StyleType.FONT_SIZE].value == "16px"
        assert entries[StyleType.BOX_SIZING].value == "border-box"
        assert entries[StyleType.SCROLL_BEHAVIOR].value == "smooth"

    def test_custom_brand(self):
        from tonekit.core.enums import ComponentState, ComponentType, StyleType, ThemeType
        from tonekit.theme import Brand, BrandFont, build_theme

        store = build_theme(Brand(font=BrandFont(sans_serif="Inter, sans-serif")))
        family = store.lookup(
            ComponentType.GLOBAL_BODY,
            ThemeType.LIGHT,
            ComponentState.DEFAULT,
            StyleType.FONT_FAMILY,
        )
        assert family.value == "Inter,sans-serif"
