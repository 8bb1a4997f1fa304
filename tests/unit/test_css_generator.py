"""Tests for CSS serialization of built theme stores."""

from __future__ import annotations

import pytest


class TestGenerateThemeCss:
    """Test scoped stylesheet rules for one theme type."""

    def test_scoped_rules(self, built_store):
        from tonekit.core.enums import ThemeType
        from tonekit.theme import generate_theme_css

        css = generate_theme_css(built_store, ThemeType.LIGHT)
        assert '[data-theme="light"] a {' in css
        assert '[data-theme="light"] a:hover {' in css
        assert '[data-theme="light"] body {' in css
        assert 'html[data-theme="light"] {' in css
        assert '[data-theme="light"] .tk-surface {' in css
        assert "  text-decoration-line:underline;" in css
        assert "dark" not in css

    def test_disabled_has_two_selectors(self, built_store):
        from tonekit.core.enums import ThemeType
        from tonekit.theme import generate_theme_css

        css = generate_theme_css(built_store, ThemeType.DARK)
        selector = (
            '[data-theme="dark"] a:disabled, [data-theme="dark"] a[aria-disabled="true"] {'
        )
        assert selector in css

    def test_focus_ring_only_in_focused_state(self, built_store):
        from tonekit.core.enums import ThemeType
        from tonekit.theme import generate_theme_css

        css = generate_theme_css(built_store, ThemeType.LIGHT)
        assert css.count('[data-theme="light"] :focus-visible {') == 1
        assert "outline-width:2px;" in css

    def test_document_rules_only_in_default_state(self, built_store):
        from tonekit.core.enums import ThemeType
        from tonekit.theme import generate_theme_css

        css = generate_theme_css(built_store, ThemeType.LIGHT)
        assert "body:hover" not in css
        assert css.count('html[data-theme="light"] {') == 1

    def test_declarations_sorted(self, built_store):
        from tonekit.core.enums import ThemeType
        from tonekit.theme import generate_theme_css

        css = generate_theme_css(built_store, ThemeType.LIGHT)
        block = css.split('[data-theme="light"] a {\n', 1)[1].split("}", 1)[0]
        properties = [line.strip().split(":", 1)[0] for line in block.splitlines()]
        assert properties == sorted(properties)

    def test_custom_settings(self, built_store):
        from tonekit.core.enums import ThemeType
        from tonekit.theme import CssSettings, generate_theme_css

        settings = CssSettings(theme_attribute="data-mode", class_prefix="Brand_Kit")
        css = generate_theme_css(built_store, ThemeType.LIGHT, settings)
        assert '[data-mode="light"] .brand-kit-surface {' in css

    def test_system_rejected(self, built_store):
        from tonekit.core.enums import ThemeType
        from tonekit.theme import generate_theme_css

        with pytest.raises(ValueError):
            generate_theme_css(built_store, ThemeType.SYSTEM)

    def test_empty_store(self):
        from tonekit.core.enums import ThemeType
        from tonekit.theme import ThemeStore, generate_theme_css

        assert generate_theme_css(ThemeStore(), ThemeType.LIGHT) == ""


class TestGenerateStylesheet:
    """Test the full multi-theme stylesheet."""

    def test_all_themes_and_system(self, built_store):
        from tonekit.theme import generate_stylesheet

        css = generate_stylesheet(built_store)
        for name in ("light", "dark", "high-contrast-light", "high-contrast-dark", "system"):
            assert f'[data-theme="{name}"]' in css
        assert "@media (prefers-color-scheme: dark) {" in css

    def test_system_dark_matches_dark(self, built_store):
        from tonekit.core.enums import ThemeType
        from tonekit.theme import generate_theme_css

        dark = generate_theme_css(built_store, ThemeType.DARK)
        system = generate_theme_css(built_store, ThemeType.DARK, scope_value="system")
        assert system == dark.replace('"dark"', '"system"')


class TestGenerateVariables:
    """Test custom-property output."""

    def test_variable_names(self, built_store):
        from tonekit.core.enums import ThemeType
        from tonekit.theme import generate_variables

        css = generate_variables(built_store, ThemeType.LIGHT)
        assert css.startswith('[data-theme="light"] {')
        assert "  --tk-link-default-color:#" in css
        assert "  --tk-heading-1-default-font-size:2.5rem;" in css
        assert css.endswith("}")


class TestGenerateInlineStyle:
    """Test inline style strings."""

    def test_inline_declarations(self, built_store):
        from tonekit.core.enums import ComponentType, ThemeType
        from tonekit.theme import generate_inline_style

        style = generate_inline_style(built_store, ComponentType.LINK, ThemeType.LIGHT)
        assert "text-decoration-line:underline;" in style
        assert style.startswith("accent-color:#")
        assert "\n" not in style

    def test_var_prefix(self, built_store):
        from tonekit.core.enums import ComponentType, ThemeType
        from tonekit.theme import generate_inline_style

        style = generate_inline_style(
            built_store, ComponentType.TEXT, ThemeType.LIGHT, var_prefix="x"
        )
        assert "--x-font-size:1rem;" in style

    def test_aliases_resolved(self, built_store):
        from tonekit.core.enums import ComponentState, ComponentType, ThemeType
        from tonekit.theme import generate_inline_style

        dark = generate_inline_style(built_store, ComponentType.LINK, ThemeType.DARK)
        system = generate_inline_style(
            built_store,
            ComponentType.LINK,
            ThemeType.SYSTEM,
            ComponentState.HIDDEN,
            prefers_dark=True,
        )
        assert system == dark
