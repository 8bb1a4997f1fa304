"""
Theme builder: expands a brand into a complete, frozen theme store.

Lifecycle::

    builder = ThemeBuilder()
    store = builder.create(brand).set(coordinate, value).build()

``create`` fills a fresh store for both contrast modes and every component
type; ``set`` applies checked customizations; ``build`` freezes and returns the
store and resets the builder so the next ``create`` starts clean. Calling
``build`` without ``create`` builds the default brand.
"""

from __future__ import annotations

import logging

from ..core.enums import (
    BoxSizing,
    ComponentType,
    FontFaceType,
    FontWeight,
    LineStyle,
    Overflow,
    PaletteType,
    ScrollBehavior,
    StyleType,
    TextDecorationLine,
)
from ..core.values import KeywordValue, NumberValue, SpacingValue, StyleValue
from . import defaults
from .appliers import ThemeWrite, color_writes, font_writes, literal_write, outline_writes
from .brand import Brand
from .coordinate import ThemeCoordinate
from .store import ThemeStore

logger = logging.getLogger(__name__)

HEADING_RECIPES: dict[ComponentType, tuple[str, FontWeight, str, str]] = {
    # size, weight, line height, bottom margin
    ComponentType.HEADING_1: (
        defaults.RELATIVE_LARGE_5, FontWeight.BOLD, "1.2", defaults.RELATIVE_LARGE_2
    ),
    ComponentType.HEADING_2: (
        defaults.RELATIVE_LARGE_4, FontWeight.BOLD, "1.25", defaults.RELATIVE_LARGE_1
    ),
    ComponentType.HEADING_3: (
        defaults.RELATIVE_LARGE_3, FontWeight.SEMIBOLD, "1.3", defaults.RELATIVE
    ),
    ComponentType.HEADING_4: (
        defaults.RELATIVE_LARGE_2, FontWeight.SEMIBOLD, "1.4", defaults.RELATIVE
    ),
    ComponentType.HEADING_5: (
        defaults.RELATIVE_LARGE_1, FontWeight.SEMIBOLD, "1.5", defaults.RELATIVE_SMALL_1
    ),
    ComponentType.HEADING_6: (
        defaults.RELATIVE, FontWeight.MEDIUM, "1.5", defaults.RELATIVE_SMALL_1
    ),
}  # fmt: skip


class ThemeBuilder:
    """Builds a ``ThemeStore`` from a ``Brand``."""

    def __init__(self) -> None:
        self._brand: Brand | None = None
        self._store = ThemeStore()

    @property
    def is_ready(self) -> bool:
        return self._brand is not None

    def create(self, brand: Brand | None = None) -> ThemeBuilder:
        """Populate a fresh store from ``brand`` (the default brand when None)."""
        self._brand = brand or Brand()
        self._store = ThemeStore()

        for high_contrast in (False, True):
            mode = "high-contrast" if high_contrast else "standard"
            logger.debug(f"Building {mode} theme entries")
            self._create_global_body(high_contrast)
            self._create_global_focus(high_contrast)
            self._create_global_html(high_contrast)
            for component_type in HEADING_RECIPES:
                self._create_heading(high_contrast, component_type)
            self._create_link(high_contrast)
            self._create_surface(high_contrast)
            self._create_text(high_contrast)

        logger.debug(f"Theme store holds {len(self._store)} entries")
        return self

    def set(self, coordinate: ThemeCoordinate, value: StyleValue) -> ThemeBuilder:
        """Apply a checked customization between ``create`` and ``build``.

        Raises:
            ThemeWriteError: If the write targets a protected theme type, state or style.
        """
        if not self.is_ready:
            self.create()
        self._store.set(coordinate, value)
        return self

    def build(self) -> ThemeStore:
        """Freeze and return the store, then reset the builder."""
        if not self.is_ready:
            self.create()
        store = self._store.freeze()
        self._brand = None
        self._store = ThemeStore()
        return store

    # =========================================================================
    # Helpers
    # =========================================================================

    @property
    def _active_brand(self) -> Brand:
        if self._brand is None:
            raise RuntimeError("ThemeBuilder.create() must run before components are built")
        return self._brand

    def _apply(self, writes: list[ThemeWrite]) -> None:
        for write in writes:
            self._store._write(write.coordinate, write.value)

    def _literal(
        self,
        high_contrast: bool,
        component_type: ComponentType,
        style_type: StyleType,
        value: StyleValue,
    ) -> None:
        self._apply([literal_write(high_contrast, component_type, style_type, value)])

    def _zero_spacing(self, high_contrast: bool, component_type: ComponentType) -> None:
        zero = SpacingValue(defaults.SIZE_0)
        self._literal(high_contrast, component_type, StyleType.MARGIN, zero)
        self._literal(high_contrast, component_type, StyleType.PADDING, zero)

    # =========================================================================
    # Components
    # =========================================================================

    def _create_global_body(self, high_contrast: bool) -> None:
        component = ComponentType.GLOBAL_BODY
        brand = self._active_brand
        self._apply(
            color_writes(brand, high_contrast, component, PaletteType.SURFACE, has_background=True)
        )
        self._apply(
            font_writes(
                brand,
                high_contrast,
                component,
                face=FontFaceType.SANS_SERIF,
                size=defaults.RELATIVE,
                line_height=defaults.LINE_HEIGHT,
            )
        )
        self._zero_spacing(high_contrast, component)
        self._literal(high_contrast, component, StyleType.MIN_HEIGHT, NumberValue(defaults.FULL))
        self._literal(high_contrast, component, StyleType.OVERFLOW_X, KeywordValue(Overflow.CLIP))

    def _create_global_focus(self, high_contrast: bool) -> None:
        self._apply(
            outline_writes(
                self._active_brand, high_contrast, ComponentType.GLOBAL_FOCUS, PaletteType.SURFACE
            )
        )

    def _create_global_html(self, high_contrast: bool) -> None:
        component = ComponentType.GLOBAL_HTML
        self._apply(
            font_writes(
                self._active_brand,
                high_contrast,
                component,
                size=defaults.ROOT_FONT_SIZE,
                line_height=defaults.LINE_HEIGHT,
            )
        )
        self._zero_spacing(high_contrast, component)
        self._literal(
            high_contrast, component, StyleType.BOX_SIZING, KeywordValue(BoxSizing.BORDER_BOX)
        )
        self._literal(high_contrast, component, StyleType.MIN_HEIGHT, NumberValue(defaults.FULL))
        self._literal(
            high_contrast,
            component,
            StyleType.SCROLL_BEHAVIOR,
            KeywordValue(ScrollBehavior.SMOOTH),
        )
        self._literal(
            high_contrast, component, StyleType.TEXT_SIZE_ADJUST, NumberValue(defaults.FULL)
        )

    def _create_heading(self, high_contrast: bool, component: ComponentType) -> None:
        size, weight, line_height, margin_bottom = HEADING_RECIPES[component]
        self._apply(
            font_writes(
                self._active_brand,
                high_contrast,
                component,
                face=FontFaceType.SANS_SERIF,
                size=size,
                weight=weight,
                line_height=line_height,
                margin_bottom=margin_bottom,
            )
        )

    def _create_link(self, high_contrast: bool) -> None:
        component = ComponentType.LINK
        self._apply(
            color_writes(
                self._active_brand, high_contrast, component, PaletteType.PRIMARY, variant=True
            )
        )
        self._literal(
            high_contrast,
            component,
            StyleType.TEXT_DECORATION_LINE,
            KeywordValue(TextDecorationLine.UNDERLINE),
        )
        self._literal(
            high_contrast, component, StyleType.TEXT_DECORATION_STYLE, KeywordValue(LineStyle.SOLID)
        )
        self._literal(
            high_contrast,
            component,
            StyleType.TEXT_DECORATION_THICKNESS,
            NumberValue(defaults.THIN),
        )

    def _create_surface(self, high_contrast: bool) -> None:
        component = ComponentType.SURFACE
        self._apply(
            color_writes(
                self._active_brand,
                high_contrast,
                component,
                PaletteType.ELEVATION_1,
                has_background=True,
            )
        )
        self._literal(high_contrast, component, StyleType.MARGIN, SpacingValue(defaults.SIZE_2))
        self._literal(high_contrast, component, StyleType.PADDING, SpacingValue(defaults.SIZE_3))

    def _create_text(self, high_contrast: bool) -> None:
        self._apply(
            font_writes(
                self._active_brand,
                high_contrast,
                ComponentType.TEXT,
                size=defaults.RELATIVE,
                line_height=defaults.LINE_HEIGHT,
                margin_bottom=defaults.RELATIVE,
            )
        )


def build_theme(brand: Brand | None = None) -> ThemeStore:
    """Build a frozen theme store for ``brand`` in one call."""
    return ThemeBuilder().create(brand).build()
