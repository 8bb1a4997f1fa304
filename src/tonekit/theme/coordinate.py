"""
Four-axis theme coordinates.

A ``ThemeCoordinate`` selects sets of component types, theme types, component
states and style types. It denotes the cartesian product of those sets, so one
store write touches every combination. Coordinates are immutable: each
``with_*`` call returns a new coordinate.

Example:
    coordinate = (
        ThemeCoordinate()
        .with_component_types(ComponentType.LINK)
        .with_contrast_theme_types(False)
        .with_all_component_states()
        .with_style_types(StyleType.COLOR)
    )
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import NamedTuple, TypeVar

from ..core.enums import (
    INTERACTIVE_STATES,
    ComponentState,
    ComponentType,
    StyleType,
    ThemeType,
)
from ..core.errors import ThemeWriteError

E = TypeVar("E")


class ThemeKey(NamedTuple):
    """A fully-resolved store key: one member of each axis."""

    component_type: ComponentType
    theme_type: ThemeType
    component_state: ComponentState
    style_type: StyleType


def _merge(current: tuple[E, ...], items: Iterable[E]) -> tuple[E, ...]:
    """Append items not already present, keeping first-seen order."""
    merged = list(current)
    for item in items:
        if item not in merged:
            merged.append(item)
    return tuple(merged)


@dataclass(frozen=True)
class ThemeCoordinate:
    """Sets of values along the four theme axes."""

    component_types: tuple[ComponentType, ...] = ()
    theme_types: tuple[ThemeType, ...] = ()
    component_states: tuple[ComponentState, ...] = ()
    style_types: tuple[StyleType, ...] = ()

    # -------------------------------------------------------------------------
    # Component types
    # -------------------------------------------------------------------------

    def with_component_types(self, *component_types: ComponentType) -> ThemeCoordinate:
        return replace(self, component_types=_merge(self.component_types, component_types))

    def with_all_component_types(self) -> ThemeCoordinate:
        return self.with_component_types(*ComponentType)

    # -------------------------------------------------------------------------
    # Theme types
    # -------------------------------------------------------------------------

    def with_theme_types(self, *theme_types: ThemeType) -> ThemeCoordinate:
        """Add theme types without restriction; the store validates them on write."""
        return replace(self, theme_types=_merge(self.theme_types, theme_types))

    def with_theme_type(self, theme_type: ThemeType) -> ThemeCoordinate:
        """Add a single user-selectable theme type (light or dark).

        Raises:
            ThemeWriteError: For ``SYSTEM`` or either high-contrast variant.
        """
        if theme_type == ThemeType.SYSTEM:
            raise ThemeWriteError("System theme cannot be set directly.")
        if theme_type.is_high_contrast:
            raise ThemeWriteError("Cannot alter High Contrast themes.")
        return self.with_theme_types(theme_type)

    def with_contrast_theme_types(self, high_contrast: bool) -> ThemeCoordinate:
        """Add the light/dark pair for one contrast mode."""
        if high_contrast:
            return self.with_theme_types(
                ThemeType.HIGH_CONTRAST_DARK, ThemeType.HIGH_CONTRAST_LIGHT
            )
        return self.with_theme_types(ThemeType.DARK, ThemeType.LIGHT)

    # -------------------------------------------------------------------------
    # Component states
    # -------------------------------------------------------------------------

    def with_component_states(self, *component_states: ComponentState) -> ThemeCoordinate:
        return replace(self, component_states=_merge(self.component_states, component_states))

    def with_all_component_states(self) -> ThemeCoordinate:
        """Add every interactive state (everything except hidden and read-only)."""
        return self.with_component_states(*INTERACTIVE_STATES)

    # -------------------------------------------------------------------------
    # Style types
    # -------------------------------------------------------------------------

    def with_style_types(self, *style_types: StyleType) -> ThemeCoordinate:
        return replace(self, style_types=_merge(self.style_types, style_types))

    def with_all_style_types(self) -> ThemeCoordinate:
        return self.with_style_types(*StyleType)

    # -------------------------------------------------------------------------
    # Expansion
    # -------------------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not (
            self.component_types and self.theme_types and self.component_states and self.style_types
        )

    def keys(self) -> Iterator[ThemeKey]:
        """Yield every resolved key in the coordinate's cartesian product."""
        for combo in itertools.product(
            self.component_types, self.theme_types, self.component_states, self.style_types
        ):
            yield ThemeKey(*combo)

    @property
    def size(self) -> int:
        """Number of keys in the product."""
        return (
            len(self.component_types)
            * len(self.theme_types)
            * len(self.component_states)
            * len(self.style_types)
        )
