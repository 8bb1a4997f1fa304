"""
Theme store: resolved theme keys mapped to canonical CSS values.

Writes are coordinate-addressed bulk upserts. Every write is validated before
anything changes, then the coordinate's product is staged and applied in one
step, so a rejected write leaves the store untouched. Later writes to the same
key win.

Rules for public writes (``ThemeStore.set``):
    1. No ``SYSTEM`` theme type; it is a lookup-time alias.
    2. No ``HIDDEN`` or ``READ_ONLY`` states; consumers derive them.
    3. No high-contrast theme types; only the builder authors those.
    4. No outline offset/style/width on the ``FOCUSED`` state.

The builder writes through ``_write``, which keeps rules 1 and 2 only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ..core.enums import (
    FOCUS_OUTLINE_STYLES,
    ComponentState,
    ComponentType,
    StyleType,
    ThemeType,
)
from ..core.errors import ThemeFrozenError, ThemeWriteError
from ..core.values import StyleValue
from .coordinate import ThemeCoordinate, ThemeKey

logger = logging.getLogger(__name__)


class ThemeStore(Mapping[ThemeKey, StyleValue]):
    """Mapping of ``ThemeKey`` to ``StyleValue`` with validated bulk writes."""

    def __init__(self, entries: Mapping[ThemeKey, StyleValue] | None = None):
        self._entries: dict[ThemeKey, StyleValue] = dict(entries or {})
        self._frozen = False

    # =========================================================================
    # Mapping protocol
    # =========================================================================

    def __getitem__(self, key: ThemeKey) -> StyleValue:
        return self._entries[key]

    def __iter__(self) -> Iterator[ThemeKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"ThemeStore({len(self._entries)} entries, {state})"

    # =========================================================================
    # Lookup
    # =========================================================================

    def lookup(
        self,
        component_type: ComponentType,
        theme_type: ThemeType,
        component_state: ComponentState,
        style_type: StyleType,
    ) -> StyleValue | None:
        """Return the value stored for a fully-resolved key, or None."""
        return self._entries.get(ThemeKey(component_type, theme_type, component_state, style_type))

    def resolve(
        self,
        component_type: ComponentType,
        theme_type: ThemeType,
        component_state: ComponentState,
        style_type: StyleType,
        *,
        prefers_dark: bool = False,
    ) -> StyleValue | None:
        """Look up a value after resolving aliases.

        ``SYSTEM`` becomes ``DARK`` or ``LIGHT`` from ``prefers_dark``; the
        structural ``HIDDEN`` and ``READ_ONLY`` states read the ``DEFAULT`` entries.
        """
        if theme_type == ThemeType.SYSTEM:
            theme_type = ThemeType.DARK if prefers_dark else ThemeType.LIGHT
        if component_state.is_structural:
            component_state = ComponentState.DEFAULT
        return self.lookup(component_type, theme_type, component_state, style_type)

    def entries_for(
        self,
        component_type: ComponentType,
        theme_type: ThemeType,
        component_state: ComponentState,
    ) -> dict[StyleType, StyleValue]:
        """All style values stored for one component, theme type and state."""
        return {
            key.style_type: value
            for key, value in self._entries.items()
            if key.component_type == component_type
            and key.theme_type == theme_type
            and key.component_state == component_state
        }

    def as_mapping(self) -> Mapping[ThemeKey, StyleValue]:
        return MappingProxyType(self._entries)

    # =========================================================================
    # Writes
    # =========================================================================

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> ThemeStore:
        """Make the store read-only and return it."""
        self._frozen = True
        return self

    def copy(self) -> ThemeStore:
        """Return an unfrozen copy holding the same entries."""
        return ThemeStore(self._entries)

    def set(self, coordinate: ThemeCoordinate, value: StyleValue) -> ThemeStore:
        """Write ``value`` to every key of ``coordinate``, enforcing all rules.

        Raises:
            ThemeWriteError: If the coordinate or value breaks a rule. Nothing is written.
            ThemeFrozenError: If the store is frozen.
        """
        self._validate(coordinate, value, protected=True)
        return self._apply(coordinate, value)

    def _write(self, coordinate: ThemeCoordinate, value: StyleValue) -> ThemeStore:
        """Builder write path: structural rules only, high-contrast and focus geometry allowed."""
        self._validate(coordinate, value, protected=False)
        return self._apply(coordinate, value)

    def _validate(self, coordinate: ThemeCoordinate, value: StyleValue, *, protected: bool) -> None:
        if self._frozen:
            raise ThemeFrozenError("Theme store is frozen; copy() it to make changes.")
        if not isinstance(value, StyleValue):
            raise ThemeWriteError(f"Theme values must be StyleValue instances, got {value!r}")
        if value.is_empty:
            raise ThemeWriteError(f"Cannot store an empty {type(value).__name__}.")

        if ThemeType.SYSTEM in coordinate.theme_types:
            raise ThemeWriteError("System theme cannot be set directly.")
        if any(state.is_structural for state in coordinate.component_states):
            raise ThemeWriteError("Hidden and read-only states cannot be set directly.")

        if not protected:
            return
        if any(theme.is_high_contrast for theme in coordinate.theme_types):
            raise ThemeWriteError("Cannot alter High Contrast themes.")
        if ComponentState.FOCUSED in coordinate.component_states and any(
            style in FOCUS_OUTLINE_STYLES for style in coordinate.style_types
        ):
            raise ThemeWriteError("Cannot change focused outline offset, style or width.")

    def _apply(self, coordinate: ThemeCoordinate, value: StyleValue) -> ThemeStore:
        staged = dict.fromkeys(coordinate.keys(), value)
        self._entries.update(staged)
        logger.debug(f"Wrote {value!r} to {len(staged)} theme keys")
        return self
