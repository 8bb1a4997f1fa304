"""
Self-validating CSS primitive values.

Every wrapper normalizes its input into one canonical string, which is the
instance's only identity: two values of the same wrapper type are equal and
ordered exactly when their canonical strings are.

Each wrapper offers three ways in:
    Cls(raw)            raises StyleValueError on invalid input
    Cls.parse(raw)      same as the constructor
    Cls.try_parse(raw)  returns (ok, value); on failure value is Cls.empty()
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from decimal import Decimal
from functools import total_ordering
from typing import Any, TypeVar

from .color import Color
from .contrast import relative_luminance
from .css import format_declaration, has_control_chars
from .errors import ColorError, StyleValueError

V = TypeVar("V", bound="StyleValue")


def _require_text(raw: Any, kind: str) -> str:
    if not isinstance(raw, str):
        raise StyleValueError(f"{kind} must be a string, got {type(raw).__name__}", raw)
    if has_control_chars(raw):
        raise StyleValueError(f"{kind} contains control characters", raw)
    text = raw.strip()
    if not text:
        raise StyleValueError(f"{kind} is empty", raw)
    return text


# =============================================================================
# Base
# =============================================================================


@total_ordering
class StyleValue:
    """Base class for canonical CSS values."""

    __slots__ = ("_value",)

    kind = "value"

    def __init__(self, raw: Any):
        self._value = self._normalize(raw)

    def _normalize(self, raw: Any) -> str:
        raise NotImplementedError

    @classmethod
    def parse(cls: type[V], raw: Any, *args: Any, **kwargs: Any) -> V:
        return cls(raw, *args, **kwargs)

    @classmethod
    def try_parse(cls: type[V], raw: Any, *args: Any, **kwargs: Any) -> tuple[bool, V]:
        """Parse without raising; failures return ``(False, cls.empty())``."""
        try:
            return True, cls(raw, *args, **kwargs)
        except StyleValueError:
            return False, cls.empty()

    @classmethod
    def empty(cls: type[V]) -> V:
        """The invalid/empty sentinel for this wrapper type."""
        instance = object.__new__(cls)
        instance._value = ""
        return instance

    @property
    def value(self) -> str:
        return self._value

    @property
    def is_empty(self) -> bool:
        return not self._value

    def to_css(self, property_name: str = "", var_prefix: str = "") -> str:
        """Format as ``property:value;`` or ``--prefix-property:value;``."""
        return format_declaration(self._value, property_name, var_prefix)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))


# =============================================================================
# Numbers and lengths
# =============================================================================

_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d+)?|\.\d+))\s*([A-Za-z%]+)?\s*$")

LENGTH_UNITS: tuple[str, ...] = (
    # font-relative
    "cap", "ch", "em", "ex", "ic", "lh",
    "rcap", "rch", "rem", "rex", "ric", "rlh",
    # viewport
    "vb", "vh", "vi", "vmax", "vmin", "vw",
    "dvb", "dvh", "dvi", "dvmax", "dvmin", "dvw",
    "lvb", "lvh", "lvi", "lvmax", "lvmin", "lvw",
    "svb", "svh", "svi", "svmax", "svmin", "svw",
    # container
    "cqb", "cqh", "cqi", "cqmax", "cqmin", "cqw",
    # absolute
    "cm", "in", "mm", "pc", "pt", "px", "Q",
    # flex fraction and percentage
    "fr", "%",
)  # fmt: skip

_UNITS_BY_LOWER: dict[str, str] = {unit.lower(): unit for unit in LENGTH_UNITS}


def format_number(number: float) -> str:
    """Minimal positional decimal form (up to 7 places, never exponent notation)."""
    magnitude = abs(number)
    if magnitude and (magnitude < 1e-4 or magnitude >= 1e6):
        text = format(Decimal(repr(number)).normalize(), "f")
    else:
        text = f"{number:.7f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


class NumberValue(StyleValue):
    """A bare number, a length, a percentage, or ``auto``."""

    __slots__ = ("_number", "_unit")

    kind = "number"

    def __init__(self, raw: Any):
        self._number: float | None = None
        self._unit: str | None = None
        super().__init__(raw)

    def _normalize(self, raw: Any) -> str:
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            if not math.isfinite(raw):
                raise StyleValueError(f"Number must be finite, got {raw}", raw)
            raw = format_number(float(raw))
        text = _require_text(raw, "Number")
        if text.lower() == "auto":
            return "auto"

        match = _NUMBER_RE.match(text)
        if not match:
            raise StyleValueError(f"Invalid number: {raw!r}", raw)

        number = float(match.group(1))
        unit = match.group(2)
        if unit is not None:
            canonical_unit = _UNITS_BY_LOWER.get(unit.lower())
            if canonical_unit is None:
                raise StyleValueError(f"Unknown unit {unit!r} in {raw!r}", raw)
            unit = canonical_unit

        self._number = number
        self._unit = unit
        return format_number(number) + (unit or "")

    @property
    def number(self) -> float | None:
        """Numeric part; None for ``auto`` and the empty sentinel."""
        return getattr(self, "_number", None)

    @property
    def unit(self) -> str | None:
        return getattr(self, "_unit", None)

    @property
    def is_auto(self) -> bool:
        return self._value == "auto"


# =============================================================================
# Colors
# =============================================================================


class ColorValue(StyleValue):
    """A color, canonical as ``#RRGGBBAA``."""

    __slots__ = ("_color",)

    kind = "color"

    def _normalize(self, raw: Any) -> str:
        if isinstance(raw, Color):
            color = raw
        else:
            text = _require_text(raw, "Color")
            try:
                color = Color.parse(text)
            except ColorError as e:
                raise StyleValueError(e.message, raw) from e
        self._color = color
        return color.hex

    @property
    def color(self) -> Color | None:
        return getattr(self, "_color", None)


# =============================================================================
# Functions
# =============================================================================

_IDENTIFIER_RE = re.compile(r"^[-A-Za-z_][-A-Za-z0-9_]*$")
_CUSTOM_PROPERTY_RE = re.compile(r"^--[A-Za-z0-9_][-A-Za-z0-9_]*$")

KNOWN_FUNCTIONS: frozenset[str] = frozenset(
    {
        # math and references
        "abs", "acos", "asin", "atan", "atan2", "attr", "calc", "clamp", "cos",
        "counter", "counters", "env", "exp", "hypot", "log", "max", "min", "mod",
        "pow", "rem", "round", "sign", "sin", "sqrt", "tan", "var",
        # colors
        "color", "color-mix", "hsl", "hsla", "hwb", "lab", "lch", "light-dark",
        "oklab", "oklch", "rgb", "rgba",
        # images
        "conic-gradient", "cross-fade", "image", "image-set", "linear-gradient",
        "radial-gradient", "repeating-conic-gradient", "repeating-linear-gradient",
        "repeating-radial-gradient", "url",
        # transforms
        "matrix", "matrix3d", "perspective", "rotate", "rotate3d", "scale",
        "scale3d", "skew", "translate", "translate3d",
        # filters
        "blur", "brightness", "contrast", "drop-shadow", "grayscale",
        "hue-rotate", "invert", "opacity", "saturate", "sepia",
        # easing, grid, fonts
        "cubic-bezier", "fit-content", "format", "linear", "local", "minmax",
        "repeat", "steps",
    }
)  # fmt: skip

# Transform functions whose identifiers are case-sensitive.
MIXED_CASE_FUNCTIONS: frozenset[str] = frozenset(
    {
        "rotateX", "rotateY", "rotateZ",
        "scaleX", "scaleY", "scaleZ",
        "skewX", "skewY",
        "translateX", "translateY", "translateZ",
    }
)  # fmt: skip


def canonical_function_name(name: str) -> str | None:
    """Return the canonical spelling of a known CSS function name, or None."""
    if name in MIXED_CASE_FUNCTIONS:
        return name
    lowered = name.lower()
    if lowered in KNOWN_FUNCTIONS:
        return lowered
    return None


def _closes_at_end(text: str, start: int) -> bool:
    """True when the parenthesis at ``start`` is closed by the final character."""
    depth = 0
    quote: str | None = None
    for index in range(start, len(text)):
        ch = text[index]
        if quote:
            if ch == quote:
                quote = None
            continue
        if ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return index == len(text) - 1
            if depth < 0:
                return False
    return False


class FunctionValue(StyleValue):
    """A CSS function expression such as ``calc(100% - 2rem)`` or ``var(--gap)``.

    When ``name`` is given, the parsed function must have that name. Without a
    name, a bare custom property ``--token`` is accepted as ``var(--token)``.
    """

    __slots__ = ("_name",)

    kind = "function"

    def __init__(self, raw: Any, name: str | None = None):
        if name is not None:
            if not isinstance(name, str) or not _IDENTIFIER_RE.match(name.strip()):
                raise StyleValueError(f"Invalid function name: {name!r}", name)
            name = name.strip()
        self._name = name
        super().__init__(raw)

    def _normalize(self, raw: Any) -> str:
        text = _require_text(raw, "Function")

        if self._name is None and _CUSTOM_PROPERTY_RE.match(text):
            self._name = "var"
            return f"var({text})"

        start = text.find("(")
        if start <= 0 or text[-1] != ")":
            raise StyleValueError(f"Expected name(arguments): {raw!r}", raw)

        parsed = text[:start]
        if not _IDENTIFIER_RE.match(parsed):
            raise StyleValueError(f"Invalid function identifier {parsed!r} in {raw!r}", raw)
        if not _closes_at_end(text, start):
            raise StyleValueError(f"Unbalanced parentheses in {raw!r}", raw)

        canonical = canonical_function_name(parsed)
        if canonical is None:
            raise StyleValueError(f"Unknown CSS function: {parsed!r}", raw)

        if self._name is not None:
            if self._name in MIXED_CASE_FUNCTIONS or canonical in MIXED_CASE_FUNCTIONS:
                matches = parsed == self._name
            else:
                matches = parsed.lower() == self._name.lower()
            if not matches:
                raise StyleValueError(f"Expected {self._name}(), got {parsed}()", raw)

        inner = text[start + 1 : -1].strip()
        if not inner:
            raise StyleValueError(f"Function {parsed}() has no arguments", raw)

        self._name = canonical
        return f"{canonical}({inner})"

    @property
    def name(self) -> str | None:
        return getattr(self, "_name", None) if not self.is_empty else None


# =============================================================================
# Keywords
# =============================================================================

GLOBAL_KEYWORDS: frozenset[str] = frozenset(
    {"inherit", "initial", "unset", "revert", "revert-layer"}
)

_KEYWORD_RE = re.compile(r"^-?[a-z][a-z0-9-]*$")


class GlobalValue(StyleValue):
    """A CSS-wide keyword such as ``inherit`` or ``revert-layer``."""

    __slots__ = ()

    kind = "global"

    def _normalize(self, raw: Any) -> str:
        text = _require_text(raw, "Global keyword").lower()
        if text not in GLOBAL_KEYWORDS:
            raise StyleValueError(f"Not a CSS-wide keyword: {raw!r}", raw)
        return text


class KeywordValue(StyleValue):
    """A plain CSS keyword literal such as ``border-box`` or ``underline``."""

    __slots__ = ()

    kind = "keyword"

    def _normalize(self, raw: Any) -> str:
        text = _require_text(raw, "Keyword").lower()
        if not _KEYWORD_RE.match(text):
            raise StyleValueError(f"Invalid CSS keyword: {raw!r}", raw)
        return text


# =============================================================================
# Font families
# =============================================================================

_NEEDS_QUOTES_RE = re.compile(r"[\s,\"']")


def _split_outside_quotes(text: str) -> list[str]:
    tokens: list[str] = []
    current: list[str] = []
    quote: str | None = None
    escaped = False
    for ch in text:
        if quote:
            current.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
            current.append(ch)
        elif ch == ",":
            tokens.append("".join(current))
            current = []
        else:
            current.append(ch)
    tokens.append("".join(current))
    return tokens


def _unquote(token: str) -> str:
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "\"'":
        return re.sub(r"\\(.)", r"\1", token[1:-1], flags=re.DOTALL)
    return token


def _quote_family(name: str) -> str:
    if not _NEEDS_QUOTES_RE.search(name):
        return name
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class FontFamilyValue(StyleValue):
    """A de-duplicated font-family list, e.g. ``Inter,"Open Sans",sans-serif``."""

    __slots__ = ()

    kind = "font-family"

    def _normalize(self, raw: Any) -> str:
        if isinstance(raw, str):
            entries: Iterable[Any] = [raw]
        elif isinstance(raw, Iterable):
            entries = list(raw)
        else:
            raise StyleValueError(f"Font family must be a string or list, got {raw!r}", raw)

        families: list[str] = []
        seen: set[str] = set()
        for entry in entries:
            if not isinstance(entry, str):
                raise StyleValueError(f"Font family entries must be strings, got {entry!r}", raw)
            if has_control_chars(entry):
                raise StyleValueError("Font family contains control characters", raw)
            for token in _split_outside_quotes(entry):
                name = _unquote(token.strip()).strip()
                if not name or name.lower() in seen:
                    continue
                seen.add(name.lower())
                families.append(_quote_family(name))

        if not families:
            raise StyleValueError("Font family list is empty", raw)
        return ",".join(families)

    @property
    def families(self) -> list[str]:
        """Unquoted family names in order."""
        if self.is_empty:
            return []
        return [_unquote(token) for token in _split_outside_quotes(self._value)]


# =============================================================================
# Images
# =============================================================================

_URL_TOKEN_RE = re.compile(
    r"""url\(\s*(?:"((?:[^"\\]|\\.)*)"|'((?:[^'\\]|\\.)*)'|([^)]*?))\s*\)""",
    re.IGNORECASE | re.DOTALL,
)
_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")

ALLOWED_URL_SCHEMES: frozenset[str] = frozenset({"http", "https", "data", "blob"})
BLOCKED_URL_SCHEMES: tuple[str, ...] = ("javascript:", "vbscript:")

DARK_OVERLAY = "rgba(0,0,0,0.5)"
LIGHT_OVERLAY = "rgba(255,255,255,0.5)"


def _bare_url_body(text: str, open_index: int, raw: Any) -> str:
    """Body of an unquoted ``url(`` whose parenthesis opens at ``open_index``."""
    depth = 0
    for index in range(open_index, len(text)):
        ch = text[index]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return text[open_index + 1 : index]
    raise StyleValueError(f"Unbalanced parentheses in image URL: {raw!r}", raw)


def _unescape(text: str) -> str:
    return re.sub(r"\\(.)", r"\1", text, flags=re.DOTALL)


class ImageValue(StyleValue):
    """A sanitized ``url("...")`` reference.

    With ``background``, a half-transparent gradient overlay is prepended so text
    laid over the image stays legible: black over light backgrounds (relative
    luminance >= 0.5), white otherwise.
    """

    __slots__ = ("_background", "_url")

    kind = "image"

    def __init__(self, raw: Any, background: Color | ColorValue | None = None):
        if isinstance(background, ColorValue):
            background = background.color
        self._background = background
        super().__init__(raw)

    def _normalize(self, raw: Any) -> str:
        text = _require_text(raw, "Image")

        match = _URL_TOKEN_RE.search(text)
        if match:
            double, single, bare = match.groups()
            if double is not None:
                body = _unescape(double)
            elif single is not None:
                body = _unescape(single)
            else:
                bare = _bare_url_body(text, match.start() + len("url"), raw)
                body = _unquote(bare.strip())
        else:
            body = _unquote(text)

        body = body.strip()
        if not body:
            raise StyleValueError(f"Image URL is empty: {raw!r}", raw)

        compact = re.sub(r"\s+", "", body).lower()
        if compact.startswith(BLOCKED_URL_SCHEMES):
            raise StyleValueError(f"Unsafe image URL scheme: {raw!r}", raw)
        scheme = _SCHEME_RE.match(body)
        if scheme and scheme.group(1).lower() not in ALLOWED_URL_SCHEMES:
            raise StyleValueError(f"Image URL scheme {scheme.group(1)!r} is not allowed", raw)

        self._url = body
        escaped = body.replace("\\", "\\\\").replace('"', '\\"')
        reference = f'url("{escaped}")'

        if self._background is None:
            return reference
        overlay = DARK_OVERLAY if relative_luminance(self._background) >= 0.5 else LIGHT_OVERLAY
        return f"linear-gradient({overlay},{overlay}),{reference}"

    @property
    def url(self) -> str | None:
        """The unescaped URL body."""
        return getattr(self, "_url", None) if not self.is_empty else None


# =============================================================================
# Spacing groups
# =============================================================================


def _split_outside_parens(text: str) -> list[str]:
    tokens: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch.isspace() and depth == 0:
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


def _collapse_sides(sides: list[str]) -> list[str]:
    if len(sides) == 4 and sides[3] == sides[1]:
        sides = sides[:3]
    if len(sides) == 3 and sides[2] == sides[0]:
        sides = sides[:2]
    if len(sides) == 2 and sides[1] == sides[0]:
        sides = sides[:1]
    return sides


class SpacingValue(StyleValue):
    """One to four lengths for margin or padding, in minimal shorthand order.

    Sides follow CSS shorthand order (block-start, inline-end, block-end,
    inline-start), so ``"0 0 1rem 0"`` normalizes to ``"0 0 1rem"``.
    """

    __slots__ = ()

    kind = "spacing"

    def _normalize(self, raw: Any) -> str:
        if isinstance(raw, str):
            tokens = _split_outside_parens(_require_text(raw, "Spacing"))
        elif isinstance(raw, Iterable):
            tokens = [str(item).strip() for item in raw]
        else:
            raise StyleValueError(f"Spacing must be a string or list, got {raw!r}", raw)

        if not 1 <= len(tokens) <= 4:
            raise StyleValueError(f"Spacing takes 1 to 4 values, got {len(tokens)}", raw)

        sides = []
        for token in tokens:
            if "(" in token:
                sides.append(FunctionValue(token).value)
            else:
                sides.append(NumberValue(token).value)
        return " ".join(_collapse_sides(sides))

    @property
    def sides(self) -> tuple[str, str, str, str] | None:
        """The four sides expanded from shorthand."""
        if self.is_empty:
            return None
        parts = _split_outside_parens(self._value)
        while len(parts) < 4:
            parts.append(parts[{1: 0, 2: 0, 3: 1}[len(parts)]])
        return parts[0], parts[1], parts[2], parts[3]
