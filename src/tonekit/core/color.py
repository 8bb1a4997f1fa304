"""
Immutable sRGB color with HSV conversion and CSS literal parsing.

A ``Color`` holds 8-bit red, green and blue channels and a float alpha. Its
canonical form is the upper-case ``#RRGGBBAA`` string, which also defines
equality, hashing and ordering.

Accepted literals:
    #RGB, #RGBA, #RRGGBB, #RRGGBBAA
    rgb(r, g, b), rgba(r, g, b, a)       channels 0-255 or percentages
    hsv(h, s%, v%), hsva(h, s%, v%, a)   hue in degrees, s/v 0-100;
                                         bare s/v of 1 or less are fractions
    CSS web names and Material palette names ("Deep Purple 200")
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar

from .errors import ColorError
from .named_colors import lookup_color_name

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_RE = re.compile(r"^(rgba?|hsva?)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL)
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d+)?|\.\d+)(%?)$")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_byte(value: float) -> int:
    return int(_clamp(round(value), 0, 255))


def srgb_to_linear(byte: int) -> float:
    """Decode an 8-bit sRGB channel to linear light with the IEC transfer curve."""
    c = byte / 255
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value: float) -> int:
    value = _clamp(value, 0.0, 1.0)
    if value <= 0.0031308:
        c = value * 12.92
    else:
        c = 1.055 * value ** (1 / 2.4) - 0.055
    return _round_byte(c * 255)


@total_ordering
@dataclass(frozen=True, eq=False)
class Color:
    """An sRGB color with 8-bit channels and a 0-1 alpha."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            channel = getattr(self, name)
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise ColorError(f"{name} must be an integer, got {channel!r}", channel)
            if not 0 <= channel <= 255:
                raise ColorError(f"{name} must be between 0 and 255, got {channel}", channel)
        alpha = float(self.alpha)
        if math.isnan(alpha):
            raise ColorError("alpha must be a number, got NaN", self.alpha)
        object.__setattr__(self, "alpha", _clamp(alpha, 0.0, 1.0))

    # -------------------------------------------------------------------------
    # Canonical form
    # -------------------------------------------------------------------------

    @property
    def alpha_byte(self) -> int:
        return _round_byte(self.alpha * 255)

    @property
    def hex(self) -> str:
        """Canonical ``#RRGGBBAA`` string."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}{self.alpha_byte:02X}"

    @property
    def is_opaque(self) -> bool:
        return self.alpha_byte == 255

    def to_rgba(self) -> str:
        """Format as a CSS ``rgba()`` literal."""
        alpha = f"{self.alpha:.3f}".rstrip("0").rstrip(".")
        return f"rgba({self.red},{self.green},{self.blue},{alpha})"

    def __str__(self) -> str:
        return self.hex

    def __repr__(self) -> str:
        return f"Color({self.hex!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.hex == other.hex

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.hex < other.hex

    def __hash__(self) -> int:
        return hash(self.hex)

    # -------------------------------------------------------------------------
    # HSV
    # -------------------------------------------------------------------------

    def to_hsv(self) -> tuple[float, float, float]:
        """Return (hue 0-360, saturation 0-100, value 0-100)."""
        r, g, b = self.red / 255, self.green / 255, self.blue / 255
        high = max(r, g, b)
        delta = high - min(r, g, b)

        if delta == 0:
            hue = 0.0
        elif high == r:
            hue = 60 * (((g - b) / delta) % 6)
        elif high == g:
            hue = 60 * ((b - r) / delta + 2)
        else:
            hue = 60 * ((r - g) / delta + 4)

        saturation = 0.0 if high == 0 else delta / high
        return hue % 360, saturation * 100, high * 100

    @property
    def hue(self) -> float:
        return self.to_hsv()[0]

    @property
    def saturation(self) -> float:
        return self.to_hsv()[1]

    @property
    def value(self) -> float:
        return self.to_hsv()[2]

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float, alpha: float = 1.0) -> Color:
        """Build a color from HSV channels.

        Args:
            hue: Degrees; wrapped into [0, 360).
            saturation: Percent; clamped to 0-100.
            value: Percent; clamped to 0-100.
            alpha: Opacity; clamped to 0-1.

        Returns:
            The nearest 8-bit color (channels rounded half to even).
        """
        if not all(math.isfinite(c) for c in (hue, saturation, value)):
            raise ColorError("HSV channels must be finite numbers", (hue, saturation, value))

        h = hue % 360
        s = _clamp(saturation, 0, 100) / 100
        v = _clamp(value, 0, 100) / 100

        chroma = v * s
        prime = h / 60
        x = chroma * (1 - abs(prime % 2 - 1))
        sector = int(prime) % 6
        r1, g1, b1 = (
            (chroma, x, 0.0),
            (x, chroma, 0.0),
            (0.0, chroma, x),
            (0.0, x, chroma),
            (x, 0.0, chroma),
            (chroma, 0.0, x),
        )[sector]
        m = v - chroma
        return cls(
            _round_byte((r1 + m) * 255),
            _round_byte((g1 + m) * 255),
            _round_byte((b1 + m) * 255),
            alpha,
        )

    # -------------------------------------------------------------------------
    # Adjustments
    # -------------------------------------------------------------------------

    def with_alpha(self, alpha: float) -> Color:
        return Color(self.red, self.green, self.blue, alpha)

    def with_value(self, value: float) -> Color:
        """Same hue and saturation at a different HSV value."""
        hue, saturation, _ = self.to_hsv()
        return Color.from_hsv(hue, saturation, value, self.alpha)

    def shift_value(self, delta: float) -> Color:
        return self.with_value(self.value + delta)

    def with_saturation(self, saturation: float) -> Color:
        hue, _, value = self.to_hsv()
        return Color.from_hsv(hue, saturation, value, self.alpha)

    def mix(self, other: Color, t: float) -> Color:
        """Linear sRGB interpolation toward ``other``; alpha is kept from self."""
        t = _clamp(t, 0.0, 1.0)
        return Color(
            _round_byte(self.red + (other.red - self.red) * t),
            _round_byte(self.green + (other.green - self.green) * t),
            _round_byte(self.blue + (other.blue - self.blue) * t),
            self.alpha,
        )

    def mix_linear(self, other: Color, t: float) -> Color:
        """Interpolate toward ``other`` in linear light; alpha is kept from self.

        Channels are decoded through the sRGB transfer curve, blended, then
        re-encoded, so a half mix of black and white lands on #BCBCBC rather
        than the gamma-space #808080.
        """
        t = _clamp(t, 0.0, 1.0)
        channels = []
        for start, end in (
            (self.red, other.red),
            (self.green, other.green),
            (self.blue, other.blue),
        ):
            low = srgb_to_linear(start)
            channels.append(linear_to_srgb(low + (srgb_to_linear(end) - low) * t))
        return Color(channels[0], channels[1], channels[2], self.alpha)

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse a hex, ``rgb()``, ``hsv()`` or named color literal.

        Raises:
            ColorError: If the text is not a recognized color.
        """
        if not isinstance(text, str):
            raise ColorError(f"Color literal must be a string, got {type(text).__name__}", text)
        raw = text.strip()
        if not raw:
            raise ColorError("Color literal is empty", text)

        if raw.startswith("#"):
            return cls._parse_hex(raw)

        match = _FUNC_RE.match(raw)
        if match:
            name = match.group(1).lower()
            args = [part.strip() for part in match.group(2).split(",")]
            if name.startswith("rgb"):
                return cls._parse_rgb(name, args, raw)
            return cls._parse_hsv(name, args, raw)

        named = lookup_color_name(raw)
        if named is not None:
            return cls._parse_hex(named)

        raise ColorError(f"Unrecognized color: {text!r}", text)

    @classmethod
    def try_parse(cls, text: str) -> Color | None:
        """Parse a color literal, returning None instead of raising."""
        try:
            return cls.parse(text)
        except ColorError:
            return None

    @classmethod
    def _parse_hex(cls, raw: str) -> Color:
        if not _HEX_RE.match(raw):
            raise ColorError(f"Invalid hex color: {raw!r}", raw)
        digits = raw[1:]
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            digits += "FF"
        red, green, blue, alpha = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
        return cls(red, green, blue, alpha / 255)

    @classmethod
    def _parse_rgb(cls, name: str, args: list[str], raw: str) -> Color:
        expected = 4 if name == "rgba" else 3
        if len(args) != expected:
            raise ColorError(f"{name}() expects {expected} arguments: {raw!r}", raw)

        channels = []
        for arg in args[:3]:
            number, is_percent = _parse_number(arg, raw)
            if is_percent:
                if not 0 <= number <= 100:
                    raise ColorError(f"Channel percentage out of range in {raw!r}", raw)
                channels.append(_round_byte(number * 255 / 100))
            else:
                if number != int(number) or not 0 <= number <= 255:
                    raise ColorError(f"Channel must be an integer 0-255 in {raw!r}", raw)
                channels.append(int(number))

        alpha = _parse_alpha(args[3], raw) if expected == 4 else 1.0
        return cls(channels[0], channels[1], channels[2], alpha)

    @classmethod
    def _parse_hsv(cls, name: str, args: list[str], raw: str) -> Color:
        expected = 4 if name == "hsva" else 3
        if len(args) != expected:
            raise ColorError(f"{name}() expects {expected} arguments: {raw!r}", raw)

        hue_text = args[0]
        if hue_text.lower().endswith("deg"):
            hue_text = hue_text[:-3].strip()
        hue, is_percent = _parse_number(hue_text, raw)
        if is_percent:
            raise ColorError(f"Hue cannot be a percentage in {raw!r}", raw)

        saturation = _parse_fraction_or_percent(args[1], raw)
        value = _parse_fraction_or_percent(args[2], raw)
        for channel in (saturation, value):
            if not 0 <= channel <= 100:
                raise ColorError(f"Saturation and value must be 0-100 in {raw!r}", raw)

        alpha = _parse_alpha(args[3], raw) if expected == 4 else 1.0
        return cls.from_hsv(hue, saturation, value, alpha)


def _parse_number(text: str, raw: str) -> tuple[float, bool]:
    match = _NUMBER_RE.match(text)
    if not match:
        raise ColorError(f"Invalid number {text!r} in {raw!r}", raw)
    is_percent = bool(match.group(1))
    return float(text.rstrip("%")), is_percent


def _parse_fraction_or_percent(text: str, raw: str) -> float:
    """Read an HSV channel on the 0-100 scale; bare numbers up to 1 are fractions."""
    number, is_percent = _parse_number(text, raw)
    if not is_percent and number <= 1:
        number *= 100
    return number


def _parse_alpha(text: str, raw: str) -> float:
    number, is_percent = _parse_number(text, raw)
    if is_percent:
        number /= 100
    if not 0 <= number <= 1:
        raise ColorError(f"Alpha must be between 0 and 1 in {raw!r}", raw)
    return number


Color.WHITE = Color(255, 255, 255)
Color.BLACK = Color(0, 0, 0)
Color.TRANSPARENT = Color(0, 0, 0, 0.0)
