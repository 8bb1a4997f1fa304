"""
WCAG relative luminance, contrast ratio, and hue-preserving contrast repair.

``ensure_minimum_contrast`` never raises for valid colors: when a target ratio
cannot be reached it returns the closest candidate it found with
``is_met=False`` and leaves the policy decision to the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .color import Color, srgb_to_linear

SEARCH_ITERATIONS = 18
DIRECTION_STEP = 2.0
TIE_EPSILON = 1e-6

# Standard text minimum; large text and non-text elements use 3.0.
AA_TEXT = 4.5
AA_LARGE = 3.0


_LINEAR: tuple[float, ...] = tuple(srgb_to_linear(b) for b in range(256))


def relative_luminance(color: Color) -> float:
    """WCAG relative luminance in [0, 1]."""
    return (
        0.2126 * _LINEAR[color.red]
        + 0.7152 * _LINEAR[color.green]
        + 0.0722 * _LINEAR[color.blue]
    )


def contrast_ratio(a: Color, b: Color) -> float:
    """WCAG contrast ratio in [1, 21]."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    high, low = (la, lb) if la >= lb else (lb, la)
    return (high + 0.05) / (low + 0.05)


@dataclass(frozen=True)
class ContrastResult:
    """Outcome of a contrast repair."""

    color: Color
    background: Color
    ratio: float
    is_met: bool


class _Best:
    """Tracks the highest-ratio candidate seen across all search branches."""

    def __init__(self, color: Color, ratio: float):
        self.color = color
        self.ratio = ratio

    def offer(self, color: Color, ratio: float) -> None:
        if ratio > self.ratio:
            self.color = color
            self.ratio = ratio


def _bisect(
    make: Callable[[float], Color],
    near: float,
    far: float,
    background: Color,
    min_ratio: float,
    best: _Best,
) -> ContrastResult | None:
    """Bisect between ``near`` (fails) and ``far`` for the point closest to ``near`` that passes."""
    found = False
    for _ in range(SEARCH_ITERATIONS):
        mid = (near + far) / 2
        candidate = make(mid)
        ratio = contrast_ratio(candidate, background)
        best.offer(candidate, ratio)
        if ratio >= min_ratio:
            found = True
            far = mid
        else:
            near = mid

    if not found:
        return None
    color = make(far)
    return ContrastResult(color, background, contrast_ratio(color, background), True)


def _pick_direction(foreground: Color, background: Color) -> int:
    hue, saturation, value = foreground.to_hsv()
    alpha = foreground.alpha
    up = Color.from_hsv(hue, saturation, min(100.0, value + DIRECTION_STEP), alpha)
    down = Color.from_hsv(hue, saturation, max(0.0, value - DIRECTION_STEP), alpha)
    diff = contrast_ratio(up, background) - contrast_ratio(down, background)
    if abs(diff) < TIE_EPSILON:
        return -1 if value >= 50 else 1
    return 1 if diff > 0 else -1


def ensure_minimum_contrast(
    foreground: Color, background: Color, min_ratio: float = AA_TEXT
) -> ContrastResult:
    """Adjust ``foreground`` until it meets ``min_ratio`` against ``background``.

    Search order:
        1. Return unchanged when already compliant.
        2. Bisect the HSV value rail in the more promising direction, keeping
           hue and saturation fixed.
        3. Bisect the opposite direction on the same rail.
        4. Bisect linear-light mixes toward white and black; if both reach the
           target, keep the higher ratio.
        5. Otherwise return the best candidate seen, flagged as not met.

    Args:
        foreground: Color to repair.
        background: Color it is read against.
        min_ratio: Target contrast ratio (4.5 for text, 3.0 for large text).

    Returns:
        ContrastResult with the resolved color, achieved ratio, and met flag.
    """
    ratio = contrast_ratio(foreground, background)
    if ratio >= min_ratio:
        return ContrastResult(foreground, background, ratio, True)

    best = _Best(foreground, ratio)
    hue, saturation, value = foreground.to_hsv()
    alpha = foreground.alpha

    def on_rail(v: float) -> Color:
        return Color.from_hsv(hue, saturation, v, alpha)

    direction = _pick_direction(foreground, background)
    for step in (direction, -direction):
        far = 100.0 if step > 0 else 0.0
        result = _bisect(on_rail, value, far, background, min_ratio, best)
        if result is not None:
            return result

    pole_results = []
    for pole in (Color.WHITE, Color.BLACK):
        def toward(t: float, pole: Color = pole) -> Color:
            return foreground.mix_linear(pole, t)

        result = _bisect(toward, 0.0, 1.0, background, min_ratio, best)
        if result is not None:
            pole_results.append(result)

    if pole_results:
        return max(pole_results, key=lambda r: r.ratio)

    return ContrastResult(best.color, background, best.ratio, False)
