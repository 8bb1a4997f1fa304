"""Tests for Color construction, HSV conversion, and literal parsing."""

from __future__ import annotations

import pytest

# =============================================================================
# Construction
# =============================================================================


class TestColorConstruction:
    """Test channel validation and the canonical hex form."""

    def test_hex_is_upper_case_rrggbbaa(self):
        from tonekit.core import Color

        assert Color(170, 187, 204).hex == "#AABBCCFF"
        assert str(Color(0, 0, 0, 0.0)) == "#00000000"

    def test_channel_out_of_range(self):
        from tonekit.core import Color, ColorError

        with pytest.raises(ColorError):
            Color(256, 0, 0)
        with pytest.raises(ColorError):
            Color(-1, 0, 0)

    def test_channel_must_be_integer(self):
        from tonekit.core import Color, ColorError

        with pytest.raises(ColorError):
            Color(1.5, 0, 0)  # type: ignore[arg-type]
        with pytest.raises(ColorError):
            Color(True, 0, 0)  # type: ignore[arg-type]

    def test_alpha_is_clamped(self):
        from tonekit.core import Color

        assert Color(0, 0, 0, 2.0).alpha == 1.0
        assert Color(0, 0, 0, -1.0).alpha == 0.0

    def test_nan_alpha_rejected(self):
        from tonekit.core import Color, ColorError

        with pytest.raises(ColorError):
            Color(0, 0, 0, float("nan"))

    def test_equality_and_hash_follow_hex(self):
        from tonekit.core import Color

        assert Color(255, 0, 0, 0.5) == Color(255, 0, 0, 0.501)
        assert len({Color(1, 2, 3), Color(1, 2, 3, 1.0)}) == 1
        assert Color.BLACK < Color.WHITE

    def test_to_rgba(self):
        from tonekit.core import Color

        assert Color(255, 0, 0, 0.5).to_rgba() == "rgba(255,0,0,0.5)"
        assert Color(1, 2, 3).to_rgba() == "rgba(1,2,3,1)"


# =============================================================================
# HSV
# =============================================================================


class TestColorHsv:
    """Test HSV conversion and value-axis adjustments."""

    def test_gray_has_zero_hue_and_saturation(self):
        from tonekit.core import Color

        hue, saturation, value = Color(128, 128, 128).to_hsv()
        assert hue == 0.0
        assert saturation == 0.0
        assert value == pytest.approx(50.196, abs=0.01)

    def test_primary_hues(self):
        from tonekit.core import Color

        assert Color(255, 0, 0).hue == 0.0
        assert Color(0, 255, 0).hue == pytest.approx(120.0)
        assert Color(0, 0, 255).hue == pytest.approx(240.0)

    def test_from_hsv(self):
        from tonekit.core import Color

        assert Color.from_hsv(0, 100, 100) == Color(255, 0, 0)
        assert Color.from_hsv(120, 100, 50) == Color(0, 128, 0)
        assert Color.from_hsv(0, 0, 0) == Color.BLACK

    def test_from_hsv_wraps_hue_and_clamps(self):
        from tonekit.core import Color

        assert Color.from_hsv(360, 100, 100) == Color.from_hsv(0, 100, 100)
        assert Color.from_hsv(-120, 100, 100) == Color.from_hsv(240, 100, 100)
        assert Color.from_hsv(0, 150, 150) == Color(255, 0, 0)

    def test_from_hsv_rejects_non_finite(self):
        from tonekit.core import Color, ColorError

        with pytest.raises(ColorError):
            Color.from_hsv(float("inf"), 50, 50)

    def test_shift_value_keeps_hue(self):
        from tonekit.core import Color

        blue = Color.parse("#1976D2")
        darker = blue.shift_value(-20)
        assert darker.value == pytest.approx(blue.value - 20, abs=0.5)
        assert darker.hue == pytest.approx(blue.hue, abs=1.0)

    def test_shift_value_preserves_alpha(self):
        from tonekit.core import Color

        assert Color(200, 200, 200, 0.5).shift_value(-10).alpha_byte == 128

    def test_mix(self):
        from tonekit.core import Color

        assert Color.BLACK.mix(Color.WHITE, 0.5) == Color(128, 128, 128)
        assert Color.BLACK.mix(Color.WHITE, 1.0) == Color.WHITE
        assert Color(0, 0, 0, 0.5).mix(Color.WHITE, 1.0).alpha == 0.5

    def test_mix_linear_blends_in_linear_light(self):
        from tonekit.core import Color

        assert Color.BLACK.mix_linear(Color.WHITE, 0.5).hex == "#BCBCBCFF"
        assert Color.BLACK.mix_linear(Color.WHITE, 0.0) == Color.BLACK
        assert Color.BLACK.mix_linear(Color.WHITE, 1.0) == Color.WHITE
        assert Color(255, 0, 0, 0.5).mix_linear(Color.WHITE, 2.0) == Color(255, 255, 255, 0.5)


# =============================================================================
# Parsing
# =============================================================================


class TestColorParse:
    """Test hex, functional and named color literals."""

    def test_short_hex_expands(self):
        from tonekit.core import Color

        assert Color.parse("#ABC") == Color.parse("#AABBCC")
        assert Color.parse("#abc").hex == "#AABBCCFF"
        assert Color.parse("#ABC8").hex == "#AABBCC88"

    def test_long_hex_with_alpha(self):
        from tonekit.core import Color

        color = Color.parse("#AABBCC80")
        assert color.alpha_byte == 128
        assert not color.is_opaque

    def test_invalid_hex(self):
        from tonekit.core import Color, ColorError

        for text in ("#", "#12", "#12345", "#GGGGGG", "#123456789"):
            with pytest.raises(ColorError):
                Color.parse(text)

    def test_rgb_and_rgba(self):
        from tonekit.core import Color

        assert Color.parse("rgb(255, 0, 0)").hex == "#FF0000FF"
        assert Color.parse("RGBA(255,0,0,0.5)").hex == "#FF000080"
        assert Color.parse("rgb(100%, 0%, 0%)").hex == "#FF0000FF"
        assert Color.parse("rgba(0, 0, 0, 50%)").hex == "#00000080"

    def test_rgb_out_of_range(self):
        from tonekit.core import Color, ColorError

        for text in ("rgb(256, 0, 0)", "rgb(1.5, 0, 0)", "rgba(0, 0, 0, 2)", "rgb(0, 0)"):
            with pytest.raises(ColorError):
                Color.parse(text)

    def test_hsv_and_hsva(self):
        from tonekit.core import Color

        assert Color.parse("hsv(0, 100%, 100%)") == Color(255, 0, 0)
        assert Color.parse("hsv(120deg, 100, 50)") == Color.parse("green")
        assert Color.parse("hsva(0, 0, 100, 0.5)").hex == "#FFFFFF80"

    def test_hsv_out_of_range(self):
        from tonekit.core import Color, ColorError

        with pytest.raises(ColorError):
            Color.parse("hsv(0, 120, 50)")
        with pytest.raises(ColorError):
            Color.parse("hsv(10%, 50, 50)")

    def test_hsv_fractional_channels(self):
        from tonekit.core import Color

        assert Color.parse("hsv(200, 0.5, 0.8)") == Color.parse("hsv(200, 50%, 80%)")
        assert Color.parse("hsva(0, 1, 1, 1)") == Color(255, 0, 0)
        # a percent sign always means percent
        assert Color.parse("hsv(0, 0%, 1%)") == Color.from_hsv(0, 0, 1)

    def test_web_names(self):
        from tonekit.core import Color

        assert Color.parse("Purple").hex == "#800080FF"
        assert Color.parse("transparent") == Color.TRANSPARENT
        assert Color.parse(" White ") == Color.WHITE

    def test_grey_spellings_and_rebeccapurple(self):
        from tonekit.core import Color

        assert Color.parse("grey") == Color.parse("gray")
        assert Color.parse("Dark Slate Grey") == Color.parse("darkslategray")
        assert Color.parse("lightgrey").hex == "#D3D3D3FF"
        assert Color.parse("RebeccaPurple").hex == "#663399FF"

    def test_reparse_of_canonical_forms(self):
        from tonekit.core import Color

        literals = (
            "#ABC",
            "#ABC8",
            "#AABBCC",
            "#AABBCC80",
            "rgb(10, 20, 30)",
            "rgba(10, 20, 30, 0.5)",
            "rgba(100%, 0%, 50%, 25%)",
            "hsv(210, 60%, 40%)",
            "hsva(30deg, 80, 90, 0.3)",
            "Purple",
            "Deep Purple 200",
            "transparent",
        )
        for literal in literals:
            color = Color.parse(literal)
            assert Color.parse(color.hex) == color, literal
            assert Color.parse(color.hex).hex == color.hex, literal
            assert Color.parse(color.to_rgba()).hex == color.hex, literal

    def test_material_names(self):
        from tonekit.core import Color

        assert Color.parse("Deep Purple 200").hex == "#B39DDBFF"
        assert Color.parse("deep_purple-200") == Color.parse("Deep Purple 200")
        assert Color.parse("Red A700").hex == "#D50000FF"
        assert Color.parse("Grey 50").hex == "#FAFAFAFF"

    def test_unknown_literal(self):
        from tonekit.core import Color, ColorError

        with pytest.raises(ColorError):
            Color.parse("notacolor")
        with pytest.raises(ColorError):
            Color.parse("   ")
        with pytest.raises(ColorError):
            Color.parse(42)  # type: ignore[arg-type]

    def test_try_parse(self):
        from tonekit.core import Color

        assert Color.try_parse("notacolor") is None
        assert Color.try_parse("#000") == Color.BLACK

    def test_color_error_is_value_error(self):
        from tonekit.core import Color

        with pytest.raises(ValueError):
            Color.parse("notacolor")
