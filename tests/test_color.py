"""Unit tests for Color and the color math helpers."""

import math

import pytest
from pydantic import ValidationError

from gaudy_leds.models import Color, gradient, hsv, mix


def channels_close(a: Color, b: Color, tol: float = 1e-9) -> bool:
    return all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a.to_rgb_tuple(), b.to_rgb_tuple()))


@pytest.mark.unit
class TestColor:
    """Test Color construction and conversions."""

    def test_channels_clamped(self):
        """Out-of-range channels are clamped into [0, 1]."""
        color = Color(r=1.5, g=-0.25, b=0.5)
        assert color.to_rgb_tuple() == (1.0, 0.0, 0.5)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(ValidationError):
            Color(r=bad, g=0, b=0)

    def test_frozen_and_hashable(self):
        color = Color(r=0.1, g=0.2, b=0.3)
        with pytest.raises(ValidationError):
            color.r = 0.5
        assert {color, Color(r=0.1, g=0.2, b=0.3)} == {color}

    def test_off(self):
        assert Color.off().to_rgb_tuple() == (0.0, 0.0, 0.0)

    def test_from_rgb255(self):
        color = Color.from_rgb255(255, 0, 51)
        assert color.r == 1.0
        assert color.g == 0.0
        assert color.b == pytest.approx(0.2)

    def test_from_hex_six_digits(self):
        assert Color.from_hex("#ff8000") == Color.from_rgb255(255, 128, 0)
        assert Color.from_hex("FF8000") == Color.from_rgb255(255, 128, 0)

    def test_from_hex_three_digits(self):
        assert Color.from_hex("#f80") == Color.from_rgb255(255, 136, 0)

    @pytest.mark.parametrize("value", ["#ff80", "#gg0000", "", "#", "ff00000"])
    def test_from_hex_invalid(self, value):
        with pytest.raises(ValueError):
            Color.from_hex(value)

    def test_from_functional_rgb(self):
        assert Color.from_functional("rgb(255, 128, 0)") == Color.from_rgb255(255, 128, 0)
        assert Color.from_functional("RGB( 0,0,255 )") == Color.from_rgb255(0, 0, 255)

    def test_from_functional_hsv(self):
        assert channels_close(Color.from_functional("hsv(120, 1, 1)"), Color(r=0, g=1, b=0))

    @pytest.mark.parametrize("value", ["rgb(256, 0, 0)", "hsv(0, 2, 1)", "rgb(1, 2)", "cmyk(0, 0, 0, 0)"])
    def test_from_functional_invalid(self, value):
        with pytest.raises(ValueError):
            Color.from_functional(value)

    def test_to_device_units(self):
        assert Color(r=1.0, g=0.5, b=0.0).to_device_units(64) == (64, 32, 0)

    def test_to_device_units_floors(self):
        # 0.999 * 64 = 63.936
        assert Color(r=0.999, g=0.999, b=0.999).to_device_units(64) == (63, 63, 63)

    def test_to_hex(self):
        assert Color.from_rgb255(255, 128, 0).to_hex() == "#FF8000"


@pytest.mark.unit
class TestHsv:
    """Test the HSV conversion."""

    def test_primaries(self):
        assert channels_close(hsv(0, 1, 1), Color(r=1, g=0, b=0))
        assert channels_close(hsv(120, 1, 1), Color(r=0, g=1, b=0))
        assert channels_close(hsv(240, 1, 1), Color(r=0, g=0, b=1))

    @pytest.mark.parametrize("hue", [0, 30, 200, 359.5])
    def test_hue_wraps(self, hue):
        """hsv(h) equals hsv(h + 360k) for any integer k."""
        for k in (-2, -1, 1, 3):
            assert channels_close(hsv(hue, 1, 1), hsv(hue + 360 * k, 1, 1))

    def test_zero_value_is_black(self):
        assert hsv(123, 1, 0) == Color.off()

    def test_zero_saturation_is_grey(self):
        color = hsv(200, 0, 0.5)
        assert color.r == color.g == color.b == pytest.approx(0.5)


@pytest.mark.unit
class TestMix:
    """Test linear interpolation between colors."""

    @pytest.mark.parametrize("a, b", [
        (Color(r=1, g=0, b=0), Color(r=0, g=0, b=1)),
        (Color(r=0.2, g=0.4, b=0.6), Color(r=0.9, g=0.1, b=0.3)),
    ])
    def test_endpoints(self, a, b):
        assert channels_close(mix(a, b, 0), a)
        assert channels_close(mix(a, b, 1), b)

    def test_midpoint(self):
        result = mix(Color.off(), Color(r=1, g=1, b=1), 0.5)
        assert result.to_rgb_tuple() == pytest.approx((0.5, 0.5, 0.5))

    @pytest.mark.parametrize("ratio", [-5, 0, 0.37, 1, 1e6, float("inf"), float("-inf")])
    def test_same_color_is_unchanged(self, ratio):
        """mix(c, c, r) == c exactly, whatever the ratio."""
        color = Color(r=0.2, g=0.4, b=0.6)
        assert mix(color, color, ratio) == color
        assert mix(Color(r=0.2, g=0.4, b=0.6), color, ratio) == color

    def test_extrapolation_saturates(self):
        """Ratios outside [0, 1] extrapolate and the result is clamped."""
        a = Color(r=0.2, g=0.5, b=0.8)
        b = Color(r=0.8, g=0.5, b=0.2)
        assert mix(a, b, 2).to_rgb_tuple() == pytest.approx((1.0, 0.5, 0.0))
        assert mix(a, b, -1).to_rgb_tuple() == pytest.approx((0.0, 0.5, 1.0))


@pytest.mark.unit
class TestGradient:
    """Test gradient generation."""

    def test_empty(self):
        assert gradient(Color.off(), Color(r=1, g=1, b=1), 0) == []

    def test_single(self):
        start = Color(r=0.3, g=0.2, b=0.1)
        assert gradient(start, Color(r=1, g=1, b=1), 1) == [start]

    @pytest.mark.parametrize("n", range(2, 12))
    def test_endpoints_exact(self, n):
        start = Color(r=0.1, g=0.7, b=0.3)
        end = Color(r=0.9, g=0.2, b=0.6)
        colors = gradient(start, end, n)
        assert len(colors) == n
        assert colors[0] == start
        assert colors[-1] == end

    def test_evenly_spaced(self):
        colors = gradient(Color.off(), Color(r=1, g=0, b=0), 5)
        assert [c.r for c in colors] == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
