"""Tests for the color model."""

import dataclasses

import pytest

from lrc_colorizer.colors import (
    DEFAULT_PALETTE,
    FALLBACK_GRAY,
    RGB,
    Palette,
    blend,
    clamp,
    parse_hex,
    to_hex,
)


class TestBlend:
    """Tests for blend."""

    @pytest.mark.parametrize("c1, c2", [
        (RGB(0, 0, 0), RGB(255, 255, 255)),
        (RGB(0x6B, 0x6B, 0x6B), RGB(0x7E, 0xC8, 0xE3)),
        (RGB(255, 10, 3), RGB(1, 200, 77)),
    ])
    def test_endpoints_are_exact(self, c1, c2):
        """t=0 gives the first color and t=1 the second."""
        assert blend(c1, c2, 0.0) == c1
        assert blend(c1, c2, 1.0) == c2

    def test_midpoint_truncates(self):
        """Channels are truncated, not rounded."""
        assert blend(RGB(0, 0, 0), RGB(255, 3, 1), 0.5) == RGB(127, 1, 0)

    def test_quarter(self):
        """A quarter of the way moves a quarter of the distance."""
        assert blend(RGB(0, 100, 200), RGB(100, 200, 0), 0.25) == RGB(25, 125, 150)


class TestHex:
    """Tests for hex parsing and formatting."""

    def test_parse_with_hash(self):
        """A #RRGGBB string parses to its channels."""
        assert parse_hex("#7EC8E3") == RGB(0x7E, 0xC8, 0xE3)

    def test_parse_without_hash_lowercase(self):
        """The hash is optional and digits are case-insensitive."""
        assert parse_hex("c9b1d4") == RGB(0xC9, 0xB1, 0xD4)

    @pytest.mark.parametrize("value", [
        "#FFF", "#12345G", "", "#1234567", None, 42, "-1FFFF", "+1+2+3", "#12 345", "0x1234",
    ])
    def test_malformed_falls_back_to_gray(self, value):
        """Malformed colors become mid-gray instead of raising."""
        assert parse_hex(value) == FALLBACK_GRAY == RGB(128, 128, 128)

    def test_to_hex(self):
        """Colors format as upper-case #RRGGBB."""
        assert to_hex(RGB(126, 200, 227)) == "#7EC8E3"
        assert to_hex(RGB(0, 1, 255)) == "#0001FF"

    def test_to_hex_parse_hex_agree(self):
        """Formatting and parsing agree on the default palette."""
        for color in (DEFAULT_PALETTE.active, DEFAULT_PALETTE.inactive):
            assert parse_hex(to_hex(color)) == color


class TestPalette:
    """Tests for Palette."""

    def test_default_palette(self):
        """The default palette holds the documented colors."""
        assert DEFAULT_PALETTE.to_hex() == {
            'active': "#7EC8E3",
            'transition': "#C9B1D4",
            'inactive': "#6B6B6B",
            'white': "#E8E8E8",
        }

    def test_palette_is_immutable(self):
        """Palettes cannot be changed after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_PALETTE.active = RGB(0, 0, 0)

    def test_from_hex_with_bad_value(self):
        """One bad color only affects that slot."""
        palette = Palette.from_hex("#000000", "nope", "#FFFFFF", "#010203")
        assert palette.transition == FALLBACK_GRAY
        assert palette.inactive == RGB(255, 255, 255)


class TestClamp:
    """Tests for clamp."""

    def test_clamp(self):
        assert clamp(-0.5, 0.0, 1.0) == 0.0
        assert clamp(1.5, 0.0, 1.0) == 1.0
        assert clamp(0.3, 0.0, 1.0) == 0.3
