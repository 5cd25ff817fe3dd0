"""
Color model for lrc-colorizer
RGB triples, linear blending and the lyric palette
"""
import logging
import re
from dataclasses import dataclass
from typing import Any, NamedTuple

logger = logging.getLogger(__name__)


class RGB(NamedTuple):
    """An 8-bit per channel color"""
    r: int
    g: int
    b: int


# Used whenever a configured color cannot be parsed
FALLBACK_GRAY = RGB(128, 128, 128)

_HEX_DIGITS = re.compile(r'[0-9a-fA-F]{6}')


def clamp(value: float, low: float, high: float) -> float:
    """Restrict value to the closed range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def blend(c1: RGB, c2: RGB, t: float) -> RGB:
    """
    Mix two colors channel by channel.

    The ratio is not clamped here; callers keep t within [0, 1].
    Channels are truncated, not rounded.

    Args:
        c1: Color at t = 0
        c2: Color at t = 1
        t: Blend ratio

    Returns:
        Blended color
    """
    return RGB(
        int(c1.r * (1 - t) + c2.r * t),
        int(c1.g * (1 - t) + c2.g * t),
        int(c1.b * (1 - t) + c2.b * t),
    )


def to_hex(color: RGB) -> str:
    """Format a color as #RRGGBB"""
    return f"#{color.r:02X}{color.g:02X}{color.b:02X}"


def parse_hex(value: Any) -> RGB:
    """
    Parse a #RRGGBB (or RRGGBB) color string.

    Args:
        value: Color string from configuration

    Returns:
        Parsed color, or mid-gray if the value is malformed
    """
    if not isinstance(value, str):
        logger.warning("Color %r is not a string, using gray", value)
        return FALLBACK_GRAY

    digits = value.strip()
    if digits.startswith('#'):
        digits = digits[1:]

    # int() alone would accept signs and inner spaces
    if not _HEX_DIGITS.fullmatch(digits):
        logger.warning("Color %r is not six hex digits, using gray", value)
        return FALLBACK_GRAY

    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


@dataclass(frozen=True)
class Palette:
    """The four colors every render mode draws from"""
    active: RGB
    transition: RGB
    inactive: RGB
    white: RGB

    @classmethod
    def from_hex(cls, active: str, transition: str, inactive: str, white: str) -> 'Palette':
        return cls(
            active=parse_hex(active),
            transition=parse_hex(transition),
            inactive=parse_hex(inactive),
            white=parse_hex(white),
        )

    def to_hex(self) -> dict:
        return {
            'active': to_hex(self.active),
            'transition': to_hex(self.transition),
            'inactive': to_hex(self.inactive),
            'white': to_hex(self.white),
        }


DEFAULT_ACTIVE = "#7EC8E3"       # soft cyan, sung
DEFAULT_TRANSITION = "#C9B1D4"   # soft lavender, accents
DEFAULT_INACTIVE = "#6B6B6B"     # soft gray, not yet sung
DEFAULT_WHITE = "#E8E8E8"        # glow highlight

DEFAULT_PALETTE = Palette.from_hex(
    DEFAULT_ACTIVE, DEFAULT_TRANSITION, DEFAULT_INACTIVE, DEFAULT_WHITE
)
