"""
Line-level render modes
For lyrics with line timing only: the whole line takes a single color
"""
import math

from .colors import DEFAULT_PALETTE, RGB, Palette, blend, clamp
from .easing import ease_in_out_cubic
from .styling import StyleSink, ansi_fg


def line_smooth_color(progress: float, palette: Palette = DEFAULT_PALETTE) -> RGB:
    eased = ease_in_out_cubic(clamp(progress, 0.0, 1.0))
    return blend(palette.inactive, palette.active, eased)


def line_wave_blend_factor(animation_time: float) -> float:
    """Share of the progress color in wave mode, oscillating within [0.4, 0.6]"""
    return 0.5 + math.sin(animation_time * 2.0) * 0.1


def line_wave_color(progress: float, animation_time: float, palette: Palette = DEFAULT_PALETTE) -> RGB:
    base = blend(palette.inactive, palette.active, clamp(progress, 0.0, 1.0))
    return blend(palette.transition, base, line_wave_blend_factor(animation_time))


def line_glow_color(progress: float, animation_time: float, palette: Palette = DEFAULT_PALETTE) -> RGB:
    progress = clamp(progress, 0.0, 1.0)
    base = blend(palette.inactive, palette.active, progress)
    pulse = (math.sin(animation_time * 2.0) + 1) / 2
    glow_strength = clamp(0.1 + progress * 0.2 + pulse * 0.1, 0.0, 0.4)
    return blend(base, palette.white, glow_strength)


def render_line_smooth(line: str, progress: float, palette: Palette = DEFAULT_PALETTE,
                       style: StyleSink = ansi_fg) -> str:
    """
    Color the line along an eased inactive-to-active ramp.

    Args:
        line: Lyric text
        progress: Progress through the line, 0.0 - 1.0
        palette: Colors to draw from
        style: Sink turning (text, color) into a styled string

    Returns:
        Styled line
    """
    return style(line, line_smooth_color(progress, palette))


def render_line_wave(line: str, progress: float, animation_time: float,
                     palette: Palette = DEFAULT_PALETTE, style: StyleSink = ansi_fg) -> str:
    """Color the line by progress, swaying towards the transition color"""
    return style(line, line_wave_color(progress, animation_time, palette))


def render_line_glow(line: str, progress: float, animation_time: float,
                     palette: Palette = DEFAULT_PALETTE, style: StyleSink = ansi_fg) -> str:
    """Color the line by progress with a pulsing white glow"""
    return style(line, line_glow_color(progress, animation_time, palette))
