"""
Word-level render modes
Each mode colors every word of a timed line and joins the styled words
"""
import math
from typing import List, Sequence

from .colors import DEFAULT_PALETTE, RGB, Palette, blend, clamp
from .styling import StyleSink, ansi_fg
from .words import Word, WordState, find_playing

# Width of the smooth-mode gradient behind the current position, in words
FADE_WIDTH = 2.0

# How far the word after the current one lights up before it plays
PREHEAT_MAX = 0.4


def _join(words: Sequence[Word], colors: Sequence[RGB], style: StyleSink) -> str:
    return ''.join(style(w.text, color) for w, color in zip(words, colors))


def precise_position(words: Sequence[Word], progress: float) -> float:
    """
    Continuous position of playback within the line, in words.

    Uses the playing word and its interpolation when there is one,
    otherwise falls back to the line progress.
    """
    idx = find_playing(words)
    if idx >= 0:
        return idx + clamp(words[idx].interpolation, 0.0, 1.0)
    return len(words) * progress


def _apply_overrides(word: Word, activation: float) -> float:
    # The playing word never looks dimmer than its own progress
    if word.state == WordState.PLAYING:
        interpolation = clamp(word.interpolation, 0.0, 1.0)
        if interpolation > activation:
            activation = interpolation
    if word.state == WordState.PLAYED:
        activation = 1.0
    return activation


def smooth_activations(words: Sequence[Word], progress: float) -> List[float]:
    """
    Activation level per word for smooth mode.

    Words more than FADE_WIDTH behind the current position are fully lit,
    words ahead of it are dark, and the fade zone between is linear.
    """
    pos = precise_position(words, progress)
    activations = []

    for i, w in enumerate(words):
        if i < pos - FADE_WIDTH:
            activation = 1.0
        elif i > pos:
            activation = 0.0
        else:
            activation = clamp((pos - i) / FADE_WIDTH, 0.0, 1.0)
        activations.append(_apply_overrides(w, activation))

    return activations


def wave_activations(words: Sequence[Word], progress: float) -> List[float]:
    """Activation level per word for wave mode, a one-word window either side"""
    pos = precise_position(words, progress)
    activations = []

    for i, w in enumerate(words):
        if i < pos - 1:
            activation = 1.0
        elif i > pos + 1:
            activation = 0.0
        else:
            activation = clamp((pos - i + 1) / 2.0, 0.0, 1.0)
        activations.append(_apply_overrides(w, activation))

    return activations


def simple_colors(words: Sequence[Word], palette: Palette = DEFAULT_PALETTE) -> List[RGB]:
    colors = []
    for w in words:
        if w.state == WordState.PLAYED:
            colors.append(palette.active)
        elif w.state == WordState.PLAYING:
            interpolation = clamp(w.interpolation, 0.0, 1.0)
            colors.append(blend(palette.inactive, palette.active, interpolation))
        else:
            colors.append(palette.inactive)
    return colors


def smooth_colors(words: Sequence[Word], progress: float, palette: Palette = DEFAULT_PALETTE) -> List[RGB]:
    return [
        blend(palette.inactive, palette.active, activation)
        for activation in smooth_activations(words, progress)
    ]


def wave_colors(words: Sequence[Word], progress: float, animation_time: float,
                palette: Palette = DEFAULT_PALETTE) -> List[RGB]:
    colors = []
    for i, activation in enumerate(wave_activations(words, progress)):
        if activation >= 1.0:
            # Sung words shimmer, phase shifted per word so the wave travels
            wave = (math.sin(animation_time * 3.0 - i * 0.5) + 1) / 2
            colors.append(blend(palette.transition, palette.active, wave))
        elif activation > 0:
            colors.append(blend(palette.inactive, palette.active, activation))
        else:
            colors.append(palette.inactive)
    return colors


def glow_colors(words: Sequence[Word], current_word_index: int, animation_time: float,
                palette: Palette = DEFAULT_PALETTE) -> List[RGB]:
    """
    Colors for glow mode.

    The current word glows, the word before it fades its glow out as the
    current word progresses, and the word after it pre-heats towards the
    transition color. With no current word (-1) the line stays inactive.
    """
    current_interpolation = 0.0
    if 0 <= current_word_index < len(words):
        current_interpolation = clamp(words[current_word_index].interpolation, 0.0, 1.0)

    pulse = (math.sin(animation_time * 2.0) + 1) / 2
    colors = []

    for i, w in enumerate(words):
        if i < current_word_index - 1:
            colors.append(palette.active)
        elif i == current_word_index - 1:
            glow_strength = (1 - current_interpolation) * (0.3 + pulse * 0.15)
            colors.append(blend(palette.active, palette.white, glow_strength))
        elif i == current_word_index:
            interpolation = clamp(w.interpolation, 0.0, 1.0)
            preheat_end = blend(palette.inactive, palette.transition, PREHEAT_MAX)
            base = blend(preheat_end, palette.active, interpolation)
            glow_strength = clamp(0.15 + interpolation * 0.5 + pulse * 0.15, 0.0, 0.8)
            colors.append(blend(base, palette.white, glow_strength))
        elif i == current_word_index + 1:
            strength = current_interpolation * PREHEAT_MAX
            colors.append(blend(palette.inactive, palette.transition, strength))
        else:
            colors.append(palette.inactive)

    return colors


def render_simple(words: Sequence[Word], palette: Palette = DEFAULT_PALETTE,
                  style: StyleSink = ansi_fg) -> str:
    """
    Render with simple mode: each word colored from its own state only.

    Args:
        words: Words of the current line
        palette: Colors to draw from
        style: Sink turning (text, color) into a styled string

    Returns:
        Styled line
    """
    return _join(words, simple_colors(words, palette), style)


def render_smooth(words: Sequence[Word], progress: float, palette: Palette = DEFAULT_PALETTE,
                  style: StyleSink = ansi_fg) -> str:
    """
    Render with smooth mode: one gradient across the line that trails
    the current position.

    Args:
        words: Words of the current line
        progress: Line progress, used only when no word is playing
        palette: Colors to draw from
        style: Sink turning (text, color) into a styled string

    Returns:
        Styled line
    """
    if not words:
        return ''
    return _join(words, smooth_colors(words, progress, palette), style)


def render_wave(words: Sequence[Word], progress: float, animation_time: float,
                palette: Palette = DEFAULT_PALETTE, style: StyleSink = ansi_fg) -> str:
    """
    Render with wave mode: a narrow gradient, and sung words shimmer.

    Args:
        words: Words of the current line
        progress: Line progress, used only when no word is playing
        animation_time: Seconds, phase of the shimmer
        palette: Colors to draw from
        style: Sink turning (text, color) into a styled string

    Returns:
        Styled line
    """
    if not words:
        return ''
    return _join(words, wave_colors(words, progress, animation_time, palette), style)


def render_glow(words: Sequence[Word], current_word_index: int, animation_time: float,
                palette: Palette = DEFAULT_PALETTE, style: StyleSink = ansi_fg) -> str:
    """
    Render with glow mode: a highlight that travels word by word.

    Args:
        words: Words of the current line
        current_word_index: Index of the playing word, -1 if none
        animation_time: Seconds, phase of the glow pulse
        palette: Colors to draw from
        style: Sink turning (text, color) into a styled string

    Returns:
        Styled line
    """
    return _join(words, glow_colors(words, current_word_index, animation_time, palette), style)
