"""
Lyric renderer
Holds the palette, render mode and styling sink, and turns a line of
lyrics plus the playback clock into one styled string per tick
"""
import logging
from enum import Enum
from typing import Optional, Sequence, Union

from .colors import DEFAULT_PALETTE, Palette
from .render_lines import render_line_glow, render_line_smooth, render_line_wave
from .render_words import render_glow, render_simple, render_smooth, render_wave
from .styling import StyleSink, ansi_fg, plain
from .words import TimedWord, Word, frame_compensation_ms, line_progress, word_frame

logger = logging.getLogger(__name__)


class RenderMode(Enum):
    SIMPLE = 'simple'
    SMOOTH = 'smooth'
    WAVE = 'wave'
    GLOW = 'glow'

    @classmethod
    def parse(cls, value: Optional[str]) -> 'RenderMode':
        """Mode from a config string; empty or unknown values give SMOOTH"""
        if value is None or value == '':
            return cls.SMOOTH
        if not isinstance(value, str):
            logger.warning("Render mode %r is not a string, using smooth", value)
            return cls.SMOOTH
        try:
            return cls(value.strip().lower())
        except ValueError:
            logger.warning("Unknown render mode %r, using smooth", value)
            return cls.SMOOTH


class LyricRenderer:
    """Renders the highlighted lyric line in the configured mode"""

    def __init__(self, palette: Palette = DEFAULT_PALETTE, mode: RenderMode = RenderMode.SMOOTH,
                 style: StyleSink = ansi_fg, show_translation: bool = True, compensation_ms: int = 0):
        self.palette = palette
        self.mode = mode
        self.style = style
        self.show_translation = show_translation
        self.compensation_ms = compensation_ms

    @classmethod
    def from_config(cls, config) -> 'LyricRenderer':
        return cls(
            palette=config.colors.palette(),
            mode=RenderMode.parse(config.lyric.render_mode),
            style=ansi_fg if config.lyric.colors_enabled else plain,
            show_translation=config.lyric.show_translation,
            compensation_ms=frame_compensation_ms(config.lyric.refresh_rate),
        )

    def render_words(self, words: Sequence[Word], progress: float = 0.0,
                     animation_time: float = 0.0, current_word_index: int = -1) -> str:
        """
        Render a word-timed line in the current mode.

        Args:
            words: Words with their state for this tick
            progress: Line progress, fallback when no word is playing
            animation_time: Seconds, phase of wave and glow effects
            current_word_index: Playing word for glow mode, -1 if none

        Returns:
            Styled line
        """
        if self.mode == RenderMode.SIMPLE:
            return render_simple(words, self.palette, self.style)
        if self.mode == RenderMode.WAVE:
            return render_wave(words, progress, animation_time, self.palette, self.style)
        if self.mode == RenderMode.GLOW:
            return render_glow(words, current_word_index, animation_time, self.palette, self.style)
        return render_smooth(words, progress, self.palette, self.style)

    def render_line(self, line: str, progress: float, animation_time: float = 0.0) -> str:
        """
        Render a line-timed lyric in the current mode.

        Simple mode has no line-level variant and renders like smooth.
        """
        if self.mode == RenderMode.WAVE:
            return render_line_wave(line, progress, animation_time, self.palette, self.style)
        if self.mode == RenderMode.GLOW:
            return render_line_glow(line, progress, animation_time, self.palette, self.style)
        return render_line_smooth(line, progress, self.palette, self.style)

    def render_timed_line(self, timed_words: Sequence[TimedWord], time_ms: int,
                          translation: Optional[str] = None) -> str:
        """
        Render the current word-timed line at a playback position.

        Args:
            timed_words: Words of the line with start/end times
            time_ms: Playback position in milliseconds
            translation: Translated lyric to append, if any

        Returns:
            Styled line
        """
        frame = word_frame(timed_words, time_ms, self.compensation_ms)
        animation_time = time_ms * 0.001

        current_index = frame.current_index
        if self.mode == RenderMode.GLOW and current_index < 0:
            # Between words, keep the glow on the last word that started
            current_index = frame.played_count - 1

        result = self.render_words(frame.words, frame.progress, animation_time, current_index)
        return result + self._translation_suffix(translation)

    def render_lrc_line(self, text: str, time_ms: int, start_ms: int, end_ms: Optional[int] = None,
                        translation: Optional[str] = None) -> str:
        """
        Render the current line-timed lyric at a playback position.

        Args:
            text: Lyric text
            time_ms: Playback position in milliseconds
            start_ms: Line start
            end_ms: Start of the next line, None for the last line
            translation: Translated lyric, animated together with the text

        Returns:
            Styled line
        """
        if self.show_translation and translation:
            text = f"{text} [{translation}]"
        progress = line_progress(time_ms, start_ms, end_ms)
        return self.render_line(text, progress, time_ms * 0.001)

    def render_inactive(self, line: Union[str, Sequence[Word], Sequence[TimedWord]],
                        translation: Optional[str] = None) -> str:
        """Render a line that is not the current one, entirely inactive"""
        if isinstance(line, str):
            result = self.style(line, self.palette.inactive)
        else:
            result = ''.join(self.style(w.text, self.palette.inactive) for w in line)
        return result + self._translation_suffix(translation)

    def _translation_suffix(self, translation: Optional[str]) -> str:
        if not (self.show_translation and translation):
            return ''
        return ' ' + self.style(f"[{translation}]", self.palette.inactive)
