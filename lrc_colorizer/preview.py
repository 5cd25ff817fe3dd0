"""
LRC Colorizer preview - Main display loop
Animates a sample line against a simulated playback clock
"""
import logging
import time
from typing import List

from .renderer import LyricRenderer
from .words import TimedWord

logger = logging.getLogger(__name__)


def build_timed_words(text: str, word_duration: float, start: float = 0.0) -> List[TimedWord]:
    """
    Split text into words with evenly spaced timings.

    Whitespace stays attached to the end of each word so the rendered
    line keeps its spacing.

    Args:
        text: Lyric line
        word_duration: Seconds per word
        start: Start of the first word in seconds

    Returns:
        List of TimedWord
    """
    parts = text.split()
    timed = []
    step_ms = int(word_duration * 1000)
    start_ms = int(start * 1000)

    for i, part in enumerate(parts):
        word = part if i == len(parts) - 1 else part + ' '
        word_start = start_ms + i * step_ms
        timed.append(TimedWord(word, word_start, word_start + step_ms))

    return timed


def run_preview(
    renderer: LyricRenderer,
    text: str,
    word_duration: float = 0.4,
    line_mode: bool = False,
    loops: int = 1,
    refresh_rate: float = 0.05
):
    """Run the preview loop until the line has played `loops` times."""
    from .display import display_frame, hide_cursor, show_cursor, clear_screen

    timed_words = build_timed_words(text, word_duration)
    if not timed_words:
        return

    # A short lead-in and tail so the line is seen dark and fully lit
    lead_ms = 500
    line_ms = timed_words[-1].end_ms
    cycle_ms = lead_ms + line_ms + 1000

    hide_cursor()
    clear_screen()
    logger.debug("Previewing %d words in %s mode", len(timed_words), renderer.mode.value)

    try:
        start_time = time.monotonic()

        while True:
            elapsed_ms = int((time.monotonic() - start_time) * 1000)
            if elapsed_ms >= cycle_ms * loops:
                break

            time_ms = elapsed_ms % cycle_ms - lead_ms

            if line_mode:
                frame = renderer.render_lrc_line(text, time_ms, 0, line_ms)
            else:
                frame = renderer.render_timed_line(timed_words, time_ms)

            display_frame(frame)
            time.sleep(refresh_rate)

    except KeyboardInterrupt:
        pass
    finally:
        show_cursor()
        clear_screen()
