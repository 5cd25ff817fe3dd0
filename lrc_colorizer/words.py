"""
Word timing model
Per-word playback state consumed by the word-level render modes
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

# Assumed duration of the final LRC line, which has no successor to end it
LAST_LINE_DURATION_MS = 5000

# LRC lines start partly lit so the current line stands out immediately
LINE_PROGRESS_FLOOR = 0.4


class WordState(Enum):
    NOT_PLAYED = 'not_played'
    PLAYING = 'playing'
    PLAYED = 'played'


@dataclass(frozen=True)
class Word:
    """A word as the renderer sees it on one tick"""
    text: str
    state: WordState = WordState.NOT_PLAYED
    interpolation: float = 0.0   # progress through this word, only meaningful while PLAYING


@dataclass(frozen=True)
class TimedWord:
    """A word with its start/end time inside the song, in milliseconds"""
    text: str
    start_ms: int
    end_ms: int


@dataclass(frozen=True)
class WordFrame:
    """Snapshot of a timed line at one playback position"""
    words: List[Word]
    current_index: int = -1
    played_count: int = 0
    progress: float = 0.0


def is_well_ordered(words: Sequence[Word]) -> bool:
    """
    Check that played words precede at most one playing word,
    which precedes the not-played words.
    """
    rank = {WordState.PLAYED: 0, WordState.PLAYING: 1, WordState.NOT_PLAYED: 2}
    ranks = [rank[w.state] for w in words]
    if ranks != sorted(ranks):
        return False
    return ranks.count(1) <= 1


def find_playing(words: Sequence[Word]) -> int:
    """Index of the first PLAYING word, or -1"""
    for i, w in enumerate(words):
        if w.state == WordState.PLAYING:
            return i
    return -1


def frame_compensation_ms(refresh_rate: float) -> int:
    """
    Half a refresh interval, in milliseconds.

    Added to the playback clock so colors land on the middle of the
    frame they are shown in rather than its start.
    """
    return int(refresh_rate * 1000 / 2)


def word_frame(timed_words: Sequence[TimedWord], time_ms: int, compensation_ms: int = 0) -> WordFrame:
    """
    Derive per-word state and interpolation at a playback position.

    Args:
        timed_words: Words of one line with their timings
        time_ms: Playback position in milliseconds
        compensation_ms: Offset added to time_ms, see frame_compensation_ms

    Returns:
        WordFrame with the words, the playing word index (-1 if none),
        how many words have started and that count as a fraction
    """
    adjusted = time_ms + compensation_ms
    words = []
    current_index = -1
    played_count = 0

    for i, tw in enumerate(timed_words):
        if adjusted < tw.start_ms:
            words.append(Word(tw.text, WordState.NOT_PLAYED, 0.0))
        elif adjusted >= tw.end_ms:
            played_count += 1
            words.append(Word(tw.text, WordState.PLAYED, 1.0))
        else:
            played_count += 1
            current_index = i
            duration = tw.end_ms - tw.start_ms
            interpolation = (adjusted - tw.start_ms) / duration if duration > 0 else 0.0
            words.append(Word(tw.text, WordState.PLAYING, interpolation))

    progress = played_count / len(words) if words else 0.0
    return WordFrame(words, current_index, played_count, progress)


def line_progress(time_ms: int, start_ms: int, end_ms: Optional[int] = None) -> float:
    """
    Progress through a whole LRC line.

    Args:
        time_ms: Playback position in milliseconds
        start_ms: Line start
        end_ms: Start of the next line, or None for the last line

    Returns:
        0.4 before the line starts, rising linearly to 1.0 at its end
    """
    if end_ms is None:
        end_ms = start_ms + LAST_LINE_DURATION_MS

    if time_ms <= start_ms:
        return LINE_PROGRESS_FLOOR
    if time_ms >= end_ms:
        return 1.0

    elapsed = time_ms - start_ms
    duration = end_ms - start_ms
    return LINE_PROGRESS_FLOOR + min(elapsed / duration, 1.0 - LINE_PROGRESS_FLOOR)
