"""
Display utilities for the lrc-colorizer preview
Handles painting styled lyric lines to the terminal
"""
import sys
import os
from typing import Tuple

from .styling import visible_width

CLEAR = '\033[2J\033[H'
HIDE_CURSOR = '\033[?25l'
SHOW_CURSOR = '\033[?25h'

# Used when stdout is not a terminal (pipes, tests)
FALLBACK_SIZE = (80, 24)


def _emit(*parts: str):
    sys.stdout.write(''.join(parts))
    sys.stdout.flush()


def get_terminal_size() -> Tuple[int, int]:
    """Terminal (columns, rows), or 80x24 when there is no terminal"""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        return FALLBACK_SIZE
    return size.columns, size.lines


def clear_screen():
    _emit(CLEAR)


def hide_cursor():
    _emit(HIDE_CURSOR)


def show_cursor():
    _emit(SHOW_CURSOR)


def move_to(row: int, column: int = 1) -> str:
    """Cursor positioning sequence, 1-based"""
    return f'\033[{row};{column}H'


def center_line(text: str, columns: int) -> str:
    """
    Center a styled line by its visible width.

    Args:
        text: Line, possibly containing color escapes
        columns: Terminal width

    Returns:
        Line padded with spaces on both sides to fill the width
    """
    width = visible_width(text)
    pad_left = max(0, (columns - width) // 2)
    pad_right = max(0, columns - pad_left - width)
    return ' ' * pad_left + text + ' ' * pad_right


def display_frame(text: str):
    """
    Paint one styled lyric line on the middle row of the terminal,
    overwriting whatever the previous frame left there.

    Args:
        text: Styled line to display
    """
    cols, rows = get_terminal_size()
    _emit(move_to(rows // 2 + 1), center_line(text, cols))
