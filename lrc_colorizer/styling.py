"""
Styling sinks: turn (text, color) pairs into displayable strings
"""
import re
from typing import Callable

from wcwidth import wcswidth

from .colors import RGB

StyleSink = Callable[[str, RGB], str]

_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;]*[a-zA-Z]')


def ansi_fg(text: str, color: RGB) -> str:
    """Wrap text in a 24-bit foreground color escape"""
    if not text:
        return ''
    return f"\033[38;2;{color.r};{color.g};{color.b}m{text}\033[0m"


def plain(text: str, color: RGB) -> str:
    """Sink used when colors are disabled"""
    return text


def strip_ansi(value: str) -> str:
    """Remove ANSI escape sequences, leaving the visible text"""
    return _ANSI_ESCAPE.sub('', value)


def visible_width(value: str) -> int:
    """Terminal column width of a styled string"""
    text = strip_ansi(value)
    width = wcswidth(text)
    # wcswidth gives -1 when the text holds control characters
    return width if width >= 0 else len(text)
