"""
lrc-colorizer - animated color rendering for synchronized lyrics
"""
from . import colors, config, display, easing, preview, render_lines, render_words
from . import renderer, styling, words

__version__ = "0.1.0"
