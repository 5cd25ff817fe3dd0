"""Shared fixtures for lrc-colorizer tests."""

import pytest

from lrc_colorizer.words import Word, WordState


class RecordingSink:
    """Style sink that records each (text, color) pair it is given."""

    def __init__(self):
        self.calls = []

    def __call__(self, text, color):
        self.calls.append((text, color))
        return text

    @property
    def colors(self):
        return [color for _, color in self.calls]

    @property
    def texts(self):
        return [text for text, _ in self.calls]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def line_words():
    """Five words, the third one halfway through."""
    return [
        Word("I ", WordState.PLAYED, 1.0),
        Word("will ", WordState.PLAYED, 1.0),
        Word("always ", WordState.PLAYING, 0.5),
        Word("love ", WordState.NOT_PLAYED, 0.0),
        Word("you", WordState.NOT_PLAYED, 0.0),
    ]
