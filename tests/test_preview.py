"""Tests for the preview loop helpers and CLI."""

from pathlib import Path

from lrc_colorizer import preview, preview_cli
from lrc_colorizer.preview import build_timed_words
from lrc_colorizer.renderer import RenderMode
from lrc_colorizer.words import TimedWord


class TestBuildTimedWords:
    """Tests for build_timed_words."""

    def test_even_spacing(self):
        assert build_timed_words("take on me", 0.5) == [
            TimedWord("take ", 0, 500),
            TimedWord("on ", 500, 1000),
            TimedWord("me", 1000, 1500),
        ]

    def test_start_offset(self):
        timed = build_timed_words("hey", 0.25, start=2.0)
        assert timed == [TimedWord("hey", 2000, 2250)]

    def test_collapses_whitespace(self):
        assert [t.text for t in build_timed_words("  a   b ", 0.1)] == ["a ", "b"]

    def test_empty(self):
        assert build_timed_words("   ", 0.4) == []


class TestPreviewCli:
    """Tests for the preview CLI argument handling."""

    def test_runs_preview_with_overrides(self, monkeypatch):
        calls = []

        def fake_run_preview(renderer, text, **kwargs):
            calls.append((renderer, text, kwargs))

        monkeypatch.setattr(preview, "run_preview", fake_run_preview)

        assert preview_cli.main(["--text", "take on me", "--mode", "glow", "--line", "--loops", "2"]) == 0

        renderer, text, kwargs = calls[0]
        assert renderer.mode == RenderMode.GLOW
        assert text == "take on me"
        assert kwargs["line_mode"] is True
        assert kwargs["loops"] == 2

    def test_missing_config(self, tmp_path: Path, capsys):
        assert preview_cli.main(["--text", "x", "--config", str(tmp_path / "nope.yaml")]) == 1
        assert "does not exist" in capsys.readouterr().err

    def test_bad_word_duration(self):
        assert preview_cli.main(["--text", "x", "--word-duration", "0"]) == 1

    def test_malformed_config(self, tmp_path: Path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("lyric: 5\n")
        assert preview_cli.main(["--text", "x", "--config", str(path)]) == 1
        assert "must be a mapping" in capsys.readouterr().err
