"""
LRC Colorizer preview CLI - Animate a lyric line in each render mode
"""
import argparse
import logging
import sys
from pathlib import Path


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Preview synchronized lyric colors in the terminal'
    )
    parser.add_argument('--text', type=str, required=True,
                        help='Lyric line to animate')
    parser.add_argument('--mode', type=str,
                        help='Render mode: simple, smooth, wave or glow (default: from config, else smooth)')
    parser.add_argument('--word-duration', type=float, default=0.4,
                        help='Seconds per word (default: 0.4)')
    parser.add_argument('--line', action='store_true',
                        help='Preview line-level rendering instead of word-level')
    parser.add_argument('--loops', type=int, default=1,
                        help='How many times to play the line (default: 1)')
    parser.add_argument('--refresh-rate', type=float, default=None,
                        help='Display refresh rate in seconds (default: 0.05)')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colors')
    parser.add_argument('--config', type=Path,
                        help='Path to config.yaml')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.word_duration <= 0:
        print("Error: --word-duration must be positive", file=sys.stderr)
        return 1

    if args.config and not args.config.exists():
        print(f"Error: config file {args.config} does not exist", file=sys.stderr)
        return 1

    from .config import Config
    from .preview import run_preview
    from .renderer import LyricRenderer

    try:
        config = Config(args.config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # CLI args override the config file
    if args.mode:
        config.lyric.render_mode = args.mode
    if args.refresh_rate:
        config.lyric.refresh_rate = args.refresh_rate
    if args.no_color:
        config.lyric.colors_enabled = False

    renderer = LyricRenderer.from_config(config)

    print(f"Mode: {renderer.mode.value}{' (line)' if args.line else ''}")
    print(f"Press Ctrl+C to exit")

    run_preview(
        renderer,
        args.text,
        word_duration=args.word_duration,
        line_mode=args.line,
        loops=max(1, args.loops),
        refresh_rate=config.lyric.refresh_rate,
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
