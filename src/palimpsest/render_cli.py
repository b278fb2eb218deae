"""
CLI entry point for headless erosion renders.

Replays a typing session and writes the final frame as a PNG or every
frame as an MP4.

Usage:
    palimpsest-render <typed_text_file> [options]
    palimpsest-render --lengths 0 120 400 0 -o out.png
"""

import argparse
import itertools
import sys
import time
from pathlib import Path

from palimpsest.config import PROFILES, ErosionConfig
from palimpsest.encoder import encode_video, ffmpeg_available
from palimpsest.paragraph import PARAGRAPH, load_paragraph
from palimpsest.replay import hold, replay, typing_lengths
from palimpsest.session import ErosionSession
from palimpsest.surfaces import PillowSurface


def _progress_bar(current: int, total: int, width: int = 35):
    """Print a progress bar to stdout."""
    pct = current / max(total, 1) * 100
    filled = int(width * current / max(total, 1))
    bar = "#" * filled + "-" * (width - filled)
    if sys.stdout.isatty():
        sys.stdout.write(f"\r[{bar}] {pct:5.1f}%  frame {current}/{total}")
        sys.stdout.flush()
        if current >= total:
            sys.stdout.write("\n")
    else:
        if current % max(1, total // 20) == 0 or current >= total:
            print(f"{pct:5.1f}%  frame {current}/{total}", flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palimpsest-render",
        description="Render an eroding paragraph from a replayed typing session",
    )

    parser.add_argument(
        "typed",
        type=Path,
        nargs="?",
        default=None,
        help="Text file replayed one keystroke at a time",
    )
    parser.add_argument(
        "--lengths", type=int, nargs="+", default=None,
        help="Explicit input lengths, in order (instead of a typed file)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("palimpsest.png"),
        help="Output path; .png saves the final frame, .mp4 every frame (default: palimpsest.png)",
    )

    # Resolution & Profile
    parser.add_argument(
        "-p", "--profile", type=str, default="low",
        choices=sorted(PROFILES),
        help="Target profile (low: 720p, medium: 1080p, high: 4k; all 30fps)",
    )
    parser.add_argument("--width", type=int, default=None, help="Frame width (overrides profile)")
    parser.add_argument("--height", type=int, default=None, help="Frame height (overrides profile)")
    parser.add_argument("-f", "--fps", type=int, default=None, help="Frames per second (overrides profile)")

    # Content
    parser.add_argument(
        "--paragraph", type=Path, default=None,
        help="Text file with one rendered line per line (default: built-in paragraph)",
    )
    parser.add_argument("--font", type=str, default="Georgia", help="Font name (default: Georgia)")
    parser.add_argument(
        "--max-length", type=int, default=400,
        help="Typed characters that reach full chaos (default: 400)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    # Replay
    parser.add_argument(
        "--chars-per-frame", type=int, default=1,
        help="Keystrokes between rendered frames (default: 1)",
    )
    parser.add_argument(
        "--backspace", type=int, default=0,
        help="Characters deleted after typing (default: 0)",
    )
    parser.add_argument(
        "--hold", type=float, default=1.0,
        help="Seconds to hold the last frame in video output (default: 1.0)",
    )

    # Quality
    parser.add_argument(
        "-q", "--quality", type=str, default="medium",
        choices=["high", "medium", "fast"],
        help="Encoding quality (default: medium)",
    )

    return parser


def main():
    parser = build_parser()
    args = parser.parse_args()

    if args.typed is None and args.lengths is None:
        parser.error("give a typed text file or --lengths")

    if args.typed is not None and not args.typed.exists():
        print(f"Error: Typed text file not found: {args.typed}", file=sys.stderr)
        sys.exit(1)

    if args.paragraph is not None and not args.paragraph.exists():
        print(f"Error: Paragraph file not found: {args.paragraph}", file=sys.stderr)
        sys.exit(1)

    if args.max_length <= 0:
        print(f"Error: --max-length must be positive, got {args.max_length}", file=sys.stderr)
        sys.exit(1)

    suffix = args.output.suffix.lower()
    if suffix not in (".png", ".mp4"):
        print(f"Error: Unsupported output type: {args.output.suffix}", file=sys.stderr)
        sys.exit(1)

    if suffix == ".mp4" and not ffmpeg_available():
        print("Error: ffmpeg not found on PATH", file=sys.stderr)
        sys.exit(1)

    profile = PROFILES[args.profile]
    width = args.width or profile.width
    height = args.height or profile.height
    fps = args.fps or profile.fps

    paragraph = PARAGRAPH
    if args.paragraph is not None:
        try:
            paragraph = load_paragraph(args.paragraph)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    config = ErosionConfig(font_name=args.font, max_length=args.max_length)

    if args.lengths is not None:
        lengths = args.lengths
    else:
        typed = args.typed.read_text(encoding="utf-8")
        lengths = typing_lengths(
            len(typed),
            chars_per_frame=args.chars_per_frame,
            backspace=args.backspace,
        )

    surface = PillowSurface(width, height, font_name=config.font_name)
    session = ErosionSession(surface, paragraph, config, seed=args.seed)

    print(f"Rendering {len(lengths)} frames at {width}x{height}")
    t0 = time.time()

    if suffix == ".png":
        for _ in replay(session, lengths, progress_callback=_progress_bar):
            pass
        surface.save(args.output)
    else:
        hold_count = int(args.hold * fps)
        # Progress comes from the encoder, which also sees the held frames
        encode_video(
            frame_iterator=itertools.chain(
                replay(session, lengths),
                hold(surface, hold_count),
            ),
            output_path=args.output,
            width=width,
            height=height,
            fps=fps,
            quality=args.quality,
            total_frames=len(lengths) + hold_count,
            progress_callback=_progress_bar,
        )

    elapsed = time.time() - t0
    print(f"\nDone! chaos {session.chaos_level:.2f}, max chaos {session.max_chaos:.2f}")
    print(f"  Eroded: {session.eroded_fraction() * 100:.1f}% of letters")
    print(f"  Took {elapsed:.1f}s")
    print(f"  Output: {args.output}")


if __name__ == "__main__":
    main()
