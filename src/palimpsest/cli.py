"""
CLI entry point for the interactive erosion window.

Usage:
    palimpsest [options]
"""

import argparse
import sys
from pathlib import Path

from palimpsest.config import ErosionConfig
from palimpsest.paragraph import PARAGRAPH, load_paragraph


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palimpsest",
        description="A paragraph that erodes as you type",
    )

    # Window
    parser.add_argument("--width", type=int, default=1280, help="Window width (default: 1280)")
    parser.add_argument("--height", type=int, default=800, help="Window height (default: 800)")

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

    parser.add_argument(
        "--no-input", action="store_true",
        help="Open without a text field (the paragraph never erodes)",
    )

    return parser


def main():
    args = build_parser().parse_args()

    if args.max_length <= 0:
        print(f"Error: --max-length must be positive, got {args.max_length}", file=sys.stderr)
        sys.exit(1)

    paragraph = PARAGRAPH
    if args.paragraph is not None:
        if not args.paragraph.exists():
            print(f"Error: Paragraph file not found: {args.paragraph}", file=sys.stderr)
            sys.exit(1)
        try:
            paragraph = load_paragraph(args.paragraph)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    config = ErosionConfig(font_name=args.font, max_length=args.max_length)

    from palimpsest.app import ErosionApp

    app = ErosionApp(
        width=args.width,
        height=args.height,
        paragraph=paragraph,
        config=config,
        seed=args.seed,
        with_input=not args.no_input,
    )
    app.run()


if __name__ == "__main__":
    main()
