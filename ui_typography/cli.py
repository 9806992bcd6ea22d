"""Command-line interface for the typography helpers.

WHY: Copywriters and build scripts need to run text through the
non-breaking space pass without writing Python, and designers want to
check what a Figma text style turns into. The CLI exposes both core
operations behind one command.

HOW: argparse with two subcommands. ``prepare`` reads a file or stdin and
writes the prepared text (or escaped HTML) to a file or stdout.
``style`` builds StyleProps from flags and prints the TextStyle as JSON,
or the paragraph CSS with --css. Status messages go to stderr.

RULES:
- python -m ui_typography prepare input.txt -o output.txt
- cat input.txt | python -m ui_typography prepare -
- python -m ui_typography style --family Inter --weight 600 --size 16 --line-height 24
- Exit codes: 0 = success, 1 = error
- Payload goes to stdout, status and errors to stderr
- Files and stdin are read without newline translation ("\\r" stays "\\r")
- The dictionary comes from config.resolve_words(); flags override env
"""

from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from typing import Any, List, Optional

from ui_typography import __version__
from ui_typography.config import LOG_LEVEL, resolve_log_level, resolve_words
from ui_typography.css import attrs_to_css, to_inline_style
from ui_typography.markup import render_text
from ui_typography.style import (
    StyleProps,
    paragraph_attrs,
    style_to_dict,
    text_style_from_figma,
)
from ui_typography.text import prepare_string, prepared_text

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _parse_weight(raw: str) -> Any:
    """Numeric weights become ints, anything else ("bold") stays a string."""
    return int(raw) if raw.isdigit() else raw


def _read_stdin() -> str:
    """Read stdin as UTF-8 without newline translation.

    A lone "\\r" must reach prepare_string() unchanged, so the binary
    buffer is re-wrapped with newline="" and detached afterwards to leave
    sys.stdin open.
    """
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin.read()
    wrapper = io.TextIOWrapper(buffer, encoding="utf-8", newline="")
    try:
        return wrapper.read()
    finally:
        wrapper.detach()


def _run_prepare(args: argparse.Namespace) -> None:
    words = resolve_words(args.words_file, args.extra_word)

    if args.input == "-":
        raw = _read_stdin()
    else:
        with open(args.input, "r", encoding="utf-8", newline="") as f:
            raw = f.read()

    if args.html:
        result = prepared_text(raw, render_text, words)
    else:
        result = prepare_string(raw, words)
    logger.debug("Prepared %d chars using %d dictionary words", len(raw), len(words))

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            f.write(result)
        _status("Wrote prepared text to {}".format(args.output))
    else:
        sys.stdout.write(result)


def _run_style(args: argparse.Namespace) -> None:
    props = StyleProps(
        font_family=args.family,
        font_weight=_parse_weight(args.weight),
        font_size_px=args.size,
        line_height_px=args.line_height,
        letter_spacing_percent=args.letter_spacing,
        region=args.region,
    )
    style = text_style_from_figma(props)

    if args.css:
        print(to_inline_style(attrs_to_css(paragraph_attrs(style))))
    else:
        print(json.dumps(style_to_dict(style), ensure_ascii=False, indent=2))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="ui-typography",
        description="Insert non-breaking spaces into UI copy and derive "
                    "text styles from Figma measurements.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s {}".format(__version__),
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    prepare = subparsers.add_parser(
        "prepare",
        help="Glue short words to the next word with non-breaking spaces.",
    )
    prepare.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input text file, or '-' for stdin (default: %(default)s).",
    )
    prepare.add_argument(
        "-o", "--output",
        default=None,
        help="Output file (default: stdout).",
    )
    prepare.add_argument(
        "--words-file",
        default=None,
        help="Words file replacing the built-in dictionary (one token per line).",
    )
    prepare.add_argument(
        "--extra-word",
        action="append",
        default=None,
        help="Token to add to the dictionary. Can be specified multiple times.",
    )
    prepare.add_argument(
        "--html",
        action="store_true",
        help="Write an escaped HTML text node instead of plain text.",
    )
    prepare.set_defaults(func=_run_prepare)

    style = subparsers.add_parser(
        "style",
        help="Convert Figma text measurements into style attributes.",
    )
    style.add_argument(
        "--family",
        action="append",
        required=True,
        help="Font family name, in fallback order. Repeat for fallbacks.",
    )
    style.add_argument("--weight", default="400", help="Font weight (default: %(default)s).")
    style.add_argument("--size", type=int, required=True, help="Font size in px.")
    style.add_argument("--line-height", type=int, required=True, help="Line height in px.")
    style.add_argument(
        "--letter-spacing",
        type=float,
        default=0.0,
        help="Letter spacing in percent of the font size (default: %(default)s).",
    )
    style.add_argument("--region", default=None, help="Semantic region tag, e.g. h1.")
    style.add_argument(
        "--css",
        action="store_true",
        help="Print the paragraph's inline CSS instead of JSON.",
    )
    style.set_defaults(func=_run_style)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else resolve_log_level(LOG_LEVEL),
            format="%(levelname)s %(name)s: %(message)s",
        )
        args.func(args)
    except (OSError, ValueError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
