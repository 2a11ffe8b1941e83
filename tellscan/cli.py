"""
CLI entry point — ``tellscan analyze|score|json|patterns|help``.

Usage:
    tellscan analyze post.txt
    tellscan score "This serves as a testament to innovation"
    cat article.md | tellscan json
"""

from __future__ import annotations

import argparse
import os
import select
import sys
from pathlib import Path
from typing import Optional

from tellscan import __version__
from tellscan.catalog import CATALOG_VERSION, describe_catalog
from tellscan.config import settings
from tellscan.detector import analyze_text
from tellscan.logging import get_logger, setup_logging
from tellscan.reporters import format_analysis, format_json, format_score

logger = get_logger("cli")

USAGE = """\
tellscan - Detect AI writing patterns

USAGE:
  tellscan analyze <file|text>    Detailed pattern analysis
  tellscan score <file|text>      Quick AI-ness score (0-100)
  tellscan json <file|text>       JSON output for scripting
  tellscan patterns               List the pattern catalog
  echo "text" | tellscan analyze  Read from stdin

OPTIONS:
  -v, --verbose                   Debug logging on stderr
  --version                       Print version and exit

EXAMPLES:
  tellscan analyze post.txt
  tellscan score "This serves as a testament to innovation"
  cat article.md | tellscan json

Based on Wikipedia's "Signs of AI writing" guide."""

SHORT_USAGE = (
    "Usage: tellscan <analyze|score|json> <file|text>\n"
    '       echo "text" | tellscan analyze'
)

HELP_COMMANDS = ("help", "-h", "--help")

COMMAND_ALIASES = {
    "analyze": "analyze", "a": "analyze",
    "score": "score", "s": "score",
    "json": "json", "j": "json",
    "patterns": "patterns", "p": "patterns",
}

RENDERERS = {
    "analyze": format_analysis,
    "score": format_score,
    "json": format_json,
}


class InputError(Exception):
    """No usable input: missing, blank, or unreadable."""


# ============================================================
# INPUT
# ============================================================

def read_stdin(timeout: float) -> str:
    """
    Read all of stdin, waiting at most ``timeout`` seconds for data to appear.

    An interactive terminal counts as no input.
    """
    stream = sys.stdin
    if stream is None or stream.isatty():
        return ""
    try:
        ready, _, _ = select.select([stream], [], [], timeout)
    except (OSError, ValueError):
        # Not selectable (Windows pipes, in-memory streams): read without a deadline.
        return stream.read()
    return stream.read() if ready else ""


def resolve_input(arg: str, timeout: float) -> tuple[str, str]:
    """
    Resolve the run's text and where it came from.

    An existing path is read as UTF-8, other non-empty arguments are
    literal text, and an empty argument falls back to stdin.

    Raises:
        InputError: path unreadable, or nothing on stdin.
    """
    if arg and os.path.exists(arg):
        try:
            return Path(arg).read_text(encoding="utf-8"), "file"
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f"Error: Cannot read {arg}: {exc}") from exc

    if arg:
        return arg, "argument"

    text = read_stdin(timeout)
    if not text:
        raise InputError(SHORT_USAGE)
    return text, "stdin"


# ============================================================
# COMMANDS
# ============================================================

def format_patterns() -> str:
    """Format the catalog as a table."""
    catalog = describe_catalog()
    lines = [
        f"Pattern catalog v{CATALOG_VERSION} ({len(catalog)} categories)",
        "",
        f"{'Key':<24} {'Name':<26} {'Weight':>6} {'Rules':>5}",
        "-" * 64,
    ]
    for c in catalog:
        lines.append(
            f"{c['key']:<24} {c['name']:<26} {c['weight']:>6} {c['rule_count']:>5}"
        )
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Help is handled as a command, not by argparse."""
    parser = argparse.ArgumentParser(
        prog="tellscan",
        description="Detect AI writing patterns.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", dest="show_help")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging on stderr")
    parser.add_argument("--version", action="store_true",
                        help="Print version and exit")
    parser.add_argument("command", nargs="?", default="analyze")
    parser.add_argument("words", nargs=argparse.REMAINDER)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = _build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else None, stream=sys.stderr)

    if args.version:
        print(f"tellscan {__version__}")
        return 0

    if args.show_help or args.command in HELP_COMMANDS:
        print(USAGE)
        return 0

    command = COMMAND_ALIASES.get(args.command)
    if command == "patterns":
        print(format_patterns())
        return 0

    if command is None:
        # Not a verb: everything on the command line is the input
        command = "analyze"
        raw = " ".join([args.command, *args.words])
    else:
        raw = " ".join(args.words)

    try:
        text, source = resolve_input(raw, settings.STDIN_TIMEOUT)
        if not text.strip():
            raise InputError("Error: No text provided")
    except InputError as exc:
        logger.debug("Input rejected", extra={"command": command, "error": str(exc)})
        print(str(exc), file=sys.stderr)
        return 1

    report = analyze_text(
        text,
        context_chars=settings.CONTEXT_CHARS,
        multiplier=settings.DENSITY_MULTIPLIER,
    )
    logger.info(
        f"{command}: score={report.score} from {source}",
        extra={"command": command, "source": source, "score": report.score},
    )

    renderer = RENDERERS[command]
    if command == "analyze":
        print(renderer(report, max_examples=settings.MAX_EXAMPLES))
    else:
        print(renderer(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
