#!/usr/bin/env python3
"""
Slide Deck CLI

Command-line interface for compiling markdown into PDF slide decks.

Usage:
    slidedeck build talk.md -o talk.pdf --config deck.json
    slidedeck build talk.md --title "My Talk" --aspect-ratio 4-3
    slidedeck -v outline talk.md
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from config.constants import SUPPORTED_EXTENSIONS
from config.logging_config import LOGGER_NAME, setup_logger
from config.settings import Settings
from deckcore.compiler import DeckCompiler
from deckcore.contracts import DeckError
from deckcore.layout import DeckAgent, DeckConfig, load_deck_config
from deckcore.reader import read_markdown_file

logger = logging.getLogger("deckcore.cli")


def check_source(path: str) -> Optional[Path]:
    """Resolve the input file; None if it does not exist"""
    source = Path(path)
    if not source.is_file():
        logger.error(f"File not found: {source}")
        return None
    if source.suffix.lower() not in SUPPORTED_EXTENSIONS:
        logger.warning(f"Unexpected extension {source.suffix!r}, reading {source.name} as markdown")
    return source


def load_config(args, settings: Settings) -> DeckConfig:
    """Deck configuration from --config plus command-line overrides"""
    if args.config:
        config = load_deck_config(args.config)
    else:
        config = DeckConfig.from_dict({"aspect_ratio": settings.default_aspect_ratio})
    return config.with_overrides(
        title=args.title,
        subtitle=args.subtitle,
        author=args.author,
        institute=args.institute,
        date=args.date,
        aspect_ratio=args.aspect_ratio,
    )


def cmd_build(args, settings: Settings) -> int:
    """Compile and render a deck"""
    source = check_source(args.input)
    if source is None:
        return 1

    config = load_config(args, settings)
    output = Path(args.output) if args.output else settings.output_dir / f"{source.stem}.pdf"

    agent = DeckAgent(config, warn_dropped_content=settings.warn_dropped_content)
    result = agent.process(source, output)

    print(f"[OK] {result.output_path} ({result.page_count.total} pages)")
    return 0


def cmd_outline(args, settings: Settings) -> int:
    """Print the compiled deck as JSON"""
    source = check_source(args.input)
    if source is None:
        return 1

    compiler = DeckCompiler(warn_dropped_content=settings.warn_dropped_content)
    deck = compiler.compile_deck(read_markdown_file(source))

    print(json.dumps(deck.to_dict(), indent=args.indent, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slidedeck",
        description="Compile markdown into a paginated PDF slide deck",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug messages")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")

    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Render a deck to PDF")
    build.add_argument("input", help="Markdown source")
    build.add_argument("-o", "--output", help="Output PDF (default: <output_dir>/<name>.pdf)")
    build.add_argument("-c", "--config", help="Deck configuration JSON file")
    build.add_argument("--title")
    build.add_argument("--subtitle")
    build.add_argument("--author")
    build.add_argument("--institute")
    build.add_argument("--date")
    build.add_argument("--aspect-ratio", choices=["16-9", "4-3"])
    build.set_defaults(func=cmd_build)

    outline = subparsers.add_parser("outline", help="Print compiled slides as JSON")
    outline.add_argument("input", help="Markdown source")
    outline.add_argument("--indent", type=int, default=2)
    outline.set_defaults(func=cmd_outline)

    return parser


def console_level(args) -> str:
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "WARNING"
    return "INFO"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_dotenv()
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Invalid SLIDEDECK_* settings: {e}", file=sys.stderr)
        return 1
    settings.ensure_dirs()
    setup_logger(
        LOGGER_NAME,
        level="DEBUG" if args.verbose else settings.log_level,
        log_file=settings.log_file,
        console_level=console_level(args),
    )

    try:
        return args.func(args, settings)
    except DeckError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
