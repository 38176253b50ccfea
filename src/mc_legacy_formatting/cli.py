"""CLI entry point for the fixture dumper."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from mc_legacy_formatting.config import (
    CONFIG_FILE,
    HISTORY_FILE,
    AppConfig,
    ensure_config_dir,
    load_config,
)
from mc_legacy_formatting.errors import FormattingError
from mc_legacy_formatting.fixtures import dump_fixture, unquote
from mc_legacy_formatting.formatting import format_plain

log = logging.getLogger(__name__)

PROMPT = "Input string (enclosed in quotes): "


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mc-legacy-fixture",
        description="Convert a string with Minecraft format codes into span fixtures",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="String to parse, optionally enclosed in quotes (prompts if omitted)",
    )
    parser.add_argument(
        "-s",
        "--start-char",
        help="Character that introduces format codes (default: from config, or §)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        default=False,
        help="Print the visible text instead of span fixtures",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=CONFIG_FILE,
        help="Path to the config file (default: ~/.config/mc-legacy-formatting/config.toml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    return parser


def resolve_start_char(start_char_arg: str | None, config: AppConfig) -> str:
    """Resolve the start character from the CLI flag or the config.

    Raises:
        ValueError: If the flag is not exactly one character.
    """
    if start_char_arg is None:
        return config.start_char
    if len(start_char_arg) != 1:
        msg = f"--start-char must be a single character, got {start_char_arg!r}"
        raise ValueError(msg)
    return start_char_arg


def prompt_for_text() -> str:
    """Prompt for the input string, keeping a history of past entries."""
    ensure_config_dir()
    session: PromptSession[str] = PromptSession(history=FileHistory(str(HISTORY_FILE)))
    return session.prompt(PROMPT)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        start_char = resolve_start_char(args.start_char, config)
    except (FormattingError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.text is not None:
        raw = args.text
    else:
        try:
            raw = prompt_for_text()
        except (EOFError, KeyboardInterrupt):
            sys.exit(1)

    text = unquote(raw)
    log.debug("Parsing %r with start char %r", text, start_char)

    if args.plain:
        print(
            format_plain(
                text,
                start_char=start_char,
                collapse_strikethrough=config.collapse_strikethrough,
            )
        )
    else:
        print(dump_fixture(text, start_char=start_char))
