"""CLI entry point and orchestration logic."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .command import run_arp_command
from .config import Settings, load_settings
from .defaults import OUTPUT_FORMATS
from .emitters.report import render
from .emitters.yaml_export import emit_yaml_string
from .parser.grammar import parse
from .parser.tokenizer import tokenize
from .util import ArpQueryError, ConfigError, GrammarViolation, setup_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="arpquery",
        description="Parse 'arp -a' output into a structured ARP table and print it.",
    )
    p.add_argument(
        "input", nargs="?", default=None,
        help="File with captured 'arp -a' output ('-' for stdin). "
             "If omitted, the ARP command is run.",
    )
    p.add_argument("-c", "--config", type=Path, default=None, help="YAML settings file")
    p.add_argument("--column-width", type=int, default=None,
                   help="Report column width (default: 22)")
    p.add_argument("-f", "--format", choices=OUTPUT_FORMATS, default=None,
                   help="Output format (default: text)")
    p.add_argument("-o", "--output", type=Path, default=None,
                   help="Write output here instead of stdout")
    p.add_argument("--command", default=None,
                   help="ARP command to run when no input is given (default: 'arp -a')")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    p.add_argument("--version", action="version", version=f"arpquery {__version__}")
    return p


def _resolve_settings(args: argparse.Namespace) -> Settings:
    """Load the settings file, then apply command-line overrides."""
    settings = load_settings(args.config)
    if args.column_width is not None:
        settings.column_width = args.column_width
    if args.format is not None:
        settings.output_format = args.format
    if args.command is not None:
        settings.command = args.command.split()
    settings.validate()
    return settings


def _read_input(source: Optional[str], settings: Settings) -> str:
    if source is None:
        return run_arp_command(settings.command, settings.command_timeout)
    if source == "-":
        log.info("Reading ARP output from stdin")
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise ConfigError(f"Input file not found: {path}")
    log.info(f"Reading ARP output: {path}")
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ConfigError(f"Cannot read input file {path}: {e}") from e


def run(args: argparse.Namespace) -> str:
    """Read, parse, and format according to args. Returns the output text."""
    settings = _resolve_settings(args)
    raw_text = _read_input(args.input, settings)

    tokens = tokenize(raw_text)
    log.debug(f"Tokenized {len(tokens)} tokens")

    table = parse(tokens)
    log.info(f"Parsed {len(table)} interface(s) with {table.entry_count()} entries")

    if settings.output_format == "yaml":
        return emit_yaml_string(table, source=args.input or " ".join(settings.command))
    return render(table, column_width=settings.column_width)


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        output = run(args)
    except GrammarViolation as e:
        log.error(f"Parser failed: {e}")
        sys.exit(1)
    except ArpQueryError as e:
        log.error(str(e))
        sys.exit(1)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output, encoding="utf-8")
        log.info(f"Output written to: {args.output}")
    else:
        sys.stdout.write(output)
