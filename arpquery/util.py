"""Error types, hex helpers, and logging setup."""

import logging
import re
from typing import Optional


HEX_LITERAL_RE = re.compile(r'^0[xX][0-9a-fA-F]+$')
BARE_HEX_RE = re.compile(r'^[0-9a-fA-F]+$')


class ArpQueryError(Exception):
    """Base class for every error raised by arpquery."""


class ArpParseError(ArpQueryError):
    """Raised for unrecoverable ARP output parsing errors."""

    def __init__(self, message: str, line_num: int = 0):
        self.line_num = line_num
        super().__init__(f"Line {line_num}: {message}" if line_num else message)


class GrammarViolation(ArpParseError):
    """Raised when a token shows up where the ARP grammar does not allow it."""

    def __init__(self, message: str, token_text: str, token_type: Optional[str] = None,
                 line_num: int = 0):
        self.token_text = token_text
        self.token_type = token_type
        detail = f'{message} "{token_text}"'
        if token_type:
            detail += f" ({token_type})"
        super().__init__(detail, line_num)


class CommandError(ArpQueryError):
    """Raised when the ARP command cannot be run or exits non-zero."""

    def __init__(self, message: str, command: str = "", returncode: Optional[int] = None):
        self.command = command
        self.returncode = returncode
        super().__init__(message)


class ConfigError(ArpQueryError):
    """Raised for invalid settings files or values."""


def is_hex_literal(text: str) -> bool:
    """True for a 0x-prefixed hexadecimal literal such as '0x1a'."""
    return bool(HEX_LITERAL_RE.match(text))


def parse_hex_index(text: str) -> int:
    """Convert an interface index literal to an int.

    Accepts prefixed ('0x1a') or bare ('1a') hex digits.

    Example: parse_hex_index('0xb') -> 11
    """
    if not (is_hex_literal(text) or BARE_HEX_RE.match(text)):
        raise ValueError(f"not a hexadecimal literal: {text!r}")
    return int(text, 16)


def format_hex_index(index: int) -> str:
    """Format an interface index the way 'arp -a' prints it, e.g. 11 -> '0xb'."""
    return f"0x{index:x}"


def setup_logging(verbose: bool = False):
    """Configure logging for the command-line tool."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
