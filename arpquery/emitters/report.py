"""Column-aligned text report, in the layout 'arp -a' prints."""

from typing import List

from ..defaults import (
    DEFAULT_COLUMN_WIDTH,
    HEADER_INTERNET_ADDRESS,
    HEADER_PHYSICAL_ADDRESS,
    HEADER_TYPE,
    REPORT_INDENT,
)
from ..model.table import ArpTable, Entry, Interface
from ..util import format_hex_index


def _pad(text: str, width: int) -> str:
    """Left-align text in a column; always leave at least one space after it."""
    return text + " " * max(width - len(text), 1)


def _column_header(column_width: int) -> str:
    return (REPORT_INDENT
            + _pad(HEADER_INTERNET_ADDRESS, column_width)
            + _pad(HEADER_PHYSICAL_ADDRESS, column_width)
            + HEADER_TYPE)


def _entry_line(entry: Entry, column_width: int) -> str:
    return (REPORT_INDENT
            + _pad(entry.network_address, column_width)
            + _pad(entry.physical_address, column_width)
            + str(entry.address_type))


def _interface_lines(iface: Interface, column_width: int) -> List[str]:
    lines = [
        f"Interface: {iface.gateway} --- {format_hex_index(iface.index)}",
        _column_header(column_width),
    ]
    lines.extend(_entry_line(e, column_width) for e in iface.entries)
    lines.append("")
    return lines


def render(table: ArpTable, column_width: int = DEFAULT_COLUMN_WIDTH) -> str:
    """Render the table as text, one block per interface."""
    if column_width < 1:
        raise ValueError(f"column_width must be positive, got {column_width}")
    lines: List[str] = []
    for iface in table:
        lines.extend(_interface_lines(iface, column_width))
    return "".join(line + "\n" for line in lines)
