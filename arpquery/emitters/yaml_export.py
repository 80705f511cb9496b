"""YAML snapshot of a parsed ARP table."""

import datetime
from typing import Optional

import yaml

from ..model.table import ArpTable
from ..util import ArpParseError

YAML_HEADER = """\
# arpquery ARP table snapshot
# {metadata_line}
"""


def emit_yaml_string(table: ArpTable, source: Optional[str] = None) -> str:
    """Serialize the table to YAML, interfaces and entries in source order."""
    metadata = {
        "generated_at": datetime.datetime.now().isoformat(timespec="seconds"),
        "interface_count": len(table),
        "entry_count": table.entry_count(),
    }
    if source:
        metadata["source"] = source

    metadata_line = f"Generated: {metadata['generated_at']}"
    if source:
        metadata_line += f" from {source}"

    data = {"metadata": metadata}
    data.update(table.to_dict())

    yaml_body = yaml.dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=120,
    )
    return YAML_HEADER.format(metadata_line=metadata_line) + yaml_body


def load_yaml(yaml_text: str) -> ArpTable:
    """Load a table written by emit_yaml_string."""
    try:
        data = yaml.safe_load(yaml_text)
    except yaml.YAMLError as e:
        raise ArpParseError(f"Invalid YAML snapshot: {e}") from e
    if data is None:
        return ArpTable()
    if not isinstance(data, dict):
        raise ArpParseError("YAML snapshot must be a mapping")
    try:
        return ArpTable.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ArpParseError(f"Malformed YAML snapshot: {e}") from e
